from __future__ import annotations

import logging
from typing import Optional

from geosketch.state.entities import KIND_LINE, KIND_POINT, Selection
from geosketch.state.scene_model import SceneModel


logger = logging.getLogger(__name__)


class SelectionController:
    """
    Single active selection plus live label editing.

    Renames write straight into the scene on every input event and never
    push a snapshot; they are only undone together with the entity's
    creation.
    """

    def __init__(self) -> None:
        self.selection: Optional[Selection] = None

    def select(self, entity_id: str, kind: str) -> None:
        self.selection = Selection(id=entity_id, kind=kind)

    def select_point(self, point_id: str) -> None:
        self.select(point_id, KIND_POINT)

    def select_line(self, line_id: str) -> None:
        self.select(line_id, KIND_LINE)

    def deselect(self) -> None:
        self.selection = None

    def current_label(self, scene: SceneModel) -> str:
        sel = self.selection
        if sel is None:
            return ""
        if sel.kind == KIND_POINT:
            entity = scene.point_by_id(sel.id)
        else:
            entity = scene.line_by_id(sel.id)
        return entity.label if entity is not None else ""

    def rename(self, scene: SceneModel, new_label: str) -> bool:
        """Set the selected entity's label; no uniqueness or emptiness check."""
        sel = self.selection
        if sel is None:
            return False
        renamed = scene.rename_entity(sel.id, sel.kind, new_label)
        if renamed:
            logger.debug("Renamed %s %s to %r", sel.kind, sel.id, new_label)
        return renamed
