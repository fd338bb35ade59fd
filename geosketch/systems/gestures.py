from __future__ import annotations

import logging
from typing import Optional, Tuple

from geosketch.config import EditorConfig
from geosketch.geometry import distance
from geosketch.state.entities import Point
from geosketch.state.history import HistoryManager
from geosketch.state.scene_model import SceneModel
from geosketch.systems.hit_test import find_line, find_point
from geosketch.systems.labels import line_label, point_label
from geosketch.systems.selection import SelectionController

Vec2 = Tuple[float, float]

GESTURE_NONE = "none"
GESTURE_TAP = "tap"
GESTURE_DRAG = "drag"


logger = logging.getLogger(__name__)


class GestureClassifier:
    """
    Tap-vs-drag state machine that drives every scene mutation.

    Idle -> Pressed on pointer-down; Pressed -> Idle on pointer-up (resolve
    a tap or a drag) or pointer-leave (cancel, nothing changes).

    - Tap on a point selects it; else tap on a line selects it; else a new
      point is created at the press position and selected.
    - Drag reuses or creates a point at each end and connects them with a
      new line unless one already joins them. The whole drag shares one
      snapshot so a single undo reverts it.
    """

    def __init__(
        self,
        scene: SceneModel,
        history: HistoryManager,
        selection: SelectionController,
        cfg: Optional[EditorConfig] = None,
    ) -> None:
        self.scene = scene
        self.history = history
        self.selection = selection
        self.cfg = cfg or EditorConfig()
        # interaction state, not part of the undoable scene
        self.drag_start: Optional[Vec2] = None
        self.pointer_pos: Vec2 = (0, 0)

    # ------------------------------------------------------------
    # State queries

    @property
    def pressed(self) -> bool:
        return self.drag_start is not None

    def drag_distance(self) -> float:
        if self.drag_start is None:
            return 0.0
        return distance(*self.drag_start, *self.pointer_pos)

    def is_dragging(self) -> bool:
        """Pressed and already past the click threshold (drives the preview)."""
        return self.pressed and self.drag_distance() >= self.cfg.click_threshold

    # ------------------------------------------------------------
    # Pointer hooks

    def pointer_down(self, pos: Vec2) -> None:
        self.drag_start = pos
        self.pointer_pos = pos

    def pointer_move(self, pos: Vec2) -> None:
        self.pointer_pos = pos

    def pointer_leave(self) -> None:
        self.drag_start = None

    def pointer_up(self, pos: Vec2) -> str:
        """Resolve the gesture; returns which kind was applied."""
        start = self.drag_start
        if start is None:
            return GESTURE_NONE
        try:
            dist = distance(*start, *pos)
            if dist < self.cfg.click_threshold:
                self._resolve_tap(start)
                return GESTURE_TAP
            self._resolve_drag(start, pos)
            return GESTURE_DRAG
        finally:
            self.drag_start = None

    # ------------------------------------------------------------
    # Resolution

    def _find_point(self, pos: Vec2) -> Optional[Point]:
        return find_point(self.scene.points, pos[0], pos[1], self.cfg.point_hit_radius)

    def _resolve_tap(self, pos: Vec2) -> None:
        hit = self._find_point(pos)
        if hit is not None:
            self.selection.select_point(hit.id)
            return
        line = find_line(
            self.scene.points, self.scene.lines, pos[0], pos[1], self.cfg.line_hit_tolerance
        )
        if line is not None:
            self.selection.select_line(line.id)
            return
        self.history.push(self.scene.snapshot())
        point = self.scene.add_point(pos, point_label(len(self.scene.points)))
        self.selection.select_point(point.id)

    def _resolve_endpoint(self, pos: Vec2) -> Point:
        hit = self._find_point(pos)
        if hit is not None:
            return hit
        return self.scene.add_point(pos, point_label(len(self.scene.points)))

    def _resolve_drag(self, start: Vec2, end: Vec2) -> None:
        self.history.push(self.scene.snapshot())
        p_start = self._resolve_endpoint(start)
        p_end = self._resolve_endpoint(end)
        if p_start.id == p_end.id:
            logger.debug("Drag collapsed onto point %s; no line", p_start.label)
            return
        line = self.scene.add_line(p_start.id, p_end.id, line_label(len(self.scene.lines)))
        if line is not None:
            self.selection.select_line(line.id)
