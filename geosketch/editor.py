from __future__ import annotations

"""
Headless diagram editor: owns the scene, its history, the selection and the
gesture state machine, and exposes the host command surface.

Nothing here touches a display. Scenes feed it PointerEvents and read it
back when painting; tests drive it directly.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

import pygame

from geosketch.commands import (
    CMD_CLEAR,
    CMD_LOAD_STATE,
    CMD_RENAME,
    CMD_SET_STATE,
    CMD_UNDO,
    COMMAND_API_VERSION,
    EditorCommand,
)
from geosketch.config import EditorConfig
from geosketch.errors import CommandError
from geosketch.state.entities import Line, Point, Selection, new_entity_id
from geosketch.state.history import HistoryManager
from geosketch.state.scene_model import SceneModel
from geosketch.systems.coords import (
    POINTER_DOWN,
    POINTER_LEAVE,
    POINTER_MOVE,
    POINTER_UP,
    CoordinateMapper,
    PointerEvent,
)
from geosketch.systems.gestures import GestureClassifier
from geosketch.systems.selection import SelectionController

Vec2 = Tuple[float, float]


logger = logging.getLogger(__name__)


class DiagramEditor:
    def __init__(
        self,
        cfg: Optional[EditorConfig] = None,
        *,
        points: Optional[Iterable[Point]] = None,
        lines: Optional[Iterable[Line]] = None,
        id_factory: Callable[[], str] = new_entity_id,
    ) -> None:
        self.cfg = cfg or EditorConfig()
        self.scene = SceneModel(points, lines, id_factory=id_factory)
        self.history = HistoryManager()
        self.selector = SelectionController()
        self.mapper = CoordinateMapper(self.cfg.grid_size, self.cfg.grid_snap)
        self.gestures = GestureClassifier(self.scene, self.history, self.selector, self.cfg)

        # On-screen rect of the drawing surface; width follows the window.
        self.surface_rect = pygame.Rect(0, 0, self.cfg.view_width, self.cfg.canvas_height)

        self.show_points = self.cfg.show_points
        self.show_point_labels = self.cfg.show_point_labels
        self.show_line_labels = self.cfg.show_line_labels

        # Set by anything that changes what the canvas would paint.
        self.dirty = True

    # ------------------------------------------------------------
    # Read-only view for renderers / host UI

    @property
    def points(self) -> List[Point]:
        return self.scene.points

    @property
    def lines(self) -> List[Line]:
        return self.scene.lines

    @property
    def selection(self) -> Optional[Selection]:
        return self.selector.selection

    @property
    def selected_label(self) -> str:
        return self.selector.current_label(self.scene)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def drag_start(self) -> Optional[Vec2]:
        return self.gestures.drag_start

    @property
    def pointer_pos(self) -> Vec2:
        return self.gestures.pointer_pos

    def is_dragging(self) -> bool:
        return self.gestures.is_dragging()

    # ------------------------------------------------------------
    # Dirty tracking

    def mark_dirty(self) -> None:
        self.dirty = True

    def consume_dirty(self) -> bool:
        """Return whether a repaint is due and reset the flag."""
        was_dirty = self.dirty
        self.dirty = False
        return was_dirty

    # ------------------------------------------------------------
    # Surface

    def set_surface_rect(self, rect: pygame.Rect) -> None:
        if rect != self.surface_rect:
            self.surface_rect = pygame.Rect(rect)
            self.mark_dirty()

    # ------------------------------------------------------------
    # Pointer input

    def handle_pointer(self, event: PointerEvent) -> None:
        if event.kind == POINTER_LEAVE:
            if self.gestures.pressed:
                self.gestures.pointer_leave()
                self.mark_dirty()
            return

        pos = self.mapper.to_surface(event, self.surface_rect)
        if event.kind == POINTER_DOWN:
            self.gestures.pointer_down(pos)
        elif event.kind == POINTER_MOVE:
            if pos == self.gestures.pointer_pos:
                return
            self.gestures.pointer_move(pos)
            if not self.gestures.pressed:
                # only the drag preview depends on the pointer
                return
        elif event.kind == POINTER_UP:
            kind = self.gestures.pointer_up(pos)
            logger.debug("Pointer up resolved as %s", kind)
        else:
            return
        self.mark_dirty()

    # ------------------------------------------------------------
    # Host command surface

    def clear(self) -> None:
        self.history.push(self.scene.snapshot())
        self.scene.clear()
        self.selector.deselect()
        self.gestures.pointer_leave()
        self.mark_dirty()
        logger.info("Cleared diagram")

    def load_state(self, points: Iterable[Point], lines: Iterable[Line]) -> None:
        """Install a host-provided diagram as the new baseline; nothing to undo into."""
        self.scene.replace(points, lines)
        self.history.clear()
        self.selector.deselect()
        self.mark_dirty()
        logger.info(
            "Loaded diagram (%d points, %d lines)", len(self.scene.points), len(self.scene.lines)
        )

    def set_state(self, points: Iterable[Point], lines: Iterable[Line]) -> None:
        """Replace the diagram as an ordinary, undoable mutation."""
        self.history.push(self.scene.snapshot())
        self.scene.replace(points, lines)
        self.selector.deselect()
        self.mark_dirty()

    def undo(self) -> bool:
        snapshot = self.history.pop()
        if snapshot is None:
            return False
        self.scene.restore(snapshot)
        self.selector.deselect()
        self.mark_dirty()
        logger.debug("Undo; %d snapshot(s) left", self.history.depth)
        return True

    def rename_selected(self, label: str) -> bool:
        renamed = self.selector.rename(self.scene, label)
        if renamed:
            self.mark_dirty()
        return renamed

    def deselect(self) -> None:
        if self.selector.selection is not None:
            self.selector.deselect()
            self.mark_dirty()

    def execute(self, command: EditorCommand) -> None:
        if command.version != COMMAND_API_VERSION:
            raise CommandError(
                f"Command API version {command.version} not supported (expected {COMMAND_API_VERSION})"
            )
        logger.info("Executing %s command", command.kind)
        if command.kind == CMD_CLEAR:
            self.clear()
        elif command.kind == CMD_UNDO:
            self.undo()
        elif command.kind == CMD_LOAD_STATE:
            self.load_state(command.points or (), command.lines or ())
        elif command.kind == CMD_SET_STATE:
            self.set_state(command.points or (), command.lines or ())
        elif command.kind == CMD_RENAME:
            self.rename_selected(command.label or "")
        else:
            raise CommandError(f"Unknown editor command: {command.kind!r}")

    # ------------------------------------------------------------
    # Visibility toggles

    def toggle_points(self) -> None:
        self.show_points = not self.show_points
        self.mark_dirty()

    def toggle_point_labels(self) -> None:
        self.show_point_labels = not self.show_point_labels
        self.mark_dirty()

    def toggle_line_labels(self) -> None:
        self.show_line_labels = not self.show_line_labels
        self.mark_dirty()
