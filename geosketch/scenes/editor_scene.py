from __future__ import annotations

import logging
from typing import Optional

import pygame

from geosketch.editor import DiagramEditor
from geosketch.render.canvas import CanvasRenderer
from geosketch.ui.widgets import Toolbar, WidgetContext

from .base import Scene
from .editor_input import CMD_BACKSPACE, CMD_TEXT, EditorInput


logger = logging.getLogger(__name__)


class EditorScene(Scene):
    """
    Interactive diagram editor:
    - Click empty canvas: add a point (snapped to the grid) and select it
    - Click a point / line: select it; type to rename, Backspace to erase
    - Drag: connect two points (reusing existing ones) with a new line
    - Ctrl+Z: undo | Ctrl+Backspace: clear | F1/F2/F3: toggle points,
      point labels, line labels | Esc: deselect

    The canvas is only repainted when the editor reports itself dirty or
    the toolbar changed.
    """

    def __init__(self, editor: DiagramEditor, editor_input: Optional[EditorInput] = None) -> None:
        self.editor = editor
        self.input = editor_input or EditorInput()
        self.canvas_renderer = CanvasRenderer(editor.cfg)
        self.toolbar = Toolbar(editor)
        self.canvas_surface: Optional[pygame.Surface] = None
        self._chrome_dirty = True

    # ------------------------------------------------------------
    # Lifecycle

    def enter(self, manager) -> None:
        self._sync_layout(manager.renderer)
        pygame.key.start_text_input()
        logger.debug("Editor scene entered")

    def exit(self, manager) -> None:
        pygame.key.stop_text_input()
        self.canvas_surface = None
        logger.debug("Editor scene exited")

    def _sync_layout(self, renderer) -> None:
        rect = renderer.canvas_rect()
        self.editor.set_surface_rect(rect)
        if self.canvas_surface is None or self.canvas_surface.get_size() != rect.size:
            self.canvas_surface = pygame.Surface(rect.size)
            self.editor.mark_dirty()
        self.toolbar.rect = renderer.toolbar_rect()
        self._chrome_dirty = True

    def handle_resize(self, width: int, height: int, manager) -> None:
        self._sync_layout(manager.renderer)

    # ------------------------------------------------------------
    # Input

    def _ctx(self, renderer) -> WidgetContext:
        return WidgetContext(surface=renderer.surface, editor=self.editor, renderer=renderer)

    def handle_event(self, event, manager) -> None:
        renderer = manager.renderer
        editor = self.editor

        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if self.toolbar.rect.collidepoint(event.pos):
                self._chrome_dirty = True
            if self.toolbar.handle_event(event, self._ctx(renderer)):
                self._chrome_dirty = True
                return

        cmd = self.input.keyboard_command(event, editing=editor.selection is not None)
        if cmd is not None:
            self._apply_key_command(cmd.kind, cmd.text)
            self._chrome_dirty = True
            return

        pointer = self.input.pointer_event(event, editor.surface_rect, (renderer.width, renderer.height))
        if pointer is not None:
            was_undoable = editor.can_undo
            had_selection = editor.selection is not None
            editor.handle_pointer(pointer)
            if editor.can_undo != was_undoable or (editor.selection is not None) != had_selection:
                self._chrome_dirty = True

    def _apply_key_command(self, kind: str, text: Optional[str]) -> None:
        editor = self.editor
        if kind == "undo":
            editor.undo()
        elif kind == "clear":
            editor.clear()
        elif kind == "toggle_points":
            editor.toggle_points()
        elif kind == "toggle_point_labels":
            editor.toggle_point_labels()
        elif kind == "toggle_line_labels":
            editor.toggle_line_labels()
        elif kind == "deselect":
            editor.deselect()
        elif kind == CMD_TEXT:
            editor.rename_selected(editor.selected_label + (text or ""))
        elif kind == CMD_BACKSPACE:
            editor.rename_selected(editor.selected_label[:-1])

    # ------------------------------------------------------------
    # Drawing

    def render(self, renderer, manager) -> bool:
        canvas_dirty = self.editor.consume_dirty()
        if not canvas_dirty and not self._chrome_dirty:
            return False
        if self.canvas_surface is None:
            self._sync_layout(renderer)
            assert self.canvas_surface is not None

        if canvas_dirty:
            self.canvas_renderer.draw(self.canvas_surface, self.editor)
        # toolbar mirrors selection/undo state, so it follows canvas repaints too
        ctx = self._ctx(renderer)
        self.toolbar.layout(ctx)
        self.toolbar.draw(ctx)
        renderer.surface.blit(self.canvas_surface, self.editor.surface_rect.topleft)
        renderer.present()
        self._chrome_dirty = False
        return True
