from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from geosketch.systems.coords import (
    POINTER_DOWN,
    POINTER_LEAVE,
    POINTER_MOVE,
    POINTER_UP,
    SOURCE_MOUSE,
    SOURCE_TOUCH,
    PointerEvent,
)

MOD_MASK = pygame.KMOD_SHIFT | pygame.KMOD_CTRL | pygame.KMOD_ALT


def encode_keybinding(keycode: int, mods: int = 0) -> int:
    """
    Encode a key + modifiers into a single int so bindings can distinguish combos.
    """
    return int(keycode) | ((int(mods) & MOD_MASK) << 16)


def _normalize_mods(mods: int) -> int:
    # collapse left/right variants so KMOD_LCTRL matches a KMOD_CTRL binding
    out = 0
    for group in (pygame.KMOD_SHIFT, pygame.KMOD_CTRL, pygame.KMOD_ALT):
        if mods & group:
            out |= group
    return out


# Default keymap for editor commands.
DEFAULT_BINDINGS: Dict[str, List[int]] = {
    "undo": [encode_keybinding(pygame.K_z, pygame.KMOD_CTRL)],
    "clear": [encode_keybinding(pygame.K_BACKSPACE, pygame.KMOD_CTRL)],
    "toggle_points": [encode_keybinding(pygame.K_F1)],
    "toggle_point_labels": [encode_keybinding(pygame.K_F2)],
    "toggle_line_labels": [encode_keybinding(pygame.K_F3)],
    "deselect": [encode_keybinding(pygame.K_ESCAPE)],
}

CMD_TEXT = "text"
CMD_BACKSPACE = "backspace"


@dataclass
class EditorInputCommand:
    """Logical command produced from raw keyboard input."""
    kind: str
    text: Optional[str] = None
    raw_key: Optional[int] = None


class EditorInput:
    """
    Maps pygame events to PointerEvents (for the gesture engine) and to
    keyboard commands (undo, toggles, rename typing).

    It does not know about the editor; EditorScene decides what to do with
    the results.
    """

    def __init__(self, *, bindings: Optional[Dict[str, Iterable[int]]] = None) -> None:
        self.bindings: Dict[str, List[int]] = {k: list(v) for k, v in DEFAULT_BINDINGS.items()}
        if bindings:
            for k, vals in bindings.items():
                self.bindings[k] = list(vals)
        self._inside_canvas = False

    # ------------------------------------------------------------
    # Pointer normalization

    def pointer_event(
        self,
        event,
        canvas_rect: pygame.Rect,
        window_size: Tuple[int, int],
    ) -> Optional[PointerEvent]:
        """
        Convert a pygame event to a PointerEvent, or None when it is not a
        pointer event for the canvas.

        Mouse events pygame synthesizes from touches are dropped; the finger
        events carry the same gesture.
        """
        if getattr(event, "touch", False):
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not canvas_rect.collidepoint(event.pos):
                return None
            self._inside_canvas = True
            return PointerEvent(POINTER_DOWN, SOURCE_MOUSE, client=tuple(event.pos))

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if not self._inside_canvas:
                return None
            return PointerEvent(POINTER_UP, SOURCE_MOUSE, client=tuple(event.pos))

        if event.type == pygame.MOUSEMOTION:
            inside = canvas_rect.collidepoint(event.pos)
            was_inside = self._inside_canvas
            self._inside_canvas = inside
            if was_inside and not inside:
                return PointerEvent(POINTER_LEAVE, SOURCE_MOUSE)
            if not inside:
                return None
            return PointerEvent(POINTER_MOVE, SOURCE_MOUSE, client=tuple(event.pos))

        if event.type == pygame.WINDOWLEAVE:
            self._inside_canvas = False
            return PointerEvent(POINTER_LEAVE, SOURCE_MOUSE)

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            # finger coordinates are normalized to 0..1 of the window
            w, h = window_size
            touch = (event.x * w, event.y * h)
            if event.type == pygame.FINGERDOWN:
                if not canvas_rect.collidepoint(touch):
                    return None
                return PointerEvent(POINTER_DOWN, SOURCE_TOUCH, touches=[touch])
            if event.type == pygame.FINGERMOTION:
                return PointerEvent(POINTER_MOVE, SOURCE_TOUCH, touches=[touch])
            # released finger is no longer an active touch
            return PointerEvent(POINTER_UP, SOURCE_TOUCH)

        return None

    # ------------------------------------------------------------
    # Keyboard

    def command_for_key(self, key: int, mods: int) -> Optional[str]:
        code = encode_keybinding(key, _normalize_mods(mods))
        for name, codes in self.bindings.items():
            if code in codes:
                return name
        return None

    def keyboard_command(self, event, *, editing: bool) -> Optional[EditorInputCommand]:
        """
        Map KEYDOWN / TEXTINPUT. While `editing` (something is selected),
        text input and plain Backspace edit the selected label.
        """
        if event.type == pygame.TEXTINPUT:
            if editing and event.text:
                return EditorInputCommand(CMD_TEXT, text=event.text)
            return None
        if event.type != pygame.KEYDOWN:
            return None
        name = self.command_for_key(event.key, event.mod)
        if name is not None:
            return EditorInputCommand(name, raw_key=event.key)
        if editing and event.key == pygame.K_BACKSPACE:
            return EditorInputCommand(CMD_BACKSPACE, raw_key=event.key)
        return None
