from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from geosketch.state.entities import Line, Point

# Bump when a command kind changes meaning or payload.
COMMAND_API_VERSION = 1

CMD_CLEAR = "clear"
CMD_LOAD_STATE = "load_state"
CMD_SET_STATE = "set_state"
CMD_UNDO = "undo"
CMD_RENAME = "rename"

COMMAND_KINDS = (CMD_CLEAR, CMD_LOAD_STATE, CMD_SET_STATE, CMD_UNDO, CMD_RENAME)


@dataclass(frozen=True)
class EditorCommand:
    """
    Logical command sent by the host to the editor.

    - clear:       snapshot, then empty the scene
    - load_state:  install points/lines as a fresh baseline (history wiped)
    - set_state:   install points/lines as an undoable mutation
    - undo:        revert the last mutation
    - rename:      relabel the current selection with `label`
    """
    kind: str
    points: Optional[Sequence[Point]] = None
    lines: Optional[Sequence[Line]] = None
    label: Optional[str] = None
    version: int = COMMAND_API_VERSION


def clear_command() -> EditorCommand:
    return EditorCommand(CMD_CLEAR)


def undo_command() -> EditorCommand:
    return EditorCommand(CMD_UNDO)


def load_state_command(points: Sequence[Point], lines: Sequence[Line]) -> EditorCommand:
    return EditorCommand(CMD_LOAD_STATE, points=tuple(points), lines=tuple(lines))


def set_state_command(points: Sequence[Point], lines: Sequence[Line]) -> EditorCommand:
    return EditorCommand(CMD_SET_STATE, points=tuple(points), lines=tuple(lines))


def rename_command(label: str) -> EditorCommand:
    return EditorCommand(CMD_RENAME, label=label)
