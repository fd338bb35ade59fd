from __future__ import annotations

from typing import List, Optional

from .scene_model import SceneSnapshot


class HistoryManager:
    """Unbounded undo stack of scene snapshots."""

    def __init__(self) -> None:
        self._stack: List[SceneSnapshot] = []

    def push(self, snapshot: SceneSnapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Optional[SceneSnapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)
