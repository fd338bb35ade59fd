from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from geosketch.geometry import snap_to_grid

Vec2 = Tuple[float, float]

POINTER_DOWN = "down"
POINTER_MOVE = "move"
POINTER_UP = "up"
POINTER_LEAVE = "leave"

SOURCE_MOUSE = "mouse"
SOURCE_TOUCH = "touch"


@dataclass
class PointerEvent:
    """
    Device pointer event in window coordinates, normalized from mouse or
    touch input.

    - kind:     down | move | up | leave
    - source:   mouse | touch
    - client:   raw (x, y) for mouse-like events, None when unknown
    - touches:  active touch points, first one wins; empty on touch release
    """
    kind: str
    source: str = SOURCE_MOUSE
    client: Optional[Vec2] = None
    touches: List[Vec2] = field(default_factory=list)


class CoordinateMapper:
    """Window coordinates -> surface-local coordinates, optionally grid-snapped."""

    def __init__(self, grid_size: float = 25, snap: bool = True) -> None:
        self.grid_size = grid_size
        self.snap = snap
        self.last_pos: Vec2 = (0, 0)

    def _raw_position(self, event: PointerEvent) -> Optional[Vec2]:
        if event.source == SOURCE_TOUCH:
            if event.touches:
                return event.touches[0]
            return None
        return event.client

    def to_surface(self, event: PointerEvent, rect) -> Vec2:
        """
        Map event into the surface whose on-screen rect is `rect` (anything
        with left/top). Events with no position (a touch release) resolve
        to the last position produced.
        """
        raw = self._raw_position(event)
        if raw is None:
            return self.last_pos
        x = raw[0] - rect.left
        y = raw[1] - rect.top
        if self.snap:
            x, y = snap_to_grid(x, y, self.grid_size)
        self.last_pos = (x, y)
        return self.last_pos
