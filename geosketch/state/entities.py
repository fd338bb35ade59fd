# geosketch/state/entities.py
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

Pos = Tuple[float, float]

KIND_POINT = "point"
KIND_LINE = "line"


def new_entity_id() -> str:
    """Opaque 9-character id, unique for the lifetime of a session."""
    return uuid.uuid4().hex[:9]


@dataclass(frozen=True)
class Point:
    """A labeled vertex in surface-local coordinates.

    Frozen: renaming replaces the record in the scene instead of mutating
    it, so snapshots never alias live state.
    """
    id: str
    x: float
    y: float
    label: str

    @property
    def pos(self) -> Pos:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    """An undirected segment between two point ids."""
    id: str
    p1_id: str
    p2_id: str
    label: str

    def connects(self, a: str, b: str) -> bool:
        return (self.p1_id == a and self.p2_id == b) or (self.p1_id == b and self.p2_id == a)


@dataclass(frozen=True)
class Selection:
    id: str
    kind: str  # KIND_POINT | KIND_LINE

    def is_point(self, entity_id: Optional[str] = None) -> bool:
        return self.kind == KIND_POINT and (entity_id is None or self.id == entity_id)

    def is_line(self, entity_id: Optional[str] = None) -> bool:
        return self.kind == KIND_LINE and (entity_id is None or self.id == entity_id)
