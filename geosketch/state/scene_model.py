from __future__ import annotations

import logging
from dataclasses import dataclass, replace as dc_replace
from typing import Callable, Iterable, List, Optional, Tuple

from .entities import KIND_LINE, KIND_POINT, Line, Point, Pos, new_entity_id


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneSnapshot:
    """Immutable value copy of a scene, taken right before a mutation."""
    points: Tuple[Point, ...] = ()
    lines: Tuple[Line, ...] = ()


class SceneModel:
    """
    The mutable diagram: points and lines in insertion order.

    Insertion order matters: hit-test tie-breaks and label sequencing both
    read it. The model refuses self-loops and a second line over the same
    unordered pair of points; everything else (including rename text and
    referential integrity of replaced state) is taken as given.
    """

    def __init__(
        self,
        points: Optional[Iterable[Point]] = None,
        lines: Optional[Iterable[Line]] = None,
        id_factory: Callable[[], str] = new_entity_id,
    ) -> None:
        self.points: List[Point] = list(points or [])
        self.lines: List[Line] = list(lines or [])
        self.id_factory = id_factory

    # ------------------------------------------------------------
    # Queries

    def point_by_id(self, point_id: str) -> Optional[Point]:
        for p in self.points:
            if p.id == point_id:
                return p
        return None

    def line_by_id(self, line_id: str) -> Optional[Line]:
        for ln in self.lines:
            if ln.id == line_id:
                return ln
        return None

    def has_line_between(self, a: str, b: str) -> bool:
        return any(ln.connects(a, b) for ln in self.lines)

    def is_empty(self) -> bool:
        return not self.points and not self.lines

    # ------------------------------------------------------------
    # Mutations

    def add_point(self, pos: Pos, label: str) -> Point:
        point = Point(id=self.id_factory(), x=pos[0], y=pos[1], label=label)
        self.points.append(point)
        logger.debug("Added point %s %s at (%s, %s)", point.id, label, point.x, point.y)
        return point

    def add_line(self, p1: str, p2: str, label: str) -> Optional[Line]:
        """Connect two point ids; returns None when refused."""
        if p1 == p2:
            return None
        if self.has_line_between(p1, p2):
            return None
        line = Line(id=self.id_factory(), p1_id=p1, p2_id=p2, label=label)
        self.lines.append(line)
        logger.debug("Added line %s %s (%s-%s)", line.id, label, p1, p2)
        return line

    def clear(self) -> None:
        self.points = []
        self.lines = []

    def replace(self, points: Iterable[Point], lines: Iterable[Line]) -> None:
        # no referential validation: lines may name points that are not here
        self.points = list(points)
        self.lines = list(lines)

    def rename_entity(self, entity_id: str, kind: str, new_label: str) -> bool:
        if kind == KIND_POINT:
            for i, p in enumerate(self.points):
                if p.id == entity_id:
                    self.points[i] = dc_replace(p, label=new_label)
                    return True
        elif kind == KIND_LINE:
            for i, ln in enumerate(self.lines):
                if ln.id == entity_id:
                    self.lines[i] = dc_replace(ln, label=new_label)
                    return True
        return False

    # ------------------------------------------------------------
    # Value copies

    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(points=tuple(self.points), lines=tuple(self.lines))

    def restore(self, snapshot: SceneSnapshot) -> None:
        self.points = list(snapshot.points)
        self.lines = list(snapshot.lines)
