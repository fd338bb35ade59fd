"""Plane geometry helpers shared by hit testing, snapping and rendering."""
from __future__ import annotations

import math
from typing import Optional, Tuple

Vec2 = Tuple[float, float]


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(bx - ax, by - ay)


def snap_to_grid(x: float, y: float, grid: float) -> Vec2:
    """Round each axis independently to the nearest multiple of grid."""
    # JS Math.round semantics: halves round up, not to even
    return (math.floor(x / grid + 0.5) * grid, math.floor(y / grid + 0.5) * grid)


def project_onto_segment(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> Optional[Vec2]:
    """
    Orthogonal projection of P onto segment p1-p2, clamped to the segment.

    Returns None for a zero-length segment.
    """
    dx, dy = x2 - x1, y2 - y1
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return None
    t = ((px - x1) * dx + (py - y1) * dy) / float(length_sq)
    t = max(0.0, min(1.0, t))
    return (x1 + t * dx, y1 + t * dy)


def line_label_anchor(x1: float, y1: float, x2: float, y2: float, offset: float) -> Vec2:
    """
    Where to put a line's label: the midpoint pushed `offset` along the
    normal (-dy, dx). Zero-length lines keep the label on the midpoint.
    """
    mid_x = (x1 + x2) / 2
    mid_y = (y1 + y2) / 2
    dx = x2 - x1
    dy = y2 - y1
    length = math.hypot(dx, dy) or 1.0
    nx = -dy / length
    ny = dx / length
    return (mid_x + nx * offset, mid_y + ny * offset)
