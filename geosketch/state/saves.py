"""Host load/save hook: diagrams to and from plain dicts and JSON files."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from geosketch.errors import DiagramFormatError
from geosketch.state.entities import Line, Point

SCHEMA_VERSION = 1


logger = logging.getLogger(__name__)


def diagram_to_dict(points: List[Point], lines: List[Line]) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "points": [{"id": p.id, "x": p.x, "y": p.y, "label": p.label} for p in points],
        "lines": [
            {"id": ln.id, "p1_id": ln.p1_id, "p2_id": ln.p2_id, "label": ln.label} for ln in lines
        ],
    }


def _point_from_dict(raw: Any) -> Point:
    try:
        return Point(id=str(raw["id"]), x=float(raw["x"]), y=float(raw["y"]), label=str(raw["label"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise DiagramFormatError(f"Bad point entry: {raw!r}") from exc


def _line_from_dict(raw: Any) -> Line:
    try:
        return Line(
            id=str(raw["id"]), p1_id=str(raw["p1_id"]), p2_id=str(raw["p2_id"]), label=str(raw["label"])
        )
    except (KeyError, TypeError) as exc:
        raise DiagramFormatError(f"Bad line entry: {raw!r}") from exc


def diagram_from_dict(data: Any) -> Tuple[List[Point], List[Line]]:
    """
    Parse a saved diagram. Only the structure is checked; lines naming
    points that are not in the file are passed through untouched.
    """
    if not isinstance(data, dict):
        raise DiagramFormatError("Diagram must be a mapping")
    version = data.get("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise DiagramFormatError(f"Unsupported diagram schema version {version!r}")
    raw_points = data.get("points", [])
    raw_lines = data.get("lines", [])
    if not isinstance(raw_points, list) or not isinstance(raw_lines, list):
        raise DiagramFormatError("'points' and 'lines' must be lists")
    return [_point_from_dict(p) for p in raw_points], [_line_from_dict(ln) for ln in raw_lines]


def save_diagram(path: Union[str, Path], points: List[Point], lines: List[Line]) -> None:
    path = Path(path)
    path.write_text(json.dumps(diagram_to_dict(points, lines), indent=2), encoding="utf-8")
    logger.info("Saved diagram to %s", path)


def load_diagram(path: Union[str, Path]) -> Tuple[List[Point], List[Line]]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DiagramFormatError(f"{path}: not valid JSON ({exc})") from exc
    points, lines = diagram_from_dict(data)
    logger.info("Loaded diagram from %s", path)
    return points, lines
