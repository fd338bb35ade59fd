from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from geosketch.errors import ConfigError


logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    # geometry / gesture tuning (surface units)
    grid_size: int = 25
    click_threshold: float = 5.0    # below this a press/release pair is a tap
    point_hit_radius: float = 15.0
    line_hit_tolerance: float = 8.0
    line_label_offset: float = 18.0  # along the line's normal
    point_label_offset: Tuple[int, int] = (14, -14)
    grid_snap: bool = True           # not exposed as a UI toggle
    # window
    view_width: int = 960
    canvas_height: int = 400         # height is fixed, width follows the window
    toolbar_height: int = 56
    fps: int = 60
    # initial visibility toggles
    show_points: bool = True
    show_point_labels: bool = True
    show_line_labels: bool = True
    log_level: str = "INFO"
    window_title: str = "Geosketch"
    empty_hint: str = field(default="Click to add points or drag to draw lines")

    @property
    def view_height(self) -> int:
        return self.toolbar_height + self.canvas_height


# settings that divide, size a window or bound a hit test
POSITIVE_SETTINGS = (
    "grid_size",
    "click_threshold",
    "point_hit_radius",
    "line_hit_tolerance",
    "view_width",
    "canvas_height",
    "toolbar_height",
    "fps",
)


def _coerce(name: str, default: Any, value: Any) -> Any:
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{name}: expected true/false, got {value!r}")
        return value
    if isinstance(default, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != len(default):
            raise ConfigError(f"{name}: expected a list of {len(default)} numbers, got {value!r}")
        return tuple(type(d)(v) for d, v in zip(default, value))
    try:
        return type(default)(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name}: cannot use {value!r}") from exc


def config_from_dict(data: Dict[str, Any]) -> EditorConfig:
    """Build a config from a mapping, starting from the defaults."""
    cfg = EditorConfig()
    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    for name, value in data.items():
        value = _coerce(name, getattr(cfg, name), value)
        if name in POSITIVE_SETTINGS and value <= 0:
            raise ConfigError(f"{name}: must be greater than zero, got {value!r}")
        setattr(cfg, name, value)
    return cfg


def load_config(path: Optional[Union[str, pathlib.Path]] = None) -> EditorConfig:
    """
    Load an EditorConfig from a YAML file.

    A missing path (or None) gives the defaults; a present but malformed
    file raises ConfigError.
    """
    if path is None:
        return EditorConfig()
    path = pathlib.Path(path)
    if not path.exists():
        logger.info("No config at %s, using defaults", path)
        return EditorConfig()
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    cfg = config_from_dict(data)
    logger.info("Loaded config from %s", path)
    return cfg
