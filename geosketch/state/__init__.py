"""Diagram state: entities, the scene model and its undo history."""

from .entities import KIND_LINE, KIND_POINT, Line, Point, Selection, new_entity_id
from .history import HistoryManager
from .scene_model import SceneModel, SceneSnapshot

__all__ = [
    "KIND_LINE",
    "KIND_POINT",
    "Line",
    "Point",
    "Selection",
    "new_entity_id",
    "HistoryManager",
    "SceneModel",
    "SceneSnapshot",
]
