"""Pygame scenes: the live loop manager and the diagram editor scene."""

from .base import Scene
from .editor_scene import EditorScene
from .manager import SceneManager

__all__ = ["Scene", "EditorScene", "SceneManager"]
