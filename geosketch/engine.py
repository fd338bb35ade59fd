from __future__ import annotations

"""
Engine entry point: owns the window, the editor and the scene loop.

The window is opened in run() and released on every exit path, including
exceptions raised while building the scene or from inside the loop.
"""

import logging
from typing import Optional

from geosketch.config import EditorConfig
from geosketch.editor import DiagramEditor
from geosketch.render.window import EditorWindow
from geosketch.scenes import EditorScene, SceneManager


logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: EditorConfig, editor: Optional[DiagramEditor] = None) -> None:
        self.cfg = cfg
        self.editor = editor or DiagramEditor(cfg)
        self.renderer: Optional[EditorWindow] = None
        self.manager: Optional[SceneManager] = None

    def run(self) -> None:
        self.renderer = EditorWindow(self.cfg)
        try:
            self.manager = SceneManager(self.cfg, self.renderer)
            self.manager.set_scene(EditorScene(self.editor))
            logger.info("Editor running at %dx%d", self.renderer.width, self.renderer.height)
            self.manager.run()
        finally:
            self.renderer.teardown()
            logger.info("Editor closed")
