# manager.py
from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from geosketch.config import EditorConfig

from .base import Scene


logger = logging.getLogger(__name__)


class SceneManager:
    def __init__(self, cfg: EditorConfig, renderer) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.scene_stack: List[Scene] = []

    # ------------------------------------------------------------------ #
    # Stack operations

    def set_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    # ------------------------------------------------------------------ #

    def run(self) -> None:
        """Drive the top scene until the stack is empty."""
        while self.scene_stack:
            self._run_live_scene(self.scene_stack[-1])

    def _dispatch(self, scene: Scene, event) -> bool:
        """Handle one event; returns False when the app should stop."""
        renderer = self.renderer
        if event.type == pygame.QUIT:
            self.set_scene(None)
            return False

        # Window resize: only the width follows the window
        if event.type == pygame.VIDEORESIZE:
            renderer.handle_resize(event.w, event.h)
            scene.handle_resize(renderer.width, renderer.height, self)
            return True

        # Global fullscreen toggle
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            renderer.toggle_fullscreen()
            scene.handle_resize(renderer.width, renderer.height, self)
            return True

        scene.handle_event(event, self)
        return True

    def _run_live_scene(self, scene: Scene) -> None:
        renderer = self.renderer
        clock = pygame.time.Clock()

        scene.enter(self)
        try:
            # Drive events/update/render until the scene stack changes or
            # the app is quit.
            while self.scene_stack and self.scene_stack[-1] is scene:
                dt = clock.tick(self.cfg.fps)

                for event in pygame.event.get():
                    if not self._dispatch(scene, event):
                        return

                scene.update(dt, self)
                scene.render(renderer, self)
        finally:
            scene.exit(self)
