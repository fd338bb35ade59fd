"""Pygame window hosting the toolbar and the drawing canvas."""
from __future__ import annotations

import logging

import pygame

from geosketch.config import EditorConfig


logger = logging.getLogger(__name__)


class EditorWindow:
    """
    Owns the display surface. The canvas sits under the toolbar; its width
    follows the window and its height stays at cfg.canvas_height.
    """

    def __init__(self, cfg: EditorConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.width = cfg.view_width
        self.height = cfg.view_height
        self.surface_flags = pygame.RESIZABLE
        try:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        except pygame.error:
            pygame.quit()
            raise
        self.fullscreen = False
        pygame.display.set_caption(cfg.window_title)
        self.font = pygame.font.SysFont("consolas", 14, bold=True)  # toolbar
        self.small_font = pygame.font.SysFont("consolas", 12)
        self.bg = (248, 250, 252)
        self.fg = (15, 23, 42)
        self.dim = (100, 116, 139)
        self.muted = (203, 213, 225)
        self.accent = (79, 70, 229)
        self.danger = (239, 68, 68)

    @property
    def surface(self) -> pygame.Surface:
        return self.display

    def toolbar_rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, self.width, self.cfg.toolbar_height)

    def canvas_rect(self) -> pygame.Rect:
        return pygame.Rect(0, self.cfg.toolbar_height, self.width, self.cfg.canvas_height)

    def handle_resize(self, w: int, h: int) -> None:
        # only the width is negotiable
        self.width = max(1, int(w))
        self.height = self.cfg.view_height
        if not self.fullscreen:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        logger.debug("Window resized to %dx%d", self.width, self.height)

    def toggle_fullscreen(self) -> None:
        flags = self.display.get_flags()
        if flags & pygame.FULLSCREEN:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True
            self.width = self.display.get_width()

    def present(self) -> None:
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
