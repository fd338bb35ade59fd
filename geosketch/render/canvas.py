"""Pygame painter for the diagram canvas: grid, lines, drag preview, points."""
from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import pygame

from geosketch.config import EditorConfig
from geosketch.geometry import line_label_anchor

Color = Tuple[int, int, int]


class CanvasRenderer:
    """
    Draw-only view of a DiagramEditor.

    It reads points, lines, selection, toggles and the drag state; it never
    mutates the editor. Callers decide when to paint (see
    DiagramEditor.consume_dirty).
    """

    def __init__(self, cfg: Optional[EditorConfig] = None) -> None:
        self.cfg = cfg or EditorConfig()
        self.bg: Color = (255, 255, 255)
        self.grid_color: Color = (248, 250, 252)
        self.line_color: Color = (100, 116, 139)
        self.line_label_color: Color = (148, 163, 184)
        self.accent: Color = (79, 70, 229)          # selection
        self.preview_color: Color = (199, 210, 254)
        self.point_color: Color = (129, 140, 248)
        self.point_outline: Color = (255, 255, 255)
        self.point_label_color: Color = (30, 41, 59)
        self.hint_color: Color = (148, 163, 184)
        self.line_width = 3
        self.selected_line_width = 5
        self.point_radius = 5
        self.selected_point_radius = 6
        self.halo_radius = 10
        self.halo_alpha = 51  # 0.2 opacity
        self.dash_on = 5
        self.dash_off = 5
        self.font: Optional[pygame.font.Font] = None
        self.hint_font: Optional[pygame.font.Font] = None
        self.halo_cache: Dict[Tuple[int, Color], pygame.Surface] = {}
        self.frames_drawn = 0

    # ------------------------------------------------------------

    def _ensure_fonts(self) -> None:
        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.SysFont("consolas", 12, bold=True)
            self.hint_font = pygame.font.SysFont("consolas", 12, bold=True)

    def _get_halo_sprite(self, radius: int, color: Color) -> pygame.Surface:
        key = (radius, color)
        cached = self.halo_cache.get(key)
        if cached is not None:
            return cached
        size = radius * 2 + 2
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surf, (*color, self.halo_alpha), (size // 2, size // 2), radius)
        self.halo_cache[key] = surf
        return surf

    def _blit_centered(self, surface: pygame.Surface, text: str, color: Color, center) -> None:
        if not text:
            return
        assert self.font is not None
        img = self.font.render(text, True, color)
        rect = img.get_rect()
        rect.center = (int(round(center[0])), int(round(center[1])))
        surface.blit(img, rect)

    # ------------------------------------------------------------

    def draw(self, surface: pygame.Surface, editor) -> None:
        self._ensure_fonts()
        surface.fill(self.bg)
        self.draw_grid(surface)
        self.draw_lines(surface, editor)
        self.draw_preview(surface, editor)
        self.draw_points(surface, editor)
        if not editor.points and editor.drag_start is None:
            self.draw_empty_hint(surface)
        self.frames_drawn += 1

    def draw_grid(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        step = max(1, int(self.cfg.grid_size))
        for x in range(0, width, step):
            pygame.draw.line(surface, self.grid_color, (x, 0), (x, height))
        for y in range(0, height, step):
            pygame.draw.line(surface, self.grid_color, (0, y), (width, y))

    def draw_lines(self, surface: pygame.Surface, editor) -> None:
        by_id = {}
        for p in editor.points:
            by_id.setdefault(p.id, p)
        sel = editor.selection
        for line in editor.lines:
            p1 = by_id.get(line.p1_id)
            p2 = by_id.get(line.p2_id)
            if p1 is None or p2 is None:
                continue
            selected = sel is not None and sel.is_line(line.id)
            color = self.accent if selected else self.line_color
            width = self.selected_line_width if selected else self.line_width
            a = (int(round(p1.x)), int(round(p1.y)))
            b = (int(round(p2.x)), int(round(p2.y)))
            pygame.draw.line(surface, color, a, b, width)
            # round caps
            pygame.draw.circle(surface, color, a, width // 2)
            pygame.draw.circle(surface, color, b, width // 2)

            if editor.show_line_labels:
                anchor = line_label_anchor(p1.x, p1.y, p2.x, p2.y, self.cfg.line_label_offset)
                label_color = self.accent if selected else self.line_label_color
                self._blit_centered(surface, line.label, label_color, anchor)

    def draw_preview(self, surface: pygame.Surface, editor) -> None:
        if not editor.is_dragging():
            return
        start = editor.drag_start
        end = editor.pointer_pos
        self.draw_dashed_line(surface, self.preview_color, start, end)

    def draw_dashed_line(self, surface: pygame.Surface, color: Color, start, end, width: int = 1) -> None:
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = math.hypot(dx, dy)
        if length == 0:
            return
        ux, uy = dx / length, dy / length
        period = self.dash_on + self.dash_off
        pos = 0.0
        while pos < length:
            seg_end = min(pos + self.dash_on, length)
            a = (start[0] + ux * pos, start[1] + uy * pos)
            b = (start[0] + ux * seg_end, start[1] + uy * seg_end)
            pygame.draw.line(surface, color, a, b, width)
            pos += period

    def draw_points(self, surface: pygame.Surface, editor) -> None:
        sel = editor.selection
        lx, ly = self.cfg.point_label_offset
        for point in editor.points:
            selected = sel is not None and sel.is_point(point.id)
            center = (int(round(point.x)), int(round(point.y)))
            if editor.show_points:
                if selected:
                    halo = self._get_halo_sprite(self.halo_radius, self.accent)
                    surface.blit(halo, halo.get_rect(center=center))
                radius = self.selected_point_radius if selected else self.point_radius
                fill = self.accent if selected else self.point_color
                pygame.draw.circle(surface, fill, center, radius)
                pygame.draw.circle(surface, self.point_outline, center, radius, 2)
            if editor.show_point_labels:
                label_color = self.accent if selected else self.point_label_color
                self._blit_centered(surface, point.label, label_color, (point.x + lx, point.y + ly))

    def draw_empty_hint(self, surface: pygame.Surface) -> None:
        assert self.hint_font is not None
        img = self.hint_font.render(self.cfg.empty_hint, True, self.hint_color)
        surface.blit(img, img.get_rect(center=surface.get_rect().center))
