# geosketch/ui/widgets.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import pygame


@dataclass
class WidgetContext:
    """
    Lightweight context passed into widget methods.

    - surface:  the surface the widget should draw into
    - editor:   the DiagramEditor whose state the widget reflects
    - renderer: the active window (fonts and palette live there)
    """
    surface: pygame.Surface
    editor: object
    renderer: object


class Widget:
    """
    Minimal base class for UI widgets.

    Keeps a rect (for layout and hit-testing), optional children, and
    overridable layout / draw / handle_event hooks.
    """

    def __init__(self) -> None:
        self.rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.visible: bool = True
        self.enabled: bool = True
        self.children: List[Widget] = []

    def add_child(self, child: "Widget") -> None:
        self.children.append(child)

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        """
        Give this widget a chance to consume an event.
        Return True if the event is handled and should not propagate further.
        """
        # later-added children are treated as on top
        for child in reversed(self.children):
            if child.handle_event(event, ctx):
                return True
        return False


def _font(ctx: WidgetContext) -> pygame.font.Font:
    return getattr(ctx.renderer, "font", None) or getattr(ctx.renderer, "small_font")


class LabelWidget(Widget):
    def __init__(
        self,
        text: str,
        *,
        color: Optional[tuple[int, int, int]] = None,
        padding: int = 0,
    ) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.padding = padding

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self.text)
        self.rect.width = w + 2 * self.padding
        self.rect.height = h + 2 * self.padding
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        color = self.color or getattr(ctx.renderer, "dim", (120, 130, 150))
        text_surf = _font(ctx).render(self.text, True, color)
        ctx.surface.blit(text_surf, (self.rect.x + self.padding, self.rect.y + self.padding))
        super().draw(ctx)


class ButtonWidget(Widget):
    """
    Clickable toolbar button.

    is_active highlights toggles that are on; is_enabled greys out and
    ignores clicks (e.g. Undo with an empty history). Both are read from
    the editor every frame.
    """

    def __init__(
        self,
        text: str,
        *,
        on_click: Optional[Callable[["ButtonWidget"], None]] = None,
        is_active: Optional[Callable[[], bool]] = None,
        is_enabled: Optional[Callable[[], bool]] = None,
        danger: bool = False,
        padding_x: int = 12,
        padding_y: int = 6,
    ) -> None:
        super().__init__()
        self.text = text
        self.on_click = on_click
        self.is_active = is_active
        self.is_enabled = is_enabled
        self.danger = danger
        self.padding_x = padding_x
        self.padding_y = padding_y
        self.hovered = False
        self.pressed = False

    def _enabled_now(self) -> bool:
        if not self.enabled:
            return False
        return self.is_enabled() if self.is_enabled else True

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self.text)
        self.rect.width = w + 2 * self.padding_x
        self.rect.height = h + 2 * self.padding_y
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        r = ctx.renderer
        accent = getattr(r, "accent", (79, 70, 229))
        dim = getattr(r, "dim", (100, 116, 139))
        muted = getattr(r, "muted", (203, 213, 225))
        danger = getattr(r, "danger", (239, 68, 68))

        enabled = self._enabled_now()
        active = bool(self.is_active and self.is_active())
        if not enabled:
            bg_col, border_col, fg = (248, 250, 252), (241, 245, 249), muted
        elif active:
            bg_col, border_col, fg = (238, 242, 255), (199, 210, 254), accent
        else:
            bg_col, border_col, fg = (255, 255, 255), (226, 232, 240), dim
        if self.danger and enabled:
            fg = danger
        if enabled and (self.hovered or self.pressed):
            border_col = accent

        pygame.draw.rect(ctx.surface, bg_col, self.rect, border_radius=8)
        pygame.draw.rect(ctx.surface, border_col, self.rect, 2, border_radius=8)

        text_surf = _font(ctx).render(self.text, True, fg)
        ctx.surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))
        super().draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        if not (self.visible and self._enabled_now()):
            self.pressed = False
            return False

        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(event.pos):
                if self.on_click:
                    self.on_click(self)
                return True

        return super().handle_event(event, ctx)


class RenameFieldWidget(Widget):
    """
    Shows the selected entity's label as an editable field.

    Only visible while something is selected. Typing is routed by the
    scene (TEXTINPUT / Backspace) into DiagramEditor.rename_selected; this
    widget just mirrors the current label.
    """

    def __init__(self, *, caption: str = "Rename:", field_width: int = 72, padding: int = 6) -> None:
        super().__init__()
        self.caption = caption
        self.field_width = field_width
        self.padding = padding

    def layout(self, ctx: WidgetContext) -> None:
        font = _font(ctx)
        cw, h = font.size(self.caption)
        self.rect.width = cw + self.field_width + 3 * self.padding
        self.rect.height = h + 2 * self.padding
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        editor = ctx.editor
        self.visible = getattr(editor, "selection", None) is not None
        if not self.visible:
            return
        font = _font(ctx)
        accent = getattr(ctx.renderer, "accent", (79, 70, 229))
        caption_col = (129, 140, 248)
        pygame.draw.rect(ctx.surface, (255, 255, 255), self.rect, border_radius=8)
        pygame.draw.rect(ctx.surface, (224, 231, 255), self.rect, 1, border_radius=8)

        cap = font.render(self.caption, True, caption_col)
        ctx.surface.blit(cap, (self.rect.x + self.padding, self.rect.y + self.padding))

        text = getattr(editor, "selected_label", "")
        field_x = self.rect.x + 2 * self.padding + cap.get_width()
        if text:
            val = font.render(text, True, accent)
        else:
            val = font.render("...", True, (199, 210, 254))
        ctx.surface.blit(val, (field_x, self.rect.y + self.padding))
        # caret
        caret_x = field_x + (val.get_width() if text else 0) + 1
        pygame.draw.line(
            ctx.surface,
            accent,
            (caret_x, self.rect.y + self.padding),
            (caret_x, self.rect.bottom - self.padding),
        )


class HBox(Widget):
    """
    Horizontal layout container.

    Positions children left to right with spacing and padding, centered
    vertically.
    """

    def __init__(self, *, spacing: int = 8, padding: int = 0) -> None:
        super().__init__()
        self.spacing = spacing
        self.padding = padding

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

        max_h = max((child.rect.height for child in self.children), default=0)
        if self.rect.height == 0:
            self.rect.height = max_h + 2 * self.padding

        x = self.rect.x + self.padding
        for child in self.children:
            child_y = self.rect.y + (self.rect.height - child.rect.height) // 2
            child.rect.topleft = (x, child_y)
            x += child.rect.width + self.spacing

        if self.rect.width == 0:
            self.rect.width = (x - self.rect.x) + self.padding - self.spacing


class Toolbar(Widget):
    """Title + rename field on the left, editor buttons on the right."""

    def __init__(self, editor, *, title: str = "Sketch") -> None:
        super().__init__()
        self.left = HBox(spacing=12)
        self.right = HBox(spacing=8)
        self.left.add_child(LabelWidget(title, color=(15, 23, 42)))
        self.rename_field = RenameFieldWidget()
        self.left.add_child(self.rename_field)

        self.undo_button = ButtonWidget(
            "Undo", on_click=lambda _b: editor.undo(), is_enabled=lambda: editor.can_undo
        )
        self.point_labels_button = ButtonWidget(
            "Point labels",
            on_click=lambda _b: editor.toggle_point_labels(),
            is_active=lambda: editor.show_point_labels,
        )
        self.line_labels_button = ButtonWidget(
            "Line labels",
            on_click=lambda _b: editor.toggle_line_labels(),
            is_active=lambda: editor.show_line_labels,
        )
        self.points_button = ButtonWidget(
            "Points",
            on_click=lambda _b: editor.toggle_points(),
            is_active=lambda: editor.show_points,
        )
        self.clear_button = ButtonWidget("Clear", on_click=lambda _b: editor.clear(), danger=True)
        for b in (
            self.undo_button,
            self.point_labels_button,
            self.line_labels_button,
            self.points_button,
            self.clear_button,
        ):
            self.right.add_child(b)
        self.add_child(self.left)
        self.add_child(self.right)

    def layout(self, ctx: WidgetContext) -> None:
        # rect is set by the owning scene
        pad = 12
        self.left.rect = pygame.Rect(self.rect.x + pad, self.rect.y, 0, self.rect.height)
        self.right.rect = pygame.Rect(0, self.rect.y, 0, self.rect.height)
        self.left.layout(ctx)
        self.right.layout(ctx)
        self.right.rect.x = self.rect.right - pad - self.right.rect.width
        # re-run to move buttons along with the container
        self.right.layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        pygame.draw.rect(ctx.surface, (248, 250, 252), self.rect)
        pygame.draw.line(
            ctx.surface, (241, 245, 249), (self.rect.x, self.rect.bottom - 1), (self.rect.right, self.rect.bottom - 1)
        )
        super().draw(ctx)
