from types import SimpleNamespace

import pygame
import pytest

from geosketch.scenes.editor_scene import EditorScene


class StubWindow:
    """Stands in for EditorWindow with an off-screen surface."""

    def __init__(self, width=960, canvas_height=400, toolbar_height=56):
        pygame.font.init()
        self.width = width
        self.height = canvas_height + toolbar_height
        self.toolbar_height = toolbar_height
        self.surface = pygame.Surface((self.width, self.height))
        self.font = pygame.font.Font(None, 16)
        self.small_font = self.font
        self.presented = 0

    def toolbar_rect(self):
        return pygame.Rect(0, 0, self.width, self.toolbar_height)

    def canvas_rect(self):
        return pygame.Rect(0, self.toolbar_height, self.width, self.height - self.toolbar_height)

    def present(self):
        self.presented += 1


@pytest.fixture
def window():
    return StubWindow()


@pytest.fixture
def scene(editor, window):
    s = EditorScene(editor)
    s.handle_resize(window.width, window.height, SimpleNamespace(renderer=window))
    return s


def send(scene, window, kind, **attrs):
    scene.handle_event(pygame.event.Event(kind, attrs), SimpleNamespace(renderer=window))


def click(scene, window, pos):
    send(scene, window, pygame.MOUSEBUTTONDOWN, pos=pos, button=1)
    send(scene, window, pygame.MOUSEBUTTONUP, pos=pos, button=1)


def test_render_only_when_something_changed(scene, window):
    assert scene.render(window, None) is True
    assert scene.render(window, None) is False
    assert window.presented == 1


def test_click_on_canvas_is_offset_by_toolbar(scene, window, editor):
    click(scene, window, (100, 156))
    assert [p.pos for p in editor.points] == [(100, 100)]
    assert editor.selection.is_point(editor.points[0].id)


def test_clicks_on_toolbar_do_not_reach_the_canvas(scene, window, editor):
    scene.render(window, None)
    click(scene, window, (5, 5))
    assert editor.points == []


def test_typing_renames_selected_point(scene, window, editor):
    click(scene, window, (100, 156))
    send(scene, window, pygame.TEXTINPUT, text="1")
    assert editor.points[0].label == "A1"
    send(scene, window, pygame.KEYDOWN, key=pygame.K_BACKSPACE, mod=0)
    send(scene, window, pygame.KEYDOWN, key=pygame.K_BACKSPACE, mod=0)
    assert editor.points[0].label == ""
    # renames are not undo steps
    assert editor.history.depth == 1


def test_toolbar_undo_button(scene, window, editor):
    click(scene, window, (100, 156))
    assert scene.render(window, None) is True
    undo = scene.toolbar.undo_button
    assert window.toolbar_rect().contains(undo.rect)
    click(scene, window, undo.rect.center)
    assert editor.points == []
    assert not editor.can_undo
    assert scene.render(window, None) is True


def test_keyboard_shortcuts(scene, window, editor):
    click(scene, window, (100, 156))
    send(scene, window, pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0)
    assert editor.selection is None
    send(scene, window, pygame.KEYDOWN, key=pygame.K_F2, mod=0)
    assert editor.show_point_labels is False
    send(scene, window, pygame.KEYDOWN, key=pygame.K_z, mod=pygame.KMOD_LCTRL)
    assert editor.points == []
