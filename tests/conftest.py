import os

# headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import itertools

import pytest

from geosketch.config import EditorConfig
from geosketch.editor import DiagramEditor
from geosketch.systems.coords import PointerEvent


def counter_ids(prefix: str = "id"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def cfg():
    return EditorConfig()


@pytest.fixture
def editor(cfg):
    return DiagramEditor(cfg, id_factory=counter_ids())


def tap(editor, x, y):
    editor.handle_pointer(PointerEvent("down", client=(x, y)))
    editor.handle_pointer(PointerEvent("up", client=(x, y)))


def drag(editor, start, end):
    editor.handle_pointer(PointerEvent("down", client=start))
    editor.handle_pointer(PointerEvent("move", client=end))
    editor.handle_pointer(PointerEvent("up", client=end))
