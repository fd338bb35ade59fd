import pytest
from conftest import drag, tap

from geosketch.commands import (
    EditorCommand,
    clear_command,
    load_state_command,
    rename_command,
    set_state_command,
    undo_command,
)
from geosketch.errors import CommandError
from geosketch.state.entities import Line, Point
from geosketch.systems.coords import PointerEvent

HOST_POINTS = [Point("h1", 0, 0, "P"), Point("h2", 100, 0, "Q")]
HOST_LINES = [Line("hl", "h1", "h2", "pq")]


def test_undo_is_strict_inverse_of_each_mutation(editor):
    tap(editor, 100, 100)
    before = editor.scene.snapshot()
    drag(editor, (100, 100), (200, 200))
    editor.undo()
    assert editor.scene.snapshot() == before

    before = editor.scene.snapshot()
    editor.clear()
    assert editor.points == []
    editor.undo()
    assert editor.scene.snapshot() == before


def test_n_undos_return_to_initial_scene(editor):
    initial = editor.scene.snapshot()
    tap(editor, 50, 50)
    tap(editor, 150, 50)
    drag(editor, (250, 50), (250, 150))
    editor.clear()
    for _ in range(4):
        assert editor.undo()
    assert editor.scene.snapshot() == initial
    assert not editor.undo()


def test_clear_is_undoable_and_clears_selection(editor):
    tap(editor, 100, 100)
    editor.clear()
    assert editor.selection is None
    assert editor.can_undo
    editor.undo()
    assert len(editor.points) == 1


def test_load_state_empties_history(editor):
    tap(editor, 100, 100)
    editor.load_state(HOST_POINTS, HOST_LINES)
    assert editor.selection is None
    assert not editor.can_undo
    assert not editor.undo()
    assert [p.label for p in editor.points] == ["P", "Q"]


def test_set_state_is_undoable(editor):
    tap(editor, 100, 100)
    editor.set_state(HOST_POINTS, HOST_LINES)
    assert len(editor.lines) == 1
    editor.undo()
    assert [p.label for p in editor.points] == ["A"]


def test_labels_continue_from_loaded_collection_size(editor):
    editor.load_state(HOST_POINTS, HOST_LINES)
    tap(editor, 300, 300)
    assert editor.points[-1].label == "C"


def test_load_state_keeps_dangling_lines(editor):
    editor.load_state([Point("p", 0, 0, "A")], [Line("l", "p", "ghost", "a")])
    assert len(editor.lines) == 1
    # hit testing skips it instead of failing
    tap(editor, 50, 0)
    assert len(editor.points) == 2


def test_rename_is_live_and_not_undoable(editor):
    tap(editor, 100, 100)
    editor.rename_selected("M")
    editor.rename_selected("")
    assert editor.points[0].label == ""
    assert editor.selected_label == ""
    assert editor.history.depth == 1
    editor.undo()
    assert editor.points == []


def test_rename_without_selection_is_noop(editor):
    tap(editor, 100, 100)
    editor.deselect()
    assert not editor.rename_selected("X")
    assert editor.points[0].label == "A"


def test_rename_allows_duplicate_labels(editor):
    tap(editor, 100, 100)
    tap(editor, 200, 100)
    editor.rename_selected("A")
    assert [p.label for p in editor.points] == ["A", "A"]


def test_execute_dispatches_commands(editor):
    editor.execute(load_state_command(HOST_POINTS, HOST_LINES))
    assert not editor.can_undo
    tap(editor, 0, 0)
    assert editor.selection.is_point("h1")
    editor.execute(rename_command("R"))
    assert editor.points[0].label == "R"
    editor.execute(clear_command())
    assert editor.points == []
    editor.execute(undo_command())
    assert [p.label for p in editor.points] == ["R", "Q"]
    editor.execute(set_state_command([], []))
    assert editor.points == []


def test_execute_rejects_unknown_kind_and_version(editor):
    with pytest.raises(CommandError):
        editor.execute(EditorCommand("explode"))
    with pytest.raises(CommandError):
        editor.execute(EditorCommand("undo", version=99))


def test_dirty_flag_tracks_visible_changes(editor):
    assert editor.consume_dirty()
    assert not editor.consume_dirty()

    # hovering with no press changes nothing on screen
    editor.handle_pointer(PointerEvent("move", client=(300, 300)))
    editor.handle_pointer(PointerEvent("leave"))
    assert not editor.consume_dirty()

    tap(editor, 100, 100)
    assert editor.consume_dirty()

    editor.undo()
    assert editor.consume_dirty()
    assert not editor.undo()
    assert not editor.consume_dirty()

    editor.toggle_line_labels()
    assert editor.consume_dirty()
    assert not editor.show_line_labels
