import random

from conftest import drag, tap

from geosketch.systems.coords import PointerEvent
from geosketch.systems.gestures import GESTURE_DRAG, GESTURE_NONE, GESTURE_TAP


def labels(items):
    return [i.label for i in items]


def test_scenario_a_tap_creates_snapped_point(editor):
    tap(editor, 100, 100)
    assert len(editor.points) == 1
    p = editor.points[0]
    assert (p.x, p.y, p.label) == (100, 100, "A")
    assert editor.selection.is_point(p.id)


def test_tap_off_grid_is_snapped(editor):
    tap(editor, 108, 91)
    assert editor.points[0].pos == (100, 100)


def test_scenario_b_drag_creates_two_points_and_a_line(editor):
    drag(editor, (100, 100), (200, 100))
    assert labels(editor.points) == ["A", "B"]
    assert labels(editor.lines) == ["a"]
    line = editor.lines[0]
    assert {line.p1_id, line.p2_id} == {p.id for p in editor.points}
    assert editor.selection.is_line(line.id)

    editor.undo()
    assert editor.points == [] and editor.lines == []
    assert editor.selection is None


def test_scenario_c_repeated_drag_does_not_duplicate_line(editor):
    drag(editor, (100, 100), (200, 100))
    first_line = editor.lines[0]
    editor.deselect()
    drag(editor, (200, 100), (100, 100))
    assert len(editor.lines) == 1
    assert len(editor.points) == 2
    # existing line: no new selection either
    assert editor.selection is None
    assert editor.lines[0] is first_line


def test_scenario_d_tap_then_drag_undone_twice(editor):
    tap(editor, 50, 50)
    drag(editor, (200, 200), (300, 200))
    assert len(editor.points) == 3
    editor.undo()
    assert labels(editor.points) == ["A"]
    editor.undo()
    assert editor.points == [] and editor.lines == []
    assert not editor.can_undo


def test_tap_near_existing_point_selects_it(editor):
    tap(editor, 100, 100)
    point = editor.points[0]
    editor.deselect()
    depth = editor.history.depth
    # snaps to (100, 100); radius 15 covers it
    tap(editor, 104, 96)
    assert len(editor.points) == 1
    assert editor.selection.is_point(point.id)
    assert editor.history.depth == depth


def test_tap_on_line_selects_line(editor):
    drag(editor, (100, 100), (300, 100))
    editor.deselect()
    tap(editor, 200, 100)
    assert editor.selection.is_line(editor.lines[0].id)
    assert len(editor.points) == 2


def test_drag_reuses_start_point_and_labels_continue(editor):
    tap(editor, 100, 100)
    drag(editor, (100, 100), (100, 200))
    drag(editor, (100, 200), (200, 200))
    assert labels(editor.points) == ["A", "B", "C"]
    assert labels(editor.lines) == ["a", "b"]


def test_drag_that_collapses_onto_one_point_creates_no_line(editor):
    # past the click threshold, but both ends resolve to the same new point
    editor.gestures.pointer_down((100, 100))
    assert editor.gestures.pointer_up((110, 100)) == GESTURE_DRAG
    assert len(editor.points) == 1
    assert editor.lines == []
    # still one undo unit
    assert editor.history.depth == 1


def test_pointer_leave_cancels_without_mutation(editor):
    editor.handle_pointer(PointerEvent("down", client=(100, 100)))
    editor.handle_pointer(PointerEvent("move", client=(200, 100)))
    editor.handle_pointer(PointerEvent("leave"))
    editor.handle_pointer(PointerEvent("up", client=(200, 100)))
    assert editor.points == []
    assert not editor.can_undo


def test_pointer_up_without_press_is_ignored(editor):
    assert editor.gestures.pointer_up((100, 100)) == GESTURE_NONE
    assert editor.points == []


def test_classifier_reports_gesture_kind(editor):
    g = editor.gestures
    g.pointer_down((0, 0))
    assert g.pointer_up((4, 0)) == GESTURE_TAP
    g.pointer_down((100, 100))
    assert g.pointer_up((105, 100)) == GESTURE_DRAG


def test_drag_preview_only_past_threshold(editor):
    editor.handle_pointer(PointerEvent("down", client=(100, 100)))
    assert not editor.is_dragging()
    editor.handle_pointer(PointerEvent("move", client=(150, 100)))
    assert editor.is_dragging()


def test_sequential_point_labels_through_the_gestures(editor):
    for i in range(30):
        tap(editor, 50 + 50 * (i % 18), 50 + 50 * (i // 18))
    expected = [chr(65 + n) for n in range(26)] + ["A1", "B1", "C1", "D1"]
    assert labels(editor.points) == expected


def test_random_drags_never_duplicate_lines(editor):
    rng = random.Random(7)
    spots = [(x, y) for x in (50, 150, 250) for y in (50, 150)]
    for _ in range(60):
        a, b = rng.sample(spots, 2)
        drag(editor, a, b)
    pairs = [frozenset((ln.p1_id, ln.p2_id)) for ln in editor.lines]
    assert len(pairs) == len(set(pairs))
    assert all(len(p) == 2 for p in pairs)
    assert len(editor.points) == len(spots)


def test_threshold_is_measured_diagonally(editor):
    g = editor.gestures
    g.pointer_down((0, 0))
    g.pointer_move((3, 4))
    assert g.drag_distance() == 5
    assert g.is_dragging()
    assert g.pointer_up((3, 3)) == GESTURE_TAP
