from conftest import counter_ids

from geosketch.state.entities import KIND_LINE, KIND_POINT, Line, Point
from geosketch.state.history import HistoryManager
from geosketch.state.scene_model import SceneModel


def make_scene():
    return SceneModel(id_factory=counter_ids("e"))


def test_add_point_keeps_insertion_order():
    scene = make_scene()
    a = scene.add_point((0, 0), "A")
    b = scene.add_point((50, 0), "B")
    assert scene.points == [a, b]
    assert scene.point_by_id(b.id) is b


def test_add_line_refuses_self_loops_and_duplicates():
    scene = make_scene()
    a = scene.add_point((0, 0), "A")
    b = scene.add_point((50, 0), "B")
    assert scene.add_line(a.id, a.id, "a") is None
    line = scene.add_line(a.id, b.id, "a")
    assert line is not None
    # undirected: the reversed pair is the same line
    assert scene.add_line(b.id, a.id, "b") is None
    assert scene.lines == [line]
    assert scene.has_line_between(b.id, a.id)


def test_rename_replaces_label_without_checks():
    scene = make_scene()
    a = scene.add_point((0, 0), "A")
    b = scene.add_point((50, 0), "B")
    line = scene.add_line(a.id, b.id, "a")
    assert scene.rename_entity(a.id, KIND_POINT, "B")
    assert scene.rename_entity(line.id, KIND_LINE, "")
    assert scene.point_by_id(a.id).label == "B"
    assert scene.line_by_id(line.id).label == ""
    assert not scene.rename_entity("nope", KIND_POINT, "X")


def test_snapshot_is_a_value_copy():
    scene = make_scene()
    a = scene.add_point((0, 0), "A")
    snap = scene.snapshot()
    scene.rename_entity(a.id, KIND_POINT, "Q")
    scene.add_point((50, 0), "B")
    assert [p.label for p in snap.points] == ["A"]
    scene.restore(snap)
    assert [p.label for p in scene.points] == ["A"]
    # restoring must not alias the snapshot
    scene.add_point((75, 0), "B")
    assert len(snap.points) == 1


def test_replace_accepts_dangling_lines():
    scene = make_scene()
    scene.replace([Point("p", 0, 0, "A")], [Line("l", "p", "ghost", "a")])
    assert len(scene.lines) == 1


def test_clear_empties_the_scene():
    scene = make_scene()
    scene.add_point((0, 0), "A")
    scene.clear()
    assert scene.is_empty()


def test_history_stack():
    history = HistoryManager()
    assert not history.can_undo
    assert history.pop() is None
    scene = make_scene()
    history.push(scene.snapshot())
    scene.add_point((0, 0), "A")
    history.push(scene.snapshot())
    assert history.depth == 2
    assert len(history.pop().points) == 1
    assert len(history.pop().points) == 0
    history.push(scene.snapshot())
    history.clear()
    assert len(history) == 0
