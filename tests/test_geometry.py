import math

import pytest

from geosketch.geometry import (
    distance,
    line_label_anchor,
    project_onto_segment,
    snap_to_grid,
)


def test_distance():
    assert distance(0, 0, 3, 4) == 5


@pytest.mark.parametrize(
    "raw, snapped",
    [
        ((0, 0), (0, 0)),
        ((112, 88), (100, 100)),
        ((112.5, 137.4), (125, 125)),
        ((-12.5, -13), (0, -25)),
    ],
)
def test_snap_to_grid_rounds_each_axis(raw, snapped):
    assert snap_to_grid(raw[0], raw[1], 25) == snapped


def test_projection_is_clamped_to_the_segment():
    assert project_onto_segment(50, 10, 0, 0, 100, 0) == (50, 0)
    assert project_onto_segment(-30, 10, 0, 0, 100, 0) == (0, 0)
    assert project_onto_segment(150, 10, 0, 0, 100, 0) == (100, 0)


def test_projection_of_zero_length_segment_is_none():
    assert project_onto_segment(5, 5, 10, 10, 10, 10) is None


def test_line_label_anchor_is_offset_along_normal():
    # horizontal segment, normal (-dy, dx)/len points down (+y)
    assert line_label_anchor(0, 0, 100, 0, 18) == (50, 18)
    x, y = line_label_anchor(0, 0, 0, 100, 18)
    assert math.isclose(x, -18) and math.isclose(y, 50)


def test_line_label_anchor_for_degenerate_segment_stays_on_midpoint():
    assert line_label_anchor(40, 40, 40, 40, 18) == (40, 40)
