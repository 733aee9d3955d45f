import numpy as np
import pytest

from fightstick_view.core import Button, ButtonSet, HistoryBuffer, Snapshot, StickAxis
from fightstick_view.geometry import (
    circle_triangles, normalize_color, ortho_matrix, polyline_vertices, ring_lines,
)
from fightstick_view.layout import (
    BUTTON_SLOTS, DARK_BLUE, RED, STICK_CENTER, STICK_GATE_RADIUS,
    button_center, button_colors, format_snapshot, trail_points,
)


def test_slot_table_covers_attack_buttons():
    assert sorted(BUTTON_SLOTS.values()) == list(range(8))
    assert not any(button.is_dpad for button in BUTTON_SLOTS)


def test_button_centers():
    assert button_center(0) == (456, 243)
    assert button_center(1) == (456, 363)
    assert button_center(2) == (576, 187)
    assert button_center(7) == (816, 307)


def test_button_colors_follow_held_buttons():
    snapshot = Snapshot(buttons=ButtonSet([Button.SOUTH, Button.LEFT_TRIGGER_2, Button.START]))
    colors = button_colors(snapshot)
    assert colors[1] == RED
    assert colors[7] == RED
    assert [c for i, c in enumerate(colors) if i not in (1, 7)] == [DARK_BLUE] * 6


def test_trail_points_newest_first():
    history = HistoryBuffer()
    history.push(Snapshot(StickAxis(1, 0)))
    history.push(Snapshot(StickAxis(0, 1)))
    cx, cy = STICK_CENTER
    r = STICK_GATE_RADIUS

    points = trail_points(history)

    assert len(points) == len(history)
    assert points[0] == (cx, cy - r, 1.0)
    assert points[1][:2] == (cx + r, cy)
    assert points[1][2] == pytest.approx(1.0 - 1 / 24)
    assert points[2][:2] == (cx, cy)


def test_format_snapshot():
    snapshot = Snapshot(StickAxis(-1, 1), ButtonSet([Button.SOUTH, Button.RIGHT_TRIGGER]))
    assert format_snapshot(snapshot) == \
        "Snapshot { axis: (-1, 1), buttons: [South, RightTrigger] }"


def test_circle_triangles_stay_inside_radius():
    verts = circle_triangles(100.0, 50.0, 10.0, segments=12)
    assert verts.shape == (36, 2)
    assert tuple(verts[0]) == (100.0, 50.0)
    dist = np.hypot(verts[:, 0] - 100.0, verts[:, 1] - 50.0)
    assert dist.max() <= 10.0 + 1e-3


def test_ring_lines_shape():
    assert ring_lines(0.0, 0.0, 5.0, segments=8).shape == (16, 2)


def test_polyline_vertices():
    assert polyline_vertices([(0, 0, 1.0)], (255, 255, 255)).shape == (0, 6)

    verts = polyline_vertices([(0, 0, 1.0), (10, 0, 0.5), (10, 10, 0.25)], (255, 0, 0))
    assert verts.shape == (4, 6)
    assert verts[1, 5] == pytest.approx(0.5)
    assert verts[3, 5] == pytest.approx(0.25)
    assert tuple(verts[0, 2:5]) == (1.0, 0.0, 0.0)


def test_normalize_color():
    assert normalize_color((255, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    assert normalize_color((0, 0, 255, 51), alpha=0.5) == pytest.approx((0.0, 0.0, 1.0, 0.1))


def test_ortho_matrix_maps_screen_corners():
    mat = ortho_matrix(0, 960, 540, 0, -1, 1)
    top_left = mat @ np.array([0, 0, 0, 1], dtype=np.float32)
    bottom_right = mat @ np.array([960, 540, 0, 1], dtype=np.float32)
    assert top_left[:2] == pytest.approx((-1.0, 1.0))
    assert bottom_right[:2] == pytest.approx((1.0, -1.0))
