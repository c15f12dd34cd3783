"""Tests for chart layout and draw instructions."""

import math

import pytest

from src.services.chart.renderer import ChartRenderer, format_tick
from src.services.series.models import PreparedSeries
from src.services.series.normalizer import normalize_points


def _series(*values, width=800):
    raw = [{"x": f"P{i + 1}", "value": v} for i, v in enumerate(values)]
    return normalize_points(raw, width)


@pytest.fixture
def renderer():
    return ChartRenderer()


# ==========================================
#  layout
# ==========================================


def test_layout_ticks_are_evenly_spaced_bottom_up(renderer):
    layout = renderer.layout(_series(-30, 40), 800, 400)

    assert [t.value for t in layout.ticks] == [-50, -25, 0, 25, 50]
    assert [t.y for t in layout.ticks] == pytest.approx([350, 275, 200, 125, 50])


def test_layout_point_positions(renderer):
    layout = renderer.layout(_series(-30, 40), 800, 400)
    first, second = layout.point_positions

    assert (first.x, first.y) == pytest.approx((50, 290))
    assert (second.x, second.y) == pytest.approx((750, 80))
    assert first.value == -30
    assert second.label == "P2"


def test_layout_uses_series_step_x(renderer):
    series = _series(1, 2, 3, width=500)
    layout = renderer.layout(series, 800, 400)

    assert [p.x for p in layout.point_positions] == pytest.approx([50, 250, 450])


def test_single_zero_point_sits_at_center(renderer):
    series = _series(0)
    layout = renderer.layout(series, 800, 400)

    assert series.step_x == 0
    assert len(layout.ticks) == 1
    assert layout.ticks[0].y == pytest.approx(200)
    point = layout.point_positions[0]
    assert (point.x, point.y) == pytest.approx((50, 200))


def test_single_point_layout_is_finite(renderer):
    layout = renderer.layout(_series(37), 800, 400)
    point = layout.point_positions[0]

    assert math.isfinite(point.x)
    assert math.isfinite(point.y)


def test_empty_series_layout(renderer):
    layout = renderer.layout(PreparedSeries.empty(), 800, 400)

    assert layout.point_positions == ()
    assert len(layout.ticks) == 1
    assert layout.ticks[0].y == pytest.approx(200)


@pytest.mark.parametrize("count, rotated", [(1, False), (8, False), (9, True), (20, True)])
def test_label_rotation_threshold(renderer, count, rotated):
    layout = renderer.layout(_series(*range(count)), 800, 400)
    assert layout.rotate_labels is rotated


def test_layout_does_not_mutate_series(renderer):
    series = _series(3, 1, 2)
    before = series.to_dict()
    renderer.render(series, 800, 400)
    assert series.to_dict() == before


# ==========================================
#  render
# ==========================================


def test_render_emits_one_marker_per_point_with_value(renderer):
    drawing = renderer.render(_series(10, -5, 20), 800, 400)

    assert [m.value for m in drawing.markers] == [10, -5, 20]
    assert [m.label for m in drawing.markers] == ["P1", "P2", "P3"]
    assert drawing.polyline.points == tuple((m.cx, m.cy) for m in drawing.markers)


def test_render_grid_line_and_label_per_tick(renderer):
    drawing = renderer.render(_series(-30, 40), 800, 400)

    assert len(drawing.grid_lines) == drawing.axis.tick_count == 5
    assert all(line.x1 == 50 and line.x2 == 750 for line in drawing.grid_lines)
    assert all(line.dash == "5,5" for line in drawing.grid_lines)
    assert [label.text for label in drawing.y_labels] == ["-50", "-25", "0", "25", "50"]
    assert all(label.x == 20 for label in drawing.y_labels)


def test_render_x_labels_horizontal_for_few_points(renderer):
    drawing = renderer.render(_series(1, 2, 3), 800, 400)

    assert [label.text for label in drawing.x_labels] == ["P1", "P2", "P3"]
    assert all(label.y == 370 for label in drawing.x_labels)
    assert all(label.rotation == 0 for label in drawing.x_labels)


def test_render_x_labels_rotated_for_many_points(renderer):
    drawing = renderer.render(_series(*range(10)), 800, 400)
    assert all(label.rotation == 45 for label in drawing.x_labels)


def test_render_empty_series(renderer):
    drawing = renderer.render(PreparedSeries.empty(), 800, 400)

    assert drawing.markers == ()
    assert drawing.polyline.points == ()
    assert [label.text for label in drawing.y_labels] == ["0"]


@pytest.mark.parametrize("value, text", [(0, "0"), (25.0, "25"), (-50, "-50"), (12.4, "12")])
def test_format_tick(value, text):
    assert format_tick(value) == text
