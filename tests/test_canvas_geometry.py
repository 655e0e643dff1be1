import pytest

from hierarchyinspector.canvas_geometry import (
    DEFAULT_LOGICAL_WIDTH,
    CanvasScale,
    calculate_scale,
    map_frame_to_canvas,
    node_at_point,
)
from hierarchyinspector.hierarchy_parser import parse_hierarchy
from hierarchyinspector.models import Rect

DUMP = """Application, {{0.0, 0.0}, {390.0, 844.0}}
  Other, {{0.0, 0.0}, {390.0, 844.0}}
    Button, {{20.0, 100.0}, {350.0, 44.0}}, identifier: 'login'
    Image, {{20.0, 100.0}, {44.0, 44.0}}, identifier: 'icon'
"""


def test_scale_fits_image_and_uses_root_logical_width() -> None:
    forest = parse_hierarchy(DUMP)

    scale = calculate_scale(800, 600, 1170, 2532, forest)

    fit = min(800 / 1170, 600 / 2532)
    assert scale.draw_width == pytest.approx(1170 * fit)
    assert scale.draw_height == pytest.approx(2532 * fit)
    assert scale.scale_factor == pytest.approx(1170 * fit / 390.0)


def test_scale_falls_back_to_default_logical_width() -> None:
    scale = calculate_scale(390, 844, 390, 844, [])

    assert scale.draw_width == pytest.approx(390)
    assert scale.scale_factor == pytest.approx(390 / DEFAULT_LOGICAL_WIDTH)


def test_scale_is_invalid_for_degenerate_sizes() -> None:
    assert not calculate_scale(0, 600, 100, 100, []).is_valid
    assert not calculate_scale(800, 600, 0, 100, []).is_valid
    assert not calculate_scale("wide", 600, 100, 100, []).is_valid


def test_map_frame_to_canvas_scales_all_components() -> None:
    box = map_frame_to_canvas(Rect(10, 20, 100, 50), CanvasScale(780, 1688, 2.0))

    assert box is not None
    assert (box.left, box.top, box.width, box.height) == (20, 40, 200, 100)
    assert map_frame_to_canvas(Rect.zero(), CanvasScale(780, 1688, 2.0)) is None
    assert map_frame_to_canvas(Rect(1, 1, 1, 1), CanvasScale(0, 0, 0)) is None


def test_node_at_point_prefers_deepest_then_latest() -> None:
    forest = parse_hierarchy(DUMP)
    scale = CanvasScale(780, 1688, 2.0)

    icon = node_at_point(forest, 60, 220, scale)
    button = node_at_point(forest, 600, 220, scale)
    container = node_at_point(forest, 600, 1000, scale)

    assert icon is not None and icon.identifier == "icon"
    assert button is not None and button.identifier == "login"
    assert container is not None and container.type == "Other"
    assert node_at_point(forest, 5000, 5000, scale) is None
