from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import ElementNode, Rect

# Logical point width of a common phone screen, used when the dump has no root frame.
DEFAULT_LOGICAL_WIDTH = 390.0


@dataclass(frozen=True, slots=True)
class CanvasScale:
    draw_width: float
    draw_height: float
    scale_factor: float

    @property
    def is_valid(self) -> bool:
        return self.draw_width > 0 and self.draw_height > 0 and self.scale_factor > 0


@dataclass(frozen=True, slots=True)
class OverlayBox:
    left: float
    top: float
    width: float
    height: float


def calculate_scale(
    container_width: float,
    container_height: float,
    image_width: float,
    image_height: float,
    forest: Sequence[ElementNode],
) -> CanvasScale:
    try:
        values = [float(container_width), float(container_height), float(image_width), float(image_height)]
    except (TypeError, ValueError):
        return CanvasScale(0.0, 0.0, 0.0)
    if any(value <= 0 for value in values):
        return CanvasScale(0.0, 0.0, 0.0)

    container_w, container_h, image_w, image_h = values
    fit_scale = min(container_w / image_w, container_h / image_h)
    draw_width = image_w * fit_scale
    draw_height = image_h * fit_scale

    logical_width = DEFAULT_LOGICAL_WIDTH
    if forest and forest[0].frame.width > 0:
        logical_width = forest[0].frame.width

    return CanvasScale(draw_width, draw_height, draw_width / logical_width)


def map_frame_to_canvas(frame: Rect, scale: CanvasScale) -> OverlayBox | None:
    if frame.is_empty or not scale.is_valid:
        return None
    factor = scale.scale_factor
    return OverlayBox(
        left=frame.x * factor,
        top=frame.y * factor,
        width=frame.width * factor,
        height=frame.height * factor,
    )


def node_at_point(forest: Sequence[ElementNode], x: float, y: float, scale: CanvasScale) -> ElementNode | None:
    """Return the deepest node whose frame covers the canvas point."""
    if not scale.is_valid:
        return None
    logical_x = x / scale.scale_factor
    logical_y = y / scale.scale_factor

    best: ElementNode | None = None
    best_depth = -1
    stack: list[tuple[ElementNode, int]] = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        if node.frame.contains(logical_x, logical_y) and depth >= best_depth:
            best = node
            best_depth = depth
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return best
