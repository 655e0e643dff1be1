from __future__ import annotations

from dataclasses import dataclass

from .locator_suggestions import build_locator_suggestions
from .models import ElementNode, LocatorSuggestion, Rect


@dataclass(frozen=True, slots=True)
class DetailLine:
    title: str
    value: str


def format_frame(frame: Rect) -> str:
    return "{{%.1f, %.1f}, {%.1f, %.1f}}" % (frame.x, frame.y, frame.width, frame.height)


@dataclass(slots=True)
class NodeDetailState:
    node: ElementNode | None = None
    is_selected: bool = False

    @property
    def has_node(self) -> bool:
        return self.node is not None

    @property
    def detail_lines(self) -> list[DetailLine]:
        node = self.node
        if node is None:
            return []

        lines = [DetailLine("Element", node.type)]
        if node.identifier:
            lines.append(DetailLine("Identifier", f"'{node.identifier}'"))
        if node.label:
            lines.append(DetailLine("Label", f"'{node.label}'"))
        lines.append(DetailLine("Frame", format_frame(node.frame)))
        lines.append(DetailLine("Selected", "true" if self.is_selected else "false"))
        return lines

    @property
    def suggestions(self) -> list[LocatorSuggestion]:
        if self.node is None:
            return []
        return build_locator_suggestions(self.node)
