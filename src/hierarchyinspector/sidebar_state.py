from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import ElementNode

NodeRow = tuple[ElementNode, int]


def flatten_nodes(forest: Sequence[ElementNode], depth: int = 0) -> list[NodeRow]:
    rows: list[NodeRow] = []
    for node in forest:
        rows.append((node, depth))
        rows.extend(flatten_nodes(node.children, depth + 1))
    return rows


def node_matches_query(node: ElementNode, query: str) -> bool:
    lowered = query.strip().lower()
    if not lowered:
        return True
    return (
        lowered in node.type.lower()
        or lowered in (node.identifier or "").lower()
        or lowered in (node.label or "").lower()
    )


@dataclass(slots=True)
class HierarchySidebarState:
    search_text: str = ""
    selected_node_id: str | None = None

    def visible_nodes(self, forest: Sequence[ElementNode]) -> list[NodeRow]:
        rows = flatten_nodes(forest)
        if not self.search_text.strip():
            return rows
        return [row for row in rows if node_matches_query(row[0], self.search_text)]

    def prune_selection(self, forest: Sequence[ElementNode]) -> bool:
        if self.selected_node_id is None:
            return False
        visible_ids = {node.id for node, _depth in self.visible_nodes(forest)}
        if self.selected_node_id in visible_ids:
            return False
        self.selected_node_id = None
        return True

    def shows_no_matches(self, forest: Sequence[ElementNode]) -> bool:
        return bool(self.search_text) and not self.visible_nodes(forest)
