from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from .models import ElementNode, InspectorSnapshot
from .snapshot_loader import HIERARCHY_SUFFIXES, IMAGE_SUFFIXES

UNRECOGNIZED_DROP_MESSAGE = (
    "Could not identify a Screenshot (.png/.jpg) or Hierarchy (.txt) file in the dropped items."
)


@dataclass(slots=True)
class SelectionState:
    """UI-side selection table keyed by node id; nodes themselves stay untouched."""

    selected_id: str | None = None
    hovered_id: str | None = None

    def clear(self) -> None:
        self.selected_id = None
        self.hovered_id = None


@dataclass(slots=True)
class InspectorState:
    hierarchy: list[ElementNode] = field(default_factory=list)
    screenshot: Any = None
    is_loading: bool = False
    error_message: str | None = None
    pending_image_path: Path | None = None
    pending_hierarchy_path: Path | None = None
    selection: SelectionState = field(default_factory=SelectionState)

    @property
    def has_content(self) -> bool:
        return self.screenshot is not None or bool(self.hierarchy)

    @property
    def has_pending_files(self) -> bool:
        return self.pending_image_path is not None or self.pending_hierarchy_path is not None

    @property
    def selected_node(self) -> ElementNode | None:
        return self.node(self.selection.selected_id)

    @property
    def hovered_node(self) -> ElementNode | None:
        return self.node(self.selection.hovered_id)

    def accept_paths(self, paths: Iterable[Path | str]) -> tuple[Path, Path] | None:
        """Sort dropped files into the pending slots; return both once the pair is complete."""
        paths = [Path(raw_path) for raw_path in paths]
        if not paths:
            return None

        for path in paths:
            suffix = path.suffix.lower()
            if self.pending_image_path is None and suffix in IMAGE_SUFFIXES:
                self.pending_image_path = path
            elif self.pending_hierarchy_path is None and suffix in HIERARCHY_SUFFIXES:
                self.pending_hierarchy_path = path

        if not self.has_pending_files:
            self.error_message = UNRECOGNIZED_DROP_MESSAGE
            return None
        if self.pending_image_path is None or self.pending_hierarchy_path is None:
            return None

        ready = (self.pending_image_path, self.pending_hierarchy_path)
        self.pending_image_path = None
        self.pending_hierarchy_path = None
        return ready

    def begin_load(self) -> None:
        self.is_loading = True
        self.error_message = None
        self.pending_image_path = None
        self.pending_hierarchy_path = None

    def apply_snapshot(self, snapshot: InspectorSnapshot) -> None:
        self.screenshot = snapshot.screenshot
        self.hierarchy = list(snapshot.hierarchy)
        self.selection.clear()
        self.is_loading = False

    def apply_error(self, error: Exception) -> None:
        self.error_message = str(error)
        self.is_loading = False

    def reset(self) -> None:
        self.hierarchy = []
        self.screenshot = None
        self.selection.clear()
        self.error_message = None
        self.is_loading = False
        self.pending_image_path = None
        self.pending_hierarchy_path = None

    def select(self, node_id: str | None) -> None:
        self.selection.selected_id = node_id if self.node(node_id) is not None else None

    def hover(self, node_id: str | None) -> None:
        self.selection.hovered_id = node_id if self.node(node_id) is not None else None

    def is_selected(self, node: ElementNode | None) -> bool:
        return node is not None and node.id == self.selection.selected_id

    def node(self, node_id: str | None) -> ElementNode | None:
        if not node_id:
            return None
        return find_node(self.hierarchy, node_id)


def find_node(nodes: Iterable[ElementNode], node_id: str) -> ElementNode | None:
    for root in nodes:
        for node in root.iter_subtree():
            if node.id == node_id:
                return node
    return None
