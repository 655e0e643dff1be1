from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def zero(cls) -> Rect:
        return cls()

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: float, py: float) -> bool:
        if self.is_empty:
            return False
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


@dataclass(slots=True)
class ElementNode:
    type: str
    identifier: str | None = None
    label: str | None = None
    frame: Rect = field(default_factory=Rect.zero)
    children: list[ElementNode] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid4().hex, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        if self.identifier:
            return f"{self.type} - identifier: '{self.identifier}'"
        if self.label:
            return f"{self.type} - label: '{self.label}'"
        return self.type

    def iter_subtree(self) -> Iterator[ElementNode]:
        yield self
        for child in self.children:
            yield from child.iter_subtree()


@dataclass(frozen=True, slots=True)
class LocatorSuggestion:
    title: str
    code: str
    recommended: bool = False


@dataclass(frozen=True, slots=True)
class InspectorSnapshot:
    screenshot: Any
    hierarchy: list[ElementNode]
