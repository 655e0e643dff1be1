from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Iterable

from .models import ElementNode, Rect

logger = logging.getLogger(__name__)

HEADER_MARKER = "Element subtree:"
CONNECTOR_MARKER = "→"
INDENT_MARKERS = frozenset({" ", CONNECTOR_MARKER})
TYPE_DELIMITER = ", "

_NUMBER = r"(-?\d+\.?\d*)"
_FRAME_PATTERN = re.compile(
    r"\{\{" + _NUMBER + r", " + _NUMBER + r"\}, \{" + _NUMBER + r", " + _NUMBER + r"\}\}"
)
_ATTRIBUTE_PATTERNS = {
    key: re.compile(re.escape(key) + r": '(.*?)'")
    for key in ("label", "identifier")
}


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    depth: int
    type: str
    raw: str


def parse_hierarchy(text: str) -> list[ElementNode]:
    """Parse a debug-description dump into an ordered forest of element nodes.

    Never raises on malformed input: unparseable frames become ``Rect.zero()``
    and missing attributes become ``None``.
    """
    lines = _candidate_lines(text or "")
    entries = (_build_entry(classified) for classified in map(classify_line, lines) if classified is not None)
    forest = build_forest(entries)
    logger.debug("Parsed hierarchy with %d root(s).", len(forest))
    return forest


def classify_line(line: str) -> ClassifiedLine | None:
    trimmed = line.strip()
    if not trimmed:
        return None

    depth = 0
    for char in line:
        if char not in INDENT_MARKERS:
            break
        depth += 1

    clean_line = trimmed.replace(CONNECTOR_MARKER, "")
    element_type = clean_line.split(TYPE_DELIMITER, 1)[0]
    return ClassifiedLine(depth=depth, type=element_type, raw=line)


def parse_frame(line: str) -> Rect:
    match = _FRAME_PATTERN.search(line)
    if not match:
        return Rect.zero()
    try:
        x, y, width, height = (float(group) for group in match.groups())
    except (TypeError, ValueError):
        return Rect.zero()
    return Rect(x=x, y=y, width=width, height=height)


def extract_attribute(line: str, key: str) -> str | None:
    pattern = _ATTRIBUTE_PATTERNS.get(key)
    if pattern is None:
        pattern = re.compile(re.escape(key) + r": '(.*?)'")
    match = pattern.search(line)
    if not match:
        return None
    return match.group(1)


def build_forest(entries: Iterable[tuple[int, ElementNode]]) -> list[ElementNode]:
    roots: list[ElementNode] = []
    stack: list[tuple[ElementNode, int]] = []

    for depth, node in entries:
        # Equal depth closes the previous sibling.
        while stack and stack[-1][1] >= depth:
            stack.pop()

        if stack:
            stack[-1][0].children.append(node)
        else:
            roots.append(node)

        stack.append((node, depth))

    return roots


def _candidate_lines(text: str) -> list[str]:
    lines = text.splitlines()
    for index, line in enumerate(lines):
        if HEADER_MARKER in line:
            return lines[index + 1 :]
    return lines


def _build_entry(classified: ClassifiedLine) -> tuple[int, ElementNode]:
    node = ElementNode(
        type=classified.type,
        identifier=extract_attribute(classified.raw, "identifier"),
        label=extract_attribute(classified.raw, "label"),
        frame=parse_frame(classified.raw),
    )
    return classified.depth, node
