from __future__ import annotations

import re

from .models import ElementNode, LocatorSuggestion
from .type_normalizer import DEFAULT_ROOT_HANDLE, query_root

IDENTIFIER_TITLE = "Recommended (Identifier)"
PREDICATE_TITLE = "Fallback (Predicate contains)"

_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)


def build_locator_suggestions(node: ElementNode, root_handle: str = DEFAULT_ROOT_HANDLE) -> list[LocatorSuggestion]:
    """Return ranked locator snippets for ``node``; empty when nothing identifies it."""
    root = query_root(node.type, root_handle)
    suggestions: list[LocatorSuggestion] = []

    identifier = _non_empty(node.identifier)
    if identifier:
        suggestions.append(
            LocatorSuggestion(
                title=IDENTIFIER_TITLE,
                code=f'let element = {root}["{escape_string_literal(identifier)}"]',
                recommended=True,
            )
        )

    # Identifier-only nodes are already covered by the subscript lookup above.
    token = _non_empty(node.label) or (None if suggestions else identifier)
    if token:
        suggestions.append(
            LocatorSuggestion(
                title=PREDICATE_TITLE,
                code=(
                    f"let element = {root}\n"
                    f'    .matching(NSPredicate(format: "label CONTAINS %@", "{escape_string_literal(token)}"))\n'
                    "    .firstMatch"
                ),
                recommended=False,
            )
        )

    return suggestions


def escape_string_literal(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def unescape_string_literal(value: str) -> str:
    return _ESCAPE_SEQUENCE.sub(lambda match: match.group(1), value)


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None
