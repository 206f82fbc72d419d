"""XPath string literal rendering."""

from __future__ import annotations

from typing import Callable

__all__ = ["xpath_literal", "raw_literal", "escaped_literal", "literal_renderer"]

LiteralRenderer = Callable[[str], str]


def raw_literal(value: str) -> str:
    """Wrap *value* in double quotes without any escaping."""
    return f'"{value}"'


def escaped_literal(value: str) -> str:
    """Render *value* as a valid XPath 1.0 literal whatever quotes it holds.

    XPath 1.0 has no escape syntax, so a value holding both quote kinds is
    built with ``concat()``.
    """
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    pieces = value.split('"')
    parts: list[str] = []
    for i, piece in enumerate(pieces):
        if i:
            parts.append("'\"'")
        if piece:
            parts.append(f'"{piece}"')
    return f"concat({', '.join(parts)})"


def literal_renderer(escape: bool) -> LiteralRenderer:
    return escaped_literal if escape else raw_literal


def xpath_literal(value: str, *, escape: bool = False) -> str:
    return literal_renderer(escape)(value)
