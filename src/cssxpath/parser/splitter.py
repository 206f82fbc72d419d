"""Top-level comma splitting for selector lists."""

from __future__ import annotations

__all__ = ["split_selector_list"]

_OPENERS = {"[": "]", "(": ")"}
_QUOTES = ("'", '"')


def split_selector_list(selector: str) -> list[str]:
    """Split *selector* on commas that sit outside ``[]``, ``()`` and quotes.

    Bracket and parenthesis depth are tracked independently, so the comma in
    ``li:between(2,4)`` or ``[data-x="a,b"]`` never separates selectors.
    Fragments that are empty after trimming are dropped.
    """
    fragments: list[str] = []
    current: list[str] = []
    bracket_depth = 0
    paren_depth = 0
    quote: str | None = None

    for char in selector:
        if quote is not None:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char == "[":
            bracket_depth += 1
        elif char == "]":
            bracket_depth = max(0, bracket_depth - 1)
        elif char == "(":
            paren_depth += 1
        elif char == ")":
            paren_depth = max(0, paren_depth - 1)
        elif char == "," and bracket_depth == 0 and paren_depth == 0:
            fragments.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    fragments.append("".join(current).strip())
    return [fragment for fragment in fragments if fragment]
