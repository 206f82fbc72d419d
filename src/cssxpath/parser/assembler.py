"""Split a selector into combinator + compound segments."""

from __future__ import annotations

import dataclasses

from cssxpath.model.segment import Combinator, Segment
from cssxpath.parser.compound import parse_compound

__all__ = ["parse_selector", "tokenize_selector", "is_xpath_absolute", "is_xpath_relative"]

_COMBINATOR_CHARS = frozenset(">+~")
_QUOTES = ("'", '"')


def is_xpath_absolute(expression: str) -> bool:
    """True for ``/html/body`` style paths (a single leading slash)."""
    return expression.startswith("/") and not expression.startswith("//")


def is_xpath_relative(expression: str) -> bool:
    """True for ``//div`` style paths."""
    return expression.startswith("//")


def tokenize_selector(selector: str) -> list[tuple[str, str]]:
    """Break a selector into ``("compound", text)`` and ``("combinator", c)`` tokens.

    Combinator characters and whitespace only count at bracket and
    parenthesis depth zero and outside quotes, so ``[href~="x"]``,
    ``:nth-child(2n+1)`` and ``[title="a b"]`` stay whole.  Whitespace
    between two compounds yields a ``" "`` (descendant) combinator unless
    an explicit combinator already separates them.
    """
    tokens: list[tuple[str, str]] = []
    buffer: list[str] = []
    depth = 0
    quote: str | None = None
    pending_space = False

    def flush() -> None:
        nonlocal pending_space
        if not buffer:
            return
        if pending_space and tokens and tokens[-1][0] == "compound":
            tokens.append(("combinator", " "))
        tokens.append(("compound", "".join(buffer)))
        buffer.clear()
        pending_space = False

    for char in selector:
        if quote is not None:
            buffer.append(char)
            if char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
        elif char in "[(":
            depth += 1
        elif char in "])":
            depth = max(0, depth - 1)
        elif depth == 0 and char.isspace():
            flush()
            pending_space = True
            continue
        elif depth == 0 and char in _COMBINATOR_CHARS:
            flush()
            tokens.append(("combinator", char))
            pending_space = False
            continue
        buffer.append(char)

    flush()
    return tokens


def parse_selector(selector: str) -> list[Segment]:
    """Parse a single (comma-free) selector into an ordered list of segments.

    XPath literals (leading ``/`` or ``//``) come back as one passthrough
    segment.  Otherwise each compound is parsed by :func:`parse_compound`
    and tagged with the combinator that precedes it; the first segment
    always has :attr:`Combinator.NONE`.
    """
    selector = selector.strip()
    if is_xpath_absolute(selector) or is_xpath_relative(selector):
        return [Segment.passthrough(selector)]

    compounds: list[str] = []
    combinators: list[Combinator] = []
    pending: Combinator | None = None

    for kind, text in tokenize_selector(selector):
        if kind == "combinator":
            # Keep the first explicit combinator; extra ones are dropped.
            if pending is None or pending is Combinator.DESCENDANT:
                pending = Combinator.from_token(text)
            continue
        if compounds:
            combinators.append(pending or Combinator.DESCENDANT)
        compounds.append(text)
        pending = None

    segments: list[Segment] = []
    for i, text in enumerate(compounds):
        segment = parse_compound(text)
        if i > 0:
            segment = dataclasses.replace(segment, combinator=combinators[i - 1])
        segments.append(segment)
    return segments
