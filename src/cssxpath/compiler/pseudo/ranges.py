"""Numeric pseudo-classes: slices, ranges, lengths, counts and depth.

Arguments are parsed leniently.  A malformed argument compiles to the
match-all predicate ``[true()]`` instead of raising.
"""

from __future__ import annotations

import re

from cssxpath.compiler.pseudo.base import MATCH_ALL, PseudoContext, PseudoRegistry

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_SLICE_RE = re.compile(r"^(\d*)\s*[:,]\s*(\d*)$")
_NAME_RE = re.compile(r"^[\w-]+$")

TEXT_LENGTH = "string-length(normalize-space(.))"
DEPTH = "count(ancestor::*)"


def parse_int(text: str) -> int | None:
    if _INT_RE.match(text):
        return int(text)
    return None


def parse_pair(text: str) -> tuple[str, str] | None:
    """Split ``a,b`` or ``a:b`` into two trimmed halves."""
    parts = re.split(r"[,:]", text, maxsplit=1)
    if len(parts) != 2 or "," in parts[1] or ":" in parts[1]:
        return None
    return parts[0].strip(), parts[1].strip()


def parse_int_pair(text: str) -> tuple[int, int] | None:
    pair = parse_pair(text)
    if pair is None:
        return None
    low, high = parse_int(pair[0]), parse_int(pair[1])
    if low is None or high is None:
        return None
    return low, high


def compile_slice(ctx: PseudoContext) -> str:
    """``:slice(start:end)`` with a 0-based start and an exclusive end."""
    match = _SLICE_RE.match(ctx.argument.strip())
    if match is None:
        return MATCH_ALL
    start_text, end_text = match.groups()
    start = int(start_text) if start_text else 0
    if not end_text:
        return f"[position() >= {start + 1}]" if start else ""
    end = int(end_text)
    if start == 0:
        return f"[position() <= {end}]"
    return f"[position() >= {start + 1} and position() < {end + 1}]"


def compile_between(ctx: PseudoContext) -> str:
    """``:between(2,4)`` - 1-based, inclusive on both ends."""
    pair = parse_int_pair(ctx.argument)
    if pair is None:
        return MATCH_ALL
    return f"[position() >= {pair[0]} and position() <= {pair[1]}]"


def _bounded(expr: str):
    def handler(ctx: PseudoContext) -> str:
        pair = parse_int_pair(ctx.argument)
        if pair is None:
            return MATCH_ALL
        return f"[{expr} >= {pair[0]} and {expr} <= {pair[1]}]"

    return handler


def _compare(expr: str, operator: str):
    def handler(ctx: PseudoContext) -> str:
        value = parse_int(ctx.argument)
        if value is None:
            return MATCH_ALL
        return f"[{expr} {operator} {value}]"

    return handler


def _attr_length(operator: str):
    def handler(ctx: PseudoContext) -> str:
        pair = parse_pair(ctx.argument)
        if pair is None:
            return MATCH_ALL
        name, length = pair[0], parse_int(pair[1])
        if length is None or not _NAME_RE.match(name):
            return MATCH_ALL
        return f"[@{name} and string-length(@{name}) {operator} {length}]"

    return handler


def _index(operator: str):
    """jQuery-style 0-based ``:eq(n)``, ``:gt(n)``, ``:lt(n)``."""

    def handler(ctx: PseudoContext) -> str:
        value = parse_int(ctx.argument)
        if value is None:
            return MATCH_ALL
        return f"[position() {operator} {value + 1}]"

    return handler


_COMPARISONS = {"gt": ">", "lt": "<", "eq": "="}


def register(registry: PseudoRegistry) -> None:
    registry.register("slice", compile_slice)
    registry.register("between", compile_between)
    registry.register("text-length-between", _bounded(TEXT_LENGTH))
    registry.register("depth-between", _bounded(DEPTH))

    for suffix, operator in _COMPARISONS.items():
        registry.register(suffix, _index(operator))
        registry.register(f"text-length-{suffix}", _compare(TEXT_LENGTH, operator))
        registry.register(f"children-{suffix}", _compare("count(*)", operator))
        registry.register(f"attr-count-{suffix}", _compare("count(@*)", operator))
        registry.register(f"attr-length-{suffix}", _attr_length(operator))

    registry.register_static("depth-0", "[not(ancestor::*)]")
    for depth in range(1, 6):
        registry.register_static(f"depth-{depth}", f"[{DEPTH} = {depth}]")
