"""Position formulas (``an+b``) for the nth-* pseudo-classes.

Every variant is expressed through a 1-based position term:

    nth-child           position()
    nth-last-child      last() - position() + 1
    nth-of-type         count(preceding-sibling::T) + 1
    nth-last-of-type    count(following-sibling::T) + 1

and the formula is then reduced to an equality, a modulo test, or a
bounded modulo test depending on which of ``a`` and ``b`` are zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["NthFormula", "parse_nth", "compile_nth"]

_FORMULA_RE = re.compile(r"^(?P<a>[+-]?\d*)n(?P<b>[+-]\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class NthFormula:
    a: int
    b: int


def parse_nth(formula: str) -> NthFormula | None:
    """Parse ``odd``, ``even``, ``an+b`` or a bare integer; None if malformed."""
    text = re.sub(r"\s+", "", formula.lower())
    if text == "even":
        return NthFormula(2, 0)
    if text == "odd":
        return NthFormula(2, 1)
    if _INTEGER_RE.match(text):
        return NthFormula(0, int(text))
    match = _FORMULA_RE.match(text)
    if match is None:
        return None
    coefficient = match.group("a")
    if coefficient in ("", "+"):
        a = 1
    elif coefficient == "-":
        a = -1
    else:
        a = int(coefficient)
    b = int(match.group("b") or 0)
    return NthFormula(a, b)


def _position_term(reverse: bool, of_type: bool, tag: str) -> str:
    if of_type:
        axis = "following-sibling" if reverse else "preceding-sibling"
        return f"count({axis}::{tag}) + 1"
    if reverse:
        return "last() - position() + 1"
    return "position()"


def compile_nth(
    formula: str, *, reverse: bool = False, of_type: bool = False, tag: str = "*"
) -> str:
    """Compile an nth-* argument into a predicate; ``""`` if it can't be parsed.

    >>> compile_nth("odd")
    '[position() mod 2 = 1]'
    >>> compile_nth("3", reverse=True)
    '[position() = last() - (3 - 1)]'
    """
    parsed = parse_nth(formula)
    if parsed is None:
        return ""
    a, b = parsed.a, parsed.b

    term = _position_term(reverse, of_type, tag)
    grouped = term if term == "position()" else f"({term})"

    if a == 0:
        if reverse and not of_type:
            return f"[position() = last() - ({b} - 1)]"
        return f"[{term} = {b}]"

    step = abs(a)
    if b == 0:
        return f"[{grouped} mod {step} = 0]"
    if formula.strip().lower() == "odd":
        return f"[{grouped} mod 2 = 1]"

    residue = b % step
    comparison = ">=" if a > 0 else "<="
    return f"[{term} {comparison} {b} and {grouped} mod {step} = {residue}]"
