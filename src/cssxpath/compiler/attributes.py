"""Attribute selector -> XPath predicate."""

from __future__ import annotations

from cssxpath.compiler.literals import LiteralRenderer, raw_literal
from cssxpath.model.segment import AttributeSelector

__all__ = ["compile_attribute", "attribute_condition", "class_condition", "token_condition"]

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"


def token_condition(ref: str, token: str, literal: LiteralRenderer = raw_literal) -> str:
    """Whitespace-separated token membership, the technique used for ``@class``."""
    return f'contains(concat(" ", normalize-space({ref}), " "), {literal(f" {token} ")})'


def class_condition(name: str, literal: LiteralRenderer = raw_literal) -> str:
    return token_condition("@class", name, literal)


def attribute_condition(
    attr: AttributeSelector, literal: LiteralRenderer = raw_literal
) -> str:
    """Return the bare XPath condition (no brackets) for an attribute selector."""
    name = attr.name
    operator = attr.operator or ""
    value = attr.value or ""

    exists = f"@{name}"
    ref = exists
    if attr.case_insensitive and operator:
        ref = f'translate(@{name}, "{_UPPER}", "{_LOWER}")'
        value = value.lower()
    quoted = literal(value)

    if operator == "=":
        return f"{ref}={quoted}"
    if operator == "!=":
        # A missing attribute never satisfies != in CSS.
        return f"{exists} and {ref}!={quoted}"
    if operator == "^=":
        return f"starts-with({ref}, {quoted})"
    if operator == "$=":
        # No ends-with() in XPath 1.0.
        return (
            f"{exists} and substring({ref}, string-length({ref}) - "
            f"string-length({quoted}) + 1) = {quoted}"
        )
    if operator == "*=":
        return f"contains({ref}, {quoted})"
    if operator == "~=":
        return token_condition(ref, value, literal)
    if operator == "|=":
        return f"{ref}={quoted} or starts-with({ref}, {literal(value + '-')})"
    return exists


def compile_attribute(
    attr: AttributeSelector, literal: LiteralRenderer = raw_literal
) -> str:
    """Compile an attribute selector into a bracketed predicate.

    >>> compile_attribute(AttributeSelector("href", "^=", "http"))
    '[starts-with(@href, "http")]'
    """
    return f"[{attribute_condition(attr, literal)}]"
