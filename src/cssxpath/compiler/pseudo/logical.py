"""Negation (``:not``) and containment (``:has``)."""

from __future__ import annotations

import logging

from cssxpath.compiler.attributes import attribute_condition, class_condition
from cssxpath.compiler.pseudo.base import PseudoContext, PseudoRegistry
from cssxpath.parser import parse_selector, split_selector_list

logger = logging.getLogger(__name__)


def compile_not(ctx: PseudoContext) -> str:
    """Negate the id, class and attribute parts of each selector in the argument.

    Tag names and pseudo-classes inside ``:not()`` are not supported and
    are dropped (with a warning); only the first compound of a selector
    with combinators is considered.  When nothing negatable remains the
    result is ``""``, so ``div:not(:first-child)`` matches every ``div``.
    """
    conditions: list[str] = []
    for branch in split_selector_list(ctx.argument):
        segments = parse_selector(branch)
        if not segments or segments[0].is_xpath_passthrough:
            logger.warning(":not(%s) - XPath arguments are not supported", branch)
            continue
        if len(segments) > 1:
            logger.warning(":not(%s) - only the first compound is negated", branch)
        segment = segments[0]
        if segment.tag != "*" or segment.pseudo is not None:
            logger.warning(
                ":not(%s) - tag names and pseudo-classes are ignored", branch
            )

        if segment.id is not None:
            conditions.append(f"not(@id={ctx.literal(segment.id)})")
        for name in segment.classes:
            conditions.append(f"not({class_condition(name, ctx.literal)})")
        for attr in segment.attributes:
            conditions.append(f"not({attribute_condition(attr, ctx.literal)})")

    if not conditions:
        return ""
    return "[" + " and ".join(conditions) + "]"


def _relative(xpath: str) -> str:
    if xpath.startswith("//"):
        return xpath[2:]
    return xpath


def compile_has(ctx: PseudoContext) -> str:
    """Existence predicate for the nested selector, relative to the element.

    ``div:has(a)`` -> ``//div[a]``
    """
    if ctx.compile_css is None:
        raise ValueError(":has() needs a compile_css callback in its context")
    branches = [
        _relative(ctx.compile_css(branch))
        for branch in split_selector_list(ctx.argument)
    ]
    if not branches:
        return ""
    return "[" + " | ".join(branches) + "]"


def register(registry: PseudoRegistry) -> None:
    registry.register("not", compile_not)
    registry.register("has", compile_has)
