"""Segment -> XPath location step."""

from __future__ import annotations

from typing import Callable

from cssxpath.compiler.attributes import class_condition, compile_attribute
from cssxpath.compiler.literals import LiteralRenderer, raw_literal
from cssxpath.compiler.pseudo import PseudoContext, PseudoRegistry
from cssxpath.model.segment import Combinator, Segment

__all__ = ["compile_segment", "combinator_prefix"]

_SIBLING_AXIS = "/following-sibling::"


def combinator_prefix(combinator: Combinator, *, is_first: bool) -> str:
    if combinator is Combinator.CHILD:
        return "/"
    if combinator in (Combinator.ADJACENT_SIBLING, Combinator.GENERAL_SIBLING):
        return _SIBLING_AXIS
    # descendant; the caller prefixes the first step with "//" itself
    return "" if is_first else "//"


def compile_segment(
    segment: Segment,
    registry: PseudoRegistry,
    *,
    is_first: bool = False,
    literal: LiteralRenderer = raw_literal,
    compile_css: Callable[[str], str] | None = None,
    sibling_first_only: bool = True,
) -> str:
    """Compile one segment into an XPath step with its predicates.

    Order: combinator prefix, tag, ``[1]`` for sibling combinators, id,
    classes, attributes, then pseudo-classes.  Pseudo-elements produce no
    predicate; the evaluator applies them to the compiled result.
    """
    if segment.is_xpath_passthrough:
        return segment.xpath or ""

    parts = [combinator_prefix(segment.combinator, is_first=is_first), segment.tag]

    if segment.combinator is Combinator.ADJACENT_SIBLING or (
        segment.combinator is Combinator.GENERAL_SIBLING and sibling_first_only
    ):
        parts.append("[1]")

    if segment.id:
        parts.append(f"[@id={literal(segment.id)}]")

    for name in segment.classes:
        parts.append(f"[{class_condition(name, literal)}]")

    for attr in segment.attributes:
        parts.append(compile_attribute(attr, literal))

    for pseudo in segment.pseudo_classes:
        ctx = PseudoContext(
            name=pseudo.name,
            argument=pseudo.argument,
            tag=segment.tag,
            literal=literal,
            compile_css=compile_css,
        )
        parts.append(registry.compile(ctx))

    return "".join(parts)
