"""Structural pseudo-classes: sibling position, nth formulas, tree shape."""

from __future__ import annotations

from cssxpath.compiler.nth import compile_nth
from cssxpath.compiler.pseudo.base import PseudoContext, PseudoRegistry

_STATIC = {
    "first-child": "[not(preceding-sibling::*)]",
    "last-child": "[not(following-sibling::*)]",
    "only-child": "[not(preceding-sibling::*) and not(following-sibling::*)]",
    "root": "[not(parent::*)]",
    "empty": "[not(*) and not(text()[normalize-space()])]",
    "parent": "[*]",
    "blank": "[not(text()[normalize-space()]) and not(*)]",
    "parent-only-text": "[text()[normalize-space()] and not(*)]",
    # jQuery-style positional shorthands
    "first": "[1]",
    "last": "[last()]",
    "even": "[position() mod 2 = 0]",
    "odd": "[position() mod 2 = 1]",
}


def first_of_type(ctx: PseudoContext) -> str:
    return f"[not(preceding-sibling::{ctx.tag})]"


def last_of_type(ctx: PseudoContext) -> str:
    return f"[not(following-sibling::{ctx.tag})]"


def only_of_type(ctx: PseudoContext) -> str:
    return f"[not(preceding-sibling::{ctx.tag}) and not(following-sibling::{ctx.tag})]"


def nth_child(ctx: PseudoContext) -> str:
    return compile_nth(ctx.argument)


def nth_last_child(ctx: PseudoContext) -> str:
    return compile_nth(ctx.argument, reverse=True)


def nth_of_type(ctx: PseudoContext) -> str:
    return compile_nth(ctx.argument, of_type=True, tag=ctx.tag)


def nth_last_of_type(ctx: PseudoContext) -> str:
    return compile_nth(ctx.argument, reverse=True, of_type=True, tag=ctx.tag)


def register(registry: PseudoRegistry) -> None:
    for name, predicate in _STATIC.items():
        registry.register_static(name, predicate)
    registry.register("first-of-type", first_of_type)
    registry.register("last-of-type", last_of_type)
    registry.register("only-of-type", only_of_type)
    registry.register("nth-child", nth_child)
    registry.register("nth-last-child", nth_last_child)
    registry.register("nth-of-type", nth_of_type)
    registry.register("nth-last-of-type", nth_last_of_type)
