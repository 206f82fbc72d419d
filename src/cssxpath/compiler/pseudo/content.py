"""Text and attribute content pseudo-classes."""

from __future__ import annotations

import re

from cssxpath.compiler.pseudo.base import MATCH_ALL, PseudoContext, PseudoRegistry

_NAME_RE = re.compile(r"^[\w-]+$")


def unquote(argument: str) -> str:
    """Strip one pair of matching surrounding quotes, if present."""
    text = argument.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def _name_arg(ctx: PseudoContext) -> str | None:
    name = unquote(ctx.argument)
    return name if _NAME_RE.match(name) else None


def contains(ctx: PseudoContext) -> str:
    return f"[contains(string(.), {ctx.literal(unquote(ctx.argument))})]"


def contains_text(ctx: PseudoContext) -> str:
    return f"[contains(., {ctx.literal(unquote(ctx.argument))})]"


def starts_with(ctx: PseudoContext) -> str:
    return f"[starts-with(., {ctx.literal(unquote(ctx.argument))})]"


def ends_with(ctx: PseudoContext) -> str:
    value = ctx.literal(unquote(ctx.argument))
    return f"[substring(., string-length(.) - string-length({value}) + 1) = {value}]"


def text_match(ctx: PseudoContext) -> str:
    """``:text-match(abc*)`` is a prefix match, anything else exact."""
    pattern = unquote(ctx.argument)
    if pattern.endswith("*"):
        return f"[starts-with(., {ctx.literal(pattern[:-1])})]"
    return f"[.={ctx.literal(pattern)}]"


def attr_match(ctx: PseudoContext) -> str:
    """``:attr-match(name,pattern)`` with the same trailing ``*`` rule."""
    parts = ctx.argument.split(",")
    if len(parts) != 2:
        return MATCH_ALL
    name = parts[0].strip()
    pattern = unquote(parts[1])
    if not _NAME_RE.match(name):
        return MATCH_ALL
    if pattern.endswith("*"):
        return f"[@{name} and starts-with(@{name}, {ctx.literal(pattern[:-1])})]"
    return f"[@{name}={ctx.literal(pattern)}]"


def has_attr(ctx: PseudoContext) -> str:
    name = _name_arg(ctx)
    return f"[@{name}]" if name else ""


def data(ctx: PseudoContext) -> str:
    name = _name_arg(ctx)
    return f"[@data-{name}]" if name else ""


def lang(ctx: PseudoContext) -> str:
    code = unquote(ctx.argument)
    if not code:
        return ""
    return f"[@lang={ctx.literal(code)} or starts-with(@lang, {ctx.literal(code + '-')})]"


def direction(ctx: PseudoContext) -> str:
    value = unquote(ctx.argument).lower()
    if not value:
        return ""
    return f"[@dir={ctx.literal(value)}]"


def register(registry: PseudoRegistry) -> None:
    registry.register("contains", contains)
    registry.register("contains-text", contains_text)
    registry.register("starts-with", starts_with)
    registry.register("ends-with", ends_with)
    registry.register("text-match", text_match)
    registry.register("attr-match", attr_match)
    registry.register("has-attr", has_attr)
    registry.register("data", data)
    registry.register("lang", lang)
    registry.register("dir", direction)
