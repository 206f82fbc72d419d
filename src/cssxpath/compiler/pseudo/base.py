"""Pseudo-class registry: maps pseudo-class names to predicate handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from cssxpath.compiler.literals import LiteralRenderer, raw_literal

logger = logging.getLogger(__name__)

MATCH_ALL = "[true()]"


@dataclass(frozen=True)
class PseudoContext:
    """Everything a handler may look at when compiling one pseudo-class.

    Attributes:
        name: Pseudo-class name, lower-cased (``nth-child``).
        argument: Text between the parentheses, trimmed; ``""`` if none.
        tag: Tag name of the compound the pseudo-class is attached to.
        literal: Renders a string value as an XPath literal.
        compile_css: Compiles a nested CSS selector (used by ``:has()``).
    """

    name: str
    argument: str = ""
    tag: str = "*"
    literal: LiteralRenderer = raw_literal
    compile_css: Callable[[str], str] | None = None


class PseudoHandler(Protocol):
    """Compiles a pseudo-class into a bracketed XPath predicate."""

    def __call__(self, ctx: PseudoContext) -> str: ...


class StaticPredicate:
    """Handler that always returns the same predicate."""

    def __init__(self, predicate: str) -> None:
        self.predicate = predicate

    def __call__(self, ctx: PseudoContext) -> str:
        return self.predicate

    def __repr__(self) -> str:
        return f"StaticPredicate({self.predicate!r})"


class PseudoRegistry:
    """Maps pseudo-class names to handler implementations."""

    def __init__(self) -> None:
        self._handlers: dict[str, PseudoHandler] = {}

    def register(self, name: str, handler: PseudoHandler) -> None:
        """Register a handler for a pseudo-class name (replaces any existing one)."""
        self._handlers[name.lower()] = handler

    def register_static(self, name: str, predicate: str) -> None:
        self.register(name, StaticPredicate(predicate))

    def resolve(self, name: str) -> PseudoHandler | None:
        return self._handlers.get(name.lower())

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def compile(self, ctx: PseudoContext) -> str:
        """Compile *ctx* with the registered handler.

        Unknown pseudo-classes compile to ``""`` so the step still matches;
        pseudo-elements such as ``::text`` are left to the evaluator.
        """
        handler = self.resolve(ctx.name)
        if handler is None:
            logger.debug("No handler for pseudo-class %r; ignoring it", ctx.name)
            return ""
        return handler(ctx)
