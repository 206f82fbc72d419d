"""Pseudo-class handlers and the default registry."""

from cssxpath.compiler.pseudo import content, logical, ranges, state, structural
from cssxpath.compiler.pseudo.base import (
    MATCH_ALL,
    PseudoContext,
    PseudoHandler,
    PseudoRegistry,
    StaticPredicate,
)

__all__ = [
    "MATCH_ALL",
    "PseudoContext",
    "PseudoHandler",
    "PseudoRegistry",
    "StaticPredicate",
    "create_default_registry",
]


def create_default_registry() -> PseudoRegistry:
    """Create a PseudoRegistry with every built-in pseudo-class registered.

    Returns:
        A registry covering structural, logical, content, numeric-range and
        fixed state/element pseudo-classes.
    """
    registry = PseudoRegistry()

    # Fixed predicates first so the dedicated handlers below take precedence.
    state.register(registry)

    # first-child, nth-*, *-of-type, empty, root, ...
    structural.register(registry)

    # :not() / :has()
    logical.register(registry)

    # :contains(), :lang(), :attr-match(), ...
    content.register(registry)

    # :slice(), :between(), :text-length-*, :depth-*, :children-*, ...
    ranges.register(registry)

    return registry
