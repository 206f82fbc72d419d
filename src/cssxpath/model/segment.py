"""Segment model: one compound selector step plus its combinator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Combinator(Enum):
    """Structural relationship between a segment and the one before it."""

    NONE = ""
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def from_token(cls, token: str) -> Combinator:
        """Map a combinator token (``>``, ``+``, ``~`` or whitespace)."""
        token = token.strip()
        if not token:
            return cls.DESCENDANT
        return cls(token)


@dataclass(frozen=True)
class AttributeSelector:
    """An attribute test such as ``[href^="http"]``.

    ``operator`` and ``value`` are both None for a bare existence test.
    """

    name: str
    operator: str | None = None
    value: str | None = None
    case_insensitive: bool = False


@dataclass(frozen=True)
class Pseudo:
    """A pseudo-class (``:name(arg)``) or pseudo-element (``::name(arg)``)."""

    name: str
    argument: str = ""
    is_element: bool = False

    def __str__(self) -> str:
        prefix = "::" if self.is_element else ":"
        arg = f"({self.argument})" if self.argument else ""
        return f"{prefix}{self.name}{arg}"


@dataclass(frozen=True)
class Segment:
    """A compound selector step.

    A passthrough segment carries a raw XPath string in ``xpath`` and leaves
    every other field at its default.
    """

    combinator: Combinator = Combinator.NONE
    tag: str = "*"
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[AttributeSelector, ...] = ()
    pseudo: Pseudo | None = None
    extra_pseudos: tuple[Pseudo, ...] = ()
    xpath: str | None = None

    @classmethod
    def passthrough(cls, xpath: str) -> Segment:
        return cls(xpath=xpath)

    @property
    def is_xpath_passthrough(self) -> bool:
        return self.xpath is not None

    @property
    def pseudo_element(self) -> Pseudo | None:
        """The pseudo-element on this step, if any (e.g. ``::text``)."""
        if self.pseudo is not None and self.pseudo.is_element:
            return self.pseudo
        return None

    @property
    def pseudo_classes(self) -> tuple[Pseudo, ...]:
        """All pseudo-classes to compile, primary first."""
        primary = () if self.pseudo is None or self.pseudo.is_element else (self.pseudo,)
        return primary + self.extra_pseudos
