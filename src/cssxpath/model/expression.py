"""Expression model: the css / xpath / regex tagged union."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cssxpath.errors import UnsupportedExpressionType


class ExpressionType(Enum):
    """Kinds of expression the dispatcher understands."""

    CSS = "css"
    XPATH = "xpath"
    REGEX = "regex"

    @classmethod
    def parse(cls, value: ExpressionType | str) -> ExpressionType:
        """Resolve an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedExpressionType(str(value))


@dataclass(frozen=True)
class Expression:
    """A selector source string tagged with how it should be compiled."""

    type: ExpressionType
    source: str

    @classmethod
    def css(cls, source: str) -> Expression:
        return cls(ExpressionType.CSS, source)

    @classmethod
    def xpath(cls, source: str) -> Expression:
        return cls(ExpressionType.XPATH, source)

    @classmethod
    def regex(cls, source: str) -> Expression:
        return cls(ExpressionType.REGEX, source)
