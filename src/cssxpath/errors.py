"""Error hierarchy for selector compilation."""

from __future__ import annotations


class SelectorError(Exception):
    """Base error for everything raised by cssxpath."""

    def __init__(
        self,
        message: str,
        *,
        expression: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.expression = expression
        self.cause = cause


class InvalidSelector(SelectorError):
    """The expression is empty, malformed, or fails its syntax check."""

    def __init__(
        self,
        message: str,
        *,
        expression: str = "",
        position: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, expression=expression, cause=cause)
        self.position = position


class UnsupportedExpressionType(SelectorError):
    """The requested expression type is not one of css, xpath or regex."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported expression type: {type_name!r}")
        self.type_name = type_name
