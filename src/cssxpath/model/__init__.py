"""cssxpath model layer -- public type re-exports."""

from cssxpath.model.expression import Expression, ExpressionType
from cssxpath.model.segment import AttributeSelector, Combinator, Pseudo, Segment

__all__ = [
    # segment
    "Combinator",
    "AttributeSelector",
    "Pseudo",
    "Segment",
    # expression
    "ExpressionType",
    "Expression",
]
