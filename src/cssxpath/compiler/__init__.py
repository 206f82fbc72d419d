"""CSS segment compilation: attributes, pseudo-classes and location steps."""

from cssxpath.compiler.attributes import attribute_condition, class_condition, compile_attribute
from cssxpath.compiler.literals import escaped_literal, raw_literal, xpath_literal
from cssxpath.compiler.nth import compile_nth, parse_nth
from cssxpath.compiler.pseudo import PseudoContext, PseudoRegistry, create_default_registry
from cssxpath.compiler.segment import compile_segment

__all__ = [
    "compile_segment",
    "compile_attribute",
    "attribute_condition",
    "class_condition",
    "compile_nth",
    "parse_nth",
    "xpath_literal",
    "raw_literal",
    "escaped_literal",
    "PseudoContext",
    "PseudoRegistry",
    "create_default_registry",
]
