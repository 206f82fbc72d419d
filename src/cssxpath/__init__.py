"""cssxpath - compile CSS-like selectors into XPath 1.0 expressions."""

from cssxpath.cache import MemoryCache, SelectorCache
from cssxpath.config import CompilerConfig
from cssxpath.dispatcher import (
    Compiler,
    clear_compiled,
    compile,
    css_to_xpath,
    detect_selector_type,
    get_compiled,
    get_default_compiler,
    is_xpath_absolute,
    is_xpath_relative,
    parse_selector,
    reset,
    set_compiled,
)
from cssxpath.errors import InvalidSelector, SelectorError, UnsupportedExpressionType
from cssxpath.model import (
    AttributeSelector,
    Combinator,
    Expression,
    ExpressionType,
    Pseudo,
    Segment,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "compile",
    "css_to_xpath",
    "parse_selector",
    "detect_selector_type",
    "is_xpath_absolute",
    "is_xpath_relative",
    "get_compiled",
    "set_compiled",
    "clear_compiled",
    "reset",
    "get_default_compiler",
    "Compiler",
    "CompilerConfig",
    "SelectorCache",
    "MemoryCache",
    "SelectorError",
    "InvalidSelector",
    "UnsupportedExpressionType",
    "AttributeSelector",
    "Combinator",
    "Expression",
    "ExpressionType",
    "Pseudo",
    "Segment",
]
