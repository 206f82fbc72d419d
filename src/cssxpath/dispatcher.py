"""Top-level entry point: dispatch css / xpath / regex and cache CSS results.

Usage::

    from cssxpath import compile

    compile("div.content > a[href^=http]")
    # '//div[contains(concat(" ", normalize-space(@class), " "), " content ")]/a[starts-with(@href, "http")]'

    compile("//div[@id='main']", "xpath")   # returned unchanged
    compile("/\\d{4}-\\d{2}/", "regex")     # returned unchanged
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Mapping

from cssxpath.cache import MemoryCache, SelectorCache
from cssxpath.compiler.literals import literal_renderer
from cssxpath.compiler.pseudo import PseudoRegistry, create_default_registry
from cssxpath.compiler.segment import compile_segment
from cssxpath.config import CompilerConfig
from cssxpath.errors import InvalidSelector
from cssxpath.model.expression import Expression, ExpressionType
from cssxpath.model.segment import Segment
from cssxpath.parser import (
    is_xpath_absolute,
    is_xpath_relative,
    parse_selector,
    split_selector_list,
)

__all__ = [
    "Compiler",
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
    "cache_key",
]

logger = logging.getLogger(__name__)

_REGEX_SELECTOR_RE = re.compile(r"^/.*/[imsxuADUX]*$")
_DANGLING_BRACKET_RE = re.compile(r"\[[^\]]*$")
_DELIMITED_RE = re.compile(
    r"""
    ^(?P<open>[^\w\s\\])     # opening delimiter
    (?P<body>.*)             # pattern body
    (?P<close>[^\w\s\\])     # closing delimiter
    (?P<flags>[a-zA-Z]*)$    # trailing modifiers
    """,
    re.VERBOSE | re.DOTALL,
)
_BRACKET_DELIMITERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
    # PCRE-only modifiers with no re counterpart; syntax is unaffected.
    "A": 0,
    "D": 0,
    "U": 0,
    "X": 0,
}


def cache_key(expression: str) -> str:
    """Cache key for a trimmed CSS expression."""
    return hashlib.md5(expression.encode("utf-8")).hexdigest()


def detect_selector_type(selector: str) -> ExpressionType:
    """Guess whether *selector* is a regex, an XPath path or a CSS selector.

    ``/.../flags`` is a regex, ``/a/b`` and ``//a`` are XPath, anything else
    is CSS.
    """
    if _REGEX_SELECTOR_RE.match(selector):
        return ExpressionType.REGEX
    if is_xpath_absolute(selector) or is_xpath_relative(selector):
        return ExpressionType.XPATH
    return ExpressionType.CSS


def _unbalanced(xpath: str) -> bool:
    return xpath.count("(") != xpath.count(")") or xpath.count("[") != xpath.count("]")


def _validate_regex(pattern: str) -> None:
    """Compile *pattern* and run it on an empty string.

    Accepts delimited patterns (``/body/flags``, ``{body}i`` ...) as well
    as bare ones.
    """
    body, flags = pattern, 0
    match = _DELIMITED_RE.match(pattern)
    if match and match.group("close") == _BRACKET_DELIMITERS.get(
        match.group("open"), match.group("open")
    ):
        body = match.group("body")
        for flag in match.group("flags"):
            if flag not in _REGEX_FLAGS:
                raise InvalidSelector(
                    f"Invalid regular expression {pattern!r}: unknown modifier {flag!r}",
                    expression=pattern,
                )
            flags |= _REGEX_FLAGS[flag]
    try:
        re.compile(body, flags).search("")
    except re.error as e:
        raise InvalidSelector(
            f"Invalid regular expression {pattern!r}: {e}",
            expression=pattern,
            position=e.pos,
            cause=e,
        ) from e


class Compiler:
    """CSS -> XPath compiler with a pluggable result cache.

    Args:
        config: Compilation options; defaults to :class:`CompilerConfig()`.
        cache: Where compiled CSS results are kept. A fresh
            :class:`MemoryCache` is used if None.
        registry: Pseudo-class handlers. The default registry if None.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        cache: SelectorCache | None = None,
        registry: PseudoRegistry | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        self.cache: SelectorCache = cache if cache is not None else MemoryCache()
        self.registry = registry or create_default_registry()
        self._literal = literal_renderer(self.config.escape_literals)

    # --- dispatch -------------------------------------------------------------

    def compile(
        self, expression: str, type: ExpressionType | str = ExpressionType.CSS
    ) -> str:
        """Compile *expression* into an XPath string (or a validated regex).

        Raises:
            UnsupportedExpressionType: *type* is not css, xpath or regex.
            InvalidSelector: the expression is empty, malformed, an
                unbalanced XPath literal, or an invalid regex.
        """
        kind = ExpressionType.parse(type)
        expression = expression.strip()
        if not expression:
            raise InvalidSelector("Selector expression must not be empty")

        if kind is ExpressionType.REGEX:
            _validate_regex(expression)
            return expression

        if kind is ExpressionType.XPATH:
            if _unbalanced(expression):
                raise InvalidSelector(
                    f"Invalid XPath expression {expression!r}: unbalanced brackets",
                    expression=expression,
                )
            return expression

        key = cache_key(expression)
        if self.config.cache_enabled:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Selector cache hit: %s", expression)
                return cached

        compiled = self.css_to_xpath(expression)
        if _DANGLING_BRACKET_RE.search(compiled):
            raise InvalidSelector(
                f"Invalid selector {expression!r}: unterminated attribute selector",
                expression=expression,
            )

        if self.config.cache_enabled:
            self.cache.set(key, compiled)
        logger.debug("Compiled selector %r -> %r", expression, compiled)
        return compiled

    def compile_expression(self, expression: Expression) -> str:
        return self.compile(expression.source, expression.type)

    # --- css pipeline ---------------------------------------------------------

    def css_to_xpath(self, selector: str) -> str:
        """Translate a CSS selector (or selector list) without touching the cache."""
        selector = selector.strip()
        if is_xpath_absolute(selector) or is_xpath_relative(selector):
            return selector

        branches = split_selector_list(selector)
        if len(branches) > 1:
            return " | ".join(self.css_to_xpath(branch) for branch in branches)

        segments = parse_selector(selector)
        if not segments:
            return "//*"
        return self.compile_segments(segments)

    def compile_segments(self, segments: list[Segment]) -> str:
        steps: list[str] = []
        for i, segment in enumerate(segments):
            step = compile_segment(
                segment,
                self.registry,
                is_first=i == 0,
                literal=self._literal,
                compile_css=self.css_to_xpath,
                sibling_first_only=self.config.sibling_first_only,
            )
            if i == 0 and not segment.is_xpath_passthrough:
                step = "//" + step
            steps.append(step)
        return "".join(steps)

    # --- cache management -----------------------------------------------------

    def get_compiled(self) -> dict[str, str]:
        return self.cache.snapshot()

    def set_compiled(self, entries: Mapping[str, str]) -> None:
        self.cache.replace(entries)

    def clear_compiled(self) -> None:
        self.cache.clear()


_default_compiler = Compiler()


def get_default_compiler() -> Compiler:
    """The process-wide compiler behind the module-level functions."""
    return _default_compiler


def compile(expression: str, type: ExpressionType | str = ExpressionType.CSS) -> str:
    return _default_compiler.compile(expression, type)


def css_to_xpath(selector: str) -> str:
    return _default_compiler.css_to_xpath(selector)


def get_compiled() -> dict[str, str]:
    return _default_compiler.get_compiled()


def set_compiled(entries: Mapping[str, str]) -> None:
    _default_compiler.set_compiled(entries)


def clear_compiled() -> None:
    _default_compiler.clear_compiled()


def reset() -> None:
    """Drop every cached result held by the default compiler."""
    _default_compiler.clear_compiled()
