"""Selector parsing: list splitting, segment assembly and compound parsing."""

from cssxpath.parser.assembler import (
    is_xpath_absolute,
    is_xpath_relative,
    parse_selector,
    tokenize_selector,
)
from cssxpath.parser.compound import parse_compound
from cssxpath.parser.splitter import split_selector_list

__all__ = [
    "parse_selector",
    "parse_compound",
    "tokenize_selector",
    "split_selector_list",
    "is_xpath_absolute",
    "is_xpath_relative",
]
