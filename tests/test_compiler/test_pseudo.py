"""Tests for the pseudo-class registry and its built-in handlers."""

import logging

import pytest

from cssxpath import css_to_xpath
from cssxpath.compiler.pseudo import (
    MATCH_ALL,
    PseudoContext,
    PseudoRegistry,
    StaticPredicate,
    create_default_registry,
)
from cssxpath.compiler.pseudo.content import unquote
from cssxpath.compiler.pseudo.logical import compile_has
from cssxpath.compiler.pseudo.ranges import parse_int_pair, parse_pair


@pytest.fixture
def registry():
    return create_default_registry()


def compile_pseudo(registry, name, argument="", tag="*"):
    ctx = PseudoContext(name=name, argument=argument, tag=tag, compile_css=css_to_xpath)
    return registry.compile(ctx)


# ---------------------------------------------------------------------------
# PseudoRegistry
# ---------------------------------------------------------------------------


class TestPseudoRegistry:
    def test_register_and_resolve(self):
        reg = PseudoRegistry()
        reg.register_static("x-flag", "[@x]")
        assert "x-flag" in reg
        assert isinstance(reg.resolve("x-flag"), StaticPredicate)
        assert len(reg) == 1

    def test_names_are_case_insensitive(self):
        reg = PseudoRegistry()
        reg.register_static("Hover", "[@hover]")
        assert reg.resolve("HOVER") is not None
        assert reg.names() == ["hover"]

    def test_later_registration_replaces(self):
        reg = PseudoRegistry()
        reg.register_static("x", "[1]")
        reg.register_static("x", "[2]")
        assert reg.compile(PseudoContext(name="x")) == "[2]"

    def test_custom_handler(self):
        reg = PseudoRegistry()
        reg.register("even-id", lambda ctx: f"[@id mod 2 = 0][{ctx.tag}]")
        assert reg.compile(PseudoContext(name="even-id", tag="li")) == "[@id mod 2 = 0][li]"

    def test_unknown_is_empty(self, registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssxpath"):
            assert compile_pseudo(registry, "no-such-thing") == ""
        assert "no-such-thing" in caplog.text

    def test_default_registry_is_large(self, registry):
        assert len(registry) > 100
        assert "nth-child" in registry
        assert "attr-length-gt" in registry
        assert "depth-5" in registry


# ---------------------------------------------------------------------------
# Structural
# ---------------------------------------------------------------------------


class TestStructural:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("first-child", "[not(preceding-sibling::*)]"),
            ("last-child", "[not(following-sibling::*)]"),
            ("only-child", "[not(preceding-sibling::*) and not(following-sibling::*)]"),
            ("root", "[not(parent::*)]"),
            ("first", "[1]"),
            ("last", "[last()]"),
        ],
    )
    def test_static(self, registry, name, expected):
        assert compile_pseudo(registry, name) == expected

    def test_first_of_type_uses_tag(self, registry):
        assert compile_pseudo(registry, "first-of-type", tag="p") == (
            "[not(preceding-sibling::p)]"
        )

    def test_only_of_type(self, registry):
        assert compile_pseudo(registry, "only-of-type", tag="p") == (
            "[not(preceding-sibling::p) and not(following-sibling::p)]"
        )

    def test_nth_child_odd(self, registry):
        assert compile_pseudo(registry, "nth-child", "odd") == "[position() mod 2 = 1]"

    def test_nth_of_type(self, registry):
        assert compile_pseudo(registry, "nth-of-type", "2", tag="li") == (
            "[count(preceding-sibling::li) + 1 = 2]"
        )

    def test_nth_last_child(self, registry):
        assert compile_pseudo(registry, "nth-last-child", "2") == (
            "[position() = last() - (2 - 1)]"
        )


# ---------------------------------------------------------------------------
# State and element tables
# ---------------------------------------------------------------------------


class TestStateTables:
    def test_link_requires_anchor_with_href(self, registry):
        assert compile_pseudo(registry, "link") == "[self::a and @href]"

    def test_input_type(self, registry):
        assert compile_pseudo(registry, "checkbox") == '[@type="checkbox"]'

    def test_element_name(self, registry):
        assert compile_pseudo(registry, "nav") == "[self::nav]"

    def test_direction_shorthand(self, registry):
        assert compile_pseudo(registry, "dir-rtl") == '[@dir="rtl"]'

    def test_ui_state_is_attribute_approximation(self, registry):
        assert compile_pseudo(registry, "hover") == "[@hover]"

    def test_checked(self, registry):
        assert compile_pseudo(registry, "checked") == '[@checked="checked" or @checked]'


# ---------------------------------------------------------------------------
# :not() and :has()
# ---------------------------------------------------------------------------


class TestLogical:
    def test_not_class(self, registry):
        assert compile_pseudo(registry, "not", ".active") == (
            '[not(contains(concat(" ", normalize-space(@class), " "), " active "))]'
        )

    def test_not_id(self, registry):
        assert compile_pseudo(registry, "not", "#x") == '[not(@id="x")]'

    def test_not_attribute(self, registry):
        assert compile_pseudo(registry, "not", "[disabled]") == "[not(@disabled)]"

    def test_not_list_is_conjunction(self, registry):
        assert compile_pseudo(registry, "not", "#a, #b") == (
            '[not(@id="a") and not(@id="b")]'
        )

    def test_not_tag_only_dropped(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="cssxpath"):
            assert compile_pseudo(registry, "not", "div") == ""
        assert "ignored" in caplog.text

    def test_has_tag(self, registry):
        assert compile_pseudo(registry, "has", "a") == "[a]"

    def test_has_class(self, registry):
        assert compile_pseudo(registry, "has", ".item") == (
            '[*[contains(concat(" ", normalize-space(@class), " "), " item ")]]'
        )

    def test_has_list_is_union(self, registry):
        assert compile_pseudo(registry, "has", "a, img") == "[a | img]"

    def test_has_without_compiler(self):
        with pytest.raises(ValueError):
            compile_has(PseudoContext(name="has", argument="a"))


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TestContent:
    def test_unquote(self):
        assert unquote('"x"') == "x"
        assert unquote("'x'") == "x"
        assert unquote("\"x'") == "\"x'"

    def test_contains(self, registry):
        assert compile_pseudo(registry, "contains", '"Hello World"') == (
            '[contains(string(.), "Hello World")]'
        )

    def test_starts_with(self, registry):
        assert compile_pseudo(registry, "starts-with", "Intro") == (
            '[starts-with(., "Intro")]'
        )

    def test_text_match_prefix(self, registry):
        assert compile_pseudo(registry, "text-match", "test*") == (
            '[starts-with(., "test")]'
        )

    def test_text_match_exact(self, registry):
        assert compile_pseudo(registry, "text-match", "test") == '[.="test"]'

    def test_attr_match_prefix(self, registry):
        assert compile_pseudo(registry, "attr-match", "class,nav*") == (
            '[@class and starts-with(@class, "nav")]'
        )

    def test_attr_match_malformed(self, registry):
        assert compile_pseudo(registry, "attr-match", "class") == MATCH_ALL

    def test_lang(self, registry):
        assert compile_pseudo(registry, "lang", "en") == (
            '[@lang="en" or starts-with(@lang, "en-")]'
        )

    def test_data(self, registry):
        assert compile_pseudo(registry, "data", "id") == "[@data-id]"

    def test_has_attr_rejects_bad_name(self, registry):
        assert compile_pseudo(registry, "has-attr", "a b") == ""


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


class TestRanges:
    def test_parse_pair_separators(self):
        assert parse_pair("2,4") == ("2", "4")
        assert parse_pair("2:4") == ("2", "4")
        assert parse_pair("2") is None
        assert parse_pair("1,2,3") is None

    def test_parse_int_pair(self):
        assert parse_int_pair(" 2 , 4 ") == (2, 4)
        assert parse_int_pair("a,4") is None

    @pytest.mark.parametrize(
        "argument, expected",
        [
            ("1:3", "[position() >= 2 and position() < 4]"),
            (":2", "[position() <= 2]"),
            ("2:", "[position() >= 3]"),
            (":", ""),
            ("x:y", MATCH_ALL),
        ],
    )
    def test_slice(self, registry, argument, expected):
        assert compile_pseudo(registry, "slice", argument) == expected

    def test_between(self, registry):
        assert compile_pseudo(registry, "between", "2,4") == (
            "[position() >= 2 and position() <= 4]"
        )

    def test_between_malformed(self, registry):
        assert compile_pseudo(registry, "between", "2") == MATCH_ALL

    def test_depth_between(self, registry):
        assert compile_pseudo(registry, "depth-between", "1,3") == (
            "[count(ancestor::*) >= 1 and count(ancestor::*) <= 3]"
        )

    def test_eq_is_zero_based(self, registry):
        assert compile_pseudo(registry, "eq", "0") == "[position() = 1]"

    def test_gt(self, registry):
        assert compile_pseudo(registry, "gt", "2") == "[position() > 3]"

    def test_text_length_gt(self, registry):
        assert compile_pseudo(registry, "text-length-gt", "5") == (
            "[string-length(normalize-space(.)) > 5]"
        )

    def test_children_lt(self, registry):
        assert compile_pseudo(registry, "children-lt", "3") == "[count(*) < 3]"

    def test_attr_length_gt(self, registry):
        assert compile_pseudo(registry, "attr-length-gt", "data-value,10") == (
            "[@data-value and string-length(@data-value) > 10]"
        )

    def test_attr_length_malformed(self, registry):
        assert compile_pseudo(registry, "attr-length-eq", "data-value") == MATCH_ALL

    def test_depth_fixed(self, registry):
        assert compile_pseudo(registry, "depth-0") == "[not(ancestor::*)]"
        assert compile_pseudo(registry, "depth-3") == "[count(ancestor::*) = 3]"
