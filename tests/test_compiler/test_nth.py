"""Tests for the an+b position formula compiler."""

import pytest

from cssxpath.compiler.nth import NthFormula, compile_nth, parse_nth


# ---------------------------------------------------------------------------
# parse_nth
# ---------------------------------------------------------------------------


class TestParseNth:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("odd", NthFormula(2, 1)),
            ("EVEN", NthFormula(2, 0)),
            ("3", NthFormula(0, 3)),
            ("+3", NthFormula(0, 3)),
            ("n", NthFormula(1, 0)),
            ("-n+3", NthFormula(-1, 3)),
            ("2n+1", NthFormula(2, 1)),
            (" 2n + 1 ", NthFormula(2, 1)),
            ("3n-2", NthFormula(3, -2)),
            ("-2n", NthFormula(-2, 0)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_nth(text) == expected

    @pytest.mark.parametrize("text", ["", "first", "2x+1", "n+", "1.5"])
    def test_malformed(self, text):
        assert parse_nth(text) is None


# ---------------------------------------------------------------------------
# compile_nth: nth-child
# ---------------------------------------------------------------------------


class TestNthChild:
    def test_odd(self):
        assert compile_nth("odd") == "[position() mod 2 = 1]"

    def test_even(self):
        assert compile_nth("even") == "[position() mod 2 = 0]"

    def test_integer(self):
        assert compile_nth("3") == "[position() = 3]"

    def test_modulo_only(self):
        assert compile_nth("3n") == "[position() mod 3 = 0]"

    def test_positive_offset(self):
        assert compile_nth("2n+1") == "[position() >= 1 and position() mod 2 = 1]"

    def test_negative_offset_normalized_residue(self):
        assert compile_nth("3n-1") == "[position() >= -1 and position() mod 3 = 2]"

    def test_negative_coefficient_flips_comparison(self):
        assert compile_nth("-n+3") == "[position() <= 3 and position() mod 1 = 0]"

    def test_zero_coefficient(self):
        assert compile_nth("0n+4") == "[position() = 4]"

    def test_malformed_is_empty(self):
        assert compile_nth("bogus") == ""


# ---------------------------------------------------------------------------
# compile_nth: reverse and of-type variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_last_child_integer(self):
        assert compile_nth("2", reverse=True) == "[position() = last() - (2 - 1)]"

    def test_last_child_odd(self):
        assert compile_nth("odd", reverse=True) == "[(last() - position() + 1) mod 2 = 1]"

    def test_of_type_integer(self):
        assert (
            compile_nth("2", of_type=True, tag="li")
            == "[count(preceding-sibling::li) + 1 = 2]"
        )

    def test_of_type_even(self):
        assert (
            compile_nth("even", of_type=True, tag="li")
            == "[(count(preceding-sibling::li) + 1) mod 2 = 0]"
        )

    def test_last_of_type_formula(self):
        assert compile_nth("2n+1", reverse=True, of_type=True, tag="p") == (
            "[count(following-sibling::p) + 1 >= 1 and "
            "(count(following-sibling::p) + 1) mod 2 = 1]"
        )
