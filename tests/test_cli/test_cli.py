"""Tests for the cssxpath command line."""

from click.testing import CliRunner

from cssxpath import __version__
from cssxpath.cli.main import cli


def run(*args):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_single_selector(self):
        result = run("compile", "div > p")
        assert result.exit_code == 0
        assert result.output == "//div/p\n"

    def test_one_line_per_selector(self):
        result = run("compile", "div", "a[href]")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["//div", "//a[@href]"]

    def test_xpath_type(self):
        result = run("compile", "--type", "xpath", "//a[@id='x']")
        assert result.exit_code == 0
        assert result.output.strip() == "//a[@id='x']"

    def test_invalid_selector_exits_1(self):
        result = run("compile", "div[data-id")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_valid_selectors_still_printed(self):
        result = run("compile", "div", "div[data-id", "p")
        assert result.exit_code == 1
        assert "//div" in result.output
        assert "//p" in result.output

    def test_escape_literals(self):
        result = run("compile", "--escape-literals", "a[title='say \"hi\"']")
        assert result.exit_code == 0
        assert result.output.strip() == "//a[@title='say \"hi\"']"

    def test_exact_siblings(self):
        result = run("compile", "--exact-siblings", "h1 ~ p")
        assert result.output.strip() == "//h1/following-sibling::p"

    def test_requires_selector(self):
        result = run("compile")
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# detect / inspect
# ---------------------------------------------------------------------------


class TestDetectCommand:
    def test_css(self):
        assert run("detect", "div.a").output.strip() == "css"

    def test_xpath(self):
        assert run("detect", "//div").output.strip() == "xpath"

    def test_regex(self):
        assert run("detect", "/^a+$/i").output.strip() == "regex"


class TestInspectCommand:
    def test_segments_listed(self):
        result = run("inspect", "div#main > a.link[href^=http]:first-child")
        assert result.exit_code == 0
        assert "Selector 1: 2 segment(s)" in result.output
        assert "tag=div" in result.output
        assert "id=main" in result.output
        assert "child" in result.output
        assert "classes=link" in result.output
        assert 'attr=href^="http"' in result.output
        assert "pseudo=:first-child" in result.output

    def test_selector_list(self):
        result = run("inspect", "h1, h2")
        assert "Selector 1: 1 segment(s)" in result.output
        assert "Selector 2: 1 segment(s)" in result.output

    def test_xpath_passthrough(self):
        result = run("inspect", "//div")
        assert "xpath=//div" in result.output

    def test_parse_error(self):
        result = run("inspect", "div[x")
        assert result.exit_code == 1
        assert "Parse error" in result.output


class TestMain:
    def test_version(self):
        result = run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = run("--help")
        for name in ("compile", "detect", "inspect"):
            assert name in result.output
