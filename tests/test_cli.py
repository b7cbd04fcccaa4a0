"""Tests for the crosspath command line."""

import pytest
from click.testing import CliRunner

from crosspath.cli import main


@pytest.fixture
def runner():
    return CliRunner(env={"FORCE_COLOR": None, "CROSSPATH_PLATFORM_STYLE": None})


def invoke(runner, *args):
    result = runner.invoke(main, list(args))
    assert result.exit_code == 0, result.output
    return result.output.strip()


class TestCommands:

    def test_normalize(self, runner):
        assert invoke(runner, "--style", "posix", "normalize", "a/./b/../c") == "a/c"

    def test_join(self, runner):
        assert invoke(runner, "-s", "posix", "join", "/foo", "bar", "baz/asdf", "quux", "..") == "/foo/bar/baz/asdf"

    def test_resolve_absolute(self, runner):
        assert invoke(runner, "-s", "posix", "resolve", "/tmp", "x/../y") == "/tmp/y"

    def test_dirname(self, runner):
        assert invoke(runner, "-s", "windows", "dirname", "c:/foo\\bar\\baz") == "c:\\foo\\bar"

    def test_basename_with_suffix(self, runner):
        assert invoke(runner, "-s", "posix", "basename", "/foo/quux.html", ".html") == "quux"

    def test_basename_without_suffix(self, runner):
        assert invoke(runner, "-s", "posix", "basename", "/foo/quux.html") == "quux.html"

    def test_extname(self, runner):
        assert invoke(runner, "-s", "posix", "extname", "index.coffee.md") == ".md"

    def test_is_absolute(self, runner):
        assert invoke(runner, "-s", "posix", "is-absolute", "/qux/") == "true"
        assert invoke(runner, "-s", "posix", "is-absolute", "qux/") == "false"

    def test_relative_across_drives(self, runner):
        assert invoke(runner, "--style", "windows", "relative", "c:\\foo", "d:\\bar") == "d:\\bar"

    def test_sep(self, runner):
        assert invoke(runner, "--style", "windows", "sep") == "\\"
        assert invoke(runner, "--style", "posix", "sep") == "/"

    def test_brackets_are_not_markup(self, runner):
        """Path text is printed verbatim."""
        assert invoke(runner, "-s", "posix", "normalize", "[bold]/x") == "[bold]/x"


class TestUsageErrors:

    def test_resolve_requires_a_path(self, runner):
        result = runner.invoke(main, ["resolve"])
        assert result.exit_code == 2

    def test_unknown_style(self, runner):
        result = runner.invoke(main, ["--style", "amiga", "normalize", "a"])
        assert result.exit_code == 2

    def test_unknown_log_level(self, runner):
        """A bad CROSSPATH_LOG_LEVEL is reported as an error line, not a traceback."""
        result = runner.invoke(main, ["-s", "posix", "normalize", "a"], env={"CROSSPATH_LOG_LEVEL": "verbose"})
        assert result.exit_code == 1
        assert "Invalid CROSSPATH_LOG_LEVEL" in result.output
        assert not isinstance(result.exception, ValueError)
