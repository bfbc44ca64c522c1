"""
Tests for the verrange command-line interface.
"""

import os

import pytest

from verrange import cli
from verrange.constants import ASCII_ONLY_ENV

pytestmark = pytest.mark.cli


class TestParseCommand:
    """Tests for 'verrange parse'."""

    def test_parse(self, capsys):
        """Test that each component is printed with its kind."""
        assert cli.main(["parse", "1.0-rc1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["numeric 1", "numeric 0", "suffix -", "word rc", "numeric 1"]

    def test_parse_malformed(self, capsys):
        """Test that a malformed version exits with status 2."""
        assert cli.main(["parse", "1..0"]) == cli.EXIT_MALFORMED
        assert "Error:" in capsys.readouterr().err


class TestCompareCommand:
    """Tests for 'verrange compare'."""

    @pytest.mark.parametrize(
        "left,right,symbol",
        [
            ("1.0", "1.0.0", "<"),
            ("1.0.0", "1.0.0-2", ">"),
            ("2.0", "2.0", "="),
        ],
    )
    def test_compare(self, capsys, left, right, symbol):
        """Test the symbol printed for each ordering."""
        assert cli.main(["compare", left, right]) == 0
        assert capsys.readouterr().out.strip() == symbol


class TestCheckCommand:
    """Tests for 'verrange check'."""

    def test_contained(self, capsys):
        """Test a version inside the range."""
        assert cli.main(["check", "1.4.2", "[1.0,2.0)"]) == 0
        assert capsys.readouterr().out.strip() == "yes"

    def test_not_contained(self, capsys):
        """Test a version outside the range."""
        assert cli.main(["check", "2.0", "1.*"]) == 1
        assert capsys.readouterr().out.strip() == "no"

    def test_malformed_range(self, capsys):
        """Test that a malformed range exits with status 2."""
        assert cli.main(["check", "1.0", "[,]"]) == cli.EXIT_MALFORMED
        assert "at least one bound" in capsys.readouterr().err


class TestRangeCommand:
    """Tests for 'verrange range'."""

    @pytest.mark.parametrize(
        "expr,expected",
        [("1.*", "[1.0,2.0)"), (">=1.2", "[1.2,)"), ("<3", "(,3)"), ("=1.0", "[1.0]")],
    )
    def test_range(self, capsys, expr, expected):
        """Test that ranges are printed in interval notation."""
        assert cli.main(["range", expr]) == 0
        assert capsys.readouterr().out.strip() == expected


class TestOptions:
    """Tests for the global options."""

    def test_wrapper_version(self, capsys):
        """Test printing the package version."""
        from verrange.version import __version__

        assert cli.main(["--wrapper-version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Test that running without a command prints usage."""
        assert cli.main([]) == cli.EXIT_MALFORMED
        assert "usage" in capsys.readouterr().err

    def test_unknown_command(self):
        """Test that argparse rejects unknown commands."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["frobnicate"])
        assert exc_info.value.code == 2

    def test_ascii_only(self, capsys):
        """Test that --ascii-only is forwarded to the parsers."""
        assert cli.main(["parse", "1.0-beté"]) == 0
        capsys.readouterr()
        assert cli.main(["--ascii-only", "parse", "1.0-beté"]) == cli.EXIT_MALFORMED
        assert os.environ[ASCII_ONLY_ENV] == "1"

    def test_verbose(self, capsys, caplog):
        """Test that --verbose turns on debug logging."""
        import logging

        with caplog.at_level(logging.DEBUG):
            assert cli.main(["-v", "check", "1.5", "[1,2]"]) == 0
        assert "contains" in caplog.text
