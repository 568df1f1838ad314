"""Tests for CLI edge cases (input quirks, main entrypoint)."""

import re
import sys
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tests.factories import NOV_2023_LID, REFERENCE_LID
from ulidtools import __version__
from ulidtools.cli import ERROR_EXIT_CODE, app, main

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("restore_logging")

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class TestParseInputQuirks:
    """Inputs that sit at the edge of the two grammars."""

    def test_surrounding_whitespace_is_ignored(self) -> None:
        result = runner.invoke(app, ["parse", f"  {NOV_2023_LID}  "])

        assert result.exit_code == 0
        assert f"ULID: {NOV_2023_LID}" in result.stdout

    def test_unhyphenated_uuid_rejected(self) -> None:
        result = runner.invoke(app, ["parse", "018bcfe5680070008000000000000000"])

        assert result.exit_code == ERROR_EXIT_CODE
        assert "Invalid input format" in result.output

    def test_empty_string_rejected(self) -> None:
        result = runner.invoke(app, ["parse", ""])

        assert result.exit_code == ERROR_EXIT_CODE
        assert "Invalid input format" in result.output

    def test_lid_with_excluded_letter_rejected(self) -> None:
        result = runner.invoke(app, ["parse", REFERENCE_LID[:-1] + "U"])

        assert result.exit_code == ERROR_EXIT_CODE
        assert "Invalid input format" in result.output

    def test_error_line_is_only_output(self) -> None:
        result = runner.invoke(app, ["parse", "not-a-valid-id"])

        lines = [line for line in ANSI_ESCAPE_PATTERN.sub("", result.output).splitlines() if line]
        assert lines == ["Invalid input format"]


class TestMain:
    """Tests for the console-script entrypoint."""

    def test_main_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(sys, "argv", ["ulidtools", "--version"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_main_parse_error_exit_code(self) -> None:
        with patch.object(sys, "argv", ["ulidtools", "parse", "not-a-valid-id"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == ERROR_EXIT_CODE
