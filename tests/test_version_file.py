"""Tests for the version line grammar."""

import pytest

from docver.core import VersionLine, format_version_line, parse_version_text
from docver.core.version_file import next_version
from docver.exceptions import VersionArithmeticError, VersionParseError


class TestParseVersionText:
    """Test parse_version_text"""

    def test_simple(self):
        assert parse_version_text("Version: 7\n") == VersionLine(value=7, line_number=0)

    def test_zero(self):
        assert parse_version_text("Version: 0").value == 0

    def test_multiple_spaces_and_padding(self):
        assert parse_version_text("   Version:    12  \n").value == 12

    def test_first_matching_line_wins(self):
        text = "% generated\n\nVersion: 3\nVersion: 9\n"
        result = parse_version_text(text)
        assert result.value == 3
        assert result.line_number == 2

    def test_large_number(self):
        assert parse_version_text("Version: 123456789012345678901234567890").value == (
            123456789012345678901234567890
        )

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "\n\n",
            "Version:7",
            "version: 7",
            "Version: -1",
            "Version: 7a",
            "Version: 7.0",
            "Version: ",
            "The Version: 7",
            "garbage",
        ],
    )
    def test_unparseable(self, text):
        with pytest.raises(VersionParseError) as exc_info:
            parse_version_text(text)
        assert "Unable to extract current version" in exc_info.value.message
        assert exc_info.value.exit_code == 3

    def test_skips_malformed_lines(self):
        assert parse_version_text("Version:1\nVersion: 2\n").value == 2


class TestFormatting:
    """Test format_version_line and next_version"""

    def test_format(self):
        assert format_version_line(5) == "Version: 5"

    def test_format_round_trips_through_parser(self):
        assert parse_version_text(format_version_line(41)).value == 41

    @pytest.mark.parametrize("bad", [-1, 1.5, "3", True, None])
    def test_format_rejects_non_counter_values(self, bad):
        with pytest.raises(VersionArithmeticError):
            format_version_line(bad)

    def test_next_version(self):
        assert next_version(0) == 1
        assert next_version(2**64) == 2**64 + 1

    @pytest.mark.parametrize("bad", [-3, 2.0, "1", False, None])
    def test_next_version_rejects_non_counter_values(self, bad):
        with pytest.raises(VersionArithmeticError) as exc_info:
            next_version(bad)
        assert exc_info.value.exit_code == 4
