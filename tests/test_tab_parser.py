"""Tests for harmonica tab parser."""

import logging

import pytest

from harp_converter.tab_parser import (
    DiatonicEntry,
    TremoloEntry,
    parse_diatonic_tab,
    parse_tremolo_tab,
    preprocess,
)


class TestPreprocess:
    """Line splitting tests."""

    def test_keeps_empty_lines(self) -> None:
        """Empty lines are preserved in order."""
        assert preprocess("+4\n\n-4") == ["+4", "", "-4"]

    def test_normalizes_crlf(self) -> None:
        """Windows line endings do not leave carriage returns behind."""
        assert preprocess("+4\r\n-4\r\n") == ["+4", "-4", ""]

    def test_normalizes_lone_cr(self) -> None:
        """Old Mac line endings are treated as newlines."""
        assert preprocess("9\r11") == ["9", "11"]

    def test_empty_input(self) -> None:
        """Empty input is a single empty line."""
        assert preprocess("") == [""]


class TestParseDiatonic:
    """Diatonic grammar tests."""

    def test_blow_and_draw(self) -> None:
        """Plus is blow, minus is draw."""
        entries = parse_diatonic_tab("+4 -5")
        assert [(e.hole, e.action) for e in entries] == [(4, "blow"), (5, "draw")]

    def test_unsigned_is_blow(self) -> None:
        """A bare number is read as blow."""
        entries = parse_diatonic_tab("6")
        assert len(entries) == 1
        assert entries[0].action == "blow"
        assert entries[0].raw == "6"

    def test_multi_digit_hole(self) -> None:
        """Hole numbers can have several digits."""
        entries = parse_diatonic_tab("-10")
        assert entries[0].hole == 10
        assert entries[0].action == "draw"

    def test_no_upper_bound_at_parse_time(self) -> None:
        """Out-of-range holes are parsed; validation happens on lookup."""
        entries = parse_diatonic_tab("+99 +0")
        assert [e.hole for e in entries] == [99, 0]

    @pytest.mark.parametrize(
        "token",
        ["la", "+", "-", "4b", "+-4", "4'", "(4)", "4.5", "+4+", "--4"],
    )
    def test_invalid_tokens_skipped(self, token: str) -> None:
        """Tokens outside the grammar are silently dropped."""
        assert parse_diatonic_tab(token) == []

    def test_skipped_tokens_do_not_shift_order(self) -> None:
        """Valid entries keep reading order around skipped tokens."""
        entries = parse_diatonic_tab("+4 foo -4 bar +5")
        assert [e.raw for e in entries] == ["+4", "-4", "+5"]

    def test_line_indices(self) -> None:
        """Entries record the line they came from."""
        entries = parse_diatonic_tab("+4 -4\n\nwords only\n+5")
        assert [(e.raw, e.line) for e in entries] == [("+4", 0), ("-4", 0), ("+5", 3)]

    def test_token_spans(self) -> None:
        """Entries keep the column span of their token."""
        entries = parse_diatonic_tab("  -4")
        assert entries[0].token.start == 2
        assert entries[0].token.end == 4

    def test_returns_diatonic_entries(self) -> None:
        """Parser returns DiatonicEntry objects."""
        entries = parse_diatonic_tab("+1")
        assert isinstance(entries[0], DiatonicEntry)

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", "hello world"])
    def test_no_entries(self, text: str) -> None:
        """Blank or non-notation input produces no entries."""
        assert parse_diatonic_tab(text) == []


class TestParseTremolo:
    """Tremolo grammar tests."""

    def test_bare_numbers(self) -> None:
        """Hole numbers are parsed in order."""
        entries = parse_tremolo_tab("9 11 13")
        assert [e.hole for e in entries] == [9, 11, 13]

    @pytest.mark.parametrize("token", ["1", "24"])
    def test_range_bounds_inclusive(self, token: str) -> None:
        """Holes 1 and 24 are accepted."""
        assert [e.hole for e in parse_tremolo_tab(token)] == [int(token)]

    @pytest.mark.parametrize("token", ["0", "25", "100"])
    def test_out_of_range_skipped(self, token: str) -> None:
        """Holes outside [1, 24] are silently skipped."""
        assert parse_tremolo_tab(token) == []

    @pytest.mark.parametrize("token", ["+9", "-9", "nine", "9a", "9.0"])
    def test_non_numeric_skipped(self, token: str) -> None:
        """Signed or non-numeric tokens are not tremolo notation."""
        assert parse_tremolo_tab(token) == []

    def test_line_indices(self) -> None:
        """Entries record the line they came from."""
        entries = parse_tremolo_tab("9\n\n11 13")
        assert [(e.hole, e.line) for e in entries] == [(9, 0), (11, 2), (13, 2)]

    def test_returns_tremolo_entries(self) -> None:
        """Parser returns TremoloEntry objects."""
        entries = parse_tremolo_tab("7")
        assert isinstance(entries[0], TremoloEntry)
        assert entries[0].raw == "7"

    def test_skipped_token_logged_with_column(self, caplog) -> None:
        """Skipped tokens are logged with their line and column."""
        with caplog.at_level(logging.DEBUG, logger="harp_converter.tab_parser.parser"):
            parse_tremolo_tab("9\n11 25")
        assert "Skipping out-of-range tremolo hole 25 at line 1, column 3" in caplog.text
