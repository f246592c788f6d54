"""Tests for diagnostic list and source overlay rendering."""

from __future__ import annotations

import io

import pytest

from syntaxtest.diagnostics import DiagnosticRecord, Highlight
from syntaxtest.render import build_highlights, print_error_list, print_source
from syntaxtest.render.formatting import (
    BOLD,
    GREEN,
    ORANGE_BACKGROUND_256,
    RED,
    RED_BACKGROUND,
    RESET,
    YELLOW,
    AnsiColorized,
)


def render_list(records, prefix="", formatted=False) -> str:
    out = io.StringIO()
    print_error_list(out, records, prefix, formatted)
    return out.getvalue()


def render_source(source, records, prefix="", formatted=True) -> str:
    out = io.StringIO()
    print_source(out, source, records, prefix, formatted)
    return out.getvalue()


# ---------------------------------------------------------------------------
# Error lists
# ---------------------------------------------------------------------------


class TestErrorList:
    def test_empty_is_success(self):
        assert render_list([], "  ") == "  Success\n"

    def test_records(self):
        records = [
            DiagnosticRecord("TypeError", "Invalid type", 10, 20),
            DiagnosticRecord("Warning", "x", 5, -1),
            DiagnosticRecord("Warning", "y", -1, 12),
            DiagnosticRecord("TypeError", "m"),
        ]
        assert render_list(records, "> ") == (
            "> TypeError: (10-20): Invalid type\n"
            "> Warning: (5-): x\n"
            "> Warning: (-12): y\n"
            "> TypeError: m\n"
        )

    def test_formatted_success(self):
        assert render_list([], "", True) == f"{BOLD}{GREEN}Success{RESET}\n"

    def test_formatted_kinds(self):
        text = render_list(
            [DiagnosticRecord("Warning", "w", 0, 1), DiagnosticRecord("TypeError", "t")], "", True
        )
        assert text == (
            f"{BOLD}{YELLOW}Warning: {RESET}(0-1): w\n"
            f"{BOLD}{RED}TypeError: {RESET}t\n"
        )


class TestAnsiColorized:
    def test_disabled_writes_nothing_extra(self):
        out = io.StringIO()
        with AnsiColorized(out, False, BOLD, RED) as s:
            s.write("x")
        assert out.getvalue() == "x"

    def test_enabled_wraps(self):
        out = io.StringIO()
        with AnsiColorized(out, True, BOLD, RED) as s:
            s.write("x")
        assert out.getvalue() == f"{BOLD}{RED}x{RESET}"


# ---------------------------------------------------------------------------
# Overlay
# ---------------------------------------------------------------------------


class TestHighlights:
    def test_no_records(self):
        assert build_highlights("abc", []) == [Highlight.NONE] * 3

    def test_half_open_range(self):
        assert build_highlights("abcd", [DiagnosticRecord("TypeError", "", 1, 3)]) == [
            Highlight.NONE,
            Highlight.ERROR,
            Highlight.ERROR,
            Highlight.NONE,
        ]

    def test_warning_does_not_override_error(self):
        records = [DiagnosticRecord("TypeError", "", 0, 2), DiagnosticRecord("Warning", "", 1, 3)]
        assert build_highlights("abc", records) == [Highlight.ERROR, Highlight.ERROR, Highlight.WARNING]

    def test_error_overrides_warning(self):
        records = [DiagnosticRecord("Warning", "", 0, 3), DiagnosticRecord("TypeError", "", 1, 2)]
        assert build_highlights("abc", records) == [Highlight.WARNING, Highlight.ERROR, Highlight.WARNING]

    def test_partial_locations_ignored(self):
        records = [DiagnosticRecord("TypeError", "", 0, -1), DiagnosticRecord("TypeError", "", -1, 2)]
        assert build_highlights("abc", records) == [Highlight.NONE] * 3

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            build_highlights("abc", [DiagnosticRecord("TypeError", "", 0, 4)])


class TestPrintSource:
    def test_plain(self):
        records = [DiagnosticRecord("TypeError", "", 0, 1)]
        assert render_source("a\nb\n", records, "  ", False) == "  a\n  b\n"

    def test_formatted_empty_source(self):
        assert render_source("", [], "  ") == ""

    def test_formatted_unhighlighted(self):
        assert render_source("ab\n", [], "> ") == f"> {RESET}ab{RESET}\n{RESET}"

    def test_formatted_highlight(self):
        records = [DiagnosticRecord("TypeError", "", 1, 2)]
        assert render_source("abc", records, "") == f"{RESET}a{RED_BACKGROUND}b{RESET}c{RESET}"

    def test_style_reopened_on_next_line(self):
        records = [DiagnosticRecord("Warning", "", 1, 4)]
        text = render_source("ab\ncd", records, "> ")
        assert text == (
            f"> {RESET}a{ORANGE_BACKGROUND_256}b{RESET}\n"
            f"> {ORANGE_BACKGROUND_256}c{RESET}d{RESET}"
        )
        assert text.count("\n") == 1

    def test_plain_splits_only_on_newline(self):
        assert render_source("x\x0cy\n", [], "> ", False) == "> x\x0cy\n"
        assert render_source("a\u2028b\nc", [], "> ", False) == "> a\u2028b\n> c\n"

    def test_plain_empty_source(self):
        assert render_source("", [], "> ", False) == ""
