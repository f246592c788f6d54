"""Parser for the expectation block of a syntax test.

Each non-empty line encodes one expected diagnostic::

    // TypeError: (10-20): Invalid type.
    // Warning: Unused local variable.

Leading slashes and whitespace are skipped, the text up to the first colon
is the diagnostic kind, an optional ``(start-end):`` span follows, and the
rest of the line is the message, taken verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from syntaxtest.diagnostics.record import NO_LOCATION, DiagnosticRecord
from syntaxtest.parser.errors import ExpectationParseError


class ExpectationParser:
    """Parse a single expectation line into a :class:`DiagnosticRecord`."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self._line = line.rstrip("\r\n")
        self._line_number = line_number
        self._pos = 0

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at end of line."""
        if self._pos < len(self._line):
            return self._line[self._pos]
        return ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._line)

    def _error(self, message: str) -> ExpectationParseError:
        return ExpectationParseError(message, self._line_number)

    def _skip_slashes(self) -> None:
        while self._peek() == "/":
            self._pos += 1

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek().isspace():
            self._pos += 1

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise self._error(f"Invalid test expectation. Expected character {char!r}.")
        self._pos += 1

    def _parse_unsigned_integer(self) -> int:
        start = self._pos
        while not self._at_end() and self._peek() in "0123456789":
            self._pos += 1
        if start == self._pos:
            raise self._error("Invalid test expectation. Source location expected.")
        return int(self._line[start:self._pos])

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def parse(self) -> DiagnosticRecord | None:
        """Return the parsed record, or None if the line holds no expectation."""
        self._skip_slashes()
        self._skip_whitespace()
        if self._at_end():
            return None

        colon = self._line.find(":", self._pos)
        if colon < 0:
            colon = len(self._line)
        kind = self._line[self._pos:colon]
        self._pos = colon
        if not self._at_end():
            self._pos += 1

        self._skip_whitespace()

        location_start = NO_LOCATION
        location_end = NO_LOCATION
        if self._peek() == "(":
            self._pos += 1
            location_start = self._parse_unsigned_integer()
            self._expect("-")
            location_end = self._parse_unsigned_integer()
            self._expect(")")
            self._expect(":")

        self._skip_whitespace()

        message = self._line[self._pos:]
        return DiagnosticRecord(kind, message, location_start, location_end)


def parse_expectation(line: str) -> DiagnosticRecord | None:
    """Parse one expectation line; None for blank or comment-only lines."""
    return ExpectationParser(line).parse()


def parse_expectations(lines: Iterable[str]) -> list[DiagnosticRecord]:
    """Parse every expectation line in *lines*, preserving file order.

    Raises:
        ExpectationParseError: If any line has a malformed source location.
    """
    expectations: list[DiagnosticRecord] = []
    for number, line in enumerate(lines, start=1):
        record = ExpectationParser(line, number).parse()
        if record is not None:
            expectations.append(record)
    return expectations
