"""Rendering of diagnostic lists and highlighted test sources."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from syntaxtest.diagnostics.highlight import Highlight
from syntaxtest.diagnostics.record import DiagnosticRecord
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

# Escape sequence used for each highlight level of the source overlay.
HIGHLIGHT_STYLES: dict[Highlight, str] = {
    Highlight.NONE: RESET,
    Highlight.WARNING: ORANGE_BACKGROUND_256,
    Highlight.ERROR: RED_BACKGROUND,
}


def print_error_list(
    stream: TextIO,
    records: Sequence[DiagnosticRecord],
    line_prefix: str,
    formatted: bool,
) -> None:
    """Write one ``KIND: (START-END): MESSAGE`` line per record, or ``Success``."""
    if not records:
        with AnsiColorized(stream, formatted, BOLD, GREEN) as out:
            out.write(f"{line_prefix}Success")
        stream.write("\n")
        return

    for record in records:
        with AnsiColorized(stream, formatted, BOLD, YELLOW if record.is_warning else RED) as out:
            out.write(f"{line_prefix}{record.kind}: ")
        stream.write(f"{record.format_location()}{record.message}\n")


def build_highlights(source: str, records: Sequence[DiagnosticRecord]) -> list[Highlight]:
    """Return the highlight level of every character of *source*.

    Only records with both offsets contribute.  A warning never replaces an
    existing highlight; any other kind always does.
    """
    highlights = [Highlight.NONE] * len(source)
    for record in records:
        if not record.has_full_location:
            continue
        if record.location_start > len(source) or record.location_end > len(source):
            raise ValueError(
                f"Location ({record.location_start}-{record.location_end}) "
                f"outside of source of length {len(source)}"
            )
        level = Highlight.for_kind(record.kind)
        for i in range(record.location_start, record.location_end):
            if level is Highlight.ERROR or highlights[i] is Highlight.NONE:
                highlights[i] = level
    return highlights


def print_source(
    stream: TextIO,
    source: str,
    records: Sequence[DiagnosticRecord],
    line_prefix: str,
    formatted: bool,
) -> None:
    """Write *source* with every line prefixed, highlighting diagnostic ranges."""
    if not formatted:
        lines = source.split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            stream.write(f"{line_prefix}{line}\n")
        return

    if not source:
        return

    styles = [HIGHLIGHT_STYLES[h] for h in build_highlights(source, records)]
    current: str | None = None
    stream.write(line_prefix)
    for i, char in enumerate(source):
        if styles[i] != current:
            stream.write(styles[i])
            current = styles[i]
        if char != "\n":
            stream.write(char)
        else:
            # Each line is terminated on its own and reopens the running style.
            stream.write(RESET + "\n")
            if i + 1 < len(source):
                stream.write(line_prefix + current)
    stream.write(RESET)
