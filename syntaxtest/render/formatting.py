"""ANSI escape sequences and a colourizing context manager."""

from __future__ import annotations

from typing import TextIO

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
RED_BACKGROUND = "\033[48;5;160m"
ORANGE_BACKGROUND_256 = "\033[48;5;202m"


class AnsiColorized:
    """Wrap writes to *stream* in the given styles when *enabled*.

    Usage::

        with AnsiColorized(stream, formatted, BOLD, CYAN) as out:
            out.write("Expected result:")
    """

    def __init__(self, stream: TextIO, enabled: bool, *styles: str) -> None:
        self._stream = stream
        self._enabled = enabled
        self._styles = styles

    def __enter__(self) -> TextIO:
        if self._enabled and self._styles:
            self._stream.write("".join(self._styles))
        return self._stream

    def __exit__(self, *exc_info: object) -> None:
        if self._enabled and self._styles:
            self._stream.write(RESET)
