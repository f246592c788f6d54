"""Highlight levels used by the source overlay."""

from __future__ import annotations

from enum import IntEnum


class Highlight(IntEnum):
    """Per-character highlight, ordered by precedence."""

    NONE = 0
    WARNING = 1
    ERROR = 2

    @classmethod
    def for_kind(cls, kind: str) -> Highlight:
        """Map a diagnostic kind to its highlight level."""
        return cls.WARNING if kind == "Warning" else cls.ERROR
