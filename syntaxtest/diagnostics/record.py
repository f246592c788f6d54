"""Diagnostic record shared by expectations and compiler output."""

from __future__ import annotations

from dataclasses import dataclass

# Offset value used when a location endpoint is absent.
NO_LOCATION = -1


@dataclass(frozen=True)
class DiagnosticRecord:
    """A single expected or obtained diagnostic.

    Offsets refer to the original test source, without the injected version
    pragma.  Either offset may be ``NO_LOCATION`` independently of the other.
    """

    kind: str
    message: str
    location_start: int = NO_LOCATION
    location_end: int = NO_LOCATION

    @property
    def is_warning(self) -> bool:
        return self.kind == "Warning"

    @property
    def has_location(self) -> bool:
        """Return True if at least one offset is present."""
        return self.location_start >= 0 or self.location_end >= 0

    @property
    def has_full_location(self) -> bool:
        """Return True if both offsets are present."""
        return self.location_start >= 0 and self.location_end >= 0

    def format_location(self) -> str:
        """Return ``"(start-end): "``, omitting absent sides, or ``""`` without a location."""
        if not self.has_location:
            return ""
        start = str(self.location_start) if self.location_start >= 0 else ""
        end = str(self.location_end) if self.location_end >= 0 else ""
        return f"({start}-{end}): "

    def __str__(self) -> str:
        return f"{self.kind}: {self.format_location()}{self.message}"
