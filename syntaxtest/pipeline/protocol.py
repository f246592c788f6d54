"""Interface of the external compiler stack driven by a syntax test."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class OptimiserSettings(Enum):
    """Optimiser profile handed to the compiler stack."""

    MINIMAL = "minimal"
    FULL = "full"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceRange:
    """Character span reported by the compiler, in prefixed-source offsets."""

    start: int
    end: int


class UnimplementedFeatureError(Exception):
    """Raised by a compiler stack when code generation hits an unimplemented path."""

    def __init__(self, comment: str | None = None) -> None:
        super().__init__(comment or "Unimplemented feature")
        self.comment = comment


class CompilerDiagnostic(Protocol):
    """A diagnostic object as reported by the compiler stack."""

    type_name: str
    comment: str | None
    location: SourceRange | None
    is_secondary: bool


class CompilerStack(Protocol):
    """Tool-agnostic interface for the compiler pipeline under test."""

    def reset(self) -> None:
        ...

    def set_sources(self, sources: dict[str, str]) -> None:
        ...

    def set_evm_version(self, version: str) -> None:
        ...

    def set_parser_error_recovery(self, enabled: bool) -> None:
        ...

    def set_optimiser_settings(self, settings: OptimiserSettings) -> None:
        ...

    def parse(self) -> bool:
        ...

    def analyze(self) -> bool:
        ...

    def compile(self) -> bool:
        """Generate code. May raise :class:`UnimplementedFeatureError`."""
        ...

    def errors(self) -> Sequence[CompilerDiagnostic]:
        """Return every diagnostic accumulated since the last reset, in order."""
        ...
