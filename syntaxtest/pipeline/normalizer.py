"""Run the compiler stack and normalize its diagnostics.

The test source is compiled behind a version pragma, so every reported
offset is shifted back by the pragma length.  Endpoints that fall inside the
pragma become ``NO_LOCATION``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from syntaxtest.diagnostics.record import NO_LOCATION, DiagnosticRecord
from syntaxtest.pipeline.protocol import (
    CompilerDiagnostic,
    CompilerStack,
    OptimiserSettings,
    UnimplementedFeatureError,
)

logger = logging.getLogger(__name__)

VERSION_PRAGMA = "pragma solidity >=0.0;\n"
UNIMPLEMENTED_FEATURE_KIND = "UnimplementedFeatureError"


@dataclass
class NormalizationResult:
    """Outcome of one compiler run.

    ``fatal_reason`` is set when code generation failed after a successful
    analysis; ``diagnostics`` must not be compared in that case.
    """

    diagnostics: list[DiagnosticRecord] = field(default_factory=list)
    fatal_reason: str | None = None
    cause: BaseException | None = None

    @property
    def is_fatal(self) -> bool:
        return self.fatal_reason is not None


def error_message(comment: str | None) -> str:
    """Return *comment* on a single line, or ``"NONE"`` when it is missing."""
    if not comment:
        return "NONE"
    return comment.replace("\n", "\\n")


def strip_prefix_offset(offset: int, prefix_length: int = len(VERSION_PRAGMA)) -> int:
    """Translate a prefixed-source offset back into the original source."""
    if offset >= prefix_length:
        return offset - prefix_length
    return NO_LOCATION


def to_record(diagnostic: CompilerDiagnostic, prefix_length: int = len(VERSION_PRAGMA)) -> DiagnosticRecord:
    """Convert a compiler diagnostic into a :class:`DiagnosticRecord`."""
    location_start = NO_LOCATION
    location_end = NO_LOCATION
    if diagnostic.location is not None:
        location_start = strip_prefix_offset(diagnostic.location.start, prefix_length)
        location_end = strip_prefix_offset(diagnostic.location.end, prefix_length)
    return DiagnosticRecord(
        diagnostic.type_name,
        error_message(diagnostic.comment),
        location_start,
        location_end,
    )


def primary_diagnostics(diagnostics: Iterable[CompilerDiagnostic]) -> list[CompilerDiagnostic]:
    """Drop secondary diagnostics (notes attached to another diagnostic)."""
    return [d for d in diagnostics if not d.is_secondary]


def normalize(
    stack: CompilerStack,
    source: str,
    *,
    evm_version: str,
    optimise: bool = False,
    parser_error_recovery: bool = False,
) -> NormalizationResult:
    """Compile *source* with *stack* and collect its primary diagnostics.

    The stack is fully reset first.  Parse and analysis failures are normal
    outcomes: their diagnostics are the product.
    """
    stack.reset()
    stack.set_sources({"": VERSION_PRAGMA + source})
    stack.set_evm_version(evm_version)
    stack.set_parser_error_recovery(parser_error_recovery)
    stack.set_optimiser_settings(
        OptimiserSettings.FULL if optimise else OptimiserSettings.MINIMAL
    )

    result = NormalizationResult()
    if stack.parse():
        logger.debug("parse succeeded")
        if stack.analyze():
            logger.debug("analysis succeeded, generating code")
            try:
                if not stack.compile():
                    result.fatal_reason = "Compilation failed even though analysis was successful."
            except UnimplementedFeatureError as exc:
                result.diagnostics.append(
                    DiagnosticRecord(UNIMPLEMENTED_FEATURE_KIND, error_message(exc.comment))
                )
            except Exception as exc:
                result.fatal_reason = (
                    f"Code generation raised {type(exc).__name__} even though analysis was successful."
                )
                result.cause = exc

    if result.is_fatal:
        logger.debug("fatal outcome: %s", result.fatal_reason)
        return result

    result.diagnostics.extend(to_record(d) for d in primary_diagnostics(stack.errors()))
    return result
