"""syntaxtest pipeline subpackage (Layer 1 — depends on diagnostics)."""

from syntaxtest.pipeline.normalizer import (
    UNIMPLEMENTED_FEATURE_KIND,
    VERSION_PRAGMA,
    NormalizationResult,
    error_message,
    normalize,
    strip_prefix_offset,
    to_record,
)
from syntaxtest.pipeline.protocol import (
    CompilerDiagnostic,
    CompilerStack,
    OptimiserSettings,
    SourceRange,
    UnimplementedFeatureError,
)

__all__ = [
    "CompilerStack",
    "CompilerDiagnostic",
    "OptimiserSettings",
    "SourceRange",
    "UnimplementedFeatureError",
    "NormalizationResult",
    "VERSION_PRAGMA",
    "UNIMPLEMENTED_FEATURE_KIND",
    "error_message",
    "strip_prefix_offset",
    "to_record",
    "normalize",
]
