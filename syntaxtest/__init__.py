"""syntaxtest: check compiler diagnostics against expectations annotated in test sources."""

from syntaxtest.diagnostics import NO_LOCATION, DiagnosticRecord, Highlight
from syntaxtest.errors import (
    ConfigError,
    InternalConsistencyError,
    SyntaxTestError,
    TestFileError,
)
from syntaxtest.parser import ExpectationParseError, parse_expectations
from syntaxtest.pipeline import (
    VERSION_PRAGMA,
    CompilerStack,
    OptimiserSettings,
    SourceRange,
    UnimplementedFeatureError,
    normalize,
)
from syntaxtest.testcase import SyntaxTest, TestResult

__all__ = [
    "NO_LOCATION",
    "DiagnosticRecord",
    "Highlight",
    "SyntaxTestError",
    "TestFileError",
    "InternalConsistencyError",
    "ConfigError",
    "ExpectationParseError",
    "parse_expectations",
    "VERSION_PRAGMA",
    "CompilerStack",
    "OptimiserSettings",
    "SourceRange",
    "UnimplementedFeatureError",
    "normalize",
    "SyntaxTest",
    "TestResult",
]
