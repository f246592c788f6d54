"""Exception types shared across syntaxtest."""

from __future__ import annotations


class SyntaxTestError(Exception):
    """Base class for failures that abort a single syntax test."""


class TestFileError(SyntaxTestError):
    """Raised when a test file cannot be read or its settings are malformed."""

    __test__ = False


class InternalConsistencyError(SyntaxTestError):
    """Raised when code generation fails after analysis reported success."""


class ConfigError(SyntaxTestError):
    """Raised when a runner configuration file is invalid."""
