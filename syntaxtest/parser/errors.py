"""Parse error types for test expectations."""

from __future__ import annotations

from syntaxtest.errors import SyntaxTestError


class ExpectationParseError(SyntaxTestError):
    """Raised on a malformed expectation line."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"{message} (expectation line {line})"
        super().__init__(message)
        self.line = line
