"""syntaxtest parser subpackage (Layer 1 — depends on diagnostics)."""

from syntaxtest.parser.errors import ExpectationParseError
from syntaxtest.parser.expectations import (
    ExpectationParser,
    parse_expectation,
    parse_expectations,
)
from syntaxtest.parser.sections import (
    EXPECTATIONS_DELIMITER,
    SETTINGS_DELIMITER,
    parse_source_and_settings,
)

__all__ = [
    "ExpectationParser",
    "ExpectationParseError",
    "parse_expectation",
    "parse_expectations",
    "parse_source_and_settings",
    "SETTINGS_DELIMITER",
    "EXPECTATIONS_DELIMITER",
]
