"""Syntax test case: one annotated source checked against one compiler run."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import TextIO

from syntaxtest.diagnostics.record import DiagnosticRecord
from syntaxtest.errors import InternalConsistencyError, TestFileError
from syntaxtest.parser.expectations import parse_expectations
from syntaxtest.parser.sections import (
    EXPECTATIONS_DELIMITER,
    SETTINGS_DELIMITER,
    parse_source_and_settings,
)
from syntaxtest.pipeline.normalizer import normalize
from syntaxtest.pipeline.protocol import CompilerStack
from syntaxtest.render.formatting import BOLD, CYAN, AnsiColorized
from syntaxtest.render.printer import print_error_list, print_source

logger = logging.getLogger(__name__)

# Setting that switches the optimiser to its full profile.
OPTIMIZE_YUL_SETTING = "optimize-yul"

DEFAULT_EVM_VERSION = "constantinople"


class TestResult(Enum):
    """Outcome of running a syntax test."""

    __test__ = False

    SUCCESS = "success"
    FAILURE = "failure"
    FATAL_ERROR = "fatal_error"

    def __str__(self) -> str:
        return self.value


class SyntaxTest:
    """Compare the diagnostics expected by a test source with the compiler's.

    A test is built once from its text, run once, and then rendered.
    """

    def __init__(
        self,
        lines: Iterable[str],
        evm_version: str = DEFAULT_EVM_VERSION,
        parser_error_recovery: bool = False,
        name: str = "<test>",
    ) -> None:
        stream = iter(lines)
        self.name = name
        self.evm_version = evm_version
        self.parser_error_recovery = parser_error_recovery
        self.source, self.settings = parse_source_and_settings(stream)
        self.validated_settings: dict[str, str] = {}
        self.optimise_yul = False
        if OPTIMIZE_YUL_SETTING in self.settings:
            self.optimise_yul = True
            self.validated_settings[OPTIMIZE_YUL_SETTING] = "true"
            del self.settings[OPTIMIZE_YUL_SETTING]
        self.expectations: list[DiagnosticRecord] = parse_expectations(stream)
        self.errors: list[DiagnosticRecord] = []
        self._has_run = False

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        evm_version: str = DEFAULT_EVM_VERSION,
        parser_error_recovery: bool = False,
    ) -> SyntaxTest:
        """Load a syntax test from *path*.

        Raises:
            TestFileError: If the file cannot be opened or its settings are malformed.
            ExpectationParseError: If an expectation line is malformed.
        """
        try:
            with open(path, encoding="utf-8", newline="\n") as f:
                return cls(f, evm_version, parser_error_recovery, name=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise TestFileError(f'Cannot open test contract: "{path}".') from e

    @classmethod
    def from_string(cls, text: str, **kwargs) -> SyntaxTest:
        return cls(io.StringIO(text), **kwargs)

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def validate_settings(self) -> None:
        """Reject settings that no part of the test consumed."""
        if self.settings:
            unknown = ", ".join(sorted(self.settings))
            raise TestFileError(f"Unknown setting(s): {unknown}")

    def run(self, stack: CompilerStack, stream: TextIO, line_prefix: str = "", formatted: bool = False) -> TestResult:
        """Compile the source with *stack* and compare the diagnostics.

        On mismatch the expected and obtained lists are written to *stream*.

        Raises:
            RuntimeError: If the test was already run.
            InternalConsistencyError: If code generation failed after a
                successful analysis.
        """
        if self._has_run:
            raise RuntimeError(f"Syntax test {self.name} has already been run.")
        self._has_run = True

        logger.debug("running %s (evm=%s, optimise=%s)", self.name, self.evm_version, self.optimise_yul)
        result = normalize(
            stack,
            self.source,
            evm_version=self.evm_version,
            optimise=self.optimise_yul,
            parser_error_recovery=self.parser_error_recovery,
        )
        if result.is_fatal:
            raise InternalConsistencyError(result.fatal_reason) from result.cause
        self.errors = result.diagnostics

        if self.print_expectation_and_error(stream, line_prefix, formatted):
            return TestResult.SUCCESS
        return TestResult.FAILURE

    @property
    def passed(self) -> bool:
        return self.expectations == self.errors

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def print_expectation_and_error(self, stream: TextIO, line_prefix: str = "", formatted: bool = False) -> bool:
        """Write both lists to *stream* if they differ; return True if they match."""
        if self.passed:
            return True
        next_indent = line_prefix + "  "
        with AnsiColorized(stream, formatted, BOLD, CYAN) as out:
            out.write(f"{line_prefix}Expected result:")
        stream.write("\n")
        print_error_list(stream, self.expectations, next_indent, formatted)
        with AnsiColorized(stream, formatted, BOLD, CYAN) as out:
            out.write(f"{line_prefix}Obtained result:")
        stream.write("\n")
        print_error_list(stream, self.errors, next_indent, formatted)
        return False

    def print_source(self, stream: TextIO, line_prefix: str = "", formatted: bool = False) -> None:
        """Write the test source, highlighting obtained diagnostics when *formatted*."""
        print_source(stream, self.source, self.errors, line_prefix, formatted)

    def print_updated_expectations(self, stream: TextIO, line_prefix: str = "") -> None:
        """Write the obtained diagnostics as an expectation block."""
        if not self.errors:
            return
        print_error_list(stream, self.errors, line_prefix + "// ", False)

    def print_updated_settings(self, stream: TextIO, line_prefix: str = "") -> None:
        """Write the settings block, or nothing if there are no settings."""
        if not self.validated_settings:
            return
        stream.write(f"{line_prefix}{SETTINGS_DELIMITER}\n")
        for key, value in self.validated_settings.items():
            stream.write(f"{line_prefix}// {key}: {value}\n")

    def write_updated_file(self, path: str | Path) -> None:
        """Rewrite *path* so that its expectations match the obtained diagnostics."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.source)
            self.print_updated_settings(f)
            f.write(f"{EXPECTATIONS_DELIMITER}\n")
            self.print_updated_expectations(f)
