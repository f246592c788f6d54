"""Command line entry point: run syntax test files against a compiler stack.

Usage:
    syntaxtest --pipeline mycompiler.testing:make_stack tests/*.sol
    syntaxtest --config syntaxtest.yaml --accept failing.sol
"""

from __future__ import annotations

import argparse
import dataclasses
import io
import logging
import sys
from collections.abc import Sequence

from syntaxtest.config import RunnerConfig, load_config, resolve_pipeline
from syntaxtest.errors import ConfigError, SyntaxTestError
from syntaxtest.pipeline.protocol import CompilerStack
from syntaxtest.testcase import SyntaxTest, TestResult


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syntaxtest",
        description="Check compiler diagnostics against the expectations annotated in test files.",
    )
    parser.add_argument("files", nargs="+", help="syntax test files to run")
    parser.add_argument("--config", help="YAML runner configuration")
    parser.add_argument("--pipeline", help="compiler stack factory as module:callable")
    parser.add_argument("--evm-version", help="EVM version handed to the compiler")
    parser.add_argument(
        "--error-recovery",
        action="store_true",
        help="enable parser error recovery",
    )
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    parser.add_argument(
        "--accept",
        action="store_true",
        help="rewrite failing files with the obtained diagnostics",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def make_config(args: argparse.Namespace) -> RunnerConfig:
    """Merge the optional config file with command line overrides."""
    if args.config:
        config = load_config(args.config)
    elif args.pipeline:
        config = RunnerConfig(pipeline=args.pipeline)
    else:
        raise ConfigError("Either --config or --pipeline is required")

    overrides: dict = {}
    if args.pipeline:
        overrides["pipeline"] = args.pipeline
    if args.evm_version:
        overrides["evm_version"] = args.evm_version
    if args.error_recovery:
        overrides["parser_error_recovery"] = True
    if args.no_color:
        overrides["formatted"] = False
    return dataclasses.replace(config, **overrides)


def run_file(path: str, stack: CompilerStack, config: RunnerConfig, accept: bool = False) -> TestResult:
    """Run a single test file and print its report to stdout."""
    prefix = config.line_prefix
    try:
        test = SyntaxTest.from_file(path, config.evm_version, config.parser_error_recovery)
        test.validate_settings()
        report = io.StringIO()
        result = test.run(stack, report, prefix, config.formatted)
    except SyntaxTestError as e:
        print(f"✗ {path}")
        print(f"{prefix}ERROR: {e}")
        return TestResult.FATAL_ERROR

    if result is TestResult.SUCCESS:
        print(f"✓ {path}")
        return result

    print(f"✗ {path}")
    print(f"{prefix}Contract:")
    source = io.StringIO()
    try:
        test.print_source(source, prefix * 2, config.formatted)
    except ValueError as e:
        # Locations past the end of the source cannot be highlighted.
        print(f"{prefix}WARNING: {e}")
        source = io.StringIO()
        test.print_source(source, prefix * 2, False)
    sys.stdout.write(source.getvalue())
    if not source.getvalue().endswith("\n"):
        sys.stdout.write("\n")
    sys.stdout.write(report.getvalue())
    if accept:
        test.write_updated_file(path)
        print(f"{prefix}Updated expectations in {path}")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = make_config(args)
        stack = resolve_pipeline(config.pipeline)
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 1

    results = [run_file(path, stack, config, args.accept) for path in args.files]

    passed = sum(r is TestResult.SUCCESS for r in results)
    failed = sum(r is TestResult.FAILURE for r in results)
    errored = sum(r is TestResult.FATAL_ERROR for r in results)
    print()
    print("=" * 70)
    print(f"{passed} passed, {failed} failed, {errored} errored ({len(results)} total)")
    print("=" * 70)
    return 0 if failed == 0 and errored == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
