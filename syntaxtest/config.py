"""Runner configuration loaded from YAML and checked against a JSON schema."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml

from syntaxtest.errors import ConfigError
from syntaxtest.pipeline.protocol import CompilerStack
from syntaxtest.testcase import DEFAULT_EVM_VERSION

CONFIG_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "pipeline": {"type": "string", "pattern": r"^[\w.]+:[\w.]+$"},
        "evm_version": {"type": "string", "minLength": 1},
        "parser_error_recovery": {"type": "boolean"},
        "line_prefix": {"type": "string"},
        "formatted": {"type": "boolean"},
    },
    "required": ["pipeline"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class RunnerConfig:
    """Settings shared by every test file of one run."""

    pipeline: str
    evm_version: str = DEFAULT_EVM_VERSION
    parser_error_recovery: bool = False
    line_prefix: str = "  "
    formatted: bool = True


def parse_config(data: object) -> RunnerConfig:
    """Validate already-loaded configuration *data* and build a RunnerConfig."""
    try:
        jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        where = " -> ".join(str(p) for p in e.path)
        suffix = f" (at {where})" if where else ""
        raise ConfigError(f"Invalid configuration: {e.message}{suffix}") from e
    return RunnerConfig(**data)


def load_config(path: str | Path) -> RunnerConfig:
    """Load and validate a YAML runner configuration file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return parse_config(data)


def resolve_pipeline(spec: str) -> CompilerStack:
    """Import ``module:callable`` and call it to build a compiler stack."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Pipeline must be given as 'module:callable', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import pipeline module {module_name!r}: {e}") from e
    factory = module
    for part in attr.split("."):
        try:
            factory = getattr(factory, part)
        except AttributeError as e:
            raise ConfigError(f"Pipeline factory {spec!r} not found") from e
    return factory()
