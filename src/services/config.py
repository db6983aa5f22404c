"""Load user configuration for the plan sanitizer.

Purpose: Load and validate where the plan state lives and how the sanitized
copy is written.
Date: 2026-10-12
Related tests: tests/services/test_config.py
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = tomllib.loads
    _TOMLDecodeError = tomllib.TOMLDecodeError
else:
    import tomli

    _toml_loads = tomli.loads
    _TOMLDecodeError = tomli.TOMLDecodeError

DEFAULT_CONFIG_PATH = Path("user") / "config.toml"
DEFAULT_INPUT_NAME = "pluralith.state.stripped"
DEFAULT_OUTPUT_NAME = "pluralith.state.hashed"
DEFAULT_INDENT = 1


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


@dataclass(frozen=True)
class PlanPaths:
    """Location of the plan state and its sanitized copy."""

    working_dir: Path
    input_name: str = DEFAULT_INPUT_NAME
    output_name: str = DEFAULT_OUTPUT_NAME

    @property
    def input_path(self) -> Path:
        """Return the full path of the plan state to sanitize."""
        return self.working_dir / self.input_name

    @property
    def output_path(self) -> Path:
        """Return the full path the sanitized plan state is written to."""
        return self.working_dir / self.output_name


@dataclass(frozen=True)
class OutputOptions:
    """Formatting preferences for the sanitized plan state."""

    indent: int = DEFAULT_INDENT


@dataclass(frozen=True)
class StripConfig:
    """User-defined settings for a sanitization run."""

    paths: PlanPaths
    output: OutputOptions = field(default_factory=OutputOptions)


def load_config(config_path: Path | None = None) -> StripConfig:
    """Load configuration from ``user/config.toml`` unless overridden."""

    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        raise ConfigError(
            f"Configuration file not found at {path}. "
            "Copy user/config.example.toml to user/config.toml and set working_dir."
        )

    try:
        data = _toml_loads(path.read_text(encoding="utf-8"))
    except _TOMLDecodeError as exc:
        raise ConfigError(f"Config at {path} is not valid TOML: {exc}") from exc

    plan = data.get("plan")
    if not isinstance(plan, dict):
        raise ConfigError("Missing [plan] table in configuration.")

    return StripConfig(
        paths=_load_plan_paths(plan),
        output=_load_output_options(data.get("output", {})),
    )


def default_config(working_dir: Path) -> StripConfig:
    """Return a configuration that only points at ``working_dir``."""

    return StripConfig(paths=PlanPaths(working_dir=_validate_working_dir(working_dir)))


def _load_plan_paths(plan_table: dict) -> PlanPaths:
    """Return validated plan locations."""

    working_value = plan_table.get("working_dir")
    if not working_value:
        raise ConfigError("Configuration requires 'working_dir' under [plan].")

    working_dir = _validate_working_dir(Path(working_value))
    input_name = _load_file_name(plan_table, "input_name", DEFAULT_INPUT_NAME)
    output_name = _load_file_name(plan_table, "output_name", DEFAULT_OUTPUT_NAME)
    if input_name == output_name:
        raise ConfigError("plan.input_name and plan.output_name must differ.")

    return PlanPaths(
        working_dir=working_dir,
        input_name=input_name,
        output_name=output_name,
    )


def _load_file_name(plan_table: dict, key: str, default: str) -> str:
    """Return a bare file name from the [plan] table."""

    value = plan_table.get(key)
    if value is None:
        return default
    return validate_file_name(value, f"plan.{key}")


def validate_file_name(value: object, label: str) -> str:
    """Return ``value`` stripped when it names a file inside the working directory."""

    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{label} must be a non-empty string when provided.")
    name = value.strip()
    if name in {".", ".."} or Path(name).name != name:
        raise ConfigError(f"{label} must be a file name, not a path: {name}")
    return name


def _load_output_options(output_table: dict | None) -> OutputOptions:
    """Return validated output formatting options."""

    indent = DEFAULT_INDENT
    if isinstance(output_table, dict):
        override = output_table.get("indent")
        if override is not None:
            if (
                not isinstance(override, int)
                or isinstance(override, bool)
                or override <= 0
            ):
                raise ConfigError(
                    "output.indent must be a positive integer when provided."
                )
            indent = override
    return OutputOptions(indent=indent)


def _validate_working_dir(path: Path) -> Path:
    """Ensure the working directory exists."""

    resolved = path.expanduser().resolve()
    if not resolved.exists():
        raise ConfigError(f"Configured working_dir does not exist: {resolved}")
    if not resolved.is_dir():
        raise ConfigError(f"Configured working_dir is not a directory: {resolved}")
    return resolved
