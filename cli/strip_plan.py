"""CLI to strip secrets from a plan state and hash identifying names.

Purpose: Command-line entry for producing a shareable copy of a plan state.
Date: 2026-10-12
Related tests: tests/cli/test_strip_plan.py
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from src.services.config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    PlanPaths,
    StripConfig,
    default_config,
    load_config,
    validate_file_name,
)
from src.services.errors import PlanError
from src.services.pipeline import StripSummary, strip_and_hash


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the strip CLI."""

    parser = argparse.ArgumentParser(
        description=(
            "Strip secrets from a plan state and hash all values "
            "to make it safe to share."
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the configuration file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "--working-dir",
        "-w",
        type=Path,
        help="Directory holding the plan state (skips the configuration file).",
    )
    parser.add_argument(
        "--input",
        "-i",
        help="Plan state file name inside the working directory.",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Sanitized file name inside the working directory.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="Indentation width of the written JSON.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the strip CLI."""

    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _resolve_config(args)
    except ConfigError as err:
        print(f"Configuration error: {err}")
        return 1

    indent = args.indent if args.indent is not None else config.output.indent
    if indent <= 0:
        print("Configuration error: --indent must be a positive integer.")
        return 1

    print("Stripping secrets and hashing all values to make the plan state safe to share")
    try:
        summary = strip_and_hash(
            config.paths.input_path, config.paths.output_path, indent=indent
        )
    except PlanError as err:
        print(f"Stripping and hashing plan state failed: {err}")
        return 1

    if summary is None:
        print("No plan state found")
        print("→ Run plan again")
        return 0

    _report_summary(summary)
    return 0


def _configure_logging(verbose: bool) -> None:
    """Configure logging based on verbosity setting."""
    if verbose:
        logging.basicConfig(level=logging.INFO,
                            format="%(levelname)s %(message)s")


def _resolve_config(args: argparse.Namespace) -> StripConfig:
    """Return the configuration with command-line overrides applied."""

    if args.working_dir is not None:
        config = default_config(args.working_dir)
    else:
        config = load_config(args.config)

    paths = config.paths
    if args.input is not None or args.output is not None:
        paths = PlanPaths(
            working_dir=paths.working_dir,
            input_name=_override_name(args.input, "--input", paths.input_name),
            output_name=_override_name(args.output, "--output", paths.output_name),
        )
    if paths.input_name == paths.output_name:
        raise ConfigError("Input and output file names must differ.")
    return StripConfig(paths=paths, output=config.output)


def _override_name(value: str | None, label: str, default: str) -> str:
    """Return a validated file name override, or the configured one."""
    if value is None:
        return default
    return validate_file_name(value, label)


def _report_summary(summary: StripSummary) -> None:
    """Print a short report of a successful run."""

    print("Plan state stripped and hashed")
    print(f"  Names hashed:     {summary.names_found}")
    print(f"  Legible values:   {summary.blacklist_size}")
    print(f"  Keys deleted:     {summary.keys_deleted}")
    print(f"  Keys renamed:     {summary.keys_renamed}")
    print(f"  Values hashed:    {summary.values_hashed}")
    print(f"  Values kept:      {summary.values_kept}")
    print(f"→ Inspect it in the {summary.output_path} file")


if __name__ == "__main__":
    raise SystemExit(main())
