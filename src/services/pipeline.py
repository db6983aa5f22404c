"""Strip and hash a plan state so it can be shared.

Purpose: Load the plan state, run the build and process passes, and write
the sanitized copy in one go.
Date: 2026-10-12
Related tests: tests/services/test_pipeline.py
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.core.models.strip_context import BuildContext, StripContext, freeze
from src.services.blacklist import build_blacklist
from src.services.errors import (
    PlanError,
    PlanParseError,
    PlanReadError,
    PlanSerializeError,
    PlanWriteError,
    StructuralAssumptionError,
)
from src.services.processing import ProcessStats, process_state


logger = logging.getLogger(__name__)


@dataclass
class StripSummary:
    """Summary of a completed sanitization run."""

    names_found: int
    blacklist_size: int
    keys_deleted: int
    keys_renamed: int
    values_hashed: int
    values_kept: int
    output_path: Path | None = None


def sanitize_plan(plan: Any) -> StripSummary:
    """Sanitize a decoded plan state in place.

    Both passes run to completion in order: every name and legible value is
    known before the first value is hashed.

    Raises:
        PlanParseError: When ``plan`` is not a JSON object.
        StructuralAssumptionError: When the document has an unexpected shape.
    """

    if not isinstance(plan, dict):
        raise PlanParseError(
            f"Plan state root must be a JSON object, got {type(plan).__name__}"
        )

    build_context = BuildContext()
    try:
        build_blacklist(plan, build_context)
        context: StripContext = freeze(build_context)
        logger.info(
            "Collected %d names and %d legible values",
            len(context.names),
            len(context.value_blacklist),
        )

        stats: ProcessStats = process_state(plan, context)
    except RecursionError as exc:
        raise StructuralAssumptionError(
            "Plan state is nested too deeply to sanitize"
        ) from exc

    return StripSummary(
        names_found=len(context.names),
        blacklist_size=len(context.value_blacklist),
        keys_deleted=build_context.deleted_keys,
        keys_renamed=stats.keys_renamed,
        values_hashed=stats.values_hashed,
        values_kept=stats.values_kept,
    )


def strip_and_hash(
    input_path: Path, output_path: Path, indent: int = 1
) -> StripSummary | None:
    """Sanitize the plan state at ``input_path`` and write it to ``output_path``.

    Returns None without writing anything when there is no plan state.
    """

    if not input_path.exists():
        logger.warning("No plan state found at %s", input_path)
        return None

    plan = _read_plan(input_path)
    try:
        summary = sanitize_plan(plan)
    except PlanError as exc:
        if exc.file_path is None:
            exc.file_path = input_path
        raise

    try:
        rendered = json.dumps(plan, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise PlanSerializeError(
            f"Could not serialize sanitized plan state: {exc}", output_path
        ) from exc

    try:
        output_path.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise PlanWriteError(
            f"Could not write sanitized plan state: {exc}", output_path
        ) from exc

    summary.output_path = output_path
    logger.info("Wrote sanitized plan state to %s", output_path)
    return summary


def _read_plan(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PlanReadError(f"Could not read plan state: {exc}", path) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlanParseError(f"Plan state is not valid JSON: {exc}", path) from exc
    except RecursionError as exc:
        raise PlanParseError("Plan state is nested too deeply to parse", path) from exc
