"""Errors raised while stripping and hashing a plan state.

Purpose: Give every fatal pipeline failure a typed exception that carries the
offending file path for context.
Date: 2026-10-12
Related tests: tests/services/test_pipeline.py
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class PlanError(Exception):
    """Base class for plan sanitization errors."""

    message: str
    file_path: Path | None = None

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        return " - ".join(parts)


class PlanReadError(PlanError):
    """Raised when the plan state exists but cannot be read."""


class PlanParseError(PlanError):
    """Raised when the plan state is not a JSON object."""


class StructuralAssumptionError(PlanError):
    """Raised when the plan document does not have the expected shape."""


class PlanSerializeError(PlanError):
    """Raised when the sanitized plan cannot be encoded as JSON."""


class PlanWriteError(PlanError):
    """Raised when the sanitized plan cannot be written to disk."""
