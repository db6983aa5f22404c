"""Core models for the plan sanitizer."""

from .models.plan_tree import PlanKind, kind_of, stringify
from .models.strip_context import BuildContext, StripContext, freeze

__all__ = [
    "BuildContext",
    "PlanKind",
    "StripContext",
    "freeze",
    "kind_of",
    "stringify",
]
