"""Plan generation errors.

Both are permanent: the same input always fails the same way, so callers
should not retry without changing the input.
"""
from typing import Any, Dict, List, Optional


class PlanError(ValueError):
    """Base class for errors that prevent a plan from being generated."""


class InvalidInput(PlanError):
    """A required field is missing or outside its allowed range."""

    def __init__(self, message: str = "Invalid input data", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors[:] if errors else []


class DateParseError(PlanError):
    """The plan start date could not be parsed."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid start date {value!r}. Please use YYYY-MM-DD.")
        self.value = value
