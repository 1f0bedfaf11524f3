"""Exceptions raised by the interview coach core."""

from typing import Any, Optional


class CoachError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(CoachError, ValueError):
    """A submitted field could not be converted to the type the analyzers need."""

    def __init__(self, field: str, value: Any = None, reason: Optional[str] = None):
        self.field = field
        self.value = value
        message = f"Invalid value for field '{field}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
