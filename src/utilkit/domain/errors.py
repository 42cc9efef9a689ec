"""Domain exceptions."""

from __future__ import annotations

from typing import Any


class UtilkitError(Exception):
    """Base class for all toolkit errors."""


class InvalidInputError(UtilkitError, ValueError):
    """Raised when an operation receives a value outside its domain."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value
