"""Exception types raised by LoessKit."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["ConfigurationError", "ValidationError", "ValidationErrorKind"]


class ValidationErrorKind(Enum):
    """Which call-time precondition a set of samples violated."""

    MISSING = auto()
    NOT_ONE_DIMENSIONAL = auto()
    LENGTH_MISMATCH = auto()
    EMPTY = auto()
    NON_FINITE = auto()
    NOT_STRICTLY_INCREASING = auto()
    BANDWIDTH_TOO_SMALL = auto()


class ConfigurationError(ValueError):
    """Raised when a smoother is constructed with invalid settings."""


class ValidationError(ValueError):
    """Raised when the samples passed to a smoothing call are invalid.

    Attributes:
        kind: The violated precondition.
    """

    def __init__(self, kind: ValidationErrorKind, message: str):
        """Initializes the error with its kind and a human-readable message."""
        super().__init__(message)
        self.kind = kind
