"""Utility functions for LoessKit package."""

from .errors import ConfigurationError, ValidationError, ValidationErrorKind
from .validate import (
    ValidationResult,
    validate_bandwidth_in_points,
    validate_loess_config,
    validate_samples,
)

__all__ = [
    "ConfigurationError",
    "ValidationError",
    "ValidationErrorKind",
    "ValidationResult",
    "validate_bandwidth_in_points",
    "validate_loess_config",
    "validate_samples",
]
