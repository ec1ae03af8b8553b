"""Provides all loesskit methods."""

from importlib.metadata import PackageNotFoundError, version

from loesskit.kernels import bisquare, tricube
from loesskit.loess.loess_config import LoessConfig
from loesskit.loess.loess_smoother import LoessSmoother, smooth
from loesskit.utils.errors import (
    ConfigurationError,
    ValidationError,
    ValidationErrorKind,
)

try:
    __version__ = version("loesskit")
except PackageNotFoundError:
    pass

__all__ = [
    "LoessConfig",
    "LoessSmoother",
    "smooth",
    "tricube",
    "bisquare",
    "ConfigurationError",
    "ValidationError",
    "ValidationErrorKind",
]
