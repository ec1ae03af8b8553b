"""Configuration for the LOESS smoother.

The config is validated once at construction and is read-only afterwards,
so a single smoother can be shared by concurrent callers.
"""

from __future__ import annotations

from dataclasses import dataclass

from loesskit.utils.validate import validate_loess_config

DEFAULT_BANDWIDTH = 0.3
DEFAULT_ROBUSTNESS_ITERS = 2
DEFAULT_ACCURACY = 1e-12


@dataclass(frozen=True)
class LoessConfig:
    """Settings of a :class:`~loesskit.loess.loess_smoother.LoessSmoother`.

    Attributes:
        bandwidth:
            Fraction of all samples used in each local regression window,
            in ``[0, 1]``. The window holds ``floor(bandwidth * n)`` points.
            Typical values are 0.25 to 0.5.
        robustness_iters:
            Number of robustness iterations (``>= 0``). The smoother runs
            ``robustness_iters + 1`` sweeps. Typical values are 0 to 4.
        accuracy:
            Finite threshold ``>= 0``. Robustness iterations stop early once
            the median residual drops below it, and a window whose weighted
            spread of ``x`` is below it is fitted with a flat line.

    Raises:
        ConfigurationError: If any setting is out of range.
    """

    bandwidth: float = DEFAULT_BANDWIDTH
    robustness_iters: int = DEFAULT_ROBUSTNESS_ITERS
    accuracy: float = DEFAULT_ACCURACY

    def __post_init__(self):
        """Validates the settings."""
        validate_loess_config(self.bandwidth, self.robustness_iters, self.accuracy)
