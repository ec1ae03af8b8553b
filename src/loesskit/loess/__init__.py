"""LOESS smoothing: window tracking, local fits and robustness reweighting."""

from loesskit.loess.loess_config import LoessConfig
from loesskit.loess.loess_smoother import LoessSmoother, smooth

__all__ = ["LoessConfig", "LoessSmoother", "smooth"]
