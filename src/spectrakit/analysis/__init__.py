"""End-to-end spectral analysis entry points."""

from spectrakit.analysis.config import AnalysisConfig
from spectrakit.analysis.pipeline import analyze
from spectrakit.transforms.fft import FFTConfig

__all__ = ["AnalysisConfig", "FFTConfig", "analyze"]
