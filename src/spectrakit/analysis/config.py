"""Configuration for one spectral analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field

from spectrakit.transforms.fft import FFTConfig


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Which conditioning stages run before the FFT, and how the FFT is scheduled."""

    detrend: bool = True
    window: bool = True
    fft: FFTConfig = field(default_factory=FFTConfig)
