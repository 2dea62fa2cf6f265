"""Post-processing of complex FFT bins into physical one-sided magnitudes."""

from __future__ import annotations

from math import isfinite
from typing import cast

import numpy as np

from spectrakit.domain.errors import (
    EmptySpectrumError,
    InvalidConfigError,
    InvalidLengthError,
    InvalidSamplingRateError,
)
from spectrakit.domain.models import FloatArray, MagnitudeSpectrum, Spectrum


def frequency_bins_hz(fft_size: int, sampling_rate_hz: float) -> FloatArray:
    """Frequencies k * fs / N for the one-sided bins k = 0..N/2."""
    if fft_size < 1:
        raise InvalidLengthError(fft_size, "fft_size must be >= 1")
    if not isfinite(sampling_rate_hz) or sampling_rate_hz <= 0:
        raise InvalidSamplingRateError(sampling_rate_hz)
    return cast(
        FloatArray,
        np.asarray(np.fft.rfftfreq(fft_size, d=1.0 / sampling_rate_hz), dtype=np.float64),
    )


def magnitude_spectrum(
    spectrum: Spectrum,
    *,
    scale_factor: float,
    correct_window: bool,
) -> MagnitudeSpectrum:
    """Convert raw bins 0..N/2 into single-sided physical amplitudes.

    Each magnitude is divided by N, or by ``scale_factor`` (the window sum)
    when ``correct_window`` is set. Bins that have a mirrored
    negative-frequency partner are doubled; DC and, for even N, the Nyquist
    bin are not.
    """
    size = spectrum.size
    if size == 0:
        raise EmptySpectrumError()
    if not isfinite(scale_factor) or scale_factor <= 0:
        raise InvalidConfigError(f"scale_factor must be finite and > 0, got {scale_factor}")

    half = size // 2
    divisor = scale_factor if correct_window else float(size)
    magnitudes = np.abs(spectrum.bins[: half + 1]) / divisor

    mirrored_end = half if size % 2 == 0 else half + 1
    magnitudes[1:mirrored_end] *= 2.0

    return MagnitudeSpectrum(
        frequencies_hz=frequency_bins_hz(size, spectrum.sampling_rate_hz),
        magnitudes=magnitudes,
        fft_size=size,
    )

