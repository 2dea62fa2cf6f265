"""Composed analysis: condition -> FFT -> magnitude spectrum."""

from __future__ import annotations

import logging

from spectrakit.analysis.config import AnalysisConfig
from spectrakit.domain.errors import EmptySignalError, InvalidLengthError
from spectrakit.domain.models import MagnitudeSpectrum, Signal
from spectrakit.transforms.fft import is_power_of_two, signal_spectrum
from spectrakit.transforms.frequency import magnitude_spectrum
from spectrakit.transforms.preprocess import condition


logger = logging.getLogger(__name__)


def analyze(signal: Signal, config: AnalysisConfig | None = None) -> MagnitudeSpectrum:
    """Turn raw time samples into a one-sided physical magnitude spectrum."""
    cfg = AnalysisConfig() if config is None else config
    if signal.size == 0:
        raise EmptySignalError()
    if not is_power_of_two(signal.size):
        raise InvalidLengthError(signal.size)

    logger.debug(
        "Analyzing %d samples at %.6g Hz (detrend=%s, window=%s)",
        signal.size,
        signal.sampling_rate_hz,
        cfg.detrend,
        cfg.window,
    )
    conditioned = condition(signal, detrend_enabled=cfg.detrend, window_enabled=cfg.window)
    spectrum = signal_spectrum(conditioned.signal, config=cfg.fft)
    result = magnitude_spectrum(
        spectrum,
        scale_factor=conditioned.window_sum,
        correct_window=cfg.window,
    )
    logger.debug("Peak bin at %.6g Hz (magnitude %.6g)", *result.peak())
    return result
