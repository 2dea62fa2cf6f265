"""Signal conditioning ahead of the FFT: detrending and windowing."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from spectrakit.domain.errors import DegenerateWindowError, EmptySignalError, LengthMismatchError
from spectrakit.domain.models import Signal, WindowCoefficients
from spectrakit.transforms.windowing import hanning_window


@dataclass(frozen=True, slots=True)
class ConditionedSignal:
    """Preprocessed signal plus the scale factor needed for amplitude correction."""

    signal: Signal
    window_sum: float
    detrended: bool
    windowed: bool


def detrend(signal: Signal) -> Signal:
    """Remove the mean so the DC component does not dominate the spectrum."""
    if signal.size == 0:
        raise EmptySignalError()
    centered = signal.samples - float(np.mean(signal.samples))
    # Second pass removes the rounding left by a large offset in the first mean.
    centered = centered - float(np.mean(centered))
    return signal.with_samples(centered)


def apply_window(signal: Signal, window: WindowCoefficients) -> Signal:
    """Element-wise product of samples and window coefficients."""
    if window.size != signal.size:
        raise LengthMismatchError(expected=signal.size, actual=window.size)
    return signal.with_samples(signal.samples * window.values)


def condition(
    signal: Signal,
    *,
    detrend_enabled: bool,
    window_enabled: bool,
) -> ConditionedSignal:
    """Detrend then window, returning the window sum (or N when unwindowed).

    A two-sample Hanning window is all zeros, so windowing a length-2 signal
    raises :class:`DegenerateWindowError` instead of yielding a zero scale.
    """
    if signal.size == 0:
        raise EmptySignalError()

    conditioned = signal
    if detrend_enabled:
        conditioned = detrend(conditioned)

    scale = float(signal.size)
    if window_enabled:
        window = hanning_window(signal.size)
        if window.window_sum <= 0.0:
            raise DegenerateWindowError(signal.size)
        conditioned = apply_window(conditioned, window)
        scale = window.window_sum

    return ConditionedSignal(
        signal=conditioned,
        window_sum=scale,
        detrended=detrend_enabled,
        windowed=window_enabled,
    )
