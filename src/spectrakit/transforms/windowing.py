"""Window functions used to taper signals before the FFT."""

from __future__ import annotations

import numpy as np

from spectrakit.domain.errors import InvalidLengthError
from spectrakit.domain.models import WindowCoefficients


def hanning_window(size: int) -> WindowCoefficients:
    """Symmetric Hanning window w[n] = 0.5 * (1 - cos(2*pi*n / (N - 1)))."""
    if size < 1:
        raise InvalidLengthError(size, "window size must be >= 1")
    if size == 1:
        # A one-sample window has no taper.
        return WindowCoefficients(values=np.ones(1, dtype=np.float64))

    n = np.arange(size, dtype=np.float64)
    values = 0.5 * (1.0 - np.cos(2.0 * np.pi * n / (size - 1)))
    return WindowCoefficients(values=values)


def window_sum(window: WindowCoefficients) -> float:
    """Arithmetic sum of all window coefficients."""
    return window.window_sum
