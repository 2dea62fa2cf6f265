"""Signal transforms: windowing, conditioning, FFT and spectrum post-processing."""

from spectrakit.transforms.fft import (
    FFTConfig,
    dft,
    fft,
    ifft,
    is_power_of_two,
    signal_spectrum,
    twiddle_table,
)
from spectrakit.transforms.frequency import frequency_bins_hz, magnitude_spectrum
from spectrakit.transforms.preprocess import ConditionedSignal, apply_window, condition, detrend
from spectrakit.transforms.windowing import hanning_window, window_sum

__all__ = [
    "ConditionedSignal",
    "FFTConfig",
    "apply_window",
    "condition",
    "detrend",
    "dft",
    "fft",
    "frequency_bins_hz",
    "hanning_window",
    "ifft",
    "is_power_of_two",
    "magnitude_spectrum",
    "signal_spectrum",
    "twiddle_table",
    "window_sum",
]
