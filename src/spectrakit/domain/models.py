"""Core value objects flowing through the spectral analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, hypot, isfinite

import numpy as np
import numpy.typing as npt

from spectrakit.domain.errors import (
    InvalidLengthError,
    InvalidSamplingRateError,
    LengthMismatchError,
    NonFiniteValueError,
)


FloatArray = npt.NDArray[np.float64]
ComplexArray = npt.NDArray[np.complex128]


@dataclass(frozen=True, slots=True)
class ComplexValue:
    """Explicit (real, imaginary) pair returned when reading a single spectrum bin."""

    real: float
    imag: float = 0.0

    def __post_init__(self) -> None:
        if not (isfinite(self.real) and isfinite(self.imag)):
            raise NonFiniteValueError("complex value")

    @classmethod
    def from_complex(cls, value: complex) -> ComplexValue:
        return cls(real=float(value.real), imag=float(value.imag))

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __add__(self, other: object) -> ComplexValue:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: object) -> ComplexValue:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: object) -> ComplexValue:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def conjugate(self) -> ComplexValue:
        return ComplexValue(self.real, -self.imag)

    @property
    def magnitude(self) -> float:
        """Euclidean norm sqrt(re^2 + im^2)."""
        return hypot(self.real, self.imag)

    @property
    def phase(self) -> float:
        """Angle atan2(im, re) in radians."""
        return atan2(self.imag, self.real)


@dataclass(frozen=True, slots=True)
class Signal:
    """Ordered real-valued time samples captured at a fixed sampling rate."""

    samples: FloatArray
    sampling_rate_hz: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", _readonly_array(self.samples, np.float64, "samples"))
        _validate_sampling_rate(self.sampling_rate_hz)

    @property
    def size(self) -> int:
        return int(self.samples.size)

    def __len__(self) -> int:
        return self.size

    def with_samples(self, samples: npt.ArrayLike) -> Signal:
        """Derive a new signal at the same sampling rate."""
        return Signal(samples=samples, sampling_rate_hz=self.sampling_rate_hz)


@dataclass(frozen=True, slots=True)
class WindowCoefficients:
    """Tapering weights in [0, 1] paired with their sum."""

    values: FloatArray

    def __post_init__(self) -> None:
        values = _readonly_array(self.values, np.float64, "window coefficients")
        if np.any(values < 0.0) or np.any(values > 1.0):
            raise ValueError("window coefficients must lie in [0, 1]")
        object.__setattr__(self, "values", values)

    @property
    def size(self) -> int:
        return int(self.values.size)

    def __len__(self) -> int:
        return self.size

    @property
    def window_sum(self) -> float:
        return float(np.sum(self.values))


@dataclass(frozen=True, slots=True)
class Spectrum:
    """Complex FFT output annotated with the originating sampling rate."""

    bins: ComplexArray
    sampling_rate_hz: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "bins", _readonly_array(self.bins, np.complex128, "spectrum bins"))
        _validate_sampling_rate(self.sampling_rate_hz)

    @property
    def size(self) -> int:
        return int(self.bins.size)

    def __len__(self) -> int:
        return self.size

    def bin(self, index: int) -> ComplexValue:
        """Return one frequency bin as an explicit complex pair."""
        return ComplexValue.from_complex(complex(self.bins[index]))

    def magnitudes(self) -> FloatArray:
        return np.asarray(np.abs(self.bins), dtype=np.float64)

    def phases(self) -> FloatArray:
        return np.asarray(np.angle(self.bins), dtype=np.float64)


@dataclass(frozen=True, slots=True)
class MagnitudeSpectrum:
    """One-sided (frequency, magnitude) pairs for bins 0..N/2."""

    frequencies_hz: FloatArray
    magnitudes: FloatArray
    fft_size: int

    def __post_init__(self) -> None:
        frequencies = _readonly_array(self.frequencies_hz, np.float64, "frequencies_hz")
        magnitudes = _readonly_array(self.magnitudes, np.float64, "magnitudes")
        if frequencies.size != magnitudes.size:
            raise LengthMismatchError(expected=frequencies.size, actual=magnitudes.size)
        if self.fft_size <= 0:
            raise InvalidLengthError(self.fft_size, "fft_size must be >= 1")
        if frequencies.size != self.fft_size // 2 + 1:
            raise LengthMismatchError(expected=self.fft_size // 2 + 1, actual=frequencies.size)
        if np.any(frequencies < 0.0):
            raise ValueError("frequencies_hz must be >= 0")
        if np.any(magnitudes < 0.0):
            raise ValueError("magnitudes must be >= 0")
        object.__setattr__(self, "frequencies_hz", frequencies)
        object.__setattr__(self, "magnitudes", magnitudes)

    @property
    def size(self) -> int:
        return int(self.magnitudes.size)

    def __len__(self) -> int:
        return self.size

    def pairs(self) -> tuple[tuple[float, float], ...]:
        """Return ordered (frequency_hz, magnitude) pairs."""
        return tuple(
            (float(freq), float(mag))
            for freq, mag in zip(self.frequencies_hz, self.magnitudes, strict=True)
        )

    def peak(self) -> tuple[float, float]:
        """Return (frequency_hz, magnitude) of the strongest bin."""
        idx = int(np.argmax(self.magnitudes))
        return float(self.frequencies_hz[idx]), float(self.magnitudes[idx])


def _readonly_array(values: npt.ArrayLike, dtype: type[np.generic], what: str) -> npt.NDArray:
    """Copy values into a 1D read-only array, rejecting non-finite entries."""
    array = np.array(values, dtype=dtype, copy=True)
    if array.ndim != 1:
        raise ValueError(f"{what} must be 1D")
    if not np.all(np.isfinite(array)):
        raise NonFiniteValueError(what)
    array.setflags(write=False)
    return array


def _validate_sampling_rate(sampling_rate_hz: float) -> None:
    if not isfinite(sampling_rate_hz) or sampling_rate_hz <= 0:
        raise InvalidSamplingRateError(sampling_rate_hz)
