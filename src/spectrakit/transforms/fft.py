"""Recursive radix-2 Cooley-Tukey FFT with optional parallel leaf evaluation."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

import numpy as np
import numpy.typing as npt

from spectrakit.domain.errors import (
    InvalidConfigError,
    InvalidLengthError,
    LengthMismatchError,
    NonFiniteValueError,
)
from spectrakit.domain.models import ComplexArray, Signal, Spectrum


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FFTConfig:
    """Tuning for parallel evaluation of independent sub-transforms."""

    parallel_threshold: int = 4096
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.parallel_threshold < 2:
            raise InvalidConfigError("parallel_threshold must be >= 2")
        if self.max_workers < 1:
            raise InvalidConfigError("max_workers must be >= 1")

    def parallel_depth(self, size: int) -> int:
        """Number of even/odd split levels whose leaves run concurrently."""
        if self.max_workers <= 1 or size < self.parallel_threshold:
            return 0
        return min((self.max_workers - 1).bit_length(), size.bit_length() - 1)


def is_power_of_two(value: int) -> bool:
    return value >= 1 and (value & (value - 1)) == 0


def twiddle_table(size: int) -> ComplexArray:
    """Twiddle factors exp(-2*pi*i*k/size) for k in [0, size/2)."""
    if not is_power_of_two(size):
        raise InvalidLengthError(size)
    k = np.arange(size // 2, dtype=np.float64)
    angle = 2.0 * np.pi * k / size
    return np.asarray(np.cos(angle) - 1j * np.sin(angle), dtype=np.complex128)


def fft(
    values: npt.ArrayLike,
    *,
    config: FFTConfig | None = None,
    twiddles: ComplexArray | None = None,
) -> ComplexArray:
    """Compute the N-point DFT of a power-of-two length sequence.

    ``twiddles`` may carry a table from :func:`twiddle_table` for the same
    size so repeated transforms skip recomputing it.
    """
    x = _as_valid_sequence(values)
    table = twiddle_table(x.size) if twiddles is None else _validated_table(twiddles, x.size)
    cfg = FFTConfig() if config is None else config

    depth = cfg.parallel_depth(x.size)
    if depth == 0:
        return _recursive_fft(x, table)
    return _parallel_fft(x, table, depth=depth, max_workers=cfg.max_workers)


def ifft(values: npt.ArrayLike, *, config: FFTConfig | None = None) -> ComplexArray:
    """Inverse transform via conjugation: conj(fft(conj(X))) / N."""
    spectrum = _as_valid_sequence(values)
    restored = np.conj(fft(np.conj(spectrum), config=config))
    return np.asarray(restored / spectrum.size, dtype=np.complex128)


def dft(values: npt.ArrayLike) -> ComplexArray:
    """Direct O(N^2) summation, used as a reference for the fast path."""
    x = np.asarray(values, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError("dft input must be 1D")
    if x.size == 0:
        raise InvalidLengthError(0, "length must be >= 1")
    if not np.all(np.isfinite(x)):
        raise NonFiniteValueError("dft input")
    n = np.arange(x.size, dtype=np.float64)
    kernel = np.exp(-2j * np.pi * np.outer(n, n) / x.size)
    return np.asarray(kernel @ x, dtype=np.complex128)


def signal_spectrum(signal: Signal, *, config: FFTConfig | None = None) -> Spectrum:
    """Transform a real signal (zero imaginary part) into an annotated spectrum."""
    bins = fft(signal.samples.astype(np.complex128), config=config)
    return Spectrum(bins=bins, sampling_rate_hz=signal.sampling_rate_hz)


def _recursive_fft(x: ComplexArray, twiddles: ComplexArray) -> ComplexArray:
    if x.size == 1:
        return x.copy()
    even = _recursive_fft(x[0::2], twiddles)
    odd = _recursive_fft(x[1::2], twiddles)
    return _butterfly(even, odd, twiddles)


def _butterfly(even: ComplexArray, odd: ComplexArray, twiddles: ComplexArray) -> ComplexArray:
    # Sub-transform of size 2*half reads every (N/2)/half-th entry of the size-N table.
    half = even.size
    product = twiddles[:: twiddles.size // half] * odd
    return np.concatenate((even + product, even - product))


def _parallel_fft(
    x: ComplexArray,
    twiddles: ComplexArray,
    *,
    depth: int,
    max_workers: int,
) -> ComplexArray:
    leaves = _decimate(x, depth)
    logger.debug(
        "Dispatching %d leaf transforms of size %d to %d workers",
        len(leaves),
        leaves[0].size,
        max_workers,
    )
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        spectra = list(pool.map(partial(_recursive_fft, twiddles=twiddles), leaves))

    # Leaves are ordered even-before-odd, so siblings are adjacent at every level.
    while len(spectra) > 1:
        spectra = [
            _butterfly(spectra[idx], spectra[idx + 1], twiddles)
            for idx in range(0, len(spectra), 2)
        ]
    return spectra[0]


def _decimate(x: ComplexArray, depth: int) -> list[ComplexArray]:
    if depth == 0:
        return [x]
    return _decimate(x[0::2], depth - 1) + _decimate(x[1::2], depth - 1)


def _as_valid_sequence(values: npt.ArrayLike) -> ComplexArray:
    x = np.asarray(values, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError("fft input must be 1D")
    if not is_power_of_two(x.size):
        raise InvalidLengthError(x.size)
    if not np.all(np.isfinite(x)):
        raise NonFiniteValueError("fft input")
    return x


def _validated_table(twiddles: ComplexArray, size: int) -> ComplexArray:
    table = np.asarray(twiddles, dtype=np.complex128)
    if table.ndim != 1 or table.size != size // 2:
        raise LengthMismatchError(expected=size // 2, actual=int(table.size))
    return table
