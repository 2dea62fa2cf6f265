"""Error taxonomy for spectral analysis failures."""

from __future__ import annotations


class SpectralAnalysisError(ValueError):
    """Base class for every validation failure raised by spectrakit."""


class InvalidLengthError(SpectralAnalysisError):
    """Sequence length is zero, negative, or not a power of two where required."""

    def __init__(self, length: int, reason: str = "length must be a power of two >= 1") -> None:
        self.length = length
        super().__init__(f"invalid length {length}: {reason}")


class EmptySignalError(SpectralAnalysisError):
    """Operation received a signal with no samples."""

    def __init__(self, message: str = "signal must contain at least one sample") -> None:
        super().__init__(message)


class EmptySpectrumError(SpectralAnalysisError):
    """Operation received a spectrum with no bins."""

    def __init__(self, message: str = "spectrum must contain at least one bin") -> None:
        super().__init__(message)


class LengthMismatchError(SpectralAnalysisError):
    """Two sequences that must align element-wise differ in length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"length mismatch: expected {expected}, got {actual}")


class NonFiniteValueError(SpectralAnalysisError):
    """Input contains NaN or infinite values."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"{what} must contain only finite values")


class InvalidSamplingRateError(SpectralAnalysisError):
    """Sampling rate is not a finite positive number."""

    def __init__(self, sampling_rate_hz: float) -> None:
        self.sampling_rate_hz = sampling_rate_hz
        super().__init__(f"sampling_rate_hz must be finite and > 0, got {sampling_rate_hz}")


class InvalidConfigError(SpectralAnalysisError):
    """Tuning parameter outside its accepted range."""


class DegenerateWindowError(SpectralAnalysisError):
    """Window coefficients sum to zero, so amplitude correction is undefined."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Hanning window of length {length} sums to zero")
