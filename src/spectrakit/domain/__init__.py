"""Value objects and error taxonomy for spectral analysis."""

from spectrakit.domain.errors import (
    DegenerateWindowError,
    EmptySignalError,
    EmptySpectrumError,
    InvalidConfigError,
    InvalidLengthError,
    InvalidSamplingRateError,
    LengthMismatchError,
    NonFiniteValueError,
    SpectralAnalysisError,
)
from spectrakit.domain.models import (
    ComplexArray,
    ComplexValue,
    FloatArray,
    MagnitudeSpectrum,
    Signal,
    Spectrum,
    WindowCoefficients,
)

__all__ = [
    "ComplexArray",
    "ComplexValue",
    "DegenerateWindowError",
    "EmptySignalError",
    "EmptySpectrumError",
    "FloatArray",
    "InvalidConfigError",
    "InvalidLengthError",
    "InvalidSamplingRateError",
    "LengthMismatchError",
    "MagnitudeSpectrum",
    "NonFiniteValueError",
    "Signal",
    "SpectralAnalysisError",
    "Spectrum",
    "WindowCoefficients",
]
