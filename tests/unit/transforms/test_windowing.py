"""Tests for window coefficient generation."""

from __future__ import annotations

import numpy as np
import pytest

from spectrakit.domain import InvalidLengthError
from spectrakit.transforms import hanning_window, window_sum


def test_hanning_window_single_sample_is_one() -> None:
    window = hanning_window(1)

    assert window.size == 1
    assert window.values[0] == pytest.approx(1.0)
    assert window_sum(window) == pytest.approx(1.0)


def test_hanning_window_matches_symmetric_definition() -> None:
    window = hanning_window(8)

    assert window.size == 8
    assert np.allclose(window.values, np.hanning(8))
    assert window.values[0] == pytest.approx(0.0)
    assert window.values[-1] == pytest.approx(0.0, abs=1e-15)
    assert np.allclose(window.values, window.values[::-1])
    assert np.all((window.values >= 0.0) & (window.values <= 1.0))


def test_window_sum_is_arithmetic_sum() -> None:
    window = hanning_window(8)

    # Symmetric Hanning of length N sums to (N - 1) / 2.
    assert window_sum(window) == pytest.approx(3.5)
    assert window_sum(window) == pytest.approx(float(np.sum(window.values)))


def test_hanning_window_rejects_non_positive_size() -> None:
    with pytest.raises(InvalidLengthError, match=">= 1"):
        hanning_window(0)
    with pytest.raises(InvalidLengthError):
        hanning_window(-4)
