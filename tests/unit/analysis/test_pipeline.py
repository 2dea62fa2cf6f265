"""Tests for the composed detrend -> window -> FFT -> magnitude pipeline."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from spectrakit.analysis import AnalysisConfig, FFTConfig, analyze
from spectrakit.domain import DegenerateWindowError, EmptySignalError, InvalidLengthError, Signal


def test_analyze_pure_cosine_without_conditioning() -> None:
    n = np.arange(8, dtype=np.float64)
    signal = Signal(samples=np.cos(2.0 * np.pi * n / 8), sampling_rate_hz=8.0)

    result = analyze(signal, AnalysisConfig(detrend=False, window=False))

    assert result.size == 5
    assert np.allclose(result.frequencies_hz, [0.0, 1.0, 2.0, 3.0, 4.0])
    assert result.peak() == pytest.approx((1.0, 1.0), abs=1e-6)
    for idx in (0, 2, 3, 4):
        assert result.magnitudes[idx] == pytest.approx(0.0, abs=1e-6)


def test_analyze_window_correction_restores_dc_level() -> None:
    signal = Signal(samples=np.ones(8), sampling_rate_hz=8.0)

    result = analyze(signal, AnalysisConfig(detrend=False, window=True))

    assert result.magnitudes[0] == pytest.approx(1.0)


def test_analyze_default_config_removes_offset_and_keeps_amplitude() -> None:
    sampling_hz = 128.0
    t = np.arange(128, dtype=np.float64) / sampling_hz
    signal = Signal(samples=3.0 + np.sin(2.0 * np.pi * 10.0 * t), sampling_rate_hz=sampling_hz)

    result = analyze(signal)
    peak_hz, peak_mag = result.peak()

    assert peak_hz == pytest.approx(10.0)
    assert peak_mag == pytest.approx(1.0, abs=0.02)
    assert result.magnitudes[0] < 0.05


def test_analyze_parallel_config_matches_sequential() -> None:
    rng = np.random.default_rng(11)
    signal = Signal(samples=rng.normal(size=256), sampling_rate_hz=1000.0)

    sequential = analyze(signal)
    parallel = analyze(
        signal,
        AnalysisConfig(fft=FFTConfig(parallel_threshold=64, max_workers=4)),
    )

    assert np.allclose(parallel.magnitudes, sequential.magnitudes, atol=1e-12)


def test_analyze_fails_fast_on_non_power_of_two_length() -> None:
    signal = Signal(samples=np.ones(6), sampling_rate_hz=6.0)
    with pytest.raises(InvalidLengthError, match="6") as excinfo:
        analyze(signal)
    assert excinfo.value.length == 6


def test_analyze_rejects_empty_signal() -> None:
    signal = Signal(samples=np.asarray([], dtype=np.float64), sampling_rate_hz=6.0)
    with pytest.raises(EmptySignalError):
        analyze(signal)


def test_analyze_two_samples_requires_window_disabled() -> None:
    signal = Signal(samples=[1.0, -1.0], sampling_rate_hz=2.0)
    with pytest.raises(DegenerateWindowError):
        analyze(signal)

    result = analyze(signal, AnalysisConfig(window=False))
    assert result.peak() == pytest.approx((1.0, 1.0))


def test_analyze_does_not_mutate_signal() -> None:
    raw = np.linspace(1.0, 2.0, 16)
    signal = Signal(samples=raw, sampling_rate_hz=16.0)
    analyze(signal)

    assert np.array_equal(signal.samples, raw)


def test_analyze_logs_run_parameters(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="spectrakit.analysis.pipeline")
    analyze(Signal(samples=np.ones(8), sampling_rate_hz=8.0), AnalysisConfig(detrend=False))

    assert "Analyzing 8 samples" in caplog.text
    assert "detrend=False, window=True" in caplog.text
