"""Tests for spectrum summary features."""

from __future__ import annotations

import numpy as np
import pytest

from spectrumkit.dsp import fft, hann_window, summarize_spectrum


def test_summarize_spectrum_detects_dominant_frequency() -> None:
    sampling_hz = 128.0
    t = np.arange(0, 1.0, 1.0 / sampling_hz, dtype=np.float64)
    window = hann_window(np.sin(2.0 * np.pi * 10.0 * t))
    result = fft(window, sampling_hz)

    assert result is not None
    summary = summarize_spectrum(result)

    assert summary.dominant_frequency_hz == pytest.approx(10.0, abs=1.0)
    assert summary.peak_magnitude == pytest.approx(float(np.max(result.magnitudes)))
    assert summary.spectral_rms > 0
    assert summary.total_energy > 0


def test_summarize_spectrum_of_silence() -> None:
    result = fft(np.zeros(16), 16.0)

    assert result is not None
    summary = summarize_spectrum(result)

    assert summary.spectral_centroid_hz == 0.0
    assert summary.total_energy == 0.0


def test_summarize_spectrum_rejects_empty_result() -> None:
    result = fft([1.0], 16.0)

    assert result is not None
    with pytest.raises(ValueError, match="at least one bin"):
        summarize_spectrum(result)
