"""Summary features derived from a one-sided magnitude spectrum."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from spectrumkit.domain.models import SpectralResult
from spectrumkit.dsp.amplitude import rms


@dataclass(frozen=True, slots=True)
class SpectrumSummary:
    """Compact summary of one block's magnitude spectrum."""

    dominant_frequency_hz: float
    peak_magnitude: float
    spectral_centroid_hz: float
    spectral_rms: float
    total_energy: float


def summarize_spectrum(result: SpectralResult) -> SpectrumSummary:
    """Extract dominant-frequency and energy features from an FFT result."""
    if result.number_of_bins == 0:
        raise ValueError("spectrum must have at least one bin")

    mags = result.magnitudes
    freqs = result.frequencies

    dominant_idx = int(np.argmax(mags))

    mag_sum = float(np.sum(mags))
    if mag_sum <= 0:
        centroid_hz = 0.0
    else:
        centroid_hz = float(np.sum(freqs * mags) / mag_sum)

    spectral_rms = rms(mags)
    if spectral_rms is None:
        raise ValueError("spectral rms is undefined for this spectrum")

    return SpectrumSummary(
        dominant_frequency_hz=float(freqs[dominant_idx]),
        peak_magnitude=float(mags[dominant_idx]),
        spectral_centroid_hz=centroid_hz,
        spectral_rms=spectral_rms,
        total_energy=float(np.sum(np.square(mags))),
    )
