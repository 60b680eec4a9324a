"""Tests for spectral domain contracts."""

from __future__ import annotations

import numpy as np
import pytest

from spectrumkit.domain import Complex, Real, SpectralResult, SubSamplePlan


def test_spectral_result_rejects_mismatched_arrays() -> None:
    with pytest.raises(ValueError, match="same shape"):
        SpectralResult(magnitudes=np.zeros(4), frequencies=np.zeros(3), number_of_bins=4)


def test_spectral_result_rejects_wrong_bin_count() -> None:
    with pytest.raises(ValueError, match="number_of_bins"):
        SpectralResult(magnitudes=np.zeros(4), frequencies=np.zeros(4), number_of_bins=8)


def test_phasor_leaves_are_distinct_variants() -> None:
    assert Real(1.0) != Complex(1.0, 0.0)
    assert Complex(2.0) == Complex(2.0, 0.0)


def test_sub_sample_plan_offsets() -> None:
    plan = SubSamplePlan(number_of_subs=3, sub_interval=66, sub_length=64)
    assert plan.offsets() == (0, 66, 132)
