"""Spectral analysis primitives: windowing, segmentation, FFT and RMS."""

from spectrumkit.dsp.amplitude import rms
from spectrumkit.dsp.complex_math import (
    UnitRootTable,
    complex_add,
    complex_magnitude,
    complex_multiply,
    complex_subtract,
    unit_root,
)
from spectrumkit.dsp.fft import FftMethod, check_fft_input, fft, fft_phasors, fft_phasors_iterative
from spectrumkit.dsp.powers import is_power_of_two, largest_power_of_two_at_most
from spectrumkit.dsp.segmenting import (
    SegmentationPolicy,
    create_power_of_two_length_sub_samples,
    plan_power_of_two_sub_samples,
    segment,
)
from spectrumkit.dsp.summary import SpectrumSummary, summarize_spectrum
from spectrumkit.dsp.windowing import hann_coefficients, hann_window

__all__ = [
    "FftMethod",
    "SegmentationPolicy",
    "SpectrumSummary",
    "UnitRootTable",
    "check_fft_input",
    "complex_add",
    "complex_magnitude",
    "complex_multiply",
    "complex_subtract",
    "create_power_of_two_length_sub_samples",
    "fft",
    "fft_phasors",
    "fft_phasors_iterative",
    "hann_coefficients",
    "hann_window",
    "is_power_of_two",
    "largest_power_of_two_at_most",
    "plan_power_of_two_sub_samples",
    "rms",
    "segment",
    "summarize_spectrum",
    "unit_root",
]
