"""Hann windowing for one-dimensional sample blocks."""

from __future__ import annotations

from typing import Any

import numpy as np

from spectrumkit.domain.models import FloatArray, InputRejection
from spectrumkit.dsp.validation import as_real_samples


def hann_coefficients(size: int) -> FloatArray:
    """Symmetric Hann taper `1 - cos^2(pi * i / (size - 1))`.

    A single-sample window is defined as `[1.0]` so that windowing it is the
    identity; an empty window is empty.
    """
    if size < 0:
        raise ValueError("size must be >= 0")
    if size <= 1:
        return np.ones(size, dtype=np.float64)
    index = np.arange(size, dtype=np.float64)
    return 1.0 - np.square(np.cos(np.pi * index / (size - 1)))


def hann_window(samples: Any) -> FloatArray:
    """Return a new array with the Hann window applied; `samples` is not modified."""
    x = as_real_samples(samples)
    if isinstance(x, InputRejection):
        raise ValueError(x.detail)
    return x * hann_coefficients(x.size)
