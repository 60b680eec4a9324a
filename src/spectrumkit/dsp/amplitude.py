"""Amplitude estimates for raw or windowed sample blocks."""

from __future__ import annotations

from typing import Any

import numpy as np

from spectrumkit.domain.models import InputRejection, RejectReason
from spectrumkit.dsp.validation import as_real_samples, reject


def rms(values: Any) -> float | None:
    """Root mean square of `values`, or `None` for non-sequence or empty input."""
    x = as_real_samples(values)
    if isinstance(x, InputRejection):
        return None
    if x.size == 0:
        reject(RejectReason.EMPTY_INPUT, "rms of an empty sequence is undefined")
        return None
    return float(np.sqrt(np.sum(np.square(x)) / x.size))
