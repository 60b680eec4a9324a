"""Input normalization and rejection rules for spectral operations."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any

import numpy as np

from spectrumkit.domain.models import Complex, FloatArray, InputRejection, PhasorLeaf, Real, RejectReason


logger = logging.getLogger(__name__)
_REAL_KINDS = "iuf"
_NUMERIC_KINDS = "iufc"


def reject(reason: RejectReason, detail: str) -> InputRejection:
    """Build a rejection and record it at debug level."""
    logger.debug("input rejected (%s): %s", reason.value, detail)
    return InputRejection(reason=reason, detail=detail)


def is_sample_sequence(values: Any) -> bool:
    """Whether `values` is an ordered sequence accepted as a sample buffer."""
    if isinstance(values, (list, tuple)):
        return True
    return isinstance(values, np.ndarray) and values.ndim >= 1


def as_real_samples(values: Any) -> FloatArray | InputRejection:
    """Copy `values` into a fresh 1D float64 array."""
    if not is_sample_sequence(values):
        return reject(RejectReason.INVALID_INPUT, f"expected a sample sequence, got {type(values).__name__}")

    if isinstance(values, np.ndarray):
        if values.dtype.kind not in _REAL_KINDS:
            return reject(RejectReason.INVALID_INPUT, f"samples must have a real dtype, got {values.dtype}")
        x = np.array(values, dtype=np.float64, copy=True)
    else:
        converted: list[float] = []
        for idx, item in enumerate(values):
            value = _real_value(item)
            if value is None:
                return reject(RejectReason.INVALID_INPUT, f"sample at index {idx} is not a real number: {item!r}")
            converted.append(value)
        x = np.asarray(converted, dtype=np.float64)

    if x.ndim != 1:
        return reject(RejectReason.INVALID_INPUT, f"samples must be 1D, got shape {x.shape}")
    return x


def as_phasor_leaves(samples: Any) -> tuple[PhasorLeaf, ...] | InputRejection:
    """Normalize real samples or (real, imag) pairs into tagged phasor leaves."""
    if isinstance(samples, np.ndarray):
        return _leaves_from_array(samples)
    if not isinstance(samples, (list, tuple)):
        return reject(RejectReason.INVALID_INPUT, f"expected a sample sequence, got {type(samples).__name__}")

    leaves: list[PhasorLeaf] = []
    for idx, item in enumerate(samples):
        leaf = _leaf_from_item(item)
        if leaf is None:
            return reject(RejectReason.INVALID_INPUT, f"unsupported sample at index {idx}: {item!r}")
        leaves.append(leaf)
    return tuple(leaves)


def check_sampling_rate(sampling_rate: Any) -> InputRejection | None:
    """Return `None` if the sampling rate is finite and positive."""
    if isinstance(sampling_rate, bool) or not isinstance(sampling_rate, numbers.Real):
        return reject(RejectReason.INVALID_SAMPLING_RATE, f"sampling rate must be a real number, got {sampling_rate!r}")
    rate = float(sampling_rate)
    if not math.isfinite(rate):
        return reject(RejectReason.INVALID_SAMPLING_RATE, f"sampling rate must be finite, got {rate}")
    if rate <= 0:
        return reject(RejectReason.INVALID_SAMPLING_RATE, f"sampling rate must be > 0, got {rate}")
    return None


def _leaves_from_array(samples: np.ndarray) -> tuple[PhasorLeaf, ...] | InputRejection:
    if samples.dtype.kind not in _NUMERIC_KINDS:
        return reject(RejectReason.INVALID_INPUT, f"samples must have a numeric dtype, got {samples.dtype}")

    if samples.dtype.kind == "c":
        if samples.ndim != 1:
            return reject(RejectReason.INVALID_INPUT, f"complex samples must be 1D, got shape {samples.shape}")
        return tuple(Complex(float(value.real), float(value.imag)) for value in samples)

    x = np.asarray(samples, dtype=np.float64)
    if x.ndim == 1:
        return tuple(Real(float(value)) for value in x)
    if x.ndim == 2 and x.shape[1] == 2:
        return tuple(Complex(float(re), float(im)) for re, im in x)
    return reject(RejectReason.INVALID_INPUT, f"samples must be 1D or (N, 2) pairs, got shape {x.shape}")


def _leaf_from_item(item: Any) -> PhasorLeaf | None:
    if isinstance(item, (Real, Complex)):
        return item
    if isinstance(item, np.ndarray) and item.ndim == 0:
        item = item.item()

    value = _real_value(item)
    if value is not None:
        return Real(value)
    if isinstance(item, numbers.Complex) and not isinstance(item, numbers.Real):
        return Complex(float(item.real), float(item.imag))
    if isinstance(item, (list, tuple)) or (isinstance(item, np.ndarray) and item.ndim == 1):
        if len(item) != 2:
            return None
        re, im = (_real_value(part) for part in item)
        if re is not None and im is not None:
            return Complex(re, im)
    return None


def _real_value(item: Any) -> float | None:
    if isinstance(item, np.ndarray) and item.ndim == 0:
        item = item.item()
    # bool is an Integral subclass but never a sample value
    if isinstance(item, (bool, np.bool_)) or not isinstance(item, numbers.Real):
        return None
    return float(item)
