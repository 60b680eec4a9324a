"""Cooley-Tukey FFT producing one-sided magnitude spectra."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Sequence

import numpy as np

from spectrumkit.domain.models import Complex, InputRejection, PhasorLeaf, RejectReason, SpectralResult
from spectrumkit.dsp.complex_math import (
    UnitRootTable,
    as_complex,
    complex_add,
    complex_magnitude,
    complex_multiply,
    complex_subtract,
)
from spectrumkit.dsp.powers import is_power_of_two
from spectrumkit.dsp.validation import as_phasor_leaves, check_sampling_rate, reject


logger = logging.getLogger(__name__)


class FftMethod(StrEnum):
    """Butterfly evaluation strategy."""

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


def check_fft_input(samples: Any, sampling_rate: Any) -> InputRejection | None:
    """Return `None` if `fft` would accept the inputs, otherwise rejection details."""
    prepared = _prepare(samples, sampling_rate)
    return prepared if isinstance(prepared, InputRejection) else None


def fft(
    samples: Any,
    sampling_rate: float,
    *,
    method: FftMethod = FftMethod.RECURSIVE,
) -> SpectralResult | None:
    """Compute magnitudes and frequencies (Hz) of the first N/2 FFT bins.

    `samples` holds real values or (real, imaginary) pairs and its length must
    be a power of two. Returns `None` when any precondition fails.
    """
    prepared = _prepare(samples, sampling_rate)
    if isinstance(prepared, InputRejection):
        return None

    method = FftMethod(method)
    if method == FftMethod.ITERATIVE:
        phasors = fft_phasors_iterative(prepared)
    else:
        phasors = fft_phasors(prepared)

    n = len(phasors)
    number_of_bins = n // 2
    step_frequency = float(sampling_rate) / n
    magnitudes = np.asarray([complex_magnitude(p) for p in phasors[:number_of_bins]], dtype=np.float64)
    frequencies = np.arange(number_of_bins, dtype=np.float64) * step_frequency

    logger.debug("fft (%s) computed %d bins at %.6g Hz spacing", method.value, number_of_bins, step_frequency)
    return SpectralResult(magnitudes=magnitudes, frequencies=frequencies, number_of_bins=number_of_bins)


def fft_phasors(
    leaves: Sequence[PhasorLeaf],
    *,
    roots: UnitRootTable | None = None,
) -> tuple[Complex, ...]:
    """Full-length phasors via recursive decimation-in-time."""
    _require_power_of_two(len(leaves))
    return _recurse(tuple(leaves), UnitRootTable() if roots is None else roots)


def fft_phasors_iterative(
    leaves: Sequence[PhasorLeaf],
    *,
    roots: UnitRootTable | None = None,
) -> tuple[Complex, ...]:
    """Full-length phasors via bit-reversal permutation and in-place butterflies."""
    n = len(leaves)
    _require_power_of_two(n)
    table = UnitRootTable() if roots is None else roots
    values = [as_complex(leaf) for leaf in leaves]

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            values[i], values[j] = values[j], values[i]

    size = 2
    while size <= n:
        half = size // 2
        for start in range(0, n, size):
            for k in range(half):
                t = values[start + k]
                e = complex_multiply(table(k, size), values[start + k + half])
                values[start + k] = complex_add(t, e)
                values[start + k + half] = complex_subtract(t, e)
        size *= 2

    return tuple(values)


def _recurse(leaves: tuple[PhasorLeaf, ...], roots: UnitRootTable) -> tuple[Complex, ...]:
    n = len(leaves)
    if n == 1:
        return (as_complex(leaves[0]),)

    even_phasors = _recurse(leaves[0::2], roots)
    odd_phasors = _recurse(leaves[1::2], roots)

    half = n // 2
    lower: list[Complex] = []
    upper: list[Complex] = []
    for k in range(half):
        t = even_phasors[k]
        e = complex_multiply(roots(k, n), odd_phasors[k])
        lower.append(complex_add(t, e))
        upper.append(complex_subtract(t, e))

    return tuple(lower + upper)


def _prepare(samples: Any, sampling_rate: Any) -> tuple[PhasorLeaf, ...] | InputRejection:
    leaves = as_phasor_leaves(samples)
    if isinstance(leaves, InputRejection):
        return leaves
    if not is_power_of_two(len(leaves)):
        return reject(RejectReason.NOT_POWER_OF_TWO, f"sample count {len(leaves)} is not a power of two")

    rate_rejection = check_sampling_rate(sampling_rate)
    if rate_rejection is not None:
        return rate_rejection
    return leaves


def _require_power_of_two(n: int) -> None:
    if not is_power_of_two(n):
        raise ValueError(f"phasor input length must be a power of two, got {n}")
