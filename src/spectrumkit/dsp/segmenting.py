"""Power-of-two segmentation of long sample sequences for FFT input."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any

from spectrumkit.domain.models import FloatArray, InputRejection, RejectReason, SubSamplePlan
from spectrumkit.dsp.powers import is_power_of_two, largest_power_of_two_at_most
from spectrumkit.dsp.validation import as_real_samples, reject


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SegmentationPolicy:
    """Minimum sub-sample length and cap on the number of sub-samples."""

    min_length: int = 64
    max_number_of_subs: int = 4

    def __post_init__(self) -> None:
        if not is_power_of_two(self.min_length):
            raise ValueError("min_length must be a power of two")
        if self.max_number_of_subs <= 0:
            raise ValueError("max_number_of_subs must be > 0")


def plan_power_of_two_sub_samples(
    length: int,
    min_length: int,
    max_number_of_subs: int,
) -> SubSamplePlan | InputRejection:
    """Derive sub-sample count, spacing and power-of-two length for `length` samples."""
    if not is_power_of_two(min_length):
        return reject(RejectReason.NOT_POWER_OF_TWO, f"min_length {min_length} is not a power of two")
    if isinstance(max_number_of_subs, bool) or not isinstance(max_number_of_subs, numbers.Integral):
        return reject(RejectReason.INVALID_INPUT, f"max_number_of_subs must be an integer, got {max_number_of_subs!r}")
    if max_number_of_subs <= 0:
        return reject(RejectReason.EMPTY_RESULT, f"max_number_of_subs {max_number_of_subs} must be > 0")
    if length < min_length:
        return reject(RejectReason.EMPTY_RESULT, f"sample count {length} is below min_length {min_length}")

    if length >= min_length * max_number_of_subs:
        number_of_subs = int(max_number_of_subs)
    else:
        number_of_subs = length // min_length

    sub_interval = length // number_of_subs
    sub_length = largest_power_of_two_at_most(sub_interval)
    return SubSamplePlan(number_of_subs=number_of_subs, sub_interval=sub_interval, sub_length=sub_length)


def create_power_of_two_length_sub_samples(
    samples: Any,
    min_length: int,
    max_number_of_subs: int,
) -> tuple[FloatArray, ...]:
    """Split `samples` into evenly spaced sub-samples of identical power-of-two length.

    Returns an empty tuple when the preconditions are not met.
    """
    x = as_real_samples(samples)
    if isinstance(x, InputRejection):
        return ()

    plan = plan_power_of_two_sub_samples(x.size, min_length, max_number_of_subs)
    if isinstance(plan, InputRejection):
        return ()

    logger.debug(
        "segmenting %d samples into %d x %d (interval %d)",
        x.size,
        plan.number_of_subs,
        plan.sub_length,
        plan.sub_interval,
    )
    return tuple(x[start : start + plan.sub_length].copy() for start in plan.offsets())


def segment(samples: Any, policy: SegmentationPolicy) -> tuple[FloatArray, ...]:
    """Segment `samples` using a validated policy."""
    return create_power_of_two_length_sub_samples(
        samples,
        min_length=policy.min_length,
        max_number_of_subs=policy.max_number_of_subs,
    )
