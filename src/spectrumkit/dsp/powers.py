"""Power-of-two helpers shared by the segmenter and the FFT engine."""

from __future__ import annotations

import numbers


def is_power_of_two(value: object) -> bool:
    """Return whether `value` is an integer of the form 2**n with n >= 0."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    n = int(value)
    return n >= 1 and (n & (n - 1)) == 0


def largest_power_of_two_at_most(value: int) -> int:
    """Largest 2**n that does not exceed `value`."""
    if value < 1:
        raise ValueError("value must be >= 1")
    return 1 << (int(value).bit_length() - 1)
