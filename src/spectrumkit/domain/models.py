"""Core domain models for spectrumkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Real:
    """Phasor leaf carrying a bare real sample (implicit zero imaginary part)."""

    value: float


@dataclass(frozen=True, slots=True)
class Complex:
    """Complex number as a (real, imaginary) pair."""

    real: float
    imag: float = 0.0


PhasorLeaf: TypeAlias = Real | Complex


class RejectReason(StrEnum):
    """Reasons why an input is rejected before computation."""

    INVALID_INPUT = "invalid_input"
    EMPTY_INPUT = "empty_input"
    NOT_POWER_OF_TWO = "not_power_of_two"
    INVALID_SAMPLING_RATE = "invalid_sampling_rate"
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True, slots=True)
class InputRejection:
    """Rejected input with deterministic reason and detail."""

    reason: RejectReason
    detail: str


@dataclass(frozen=True, slots=True)
class SpectralResult:
    """One-sided magnitude spectrum of a real-valued block."""

    magnitudes: FloatArray
    frequencies: FloatArray
    number_of_bins: int

    def __post_init__(self) -> None:
        if self.magnitudes.shape != self.frequencies.shape:
            raise ValueError("magnitudes and frequencies must have the same shape")
        if self.magnitudes.shape[0] != self.number_of_bins:
            raise ValueError("number_of_bins must match magnitudes length")

    @property
    def step_frequency_hz(self) -> float | None:
        """Bin spacing in Hz, or `None` when fewer than two bins exist."""
        if self.number_of_bins < 2:
            return None
        return float(self.frequencies[1] - self.frequencies[0])


@dataclass(frozen=True, slots=True)
class SubSamplePlan:
    """Derived layout for power-of-two sub-sample extraction."""

    number_of_subs: int
    sub_interval: int
    sub_length: int

    def offsets(self) -> tuple[int, ...]:
        """Start index of each sub-sample in the source sequence."""
        return tuple(index * self.sub_interval for index in range(self.number_of_subs))
