"""Complex arithmetic on (real, imaginary) pairs used by the FFT butterfly."""

from __future__ import annotations

import math

from spectrumkit.domain.models import Complex, PhasorLeaf, Real


def as_complex(value: PhasorLeaf) -> Complex:
    """Promote a phasor leaf to a complex pair."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, Real):
        return Complex(value.value, 0.0)
    raise TypeError(f"unsupported phasor leaf: {value!r}")


def complex_multiply(a: Complex, b: Complex) -> Complex:
    """Product of two complex pairs."""
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def complex_add(a: Complex, b: Complex) -> Complex:
    """Sum of two complex pairs."""
    return Complex(a.real + b.real, a.imag + b.imag)


def complex_subtract(a: Complex, b: Complex) -> Complex:
    """Difference `a - b` of two complex pairs."""
    return Complex(a.real - b.real, a.imag - b.imag)


def complex_magnitude(c: Complex) -> float:
    """Euclidean length `sqrt(re^2 + im^2)`."""
    return math.sqrt(c.real * c.real + c.imag * c.imag)


def unit_root(k: int, n: int) -> Complex:
    """Twiddle factor e^(-2*pi*i*k/n) as a point on the unit circle."""
    if n <= 0:
        raise ValueError("n must be > 0")
    x = -2.0 * math.pi * (k / n)
    return Complex(math.cos(x), math.sin(x))


class UnitRootTable:
    """Memo of twiddle factors keyed by (k, n), scoped to one transform."""

    def __init__(self) -> None:
        self._roots: dict[tuple[int, int], Complex] = {}

    def __call__(self, k: int, n: int) -> Complex:
        key = (k, n)
        root = self._roots.get(key)
        if root is None:
            root = unit_root(k, n)
            self._roots[key] = root
        return root

    def __len__(self) -> int:
        return len(self._roots)
