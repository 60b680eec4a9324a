"""Tests for complex-pair arithmetic and twiddle factors."""

from __future__ import annotations

import pytest

from spectrumkit.domain import Complex, Real
from spectrumkit.dsp import (
    UnitRootTable,
    complex_add,
    complex_magnitude,
    complex_multiply,
    complex_subtract,
    is_power_of_two,
    largest_power_of_two_at_most,
    unit_root,
)
from spectrumkit.dsp.complex_math import as_complex


def test_complex_operations() -> None:
    a = Complex(1.0, 2.0)
    b = Complex(3.0, -4.0)

    assert complex_multiply(a, b) == Complex(11.0, 2.0)
    assert complex_add(a, b) == Complex(4.0, -2.0)
    assert complex_subtract(a, b) == Complex(-2.0, 6.0)
    assert complex_magnitude(b) == pytest.approx(5.0)


def test_as_complex_promotes_real_leaf() -> None:
    assert as_complex(Real(2.5)) == Complex(2.5, 0.0)
    assert as_complex(Complex(1.0, 1.0)) == Complex(1.0, 1.0)


@pytest.mark.parametrize(("k", "n"), [(1, 2), (1, 4), (3, 8), (5, 16)])
def test_unit_root_lies_on_unit_circle(k: int, n: int) -> None:
    assert complex_magnitude(unit_root(k, n)) == pytest.approx(1.0)


def test_unit_root_quarter_turn() -> None:
    root = unit_root(1, 4)
    assert root.real == pytest.approx(0.0, abs=1e-15)
    assert root.imag == pytest.approx(-1.0)


@pytest.mark.parametrize("n", [2, 4, 8, 64])
def test_unit_root_to_nth_power_is_identity(n: int) -> None:
    root = unit_root(1, n)
    acc = Complex(1.0, 0.0)
    for _ in range(n):
        acc = complex_multiply(acc, root)

    assert acc.real == pytest.approx(1.0)
    assert acc.imag == pytest.approx(0.0, abs=1e-12)


def test_unit_root_table_is_deterministic() -> None:
    table = UnitRootTable()
    first = table(3, 16)

    table(1, 2)
    assert table(3, 16) == first == unit_root(3, 16)
    assert len(table) == 2


def test_unit_root_rejects_non_positive_n() -> None:
    with pytest.raises(ValueError, match="n must be > 0"):
        unit_root(0, 0)


@pytest.mark.parametrize(("value", "expected"), [(1, True), (2, True), (1024, True), (0, False), (6, False), (-4, False), (4.0, False), (True, False)])
def test_is_power_of_two(value: object, expected: bool) -> None:
    assert is_power_of_two(value) is expected


@pytest.mark.parametrize(("value", "expected"), [(1, 1), (2, 2), (3, 2), (250, 128), (1024, 1024)])
def test_largest_power_of_two_at_most(value: int, expected: int) -> None:
    assert largest_power_of_two_at_most(value) == expected


def test_largest_power_of_two_rejects_zero() -> None:
    with pytest.raises(ValueError, match=">= 1"):
        largest_power_of_two_at_most(0)
