"""Tests for coefficient-sequence primitives."""

import pytest

from core.arith import (
    degree, add, sub, multiply_by_monomial, coefficients_equal, trim,
)
from core.field import ModInt


def test_degree():
    assert degree([5]) == 0
    assert degree([1, 2, 3]) == 2


def test_add_equal_length():
    assert add([1, 2, 3], [4, 5, 6]) == [5, 7, 9]


def test_add_zero_fills_shorter():
    assert add([1, 2], [1, 1, 1, 1]) == [2, 3, 1, 1]
    assert add([1, 1, 1, 1], [1, 2]) == [2, 3, 1, 1]


def test_sub_zero_fills_shorter():
    assert sub([5, 5, 5], [1, 2]) == [4, 3, 5]
    assert sub([1], [1, 2, 3]) == [0, -2, -3]


def test_add_does_not_mutate():
    x, y = [1, 2], [3, 4, 5]
    add(x, y)
    sub(x, y)
    assert x == [1, 2] and y == [3, 4, 5]


def test_add_modular():
    x = [ModInt(6, 7), ModInt(3, 7)]
    y = [ModInt(2, 7)]
    assert add(x, y) == [ModInt(1, 7), ModInt(3, 7)]


def test_shift():
    assert multiply_by_monomial([1, 2], 3) == [0, 0, 0, 1, 2]


def test_shift_zero():
    assert multiply_by_monomial([1, 2], 0) == [1, 2]


def test_shift_with_scalar():
    assert multiply_by_monomial([1, 2], 1, 3) == [0, 3, 6]


def test_shift_does_not_mutate():
    x = [1, 2]
    y = multiply_by_monomial(x, 0)
    y[0] = 9
    assert x == [1, 2]


def test_shift_negative():
    with pytest.raises(ValueError):
        multiply_by_monomial([1], -1)


def test_shift_empty():
    with pytest.raises(ValueError):
        multiply_by_monomial([], 2)


def test_equal_ignores_trailing_zeros():
    assert coefficients_equal([1, 2], [1, 2, 0, 0])
    assert coefficients_equal([1, 2, 0, 0], [1, 2])
    assert coefficients_equal([0], [0, 0, 0])


def test_equal_detects_difference():
    assert not coefficients_equal([1, 2], [1, 3])
    assert not coefficients_equal([1, 2], [1, 2, 1])
    assert not coefficients_equal([1, 2, 0, 5], [1, 2])


def test_equal_across_representations():
    assert coefficients_equal([1, 2.0], [1.0, 2, 0.0])


def test_trim():
    assert trim([1, 2, 0, 0]) == [1, 2]
    assert trim([0, 0]) == [0]
    assert trim([0, 1]) == [0, 1]
