import numpy as np
import pytest

from cyclotomic_integer import (
    CyclotomicError,
    CyclotomicInteger,
    IndexOutOfRange,
    InvalidLevel,
    LengthMismatch,
    NotAUnit,
)


def test_from_dense_sets_level():
    x = CyclotomicInteger.from_dense([0, 1, 0, 0])
    assert x.level() == 4
    assert x.coefficients == (0, 1, 0, 0)
    assert len(x) == 4
    assert list(x) == [0, 1, 0, 0]


def test_from_dense_empty_is_invalid_level():
    with pytest.raises(InvalidLevel):
        CyclotomicInteger.from_dense([])


def test_from_sparse_fills_zeros():
    x = CyclotomicInteger.from_sparse({0: 263, 3: -12748}, 10)
    assert x.level() == 10
    assert x.coefficients == (263, 0, 0, -12748, 0, 0, 0, 0, 0, 0)


def test_from_sparse_empty_mapping():
    x = CyclotomicInteger.from_sparse({}, 3)
    assert x.coefficients == (0, 0, 0)
    assert x.support() == {}


def test_from_sparse_level_zero():
    with pytest.raises(InvalidLevel):
        CyclotomicInteger.from_sparse({}, 0)


@pytest.mark.parametrize("entries", [{5: 1}, {3: 1}, {-1: 2}])
def test_from_sparse_index_out_of_range(entries):
    with pytest.raises(IndexOutOfRange):
        CyclotomicInteger.from_sparse(entries, 3)


def test_from_sparse_does_not_alias_mapping():
    entries = {1: 7}
    x = CyclotomicInteger.from_sparse(entries, 4)
    entries[2] = 9
    assert entries == {1: 7, 2: 9}
    assert x.coefficients == (0, 7, 0, 0)


def test_explicit_level_must_match():
    assert CyclotomicInteger([1, 2, 3], 3).level() == 3
    with pytest.raises(LengthMismatch):
        CyclotomicInteger([1, 2, 3], 4)
    with pytest.raises(InvalidLevel):
        CyclotomicInteger([], 0)


def test_coefficient_at_and_indexing():
    x = CyclotomicInteger.from_dense([4, 0, -2])
    assert x.coefficient_at(0) == 4
    assert x.coefficient_at(2) == -2
    assert x[2] == -2
    with pytest.raises(IndexOutOfRange):
        x.coefficient_at(3)
    with pytest.raises(IndexError):
        x[-1]


def test_support():
    assert CyclotomicInteger.from_dense([0, 1, 0, 0]).support() == {1: 1}
    x = CyclotomicInteger.from_sparse({0: 263, 3: -12748}, 10)
    assert x.support() == {0: 263, 3: -12748}


def test_support_is_fresh_each_call():
    x = CyclotomicInteger.from_dense([0, 5, 0])
    support = x.support()
    support[0] = 1
    assert x.support() == {1: 5}
    assert x.coefficients == (0, 5, 0)


def test_immutability():
    x = CyclotomicInteger.from_dense([1, 2])
    with pytest.raises(AttributeError):
        x.coefficients = (3, 4)
    with pytest.raises(TypeError):
        x.coefficients[0] = 3


def test_equality_hash_and_repr():
    a = CyclotomicInteger.from_dense([0, 1, 0, 0])
    b = CyclotomicInteger.from_sparse({1: 1}, 4)
    assert a == b
    assert hash(a) == hash(b)
    assert a != CyclotomicInteger.from_dense([0, 1, 0])
    assert a != [0, 1, 0, 0]
    assert repr(a) == "[0, 1, 0, 0]"


def test_errors_share_base_class():
    for error in (InvalidLevel, IndexOutOfRange, LengthMismatch, NotAUnit):
        assert issubclass(error, CyclotomicError)


@pytest.mark.parametrize("coefficients", [[0.5, 1], [1.0, 2], ["1", 0]])
def test_non_integral_coefficients_rejected(coefficients):
    with pytest.raises(TypeError):
        CyclotomicInteger.from_dense(coefficients)


def test_non_integral_sparse_value_rejected():
    with pytest.raises(TypeError):
        CyclotomicInteger.from_sparse({1: 2.5}, 3)


def test_numpy_integers_accepted():
    x = CyclotomicInteger.from_dense(np.array([0, 3, -1], dtype=np.int64))
    assert x.coefficients == (0, 3, -1)
    assert all(type(c) is int for c in x.coefficients)
