import random

import pytest

from cyclotomic_integer import CyclotomicInteger, NotAUnit, conjugates, galois_action
from number_theory import euler_phi


def _vectors(values):
    return [list(c.coefficients) for c in values]


def _random_element(rng, n):
    return CyclotomicInteger.from_dense([rng.randint(-3, 3) for _ in range(n)])


@pytest.mark.parametrize("method", ["scan", "hashed"])
def test_conjugates_of_i_in_level_4(method):
    x = CyclotomicInteger.from_dense([0, 1, 0, 0])
    result = x.conjugates(method=method)
    assert _vectors(result) == [[0, 1, 0, 0], [0, 0, 0, 1]]
    assert len(result) == euler_phi(4)


@pytest.mark.parametrize("method", ["scan", "hashed"])
def test_conjugates_of_i_in_level_8(method):
    x = CyclotomicInteger.from_dense([0, 0, 1, 0, 0, 0, 0, 0])
    result = x.conjugates(method=method)
    assert _vectors(result) == [[0, 0, 1, 0, 0, 0, 0, 0], [0, 0, 0, 0, 0, 0, 1, 0]]
    assert len(result) < euler_phi(8)


def test_level_one_boundary():
    x = CyclotomicInteger.from_dense([7])
    assert _vectors(x.conjugates()) == [[7]]
    assert x.stabilizer() == [0]
    assert x.galois_conjugate(0) == x


def test_identity_automorphism():
    rng = random.Random(0)
    for n in range(2, 25):
        x = _random_element(rng, n)
        assert galois_action(x.coefficients, 1) == x.coefficients


def test_first_conjugate_is_self_and_length_bounds():
    rng = random.Random(1)
    for n in range(1, 31):
        x = _random_element(rng, n)
        result = x.conjugates()
        assert result[0] == x
        assert 1 <= len(result) <= euler_phi(n)
        assert all(c.level() == n for c in result)
        assert len(set(result)) == len(result)


def test_scan_and_hashed_agree():
    rng = random.Random(2)
    for n in range(1, 31):
        x = _random_element(rng, n)
        assert conjugates(x, method="scan") == conjugates(x, method="hashed")


def test_order_follows_first_unit():
    # z^3 at level 12: k = 1, 5, 7, 11 give exponents 3, 3, 9, 9
    x = CyclotomicInteger.from_sparse({3: 1}, 12)
    assert [c.support() for c in x.conjugates()] == [{3: 1}, {9: 1}]


def test_generic_element_has_full_orbit():
    for n in (5, 8, 12, 15):
        x = CyclotomicInteger.from_dense(list(range(1, n + 1)))
        assert len(x.conjugates()) == euler_phi(n)
        assert x.stabilizer() == [1]


def test_rational_integer_is_fixed():
    x = CyclotomicInteger.from_sparse({0: 5}, 9)
    assert x.conjugates() == [x]
    assert len(x.stabilizer()) == euler_phi(9)


def test_orbit_stabilizer():
    rng = random.Random(3)
    for n in range(1, 25):
        x = CyclotomicInteger.from_sparse({rng.randrange(n): 1}, n)
        assert len(x.stabilizer()) * len(x.conjugates()) == euler_phi(n)


def test_conjugates_are_closed_under_galois_action():
    x = CyclotomicInteger.from_dense([1, 0, 2, 0, 0, 3, 0, 0, 0, 0])
    orbit = set(x.conjugates())
    for c in orbit:
        for k in (1, 3, 7, 9):
            assert c.galois_conjugate(k) in orbit


def test_galois_conjugate():
    x = CyclotomicInteger.from_dense([0, 1, 0, 0, 0])
    assert x.galois_conjugate(2).support() == {2: 1}
    assert x.galois_conjugate(-1).support() == {4: 1}
    with pytest.raises(NotAUnit):
        CyclotomicInteger.from_dense([0, 1, 0, 0]).galois_conjugate(2)


def test_input_is_not_modified():
    x = CyclotomicInteger.from_dense([3, 1, 4, 1, 5, 9])
    before = x.coefficients
    x.conjugates()
    x.stabilizer()
    assert x.coefficients == before


def test_unknown_dedup_method():
    with pytest.raises(ValueError, match="Unknown dedup method"):
        CyclotomicInteger.from_dense([1, 2]).conjugates(method="sorted")
