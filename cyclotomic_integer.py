"""
Cyclotomic integers stored as dense coefficient vectors, and their Galois
conjugates.

A cyclotomic integer of level n is an integer combination
    c_0 + c_1 * z + ... + c_{n-1} * z^{n-1}
of the powers of a primitive n-th root of unity z. It is stored as the
length-n vector (c_0, ..., c_{n-1}) without any reduction by the cyclotomic
polynomial, so distinct vectors may describe the same algebraic number.

The Galois group of Q(z) acts through the automorphisms sigma_k: z -> z^k for
k coprime to n. On the dense vector, sigma_k moves the coefficient at index i
to index (i * k) mod n.
"""

from __future__ import annotations

import operator
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from number_theory import unit_group


class CyclotomicError(Exception):
    """Base class for errors raised by cyclotomic integers."""
    pass


class InvalidLevel(CyclotomicError, ValueError):
    """Raised when a level of 0 (no 0-th roots of unity) is requested."""
    pass


class IndexOutOfRange(CyclotomicError, IndexError):
    """Raised when a coefficient index falls outside [0, level)."""
    pass


class LengthMismatch(CyclotomicError, ValueError):
    """Raised when an explicit level disagrees with the coefficient count."""
    pass


class NotAUnit(CyclotomicError, ValueError):
    """Raised when sigma_k is requested for k not invertible modulo the level."""
    pass


def galois_action(coefficients: Sequence[int], k: int) -> Tuple[int, ...]:
    """
    Apply sigma_k to a dense coefficient vector of level len(coefficients).

    The coefficient at index i moves to index (i * k) mod n. For a unit k this
    is a permutation of the indices; k = 1 is the identity.
    """
    n = len(coefficients)
    conjugate = [0] * n
    for i in range(n):
        conjugate[(i * k) % n] = coefficients[i]
    return tuple(conjugate)


def _dedup_scan(candidates: List[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
    # Quadratic reference: compare every candidate with all kept ones
    unique = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def _dedup_hashed(candidates: List[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
    # dict keeps insertion order, so first-seen order survives
    first_seen: Dict[Tuple[int, ...], int] = {}
    for rank, candidate in enumerate(candidates):
        first_seen.setdefault(candidate, rank)
    return list(first_seen)


_DEDUP_METHODS = {
    "scan": _dedup_scan,
    "hashed": _dedup_hashed,
}


def conjugates(x: "CyclotomicInteger", method: str = "scan") -> List["CyclotomicInteger"]:
    """
    Compute the distinct Galois conjugates of x.

    Every unit k modulo the level is applied in increasing order, and repeated
    vectors are dropped keeping the first occurrence. Since k = 1 always comes
    first among the units (k = 0 for level 1), x itself is the first element.

    Parameters:
    x -- cyclotomic integer
    method -- deduplication strategy: "scan" compares each candidate against
              the conjugates already kept, "hashed" looks them up in a dict
              keyed by the coefficient tuple. Both give the same list.

    Returns:
    list of CyclotomicInteger of the same level as x, between 1 and
    euler_phi(level) long
    """
    try:
        dedup = _DEDUP_METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown dedup method {method!r}, expected one of {sorted(_DEDUP_METHODS)}") from None

    n = x.level()
    candidates = [galois_action(x.coefficients, k) for k in unit_group(n)]

    return [CyclotomicInteger(vec, n) for vec in dedup(candidates)]


class CyclotomicInteger:
    """
    An immutable cyclotomic integer of a fixed level, stored as a dense
    coefficient vector indexed by the exponent of the root of unity.

    Build instances with from_dense or from_sparse; the constructor also
    accepts an explicit level, which must match the number of coefficients.
    """

    __slots__ = ("_level", "_coefficients")

    def __init__(self, coefficients: Sequence[int], level: Optional[int] = None):
        coefficients = tuple(operator.index(c) for c in coefficients)

        if level is None:
            level = len(coefficients)
        if level <= 0:
            raise InvalidLevel("no 0-th roots of unity: level must be a positive integer")
        if len(coefficients) != level:
            raise LengthMismatch(
                f"level {level} requires {level} coefficients, got {len(coefficients)}"
            )

        self._level = level
        self._coefficients = coefficients

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_dense(cls, coefficients: Sequence[int]) -> "CyclotomicInteger":
        """Build from a dense coefficient vector; the level is its length."""
        return cls(coefficients)

    @classmethod
    def from_sparse(cls, entries: Mapping[int, int], level: int) -> "CyclotomicInteger":
        """
        Build from a mapping {index: coefficient}; missing indices are zero.

        The mapping is copied before use, the caller's object is neither
        kept nor modified.
        """
        if level <= 0:
            raise InvalidLevel("no 0-th roots of unity: level must be a positive integer")

        entries = dict(entries)
        coefficients = [0] * level
        for index, value in entries.items():
            if not 0 <= index < level:
                raise IndexOutOfRange(f"index {index} out of range for level {level}")
            coefficients[index] = value

        return cls(coefficients, level)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def level(self) -> int:
        return self._level

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    def coefficient_at(self, i: int) -> int:
        """Return the coefficient of z^i."""
        if not 0 <= i < self._level:
            raise IndexOutOfRange(f"index {i} out of range for level {self._level}")
        return self._coefficients[i]

    def support(self) -> Dict[int, int]:
        """Return a new {index: coefficient} dict of the nonzero coefficients."""
        return {i: c for i, c in enumerate(self._coefficients) if c != 0}

    # ------------------------------------------------------------------
    # Galois action
    # ------------------------------------------------------------------

    def galois_conjugate(self, k: int) -> "CyclotomicInteger":
        """Return sigma_k(self). k is taken modulo the level and must be a unit."""
        k %= self._level
        if k not in unit_group(self._level):
            raise NotAUnit(f"{k} is not invertible modulo {self._level}")
        return CyclotomicInteger(galois_action(self._coefficients, k), self._level)

    def conjugates(self, method: str = "scan") -> List["CyclotomicInteger"]:
        """Return the distinct Galois conjugates, self first."""
        return conjugates(self, method=method)

    def stabilizer(self) -> List[int]:
        """
        Return the units k with sigma_k(self) == self, in increasing order.

        The stabilizer and the conjugates satisfy
        len(stabilizer) * len(conjugates) == euler_phi(level).
        """
        return [
            k for k in unit_group(self._level)
            if galois_action(self._coefficients, k) == self._coefficients
        ]

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __getitem__(self, i: int) -> int:
        return self.coefficient_at(i)

    def __len__(self) -> int:
        return self._level

    def __iter__(self) -> Iterator[int]:
        return iter(self._coefficients)

    def __eq__(self, other):
        if not isinstance(other, CyclotomicInteger):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __repr__(self):
        return repr(list(self._coefficients))
