"""
Elementary number theory used by the cyclotomic code: Euler's totient,
the unit group modulo n and prime factorizations.
"""

from __future__ import annotations

import math
from typing import Dict, List

from sympy import factorint


def _check_modulus(n: int) -> None:
    if n < 1:
        raise ValueError(f"modulus must be a positive integer, got n={n}")


def prime_factorization(n: int) -> Dict[int, int]:
    """
    Return the prime factorization of n as a dictionary {prime: exponent}.
    The factorization of 1 is the empty dictionary.
    """
    _check_modulus(n)
    return {int(p): int(e) for p, e in factorint(n).items()}


def _euler_phi_trial(n: int) -> int:
    # gcd(0, 1) == 1, so phi(1) == 1
    return sum(1 for i in range(n) if math.gcd(i, n) == 1)


def _euler_phi_factorization(n: int) -> int:
    result = n
    for p in prime_factorization(n):
        result -= result // p
    return result


def euler_phi(n: int, method: str = "trial") -> int:
    """
    Euler's totient function.

    Parameters:
    n -- positive integer
    method -- "trial" counts the residues in [0, n) coprime to n with one gcd
              per residue; "factorization" uses n * prod(1 - 1/p) over the
              prime divisors p of n

    Both methods agree for every n >= 1, including euler_phi(1) == 1.
    """
    _check_modulus(n)

    if method == "trial":
        return _euler_phi_trial(n)
    if method == "factorization":
        return _euler_phi_factorization(n)
    raise ValueError(f"Unknown totient method {method!r}, expected 'trial' or 'factorization'")


def unit_group(n: int) -> List[int]:
    """
    Return the invertible residues modulo n, as reduced integers in [0, n),
    in increasing order.

    For n = 1 this is [0], by the same convention that makes euler_phi(1) == 1.
    """
    _check_modulus(n)
    return [k for k in range(n) if math.gcd(k, n) == 1]
