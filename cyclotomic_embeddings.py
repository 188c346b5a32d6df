"""
Numerical exploration of cyclotomic integers: complex embeddings, magnitudes
of the conjugates and the field norm.

The embedding used throughout sends the root of unity of level n to
exp(2*pi*i/n); the conjugate sigma_k(x) is then x evaluated at exp(2*pi*i*k/n).
"""

import warnings

import numpy as np
from mpmath import mp, mpc, mpf, exp, pi, fprod, nint
from sympy import Poly, Symbol, cyclotomic_poly

from cyclotomic_integer import galois_action
from number_theory import euler_phi, unit_group

# Set precision for high-accuracy computations
mp.dps = 30

# Largest integer magnitude float64 holds exactly
FLOAT_EXACT_LIMIT = 2 ** 53


def as_array(x):
    """Return the coefficient vector of x as a numpy int64 array."""
    return np.array(x.coefficients, dtype=np.int64)


def complex_embedding(x, k=1):
    """
    Evaluate x at exp(2*pi*i*k/n) with mpmath precision.

    With k a unit modulo the level this is the value of sigma_k(x) under the
    standard embedding.
    """
    n = x.level()
    value = mpc(0)
    for i, c in x.support().items():
        value += c * exp(2 * pi * 1j * mpf((i * k) % n) / n)
    return value


def conjugate_values(x):
    """Return the complex values of the distinct conjugates of x, in order."""
    return [complex_embedding(c) for c in x.conjugates()]


def embedding_matrix(n):
    """
    Return the numpy matrix E with E[j, i] = exp(2*pi*i * i*k_j / n), where
    k_j runs over the units modulo n in increasing order.

    E @ coefficients gives the values of all sigma_k(x) at once.
    """
    units = np.array(unit_group(n))
    indices = np.arange(n)
    angles = 2 * np.pi * 1j * np.outer(units, indices) / n
    return np.exp(angles)


def _first_unit_rows(x):
    # Row of the embedding matrix (position in unit_group) that first
    # produces each distinct conjugate, in the order of x.conjugates()
    rows = {}
    for row, k in enumerate(unit_group(x.level())):
        rows.setdefault(galois_action(x.coefficients, k), row)
    return list(rows.values())


def conjugate_magnitudes(x):
    """
    Return the absolute values of the distinct conjugates of x as floats,
    in the order returned by x.conjugates().

    Coefficients that float64 represents exactly go through the numpy
    embedding matrix; larger ones are evaluated with mpmath.
    """
    if any(abs(c) > FLOAT_EXACT_LIMIT for c in x.coefficients):
        return [float(abs(v)) for v in conjugate_values(x)]

    E = embedding_matrix(x.level())
    values = E @ as_array(x).astype(np.float64)
    return np.abs(values[_first_unit_rows(x)]).tolist()


def house(x):
    """Return the house of x: the largest absolute value among its conjugates."""
    return max(conjugate_magnitudes(x))


def norm(x):
    """
    Return the field norm of x from Q(z_n) down to Q, as an exact Python int.

    The norm is the product of sigma_k(x) over every unit k, not only over the
    distinct conjugates. Since the n-th cyclotomic polynomial is monic, this is
    the resultant of that polynomial and c_0 + c_1*z + ... + c_{n-1}*z^{n-1}.
    """
    n = x.level()
    support = x.support()

    if not support:
        return 0
    if list(support) == [0]:
        return support[0] ** euler_phi(n)

    z = Symbol('z')
    f = Poly(sum(c * z**i for i, c in support.items()), z)
    return int(Poly(cyclotomic_poly(n, z), z).resultant(f))


def numerical_norm(x, tolerance=1e-10):
    """
    Evaluate the field norm of x as an mpmath product of its embeddings.

    Useful as a cross-check of norm(). A warning is issued when the product is
    not within tolerance of an integer, or when it has too many digits for
    mp.dps to resolve its integer part.
    """
    n = x.level()
    product = fprod(complex_embedding(x, k) for k in unit_group(n))
    rounded = nint(product.real)

    if (abs(product) >= mpf(10) ** (mp.dps - 2)
            or abs(product.imag) > tolerance
            or abs(product.real - rounded) > tolerance):
        warnings.warn(
            f"Norm of {x!r} is not numerically integral: {product}; "
            f"consider raising mp.dps (currently {mp.dps})"
        )

    return product


def magnitude_profile(x):
    """
    Summarize the conjugate magnitudes of x.

    Returns:
    dict with the level, the number of conjugates, the minimum, maximum
    and mean magnitude
    """
    magnitudes = conjugate_magnitudes(x)
    return {
        'level': x.level(),
        'conjugates': len(magnitudes),
        'min_magnitude': min(magnitudes),
        'max_magnitude': max(magnitudes),
        'mean_magnitude': float(np.mean(magnitudes)),
    }
