"""Generalized falling factorials used by the Gram polynomial weights.

The generalized factorial ``GF(a, b) = a (a - 1) ... (a - b + 1)`` is the
product of ``b`` consecutive descending terms starting at ``a``, with
``GF(a, 0) = 1``.

The convolution weights only ever need the ratio
``GF(2m, k) / GF(2m + k + 1, k + 1)``. Both factors grow combinatorially, so
for wide windows the direct product overflows long before the ratio does.
:func:`ln_generalized_factorial` keeps the computation in log space and
:func:`factorial_ratio` exponentiates once at the end.
"""

from __future__ import annotations

import math

from scipy.special import gammaln

__all__ = [
    "generalized_factorial",
    "ln_generalized_factorial",
    "factorial_ratio",
]


def generalized_factorial(a: int, b: int) -> float:
    """Returns the generalized falling factorial ``a (a-1) ... (a-b+1)``.

    This is the direct product. It is exact for small arguments but
    overflows to ``inf`` once the product exceeds the double range.

    Args:
        a: First (largest) term of the product.
        b: Number of terms. ``b <= 0`` gives the empty product ``1.0``.

    Returns:
        The product as a float.
    """
    result = 1.0
    for j in range(b):
        result *= float(a - j)
    return result


def ln_generalized_factorial(a: int, b: int) -> float:
    """Returns the natural log of the generalized factorial ``GF(a, b)``.

    Computed as ``ln(a!) - ln((a - b)!)`` through the log-gamma function.

    Args:
        a: First (largest) term of the product.
        b: Number of terms.

    Returns:
        ``ln GF(a, b)``.

    Raises:
        ValueError: If ``a - b < 0``, where the product contains a zero or
            negative factor and has no real logarithm.
    """
    if a - b < 0:
        raise ValueError(
            f"ln_generalized_factorial requires a >= b; got a={a}, b={b}."
        )
    return float(gammaln(a + 1.0) - gammaln(a - b + 1.0))


def factorial_ratio(m: int, k: int, *, log_space: bool = True) -> float:
    """Returns ``GF(2m, k) / GF(2m + k + 1, k + 1)``.

    Args:
        m: Window half-width.
        k: Gram polynomial order, ``0 <= k <= 2m``.
        log_space: If True (default), evaluate as a difference of log
            factorials and exponentiate once. If False, divide the direct
            products.

    Returns:
        The ratio as a float.
    """
    if log_space:
        return math.exp(
            ln_generalized_factorial(2 * m, k)
            - ln_generalized_factorial(2 * m + k + 1, k + 1)
        )
    return generalized_factorial(2 * m, k) / generalized_factorial(
        2 * m + k + 1, k + 1
    )
