"""Savitzky-Golay convolution weights from Gram polynomials.

The weights follow the closed form given by Gorry:
A. Gorry, *General least-squares smoothing and differentiation by the
convolution (Savitzky-Golay) method*, Analytical Chemistry, vol. 62, no. 6,
pp. 570-573, 1990. doi:10.1021/ac00205a007

The weight applied to the sample at relative position ``i`` when estimating
the ``s``-th derivative of a degree ``n`` least-squares polynomial at
relative position ``t``, over a window of ``2m + 1`` points, is::

    w(i, t) = sum_{k=0}^{n} (2k + 1) * GF(2m, k) / GF(2m + k + 1, k + 1)
                            * G(i, m, k, 0) * G(t, m, k, s)

where ``G`` is the Gram polynomial (or its derivative) and ``GF`` the
generalized falling factorial.

Examples:
=========

The classic five-point quadratic smoothing weights::
>>> from savgolkit.weights.gram import weight
>>> [round(weight(i, 2, 2, 0, 0) * 35, 10) for i in range(-2, 3)]
[-3.0, 12.0, 17.0, 12.0, -3.0]
"""

from __future__ import annotations

from savgolkit.weights.factorial import factorial_ratio

__all__ = ["gram_poly", "gram_orders", "weight"]


def gram_orders(x, m: int, n: int, s: int) -> list:
    """Evaluates the ``s``-th derivative of every Gram polynomial up to order ``n``.

    The three-term recurrence is::

        G(x, m, 0, 0) = 1
        G(x, m, k, s) = A_k * (x * G(x, m, k-1, s) + s * G(x, m, k-1, s-1))
                        - B_k * G(x, m, k-2, s)

        A_k = (4k - 2) / (k (2m - k + 1))
        B_k = ((k - 1)(2m + k)) / (k (2m - k + 1))

    with ``G = 0`` for negative orders and for ``k = 0, s > 0``. The table is
    built bottom-up over derivative orders ``0..s`` so every ``(k, s)`` pair
    is computed once per call.

    Orders above ``2m`` are outside the window's polynomial space and are
    returned as zero.

    Args:
        x: Evaluation position(s). A scalar or a NumPy array; arrays are
            evaluated elementwise.
        m: Window half-width.
        n: Highest Gram polynomial order.
        s: Derivative order.

    Returns:
        A list of length ``n + 1`` whose entry ``k`` is ``G(x, m, k, s)``.
        Empty if ``n < 0``.
    """
    if n < 0:
        return []
    if s < 0:
        return [0.0 * x for _ in range(n + 1)]

    top = max(min(n, 2 * m), 0)
    previous = None
    for d in range(s + 1):
        row = [1.0 + 0.0 * x if d == 0 else 0.0 * x]
        for k in range(1, top + 1):
            denom = k * (2 * m - k + 1)
            a_k = (4 * k - 2) / denom
            b_k = ((k - 1) * (2 * m + k)) / denom
            lower = previous[k - 1] if d > 0 else 0.0
            two_back = row[k - 2] if k >= 2 else 0.0
            row.append(a_k * (x * row[k - 1] + d * lower) - b_k * two_back)
        previous = row

    return previous + [0.0 * x for _ in range(n - top)]


def gram_poly(i, m: int, k: int, s: int = 0) -> float:
    """Returns the Gram polynomial of order ``k`` (or its ``s``-th derivative).

    Evaluated at ``i`` over the ``2m + 1`` points ``-m..m``.

    Args:
        i: Evaluation position.
        m: Window half-width.
        k: Polynomial order. Negative orders give ``0``.
        s: Derivative order. Negative orders give ``0``.

    Returns:
        ``G(i, m, k, s)``.
    """
    if k < 0:
        return 0.0
    return gram_orders(i, m, k, s)[k]


def weight(i: int, m: int, n: int, t: int, s: int = 0, *,
           log_space: bool = True) -> float:
    """Returns the least-squares convolution weight of sample ``i``.

    This is the weight of the ``i``-th sample for the ``t``-th least-squares
    point of the ``s``-th derivative, over ``2m + 1`` points, for a
    polynomial of degree ``n``.

    No bounds are checked: positions outside ``[-m, m]`` are still evaluated
    by the recurrence, and ``s > n`` gives zero weights because every Gram
    polynomial of order below ``s`` has a vanishing ``s``-th derivative.
    Terms with ``k > 2m`` vanish since ``GF(2m, k)`` then contains a zero
    factor, so a degree larger than the window supports behaves like
    degree ``2m``.

    Args:
        i: Sample position relative to the window center.
        m: Window half-width.
        n: Polynomial degree.
        t: Evaluation position relative to the window center.
        s: Derivative order (``0`` for smoothing).
        log_space: If True (default), the factorial ratio is computed in
            log space. Set to False to use direct products, which are exact
            for small windows but overflow for large ones.

    Returns:
        The convolution weight.
    """
    top = min(n, 2 * m)
    g_i = gram_orders(i, m, top, 0)
    g_t = gram_orders(t, m, top, s)

    total = 0.0
    for k in range(top + 1):
        total += (
            (2 * k + 1)
            * factorial_ratio(m, k, log_space=log_space)
            * g_i[k]
            * g_t[k]
        )
    return total
