"""Vectorized Savitzky-Golay weight vectors and tables."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from savgolkit.weights.factorial import factorial_ratio
from savgolkit.weights.gram import gram_orders

__all__ = ["weight_vector", "weight_table"]


def weight_vector(m: int, n: int, t: int, s: int = 0, *,
                  log_space: bool = True) -> NDArray[np.float64]:
    """Returns the weights of all ``2m + 1`` window samples at offset ``t``.

    Entry ``i + m`` equals :func:`savgolkit.weights.gram.weight` for
    ``i = -m..m``. The Gram polynomials are evaluated for the whole window
    at once instead of point by point.

    Args:
        m: Window half-width.
        n: Polynomial degree.
        t: Evaluation position relative to the window center.
        s: Derivative order.
        log_space: See :func:`savgolkit.weights.gram.weight`.

    Returns:
        Array of shape ``(2m + 1,)``.
    """
    positions = np.arange(-m, m + 1, dtype=float)
    top = min(n, 2 * m)
    g_i = gram_orders(positions, m, top, 0)
    g_t = gram_orders(float(t), m, top, s)

    weights = np.zeros(positions.shape, dtype=float)
    for k in range(top + 1):
        weights += (
            (2 * k + 1)
            * factorial_ratio(m, k, log_space=log_space)
            * g_t[k]
            * g_i[k]
        )
    return weights


def weight_table(m: int, n: int, s: int = 0, *,
                 log_space: bool = True) -> NDArray[np.float64]:
    """Returns the full table of convolution weights for a window.

    Row ``t + m`` holds :func:`weight_vector` at offset ``t`` for
    ``t = -m..m``, so ``weight_table(m, n, s) @ window`` evaluates the
    fitted polynomial (or its derivative) at every point of one window.

    Args:
        m: Window half-width.
        n: Polynomial degree.
        s: Derivative order.
        log_space: See :func:`savgolkit.weights.gram.weight`.

    Returns:
        Array of shape ``(2m + 1, 2m + 1)``.
    """
    return np.vstack(
        [weight_vector(m, n, t, s, log_space=log_space)
         for t in range(-m, m + 1)]
    ).reshape(2 * m + 1, 2 * m + 1)
