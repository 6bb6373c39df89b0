"""Unit tests for savgolkit.weights.factorial."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from savgolkit.weights.factorial import (
    factorial_ratio,
    generalized_factorial,
    ln_generalized_factorial,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (4, 2, 12.0),  # 4 * 3
        (5, 5, 120.0),  # 5!
        (5, 0, 1.0),  # empty product
        (5, 1, 5.0),
        (10, 3, 720.0),  # 10 * 9 * 8
    ],
)
def test_generalized_factorial_known_values(a, b, expected):
    """Tests that the direct product matches hand-computed values."""
    assert generalized_factorial(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (4, 2, 12.0),
        (5, 5, 120.0),
        (5, 0, 1.0),
        (5, 1, 5.0),
    ],
)
def test_ln_generalized_factorial_exponentiates_to_known_values(a, b, expected):
    """Tests that exp(ln GF) recovers the generalized factorial."""
    assert_allclose(math.exp(ln_generalized_factorial(a, b)), expected, rtol=0, atol=1e-10)


def test_generalized_factorial_includes_zero_factor_past_a():
    """Tests that GF(a, b) is zero once the product reaches the zero term."""
    assert generalized_factorial(4, 5) == 0.0


def test_ln_generalized_factorial_rejects_b_greater_than_a():
    """Tests that the log form refuses products with non-positive factors."""
    with pytest.raises(ValueError):
        ln_generalized_factorial(3, 4)


@pytest.mark.parametrize("m", [0, 1, 2, 5, 10])
def test_factorial_ratio_log_and_direct_agree_for_small_windows(m):
    """Tests that both factorial paths agree where the direct product is exact."""
    for k in range(2 * m + 1):
        assert_allclose(
            factorial_ratio(m, k, log_space=True),
            factorial_ratio(m, k, log_space=False),
            rtol=1e-12,
        )


def test_factorial_ratio_log_space_survives_large_windows():
    """Tests that the log path stays finite where direct products overflow."""
    m, k = 200, 180
    assert math.isinf(generalized_factorial(2 * m + k + 1, k + 1))

    ratio = factorial_ratio(m, k, log_space=True)
    assert np.isfinite(ratio)
    assert ratio > 0.0
