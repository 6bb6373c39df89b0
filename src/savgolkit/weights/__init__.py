"""Gram polynomial convolution weights."""

from savgolkit.weights.factorial import (
    factorial_ratio,
    generalized_factorial,
    ln_generalized_factorial,
)
from savgolkit.weights.gram import gram_orders, gram_poly, weight
from savgolkit.weights.tables import weight_table, weight_vector

__all__ = [
    "factorial_ratio",
    "generalized_factorial",
    "ln_generalized_factorial",
    "gram_orders",
    "gram_poly",
    "weight",
    "weight_table",
    "weight_vector",
]
