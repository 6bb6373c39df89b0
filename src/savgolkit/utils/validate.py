"""Validation utilities for SavGolKit."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "validate_non_negative_int",
    "validate_positive_finite",
    "validate_sequence",
]


def validate_non_negative_int(value, name: str) -> int:
    """Checks that ``value`` is a non-negative integer and returns it as ``int``.

    NumPy integer scalars are accepted. Booleans and floats are rejected even
    when they hold an integral value, so ``radius=2.0`` is an error rather
    than a silent truncation.

    Args:
        value: The value to check.
        name: Argument name used in the error message.

    Returns:
        ``value`` converted to a Python ``int``.

    Raises:
        TypeError: If ``value`` is not an integer.
        ValueError: If ``value`` is negative.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer; got {type(value).__name__}."
        )
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative but is {value}.")
    return value


def validate_positive_finite(value, name: str) -> float:
    """Checks that ``value`` is a finite real number greater than zero."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"{name} must be a real number; got {type(value).__name__}."
        )
    value = float(value)
    if not np.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be finite and positive but is {value}.")
    return value


def validate_sequence(data: ArrayLike) -> NDArray[np.float64]:
    """Converts a sequence of samples into a 1D float array.

    A copy is always made, so callers may modify the result without touching
    the input.

    Args:
        data: 1D array-like of real samples. May be empty.

    Returns:
        A new 1D ``float64`` array holding the samples.

    Raises:
        ValueError: If ``data`` is not one-dimensional.
    """
    arr = np.array(data, dtype=float, copy=True)
    if arr.ndim != 1:
        raise ValueError(
            f"data must be one-dimensional; got array with ndim={arr.ndim}."
        )
    return arr
