"""Unit tests for savgolkit.utils.validate."""

import numpy as np
import pytest

from savgolkit.utils.validate import (
    validate_non_negative_int,
    validate_positive_finite,
    validate_sequence,
)


@pytest.mark.parametrize("value", [0, 3, np.int64(7)])
def test_validate_non_negative_int_accepts_integers(value):
    """Tests that Python and NumPy integers are accepted and returned as int."""
    out = validate_non_negative_int(value, "radius")
    assert out == int(value)
    assert type(out) is int


@pytest.mark.parametrize("value", [2.0, "2", None, True])
def test_validate_non_negative_int_rejects_non_integers(value):
    """Tests that floats, strings, None and booleans raise TypeError."""
    with pytest.raises(TypeError, match="radius"):
        validate_non_negative_int(value, "radius")


def test_validate_non_negative_int_rejects_negative():
    """Tests that negative integers raise ValueError naming the argument."""
    with pytest.raises(ValueError, match="degree must be non-negative"):
        validate_non_negative_int(-1, "degree")


@pytest.mark.parametrize("value", [0.0, -1.0, np.inf, np.nan])
def test_validate_positive_finite_rejects_bad_values(value):
    """Tests that zero, negative and non-finite spacings raise ValueError."""
    with pytest.raises(ValueError, match="delta"):
        validate_positive_finite(value, "delta")


def test_validate_positive_finite_accepts_ints_and_floats():
    """Tests that positive ints and floats are converted to float."""
    assert validate_positive_finite(2, "delta") == 2.0
    assert validate_positive_finite(0.25, "delta") == 0.25


def test_validate_sequence_copies_input():
    """Tests that the returned array is a float copy of the input."""
    data = np.array([1, 2, 3])
    out = validate_sequence(data)
    out[0] = 99.0
    assert data[0] == 1
    assert out.dtype == np.float64


def test_validate_sequence_accepts_empty():
    """Tests that an empty sequence is a valid 1D input."""
    assert validate_sequence([]).shape == (0,)


@pytest.mark.parametrize("data", [1.0, [[1.0, 2.0], [3.0, 4.0]]])
def test_validate_sequence_rejects_non_1d(data):
    """Tests that scalars and 2D arrays raise ValueError."""
    with pytest.raises(ValueError, match="one-dimensional"):
        validate_sequence(data)
