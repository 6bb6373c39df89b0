"""Savitzky-Golay smoothing and differentiation of 1D sequences.

The filter fits a degree ``n`` polynomial by least squares to each window of
``2m + 1`` consecutive samples and replaces the window's center by the value
(or ``s``-th derivative) of that polynomial. The fit is never solved
explicitly: each output is a dot product of the window with the convolution
weights of :mod:`savgolkit.weights`.

Edges are not padded. The first ``m`` outputs all use the leading window
``data[:2m + 1]`` evaluated at offsets ``t = -m..-1``, and the last ``m``
outputs use the trailing window evaluated at ``t = 1..m``. This keeps the
polynomial degree at the cost of reusing the boundary samples.

Sequences shorter than one window are smoothed with the largest radius that
fits, and sequences of at most two samples are returned unchanged.

Examples:
=========

Smoothing recovers a straight line exactly::
>>> import numpy as np
>>> from savgolkit.filters.savitzky_golay import SavitzkyGolayFilter
>>> sg = SavitzkyGolayFilter(radius=2, degree=2)
>>> bool(np.allclose(sg.smooth([1, 2, 3, 4, 5, 6, 7]), [1, 2, 3, 4, 5, 6, 7]))
True

First derivative of a sampled parabola with spacing 0.5::
>>> x = np.arange(9) * 0.5
>>> sg = SavitzkyGolayFilter(radius=2, degree=2, derivative=1, delta=0.5)
>>> bool(np.allclose(sg.smooth(x**2), 2 * x))
True
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike, NDArray

from savgolkit.filters.filter_config import FilterConfig
from savgolkit.logger import savgolkit_logger
from savgolkit.utils.validate import validate_sequence
from savgolkit.weights.gram import weight as gram_weight
from savgolkit.weights.tables import weight_vector

__all__ = ["SavitzkyGolayFilter", "savgol_smooth"]


class SavitzkyGolayFilter:
    """Smooths or differentiates a 1D sequence with a Savitzky-Golay filter.

    The filter holds no state besides its :class:`FilterConfig`; weights are
    recomputed on every call, so one instance can be shared between threads.

    Attributes:
        config: The immutable filter parameters.
    """

    def __init__(
        self,
        radius: int,
        degree: int,
        derivative: int = 0,
        *,
        delta: float = 1.0,
    ) -> None:
        """Initialises the filter.

        Args:
            radius: Window half-width ``m``; each fit uses ``2m + 1`` samples.
            degree: Degree ``n`` of the fitted polynomial.
            derivative: Derivative order ``s``; ``0`` smooths.
            delta: Sample spacing used to scale derivatives.

        Raises:
            TypeError: If an integer argument is not an integer.
            ValueError: If an argument is negative, or ``delta`` is not
                finite and positive.
        """
        self.config = FilterConfig(radius, degree, derivative, delta)

    @classmethod
    def from_config(cls, config: FilterConfig) -> SavitzkyGolayFilter:
        """Builds a filter from an existing :class:`FilterConfig`."""
        obj = cls.__new__(cls)
        obj.config = config
        return obj

    @property
    def radius(self) -> int:
        """Window half-width ``m``."""
        return self.config.radius

    @property
    def degree(self) -> int:
        """Polynomial degree ``n``."""
        return self.config.degree

    @property
    def derivative(self) -> int:
        """Derivative order ``s``."""
        return self.config.derivative

    def __repr__(self) -> str:
        cfg = self.config
        return (
            f"{type(self).__name__}(radius={cfg.radius}, degree={cfg.degree}, "
            f"derivative={cfg.derivative}, delta={cfg.delta})"
        )

    def _scale(self) -> float:
        return 1.0 / self.config.delta ** self.config.derivative

    def weight(self, i: int, t: int) -> float:
        """Returns the weight of window position ``i`` for output offset ``t``."""
        cfg = self.config
        return gram_weight(i, cfg.radius, cfg.degree, t, cfg.derivative) * self._scale()

    def weights(self, t: int) -> NDArray[np.float64]:
        """Returns the weights of the whole window for output offset ``t``."""
        cfg = self.config
        return weight_vector(cfg.radius, cfg.degree, t, cfg.derivative) * self._scale()

    def smooth_point(self, t: int, window: ArrayLike) -> float:
        """Evaluates the fit over one window at offset ``t``.

        Args:
            t: Evaluation offset relative to the window center, in
                ``[-radius, radius]``.
            window: Exactly ``2 * radius + 1`` consecutive samples.

        Returns:
            The smoothed value (or derivative) at offset ``t``.

        Raises:
            ValueError: If ``window`` does not hold ``2 * radius + 1``
                samples.
        """
        window = np.asarray(window, dtype=float)
        if window.shape != (self.config.window_length,):
            raise ValueError(
                f"window must hold exactly {self.config.window_length} samples; "
                f"got shape {window.shape}."
            )
        return float(np.dot(self.weights(t), window))

    def smooth_edge(
        self,
        start_t: int,
        end_t: int,
        window: ArrayLike,
    ) -> NDArray[np.float64]:
        """Evaluates one fixed window at every offset in ``start_t..end_t``.

        Args:
            start_t: First offset (inclusive).
            end_t: Last offset (inclusive).
            window: Exactly ``2 * radius + 1`` consecutive samples.

        Returns:
            Array of ``end_t - start_t + 1`` values, empty if
            ``end_t < start_t``.
        """
        return np.array(
            [self.smooth_point(t, window) for t in range(start_t, end_t + 1)],
            dtype=float,
        )

    def smooth(self, data: ArrayLike) -> NDArray[np.float64]:
        """Smooths (or differentiates) a sequence of samples.

        Args:
            data: 1D array-like of real samples. Not modified.

        Returns:
            A new ``float64`` array with the same length as ``data``.

        Raises:
            ValueError: If ``data`` is not one-dimensional.
        """
        values = validate_sequence(data)
        n_samples = values.shape[0]
        m = self.config.radius

        if n_samples <= 2:
            return values

        if n_samples < self.config.window_length:
            reduced = (n_samples - 1) // 2
            savgolkit_logger.info(
                "sequence of %d samples is shorter than the window of %d; "
                "smoothing with radius %d instead of %d.",
                n_samples,
                self.config.window_length,
                reduced,
                m,
            )
            return type(self).from_config(
                self.config.with_radius(reduced)
            ).smooth(values)

        savgolkit_logger.debug(
            "smoothing %d samples with %r", n_samples, self
        )

        width = self.config.window_length
        left = self.smooth_edge(-m, -1, values[:width])

        # Row c of the view is data[c:c + 2m + 1], centered on c + m.
        interior = sliding_window_view(values, width) @ self.weights(0)

        right = self.smooth_edge(1, m, values[n_samples - width:])

        return np.concatenate([left, interior, right])


def savgol_smooth(
    data: ArrayLike,
    radius: int,
    degree: int,
    derivative: int = 0,
    *,
    delta: float = 1.0,
) -> NDArray[np.float64]:
    """Smooths ``data`` with a one-off :class:`SavitzkyGolayFilter`.

    Args:
        data: 1D array-like of real samples.
        radius: Window half-width.
        degree: Polynomial degree.
        derivative: Derivative order.
        delta: Sample spacing.

    Returns:
        The smoothed sequence, same length as ``data``.
    """
    return SavitzkyGolayFilter(
        radius, degree, derivative, delta=delta
    ).smooth(data)
