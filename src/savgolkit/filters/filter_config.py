"""Configuration for the Savitzky-Golay smoothing filter.

A :class:`FilterConfig` fixes the fitting window (``2 * radius + 1``
points), the degree of the least-squares polynomial fitted over it, the
derivative order to evaluate, and the sample spacing used to scale
derivatives.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from savgolkit.logger import savgolkit_logger
from savgolkit.utils.validate import (
    validate_non_negative_int,
    validate_positive_finite,
)

__all__ = ["FilterConfig"]


@dataclass(frozen=True)
class FilterConfig:
    """Immutable parameters of a Savitzky-Golay filter.

    Attributes:
        radius: Window half-width ``m``; the window holds ``2m + 1`` samples.
        degree: Degree ``n`` of the least-squares polynomial.
        derivative: Derivative order ``s`` (``0`` smooths the data).
        delta: Spacing between consecutive samples. Derivative outputs are
            divided by ``delta ** derivative``; smoothing is unaffected.

    Well-typed but ill-posed combinations (``derivative > degree`` or
    ``degree > 2 * radius``) are accepted. They yield degenerate weights
    and are reported on ``savgolkit_logger`` as a warning.
    """

    radius: int
    degree: int
    derivative: int = 0
    delta: float = 1.0

    def __post_init__(self):
        """Validates and normalizes the fields."""
        object.__setattr__(
            self, "radius", validate_non_negative_int(self.radius, "radius")
        )
        object.__setattr__(
            self, "degree", validate_non_negative_int(self.degree, "degree")
        )
        object.__setattr__(
            self,
            "derivative",
            validate_non_negative_int(self.derivative, "derivative"),
        )
        object.__setattr__(
            self, "delta", validate_positive_finite(self.delta, "delta")
        )

        if self.derivative > self.degree:
            savgolkit_logger.warning(
                "derivative order %d exceeds polynomial degree %d; "
                "all weights will be zero.",
                self.derivative,
                self.degree,
            )
        if self.degree > 2 * self.radius:
            savgolkit_logger.warning(
                "polynomial degree %d exceeds 2 * radius = %d; "
                "the fit is underdetermined and behaves like degree %d.",
                self.degree,
                2 * self.radius,
                2 * self.radius,
            )

    @property
    def window_length(self) -> int:
        """Number of samples in one fitting window."""
        return 2 * self.radius + 1

    @property
    def is_well_posed(self) -> bool:
        """True if ``derivative <= degree <= 2 * radius``."""
        return self.derivative <= self.degree <= 2 * self.radius

    def with_radius(self, radius: int) -> FilterConfig:
        """Returns a copy of this config with a different radius."""
        return replace(self, radius=radius)
