"""Provides all savgolkit methods."""

from importlib.metadata import PackageNotFoundError, version

from savgolkit.filters.filter_config import FilterConfig
from savgolkit.filters.savitzky_golay import SavitzkyGolayFilter, savgol_smooth
from savgolkit.logger import savgolkit_logger
from savgolkit.weights.factorial import (
    generalized_factorial,
    ln_generalized_factorial,
)
from savgolkit.weights.gram import gram_poly, weight
from savgolkit.weights.tables import weight_table, weight_vector

try:
    __version__ = version("savgolkit")
except PackageNotFoundError:
    pass

__all__ = [
    "FilterConfig",
    "SavitzkyGolayFilter",
    "savgol_smooth",
    "savgolkit_logger",
    "generalized_factorial",
    "ln_generalized_factorial",
    "gram_poly",
    "weight",
    "weight_table",
    "weight_vector",
]
