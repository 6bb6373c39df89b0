"""Savitzky-Golay smoothing filters."""

from savgolkit.filters.filter_config import FilterConfig
from savgolkit.filters.savitzky_golay import SavitzkyGolayFilter, savgol_smooth

__all__ = ["FilterConfig", "SavitzkyGolayFilter", "savgol_smooth"]
