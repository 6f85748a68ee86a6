"""Hill curve mapping and chart-area pixel scales."""

from __future__ import annotations

__all__ = ["hill_height", "hill_to_pixel_y", "progress_to_pixel_x"]

from hill_chart.layout.config import LayoutConfig
from hill_chart.layout.constants import HILL_MAX_HEIGHT, HILL_PEAK_PROGRESS


def hill_height(progress: float) -> float:
    """Height (0-100) of the hill curve at a progress value in [0, 100]."""
    normalized = (progress - HILL_PEAK_PROGRESS) / HILL_PEAK_PROGRESS
    return HILL_MAX_HEIGHT * (1 - normalized * normalized)


def progress_to_pixel_x(progress: float, config: LayoutConfig) -> float:
    return progress * config.chart_width / 100


def hill_to_pixel_y(height: float, config: LayoutConfig) -> float:
    """Pixel Y for a hill height; the scale is inverted so 100 is the top."""
    return config.chart_height - height * config.chart_height / HILL_MAX_HEIGHT
