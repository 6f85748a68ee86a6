"""Immutable layout configuration threaded through every layout stage."""

from __future__ import annotations

__all__ = ["DEFAULT_CONFIG", "LayoutConfig"]

from dataclasses import dataclass, fields

from hill_chart.layout.constants import (
    CANVAS_PADDING,
    CHAR_WIDTH,
    CHART_HEIGHT,
    CHART_WIDTH,
    CLUSTER_GAP,
    CLUSTER_THRESHOLD,
    DOT_CLEARANCE,
    DOT_RADIUS,
    JITTER,
    JITTER_MIN_GROUP,
    LABEL_H_PADDING,
    LABEL_V_PADDING,
    LEFT_ZONE_END,
    MAX_COLLISION_ITERATIONS,
    MAX_LABEL_LINES,
    MIN_LABEL_SEPARATION,
    MIN_LABEL_TO_POINT_DISTANCE,
    MIN_VERTICAL_SPACING,
    RIGHT_ZONE_START,
    TEXT_LINE_HEIGHT,
    TEXT_MAX_WIDTH,
)

# Fields that may legitimately be zero or negative.
_NON_POSITIVE_OK = {
    "cluster_threshold",
    "cluster_gap",
    "min_vertical_spacing",
    "jitter",
    "label_h_padding",
    "label_v_padding",
    "canvas_padding",
    "min_label_separation",
    "min_label_to_point_distance",
    "dot_radius",
    "dot_clearance",
    "left_zone_end",
    "right_zone_start",
}


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry constants for one layout computation.

    Defaults reproduce the standard 1200x700 canvas with 150/120 px
    margins, leaving a 900x460 chart area.
    """

    min_label_separation: float = MIN_LABEL_SEPARATION
    min_label_to_point_distance: float = MIN_LABEL_TO_POINT_DISTANCE
    cluster_threshold: float = CLUSTER_THRESHOLD
    min_vertical_spacing: float = MIN_VERTICAL_SPACING
    canvas_padding: float = CANVAS_PADDING
    max_collision_iterations: int = MAX_COLLISION_ITERATIONS
    text_max_width: float = TEXT_MAX_WIDTH
    line_height: float = TEXT_LINE_HEIGHT
    chart_width: float = CHART_WIDTH
    chart_height: float = CHART_HEIGHT
    char_width: float = CHAR_WIDTH
    label_h_padding: float = LABEL_H_PADDING
    label_v_padding: float = LABEL_V_PADDING
    max_label_lines: int = MAX_LABEL_LINES
    cluster_gap: float = CLUSTER_GAP
    jitter: float = JITTER
    jitter_min_group: int = JITTER_MIN_GROUP
    left_zone_end: float = LEFT_ZONE_END
    right_zone_start: float = RIGHT_ZONE_START
    dot_radius: float = DOT_RADIUS
    dot_clearance: float = DOT_CLEARANCE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"Layout setting {f.name!r} must not be negative")
            if value == 0 and f.name not in _NON_POSITIVE_OK:
                raise ValueError(f"Layout setting {f.name!r} must be positive")
        if self.left_zone_end > self.right_zone_start:
            raise ValueError("left_zone_end must not exceed right_zone_start")

    @property
    def max_chars_per_line(self) -> int:
        """Character budget of one wrapped label line."""
        return int(self.text_max_width // self.char_width)


DEFAULT_CONFIG = LayoutConfig()
