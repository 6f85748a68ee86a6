"""Data model for hill chart points at each stage of the layout pipeline."""

from __future__ import annotations

__all__ = ["COLORS", "ChartInput", "PlacedPoint", "Point", "SpreadPoint"]

from dataclasses import dataclass, field

from hill_chart.layout.curve import hill_height

COLORS = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
)


@dataclass(frozen=True)
class Point:
    """A tracked item as supplied by the caller."""

    id: str
    name: str
    progress: float
    color: str


@dataclass(frozen=True, kw_only=True)
class SpreadPoint(Point):
    """A point with its pixel displacement from the canonical curve position."""

    x_offset: float = 0.0
    y_offset: float = 0.0

    @classmethod
    def from_point(
        cls, point: Point, x_offset: float = 0.0, y_offset: float = 0.0
    ) -> SpreadPoint:
        return cls(
            point.id,
            point.name,
            point.progress,
            point.color,
            x_offset=x_offset,
            y_offset=y_offset,
        )


@dataclass(frozen=True, kw_only=True)
class PlacedPoint(SpreadPoint):
    """A fully positioned point, ready for rendering."""

    label_side: str
    dot_pixel_x: float
    dot_pixel_y: float
    label_pixel_x: float
    label_pixel_y: float
    label_width: float
    label_height: float
    label_y_offset: float
    max_chars_per_line: int

    @property
    def x(self) -> float:
        """Curve-space X (the progress value)."""
        return self.progress

    @property
    def y(self) -> float:
        """Curve-space Y (the hill height at this progress)."""
        return hill_height(self.progress)

    def to_render_data(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "color": self.color,
            "xOffset": self.x_offset,
            "yOffset": self.y_offset,
            "labelYOffset": self.label_y_offset,
            "labelSide": self.label_side,
            "maxCharsPerLine": self.max_chars_per_line,
        }


@dataclass
class ChartInput:
    """Validated caller input: a chart title and its points."""

    title: str
    points: list[Point] = field(default_factory=list)
