"""Layout coordinator: spreads clustered points, then places their labels."""

from __future__ import annotations

__all__ = ["HillChartLayout", "build_chart", "compute_layout"]

from dataclasses import dataclass, field

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig
from hill_chart.layout.labels import place_labels
from hill_chart.layout.spreading import spread_points
from hill_chart.parser.model import ChartInput, PlacedPoint, Point


@dataclass
class HillChartLayout:
    """A laid-out chart: the caller's title and every placed point."""

    title: str
    points: list[PlacedPoint] = field(default_factory=list)

    def to_render_data(self) -> dict:
        """Plain-data form consumed by the chart renderer."""
        return {
            "title": self.title,
            "points": [p.to_render_data() for p in self.points],
        }


def compute_layout(
    points: list[Point],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[PlacedPoint]:
    """Compute dot and label positions for all points.

    Returns one PlacedPoint per input point, in ascending progress order;
    use ``id`` to match results back to inputs.
    """
    if not points:
        return []
    return place_labels(spread_points(points, config), config)


def build_chart(
    chart_input: ChartInput,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> HillChartLayout:
    return HillChartLayout(
        title=chart_input.title,
        points=compute_layout(chart_input.points, config),
    )
