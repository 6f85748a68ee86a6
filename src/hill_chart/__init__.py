"""hill-chart: geometric layout engine for progress hill charts."""

__version__ = "0.1.0"

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig  # noqa: E402
from hill_chart.layout.engine import (  # noqa: E402
    HillChartLayout,
    build_chart,
    compute_layout,
)
from hill_chart.parser.model import (  # noqa: E402
    ChartInput,
    PlacedPoint,
    Point,
    SpreadPoint,
)
from hill_chart.parser.payload import build_points, parse_json_payload  # noqa: E402

__all__ = [
    "DEFAULT_CONFIG",
    "ChartInput",
    "HillChartLayout",
    "LayoutConfig",
    "PlacedPoint",
    "Point",
    "SpreadPoint",
    "build_chart",
    "build_points",
    "compute_layout",
    "parse_json_payload",
]
