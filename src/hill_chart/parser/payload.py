"""Validate raw caller input into hill chart points.

Accepts a list of ``{"name", "progress"}`` mappings, a JSON payload of the
form ``{"project": ..., "points": [...]}``, or paired CLI values.  Each
valid entry gets a stable ``point-<n>`` id and a palette colour.
"""

from __future__ import annotations

__all__ = ["build_points", "pair_cli_points", "parse_json_payload", "parse_progress"]

import json
import math
import warnings
from collections.abc import Mapping, Sequence

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig
from hill_chart.layout.labels import label_overflows
from hill_chart.parser.model import COLORS, ChartInput, Point


def parse_progress(value: object) -> float:
    """Coerce a progress value to a float in [0, 100].

    Numbers and numeric strings are accepted; anything else raises
    ValueError.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid progress value {value!r} (must be 0-100)")
    try:
        progress = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(
            f"Invalid progress value {value!r} (must be 0-100)"
        ) from None
    if math.isnan(progress) or not 0 <= progress <= 100:
        raise ValueError(f"Invalid progress value {value!r} (must be 0-100)")
    return progress


def _warn_if_overflowing(name: str, config: LayoutConfig) -> None:
    # stacklevel reaches past _make_point to the caller of build_points or
    # pair_cli_points; both call _make_point directly from their own body
    if label_overflows(name, config):
        warnings.warn(
            f"Label {name!r} needs more than {config.max_label_lines} lines; "
            "extra words share the last line",
            stacklevel=4,
        )


def _make_point(
    index: int, name: object, progress: object, config: LayoutConfig
) -> Point:
    """Build the point at 0-based *index*, validating its fields."""
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f'Point {index + 1} must have a "name" field (string)')
    try:
        value = parse_progress(progress)
    except ValueError as e:
        raise ValueError(f"Point {index + 1}: {e}") from None
    _warn_if_overflowing(name, config)
    return Point(
        id=f"point-{index + 1}",
        name=name,
        progress=value,
        color=COLORS[index % len(COLORS)],
    )


def build_points(
    entries: Sequence[Mapping],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[Point]:
    """Validate entries and assign ids and colours in input order."""
    points: list[Point] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"Point {i + 1} must be an object with name and progress")
        if "progress" not in entry:
            raise ValueError(f'Point {i + 1} must have a "progress" field (number 0-100)')
        points.append(_make_point(i, entry.get("name"), entry["progress"], config))
    return points


def parse_json_payload(
    text: str,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> ChartInput:
    """Parse ``{"project": str, "points": [{"name", "progress"}, ...]}``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg}") from None

    if not isinstance(data, dict):
        raise ValueError("JSON payload must be an object")
    project = data.get("project")
    if not isinstance(project, str) or not project:
        raise ValueError('JSON must have a "project" field (string)')
    raw_points = data.get("points")
    if not isinstance(raw_points, list) or not raw_points:
        raise ValueError('JSON must have a "points" array with at least one point')

    return ChartInput(title=project, points=build_points(raw_points, config))


def pair_cli_points(
    names: Sequence[str],
    progresses: Sequence[str],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[Point]:
    """Pair repeated ``--point`` and ``--progress`` values positionally."""
    if not names:
        raise ValueError("At least one --point and --progress pair is required")
    if len(names) != len(progresses):
        missing = names[len(progresses)] if len(names) > len(progresses) else None
        if missing is not None:
            raise ValueError(f'Point "{missing}" is missing --progress value')
        raise ValueError("More --progress values than --point values")
    points: list[Point] = []
    for i, (name, progress) in enumerate(zip(names, progresses)):
        points.append(_make_point(i, name, progress, config))
    return points
