"""Shared test fixtures and helpers for the hill-chart test suite."""

from __future__ import annotations

import pytest

from hill_chart.layout.config import LayoutConfig
from hill_chart.layout.engine import compute_layout
from hill_chart.parser.model import PlacedPoint, Point
from hill_chart.parser.payload import build_points

# --- Input constants ---

SCENARIO_ENTRIES = [
    {"name": "Auth", "progress": 10},
    {"name": "DB Setup", "progress": 12},
    {"name": "Payments", "progress": 90},
]

SCENARIO_JSON = (
    '{"project": "Sprint 5", "points": ['
    '{"name": "Auth", "progress": 10}, '
    '{"name": "DB Setup", "progress": 12}, '
    '{"name": "Payments", "progress": 90}]}'
)

LONG_NAME = "Implement the new payments reconciliation flow"


# --- Helpers ---


def make_points(progresses: list[float], names: list[str] | None = None) -> list[Point]:
    """Build points named P1..Pn (or *names*) at the given progress values."""
    if names is None:
        names = [f"P{i + 1}" for i in range(len(progresses))]
    return build_points(
        [{"name": n, "progress": p} for n, p in zip(names, progresses)]
    )


def layout_entries(entries: list[dict], **config_overrides) -> dict[str, PlacedPoint]:
    """Validate entries, lay them out, and index the result by name."""
    config = LayoutConfig(**config_overrides)
    placed = compute_layout(build_points(entries, config), config)
    return {p.name: p for p in placed}


# --- Pytest fixtures ---


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def scenario_points() -> list[Point]:
    """Two nearly coincident early items and one late item."""
    return build_points(SCENARIO_ENTRIES)
