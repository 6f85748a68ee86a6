"""Tests for input validation and configuration."""

import dataclasses

import pytest

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig
from hill_chart.parser.model import COLORS
from hill_chart.parser.payload import (
    build_points,
    pair_cli_points,
    parse_json_payload,
    parse_progress,
)

from conftest import SCENARIO_JSON


class TestBuildPoints:
    def test_assigns_ids_and_colours(self):
        entries = [{"name": f"T{i}", "progress": i * 10} for i in range(9)]
        points = build_points(entries)
        assert [p.id for p in points[:3]] == ["point-1", "point-2", "point-3"]
        assert points[0].color == COLORS[0]
        assert points[7].color == COLORS[0]
        assert points[8].color == COLORS[1]

    def test_numeric_string_progress(self):
        (point,) = build_points([{"name": "A", "progress": "42.5"}])
        assert point.progress == 42.5

    @pytest.mark.parametrize("bad", [150, -1, "abc", None, True, float("nan")])
    def test_invalid_progress(self, bad):
        with pytest.raises(ValueError, match="Point 2"):
            build_points([{"name": "ok", "progress": 5}, {"name": "A", "progress": bad}])

    def test_missing_progress(self):
        with pytest.raises(ValueError, match='"progress" field'):
            build_points([{"name": "A"}])

    @pytest.mark.parametrize("name", ["", "   ", None, 7])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError, match='"name" field'):
            build_points([{"name": name, "progress": 50}])

    def test_overflow_warning_points_at_caller(self):
        name = " ".join(c * 20 for c in "abcdef")
        with pytest.warns(UserWarning) as record:
            build_points([{"name": name, "progress": 50}])
        assert record[0].filename == __file__

        with pytest.warns(UserWarning) as record:
            pair_cli_points((name,), ("50",))
        assert record[0].filename == __file__

    def test_bounds_inclusive(self):
        points = build_points([{"name": "a", "progress": 0}, {"name": "b", "progress": 100}])
        assert [p.progress for p in points] == [0, 100]

    def test_overflowing_label_warns(self):
        name = " ".join(c * 20 for c in "abcdef")
        with pytest.warns(UserWarning, match="more than 4 lines"):
            build_points([{"name": name, "progress": 50}])


class TestParseJsonPayload:
    def test_valid_payload(self):
        chart = parse_json_payload(SCENARIO_JSON)
        assert chart.title == "Sprint 5"
        assert [p.name for p in chart.points] == ["Auth", "DB Setup", "Payments"]

    @pytest.mark.parametrize(
        "text,message",
        [
            ("not json", "Invalid JSON"),
            ("[1, 2]", "must be an object"),
            ('{"points": [{"name": "a", "progress": 1}]}', '"project" field'),
            ('{"project": "X", "points": []}', '"points" array'),
            ('{"project": "X"}', '"points" array'),
            ('{"project": "X", "points": [3]}', "Point 1 must be an object"),
        ],
    )
    def test_invalid_payload(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_json_payload(text)


class TestPairCliPoints:
    def test_pairs_in_order(self):
        points = pair_cli_points(("Task 1", "Task 2"), ("50", "75"))
        assert [(p.name, p.progress) for p in points] == [("Task 1", 50), ("Task 2", 75)]

    def test_missing_progress(self):
        with pytest.raises(ValueError, match='"Task 2" is missing --progress'):
            pair_cli_points(("Task 1", "Task 2"), ("50",))

    def test_extra_progress(self):
        with pytest.raises(ValueError, match="More --progress values"):
            pair_cli_points(("Task 1",), ("50", "60"))

    def test_nothing_given(self):
        with pytest.raises(ValueError, match="At least one"):
            pair_cli_points((), ())


def test_parse_progress_accepts_ints():
    assert parse_progress(0) == 0.0


class TestLayoutConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.max_chars_per_line == 28
        assert DEFAULT_CONFIG.chart_height == 460
        assert DEFAULT_CONFIG.max_collision_iterations == 20

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.canvas_padding = 0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"chart_width": 0},
            {"char_width": 0},
            {"cluster_threshold": -1},
            {"min_label_separation": -5},
            {"left_zone_end": 70},
        ],
    )
    def test_rejects_bad_values(self, overrides):
        with pytest.raises(ValueError):
            LayoutConfig(**overrides)

    def test_zero_iterations_rejected(self):
        with pytest.raises(ValueError, match="must be positive"):
            LayoutConfig(max_collision_iterations=0)

    def test_single_iteration_allowed(self):
        assert LayoutConfig(max_collision_iterations=1).max_collision_iterations == 1
