"""Command-line interface for hill chart layout."""

from __future__ import annotations

__all__ = ["cli"]

import dataclasses
import json

import click

from hill_chart import __version__
from hill_chart.layout.config import DEFAULT_CONFIG
from hill_chart.layout.engine import build_chart
from hill_chart.parser.model import ChartInput
from hill_chart.parser.payload import pair_cli_points, parse_json_payload

_JSON_EXAMPLE = '{"project":"Sprint 5","points":[{"name":"Task 1","progress":50}]}'


@click.group()
@click.version_option(version=__version__, prog_name="hill-chart")
def cli():
    """hill-chart: lay out progress hill charts."""


@cli.command()
@click.option(
    "--json",
    "json_payload",
    default=None,
    help=f"Chart as JSON, e.g. '{_JSON_EXAMPLE}'.",
)
@click.option("--project", default=None, help="Chart title.")
@click.option("--point", "names", multiple=True, help="Item name (repeatable).")
@click.option(
    "--progress",
    "progresses",
    multiple=True,
    help="Progress 0-100 (repeatable), paired with --point by position.",
)
@click.option(
    "--cluster-threshold",
    type=float,
    default=None,
    help="Progress gap (%) below which points are stacked together.",
)
@click.option(
    "--max-iterations",
    type=click.IntRange(min=1),
    default=None,
    help="Cap on label collision-resolution passes.",
)
def layout(
    json_payload: str | None,
    project: str | None,
    names: tuple[str, ...],
    progresses: tuple[str, ...],
    cluster_threshold: float | None,
    max_iterations: int | None,
) -> None:
    """Compute point and label positions and print them as JSON.

    Repeated --point and --progress values are paired by position, not by
    where they appear relative to each other on the command line.
    """
    overrides = {}
    if cluster_threshold is not None:
        overrides["cluster_threshold"] = cluster_threshold
    if max_iterations is not None:
        overrides["max_collision_iterations"] = max_iterations
    try:
        config = dataclasses.replace(DEFAULT_CONFIG, **overrides)
    except ValueError as e:
        raise click.UsageError(str(e)) from None

    if json_payload is not None:
        if project or names or progresses:
            raise click.UsageError("--json cannot be combined with --project/--point")
        try:
            chart_input = parse_json_payload(json_payload, config)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--json") from None
    else:
        if not project:
            raise click.UsageError("--project flag requires a value (or use --json)")
        try:
            points = pair_cli_points(names, progresses, config)
        except ValueError as e:
            raise click.UsageError(str(e)) from None
        chart_input = ChartInput(title=project, points=points)

    chart = build_chart(chart_input, config)
    click.echo(json.dumps(chart.to_render_data(), indent=2))
