"""Label measurement and placement for hill chart points.

Labels sit to the left or right of their dot depending on which part of
the hill the point is on, then get pushed downward until they clear
other labels and dots, within the padded canvas.
"""

from __future__ import annotations

__all__ = [
    "LabelBox",
    "LabelGeometry",
    "label_overflows",
    "measure_label",
    "place_labels",
    "resolve_collisions",
    "resolve_pass",
    "wrap_label",
]

from dataclasses import dataclass

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig
from hill_chart.layout.curve import hill_height, hill_to_pixel_y, progress_to_pixel_x
from hill_chart.parser.model import PlacedPoint, SpreadPoint


@dataclass(frozen=True)
class LabelBox:
    """Estimated rendered size of a label."""

    width: float
    height: float
    line_count: int


def _greedy_lines(text: str, budget: int) -> list[str]:
    if len(text) <= budget:
        return [text]

    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        trial = f"{current} {word}" if current else word
        if len(trial) > budget and current:
            lines.append(current)
            current = word
        else:
            current = trial
    lines.append(current)
    return lines


def label_overflows(text: str, config: LayoutConfig = DEFAULT_CONFIG) -> bool:
    """True if wrapping *text* needs more than ``max_label_lines`` lines."""
    return len(_greedy_lines(text, config.max_chars_per_line)) > config.max_label_lines


def wrap_label(text: str, config: LayoutConfig = DEFAULT_CONFIG) -> list[str]:
    """Greedily wrap label text into at most ``max_label_lines`` lines.

    Words are never split, so a single long word may exceed the line
    budget.  Words that would need a line beyond the cap are folded
    onto the last line.
    """
    lines = _greedy_lines(text, config.max_chars_per_line)
    cap = config.max_label_lines
    if len(lines) > cap:
        lines = lines[: cap - 1] + [" ".join(lines[cap - 1 :])]
    return lines


def measure_label(text: str, config: LayoutConfig = DEFAULT_CONFIG) -> LabelBox:
    """Estimate a label's box from character counts (no glyph metrics)."""
    lines = wrap_label(text, config)
    longest = max(len(line) for line in lines)
    width = min(
        longest * config.char_width + config.label_h_padding,
        config.text_max_width + config.label_h_padding,
    )
    height = len(lines) * config.line_height + config.label_v_padding
    return LabelBox(width=width, height=height, line_count=len(lines))


@dataclass
class LabelGeometry:
    """Mutable working record for one label during collision resolution.

    ``label_y`` is the vertical centre of the label box; ``label_x`` is
    its left edge.
    """

    index: int
    dot_x: float
    dot_y: float
    label_x: float
    label_y: float
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.label_y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.label_y + self.height / 2

    @property
    def left(self) -> float:
        return self.label_x

    @property
    def right(self) -> float:
        return self.label_x + self.width


def _label_side(point: SpreadPoint, config: LayoutConfig) -> str:
    """Pick the side a label extends toward.

    On the slopes the label faces the open side of the hill.  In the
    peak zone the cluster offset decides: points pushed down get
    right-hand labels, the rest get left-hand labels.
    """
    if point.progress < config.left_zone_end:
        return "right"
    if point.progress > config.right_zone_start:
        return "left"
    return "right" if point.y_offset > 0 else "left"


def _initial_geometry(
    index: int, point: SpreadPoint, side: str, config: LayoutConfig
) -> LabelGeometry:
    box = measure_label(point.name, config)
    dot_x = progress_to_pixel_x(point.progress, config) + point.x_offset
    dot_y = hill_to_pixel_y(hill_height(point.progress), config) + point.y_offset
    if side == "right":
        label_x = dot_x + config.min_label_to_point_distance
    else:
        label_x = dot_x - config.min_label_to_point_distance - box.width
    return LabelGeometry(
        index=index,
        dot_x=dot_x,
        dot_y=dot_y,
        label_x=label_x,
        label_y=dot_y,
        width=box.width,
        height=box.height,
    )


def _overlaps(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
    margin: float,
) -> bool:
    """Check (left, top, right, bottom) boxes for overlap, inflated by margin."""
    return (
        a[2] + margin > b[0]
        and a[0] - margin < b[2]
        and a[3] + margin > b[1]
        and a[1] - margin < b[3]
    )


def resolve_pass(labels: list[LabelGeometry], config: LayoutConfig) -> bool:
    """Run one collision-resolution pass over ``labels`` in place.

    Returns True if any label moved (including a clamp to the canvas).
    """
    sep = config.min_label_separation
    dot_reach = config.dot_radius + config.dot_clearance
    canvas_top = config.canvas_padding
    canvas_bottom = config.chart_height - config.canvas_padding
    changed = False

    for current in labels:
        for other in labels:
            if other is current:
                continue
            cbox = (current.left, current.top, current.right, current.bottom)
            obox = (other.left, other.top, other.right, other.bottom)
            if _overlaps(cbox, obox, sep):
                shift = other.bottom + sep - current.top
                if shift > 0:
                    current.label_y += shift
                    changed = True

        for other in labels:
            if other.index == current.index:
                continue
            dbox = (
                other.dot_x - dot_reach,
                other.dot_y - dot_reach,
                other.dot_x + dot_reach,
                other.dot_y + dot_reach,
            )
            cbox = (current.left, current.top, current.right, current.bottom)
            if _overlaps(cbox, dbox, sep):
                shift = dbox[3] + sep - current.top
                if shift > 0:
                    current.label_y += shift
                    changed = True

        if current.top < canvas_top:
            current.label_y = canvas_top + current.height / 2
            changed = True
        elif current.bottom > canvas_bottom:
            current.label_y = canvas_bottom - current.height / 2
            changed = True

    return changed


def resolve_collisions(labels: list[LabelGeometry], config: LayoutConfig) -> int:
    """Repeat resolution passes until one changes nothing or the cap is hit.

    Returns the number of passes run.  Overlaps may remain when the cap
    is reached.
    """
    passes = 0
    for _ in range(config.max_collision_iterations):
        passes += 1
        if not resolve_pass(labels, config):
            break
    return passes


def place_labels(
    points: list[SpreadPoint],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[PlacedPoint]:
    """Assign label sides and resolve label positions for spread points.

    Output order matches input order.
    """
    sides = [_label_side(p, config) for p in points]
    labels = [
        _initial_geometry(i, p, side, config)
        for i, (p, side) in enumerate(zip(points, sides))
    ]

    resolve_collisions(labels, config)

    placed: list[PlacedPoint] = []
    for point, side, geom in zip(points, sides, labels):
        placed.append(
            PlacedPoint(
                point.id,
                point.name,
                point.progress,
                point.color,
                x_offset=point.x_offset,
                y_offset=point.y_offset,
                label_side=side,
                dot_pixel_x=geom.dot_x,
                dot_pixel_y=geom.dot_y,
                label_pixel_x=geom.label_x,
                label_pixel_y=geom.label_y,
                label_width=geom.width,
                label_height=geom.height,
                label_y_offset=geom.label_y - geom.dot_y,
                max_chars_per_line=config.max_chars_per_line,
            )
        )
    return placed
