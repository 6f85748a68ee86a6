"""Cluster spreading: fan out points whose progress values nearly coincide.

Points are chained into clusters when consecutive progress values (in
sorted order) are within the clustering threshold.  Chaining means a
cluster can span more than the threshold end to end.  Each cluster is
then stacked vertically around its centre so dots and labels don't merge.
"""

from __future__ import annotations

__all__ = ["find_clusters", "spread_points"]

import networkx as nx

from hill_chart.layout.config import DEFAULT_CONFIG, LayoutConfig
from hill_chart.layout.labels import measure_label
from hill_chart.parser.model import Point, SpreadPoint


def find_clusters(points: list[Point], threshold: float) -> list[list[Point]]:
    """Group points into chained-adjacency clusters.

    Returns clusters in ascending progress order, each cluster's members
    in ascending progress order.  Ties keep their input order.
    """
    ordered = sorted(points, key=lambda p: p.progress)

    G = nx.Graph()
    G.add_nodes_from(range(len(ordered)))
    for i in range(1, len(ordered)):
        if abs(ordered[i].progress - ordered[i - 1].progress) <= threshold:
            G.add_edge(i - 1, i)

    # Edges only join sorted neighbours, so each component is a contiguous
    # run of indices and sorting components by first index restores order
    components = sorted(sorted(c) for c in nx.connected_components(G))
    return [[ordered[i] for i in comp] for comp in components]


def _spread_cluster(cluster: list[Point], config: LayoutConfig) -> list[SpreadPoint]:
    if len(cluster) == 1:
        return [SpreadPoint.from_point(cluster[0])]

    max_label_height = max(measure_label(p.name, config).height for p in cluster)
    spacing = max(max_label_height + config.cluster_gap, config.min_vertical_spacing)
    start = -(len(cluster) - 1) * spacing / 2

    # Large stacks also alternate slightly left/right
    use_jitter = len(cluster) >= config.jitter_min_group

    spread: list[SpreadPoint] = []
    for k, point in enumerate(cluster):
        x_offset = 0.0
        if use_jitter:
            x_offset = -config.jitter if k % 2 == 0 else config.jitter
        spread.append(
            SpreadPoint.from_point(point, x_offset=x_offset, y_offset=start + k * spacing)
        )
    return spread


def spread_points(
    points: list[Point],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[SpreadPoint]:
    """Offset clustered points so they stack instead of overlapping.

    The result is in ascending progress order and has one entry per
    input point.  Points outside any multi-member cluster keep zero
    offsets.
    """
    result: list[SpreadPoint] = []
    for cluster in find_clusters(points, config.cluster_threshold):
        result.extend(_spread_cluster(cluster, config))
    return result
