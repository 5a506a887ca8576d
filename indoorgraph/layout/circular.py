"""Circular layout of an IndoorGraph."""

import logging
import math

from ..graph.model_graph import IndoorGraph
from .models import LayoutConfig

logger = logging.getLogger(__name__)


def circular_layout(
    graph: IndoorGraph, config: LayoutConfig | None = None
) -> IndoorGraph:
    """Place every node on a circle, in the graph's node order.

    Node ``i`` of ``n`` gets angle ``2*pi*i/n`` measured from the positive
    x-axis, so the first node always sits at ``(cx + r, cy)``. An empty
    graph is returned unchanged.

    Args:
        graph: The graph to lay out. Node positions are set in place.
        config: Circle center and radius; defaults are used when omitted.

    Returns:
        The same graph, for chaining.
    """
    config = config or LayoutConfig()
    n = len(graph)
    if n == 0:
        logger.debug("Empty graph, nothing to lay out")
        return graph

    cx, cy = config.center
    radius = config.radius

    for i, node in enumerate(graph.nodes.values()):
        angle = 2 * math.pi * i / n
        node.position = (
            cx + radius * math.cos(angle),
            cy + radius * math.sin(angle),
        )

    logger.debug(
        "Placed %d node(s) on circle at (%s, %s) with radius %s", n, cx, cy, radius
    )
    return graph
