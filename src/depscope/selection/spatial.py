"""Box hit-testing against node layout positions."""

import logging

from ..core.graph import GraphModel
from ..core.types import Rectangle, SelectionSet

logger = logging.getLogger(__name__)


class SpatialQuery:
    """
    Selects nodes whose current position falls inside a graph-space box.

    A linear scan is enough here: queries run once per gesture, not per frame.
    """

    @staticmethod
    def select(graph: GraphModel, rect: Rectangle) -> SelectionSet:
        hits = frozenset(node for node in graph.iter_nodes() if rect.contains(node.x, node.y))
        logger.debug(f"Box {rect.as_tuple()} hit {len(hits)} of {graph.node_count} nodes")
        return hits
