"""
Growing and shrinking a selection along graph edges.

Expansion adds every one-hop neighbor of every selected node. Repeated
expansion therefore grows monotonically until it covers the connected
components the selection touches, and is stable from then on.
"""

import logging

from ..core.graph import GraphModel
from ..core.types import SelectionSet

logger = logging.getLogger(__name__)


class NeighborExpansion:
    """Edge-based selection growth and its counterpart, contraction."""

    def expand(self, graph: GraphModel, selection: SelectionSet) -> SelectionSet:
        """Return selection ∪ all nodes adjacent to a selected node."""
        if not selection:
            return selection

        grown = set(selection)
        for node in selection:
            grown.update(graph.neighbors(node))

        logger.debug(f"Expanded selection from {len(selection)} to {len(grown)} nodes")
        return frozenset(grown)

    def contract(self, graph: GraphModel, selection: SelectionSet) -> SelectionSet:
        """
        Drop selected nodes that have no edge to another selected node.

        Nodes that survive each keep at least one internal edge. Self-loops
        do not count.
        """
        if not selection:
            return selection

        kept = frozenset(
            node for node in selection
            if any(other.id != node.id and other in selection for other in graph.neighbors(node))
        )
        logger.debug(f"Contracted selection from {len(selection)} to {len(kept)} nodes")
        return kept

    def closure(self, graph: GraphModel, selection: SelectionSet, max_steps: int = -1) -> SelectionSet:
        """Expand until the selection stops growing, or for at most `max_steps` rounds."""
        current = selection
        steps = 0
        while max_steps < 0 or steps < max_steps:
            grown = self.expand(graph, current)
            if len(grown) == len(current):
                break
            current = grown
            steps += 1
        return current
