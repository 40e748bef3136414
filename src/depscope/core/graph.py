"""
Graph model backed by rustworkx.

The graph is loaded once per session and never mutated by the selection
engine afterwards (node positions excepted, which the layout owns).

It manages:
- The mapping from string Node IDs to rustworkx integer indices.
- Symmetric adjacency lookups for selection expansion.
- Group counts for the legend.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set

import rustworkx as rx

from .exceptions import ContractViolation
from .types import Edge, Node, NodeAttribute

logger = logging.getLogger(__name__)


class GraphModel:
    """
    Read-only view of the metadata dependency graph.

    Features:
    - O(1) node lookup via ID-to-Index map
    - Undirected neighbor queries over a directed edge store
    - Stable iteration order (load order) for nodes and edges
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphModel":
        """
        Build a graph from the exported JSON structure.

        Accepts `edges` or `links` for the edge list.

        Raises:
            ContractViolation: If a node id repeats or an edge references an
                unknown node id.
        """
        graph = cls()
        for raw in data.get("nodes") or []:
            graph.add_node(Node.model_validate(raw))
        for raw in data.get("edges") or data.get("links") or []:
            graph.add_edge(Edge.model_validate(raw))
        logger.debug(f"Loaded graph with {graph.node_count} nodes and {graph.edge_count} edges")
        return graph

    @classmethod
    def from_parts(cls, nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> "GraphModel":
        graph = cls()
        for node in nodes:
            graph.add_node(node)
        for edge in edges:
            graph.add_edge(edge)
        return graph

    def add_node(self, node: Node) -> None:
        """
        Add a node to the graph.

        Raises:
            ContractViolation: If a node with the same id is already loaded.
        """
        if node.id in self._id_to_idx:
            raise ContractViolation(f"Duplicate node id {node.id!r}")
        idx = self._graph.add_node(node)
        self._id_to_idx[node.id] = idx

    def add_edge(self, edge: Edge) -> int:
        """Add an edge between two existing nodes and return its index."""
        missing = [nid for nid in (edge.source, edge.target) if nid not in self._id_to_idx]
        if missing:
            raise ContractViolation(f"Edge {edge.source} -> {edge.target} references unknown node(s): {missing}")

        u_idx = self._id_to_idx[edge.source]
        v_idx = self._id_to_idx[edge.target]
        return self._graph.add_edge(u_idx, v_idx, edge)

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by ID."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def require_node(self, node_id: str) -> Node:
        """Retrieve a node that the caller guarantees is part of this graph."""
        node = self.get_node(node_id)
        if node is None:
            raise ContractViolation(f"Node {node_id!r} is not part of the loaded graph")
        return node

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def neighbors(self, node: Node) -> Set[Node]:
        """
        Nodes sharing an edge with `node`, ignoring edge direction.

        A self-loop makes a node its own neighbor.
        """
        idx = self._id_to_idx.get(node.id)
        if idx is None:
            return set()
        indices = set(self._graph.successor_indices(idx))
        indices.update(self._graph.predecessor_indices(idx))
        return {self._graph[i] for i in indices}

    def find_nodes(self, pattern: str) -> List[str]:
        """
        Find nodes matching a substring pattern.

        Searches IDs and full names, case-insensitively.
        """
        results = []
        pattern_lower = pattern.lower()
        for node in self.iter_nodes():
            if pattern_lower in node.id.lower() or pattern_lower in (node.full_name or "").lower():
                results.append(node.id)
        return results

    def group_counts(self, key: NodeAttribute) -> Counter:
        """Count nodes per value of `key`, in first-appearance order."""
        return Counter(node.attribute(key) for node in self.iter_nodes())

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._graph.edges())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self, group_key: NodeAttribute = NodeAttribute.TYPE) -> Dict[str, Any]:
        orphans = len([
            idx for idx in self._graph.node_indices()
            if self._graph.in_degree(idx) == 0 and self._graph.out_degree(idx) == 0
        ])
        components = rx.weakly_connected_components(self._graph) if self.node_count else []

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "group_key": group_key.value,
            # value is None for nodes without the attribute
            "nodes_by_group": [
                {"value": value, "count": count}
                for value, count in self.group_counts(group_key).items()
            ],
            "components": len(components),
            "orphans": orphans,
            "backend": "rustworkx",
        }
