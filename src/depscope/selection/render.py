"""Visual flags the rendering layer applies after each selection change."""

from dataclasses import dataclass, field
from typing import FrozenSet, List

from ..core.graph import GraphModel
from ..core.types import Edge, Node, SelectionSet


@dataclass(frozen=True)
class RenderFlags:
    """
    Which nodes and links are drawn as selected.

    A link is selected when either endpoint is. `has_selections` drives the
    document-level class that dims everything else.
    """
    selected_nodes: FrozenSet[str] = field(default_factory=frozenset)
    selected_edges: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def has_selections(self) -> bool:
        return bool(self.selected_nodes)

    def is_node_selected(self, node: Node) -> bool:
        return node.id in self.selected_nodes

    def is_edge_selected(self, edge_index: int) -> bool:
        return edge_index in self.selected_edges


def compute_render_flags(graph: GraphModel, selection: SelectionSet) -> RenderFlags:
    node_ids = frozenset(node.id for node in selection)
    if not node_ids:
        return RenderFlags()

    edges = frozenset(
        idx for idx, edge in enumerate(graph.iter_edges()) if edge.touches(node_ids)
    )
    return RenderFlags(selected_nodes=node_ids, selected_edges=edges)


def selected_links(graph: GraphModel, flags: RenderFlags) -> List[Edge]:
    """The edges flagged as selected, in load order."""
    return [edge for idx, edge in enumerate(graph.iter_edges()) if idx in flags.selected_edges]
