"""
Grouped projection of nodes for the side panel and the legend.

The panel lists selected nodes under their group (by default the metadata
`type`), alphabetically by full name. The legend orders groups by size,
smallest first, and assigns each an ordinal palette color.
"""

import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.config import CATEGORY10
from ..core.graph import GraphModel
from ..core.types import Node, NodeAttribute

GroupValue = Optional[str]
GroupedNodes = Dict[GroupValue, List[Node]]


def collation_key(text: str) -> Tuple[str, str]:
    """
    Sort key approximating locale-aware comparison.

    Accents and case are folded for the primary ordering; the raw text
    breaks ties so distinct strings never compare equal.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, text)


def sort_by_full_name(nodes: Iterable[Node]) -> List[Node]:
    """Order nodes by full name; the id makes the order total."""
    return sorted(nodes, key=lambda n: (*collation_key(n.full_name or ""), n.id))


@dataclass(frozen=True)
class LegendEntry:
    value: GroupValue
    count: int
    color: str


def build_legend(
    graph: GraphModel,
    group_key: NodeAttribute,
    palette: Sequence[str] = CATEGORY10,
) -> List[LegendEntry]:
    """
    Legend entries for every group in the graph, least populated first.

    Groups of equal size keep the order in which they first appear.
    Colors cycle through `palette` in legend order.
    """
    counts = graph.group_counts(group_key)
    ordered = sorted(counts, key=lambda value: counts[value])
    return [
        LegendEntry(value=value, count=counts[value], color=palette[i % len(palette)])
        for i, value in enumerate(ordered)
    ]


class GroupingProjector:
    """
    Partitions a node collection by one attribute for display.

    The grouping key is fixed at construction. `order` pins the group
    sequence (normally the legend order); groups missing from it follow in
    order of first appearance.
    """

    def __init__(
        self,
        group_key: NodeAttribute = NodeAttribute.TYPE,
        order: Optional[Sequence[GroupValue]] = None,
    ):
        self.group_key = group_key
        self.order = list(order) if order is not None else None

    def project(
        self,
        selection: Iterable[Node],
        group_key: Optional[NodeAttribute] = None,
    ) -> GroupedNodes:
        """
        Map each group value to its nodes, sorted by full name.

        Every node lands in exactly one group and no group is empty.
        """
        key = group_key or self.group_key
        buckets: GroupedNodes = {}
        for node in sort_by_full_name(selection):
            buckets.setdefault(node.attribute(key), []).append(node)

        if self.order is None:
            return buckets

        grouped: GroupedNodes = {value: buckets[value] for value in self.order if value in buckets}
        for value, nodes in buckets.items():
            if value not in grouped:
                grouped[value] = nodes
        return grouped
