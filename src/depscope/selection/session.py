"""
Explorer session.

Wires the graph, the selection store and the query components together and
exposes one entry point per discrete UI event. The view/zoom controller
pushes transforms in with `set_transform`; the rendering layer subscribes
to selection changes.
"""

import logging
from typing import Callable, FrozenSet, Iterable, List, Optional

from ..core.config import ExplorerConfig
from ..core.exceptions import InvalidPatternError
from ..core.graph import GraphModel
from ..core.result import Err, Ok, Result
from ..core.types import Node, NodeAttribute, Point, Rectangle, SelectionSet, Transform
from .expansion import NeighborExpansion
from .gesture import BoxSelectGesture
from .grouping import GroupingProjector, LegendEntry, build_legend
from .search import AttributeSearch, resolve_attributes, toggle_attribute
from .store import SelectionObserver, SelectionStore

logger = logging.getLogger(__name__)


class ExplorerSession:
    """
    One interactive exploration of a loaded graph.

    All methods run synchronously to completion; nothing here mutates the
    graph or the transform, both of which belong to external owners.
    """

    def __init__(self, graph: GraphModel, config: Optional[ExplorerConfig] = None):
        self.graph = graph
        self.config = config or ExplorerConfig()

        self.legend: List[LegendEntry] = build_legend(graph, self.config.group_by, self.config.palette)
        self.projector = GroupingProjector(
            self.config.group_by,
            order=[entry.value for entry in self.legend],
        )
        self.store = SelectionStore(
            graph,
            projector=self.projector,
            expansion=NeighborExpansion(),
            contract_policy=self.config.contract_policy,
        )
        self.search = AttributeSearch()
        self.gesture = BoxSelectGesture(self.store, graph)

        self.enabled_attributes: FrozenSet[NodeAttribute] = resolve_attributes(
            self.config.search_attributes
        )
        self.transform = Transform()

    @property
    def selection(self) -> SelectionSet:
        return self.store.selection

    def subscribe(self, observer: SelectionObserver) -> Callable[[], None]:
        return self.store.subscribe(observer)

    def set_transform(self, transform: Transform) -> None:
        self.transform = transform

    def color_for(self, value: Optional[str]) -> Optional[str]:
        for entry in self.legend:
            if entry.value == value:
                return entry.color
        return None

    # --- Box selection ---

    def pointer_down(self, x: float, y: float) -> Rectangle:
        return self.gesture.begin(Point(x, y))

    def pointer_move(self, x: float, y: float) -> Optional[Rectangle]:
        return self.gesture.update(Point(x, y))

    def pointer_up(self, x: float, y: float) -> Optional[SelectionSet]:
        return self.gesture.commit(Point(x, y), self.transform)

    def escape(self) -> bool:
        return self.gesture.cancel()

    def box_select(self, start: Point, end: Point) -> SelectionSet:
        """Run a complete drag from `start` to `end` under the current transform."""
        self.gesture.begin(start)
        self.gesture.update(end)
        return self.gesture.commit(end, self.transform)

    # --- Search ---

    def toggle_attribute(self, key: NodeAttribute | str, modifier: bool = False) -> FrozenSet[NodeAttribute]:
        self.enabled_attributes = toggle_attribute(self.enabled_attributes, key, modifier)
        return self.enabled_attributes

    def submit_search(
        self,
        pattern: str,
        attributes: Optional[Iterable[NodeAttribute | str]] = None,
    ) -> Result[SelectionSet, InvalidPatternError]:
        """
        Replace the selection with the nodes matching `pattern`.

        On a malformed pattern the error is logged and returned, and the
        selection is left exactly as it was.
        """
        keys = self.enabled_attributes if attributes is None else attributes
        try:
            matches = self.search.search(self.graph, pattern, keys)
        except InvalidPatternError as e:
            logger.warning(str(e))
            return Err(e)

        self.store.replace(matches)
        return Ok(matches)

    # --- Direct manipulation ---

    def click_node(self, node: Node) -> None:
        """Click or ctrl-click on a node toggles its membership."""
        self.store.toggle(node)

    def select_ids(self, node_ids: Iterable[str]) -> SelectionSet:
        nodes = [self.graph.require_node(nid) for nid in node_ids]
        self.store.replace(nodes)
        return self.store.selection

    def expand(self) -> SelectionSet:
        self.store.expand(self.graph)
        return self.store.selection

    def expand_until_stable(self) -> SelectionSet:
        self.store.expand_until_stable(self.graph)
        return self.store.selection

    def contract(self) -> SelectionSet:
        self.store.contract(self.graph)
        return self.store.selection

    def clear(self) -> None:
        self.store.clear()
