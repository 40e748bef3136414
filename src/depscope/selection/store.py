"""
Selection state and change notification.

The store is the single owner of the current selection. It is created per
session and handed to whatever needs it; observers (the rendering layer)
subscribe explicitly and receive a SelectionChange after every mutation.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from ..core.config import ContractPolicy
from ..core.graph import GraphModel
from ..core.types import Node, SelectionSet
from .expansion import NeighborExpansion
from .grouping import GroupedNodes, GroupingProjector
from .render import RenderFlags, compute_render_flags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionChange:
    """Everything the rendering layer needs to redraw after a change."""
    selection: SelectionSet
    groups: GroupedNodes
    flags: RenderFlags


SelectionObserver = Callable[[SelectionChange], None]


class SelectionStore:
    """
    Holds the current SelectionSet.

    Every mutating operation swaps in a new frozenset and notifies observers
    once. The grouped projection is computed before the render flags.
    """

    def __init__(
        self,
        graph: GraphModel,
        projector: Optional[GroupingProjector] = None,
        expansion: Optional[NeighborExpansion] = None,
        contract_policy: ContractPolicy = ContractPolicy.PRUNE_ISOLATED,
    ):
        self.graph = graph
        self.projector = projector or GroupingProjector()
        self.expansion = expansion or NeighborExpansion()
        self.contract_policy = contract_policy
        self._selection: SelectionSet = frozenset()
        self._observers: List[SelectionObserver] = []
        # (input, output) of each expansion that grew the selection
        self._expansions: List[Tuple[SelectionSet, SelectionSet]] = []
        self._last_change: Optional[SelectionChange] = None

    @property
    def selection(self) -> SelectionSet:
        return self._selection

    @property
    def last_change(self) -> Optional[SelectionChange]:
        return self._last_change

    def __len__(self) -> int:
        return len(self._selection)

    def __contains__(self, node: Node) -> bool:
        return node in self._selection

    def subscribe(self, observer: SelectionObserver) -> Callable[[], None]:
        """Register an observer; the returned callable unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def replace(self, nodes: Iterable[Node]) -> None:
        """Set the selection to exactly `nodes`."""
        self._expansions.clear()
        self._commit(frozenset(nodes))

    def toggle(self, node: Node) -> None:
        """Remove `node` if selected, add it otherwise."""
        self._expansions.clear()
        if node in self._selection:
            self._commit(self._selection - {node})
        else:
            self._commit(self._selection | {node})

    def clear(self) -> None:
        self._expansions.clear()
        self._commit(frozenset())

    def expand(self, graph: Optional[GraphModel] = None) -> None:
        """Grow the selection by one hop along graph edges."""
        if not self._selection:
            return
        before = self._selection
        after = self.expansion.expand(graph or self.graph, before)
        if len(after) > len(before):
            self._expansions.append((before, after))
        self._commit(after)

    def expand_until_stable(self, graph: Optional[GraphModel] = None) -> None:
        """Grow the selection to the whole of the components it touches."""
        if not self._selection:
            return
        before = self._selection
        after = self.expansion.closure(graph or self.graph, before)
        if len(after) > len(before):
            self._expansions.append((before, after))
        self._commit(after)

    def contract(self, graph: Optional[GraphModel] = None) -> None:
        """
        Shrink the selection according to the configured policy.

        `rewind` restores the input of the latest expansion when the
        selection is still exactly what that expansion produced; otherwise
        (and under `prune-isolated`) nodes with no selected neighbor are
        dropped.
        """
        if not self._selection:
            return

        if self.contract_policy == ContractPolicy.REWIND and self._expansions:
            before, after = self._expansions[-1]
            if after == self._selection:
                self._expansions.pop()
                self._commit(before)
                return

        self._expansions.clear()
        self._commit(self.expansion.contract(graph or self.graph, self._selection))

    def _commit(self, selection: SelectionSet) -> None:
        self._selection = selection
        self._notify()

    def _notify(self) -> None:
        groups = self.projector.project(self._selection)
        flags = compute_render_flags(self.graph, self._selection)
        change = SelectionChange(selection=self._selection, groups=groups, flags=flags)
        self._last_change = change

        logger.debug(f"Selection now {len(self._selection)} nodes in {len(groups)} groups")
        for observer in list(self._observers):
            observer(change)
