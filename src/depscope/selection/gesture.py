"""
Box-selection gesture.

A drag is a small state machine driven by pointer events:

    idle --begin--> dragging --update--> dragging --commit/cancel--> idle

Only `commit` touches the selection. Events that arrive in the wrong state
(a pointer-up with no preceding pointer-down, say) are ignored.
"""

import logging
from enum import StrEnum
from typing import Optional

from ..core.graph import GraphModel
from ..core.types import Point, Rectangle, SelectionSet, Transform
from .geometry import CoordinateMapper
from .spatial import SpatialQuery
from .store import SelectionStore

logger = logging.getLogger(__name__)


class GesturePhase(StrEnum):
    IDLE = "idle"
    DRAGGING = "dragging"


class BoxSelectGesture:
    """Turns pointer-down/move/up into a box selection."""

    def __init__(self, store: SelectionStore, graph: Optional[GraphModel] = None):
        self.store = store
        self.graph = graph or store.graph
        self._start: Optional[Point] = None
        self._pending: Optional[Rectangle] = None

    @property
    def phase(self) -> GesturePhase:
        return GesturePhase.IDLE if self._start is None else GesturePhase.DRAGGING

    @property
    def pending(self) -> Optional[Rectangle]:
        """The pointer-space rectangle to draw while dragging, if any."""
        return self._pending

    def begin(self, point: Point) -> Rectangle:
        """Record the drag origin and show an empty box there."""
        self._start = point
        self._pending = Rectangle(point.x, point.y, point.x, point.y)
        return self._pending

    def update(self, point: Point) -> Optional[Rectangle]:
        """Resize the pending box; pure geometry, no selection change."""
        if self._start is None:
            return None
        self._pending = Rectangle.from_corners(self._start, point)
        return self._pending

    def commit(self, point: Point, transform: Transform) -> Optional[SelectionSet]:
        """
        Finish the drag and replace the selection with the boxed nodes.

        Returns the new selection, or None when no drag was in progress.
        """
        if self._start is None:
            logger.debug("Pointer-up without a drag in progress, ignoring")
            return None

        start = self._start
        self._reset()

        box = CoordinateMapper.drag_to_graph_space(start, point, transform)
        hits = SpatialQuery.select(self.graph, box)
        self.store.replace(hits)
        return hits

    def cancel(self) -> bool:
        """Abandon the drag without selecting; True if one was in progress."""
        if self._start is None:
            return False
        self._reset()
        return True

    def _reset(self) -> None:
        self._start = None
        self._pending = None
