"""
Selection & query engine.

- geometry / spatial: box hit-testing under pan and zoom
- search: regex search across node attributes
- expansion: neighbor expansion and contraction
- grouping / render: panel projection, legend and visual flags
- store / gesture / session: state, input handling and wiring
"""

from .expansion import NeighborExpansion
from .geometry import CoordinateMapper
from .gesture import BoxSelectGesture, GesturePhase
from .grouping import (
    GroupingProjector, LegendEntry, build_legend,
    collation_key, sort_by_full_name,
)
from .render import RenderFlags, compute_render_flags
from .search import (
    SEARCHABLE_ATTRIBUTES, AttributeSearch,
    compile_pattern, resolve_attributes, toggle_attribute,
)
from .session import ExplorerSession
from .spatial import SpatialQuery
from .store import SelectionChange, SelectionStore

__all__ = [
    "CoordinateMapper", "SpatialQuery",
    "AttributeSearch", "SEARCHABLE_ATTRIBUTES",
    "compile_pattern", "resolve_attributes", "toggle_attribute",
    "NeighborExpansion",
    "GroupingProjector", "LegendEntry", "build_legend",
    "collation_key", "sort_by_full_name",
    "RenderFlags", "compute_render_flags",
    "SelectionStore", "SelectionChange",
    "BoxSelectGesture", "GesturePhase",
    "ExplorerSession",
]
