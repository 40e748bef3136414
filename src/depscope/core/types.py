"""
Core type definitions for depscope.

Nodes and edges mirror the metadata dependency export (camelCase keys on the
wire, snake_case attributes in Python). Geometry values (points, rectangles,
pan/zoom transforms) are small frozen dataclasses so they can be passed
around as snapshots.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_snake


class NodeAttribute(StrEnum):
    """Node attributes that can be searched or used as a grouping key."""
    ID = "id"
    TYPE = "type"
    FULL_NAME = "fullName"
    FILE_NAME = "fileName"
    NAMESPACE_PREFIX = "namespacePrefix"
    MANAGEABLE_STATE = "manageableState"
    LAST_MODIFIED_BY_NAME = "lastModifiedByName"
    LAST_MODIFIED_DATE = "lastModifiedDate"
    CREATED_BY_NAME = "createdByName"
    CREATED_DATE = "createdDate"


_ATTRIBUTES_BY_VALUE: Dict[str, NodeAttribute] = {a.value: a for a in NodeAttribute}


def parse_attribute(key: Any) -> Optional[NodeAttribute]:
    """Map a raw attribute key onto a NodeAttribute, or None if unknown."""
    if isinstance(key, NodeAttribute):
        return key
    return _ATTRIBUTES_BY_VALUE.get(str(key))


def _coerce_id(value: Any) -> Any:
    # Exports carry numeric ids for some metadata rows
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


class Node(BaseModel):
    """
    A metadata component in the dependency graph.

    `x` and `y` belong to the layout process; the selection engine only reads
    them. Membership in a selection is keyed on `id`, which is unique within
    a graph.
    """
    id: str
    type: Optional[str] = None
    full_name: Optional[str] = None
    file_name: Optional[str] = None
    namespace_prefix: Optional[str] = None
    manageable_state: Optional[str] = None
    last_modified_by_name: Optional[str] = None
    last_modified_date: Optional[str] = None
    created_by_name: Optional[str] = None
    created_date: Optional[str] = None

    x: float = 0.0
    y: float = 0.0

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("x", "y", mode="before")
    @classmethod
    def _missing_position(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def attribute(self, key: NodeAttribute | str) -> Optional[str]:
        """Return the string value of a node attribute, or None if absent."""
        attr = parse_attribute(key)
        if attr is None:
            return None
        value = getattr(self, to_snake(attr.value), None)
        return value if isinstance(value, str) else None

    @property
    def label(self) -> str:
        return self.full_name or self.id

    def move_to(self, x: float, y: float) -> None:
        """Layout hook: update the node's position in graph space."""
        self.x = x
        self.y = y

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Edge(BaseModel):
    """
    Dependency between two nodes.

    Direction is kept for export, but adjacency is symmetric for selection.
    """
    source: str = Field(validation_alias=AliasChoices("source", "source_id"))
    target: str = Field(validation_alias=AliasChoices("target", "target_id"))
    type: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("source", "target", mode="before")
    @classmethod
    def _normalize_endpoint(cls, value: Any) -> Any:
        # d3 replaces endpoint ids with node objects after a simulation runs
        if isinstance(value, dict):
            value = value.get("id")
        return _coerce_id(value)

    def touches(self, node_ids: FrozenSet[str]) -> bool:
        """True if either endpoint is in `node_ids`."""
        return self.source in node_ids or self.target in node_ids


# Identity-keyed set of nodes; swapped wholesale by the selection store
SelectionSet = FrozenSet[Node]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle with x1 <= x2 and y1 <= y2.

    Rectangles carry no coordinate space of their own; callers keep pointer
    space and graph space apart and convert with CoordinateMapper.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self):
        if self.x1 > self.x2 or self.y1 > self.y2:
            raise ValueError(
                f"Rectangle corners out of order: ({self.x1}, {self.y1}, {self.x2}, {self.y2})"
            )

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "Rectangle":
        """Build a rectangle from two opposite corners in any drag direction."""
        return cls(
            x1=min(a.x, b.x),
            y1=min(a.y, b.y),
            x2=max(a.x, b.x),
            y2=max(a.y, b.y),
        )

    def contains(self, x: float, y: float) -> bool:
        """Inclusive bounds test."""
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class Transform:
    """
    Pan/zoom state of the view: translate (x, y) then scale k.

    Owned by the view controller; k is always positive.
    """
    x: float = 0.0
    y: float = 0.0
    k: float = 1.0

    def __post_init__(self):
        if self.k <= 0:
            raise ValueError(f"Transform scale must be positive, got {self.k}")

    def invert(self, point: Point) -> Point:
        """Map a pointer-space point back into graph space."""
        return Point((point.x - self.x) / self.k, (point.y - self.y) / self.k)
