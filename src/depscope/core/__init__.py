"""
Core modules for depscope.

This package contains the fundamental building blocks:
- types: Data structures (Node, Edge, Rectangle, Transform)
- graph: In-memory dependency graph
- config: Session configuration
- exceptions / result: Error taxonomy and the Ok/Err result type
"""

from .config import CATEGORY10, ContractPolicy, ExplorerConfig, load_config
from .exceptions import (
    ConfigError, ContractViolation, DepscopeError,
    GraphNotFoundError, InvalidPatternError, NodeNotFoundError,
)
from .graph import GraphModel
from .result import Err, Ok, Result
from .types import (
    Edge, Node, NodeAttribute, Point, Rectangle,
    SelectionSet, Transform, parse_attribute,
)

__all__ = [
    # Types
    "Node", "Edge", "NodeAttribute", "Point", "Rectangle",
    "SelectionSet", "Transform", "parse_attribute",
    # Graph
    "GraphModel",
    # Config
    "CATEGORY10", "ContractPolicy", "ExplorerConfig", "load_config",
    # Errors
    "DepscopeError", "ConfigError", "ContractViolation",
    "GraphNotFoundError", "InvalidPatternError", "NodeNotFoundError",
    "Ok", "Err", "Result",
]
