"""
Error taxonomy for depscope.

Only InvalidPatternError is recovered inside the engine. ContractViolation
marks a programming error (a node or edge that does not belong to the loaded
graph). The remaining errors are raised at the loading/CLI boundary.
"""

from pathlib import Path
from typing import Union


class DepscopeError(Exception):
    """Base class for all depscope errors."""


class GraphNotFoundError(DepscopeError):
    """No graph file could be resolved from the given path."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Graph file not found: {self.path}")


class NodeNotFoundError(DepscopeError):
    """A node id given by the user does not exist in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class InvalidPatternError(DepscopeError):
    """A search pattern failed to compile as a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")


class ContractViolation(DepscopeError):
    """A caller referenced a node or edge outside the loaded graph."""


class ConfigError(DepscopeError):
    """The explorer configuration file is unreadable or invalid."""
