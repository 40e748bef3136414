"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, graph/config loading and session setup.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import click

from ..core.config import GRAPH_FILE_CANDIDATES, load_config
from ..core.exceptions import ConfigError, DepscopeError, GraphNotFoundError, NodeNotFoundError
from ..core.graph import GraphModel
from ..core.types import NodeAttribute
from ..selection.session import ExplorerSession

logger = logging.getLogger(__name__)


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def resolve_graph_path(graph_file: str) -> Optional[Path]:
    """
    Resolve a file or directory argument to a graph JSON file.

    Directories are searched for the standard export locations
    (data/tgraph.json, tgraph.json, .depscope/graph.json).
    """
    graph_path = Path(graph_file)
    if graph_path.is_dir():
        for candidate in GRAPH_FILE_CANDIDATES:
            p = graph_path / candidate
            if p.exists():
                return p
        return None
    return graph_path if graph_path.exists() else None


def echo_graph_not_found(error: GraphNotFoundError) -> None:
    echo_error(str(error))
    click.echo(f"Expected one of: {', '.join(GRAPH_FILE_CANDIDATES)}", err=True)


def load_graph(graph_file: str) -> Optional[GraphModel]:
    """
    Load a GraphModel from a file or directory path.

    Args:
        graph_file (str): Path to a JSON export or a directory containing one.

    Returns:
        Optional[GraphModel]: The loaded graph, or None if the file is unreadable.

    Raises:
        GraphNotFoundError: If no graph file exists at or under `graph_file`.
    """
    graph_path = resolve_graph_path(graph_file)
    if graph_path is None:
        raise GraphNotFoundError(graph_file)

    logger.debug(f"Loading graph from {graph_path}")
    try:
        data = json.loads(graph_path.read_text())
        return GraphModel.from_dict(data)
    except (OSError, ValueError, DepscopeError) as e:
        echo_error(f"Failed to load graph: {e}")
        return None


def open_session(
    graph_file: str,
    config_file: Optional[str] = None,
    group_by: Optional[str] = None,
) -> Optional[ExplorerSession]:
    """
    Load the graph and config and start an explorer session.

    A `group_by` given on the command line overrides the configured key.
    """
    try:
        config = load_config(Path(config_file) if config_file else None)
    except ConfigError as e:
        echo_error(str(e))
        return None

    if group_by:
        config = config.model_copy(update={"group_by": NodeAttribute(group_by)})

    try:
        graph = load_graph(graph_file)
    except GraphNotFoundError as e:
        echo_graph_not_found(e)
        return None
    if graph is None:
        return None

    return ExplorerSession(graph, config)


def resolve_node_ids(session: ExplorerSession, names: Iterable[str]) -> List[str]:
    """
    Resolve user-supplied names to node ids.

    Exact ids win; otherwise a case-insensitive substring match on id or
    full name is used, preferring an exact full-name hit.

    Raises:
        NodeNotFoundError: If a name matches nothing.
    """
    resolved = []
    for name in names:
        if session.graph.has_node(name):
            resolved.append(name)
            continue

        matches = session.graph.find_nodes(name)
        if not matches:
            raise NodeNotFoundError(name)
        if len(matches) > 1:
            exact = [m for m in matches if (session.graph.get_node(m).full_name or "") == name]
            if exact:
                matches = exact
            else:
                echo_warning(f"Ambiguous name '{name}'. Using first match: {matches[0]}")
        resolved.append(matches[0])
    return resolved
