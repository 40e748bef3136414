"""
Stats Command - Summarize the loaded graph.
"""

import json
import sys

import click

from ...core.exceptions import GraphNotFoundError
from ...core.types import NodeAttribute
from ..formatting import render_stats
from ..utils import echo_graph_not_found, load_graph


@click.command()
@click.option("-i", "--input", "graph_file", default=".", help="Graph JSON file or directory")
@click.option("--group-by", type=click.Choice([a.value for a in NodeAttribute]),
              default=NodeAttribute.TYPE.value, help="Attribute used to count groups")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(graph_file: str, group_by: str, as_json: bool) -> None:
    """
    Show node, edge and group counts.
    """
    try:
        graph = load_graph(graph_file)
    except GraphNotFoundError as e:
        echo_graph_not_found(e)
        sys.exit(1)
    if graph is None:
        sys.exit(1)

    data = graph.get_stats(NodeAttribute(group_by))
    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        render_stats(data)
