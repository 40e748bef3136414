"""
Legend Command - Show node groups with their counts and colors.
"""

import sys

import click

from ...core.types import NodeAttribute
from ..formatting import build_legend_response, emit_json, render_legend
from ..utils import open_session


@click.command()
@click.option("-i", "--input", "graph_file", default=".", help="Graph JSON file or directory")
@click.option("-c", "--config", "config_file", default=None, help="Path to config.yaml")
@click.option("--group-by", type=click.Choice([a.value for a in NodeAttribute]), default=None,
              help="Attribute used to group nodes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def legend(graph_file: str, config_file: str, group_by: str, as_json: bool) -> None:
    """
    List node groups, least populated first, with their colors.
    """
    session = open_session(graph_file, config_file, group_by)
    if session is None:
        sys.exit(1)

    if as_json:
        emit_json(build_legend_response(session))
    else:
        render_legend(session)
