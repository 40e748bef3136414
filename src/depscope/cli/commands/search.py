"""
Search Command - Select nodes by regular expression.
"""

import sys
from typing import Tuple

import click

from ...core.types import NodeAttribute
from ...selection.search import SEARCHABLE_ATTRIBUTES
from ..formatting import output_selection
from ..utils import echo_error, open_session

ATTRIBUTE_CHOICES = [a.value for a in NodeAttribute]


@click.command()
@click.argument("pattern")
@click.option("-a", "--attribute", "attributes", multiple=True, type=click.Choice(ATTRIBUTE_CHOICES),
              help="Attribute to search (repeatable; defaults to the configured set)")
@click.option("--all-attributes", is_flag=True, help="Search every attribute")
@click.option("-i", "--input", "graph_file", default=".", help="Graph JSON file or directory")
@click.option("-c", "--config", "config_file", default=None, help="Path to config.yaml")
@click.option("--group-by", type=click.Choice(ATTRIBUTE_CHOICES), default=None,
              help="Attribute used to group the selection")
@click.option("--expand", "expand_steps", default=0, type=click.IntRange(min=0),
              help="Expand the matches this many hops")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search(pattern: str, attributes: Tuple[str, ...], all_attributes: bool, graph_file: str,
           config_file: str, group_by: str, expand_steps: int, as_json: bool) -> None:
    """
    Select nodes whose attributes match PATTERN (case-insensitive regex).

    \b
    Examples:
      depscope search Account -a fullName
      depscope search '^Custom' -a type -a fileName
    """
    session = open_session(graph_file, config_file, group_by)
    if session is None:
        sys.exit(1)

    keys = None
    if all_attributes:
        keys = SEARCHABLE_ATTRIBUTES
    elif attributes:
        keys = attributes

    result = session.submit_search(pattern, keys)
    if result.is_err():
        echo_error(str(result.error))
        sys.exit(1)

    for _ in range(expand_steps):
        session.expand()

    output_selection(session, as_json, title=f"Search: {pattern}")
