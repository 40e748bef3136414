"""
Expand Command - Grow (or shrink) a selection along graph edges.
"""

import sys
from typing import Tuple

import click

from ...core.config import ContractPolicy
from ...core.exceptions import NodeNotFoundError
from ...core.types import NodeAttribute
from ..formatting import output_selection
from ..utils import echo_error, open_session, resolve_node_ids

ATTRIBUTE_CHOICES = [a.value for a in NodeAttribute]


@click.command()
@click.argument("nodes", nargs=-1, required=True)
@click.option("--steps", default=1, type=click.IntRange(min=0), help="Expansion rounds")
@click.option("--until-stable", is_flag=True,
              help="Keep expanding until the selection stops growing (ignores --steps)")
@click.option("--contract", "contract_steps", default=0, type=click.IntRange(min=0),
              help="Contraction rounds applied after expanding")
@click.option("--policy", type=click.Choice([p.value for p in ContractPolicy]), default=None,
              help="Override the configured contraction policy")
@click.option("-i", "--input", "graph_file", default=".", help="Graph JSON file or directory")
@click.option("-c", "--config", "config_file", default=None, help="Path to config.yaml")
@click.option("--group-by", type=click.Choice(ATTRIBUTE_CHOICES), default=None,
              help="Attribute used to group the selection")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def expand(nodes: Tuple[str, ...], steps: int, until_stable: bool, contract_steps: int, policy: str,
           graph_file: str, config_file: str, group_by: str, as_json: bool) -> None:
    """
    Select NODES, then expand to their neighbors STEPS times.
    """
    session = open_session(graph_file, config_file, group_by)
    if session is None:
        sys.exit(1)

    if policy:
        session.store.contract_policy = ContractPolicy(policy)

    try:
        node_ids = resolve_node_ids(session, nodes)
    except NodeNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)

    session.select_ids(node_ids)
    if until_stable:
        session.expand_until_stable()
    else:
        for _ in range(steps):
            session.expand()
    for _ in range(contract_steps):
        session.contract()

    output_selection(session, as_json, title="Expanded selection")
