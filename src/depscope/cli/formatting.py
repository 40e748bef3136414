"""
Output formatting for CLI commands.

Human output is rendered with rich (a tree of groups, mirroring the side
panel); `--json` output goes through pydantic response models so the shape
is a stable contract for editor integrations.
"""

from typing import Any, Dict, List, Optional

import click
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..selection.render import selected_links
from ..selection.session import ExplorerSession

console = Console()

UNGROUPED_LABEL = "(none)"


# --- API Models ---
class SelectedGroup(BaseModel):
    value: str
    color: Optional[str] = None
    nodes: List[str] = Field(default_factory=list)


class SelectionResponse(BaseModel):
    count: int
    has_selections: bool
    selected_edges: int
    groups: List[SelectedGroup] = Field(default_factory=list)


class LegendItem(BaseModel):
    value: str
    count: int
    color: str


class LegendResponse(BaseModel):
    group_by: str
    items: List[LegendItem] = Field(default_factory=list)


def _label(value: Optional[str]) -> str:
    return UNGROUPED_LABEL if value is None else value


def _node_label(session: ExplorerSession, node_id: str) -> str:
    node = session.graph.get_node(node_id)
    return node.label if node else node_id


def build_selection_response(session: ExplorerSession) -> SelectionResponse:
    change = session.store.last_change
    if change is None:
        return SelectionResponse(count=0, has_selections=False, selected_edges=0)

    return SelectionResponse(
        count=len(change.selection),
        has_selections=change.flags.has_selections,
        selected_edges=len(change.flags.selected_edges),
        groups=[
            SelectedGroup(
                value=_label(value),
                color=session.color_for(value),
                nodes=[node.id for node in nodes],
            )
            for value, nodes in change.groups.items()
        ],
    )


def build_legend_response(session: ExplorerSession) -> LegendResponse:
    return LegendResponse(
        group_by=session.config.group_by.value,
        items=[
            LegendItem(value=_label(entry.value), count=entry.count, color=entry.color)
            for entry in session.legend
        ],
    )


def emit_json(model: BaseModel) -> None:
    click.echo(model.model_dump_json(indent=2))


def render_selection(session: ExplorerSession, title: str = "Selection") -> None:
    """Print the selection grouped the way the side panel shows it."""
    change = session.store.last_change
    groups = change.groups if change else {}
    count = len(change.selection) if change else 0

    tree = Tree(f"[bold]{escape(title)}[/bold] ({count} nodes)")
    if not groups:
        tree.add("[dim]nothing selected[/dim]")

    for value, nodes in groups.items():
        color = session.color_for(value) or "white"
        branch = tree.add(f"[{color}]●[/] {escape(_label(value))} ({len(nodes)})")
        for node in nodes:
            branch.add(escape(node.label))

    if change and change.flags.has_selections:
        links = tree.add(f"[dim]Links[/dim] ({len(change.flags.selected_edges)})")
        for edge in selected_links(session.graph, change.flags):
            source = escape(_node_label(session, edge.source))
            target = escape(_node_label(session, edge.target))
            links.add(f"{source} → {target}")

    console.print(tree)


def render_legend(session: ExplorerSession) -> None:
    table = Table(title=f"Groups by {session.config.group_by.value}")
    table.add_column("", width=2)
    table.add_column("Group")
    table.add_column("Nodes", justify="right")

    for entry in session.legend:
        table.add_row(f"[{entry.color}]●[/]", escape(_label(entry.value)), str(entry.count))
    console.print(table)


def render_stats(stats: Dict[str, Any]) -> None:
    table = Table(title="Graph statistics", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    for key in ("total_nodes", "total_edges", "components", "orphans", "backend"):
        table.add_row(key.replace("_", " "), str(stats[key]))
    for group in stats["nodes_by_group"]:
        table.add_row(f"  {stats['group_key']}={escape(_label(group['value']))}", str(group["count"]))
    console.print(table)


def output_selection(session: ExplorerSession, as_json: bool, title: str = "Selection") -> None:
    if as_json:
        emit_json(build_selection_response(session))
    else:
        render_selection(session, title)
