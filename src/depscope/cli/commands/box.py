"""
Box Command - Select nodes inside a dragged rectangle.

Coordinates are given in pointer space together with the view's pan/zoom
transform, exactly as a pointer-down/pointer-up pair would deliver them.
Use `--` before negative coordinates.
"""

import sys

import click

from ...core.types import NodeAttribute, Point, Transform
from ..formatting import output_selection
from ..utils import open_session

ATTRIBUTE_CHOICES = [a.value for a in NodeAttribute]


@click.command()
@click.argument("x1", type=float)
@click.argument("y1", type=float)
@click.argument("x2", type=float)
@click.argument("y2", type=float)
@click.option("-i", "--input", "graph_file", default=".", help="Graph JSON file or directory")
@click.option("-c", "--config", "config_file", default=None, help="Path to config.yaml")
@click.option("--group-by", type=click.Choice(ATTRIBUTE_CHOICES), default=None,
              help="Attribute used to group the selection")
@click.option("--tx", default=0.0, type=float, help="View translation on x")
@click.option("--ty", default=0.0, type=float, help="View translation on y")
@click.option("--scale", default=1.0, type=click.FloatRange(min=0, min_open=True),
              help="View zoom factor")
@click.option("--expand", "expand_steps", default=0, type=click.IntRange(min=0),
              help="Expand the boxed selection this many hops")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def box(x1: float, y1: float, x2: float, y2: float, graph_file: str, config_file: str,
        group_by: str, tx: float, ty: float, scale: float, expand_steps: int, as_json: bool) -> None:
    """
    Select every node whose layout position lies inside the box.
    """
    session = open_session(graph_file, config_file, group_by)
    if session is None:
        sys.exit(1)

    session.set_transform(Transform(x=tx, y=ty, k=scale))
    session.box_select(Point(x1, y1), Point(x2, y2))
    for _ in range(expand_steps):
        session.expand()

    output_selection(session, as_json, title="Box selection")
