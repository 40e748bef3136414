"""
Pointer-space to graph-space conversion.

The view applies `translate(x, y) scale(k)` to the graph layer, so a
pointer coordinate p corresponds to graph coordinate (p - t) / k.
"""

from ..core.types import Point, Rectangle, Transform


class CoordinateMapper:
    """Converts rectangles drawn on screen into the layout's coordinate space."""

    @staticmethod
    def to_graph_space(rect: Rectangle, transform: Transform) -> Rectangle:
        """
        Invert the view transform for both corners of `rect`.

        The result is re-normalized so that x1 <= x2 and y1 <= y2 whatever
        direction the box was dragged in.
        """
        a = transform.invert(Point(rect.x1, rect.y1))
        b = transform.invert(Point(rect.x2, rect.y2))
        return Rectangle.from_corners(a, b)

    @staticmethod
    def drag_to_graph_space(start: Point, end: Point, transform: Transform) -> Rectangle:
        """Convert a raw drag (start and end pointer positions) into graph space."""
        return CoordinateMapper.to_graph_space(Rectangle.from_corners(start, end), transform)
