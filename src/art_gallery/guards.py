"""
Guard selection by 3-coloring a polygon triangulation.

Every triangle of a polygon triangulation can be colored with one corner of
each color. Each color class then sees the whole polygon, and the smallest
class has at most floor(n / 3) vertices (Fisk's proof of the art gallery
theorem).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .types import PALETTE, Color, Point, Triangle
from .validation import TriangulationError

if TYPE_CHECKING:
    from .graph import PlanarGraph
    from .triangulation import Triangulation


def coloring_graph(triangles: Sequence[Triangle]) -> dict[Point, set[Point]]:
    """
    Build vertex adjacency induced by triangle co-membership.

    Args:
        triangles: Triangles of a triangulation

    Returns:
        Mapping from each triangle corner to the corners it shares a
        triangle with.
    """
    adj: dict[Point, set[Point]] = {}
    for triangle in triangles:
        for p in triangle:
            adj.setdefault(p, set()).update(q for q in triangle if q != p)
    return adj


def three_color(graph: PlanarGraph, triangulation: Triangulation) -> dict[Point, Color]:
    """
    Properly 3-color the triangulation's vertices.

    Walks the ear-clipping order backwards: the final triangle takes all
    three colors, then every clipped ear (prev, tip, next) finds prev and
    next already colored and gives tip the remaining color. The colors are
    also written to each Vertex of the graph.

    Args:
        graph: Planar graph the triangulation was built from
        triangulation: Ear-clipping result

    Returns:
        Mapping from point to color, in clipping-reversed assignment order.

    Raises:
        TriangulationError: If the triangulation does not admit the coloring
    """
    if not triangulation.triangles:
        return {}

    colors: dict[Point, Color] = {}
    final = triangulation.triangles[-1]
    for p, color in zip(final, PALETTE):
        colors[p] = color

    for triangle in reversed(triangulation.triangles[:-1]):
        prev, tip, nxt = triangle
        if prev not in colors or nxt not in colors:
            raise TriangulationError(f"Ear at {tip} clipped before its neighbors were colored")
        used = {colors[prev], colors[nxt]}
        if len(used) != 2:
            raise TriangulationError(f"Ear at {tip}: neighbors {prev} and {nxt} share a color")
        colors[tip] = next(c for c in PALETTE if c not in used)

    for p, neighbors in coloring_graph(triangulation.triangles).items():
        for q in neighbors:
            if colors[p] == colors[q]:
                raise TriangulationError(f"Adjacent vertices {p} and {q} share a color")

    for p, color in colors.items():
        vertex = graph.find_vertex(p)
        if vertex is None:
            raise TriangulationError(f"Triangle corner {p} is not a boundary vertex")
        vertex.color = color

    return colors


def color_classes(graph: PlanarGraph) -> dict[Color, list[Point]]:
    """
    Group colored vertices by color, in graph insertion order.

    Uncolored vertices are not counted.
    """
    classes: dict[Color, list[Point]] = {color: [] for color in PALETTE}
    for vertex in graph.vertices:
        if vertex.color is not None:
            classes[vertex.color].append(vertex.src)
    return classes


def select_guards(graph: PlanarGraph, triangulation: Triangulation) -> list[Point]:
    """
    Choose camera placements for a triangulated gallery.

    Colors the triangulation, then returns the smallest color class. Ties
    go to the earlier palette color.

    Args:
        graph: Planar graph of the gallery boundary
        triangulation: Ear-clipping result for that graph

    Returns:
        Guard points in graph insertion order
    """
    graph.reset_colors()
    three_color(graph, triangulation)
    classes = color_classes(graph)
    smallest = min(PALETTE, key=lambda color: len(classes[color]))
    return classes[smallest]


__all__ = [
    "coloring_graph",
    "three_color",
    "color_classes",
    "select_guards",
]
