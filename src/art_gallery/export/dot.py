"""
DOT (Graphviz) export for gallery boundaries.

Renders the planar graph's adjacency with fixed vertex positions, so that
``neato -n`` reproduces the gallery outline. Guards can be highlighted.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Sequence

from ..types import Color, PointLike

if TYPE_CHECKING:
    from ..graph import PlanarGraph


def to_dot(
    graph: PlanarGraph,
    *,
    name: str = "gallery",
    include_positions: bool = True,
    scale: float = 1.0,
    node_shape: str = "point",
    guards: Optional[Sequence[PointLike]] = None,
    guard_color: str = "red",
    include_colors: bool = False,
    graph_attrs: Optional[dict[str, str]] = None,
    node_attrs: Optional[dict[str, str]] = None,
    edge_attrs: Optional[dict[str, str]] = None,
) -> str:
    """
    Export a planar graph to DOT (Graphviz) format.

    Args:
        graph: Planar graph of a gallery boundary
        name: Name of the graph (default "gallery")
        include_positions: Include fixed pos attributes for vertices (default True)
        scale: Multiplier applied to coordinates in pos attributes (default 1)
        node_shape: Default node shape (default "point")
        guards: Guard points to highlight
        guard_color: Color for guard vertices (default red)
        include_colors: Add each vertex's 3-coloring as a "class" attribute
        graph_attrs: Additional graph-level attributes
        node_attrs: Additional default node attributes
        edge_attrs: Additional default edge attributes

    Returns:
        DOT format string representation of the graph
    """
    guard_set = {tuple(g) for g in guards} if guards else set()

    lines = [f"graph {_dot_id(name)} {{"]

    if graph_attrs:
        lines.append(f"  graph{_attr_list(graph_attrs)};")

    all_node_attrs: dict[str, str] = {"shape": node_shape}
    if node_attrs:
        all_node_attrs.update(node_attrs)
    lines.append(f"  node{_attr_list(all_node_attrs)};")

    if edge_attrs:
        lines.append(f"  edge{_attr_list(edge_attrs)};")

    lines.append("")

    # Vertices
    ids: dict[tuple[int, int], str] = {}
    for i, vertex in enumerate(graph.vertices):
        p = vertex.src
        node_id = f"v{i}"
        ids[p] = node_id

        node_data: dict[str, str] = {"label": f"({p.x}, {p.y})"}
        if include_positions:
            # Trailing "!" pins the node for neato -n
            node_data["pos"] = f"{p.x * scale:.2f},{p.y * scale:.2f}!"
        if p in guard_set:
            node_data["color"] = guard_color
            node_data["shape"] = "doublecircle"
        if include_colors and vertex.color is not None:
            node_data["class"] = _color_name(vertex.color)

        lines.append(f"  {node_id}{_attr_list(node_data)};")

    lines.append("")

    # Boundary edges
    for src, dest in graph.edges():
        lines.append(f"  {ids[src]} -- {ids[dest]};")

    lines.append("}")

    return "\n".join(lines)


def _color_name(color: Color) -> str:
    return color.name.lower()


# DOT plain IDs: names, or numerals such as -1.5 or .5
_PLAIN_ID = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))$")


def _dot_id(value: str) -> str:
    """Return value as a DOT ID, double-quoted unless it is a plain name or number."""
    if _PLAIN_ID.match(value):
        return value
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _attr_list(attrs: dict[str, str]) -> str:
    if not attrs:
        return ""
    return " [" + ", ".join(f"{key}={_dot_id(value)}" for key, value in attrs.items()) + "]"


__all__ = ["to_dot"]
