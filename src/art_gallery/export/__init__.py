"""
Export functionality for solved galleries.

This module provides functions to render a gallery in text formats:
- SVG: Polygon, triangulation, 3-coloring and guards for web and print
- DOT: Graphviz rendering of the boundary adjacency

Example usage:
    from art_gallery import ArtGallery
    from art_gallery.export import to_dot, to_svg

    gallery = ArtGallery(
        [((0, 0), (4, 0)), ((4, 0), (4, 4)), ((4, 4), (0, 4)), ((0, 4), (0, 0))]
    )
    solution = gallery.solution()

    # Export to SVG
    svg_content = to_svg(solution)
    with open("gallery.svg", "w") as f:
        f.write(svg_content)

    # Export to DOT
    dot_content = to_dot(gallery.graph, guards=solution.guards)
    with open("gallery.dot", "w") as f:
        f.write(dot_content)
"""

from .dot import to_dot
from .svg import to_svg

__all__ = [
    # SVG export
    "to_svg",
    # DOT export
    "to_dot",
]
