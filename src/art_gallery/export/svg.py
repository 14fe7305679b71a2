"""
SVG export for solved galleries.

Draws the gallery polygon, its triangulation diagonals, the 3-coloring of
the boundary vertices, and the chosen camera placements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Sequence
from xml.sax.saxutils import escape

from ..types import Color, Point

if TYPE_CHECKING:
    from ..gallery import GallerySolution


DEFAULT_COLOR_FILLS: dict[Color, str] = {
    Color.RED: "#d94a4a",
    Color.YELLOW: "#e8c547",
    Color.BLUE: "#4a90d9",
}


def to_svg(
    solution: GallerySolution,
    *,
    scale: float = 20.0,
    padding: float = 40.0,
    polygon_fill: str = "#f2f2f2",
    boundary_color: str = "#333333",
    boundary_width: float = 2.0,
    diagonal_color: str = "#999999",
    diagonal_width: float = 1.0,
    vertex_radius: float = 5.0,
    guard_radius: float = 9.0,
    guard_stroke: str = "#000000",
    color_fills: Optional[dict[Color, str]] = None,
    show_labels: bool = False,
    label_color: str = "#000000",
    font_size: float = 10.0,
    font_family: str = "sans-serif",
    background: Optional[str] = None,
) -> str:
    """
    Export a gallery solution to SVG format.

    Gallery coordinates are scaled by ``scale`` and flipped vertically so
    that +y points up, as in the input coordinates.

    Args:
        solution: Result of ArtGallery.solution()
        scale: Pixels per coordinate unit (default 20)
        padding: Padding around the polygon (default 40)
        polygon_fill: Fill color for the polygon interior
        boundary_color: Stroke color for boundary edges
        boundary_width: Stroke width for boundary edges (default 2)
        diagonal_color: Stroke color for triangulation diagonals
        diagonal_width: Stroke width for diagonals (default 1)
        vertex_radius: Radius of vertex markers (default 5)
        guard_radius: Radius of guard markers (default 9)
        guard_stroke: Outline color of guard markers
        color_fills: Fill per palette color (default red/yellow/blue)
        show_labels: Whether to label vertices with coordinates (default False)
        label_color: Color for labels
        font_size: Font size for labels (default 10)
        font_family: Font family for labels (default sans-serif)
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the gallery

    Raises:
        ValueError: If scale is not positive
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    fills = dict(DEFAULT_COLOR_FILLS)
    if color_fills:
        fills.update(color_fills)

    boundary = solution.triangulation.boundary
    if not boundary:
        return "\n".join(_open_svg(2 * padding, 2 * padding, background) + ["</svg>"])

    # Bounding box in gallery units
    min_x = min(p.x for p in boundary)
    max_x = max(p.x for p in boundary)
    min_y = min(p.y for p in boundary)
    max_y = max(p.y for p in boundary)

    width = (max_x - min_x) * scale + 2 * padding
    height = (max_y - min_y) * scale + 2 * padding

    def project(p: Point) -> tuple[float, float]:
        return (
            (p.x - min_x) * scale + padding,
            (max_y - p.y) * scale + padding,
        )

    svg_parts = _open_svg(width, height, background)

    # Polygon
    svg_parts.append('  <g class="polygon">')
    svg_parts.append(
        _render_polygon(boundary, project, polygon_fill, boundary_color, boundary_width)
    )
    svg_parts.append("  </g>")

    # Diagonals
    svg_parts.append('  <g class="diagonals">')
    for p, q in solution.triangulation.diagonals:
        svg_parts.append(_render_segment(project(p), project(q), diagonal_color, diagonal_width))
    svg_parts.append("  </g>")

    # Vertices colored by 3-coloring
    svg_parts.append('  <g class="vertices">')
    for p in boundary:
        color = solution.coloring.get(p)
        fill = fills[color] if color is not None else "#ffffff"
        svg_parts.append(_render_marker(project(p), vertex_radius, fill, boundary_color, 1.0))
    svg_parts.append("  </g>")

    # Guards
    svg_parts.append('  <g class="guards">')
    for g in solution.guards:
        color = solution.coloring.get(g)
        fill = fills[color] if color is not None else "#ffffff"
        svg_parts.append(_render_marker(project(g), guard_radius, fill, guard_stroke, 2.0))
    svg_parts.append("  </g>")

    # Labels group
    if show_labels:
        svg_parts.append('  <g class="labels">')
        for p in boundary:
            svg_parts.append(
                _render_label(p, project(p), vertex_radius, label_color, font_size, font_family)
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _open_svg(width: float, height: float, background: Optional[str]) -> list[str]:
    """Root element, plus a full-size background rect when requested."""
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]
    if background:
        parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')
    return parts


def _render_polygon(
    boundary: Sequence[Point],
    project: Callable[[Point], tuple[float, float]],
    fill: str,
    stroke: str,
    stroke_width: float,
) -> str:
    """Render the gallery outline."""
    points = " ".join("{:.1f},{:.1f}".format(*project(p)) for p in boundary)
    return (
        f'    <polygon points="{points}" '
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{stroke_width}" stroke-linejoin="round"/>'
    )


def _render_segment(
    p: tuple[float, float],
    q: tuple[float, float],
    color: str,
    width: float,
) -> str:
    """Render a straight segment."""
    return (
        f'    <line x1="{p[0]:.1f}" y1="{p[1]:.1f}" '
        f'x2="{q[0]:.1f}" y2="{q[1]:.1f}" '
        f'stroke="{escape(color)}" stroke-width="{width}" stroke-dasharray="4,3"/>'
    )


def _render_marker(
    center: tuple[float, float],
    radius: float,
    fill: str,
    stroke: str,
    stroke_width: float,
) -> str:
    """Render a circular vertex or guard marker."""
    return (
        f'    <circle cx="{center[0]:.1f}" cy="{center[1]:.1f}" r="{radius:.1f}" '
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{stroke_width}"/>'
    )


def _render_label(
    point: Point,
    center: tuple[float, float],
    offset: float,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    """Render a coordinate label beside a vertex."""
    label = f"({point.x}, {point.y})"
    return (
        f'    <text x="{center[0] + offset + 2:.1f}" y="{center[1] - offset - 2:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}">'
        f"{escape(label)}</text>"
    )


__all__ = ["to_svg"]
