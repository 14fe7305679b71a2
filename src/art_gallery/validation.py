"""
Input validation for gallery boundaries.

Provides the exception hierarchy and the Polygon Validator: coercion of raw
point/edge input and the checks that a Planar Graph is exactly one simple
closed polygon. Raises descriptive exceptions on invalid input; nothing is
ever repaired.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .predicates import orientation, segments_intersect, winding
from .types import Edge, EdgeLike, Orientation, Point, PointLike

if TYPE_CHECKING:
    from .graph import PlanarGraph


MALFORMED = "malformed"
SELF_INTERSECTING = "self_intersecting"


class GalleryError(Exception):
    """Base exception for the art gallery solver."""

    pass


class ValidationError(GalleryError, ValueError):
    """Base exception for invalid gallery input."""

    pass


class InvalidPointError(ValidationError):
    """Raised when a point is not a pair of integers."""

    pass


class MalformedBoundaryError(ValidationError):
    """Raised when the boundary is open, branching, or not a single cycle."""

    pass


class SelfIntersectingBoundaryError(ValidationError):
    """Raised when two boundary edges cross, touch, or fold back."""

    pass


class TriangulationError(GalleryError, RuntimeError):
    """
    Raised when ear clipping or coloring breaks an internal invariant.

    Never expected for a boundary that passed validation.
    """

    pass


class GalleryStructureWarning(UserWarning):
    """Warning for tolerated oddities in a gallery boundary."""

    pass


def validate_point(value: PointLike) -> Point:
    """
    Coerce a point-like value to a Point.

    Args:
        value: Point, (x, y) sequence, or object with x/y attributes

    Returns:
        Validated Point

    Raises:
        InvalidPointError: If the value has no two integral coordinates
    """
    if isinstance(value, Point):
        return value

    if hasattr(value, "x") and hasattr(value, "y"):
        coords: Sequence[Any] = (value.x, value.y)
    elif isinstance(value, (tuple, list)):
        coords = value
    else:
        raise InvalidPointError(f"Cannot interpret {value!r} as a point")

    if len(coords) != 2:
        raise InvalidPointError(f"Point must have 2 coordinates (x, y), got {len(coords)}")

    result = []
    for c in coords:
        if isinstance(c, bool) or not isinstance(c, (int, float)):
            raise InvalidPointError(f"Point coordinates must be integers, got {c!r}")
        if int(c) != c:
            raise InvalidPointError(f"Point coordinates must be integers, got {c!r}")
        result.append(int(c))

    return Point(result[0], result[1])


def validate_edge(value: EdgeLike) -> Edge:
    """
    Coerce an edge-like value to an Edge.

    Args:
        value: Edge, (src, dest) pair, dict with src/dest, or object with
            src/dest attributes

    Returns:
        Validated Edge

    Raises:
        InvalidPointError: If an endpoint is not a valid point
        MalformedBoundaryError: If the value has no two endpoints
    """
    if isinstance(value, Edge):
        return Edge(validate_point(value.src), validate_point(value.dest))

    if isinstance(value, dict):
        if "src" not in value or "dest" not in value:
            raise MalformedBoundaryError(f"Edge dict must have 'src' and 'dest', got {value!r}")
        src, dest = value["src"], value["dest"]
    elif hasattr(value, "src") and hasattr(value, "dest"):
        src, dest = value.src, value.dest
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        src, dest = value
    else:
        raise MalformedBoundaryError(f"Cannot interpret {value!r} as an edge")

    return Edge(validate_point(src), validate_point(dest))


def validate_edges(edges: Sequence[EdgeLike]) -> list[Edge]:
    """
    Validate a raw boundary edge list.

    Args:
        edges: Sequence of edge-like values

    Returns:
        List of validated Edges, in input order

    Raises:
        MalformedBoundaryError: If the list is empty or an edge has zero length
        InvalidPointError: If an endpoint is not a valid point
    """
    if len(edges) == 0:
        raise MalformedBoundaryError("Boundary has no edges")

    result: list[Edge] = []
    for i, raw in enumerate(edges):
        edge = validate_edge(raw)
        if edge.src == edge.dest:
            raise MalformedBoundaryError(f"Edge {i}: zero-length edge at {edge.src}")
        result.append(edge)

    return result


def validate_boundary(graph: PlanarGraph, strict: bool = True) -> list[tuple[str, str]]:
    """
    Check that a graph is exactly one simple closed polygon.

    Checks, in order: every vertex has degree 2; the adjacency forms one
    cycle through all vertices; no two boundary edges without a common
    endpoint intersect; no two consecutive edges fold back over each other;
    the enclosed area is non-zero.

    Args:
        graph: Planar graph built from the boundary edges
        strict: If True, raises on the first failing kind. If False, returns
            the list of issues.

    Returns:
        List of (kind, issue_description) tuples, kind being "malformed" or
        "self_intersecting"

    Raises:
        MalformedBoundaryError: If strict=True and the degree or cycle check fails
        SelfIntersectingBoundaryError: If strict=True and the crossing checks fail
    """
    issues: list[tuple[str, str]] = []

    if len(graph) == 0:
        issues.append((MALFORMED, "Boundary has no vertices"))

    for vertex in graph.vertices:
        if vertex.degree != 2:
            issues.append(
                (
                    MALFORMED,
                    f"Vertex {vertex.src}: degree {vertex.degree}, expected 2",
                )
            )

    cycle = None
    if not issues:
        cycle = graph.boundary_cycle()
        if cycle is None:
            issues.append(
                (
                    MALFORMED,
                    f"Edges do not form a single closed cycle through all {len(graph)} vertices",
                )
            )

    if cycle is not None:
        issues.extend(_crossing_issues(cycle))

    if strict and issues:
        _raise_first(issues)

    return issues


def is_closed(graph: PlanarGraph) -> bool:
    """Check whether a graph is exactly one simple closed polygon."""
    return not validate_boundary(graph, strict=False)


def _crossing_issues(cycle: list[Point]) -> list[tuple[str, str]]:
    """Crossing, fold-back, and zero-area checks over an ordered boundary cycle."""
    issues: list[tuple[str, str]] = []
    n = len(cycle)
    edges = [(cycle[i], cycle[(i + 1) % n]) for i in range(n)]

    for i in range(n):
        a1, b1 = edges[i]
        for j in range(i + 1, n):
            a2, b2 = edges[j]
            # Edges sharing an endpoint are neighbors on the boundary
            if {a1, b1} & {a2, b2}:
                continue
            if segments_intersect(a1, b1, a2, b2):
                issues.append(
                    (
                        SELF_INTERSECTING,
                        f"Edges {a1} -- {b1} and {a2} -- {b2} intersect",
                    )
                )

    for i in range(n):
        prev, cur, nxt = cycle[i - 1], cycle[i], cycle[(i + 1) % n]
        if orientation(prev, cur, nxt) != Orientation.COLINEAR:
            continue
        dot = (prev.x - cur.x) * (nxt.x - cur.x) + (prev.y - cur.y) * (nxt.y - cur.y)
        if dot > 0:
            issues.append(
                (
                    SELF_INTERSECTING,
                    f"Edges {prev} -- {cur} and {cur} -- {nxt} fold back over each other",
                )
            )

    if not issues and winding(cycle) == Orientation.COLINEAR:
        issues.append((SELF_INTERSECTING, "Boundary encloses zero area"))

    return issues


def _raise_first(issues: list[tuple[str, str]]) -> None:
    malformed = [msg for kind, msg in issues if kind == MALFORMED]
    if malformed:
        raise MalformedBoundaryError("Malformed boundary:\n" + "\n".join(malformed))
    crossing = [msg for kind, msg in issues if kind == SELF_INTERSECTING]
    raise SelfIntersectingBoundaryError("Self-intersecting boundary:\n" + "\n".join(crossing))


__all__ = [
    "GalleryError",
    "ValidationError",
    "InvalidPointError",
    "MalformedBoundaryError",
    "SelfIntersectingBoundaryError",
    "TriangulationError",
    "GalleryStructureWarning",
    "validate_point",
    "validate_edge",
    "validate_edges",
    "validate_boundary",
    "is_closed",
]
