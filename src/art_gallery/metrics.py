"""
Gallery solution metrics.

Provides quantitative measures of a solved gallery:
- Polygon area and reflex vertex count
- Guard count against the floor(n/3) bound
- Coverage check: triangles without a guard corner

All metrics work on a GallerySolution or on its parts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .predicates import interior_angle, signed_area, winding
from .types import Point, PointLike, Triangle

if TYPE_CHECKING:
    from .gallery import GallerySolution


def polygon_area(boundary: Sequence[PointLike]) -> float:
    """
    Compute the area enclosed by a boundary.

    Args:
        boundary: Ordered boundary vertices

    Returns:
        Unsigned area
    """
    return abs(signed_area(boundary))


def reflex_vertices(boundary: Sequence[Point]) -> list[Point]:
    """
    Find boundary vertices with an interior angle above 180 degrees.

    Args:
        boundary: Ordered boundary vertices

    Returns:
        Reflex vertices in boundary order
    """
    n = len(boundary)
    if n < 3:
        return []

    w = winding(boundary)
    result = []
    for i in range(n):
        angle = interior_angle(boundary[i - 1], boundary[i], boundary[(i + 1) % n], boundary_winding=w)
        if angle > 180.0:
            result.append(boundary[i])
    return result


def guard_bound(n: int) -> int:
    """Upper bound on guards for an n-vertex polygon: floor(n / 3)."""
    return n // 3


def uncovered_triangles(triangles: Sequence[Triangle], guards: Sequence[PointLike]) -> list[Triangle]:
    """
    Find triangles with no guard at any corner.

    A valid solution leaves this list empty.
    """
    guard_set = {tuple(g) for g in guards}
    return [t for t in triangles if not any(tuple(p) in guard_set for p in t)]


def solution_summary(solution: GallerySolution) -> dict[str, Any]:
    """
    Compute a summary of solution metrics.

    Args:
        solution: Result of ArtGallery.solution()

    Returns:
        Dictionary with all metrics:
        - vertices: Number of boundary vertices
        - triangles: Number of triangles
        - diagonals: Number of interior diagonals
        - guards: Number of guards
        - guard_bound: floor(n / 3)
        - area: Enclosed area
        - reflex_vertices: Number of reflex vertices
        - uncovered_triangles: Triangles without a guard corner
    """
    boundary = solution.triangulation.boundary
    n = len(boundary)
    return {
        "vertices": n,
        "triangles": len(solution.triangulation.triangles),
        "diagonals": len(solution.triangulation.diagonals),
        "guards": len(solution.guards),
        "guard_bound": guard_bound(n),
        "area": polygon_area(boundary),
        "reflex_vertices": len(reflex_vertices(boundary)),
        "uncovered_triangles": len(uncovered_triangles(solution.triangles, solution.guards)),
    }


__all__ = [
    "polygon_area",
    "reflex_vertices",
    "guard_bound",
    "uncovered_triangles",
    "solution_summary",
]
