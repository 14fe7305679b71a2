"""
Constrained triangulation of a simple polygon by ear clipping.

Every triangle side is either a boundary edge or a diagonal lying inside the
polygon, and all triangle corners are boundary vertices.

Algorithm:
1. Take the boundary as a cyclic vertex sequence
2. Scan from the position after the last clipped vertex for the first ear:
   a strictly convex vertex whose triangle (prev, vertex, next) holds no
   other remaining vertex, not even on its sides
3. Emit that triangle, drop the vertex, repeat until three vertices remain

Produces exactly n - 2 triangles in O(n^2) ear tests.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .predicates import is_convex, point_in_triangle, winding
from .types import Orientation, Point, Triangle
from .validation import (
    MalformedBoundaryError,
    SelfIntersectingBoundaryError,
    TriangulationError,
)

if TYPE_CHECKING:
    from .graph import PlanarGraph


@dataclass
class Triangulation:
    """
    Result of ear clipping.

    Attributes:
        boundary: Boundary cycle the triangulation was computed on
        winding: Traversal direction of that cycle
        triangles: Emitted triangles, in clipping order (final triangle last)
        removal_order: Ear tips in the order they were clipped
        diagonals: Interior diagonals, one per clipped ear
    """

    boundary: list[Point]
    winding: Orientation
    triangles: list[Triangle] = field(default_factory=list)
    removal_order: list[Point] = field(default_factory=list)
    diagonals: list[tuple[Point, Point]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.triangles)

    def boundary_edges(self) -> list[tuple[Point, Point]]:
        """Boundary edges as undirected (sorted) point pairs."""
        n = len(self.boundary)
        return [_sorted_pair(self.boundary[i], self.boundary[(i + 1) % n]) for i in range(n)]

    def edge_counts(self) -> Counter[tuple[Point, Point]]:
        """
        Count how many triangles use each undirected side.

        Boundary edges are used once and diagonals twice in a valid
        triangulation.
        """
        counts: Counter[tuple[Point, Point]] = Counter()
        for triangle in self.triangles:
            counts.update(triangle.edges())
        return counts


def triangulate(graph: PlanarGraph) -> Triangulation:
    """
    Triangulate the polygon bounded by a graph's single cycle.

    Args:
        graph: Planar graph of a simple closed boundary

    Returns:
        Triangulation with exactly n - 2 triangles

    Raises:
        MalformedBoundaryError: If the graph is not one closed cycle
        SelfIntersectingBoundaryError: If the boundary encloses zero area
        TriangulationError: If no ear can be found (the boundary is not simple)
    """
    cycle = graph.boundary_cycle()
    if cycle is None:
        raise MalformedBoundaryError(
            f"Cannot triangulate: edges do not form a single closed cycle "
            f"through all {len(graph)} vertices"
        )

    boundary_winding = winding(cycle)
    if boundary_winding == Orientation.COLINEAR:
        raise SelfIntersectingBoundaryError("Cannot triangulate: boundary encloses zero area")

    result = Triangulation(boundary=list(cycle), winding=boundary_winding)
    ring = list(cycle)
    start = 0

    while len(ring) > 3:
        m = len(ring)
        for step in range(m):
            i = (start + step) % m
            if _is_ear(ring, i, boundary_winding):
                break
        else:
            raise TriangulationError(
                f"No ear found with {m} vertices remaining; boundary is not a simple polygon"
            )

        prev, tip, nxt = ring[i - 1], ring[i], ring[(i + 1) % m]
        result.triangles.append(Triangle(prev, tip, nxt))
        result.removal_order.append(tip)
        result.diagonals.append((prev, nxt))

        del ring[i]
        # Resume at the vertex that followed the clipped one
        start = i % len(ring)

    result.triangles.append(Triangle(ring[0], ring[1], ring[2]))
    return result


def _is_ear(ring: list[Point], i: int, boundary_winding: Orientation) -> bool:
    """Check if ring[i] is an ear tip of the remaining polygon."""
    m = len(ring)
    prev, tip, nxt = ring[i - 1], ring[i], ring[(i + 1) % m]

    # Interior angle below 180 degrees, decided exactly on integer coordinates
    if not is_convex(prev, tip, nxt, boundary_winding):
        return False

    for j in range(m):
        if j == i or j == (i - 1) % m or j == (i + 1) % m:
            continue
        if point_in_triangle(ring[j], prev, tip, nxt):
            return False

    return True


def _sorted_pair(p: Point, q: Point) -> tuple[Point, Point]:
    return (p, q) if p <= q else (q, p)


__all__ = ["Triangulation", "triangulate"]
