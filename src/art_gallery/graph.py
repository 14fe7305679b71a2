"""Planar adjacency structure over gallery boundary vertices."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Sequence

from .types import Edge, EdgeLike, Point, PointLike, Vertex
from .validation import validate_edge, validate_point


class PlanarGraph:
    """
    Adjacency lists keyed by boundary point.

    Boundary edges are directed in the input but undirected for adjacency:
    linking an edge records it on both endpoints. For a simple closed polygon
    every vertex ends up with exactly two neighbors.

    The graph is built once and then read-only, apart from the color tag on
    each vertex, which the guard selector writes.

    Example:
        graph = PlanarGraph([((0, 0), (4, 0)), ((4, 0), (4, 4)),
                             ((4, 4), (0, 4)), ((0, 4), (0, 0))])
        print(graph)
    """

    __slots__ = ("_adjacency", "_edges")

    def __init__(self, edges: Optional[Sequence[EdgeLike]] = None) -> None:
        """
        Build a graph by linking each edge in order.

        Args:
            edges: Boundary edges (Edge objects, (src, dest) pairs, or dicts)
        """
        self._adjacency: dict[Point, Vertex] = {}
        self._edges: list[Edge] = []
        for edge in edges or ():
            self.link_vertices(edge)

    @classmethod
    def from_edges(cls, edges: Sequence[EdgeLike]) -> PlanarGraph:
        """Build a graph from an ordered edge list."""
        return cls(edges)

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> PlanarGraph:
        """Build the closed boundary through a point sequence (last joins first)."""
        pts = [validate_point(p) for p in points]
        n = len(pts)
        return cls([Edge(pts[i], pts[(i + 1) % n]) for i in range(n)])

    # -------------------------------------------------------------------------
    # Lookup and linking
    # -------------------------------------------------------------------------

    def find_vertex(self, point: PointLike) -> Optional[Vertex]:
        """
        Look up the vertex at a point.

        Returns:
            The Vertex, or None if no vertex sits at that point yet.
        """
        return self._adjacency.get(validate_point(point))

    def link_vertices(self, edge: EdgeLike) -> None:
        """
        Record a boundary edge on both of its endpoints.

        Appends dest to the adjacency of src, creating the vertex if absent,
        then does the same for the reverse direction.
        """
        edge = validate_edge(edge)
        self._edges.append(edge)
        self._append(edge.src, edge.dest)
        self._append(edge.dest, edge.src)

    def _append(self, src: Point, dest: Point) -> None:
        vertex = self._adjacency.get(src)
        if vertex is None:
            vertex = Vertex(src)
            self._adjacency[src] = vertex
        vertex.dest.append(dest)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def vertices(self) -> list[Vertex]:
        """Vertices in insertion order."""
        return list(self._adjacency.values())

    @property
    def points(self) -> list[Point]:
        """Vertex points in insertion order."""
        return list(self._adjacency)

    @property
    def input_edges(self) -> list[Edge]:
        """Edges as they were linked."""
        return list(self._edges)

    def degree(self, point: PointLike) -> int:
        """Number of adjacency entries at a point (0 if absent)."""
        vertex = self.find_vertex(point)
        return vertex.degree if vertex is not None else 0

    def edges(self) -> list[tuple[Point, Point]]:
        """Unique undirected boundary edges, in first-seen order."""
        seen: set[frozenset[Point]] = set()
        result: list[tuple[Point, Point]] = []
        for vertex in self._adjacency.values():
            for dest in vertex.dest:
                key = frozenset((vertex.src, dest))
                if key not in seen:
                    seen.add(key)
                    result.append((vertex.src, dest))
        return result

    def boundary_cycle(self) -> Optional[list[Point]]:
        """
        Walk the single boundary cycle.

        Starts at the first inserted vertex and follows its first neighbor.

        Returns:
            Points in cycle order, or None if the adjacency is not exactly one
            cycle of at least 3 vertices through every vertex.
        """
        n = len(self._adjacency)
        if n < 3:
            return None

        start = next(iter(self._adjacency))
        cycle: list[Point] = []
        prev: Optional[Point] = None
        cur = start

        while True:
            vertex = self._adjacency.get(cur)
            if vertex is None or vertex.degree != 2:
                return None
            first, second = vertex.dest
            if first == second:
                # Doubled edge or zero-length edge
                return None
            cycle.append(cur)
            if len(cycle) > n:
                return None
            prev, cur = cur, (second if first == prev else first)
            if cur == start:
                break

        return cycle if len(cycle) == n else None

    def reset_colors(self) -> None:
        """Clear the color tag on every vertex."""
        for vertex in self._adjacency.values():
            vertex.color = None

    # -------------------------------------------------------------------------
    # Container protocol and diagnostics
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, point: object) -> bool:
        return point in self._adjacency

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency.values())

    def write(self, stream: IO[str]) -> None:
        """Stream the diagnostic rendering, one vertex per line."""
        for vertex in self._adjacency.values():
            stream.write(str(vertex))
            stream.write("\n")

    def __str__(self) -> str:
        return "".join(f"{vertex}\n" for vertex in self._adjacency.values())

    def __repr__(self) -> str:
        return f"PlanarGraph(vertices={len(self._adjacency)}, edges={len(self._edges)})"


__all__ = ["PlanarGraph"]
