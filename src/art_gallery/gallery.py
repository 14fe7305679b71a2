"""
Art gallery solver.

Runs the full pipeline on a gallery boundary:
edges -> planar graph -> validated polygon -> triangulation -> guard points.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import PlanarGraph
from .guards import select_guards
from .predicates import orientation
from .triangulation import Triangulation, triangulate
from .types import Color, Edge, EdgeLike, Orientation, Point, Triangle
from .validation import GalleryStructureWarning, validate_boundary, validate_edges


@dataclass
class GallerySolution:
    """
    Camera placements together with the structures that justify them.

    Attributes:
        guards: Chosen camera points, in graph insertion order
        triangulation: Ear-clipping triangulation of the gallery
        coloring: 3-coloring of the triangulation vertices
    """

    guards: list[Point]
    triangulation: Triangulation
    coloring: dict[Point, Color] = field(default_factory=dict)

    @property
    def triangles(self) -> list[Triangle]:
        """Triangles of the triangulation."""
        return self.triangulation.triangles

    @property
    def guard_color(self) -> Color | None:
        """Color class the guards were taken from."""
        if not self.guards:
            return None
        return self.coloring.get(self.guards[0])


class ArtGallery:
    """
    Camera placement for a simple polygon gallery.

    Builds a planar graph from the boundary edges, validates it, triangulates
    it by ear clipping and picks the smallest color class of a 3-coloring as
    camera placements.

    Example:
        gallery = ArtGallery(
            [((0, 0), (4, 0)), ((4, 0), (4, 4)), ((4, 4), (0, 4)), ((0, 4), (0, 0))]
        )
        for guard in gallery.solve():
            print(f"Place security camera at [{guard.x}, {guard.y}]")
    """

    def __init__(
        self,
        edges: Sequence[EdgeLike],
        *,
        validate: bool = True,
    ) -> None:
        """
        Initialize solver with a gallery boundary.

        Args:
            edges: Boundary edges (Edge objects, (src, dest) pairs, or dicts)
            validate: Check that the boundary is a simple closed polygon
                before solving (default True)

        Raises:
            MalformedBoundaryError: If the edge list is empty or has a
                zero-length edge
            InvalidPointError: If an endpoint is not an integer point
        """
        self._edges: list[Edge] = validate_edges(edges)
        self._graph = PlanarGraph(self._edges)
        self._validate: bool = bool(validate)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def edges(self) -> list[Edge]:
        """Get the boundary edges."""
        return list(self._edges)

    @property
    def graph(self) -> PlanarGraph:
        """Get the planar graph of the boundary."""
        return self._graph

    @property
    def validate_input(self) -> bool:
        """Whether solve() validates the boundary first."""
        return self._validate

    @validate_input.setter
    def validate_input(self, value: bool) -> None:
        """Enable or disable boundary validation."""
        self._validate = bool(value)

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate the boundary.

        Called automatically by solve() unless validation is disabled, but can
        be called early for fail-fast behavior.

        Returns:
            self (for chaining)

        Raises:
            MalformedBoundaryError: If the boundary is open or branching
            SelfIntersectingBoundaryError: If boundary edges cross
        """
        validate_boundary(self._graph, strict=True)
        return self

    def is_closed(self) -> bool:
        """Check whether the boundary is a simple closed polygon."""
        return not validate_boundary(self._graph, strict=False)

    def solution(self) -> GallerySolution:
        """
        Run the full pipeline.

        Returns:
            GallerySolution with guards, triangulation, and coloring

        Raises:
            MalformedBoundaryError: If the boundary is open or branching
            SelfIntersectingBoundaryError: If boundary edges cross
            TriangulationError: If triangulation fails on a boundary that
                was not validated
        """
        if self._validate:
            self.validate()
        else:
            warnings.warn(
                "Boundary validation is disabled. "
                "A non-simple boundary may fail during triangulation.",
                GalleryStructureWarning,
                stacklevel=2,
            )

        triangulation = triangulate(self._graph)
        self._warn_colinear(triangulation.boundary)

        guards = select_guards(self._graph, triangulation)
        coloring = {v.src: v.color for v in self._graph.vertices if v.color is not None}
        return GallerySolution(guards=guards, triangulation=triangulation, coloring=coloring)

    def solve(self) -> list[Point]:
        """
        Compute camera placements.

        Returns:
            Guard points, a subset of the boundary vertices, in the order
            the vertices first appear in the edge list
        """
        return self.solution().guards

    def _warn_colinear(self, cycle: list[Point]) -> None:
        n = len(cycle)
        straight = [
            cycle[i]
            for i in range(n)
            if orientation(cycle[i - 1], cycle[i], cycle[(i + 1) % n]) == Orientation.COLINEAR
        ]
        if straight:
            warnings.warn(
                f"Found {len(straight)} boundary vertex(es) with a straight (180 degree) "
                "angle. They are kept as polygon vertices and may be chosen as guards.",
                GalleryStructureWarning,
                stacklevel=3,
            )

    def __repr__(self) -> str:
        return f"ArtGallery(vertices={len(self._graph)}, edges={len(self._edges)})"


def solve(edges: Sequence[EdgeLike]) -> list[Point]:
    """
    Compute camera placements for a gallery boundary.

    Args:
        edges: Boundary edges of a simple polygon

    Returns:
        Guard points
    """
    return ArtGallery(edges).solve()


__all__ = ["ArtGallery", "GallerySolution", "solve"]
