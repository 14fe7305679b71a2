"""
Common types for the art gallery solver.

This module provides the value types shared by every stage of the pipeline:
- Point: Integer boundary coordinate
- Edge: Directed boundary segment between two points
- Vertex: Boundary point with its adjacency and color tag
- Triangle: One cell of a polygon triangulation
- Orientation: Result of the three-point orientation test
- Color: Palette used by the guard selector's 3-coloring
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, NamedTuple, Optional, Sequence, Union


class Orientation(IntEnum):
    """
    Turn direction of an ordered point triple.

    - COLINEAR: The three points lie on one line
    - CLOCKWISE: Right turn
    - COUNTERCLOCKWISE: Left turn
    """

    COLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2

    def opposite(self) -> Orientation:
        """Get the orientation of the mirrored turn."""
        opposites = {
            Orientation.COLINEAR: Orientation.COLINEAR,
            Orientation.CLOCKWISE: Orientation.COUNTERCLOCKWISE,
            Orientation.COUNTERCLOCKWISE: Orientation.CLOCKWISE,
        }
        return opposites[self]


class Color(Enum):
    """Palette for the guard selector. Uncolored vertices carry None instead."""

    RED = 1
    YELLOW = 2
    BLUE = 3


PALETTE: tuple[Color, Color, Color] = (Color.RED, Color.YELLOW, Color.BLUE)


class Point(NamedTuple):
    """
    Boundary point with integer coordinates.

    Equality is exact coordinate equality, so a plain ``(x, y)`` tuple
    compares equal to the Point with the same coordinates.
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"{{ {self.x} , {self.y} }}"


class Edge(NamedTuple):
    """
    Boundary segment directed from src to dest.

    Equality requires matching src and dest in that order.
    """

    src: Point
    dest: Point

    def reversed(self) -> Edge:
        """Get the same segment directed from dest to src."""
        return Edge(self.dest, self.src)

    def __str__(self) -> str:
        return f"{self.src} -- {self.dest}"


@dataclass
class Vertex:
    """
    Boundary point plus its adjacency.

    Attributes:
        src: The point this vertex sits on
        dest: Adjacent points, in the order they were linked
        color: Palette color assigned during guard selection, None if uncolored
    """

    src: Point
    dest: list[Point] = field(default_factory=list)
    color: Optional[Color] = None

    @property
    def degree(self) -> int:
        """Number of adjacency entries."""
        return len(self.dest)

    def __str__(self) -> str:
        neighbors = "".join(f"{p} " for p in self.dest)
        return f"{self.src} --> {neighbors}"


class Triangle(NamedTuple):
    """One triangulation cell, corners in boundary winding order."""

    a: Point
    b: Point
    c: Point

    def edges(self) -> list[tuple[Point, Point]]:
        """Get the three sides as undirected (sorted) point pairs."""
        return [
            _undirected(self.a, self.b),
            _undirected(self.b, self.c),
            _undirected(self.c, self.a),
        ]

    def area(self) -> float:
        """Unsigned area."""
        cross = (self.b.x - self.a.x) * (self.c.y - self.a.y) - (self.b.y - self.a.y) * (
            self.c.x - self.a.x
        )
        return abs(cross) / 2.0


def _undirected(p: Point, q: Point) -> tuple[Point, Point]:
    return (p, q) if p <= q else (q, p)


# Type aliases for Pythonic API
PointLike = Union[Point, Sequence[int], Any]
"""Input type for points: Point objects, (x, y) tuples, or objects with x/y."""

EdgeLike = Union[Edge, Sequence[PointLike], dict[str, PointLike], Any]
"""Input type for edges: Edge objects, (src, dest) pairs, or dicts with src/dest."""


__all__ = [
    "Orientation",
    "Color",
    "PALETTE",
    "Point",
    "Edge",
    "Vertex",
    "Triangle",
    "PointLike",
    "EdgeLike",
]
