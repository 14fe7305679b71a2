"""
Geometric predicates.

Stateless functions over boundary points:
- Orientation test for ordered point triples
- Segment intersection (shared endpoints are not crossings)
- Interior angle at a boundary vertex
- Point-in-polygon and point-in-triangle tests
- Signed area and winding of a boundary

Points may be Point objects or plain (x, y) tuples. Integer inputs keep the
orientation and intersection tests exact.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .types import Orientation, PointLike


def orientation(p: PointLike, q: PointLike, r: PointLike) -> Orientation:
    """
    Classify the turn p -> q -> r.

    Args:
        p: First point
        q: Middle point
        r: Last point

    Returns:
        COLINEAR if the cross product is zero, CLOCKWISE if it is positive,
        COUNTERCLOCKWISE otherwise.
    """
    px, py = p
    qx, qy = q
    rx, ry = r
    val = (qy - py) * (rx - qx) - (qx - px) * (ry - qy)
    if val == 0:
        return Orientation.COLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def on_segment(a: PointLike, b: PointLike, p: PointLike) -> bool:
    """
    Check whether p lies in the bounding box of segment a-b.

    Only meaningful once p is known to be colinear with a and b.
    """
    ax, ay = a
    bx, by = b
    px, py = p
    return min(ax, bx) <= px <= max(ax, bx) and min(ay, by) <= py <= max(ay, by)


def segments_intersect(a1: PointLike, b1: PointLike, a2: PointLike, b2: PointLike) -> bool:
    """
    Check if segment a1-b1 crosses or touches segment a2-b2.

    Two segments that share exactly one endpoint and otherwise diverge are
    not intersecting. Sharing an endpoint while running along each other
    (a colinear overlap) is.

    Args:
        a1, b1: Endpoints of the first segment
        a2, b2: Endpoints of the second segment

    Returns:
        True if the segments have a point in common other than a lone
        shared endpoint.
    """
    first = {tuple(a1), tuple(b1)}
    second = {tuple(a2), tuple(b2)}
    shared = first & second

    if len(shared) == 2:
        # Same segment, possibly reversed
        return True
    if shared:
        (s,) = shared
        u = next(iter(first - shared), s)
        v = next(iter(second - shared), s)
        if orientation(s, u, v) != Orientation.COLINEAR:
            return False
        # Colinear: they overlap iff both leave s in the same direction
        return (u[0] - s[0]) * (v[0] - s[0]) + (u[1] - s[1]) * (v[1] - s[1]) > 0

    o1 = orientation(a1, b1, a2)
    o2 = orientation(a1, b1, b2)
    o3 = orientation(a2, b2, a1)
    o4 = orientation(a2, b2, b1)

    if o1 != o2 and o3 != o4:
        return True

    # Colinear special cases
    if o1 == Orientation.COLINEAR and on_segment(a1, b1, a2):
        return True
    if o2 == Orientation.COLINEAR and on_segment(a1, b1, b2):
        return True
    if o3 == Orientation.COLINEAR and on_segment(a2, b2, a1):
        return True
    if o4 == Orientation.COLINEAR and on_segment(a2, b2, b1):
        return True

    return False


def signed_area(boundary: Sequence[PointLike]) -> float:
    """Shoelace area of a closed boundary, positive when counter-clockwise."""
    n = len(boundary)
    area2 = 0
    for i in range(n):
        x1, y1 = boundary[i]
        x2, y2 = boundary[(i + 1) % n]
        area2 += x1 * y2 - x2 * y1
    return area2 / 2.0


def winding(boundary: Sequence[PointLike]) -> Orientation:
    """
    Get the traversal direction of a closed boundary.

    Returns:
        COUNTERCLOCKWISE or CLOCKWISE, or COLINEAR for a zero-area boundary.
    """
    area = signed_area(boundary)
    if area > 0:
        return Orientation.COUNTERCLOCKWISE
    if area < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLINEAR


def is_convex(a: PointLike, b: PointLike, c: PointLike, boundary_winding: Orientation) -> bool:
    """Check if b is a strictly convex corner of a boundary with the given winding."""
    return orientation(a, b, c) == boundary_winding


def interior_angle(
    a: PointLike,
    b: PointLike,
    c: PointLike,
    boundary: Optional[Sequence[PointLike]] = None,
    *,
    boundary_winding: Optional[Orientation] = None,
) -> float:
    """
    Compute the polygon's interior angle at vertex b.

    The unsigned angle between rays b->a and b->c comes from the dot product
    and arccosine. It is the interior angle when the turn a -> b -> c agrees
    with the boundary winding; otherwise the vertex is reflex and the
    interior angle is 360 minus it.

    Args:
        a: Previous boundary vertex
        b: Vertex to measure at
        c: Next boundary vertex
        boundary: Ordered boundary vertices, used to find the winding
        boundary_winding: Precomputed winding (skips the area computation)

    Returns:
        Interior angle in degrees, in [0, 360).

    Raises:
        ValueError: If a or c coincides with b, or no winding can be derived.
    """
    if boundary_winding is None:
        if boundary is None:
            raise ValueError("interior_angle needs either boundary or boundary_winding")
        boundary_winding = winding(boundary)

    ax, ay = a
    bx, by = b
    cx, cy = c
    v1 = (ax - bx, ay - by)
    v2 = (cx - bx, cy - by)
    len1 = math.hypot(*v1)
    len2 = math.hypot(*v2)
    if len1 == 0 or len2 == 0:
        raise ValueError(f"Degenerate angle at ({bx}, {by}): zero-length ray")

    cos_theta = (v1[0] * v2[0] + v1[1] * v2[1]) / (len1 * len2)
    theta = math.degrees(math.acos(max(-1.0, min(1.0, cos_theta))))

    turn = orientation(a, b, c)
    if turn == Orientation.COLINEAR or turn == boundary_winding:
        return theta
    return 360.0 - theta


def point_in_polygon(point: Sequence[float], boundary: Sequence[PointLike]) -> bool:
    """
    Horizontal ray-casting parity test.

    Args:
        point: Query point (may have fractional coordinates)
        boundary: Ordered boundary vertices

    Returns:
        True iff the point is strictly inside. Points on the boundary are
        outside.
    """
    px, py = point
    n = len(boundary)
    inside = False

    for i in range(n):
        x1, y1 = boundary[i]
        x2, y2 = boundary[(i + 1) % n]

        # On the boundary
        if (x2 - x1) * (py - y1) == (y2 - y1) * (px - x1) and on_segment(
            (x1, y1), (x2, y2), (px, py)
        ):
            return False

        if (y1 > py) != (y2 > py):
            x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
            if px < x_cross:
                inside = not inside

    return inside


def point_in_triangle(p: PointLike, a: PointLike, b: PointLike, c: PointLike) -> bool:
    """Check if p lies inside or on triangle abc (either winding)."""
    turns = {orientation(a, b, p), orientation(b, c, p), orientation(c, a, p)}
    return not (Orientation.CLOCKWISE in turns and Orientation.COUNTERCLOCKWISE in turns)


__all__ = [
    "orientation",
    "on_segment",
    "segments_intersect",
    "signed_area",
    "winding",
    "is_convex",
    "interior_angle",
    "point_in_polygon",
    "point_in_triangle",
]
