"""Tests for geometric predicates."""

import pytest

from art_gallery import Orientation, Point
from art_gallery.predicates import (
    interior_angle,
    is_convex,
    on_segment,
    orientation,
    point_in_polygon,
    point_in_triangle,
    segments_intersect,
    signed_area,
    winding,
)

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]
L_SHAPE = [(0, 0), (6, 0), (6, 2), (2, 2), (2, 6), (0, 6)]

TRIPLES = [
    ((0, 0), (1, 0), (1, 1)),
    ((0, 0), (1, 1), (1, 0)),
    ((0, 0), (1, 1), (2, 2)),
    ((3, -2), (7, 5), (-1, 4)),
    ((5, 5), (5, 5), (1, 2)),
    ((-3, 0), (0, 0), (3, 0)),
]


class TestOrientation:
    """Tests for the three-point orientation test."""

    def test_left_turn_is_counterclockwise(self):
        """Turning left gives COUNTERCLOCKWISE."""
        assert orientation((0, 0), (1, 0), (1, 1)) == Orientation.COUNTERCLOCKWISE

    def test_right_turn_is_clockwise(self):
        """Turning right gives CLOCKWISE."""
        assert orientation((0, 0), (1, 1), (1, 0)) == Orientation.CLOCKWISE

    def test_colinear(self):
        """Points on one line give COLINEAR."""
        assert orientation((0, 0), (1, 1), (2, 2)) == Orientation.COLINEAR

    def test_accepts_point_objects(self):
        """Point objects and tuples are interchangeable."""
        assert orientation(Point(0, 0), Point(1, 0), (1, 1)) == Orientation.COUNTERCLOCKWISE

    @pytest.mark.parametrize("p,q,r", TRIPLES)
    def test_colinear_is_symmetric(self, p, q, r):
        """Reversing the triple keeps COLINEAR results COLINEAR."""
        forward = orientation(p, q, r) == Orientation.COLINEAR
        backward = orientation(r, q, p) == Orientation.COLINEAR
        assert forward == backward

    @pytest.mark.parametrize("p,q,r", TRIPLES)
    def test_swapping_q_and_r_flips_turn(self, p, q, r):
        """Swapping the last two points mirrors the turn."""
        assert orientation(p, r, q) == orientation(p, q, r).opposite()

    def test_opposite_of_colinear(self):
        """COLINEAR is its own opposite."""
        assert Orientation.COLINEAR.opposite() == Orientation.COLINEAR


class TestOnSegment:
    """Tests for the colinear bounding-box test."""

    def test_midpoint(self):
        """Midpoint lies on segment."""
        assert on_segment((0, 0), (4, 4), (2, 2))

    def test_beyond_end(self):
        """Point past an endpoint is not on segment."""
        assert not on_segment((0, 0), (4, 4), (5, 5))

    def test_endpoint_included(self):
        """Endpoints are inside the bounding box."""
        assert on_segment((0, 0), (4, 4), (4, 4))


class TestSegmentsIntersect:
    """Tests for segment intersection."""

    def test_proper_crossing(self):
        """Diagonals of a square cross."""
        assert segments_intersect((0, 0), (4, 4), (0, 4), (4, 0))

    def test_shared_endpoint_not_intersecting(self):
        """Consecutive polygon edges sharing one endpoint do not intersect."""
        assert not segments_intersect((0, 0), (4, 0), (4, 0), (4, 4))

    def test_shared_endpoint_any_order(self):
        """Shared endpoint is recognized regardless of segment direction."""
        assert not segments_intersect((4, 0), (0, 0), (4, 4), (4, 0))

    def test_shared_endpoint_colinear_continuation(self):
        """Colinear segments meeting end to end do not intersect."""
        assert not segments_intersect((0, 0), (2, 0), (2, 0), (4, 0))

    def test_shared_endpoint_colinear_overlap(self):
        """Colinear segments leaving a shared endpoint the same way overlap."""
        assert segments_intersect((0, 0), (4, 0), (0, 0), (2, 0))

    def test_identical_segments(self):
        """A segment intersects itself, in either direction."""
        assert segments_intersect((0, 0), (4, 0), (4, 0), (0, 0))

    def test_t_junction_touch(self):
        """An endpoint touching the middle of another segment intersects."""
        assert segments_intersect((0, 0), (4, 0), (2, 0), (2, 3))

    def test_parallel_disjoint(self):
        """Parallel segments do not intersect."""
        assert not segments_intersect((0, 0), (4, 0), (0, 1), (4, 1))

    def test_colinear_disjoint(self):
        """Colinear segments with a gap do not intersect."""
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))

    def test_colinear_overlap(self):
        """Overlapping colinear segments intersect."""
        assert segments_intersect((0, 0), (3, 0), (1, 0), (5, 0))

    def test_far_apart(self):
        """Segments far apart do not intersect."""
        assert not segments_intersect((0, 0), (1, 1), (10, 10), (11, 15))


class TestAreaAndWinding:
    """Tests for signed area and winding."""

    def test_counterclockwise_area_positive(self):
        """Counter-clockwise square has positive area."""
        assert signed_area(SQUARE) == 16.0

    def test_clockwise_area_negative(self):
        """Clockwise square has negative area."""
        assert signed_area(list(reversed(SQUARE))) == -16.0

    def test_winding(self):
        """Winding follows the sign of the area."""
        assert winding(SQUARE) == Orientation.COUNTERCLOCKWISE
        assert winding(list(reversed(SQUARE))) == Orientation.CLOCKWISE

    def test_degenerate_winding(self):
        """Zero-area boundary has COLINEAR winding."""
        assert winding([(0, 0), (2, 0), (4, 0)]) == Orientation.COLINEAR

    def test_is_convex(self):
        """Convexity depends on the boundary winding."""
        assert is_convex((0, 0), (4, 0), (4, 4), Orientation.COUNTERCLOCKWISE)
        assert not is_convex((0, 0), (4, 0), (4, 4), Orientation.CLOCKWISE)


class TestInteriorAngle:
    """Tests for interior angle computation."""

    def test_square_corner(self):
        """Square corners are right angles."""
        assert interior_angle((0, 0), (4, 0), (4, 4), SQUARE) == pytest.approx(90.0)

    def test_reflex_corner(self):
        """The inner corner of an L shape is reflex."""
        assert interior_angle((6, 2), (2, 2), (2, 6), L_SHAPE) == pytest.approx(270.0)

    def test_clockwise_boundary(self):
        """Clockwise boundaries measure the same interior angles."""
        cw = list(reversed(SQUARE))
        assert interior_angle((4, 4), (4, 0), (0, 0), cw) == pytest.approx(90.0)

    def test_straight_vertex(self):
        """A vertex in the middle of a straight run measures 180 degrees."""
        angle = interior_angle(
            (0, 0), (2, 0), (4, 0), boundary_winding=Orientation.COUNTERCLOCKWISE
        )
        assert angle == pytest.approx(180.0)

    def test_acute_corner(self):
        """Triangle apex angle."""
        angle = interior_angle(
            (4, 0), (0, 0), (0, 4), boundary_winding=Orientation.CLOCKWISE
        )
        assert angle == pytest.approx(90.0)
        angle = interior_angle((2, 0), (0, 0), (2, 2), boundary_winding=Orientation.CLOCKWISE)
        assert angle == pytest.approx(45.0)

    def test_zero_length_ray_raises(self):
        """Coincident points raise ValueError."""
        with pytest.raises(ValueError, match="zero-length"):
            interior_angle((0, 0), (0, 0), (1, 1), SQUARE)

    def test_requires_boundary_or_winding(self):
        """Missing winding information raises ValueError."""
        with pytest.raises(ValueError, match="boundary"):
            interior_angle((0, 0), (4, 0), (4, 4))


class TestPointInPolygon:
    """Tests for ray-casting point-in-polygon."""

    def test_center_inside(self):
        """Square center is inside."""
        assert point_in_polygon((2, 2), SQUARE)

    def test_outside(self):
        """Point beyond the square is outside."""
        assert not point_in_polygon((5, 5), SQUARE)

    def test_on_edge_not_interior(self):
        """Boundary points are not strictly interior."""
        assert not point_in_polygon((4, 2), SQUARE)

    def test_vertex_not_interior(self):
        """Vertices are not strictly interior."""
        assert not point_in_polygon((0, 0), SQUARE)

    def test_fractional_point(self):
        """Fractional query points are supported."""
        assert point_in_polygon((1.5, 1.5), L_SHAPE)

    def test_concave_notch(self):
        """Point in the notch of an L shape is outside."""
        assert not point_in_polygon((4, 4), L_SHAPE)
        assert point_in_polygon((1, 5), L_SHAPE)


class TestPointInTriangle:
    """Tests for the closed point-in-triangle test."""

    def test_inside(self):
        """Interior point is inside."""
        assert point_in_triangle((1, 1), (0, 0), (4, 0), (0, 4))

    def test_on_edge(self):
        """Points on a side count as inside."""
        assert point_in_triangle((2, 2), (0, 0), (4, 0), (0, 4))

    def test_outside(self):
        """Point beyond the hypotenuse is outside."""
        assert not point_in_triangle((3, 3), (0, 0), (4, 0), (0, 4))

    def test_either_winding(self):
        """Triangle winding does not matter."""
        assert point_in_triangle((1, 1), (0, 0), (0, 4), (4, 0))
