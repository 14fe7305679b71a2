"""Tests for gallery solution metrics."""

import pytest

from art_gallery import (
    ArtGallery,
    Point,
    Triangle,
    guard_bound,
    polygon_area,
    reflex_vertices,
    solution_summary,
    uncovered_triangles,
)


def _edges(points):
    return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
L_SHAPE = [Point(0, 0), Point(6, 0), Point(6, 2), Point(2, 2), Point(2, 6), Point(0, 6)]


class TestPolygonArea:
    """Tests for enclosed area."""

    def test_square(self):
        assert polygon_area(SQUARE) == pytest.approx(16.0)

    def test_clockwise_is_positive(self):
        """Area is unsigned."""
        assert polygon_area(list(reversed(SQUARE))) == pytest.approx(16.0)

    def test_l_shape(self):
        assert polygon_area(L_SHAPE) == pytest.approx(20.0)


class TestReflexVertices:
    """Tests for reflex vertex detection."""

    def test_convex_polygon(self):
        """Convex polygons have none."""
        assert reflex_vertices(SQUARE) == []

    def test_l_shape(self):
        """The inner corner is reflex."""
        assert reflex_vertices(L_SHAPE) == [Point(2, 2)]

    def test_clockwise_l_shape(self):
        """Winding does not change the answer."""
        assert reflex_vertices(list(reversed(L_SHAPE))) == [Point(2, 2)]

    def test_straight_vertex_not_reflex(self):
        """180 degree vertices are not reflex."""
        boundary = [Point(0, 0), Point(2, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
        assert reflex_vertices(boundary) == []

    def test_too_few_points(self):
        assert reflex_vertices([Point(0, 0), Point(1, 0)]) == []


class TestGuardBound:
    """Tests for the floor(n / 3) bound."""

    @pytest.mark.parametrize("n,expected", [(3, 1), (4, 1), (5, 1), (6, 2), (12, 4)])
    def test_values(self, n, expected):
        assert guard_bound(n) == expected


class TestUncoveredTriangles:
    """Tests for the coverage check."""

    def test_all_covered(self):
        """A shared corner covers both triangles."""
        triangles = [
            Triangle(Point(0, 4), Point(0, 0), Point(4, 0)),
            Triangle(Point(4, 0), Point(4, 4), Point(0, 4)),
        ]
        assert uncovered_triangles(triangles, [(4, 0)]) == []

    def test_uncovered(self):
        """Triangles without a guard corner are listed."""
        triangles = [
            Triangle(Point(0, 4), Point(0, 0), Point(4, 0)),
            Triangle(Point(4, 0), Point(4, 4), Point(0, 4)),
        ]
        assert uncovered_triangles(triangles, [Point(0, 0)]) == [triangles[1]]


class TestSolutionSummary:
    """Tests for the combined summary."""

    def test_l_shape(self):
        """Summary of an L-shaped room."""
        solution = ArtGallery(_edges(L_SHAPE)).solution()
        summary = solution_summary(solution)
        assert summary == {
            "vertices": 6,
            "triangles": 4,
            "diagonals": 3,
            "guards": 1,
            "guard_bound": 2,
            "area": pytest.approx(20.0),
            "reflex_vertices": 1,
            "uncovered_triangles": 0,
        }

    def test_guards_within_bound(self):
        """Guard count never exceeds the bound."""
        summary = solution_summary(ArtGallery(_edges(SQUARE)).solution())
        assert summary["guards"] <= summary["guard_bound"]
