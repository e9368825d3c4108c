"""Tests for BoundingBox construction, queries and set operations."""

import math

import pytest

from pathgeom.bounding_box import BoundingBox
from pathgeom.errors import InvalidBoundingBoxError
from pathgeom.geom_types import Vector2D


def box(x0, y0, x1, y1) -> BoundingBox:
    return BoundingBox.new(Vector2D(x0, y0), Vector2D(x1, y1))


class TestBoundingBoxConstruction:
    def test_rejects_inverted_x(self):
        with pytest.raises(InvalidBoundingBoxError, match="min.x must be <= max.x"):
            box(2, 0, 1, 1)

    def test_rejects_inverted_y(self):
        with pytest.raises(ValueError, match="min.y must be <= max.y"):
            box(0, 2, 1, 1)

    def test_from_points(self):
        points = [Vector2D(1, 5), Vector2D(-2, 3), Vector2D(4, -1)]
        assert BoundingBox.from_points(points) == box(-2, -1, 4, 5)

    def test_from_points_accepts_generator(self):
        result = BoundingBox.from_points(Vector2D(i, -i) for i in range(3))
        assert result == box(0, -2, 2, 0)

    def test_from_points_empty_is_none(self):
        assert BoundingBox.from_points([]) is None

    def test_zero_and_infinite(self):
        zero = BoundingBox.zero()
        assert zero.min == Vector2D.ZERO and zero.max == Vector2D.ZERO
        assert zero.is_empty()

        inf = BoundingBox.infinite()
        assert inf.min.x == -math.inf and inf.max.y == math.inf
        assert inf.contains_point(Vector2D(1e300, -1e300))


class TestBoundingBoxQueries:
    @pytest.fixture
    def rect(self):
        return box(1, 2, 5, 4)

    def test_dimensions(self, rect):
        assert rect.width() == 4
        assert rect.height() == 2
        assert rect.size() == Vector2D(4, 2)
        assert rect.center() == Vector2D(3, 3)
        assert rect.area() == 8
        assert rect.perimeter() == 12

    def test_is_empty_requires_both_dimensions_zero(self):
        assert box(1, 1, 1, 1).is_empty()
        assert not box(0, 0, 1, 0).is_empty()
        assert not box(0, 0, 0, 1).is_empty()

    def test_contains_point_is_boundary_inclusive(self, rect):
        assert rect.contains_point(Vector2D(1, 2))
        assert rect.contains_point(Vector2D(5, 4))
        assert rect.contains_point(Vector2D(3, 3))
        assert not rect.contains_point(Vector2D(5.01, 3))

    def test_contains_bbox(self, rect):
        assert rect.contains_bbox(box(2, 2, 5, 3))
        assert rect.contains_bbox(rect)
        assert not rect.contains_bbox(box(0, 2, 3, 3))


class TestBoundingBoxSetOperations:
    def test_intersection_of_overlapping_boxes(self):
        result = box(0, 0, 2, 2).intersection(box(1, 1, 3, 3))
        assert result == box(1, 1, 2, 2)

    def test_intersection_of_disjoint_boxes_is_none(self):
        assert box(0, 0, 2, 2).intersection(box(3, 3, 4, 4)) is None

    def test_touching_boxes_intersect(self):
        a = box(0, 0, 1, 1)
        b = box(1, 0, 2, 1)
        assert a.intersects(b)
        shared = a.intersection(b)
        assert shared == box(1, 0, 1, 1)

    def test_union(self):
        assert box(0, 0, 1, 1).union(box(2, -1, 3, 0.5)) == box(0, -1, 3, 1)


class TestBoundingBoxMutation:
    def test_expand_to_include_mutates_in_place(self):
        b = box(0, 0, 1, 1)
        assert b.expand_to_include(Vector2D(3, -2)) is None
        assert b == box(0, -2, 3, 1)

    def test_expand_by_margin_returns_new_box(self):
        b = box(0, 0, 2, 2)
        grown = b.expand_by_margin(0.5)
        assert grown == box(-0.5, -0.5, 2.5, 2.5)
        assert b == box(0, 0, 2, 2)

    def test_translate(self):
        assert box(0, 0, 1, 1).translate(Vector2D(2, 3)) == box(2, 3, 3, 4)

    def test_scale_keeps_center(self):
        b = box(1, 1, 3, 5)
        scaled = b.scale(2.0)
        assert scaled.center() == b.center()
        assert scaled.width() == pytest.approx(4.0)
        assert scaled.height() == pytest.approx(8.0)

    def test_copy_is_independent(self):
        b = box(0, 0, 1, 1)
        c = b.copy()
        c.expand_to_include(Vector2D(5, 5))
        assert b == box(0, 0, 1, 1)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(box(0, 0, 1, 1))
