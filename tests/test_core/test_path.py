"""
Unit tests for Path and PathCursor.

Covers the command builder, cached bounding box invalidation, in-place
transforms and equality semantics.
"""

import math

import numpy as np
import pytest

from pathgeom.bounding_box import BoundingBox
from pathgeom.constants import BEZIER_CIRCLE_CONSTANT
from pathgeom.geom_types import Vector2D
from pathgeom.path import (
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    PathCursor,
    QuadraticTo,
)
from pathgeom.transform import Transform


def fresh_bbox(path: Path) -> BoundingBox:
    """Recompute the box from scratch on a cache-free copy."""
    return Path(path.commands()).bounding_box()


@pytest.fixture
def triangle():
    return Path().move_to((0, 0)).line_to((1, 0)).line_to((0.5, 1)).close()


@pytest.fixture
def square():
    return (
        Path()
        .move_to((-1, -1))
        .line_to((1, -1))
        .line_to((1, 1))
        .line_to((-1, 1))
        .close()
    )


class TestPathBuilder:
    """Test cases for appending commands."""

    def test_builder_returns_self(self):
        path = Path()
        assert path.move_to((0, 0)) is path
        assert path.line_to((1, 1)) is path
        assert path.quadratic_to((2, 2), (3, 1)) is path
        assert path.cubic_to((4, 0), (5, 0), (6, 1)) is path
        assert path.close() is path

    def test_commands_in_order(self, triangle):
        assert triangle.commands() == (
            MoveTo(Vector2D(0, 0)),
            LineTo(Vector2D(1, 0)),
            LineTo(Vector2D(0.5, 1)),
            Close(),
        )
        assert len(triangle) == 4
        assert not triangle.is_empty()

    def test_commands_snapshot_is_immutable(self, triangle):
        snapshot = triangle.commands()
        assert isinstance(snapshot, tuple)
        triangle.line_to((9, 9))
        assert len(snapshot) == 4
        assert len(triangle) == 5

    def test_every_command_is_a_path_command(self):
        path = Path().move_to((0, 0)).quadratic_to((1, 1), (2, 0)).cubic_to(
            (3, 1), (4, 1), (5, 0)
        ).close()
        assert all(isinstance(c, PathCommand) for c in path)
        assert isinstance(path[1], QuadraticTo)
        assert isinstance(path[2], CubicTo)

    def test_empty_path(self):
        path = Path.new()
        assert path.is_empty()
        assert len(path) == 0
        assert path.commands() == ()
        assert path.current_point() is None

    def test_with_capacity_has_no_observable_effect(self):
        assert Path.with_capacity(64) == Path()
        assert Path.with_capacity(2).capacity() >= 2

    def test_push_rejects_non_commands(self):
        with pytest.raises(TypeError):
            Path().push((1, 2))

    def test_constructor_rejects_non_commands(self):
        with pytest.raises(TypeError):
            Path(["junk"])
        with pytest.raises(TypeError):
            Path([MoveTo(Vector2D(0, 0)), (1, 1)])

    def test_circle_fits_typical_size(self):
        k = BEZIER_CIRCLE_CONSTANT
        path = Path.with_capacity(6).move_to((1, 0))
        path.cubic_to((1, k), (k, 1), (0, 1))
        path.cubic_to((-k, 1), (-1, k), (-1, 0))
        path.cubic_to((-1, -k), (-k, -1), (0, -1))
        path.cubic_to((k, -1), (1, -k), (1, 0))
        path.close()
        assert len(path) == 6
        assert sum(isinstance(c, CubicTo) for c in path) == 4


class TestPathBoundingBox:
    def test_triangle(self, triangle):
        assert triangle.bounding_box() == BoundingBox.new(Vector2D(0, 0), Vector2D(1, 1))

    def test_empty_path_yields_zero_box(self):
        assert Path().bounding_box() == BoundingBox.zero()

    def test_uses_control_point_hull(self):
        path = Path().move_to((0, 0)).quadratic_to((2, 2), (4, 0))
        bbox = path.bounding_box()
        # The curve only reaches y=1 but the control point is included
        assert bbox.max.y == 2
        assert path.exact_bounding_box().max.y == pytest.approx(1.0)

    def test_cubic_contributes_both_controls(self):
        path = Path().move_to((0, 0)).cubic_to((-1, 5), (6, -2), (3, 1))
        assert path.bounding_box() == BoundingBox.new(Vector2D(-1, -2), Vector2D(6, 5))

    def test_cache_invalidated_by_line_to(self, square):
        cached = square.bounding_box()
        square.line_to((5, 5))
        updated = square.bounding_box()
        assert cached != updated
        assert updated.max == Vector2D(5, 5)

    def test_cache_matches_recomputation_after_each_mutation(self):
        path = Path()
        steps = [
            lambda p: p.move_to((0, 0)),
            lambda p: p.line_to((2, 1)),
            lambda p: p.quadratic_to((3, 4), (1, 2)),
            lambda p: p.cubic_to((-2, 0), (-1, -3), (0, -1)),
            lambda p: p.close(),
            lambda p: p.move_to((10, 10)),
            lambda p: p.apply_transform(Transform.rotate(0.3)),
            lambda p: p.extend(Path().move_to((-20, 0))),
        ]
        for step in steps:
            path.bounding_box()
            step(path)
            assert path.bounding_box() == fresh_bbox(path)
            assert path.bounding_box() == path.bounding_box()

    def test_returned_box_cannot_corrupt_cache(self, triangle):
        bbox = triangle.bounding_box()
        bbox.expand_to_include(Vector2D(100, 100))
        assert triangle.bounding_box() == BoundingBox.new(Vector2D(0, 0), Vector2D(1, 1))

    def test_clear_invalidates(self, triangle):
        triangle.bounding_box()
        triangle.clear()
        assert triangle.bounding_box() == BoundingBox.zero()


class TestPathTransform:
    def test_apply_transform_rewrites_all_points(self):
        path = Path().move_to((1, 0)).quadratic_to((2, 0), (3, 0)).cubic_to(
            (4, 0), (5, 0), (6, 0)
        ).close()
        path.apply_transform(Transform.translate(0, 2))
        for command in path:
            for point in command.points():
                assert point.y == 2
        assert isinstance(path[-1], Close)

    def test_apply_transform_invalidates_cache(self, square):
        before = square.bounding_box()
        square.apply_transform(Transform.scale(2, 3))
        after = square.bounding_box()
        assert before != after
        assert after == BoundingBox.new(Vector2D(-2, -3), Vector2D(2, 3))

    def test_rotation(self, triangle):
        triangle.apply_transform(Transform.rotate(math.pi))
        assert triangle[1].point.x == pytest.approx(-1.0)
        assert triangle[1].point.y == pytest.approx(0.0, abs=1e-12)

    def test_transformed_leaves_original(self, triangle):
        moved = triangle.transformed(Transform.translate(1, 1))
        assert triangle[0] == MoveTo(Vector2D(0, 0))
        assert moved[0] == MoveTo(Vector2D(1, 1))


class TestPathEquality:
    def test_cache_does_not_affect_equality(self, triangle):
        other = Path(triangle.commands())
        triangle.bounding_box()
        assert triangle == other
        assert hash(triangle) == hash(other)

    def test_different_commands_are_not_equal(self, triangle):
        other = triangle.copy().line_to((3, 3))
        assert triangle != other

    def test_copy_is_independent(self, triangle):
        duplicate = triangle.copy()
        duplicate.line_to((2, 2))
        assert len(triangle) == 4


class TestPathQueries:
    def test_current_point_after_close(self, triangle):
        assert triangle.current_point() == Vector2D(0, 0)
        triangle.move_to((4, 4)).line_to((5, 4))
        assert triangle.current_point() == Vector2D(5, 4)

    def test_subpaths(self, triangle):
        triangle.move_to((5, 5)).line_to((6, 6))
        subpaths = triangle.subpaths()
        assert len(subpaths) == 2
        assert len(subpaths[0]) == 4
        assert subpaths[1][0] == MoveTo(Vector2D(5, 5))

    def test_segments_include_closing_line(self, triangle):
        segments = triangle.segments()
        assert len(segments) == 3
        assert segments[-1] == (Vector2D(0.5, 1), Vector2D(0, 0))

    def test_from_points(self):
        path = Path.from_points([(0, 0), (1, 0), (1, 1)], closed=True)
        assert [type(c) for c in path] == [MoveTo, LineTo, LineTo, Close]
        assert Path.from_points([]).is_empty()

    def test_from_points_accepts_numpy_array(self):
        points = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
        path = Path.from_points(points, closed=True)
        assert [type(c) for c in path] == [MoveTo, LineTo, LineTo, Close]
        assert path[2] == LineTo(Vector2D(1, 1))
        assert Path.from_points(np.zeros((0, 2)), closed=True).is_empty()


class TestPathCursor:
    """Test cases for pen position tracking."""

    def test_starts_at_origin(self):
        assert PathCursor().position() == Vector2D.ZERO

    def test_starts_at_end_of_existing_path(self):
        cursor = PathCursor(Path().move_to((5, 5)))
        assert cursor.position() == Vector2D(5, 5)
        cursor.relative_line_to((1, 0))
        assert cursor.path()[-1] == LineTo(Vector2D(6, 5))

    def test_existing_closed_path_resumes_at_subpath_start(self):
        path = Path().move_to((1, 1)).line_to((3, 1)).close()
        assert PathCursor(path).position() == Vector2D(1, 1)

    def test_absolute_moves_update_position(self):
        cursor = PathCursor()
        cursor.move_to((1, 1))
        assert cursor.position() == Vector2D(1, 1)
        cursor.line_to((2, 3))
        assert cursor.current == Vector2D(2, 3)
        cursor.quadratic_to((3, 3), (4, 2))
        assert cursor.position() == Vector2D(4, 2)
        cursor.cubic_to((5, 1), (6, 1), (7, 0))
        assert cursor.position() == Vector2D(7, 0)

    def test_relative_line_to(self):
        cursor = PathCursor().move_to((1, 2))
        result = cursor.relative_line_to((3, -1))
        assert result is cursor
        assert cursor.position() == Vector2D(4, 1)
        assert cursor.path()[-1] == LineTo(Vector2D(4, 1))

    def test_relative_move_to(self):
        cursor = PathCursor().move_to((1, 1)).relative_move_to((1, 1))
        assert cursor.path()[-1] == MoveTo(Vector2D(2, 2))

    def test_close_forwards_to_path(self):
        cursor = PathCursor().move_to((0, 0)).line_to((1, 0)).close()
        assert isinstance(cursor.path()[-1], Close)

    def test_into_path(self):
        cursor = PathCursor().move_to((0, 0)).relative_line_to((2, 0))
        path = cursor.into_path()
        assert path == Path().move_to((0, 0)).line_to((2, 0))
        assert cursor.path().is_empty()
        assert cursor.position() == Vector2D.ZERO
