"""Tests for the affine Transform algebra."""

import copy
import math

import numpy as np
import pytest

from pathgeom.angle import Degrees
from pathgeom.geom_types import Vector2D
from pathgeom.transform import Transform


def assert_vec_close(a: Vector2D, b: Vector2D, tol: float = 1e-10):
    assert abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol, f"{a} != {b}"


class TestTransformConstructors:
    def test_identity(self):
        v = Vector2D(3, -7)
        assert Transform.identity().apply(v) == v
        assert Transform.identity().is_identity()

    def test_translate(self):
        assert Transform.translate(2, 3).apply(Vector2D(1, 1)) == Vector2D(3, 4)

    def test_scale(self):
        assert Transform.scale(2, -1).apply(Vector2D(3, 4)) == Vector2D(6, -4)

    def test_rotate_counter_clockwise(self):
        result = Transform.rotate(math.pi / 2).apply(Vector2D(1, 0))
        assert_vec_close(result, Vector2D(0, 1))

    def test_rotate_accepts_degrees(self):
        result = Transform.rotate(Degrees(180)).apply(Vector2D(1, 0))
        assert_vec_close(result, Vector2D(-1, 0))

    def test_immutable(self):
        t = Transform.translate(1, 2)
        seen = {t}
        with pytest.raises(AttributeError):
            t.tx = 99.0
        assert t.tx == 1.0
        assert Transform.translate(1, 2) in seen

    def test_deepcopy(self):
        t = Transform(1, 2, 3, 4, 5, 6)
        assert copy.deepcopy(t) == t


class TestTransformComposition:
    def test_translate_after_rotate(self):
        """translate(5, 0) * rotate(pi/2) maps (1, 0) to (5, 1)."""
        t = Transform.translate(5, 0) * Transform.rotate(math.pi / 2)
        assert_vec_close(t.apply(Vector2D(1, 0)), Vector2D(5, 1))

    @pytest.mark.parametrize(
        "s, o",
        [
            (Transform.translate(1, 2), Transform.scale(3, -2)),
            (Transform.rotate(0.3), Transform.translate(-4, 5)),
            (Transform(1, 2, 3, 4, 5, 6), Transform(-1, 0.5, 2, 0.25, -3, 7)),
        ],
    )
    def test_composition_matches_sequential_application(self, s, o):
        for v in [Vector2D(0, 0), Vector2D(1, -2), Vector2D(-3.5, 7.25)]:
            assert_vec_close((s * o).apply(v), s.apply(o.apply(v)), tol=1e-9)

    def test_not_commutative(self):
        s = Transform.translate(5, 0)
        r = Transform.rotate(math.pi / 2)
        v = Vector2D(1, 0)
        assert (s * r).apply(v) != (r * s).apply(v)

    def test_associative(self):
        a = Transform.rotate(0.7)
        b = Transform.scale(2, 3)
        c = Transform.translate(-1, 4)
        v = Vector2D(0.5, -1.5)
        assert_vec_close(((a * b) * c).apply(v), (a * (b * c)).apply(v), tol=1e-9)

    def test_matmul_alias_and_then(self):
        s = Transform.translate(1, 0)
        o = Transform.scale(2, 2)
        assert (s @ o) == (s * o)
        assert o.then(s) == s * o


class TestTransformMatrix:
    def test_to_matrix_round_trip(self):
        t = Transform(1, 2, 3, 4, 5, 6)
        m = t.to_matrix()
        assert m.shape == (3, 3)
        np.testing.assert_allclose(m @ np.array([1.0, 1.0, 1.0]), [9.0, 12.0, 1.0])
        assert Transform.from_matrix(m) == t

    def test_from_matrix_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Transform.from_matrix(np.eye(4))

    def test_apply_many_matches_apply(self):
        t = Transform.translate(1, 1) * Transform.rotate(0.5)
        pts = np.array([[0.0, 0.0], [1.0, 2.0], [-3.0, 0.5]])
        result = t.apply_many(pts)
        for row, (x, y) in zip(result, pts):
            expected = t.apply(Vector2D(x, y))
            assert row[0] == pytest.approx(expected.x)
            assert row[1] == pytest.approx(expected.y)

    def test_determinant(self):
        assert Transform.scale(2, 3).determinant() == 6
        assert Transform.rotate(1.1).determinant() == pytest.approx(1.0)
