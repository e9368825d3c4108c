"""
Quadratic and cubic Bezier curves.

Curves are immutable control-point tuples. Evaluation uses the Bernstein form,
subdivision uses De Casteljau's algorithm and the exact bounding box is found
by solving the derivative for each axis.
"""

import math
from typing import List, Tuple

import numpy as np

from pathgeom.bounding_box import BoundingBox
from pathgeom.constants import DEFAULT_ARC_LENGTH_SAMPLES, ROOT_EPSILON
from pathgeom.geom_types import Vector2D, VectorLike, as_vector


def _quadratic_roots(a: float, b: float, c: float) -> List[float]:
    """Real roots of ``a t^2 + b t + c``, falling back to the linear case."""
    if abs(a) <= ROOT_EPSILON:
        if abs(b) <= ROOT_EPSILON:
            return []
        return [-c / b]
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []
    if discriminant == 0.0:
        return [-b / (2.0 * a)]
    sqrt_d = math.sqrt(discriminant)
    return [(-b + sqrt_d) / (2.0 * a), (-b - sqrt_d) / (2.0 * a)]


def _in_unit_interval(t: float) -> bool:
    return 0.0 <= t <= 1.0


class _BezierCurve:
    """Behaviour shared by both curve degrees."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), self.control_points())

    def control_points(self) -> Tuple[Vector2D, ...]:
        raise NotImplementedError

    def evaluate(self, t: float) -> Vector2D:
        raise NotImplementedError

    def tangent(self, t: float) -> Vector2D:
        raise NotImplementedError

    def normal(self, t: float) -> Vector2D:
        """
        Tangent rotated 90 degrees counter-clockwise.

        The result is not normalized; its magnitude equals the tangent's.
        """
        return self.tangent(t).perpendicular()

    def start(self) -> Vector2D:
        return self.control_points()[0]

    def end(self) -> Vector2D:
        return self.control_points()[-1]

    def sample(self, n: int) -> np.ndarray:
        """Evaluate ``n`` evenly spaced parameters, both endpoints included."""
        if n <= 0:
            return np.zeros((0, 2))
        if n == 1:
            return np.array([self.start().to_tuple()])
        return np.array([self.evaluate(t).to_tuple() for t in np.linspace(0.0, 1.0, n)])

    def arc_length_estimate(self, samples: int = DEFAULT_ARC_LENGTH_SAMPLES) -> float:
        """
        Estimate the curve length with a polyline of ``samples`` segments.

        This is an approximation whose accuracy grows with ``samples``, not an
        exact quadrature.
        """
        if samples <= 0:
            return 0.0
        length = 0.0
        previous = self.evaluate(0.0)
        for i in range(1, samples + 1):
            current = self.evaluate(i / samples)
            length += previous.distance_to(current)
            previous = current
        return length

    def _extremum_parameters(self) -> List[float]:
        raise NotImplementedError

    def bounding_box(self) -> BoundingBox:
        """
        Tight bounding box of the curve on ``t`` in [0, 1].

        Seeded with the control points, then extended with every point where
        the derivative of an axis vanishes inside the unit interval.
        """
        points = list(self.control_points())
        for t in self._extremum_parameters():
            if _in_unit_interval(t):
                points.append(self.evaluate(t))
        box = BoundingBox.from_points(points)
        assert box is not None
        return box

    def __iter__(self):
        return iter(self.control_points())

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.control_points() == other.control_points()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self.control_points())

    def __repr__(self) -> str:
        points = ", ".join(repr(p) for p in self.control_points())
        return f"{type(self).__name__}({points})"


class QuadraticBezier(_BezierCurve):
    """Quadratic Bezier curve with control points p0, p1, p2."""

    __slots__ = ("p0", "p1", "p2")

    def __init__(self, p0: VectorLike, p1: VectorLike, p2: VectorLike) -> None:
        object.__setattr__(self, "p0", as_vector(p0))
        object.__setattr__(self, "p1", as_vector(p1))
        object.__setattr__(self, "p2", as_vector(p2))

    def control_points(self) -> Tuple[Vector2D, Vector2D, Vector2D]:
        return (self.p0, self.p1, self.p2)

    def evaluate(self, t: float) -> Vector2D:
        s = 1.0 - t
        w0 = s * s
        w1 = 2.0 * s * t
        w2 = t * t
        return Vector2D(
            w0 * self.p0.x + w1 * self.p1.x + w2 * self.p2.x,
            w0 * self.p0.y + w1 * self.p1.y + w2 * self.p2.y,
        )

    def tangent(self, t: float) -> Vector2D:
        s = 1.0 - t
        return (self.p1 - self.p0) * (2.0 * s) + (self.p2 - self.p1) * (2.0 * t)

    def _extremum_parameters(self) -> List[float]:
        params = []
        for p0, p1, p2 in (
            (self.p0.x, self.p1.x, self.p2.x),
            (self.p0.y, self.p1.y, self.p2.y),
        ):
            # B'(t) = 2 [(p1 - p0) + t (p0 - 2 p1 + p2)]
            denominator = p0 - 2.0 * p1 + p2
            if abs(denominator) > ROOT_EPSILON:
                params.append((p0 - p1) / denominator)
        return params

    def split(self, t: float) -> Tuple["QuadraticBezier", "QuadraticBezier"]:
        """Subdivide at ``t`` into curves covering [0, t] and [t, 1]."""
        q0 = self.p0.lerp(self.p1, t)
        q1 = self.p1.lerp(self.p2, t)
        r = q0.lerp(q1, t)
        return QuadraticBezier(self.p0, q0, r), QuadraticBezier(r, q1, self.p2)

    def reversed(self) -> "QuadraticBezier":
        return QuadraticBezier(self.p2, self.p1, self.p0)


class CubicBezier(_BezierCurve):
    """Cubic Bezier curve with control points p0, p1, p2, p3."""

    __slots__ = ("p0", "p1", "p2", "p3")

    def __init__(
        self, p0: VectorLike, p1: VectorLike, p2: VectorLike, p3: VectorLike
    ) -> None:
        object.__setattr__(self, "p0", as_vector(p0))
        object.__setattr__(self, "p1", as_vector(p1))
        object.__setattr__(self, "p2", as_vector(p2))
        object.__setattr__(self, "p3", as_vector(p3))

    @staticmethod
    def from_quadratic(curve: QuadraticBezier) -> "CubicBezier":
        """Degree-elevate a quadratic curve; the shape is unchanged."""
        c1 = curve.p0 + (curve.p1 - curve.p0) * (2.0 / 3.0)
        c2 = curve.p2 + (curve.p1 - curve.p2) * (2.0 / 3.0)
        return CubicBezier(curve.p0, c1, c2, curve.p2)

    def control_points(self) -> Tuple[Vector2D, Vector2D, Vector2D, Vector2D]:
        return (self.p0, self.p1, self.p2, self.p3)

    def evaluate(self, t: float) -> Vector2D:
        s = 1.0 - t
        w0 = s * s * s
        w1 = 3.0 * s * s * t
        w2 = 3.0 * s * t * t
        w3 = t * t * t
        return Vector2D(
            w0 * self.p0.x + w1 * self.p1.x + w2 * self.p2.x + w3 * self.p3.x,
            w0 * self.p0.y + w1 * self.p1.y + w2 * self.p2.y + w3 * self.p3.y,
        )

    def tangent(self, t: float) -> Vector2D:
        s = 1.0 - t
        return (
            (self.p1 - self.p0) * (3.0 * s * s)
            + (self.p2 - self.p1) * (6.0 * s * t)
            + (self.p3 - self.p2) * (3.0 * t * t)
        )

    def _extremum_parameters(self) -> List[float]:
        params = []
        for p0, p1, p2, p3 in (
            (self.p0.x, self.p1.x, self.p2.x, self.p3.x),
            (self.p0.y, self.p1.y, self.p2.y, self.p3.y),
        ):
            # B'(t) / 3 = a t^2 + b t + c
            a = -p0 + 3.0 * p1 - 3.0 * p2 + p3
            b = 2.0 * (p0 - 2.0 * p1 + p2)
            c = p1 - p0
            params.extend(_quadratic_roots(a, b, c))
        return params

    def split(self, t: float) -> Tuple["CubicBezier", "CubicBezier"]:
        """Subdivide at ``t`` into curves covering [0, t] and [t, 1]."""
        q0 = self.p0.lerp(self.p1, t)
        q1 = self.p1.lerp(self.p2, t)
        q2 = self.p2.lerp(self.p3, t)
        r0 = q0.lerp(q1, t)
        r1 = q1.lerp(q2, t)
        s = r0.lerp(r1, t)
        return CubicBezier(self.p0, q0, r0, s), CubicBezier(s, r1, q2, self.p3)

    def reversed(self) -> "CubicBezier":
        return CubicBezier(self.p3, self.p2, self.p1, self.p0)
