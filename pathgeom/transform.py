"""
2D affine transforms.

A transform holds the linear part ``[[a, c], [b, d]]`` and the translation
``(tx, ty)``. Points are mapped with ``apply``; ``S * O`` composes two
transforms so that ``O`` is applied first.
"""

import math
from typing import Iterable, List

import numpy as np

from pathgeom.angle import to_radians
from pathgeom.constants import EPSILON
from pathgeom.geom_types import Vector2D


class Transform:
    __slots__ = ("a", "b", "c", "d", "tx", "ty")

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> None:
        object.__setattr__(self, "a", float(a))
        object.__setattr__(self, "b", float(b))
        object.__setattr__(self, "c", float(c))
        object.__setattr__(self, "d", float(d))
        object.__setattr__(self, "tx", float(tx))
        object.__setattr__(self, "ty", float(ty))

    def __setattr__(self, name, value):
        raise AttributeError("Transform is immutable")

    def __reduce__(self):
        return (Transform, tuple(self.to_list()))

    @staticmethod
    def identity() -> "Transform":
        return Transform()

    @staticmethod
    def translate(x: float, y: float) -> "Transform":
        return Transform(tx=x, ty=y)

    @staticmethod
    def rotate(angle: float) -> "Transform":
        """
        Counter-clockwise rotation about the origin.

        Args:
            angle: Rotation in radians, or a ``Degrees`` value
        """
        theta = to_radians(angle)
        cos_a = math.cos(theta)
        sin_a = math.sin(theta)
        return Transform(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @staticmethod
    def scale(sx: float, sy: float) -> "Transform":
        return Transform(a=sx, d=sy)

    def apply(self, v: Vector2D) -> Vector2D:
        x, y = v.x, v.y
        return Vector2D(
            self.a * x + self.c * y + self.tx,
            self.b * x + self.d * y + self.ty,
        )

    def apply_many(self, points: np.ndarray) -> np.ndarray:
        """Apply the transform to an (N, 2) array of points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        linear = np.array([[self.a, self.c], [self.b, self.d]])
        return pts @ linear.T + np.array([self.tx, self.ty])

    def then(self, other: "Transform") -> "Transform":
        """Return the transform applying ``self`` first and ``other`` second."""
        return other * self

    def __mul__(self, other: "Transform") -> "Transform":
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            tx=self.a * other.tx + self.c * other.ty + self.tx,
            ty=self.b * other.tx + self.d * other.ty + self.ty,
        )

    __matmul__ = __mul__

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def is_identity(self, tolerance: float = EPSILON) -> bool:
        return all(
            abs(value - expected) <= tolerance
            for value, expected in zip(self.to_list(), (1.0, 0.0, 0.0, 1.0, 0.0, 0.0))
        )

    def to_list(self) -> List[float]:
        return [self.a, self.b, self.c, self.d, self.tx, self.ty]

    def to_matrix(self) -> np.ndarray:
        """Return the 3x3 homogeneous matrix."""
        return np.array(
            [
                [self.a, self.c, self.tx],
                [self.b, self.d, self.ty],
                [0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def from_matrix(matrix: Iterable[Iterable[float]]) -> "Transform":
        m = np.asarray(matrix, dtype=float)
        if m.shape not in ((3, 3), (2, 3)):
            raise ValueError(f"Expected a 2x3 or 3x3 matrix, got shape {m.shape}")
        return Transform(
            a=m[0, 0], b=m[1, 0], c=m[0, 1], d=m[1, 1], tx=m[0, 2], ty=m[1, 2]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __repr__(self) -> str:
        return (
            f"Transform(a={self.a}, b={self.b}, c={self.c}, d={self.d}, "
            f"tx={self.tx}, ty={self.ty})"
        )
