import math
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np


class Vector2D:
    """An immutable 2D point or direction."""

    __slots__ = ("_x", "_y")

    ZERO: "Vector2D"
    RIGHT: "Vector2D"
    UP: "Vector2D"
    LEFT: "Vector2D"
    DOWN: "Vector2D"

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vector2D is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @staticmethod
    def zero() -> "Vector2D":
        return Vector2D(0.0, 0.0)

    @staticmethod
    def splat(value: float) -> "Vector2D":
        """Create a vector with both components set to ``value``."""
        return Vector2D(value, value)

    # Arithmetic

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x + other.x, self._y + other.y)

    def sub(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x - other.x, self._y - other.y)

    def scale(self, factor: float) -> "Vector2D":
        return Vector2D(self._x * factor, self._y * factor)

    def div(self, divisor: float) -> "Vector2D":
        """
        Divide both components by ``divisor``.

        Division by zero is not checked: the result follows IEEE 754 and holds
        ``inf`` or ``nan`` components.
        """
        return Vector2D(_ieee_div(self._x, divisor), _ieee_div(self._y, divisor))

    def neg(self) -> "Vector2D":
        return Vector2D(-self._x, -self._y)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector2D":
        if isinstance(factor, Vector2D):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector2D":
        if isinstance(divisor, Vector2D):
            return NotImplemented
        return self.div(divisor)

    def __neg__(self) -> "Vector2D":
        return self.neg()

    # Products and norms

    def dot(self, other: "Vector2D") -> float:
        return self._x * other.x + self._y * other.y

    def cross(self, other: "Vector2D") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self._x * other.y - self._y * other.x

    def magnitude(self) -> float:
        return math.hypot(self._x, self._y)

    def magnitude_squared(self) -> float:
        return self._x * self._x + self._y * self._y

    def normalize(self) -> Optional["Vector2D"]:
        """Return the unit vector, or None for the zero vector."""
        mag = self.magnitude()
        if mag == 0.0:
            return None
        return Vector2D(self._x / mag, self._y / mag)

    def distance_to(self, other: "Vector2D") -> float:
        return math.hypot(other.x - self._x, other.y - self._y)

    def perpendicular(self) -> "Vector2D":
        """Rotate by 90 degrees counter-clockwise."""
        return Vector2D(-self._y, self._x)

    def angle(self) -> float:
        """Angle to the positive x axis in radians."""
        return math.atan2(self._y, self._x)

    def lerp(self, other: "Vector2D", t: float) -> "Vector2D":
        """
        Linearly interpolate towards ``other``.

        Written as ``a * (1 - t) + b * t`` so that ``t == 0`` and ``t == 1``
        return the endpoints exactly.
        """
        s = 1.0 - t
        return Vector2D(self._x * s + other.x * t, self._y * s + other.y * t)

    def min_components(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(min(self._x, other.x), min(self._y, other.y))

    def max_components(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(max(self._x, other.x), max(self._y, other.y))

    # Conversion

    def to_tuple(self) -> Tuple[float, float]:
        return (self._x, self._y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=float)

    @staticmethod
    def from_numpy(array: np.ndarray) -> "Vector2D":
        return Vector2D(float(array[0]), float(array[1]))

    def to_json(self):
        return {"x": self._x, "y": self._y}

    @staticmethod
    def from_json(json_data):
        return Vector2D(json_data["x"], json_data["y"])

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Vector2D(x={self._x}, y={self._y})"

    def __reduce__(self):
        return (Vector2D, (self._x, self._y))


def _ieee_div(value: float, divisor: float) -> float:
    if divisor != 0.0:
        return value / divisor
    if math.isnan(value) or value == 0.0:
        return math.nan
    # Sign of a zero divisor follows IEEE 754
    return math.copysign(math.inf, value) * math.copysign(1.0, divisor)


Vector2D.ZERO = Vector2D(0.0, 0.0)
Vector2D.RIGHT = Vector2D(1.0, 0.0)
Vector2D.UP = Vector2D(0.0, 1.0)
Vector2D.LEFT = Vector2D(-1.0, 0.0)
Vector2D.DOWN = Vector2D(0.0, -1.0)


VectorLike = Union[Vector2D, Tuple[float, float], Sequence[float], np.ndarray]


def as_vector(value: VectorLike) -> Vector2D:
    """Coerce a vector, 2-sequence or numpy array into a Vector2D."""
    if isinstance(value, Vector2D):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected 2 components, got {len(value)}")
    return Vector2D(float(value[0]), float(value[1]))
