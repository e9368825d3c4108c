import math
from typing import Iterable, Optional

from pathgeom.errors import InvalidBoundingBoxError
from pathgeom.geom_types import Vector2D


class BoundingBox:
    """
    Axis-aligned bounding box.

    The box always satisfies ``min.x <= max.x`` and ``min.y <= max.y``.
    Construction with inverted extents raises ``InvalidBoundingBoxError``
    (a ``ValueError``). Only ``expand_to_include`` mutates the box; every
    other operation returns a new one.
    """

    __hash__ = None  # mutable

    def __init__(self, min: Vector2D, max: Vector2D) -> None:
        if min.x > max.x:
            raise InvalidBoundingBoxError(
                f"min.x must be <= max.x (got min.x={min.x}, max.x={max.x})"
            )
        if min.y > max.y:
            raise InvalidBoundingBoxError(
                f"min.y must be <= max.y (got min.y={min.y}, max.y={max.y})"
            )
        self.min = min
        self.max = max

    @classmethod
    def new(cls, min: Vector2D, max: Vector2D) -> "BoundingBox":
        return cls(min, max)

    @classmethod
    def from_points(cls, points: Iterable[Vector2D]) -> Optional["BoundingBox"]:
        """Smallest box holding every point, or None for no points."""
        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            return None
        lo = first
        hi = first
        for point in iterator:
            lo = lo.min_components(point)
            hi = hi.max_components(point)
        return cls(lo, hi)

    @classmethod
    def zero(cls) -> "BoundingBox":
        return cls(Vector2D.ZERO, Vector2D.ZERO)

    @classmethod
    def infinite(cls) -> "BoundingBox":
        return cls(
            Vector2D(-math.inf, -math.inf),
            Vector2D(math.inf, math.inf),
        )

    def copy(self) -> "BoundingBox":
        return BoundingBox(self.min, self.max)

    # Queries

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def size(self) -> Vector2D:
        return Vector2D(self.width(), self.height())

    def center(self) -> Vector2D:
        return Vector2D(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
        )

    def area(self) -> float:
        return self.width() * self.height()

    def perimeter(self) -> float:
        return 2.0 * (self.width() + self.height())

    def is_empty(self) -> bool:
        """True when the box has zero width and zero height."""
        return self.width() == 0.0 and self.height() == 0.0

    def contains_point(self, point: Vector2D) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def contains_bbox(self, other: "BoundingBox") -> bool:
        return self.contains_point(other.min) and self.contains_point(other.max)

    def intersects(self, other: "BoundingBox") -> bool:
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
        )

    def intersection(self, other: "BoundingBox") -> Optional["BoundingBox"]:
        """Overlapping region of both boxes, or None if they are disjoint."""
        if not self.intersects(other):
            return None
        return BoundingBox(
            self.min.max_components(other.min),
            self.max.min_components(other.max),
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            self.min.min_components(other.min),
            self.max.max_components(other.max),
        )

    # Mutation and derived boxes

    def expand_to_include(self, point: Vector2D) -> None:
        """Grow this box in place so that it contains ``point``."""
        self.min = self.min.min_components(point)
        self.max = self.max.max_components(point)

    def expand_by_margin(self, margin: float) -> "BoundingBox":
        """Return a box grown by ``margin`` on all four sides."""
        offset = Vector2D.splat(margin)
        return BoundingBox(self.min - offset, self.max + offset)

    def translate(self, offset: Vector2D) -> "BoundingBox":
        return BoundingBox(self.min + offset, self.max + offset)

    def scale(self, factor: float) -> "BoundingBox":
        """Scale uniformly about the center of the box."""
        center = self.center()
        half = self.size() * (factor / 2.0)
        return BoundingBox(center - half, center + half)

    def corners(self):
        return [
            self.min,
            Vector2D(self.max.x, self.min.y),
            self.max,
            Vector2D(self.min.x, self.max.y),
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"BoundingBox(min={self.min!r}, max={self.max!r})"
