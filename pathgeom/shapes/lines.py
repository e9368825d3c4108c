import math
from typing import TYPE_CHECKING, Optional

from pathgeom.color import Color
from pathgeom.constants import DEFAULT_ARROW_TIP, DEFAULT_STROKE_WIDTH
from pathgeom.geom_types import Vector2D, VectorLike, as_vector
from pathgeom.path import Path
from pathgeom.shapes.base import VShape
from pathgeom.shapes.group import ShapeGroup
from pathgeom.shapes.polygons import Polygon
from pathgeom.transform import Transform

if TYPE_CHECKING:
    from pathgeom.app import App


class Line(VShape):
    """Straight segment from ``start`` to ``end``."""

    def __init__(
        self,
        start: VectorLike = (0.0, 0.0),
        end: VectorLike = (1.0, 0.0),
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        app: Optional["App"] = None,
    ) -> None:
        self.start = as_vector(start)
        self.end = as_vector(end)
        super().__init__(
            Path().move_to(self.start).line_to(self.end),
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            app=app,
        )

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def angle(self) -> float:
        """Direction of the line in radians, measured from the x axis."""
        delta = self.end - self.start
        return math.atan2(delta.y, delta.x)

    def midpoint(self) -> Vector2D:
        return self.start.lerp(self.end, 0.5)

    def apply_transform(self, transform: Transform) -> "Line":
        super().apply_transform(transform)
        self.start = transform.apply(self.start)
        self.end = transform.apply(self.end)
        return self

    def set_position(self, position: VectorLike) -> "Line":
        delta = as_vector(position) - self.position
        super().set_position(position)
        self.start = self.start + delta
        self.end = self.end + delta
        return self


class Arrow(ShapeGroup):
    """
    Line with a filled triangular tip at ``end``.

    The shaft stops ``tip_length`` before ``end``. Arrows shorter than the
    tip are drawn as a plain line.
    """

    def __init__(
        self,
        start: VectorLike = (0.0, 0.0),
        end: VectorLike = (1.0, 0.0),
        tip_length: float = DEFAULT_ARROW_TIP,
        tip_width: float = DEFAULT_ARROW_TIP,
        color: Color = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        app: Optional["App"] = None,
    ) -> None:
        super().__init__(app=app)
        self.start = as_vector(start)
        self.end = as_vector(end)
        self.tip_length = tip_length
        self.tip_width = tip_width

        direction = self.end - self.start
        length = direction.magnitude()
        if length == 0.0 or length < tip_length:
            self.add(Line(self.start, self.end, stroke_color=color, stroke_width=stroke_width))
            return

        shaft_end = self.start + direction * ((length - tip_length) / length)
        tip_base = self.end - direction * (tip_length / length)
        normal = direction.perpendicular().normalize() or Vector2D.UP
        half = normal * (tip_width / 2.0)

        self.add(Line(self.start, shaft_end, stroke_color=color, stroke_width=stroke_width))
        self.add(
            Polygon(
                [self.end, tip_base + half, tip_base - half],
                stroke_color=color,
                stroke_width=stroke_width,
                fill_color=color,
            )
        )

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def apply_transform(self, transform: Transform) -> "Arrow":
        super().apply_transform(transform)
        self.start = transform.apply(self.start)
        self.end = transform.apply(self.end)
        return self

    def set_position(self, position: VectorLike) -> "Arrow":
        delta = as_vector(position) - self.position
        super().set_position(position)
        self.start = self.start + delta
        self.end = self.end + delta
        return self
