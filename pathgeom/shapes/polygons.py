import math
from typing import TYPE_CHECKING, List, Optional, Sequence

from pathgeom.color import Color
from pathgeom.constants import DEFAULT_STROKE_WIDTH
from pathgeom.geom_types import Vector2D, VectorLike, as_vector
from pathgeom.path import Path
from pathgeom.shapes.base import VShape
from pathgeom.transform import Transform

if TYPE_CHECKING:
    from pathgeom.app import App


class Polygon(VShape):
    """Closed polygon through ``vertices``."""

    def __init__(
        self,
        vertices: Sequence[VectorLike],
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        fill_color: Optional[Color] = None,
        app: Optional["App"] = None,
    ) -> None:
        self.vertices: List[Vector2D] = [as_vector(v) for v in vertices]
        super().__init__(
            Path.from_points(self.vertices, closed=True),
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            fill_color=fill_color,
            app=app,
        )

    @classmethod
    def regular(cls, sides: int, radius: float = 1.0, **kwargs) -> "Polygon":
        """
        Regular polygon centered on the origin with its first vertex on top.

        Raises:
            ValueError: If ``sides`` is less than 3
        """
        if sides < 3:
            raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
        step = 2.0 * math.pi / sides
        vertices = [
            Vector2D(
                radius * math.cos(math.pi / 2.0 + i * step),
                radius * math.sin(math.pi / 2.0 + i * step),
            )
            for i in range(sides)
        ]
        return cls(vertices, **kwargs)

    def apply_transform(self, transform: Transform) -> "Polygon":
        super().apply_transform(transform)
        self.vertices = [transform.apply(v) for v in self.vertices]
        return self

    def set_position(self, position: VectorLike) -> "Polygon":
        delta = as_vector(position) - self.position
        super().set_position(position)
        self.vertices = [v + delta for v in self.vertices]
        return self


class Rectangle(VShape):
    """Axis-aligned rectangle centered on ``center``."""

    def __init__(
        self,
        width: float = 2.0,
        height: float = 1.0,
        center: VectorLike = (0.0, 0.0),
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        fill_color: Optional[Color] = None,
        app: Optional["App"] = None,
    ) -> None:
        hw = width / 2.0
        hh = height / 2.0
        path = Path.from_points(
            [
                Vector2D(-hw, -hh),
                Vector2D(hw, -hh),
                Vector2D(hw, hh),
                Vector2D(-hw, hh),
            ],
            closed=True,
        )
        super().__init__(
            path,
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            fill_color=fill_color,
            app=app,
        )
        self.width = width
        self.height = height
        self.set_position(center)

    def area(self) -> float:
        return self.width * self.height
