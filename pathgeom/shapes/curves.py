"""
Round shapes built from cubic Bezier segments.

Circles and ellipses use four quarter-arc cubics whose control points sit at
``BEZIER_CIRCLE_CONSTANT`` times the radius from the on-curve points.
"""

import math
from typing import TYPE_CHECKING, Optional, Sequence

from pathgeom.angle import to_radians
from pathgeom.bezier import CubicBezier
from pathgeom.color import Color
from pathgeom.constants import BEZIER_CIRCLE_CONSTANT, DEFAULT_STROKE_WIDTH, TAU
from pathgeom.geom_types import Vector2D, VectorLike
from pathgeom.path import Path
from pathgeom.shapes.base import VShape

if TYPE_CHECKING:
    from pathgeom.app import App


def ellipse_path(rx: float, ry: float) -> Path:
    """Closed path of an origin-centered ellipse, starting at ``(rx, 0)``."""
    kx = rx * BEZIER_CIRCLE_CONSTANT
    ky = ry * BEZIER_CIRCLE_CONSTANT
    path = Path.with_capacity(6)
    path.move_to(Vector2D(rx, 0.0))
    path.cubic_to(Vector2D(rx, ky), Vector2D(kx, ry), Vector2D(0.0, ry))
    path.cubic_to(Vector2D(-kx, ry), Vector2D(-rx, ky), Vector2D(-rx, 0.0))
    path.cubic_to(Vector2D(-rx, -ky), Vector2D(-kx, -ry), Vector2D(0.0, -ry))
    path.cubic_to(Vector2D(kx, -ry), Vector2D(rx, -ky), Vector2D(rx, 0.0))
    path.close()
    return path


def arc_path(radius: float, start_angle: float, end_angle: float) -> Path:
    """
    Open path along a circle from ``start_angle`` to ``end_angle``.

    The counter-clockwise sweep is wrapped into [0, 2*pi) and split into
    segments of at most a quarter turn, one cubic each.
    """
    sweep = math.fmod(end_angle - start_angle, TAU)
    if sweep < 0.0:
        sweep += TAU
    # Rounding noise must not add a sliver segment to an exact multiple of a quarter
    segment_count = max(int(math.ceil(sweep / (math.pi / 2.0) - 1e-9)), 1)
    segment_angle = sweep / segment_count
    # Control point distance along the tangent, relative to the radius
    k = 4.0 / 3.0 * math.tan(segment_angle / 4.0)

    path = Path.with_capacity(segment_count + 1)
    path.move_to(Vector2D(radius * math.cos(start_angle), radius * math.sin(start_angle)))
    for i in range(segment_count):
        a0 = start_angle + i * segment_angle
        a1 = a0 + segment_angle
        cos0, sin0 = math.cos(a0), math.sin(a0)
        cos1, sin1 = math.cos(a1), math.sin(a1)
        path.cubic_to(
            Vector2D(radius * (cos0 - k * sin0), radius * (sin0 + k * cos0)),
            Vector2D(radius * (cos1 + k * sin1), radius * (sin1 - k * cos1)),
            Vector2D(radius * cos1, radius * sin1),
        )
    return path


class Circle(VShape):
    """Circle approximated by four cubic Bezier curves."""

    def __init__(
        self,
        radius: float = 1.0,
        center: VectorLike = (0.0, 0.0),
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        fill_color: Optional[Color] = None,
        app: Optional["App"] = None,
    ) -> None:
        super().__init__(
            ellipse_path(radius, radius),
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            fill_color=fill_color,
            app=app,
        )
        self.radius = radius
        self.set_position(center)

    def center(self) -> Vector2D:
        return self.position

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def circumference(self) -> float:
        return TAU * self.radius


class Ellipse(VShape):
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
        super().__init__(
            ellipse_path(width / 2.0, height / 2.0),
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            fill_color=fill_color,
            app=app,
        )
        self.width = width
        self.height = height
        self.set_position(center)


class Arc(VShape):
    """
    Circular arc centered on the origin.

    Angles are radians, or ``Degrees`` values. The arc always runs
    counter-clockwise from ``start_angle`` to ``end_angle``.
    """

    def __init__(
        self,
        radius: float = 1.0,
        start_angle: float = 0.0,
        end_angle: float = math.pi,
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        app: Optional["App"] = None,
    ) -> None:
        self.radius = radius
        self.start_angle = to_radians(start_angle)
        self.end_angle = to_radians(end_angle)
        super().__init__(
            arc_path(radius, self.start_angle, self.end_angle),
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            fill_color=None,
            app=app,
        )

    def angle(self) -> float:
        return self.end_angle - self.start_angle


class BezierShape(VShape):
    """Free-form shape around an arbitrary path."""

    @classmethod
    def from_path(cls, path: Path, **kwargs) -> "BezierShape":
        return cls(path.copy(), **kwargs)

    @classmethod
    def from_cubic_curves(
        cls, curves: Sequence[CubicBezier], closed: bool = False, **kwargs
    ) -> "BezierShape":
        path = Path.from_cubic_curves(curves)
        if closed and not path.is_empty():
            path.close()
        return cls(path, **kwargs)

    def curves(self):
        return [
            segment for segment in self.path.segments() if not isinstance(segment, tuple)
        ]

    def arc_length_estimate(self, samples_per_curve: int = 100) -> float:
        """Polyline estimate of the total length of the outline."""
        total = 0.0
        for segment in self.path.segments():
            if isinstance(segment, tuple):
                start, end = segment
                total += start.distance_to(end)
            else:
                total += segment.arc_length_estimate(samples_per_curve)
        return total
