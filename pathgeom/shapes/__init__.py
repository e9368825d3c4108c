"""Shape builders that assemble paths from pathgeom primitives."""

from .base import Shape, VShape
from .curves import Arc, BezierShape, Circle, Ellipse, arc_path, ellipse_path
from .group import ShapeGroup
from .lines import Arrow, Line
from .polygons import Polygon, Rectangle

__all__ = [
    "Shape",
    "VShape",
    "Circle",
    "Ellipse",
    "Arc",
    "BezierShape",
    "Rectangle",
    "Polygon",
    "Line",
    "Arrow",
    "ShapeGroup",
    "arc_path",
    "ellipse_path",
]
