"""
pathgeom - 2D vector-graphics geometry for Python.

This package provides path construction, Bezier curve math, affine transforms
and bounding boxes, plus SVG, raster and matplotlib output backends.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Core geometry
from .angle import Degrees, Radians
from .bezier import CubicBezier, QuadraticBezier
from .bounding_box import BoundingBox
from .geom_types import Vector2D, VectorLike
from .path import Close, CubicTo, LineTo, MoveTo, Path, PathCommand, PathCursor, QuadraticTo
from .transform import Transform

# Rendering contract
from .app import App
from .color import Color
from .errors import InvalidBoundingBoxError, PathGeomError, RenderError
from .renderer import PathProvider, Renderer
from .style import FillRule, FontWeight, PathStyle, TextAlignment, TextStyle

# Shapes
from .shapes import (
    Arc,
    Arrow,
    BezierShape,
    Circle,
    Ellipse,
    Line,
    Polygon,
    Rectangle,
    Shape,
    ShapeGroup,
    VShape,
)

# Define what gets imported with "from pathgeom import *"
__all__ = [
    # Geometry
    "Vector2D",
    "VectorLike",
    "Degrees",
    "Radians",
    "Transform",
    "BoundingBox",
    "QuadraticBezier",
    "CubicBezier",
    "Path",
    "PathCommand",
    "PathCursor",
    "MoveTo",
    "LineTo",
    "QuadraticTo",
    "CubicTo",
    "Close",
    # Rendering
    "App",
    "Color",
    "Renderer",
    "PathProvider",
    "PathStyle",
    "TextStyle",
    "FillRule",
    "FontWeight",
    "TextAlignment",
    # Errors
    "PathGeomError",
    "InvalidBoundingBoxError",
    "RenderError",
    # Shapes
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
]
