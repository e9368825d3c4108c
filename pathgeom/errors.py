"""
Exception types raised by pathgeom.

Geometry operations are total and report absence with ``None``; only contract
violations and rendering backends raise.
"""


class PathGeomError(Exception):
    """Base class for all pathgeom errors."""


class InvalidBoundingBoxError(PathGeomError, ValueError):
    """Raised when a bounding box is constructed with min greater than max."""


class RenderError(PathGeomError, RuntimeError):
    """Raised when a rendering backend fails to produce or write its output."""
