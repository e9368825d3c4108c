from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from pathgeom.bounding_box import BoundingBox
from pathgeom.color import Color
from pathgeom.geom_types import Vector2D
from pathgeom.path import Path
from pathgeom.style import PathStyle, TextStyle

if TYPE_CHECKING:
    from pathgeom.transform import Transform


class Renderer(ABC):
    """
    Output backend contract.

    A frame is bracketed by ``begin_frame`` and ``end_frame``. Drawing methods
    return None on success and raise ``RenderError`` on failure.
    """

    def begin_frame(self) -> None:
        pass

    def end_frame(self) -> None:
        pass

    @abstractmethod
    def clear(self, color: Color) -> None:
        """Reset the output to a solid background color."""
        pass

    @abstractmethod
    def draw_path(self, path: Path, style: PathStyle) -> None:
        """
        Draw a path honoring both its stroke and fill properties.

        Args:
            path: Geometry to draw
            style: Stroke, fill, fill rule and opacity
        """
        pass

    @abstractmethod
    def draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        pass

    @abstractmethod
    def dimensions(self) -> Tuple[int, int]:
        """Viewport size as (width, height) in pixels."""
        pass


class PathProvider(ABC):
    """Anything that can be drawn as a single path."""

    @property
    @abstractmethod
    def path(self) -> Path:
        pass

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        pass

    @abstractmethod
    def apply_transform(self, transform: "Transform") -> None:
        pass
