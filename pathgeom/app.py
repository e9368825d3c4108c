import logging
from typing import TYPE_CHECKING, List, Optional

from pathgeom.bounding_box import BoundingBox
from pathgeom.color import Color
from pathgeom.renderer import Renderer

if TYPE_CHECKING:
    from pathgeom.shapes.base import Shape

logger = logging.getLogger(__name__)


class App:
    """Keeps track of shapes and draws them as one frame."""

    def __init__(self, background: Color = Color.BLACK) -> None:
        self.background = background
        self._shapes: List["Shape"] = []

    def register_shape(self, shape: "Shape") -> None:
        """Register a shape with this app for tracking."""
        if shape not in self._shapes:
            self._shapes.append(shape)

    def unregister_shape(self, shape: "Shape") -> None:
        if shape in self._shapes:
            self._shapes.remove(shape)

    def get_shapes(self) -> List["Shape"]:
        """Get all shapes registered with this app."""
        return self._shapes.copy()

    def shape_count(self) -> int:
        """Get the number of shapes registered with this app."""
        return len(self._shapes)

    def clear(self) -> None:
        self._shapes.clear()

    def bounding_box(self) -> Optional[BoundingBox]:
        """Union of the bounding boxes of all shapes, or None without shapes."""
        bbox: Optional[BoundingBox] = None
        for shape in self._shapes:
            box = shape.bounding_box()
            bbox = box if bbox is None else bbox.union(box)
        return bbox

    def render(self, renderer: Renderer, background: Optional[Color] = None) -> None:
        """
        Draw every registered shape as one frame.

        Args:
            renderer: Backend to draw into
            background: Color passed to ``renderer.clear`` (default: the app background)

        Raises:
            RenderError: If the backend fails to draw a shape
        """
        renderer.begin_frame()
        renderer.clear(background if background is not None else self.background)
        for shape in self._shapes:
            shape.render(renderer)
        renderer.end_frame()
        width, height = renderer.dimensions()
        logger.debug(f"Rendered {len(self._shapes)} shapes at {width}x{height}")

    def show_2d(
        self,
        file_name: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        margin: float = 0.1,
    ) -> None:
        """
        Preview all registered shapes with matplotlib.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            margin: Margin around the drawing as a fraction of size (default: 0.1)

        Raises:
            ValueError: If no shapes are registered
            ImportError: If matplotlib is not installed
        """
        if not self._shapes:
            raise ValueError("No shapes to display")

        from pathgeom.integrations.mpl.preview import to_png

        items = []
        for shape in self._shapes:
            items.extend(shape.styled_paths())
        to_png(items, file_name=file_name, width=width, height=height, margin=margin)
