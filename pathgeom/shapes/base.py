import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from pathgeom.bounding_box import BoundingBox
from pathgeom.color import Color
from pathgeom.constants import DEFAULT_STROKE_WIDTH
from pathgeom.geom_types import Vector2D, VectorLike, as_vector
from pathgeom.path import Path
from pathgeom.renderer import PathProvider, Renderer
from pathgeom.style import FillRule, PathStyle
from pathgeom.transform import Transform

if TYPE_CHECKING:
    from pathgeom.app import App


class Shape(ABC):
    """Something that can draw itself and be moved around."""

    def __init__(self, app: Optional["App"] = None) -> None:
        self.app = app
        if app is not None:
            app.register_shape(self)

    @abstractmethod
    def render(self, renderer: Renderer) -> None:
        pass

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        pass

    @abstractmethod
    def apply_transform(self, transform: Transform) -> "Shape":
        pass

    @property
    @abstractmethod
    def position(self) -> Vector2D:
        pass

    @abstractmethod
    def set_position(self, position: VectorLike) -> "Shape":
        pass

    @property
    @abstractmethod
    def opacity(self) -> float:
        pass

    @abstractmethod
    def set_opacity(self, opacity: float) -> "Shape":
        pass

    @abstractmethod
    def styled_paths(self) -> List[Tuple[Path, PathStyle]]:
        """Every path this shape draws together with its style."""
        pass

    def shift(self, offset: VectorLike) -> "Shape":
        offset = as_vector(offset)
        return self.apply_transform(Transform.translate(offset.x, offset.y))

    def rotate(self, angle: float, about: Optional[VectorLike] = None) -> "Shape":
        """Rotate counter-clockwise about ``about`` (default: the shape position)."""
        pivot = as_vector(about) if about is not None else self.position
        transform = (
            Transform.translate(pivot.x, pivot.y)
            * Transform.rotate(angle)
            * Transform.translate(-pivot.x, -pivot.y)
        )
        return self.apply_transform(transform)

    def scale(self, factor: float, about: Optional[VectorLike] = None) -> "Shape":
        pivot = as_vector(about) if about is not None else self.position
        transform = (
            Transform.translate(pivot.x, pivot.y)
            * Transform.scale(factor, factor)
            * Transform.translate(-pivot.x, -pivot.y)
        )
        return self.apply_transform(transform)

    def copy(self) -> "Shape":
        """Deep copy that is not registered with any app."""
        app = self.app
        self.app = None
        try:
            duplicate = copy.deepcopy(self)
        finally:
            self.app = app
        return duplicate

    def to_png(
        self,
        file_name: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        margin: float = 0.1,
    ) -> None:
        """
        Preview the shape with matplotlib.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            margin: Margin around the shape as a fraction of size (default: 0.1)
        """
        from pathgeom.integrations.mpl.preview import to_png

        to_png(
            self.styled_paths(),
            file_name=file_name,
            width=width,
            height=height,
            margin=margin,
        )


def _clamp_opacity(opacity: float) -> float:
    return min(max(float(opacity), 0.0), 1.0)


class VShape(Shape, PathProvider):
    """
    A shape drawn as a single styled path.

    Args:
        path: Geometry of the shape
        stroke_color: Outline color, or None for no outline
        stroke_width: Outline width
        fill_color: Interior color, or None for no fill
        opacity: Overall opacity, clamped to [0, 1]
        app: Optional app to register the shape with
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        stroke_color: Optional[Color] = Color.WHITE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        fill_color: Optional[Color] = None,
        opacity: float = 1.0,
        app: Optional["App"] = None,
    ) -> None:
        self._path = path if path is not None else Path()
        self.stroke_color = stroke_color
        self.stroke_width = stroke_width
        self.fill_color = fill_color
        self.fill_rule = FillRule.NON_ZERO
        self._opacity = _clamp_opacity(opacity)
        self._position = Vector2D.ZERO
        super().__init__(app=app)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def position(self) -> Vector2D:
        return self._position

    @property
    def opacity(self) -> float:
        return self._opacity

    def style(self) -> PathStyle:
        return PathStyle(
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
            fill_color=self.fill_color,
            fill_rule=self.fill_rule,
            opacity=self._opacity,
        )

    def styled_paths(self) -> List[Tuple[Path, PathStyle]]:
        return [(self._path, self.style())]

    def render(self, renderer: Renderer) -> None:
        if self._path.is_empty():
            return
        renderer.draw_path(self._path, self.style())

    def bounding_box(self) -> BoundingBox:
        """Path bounding box grown by half the stroke width when stroked."""
        bbox = self._path.bounding_box()
        if self.stroke_color is not None and self.stroke_width > 0.0:
            bbox = bbox.expand_by_margin(self.stroke_width / 2.0)
        return bbox

    def apply_transform(self, transform: Transform) -> "VShape":
        self._path.apply_transform(transform)
        self._position = transform.apply(self._position)
        return self

    def set_position(self, position: VectorLike) -> "VShape":
        position = as_vector(position)
        delta = position - self._position
        self._path.apply_transform(Transform.translate(delta.x, delta.y))
        self._position = position
        return self

    def set_opacity(self, opacity: float) -> "VShape":
        self._opacity = _clamp_opacity(opacity)
        return self

    def set_stroke(self, color: Color, width: Optional[float] = None) -> "VShape":
        self.stroke_color = color
        if width is not None:
            self.stroke_width = width
        return self

    def clear_stroke(self) -> "VShape":
        self.stroke_color = None
        return self

    def set_fill(self, color: Color) -> "VShape":
        self.fill_color = color
        return self

    def clear_fill(self) -> "VShape":
        self.fill_color = None
        return self

    def set_fill_rule(self, rule: FillRule) -> "VShape":
        self.fill_rule = rule
        return self
