from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from pathgeom.bounding_box import BoundingBox
from pathgeom.geom_types import Vector2D, VectorLike, as_vector
from pathgeom.path import Path
from pathgeom.renderer import Renderer
from pathgeom.shapes.base import Shape
from pathgeom.style import PathStyle
from pathgeom.transform import Transform

if TYPE_CHECKING:
    from pathgeom.app import App


class ShapeGroup(Shape):
    """
    Ordered collection of shapes handled as one.

    Transforms, moves and opacity changes propagate to every member. Members
    render in insertion order.
    """

    def __init__(self, *shapes: Shape, app: Optional["App"] = None) -> None:
        self._shapes: List[Shape] = list(shapes)
        self._position = Vector2D.ZERO
        self._opacity = 1.0
        super().__init__(app=app)

    def add(self, shape: Shape) -> "ShapeGroup":
        self._shapes.append(shape)
        return self

    def remove(self, index: int) -> Optional[Shape]:
        """Remove and return the member at ``index``, or None if out of range."""
        if 0 <= index < len(self._shapes):
            return self._shapes.pop(index)
        return None

    def clear(self) -> None:
        self._shapes.clear()

    def is_empty(self) -> bool:
        return not self._shapes

    def shapes(self) -> List[Shape]:
        return self._shapes.copy()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    @property
    def position(self) -> Vector2D:
        return self._position

    @property
    def opacity(self) -> float:
        return self._opacity

    def render(self, renderer: Renderer) -> None:
        for shape in self._shapes:
            shape.render(renderer)

    def styled_paths(self) -> List[Tuple[Path, PathStyle]]:
        items: List[Tuple[Path, PathStyle]] = []
        for shape in self._shapes:
            items.extend(shape.styled_paths())
        return items

    def bounding_box(self) -> BoundingBox:
        """Union of the member boxes; the zero box for an empty group."""
        if not self._shapes:
            return BoundingBox.zero()
        bbox = self._shapes[0].bounding_box()
        for shape in self._shapes[1:]:
            bbox = bbox.union(shape.bounding_box())
        return bbox

    def apply_transform(self, transform: Transform) -> "ShapeGroup":
        for shape in self._shapes:
            shape.apply_transform(transform)
        self._position = transform.apply(self._position)
        return self

    def set_position(self, position: VectorLike) -> "ShapeGroup":
        position = as_vector(position)
        delta = position - self._position
        translation = Transform.translate(delta.x, delta.y)
        for shape in self._shapes:
            shape.apply_transform(translation)
        self._position = position
        return self

    def set_opacity(self, opacity: float) -> "ShapeGroup":
        self._opacity = min(max(float(opacity), 0.0), 1.0)
        for shape in self._shapes:
            shape.set_opacity(self._opacity)
        return self
