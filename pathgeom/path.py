"""
Path command buffer and pen-tracking builder.

A ``Path`` is an ordered list of drawing commands. Backends consume it by
iterating ``Path.commands()`` and dispatching on the five command types:
``MoveTo``, ``LineTo``, ``QuadraticTo``, ``CubicTo`` and ``Close``.

``Path`` keeps a lazily computed bounding box. Every method that changes the
command sequence calls ``_invalidate()`` before returning, so a cached box
always equals the box recomputed from the current commands.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from pathgeom.bezier import CubicBezier, QuadraticBezier
from pathgeom.bounding_box import BoundingBox
from pathgeom.constants import PATH_INLINE_CAPACITY
from pathgeom.geom_types import Vector2D, VectorLike, as_vector
from pathgeom.transform import Transform


class PathCommand:
    """A single drawing instruction."""

    __slots__ = ()

    def points(self) -> Tuple[Vector2D, ...]:
        """Every point referenced by the command, in order."""
        return ()

    def end_point(self) -> Optional[Vector2D]:
        pts = self.points()
        return pts[-1] if pts else None

    def transformed(self, transform: Transform) -> "PathCommand":
        return self


@dataclass(frozen=True)
class MoveTo(PathCommand):
    point: Vector2D

    def points(self) -> Tuple[Vector2D, ...]:
        return (self.point,)

    def transformed(self, transform: Transform) -> "MoveTo":
        return MoveTo(transform.apply(self.point))


@dataclass(frozen=True)
class LineTo(PathCommand):
    point: Vector2D

    def points(self) -> Tuple[Vector2D, ...]:
        return (self.point,)

    def transformed(self, transform: Transform) -> "LineTo":
        return LineTo(transform.apply(self.point))


@dataclass(frozen=True)
class QuadraticTo(PathCommand):
    control: Vector2D
    to: Vector2D

    def points(self) -> Tuple[Vector2D, ...]:
        return (self.control, self.to)

    def transformed(self, transform: Transform) -> "QuadraticTo":
        return QuadraticTo(transform.apply(self.control), transform.apply(self.to))


@dataclass(frozen=True)
class CubicTo(PathCommand):
    control1: Vector2D
    control2: Vector2D
    to: Vector2D

    def points(self) -> Tuple[Vector2D, ...]:
        return (self.control1, self.control2, self.to)

    def transformed(self, transform: Transform) -> "CubicTo":
        return CubicTo(
            transform.apply(self.control1),
            transform.apply(self.control2),
            transform.apply(self.to),
        )


@dataclass(frozen=True)
class Close(PathCommand):
    """Line back to the most recent MoveTo. Carries no point."""


class Path:
    """
    Ordered sequence of path commands with a cached bounding box.

    Commands are stored in a plain list. ``capacity`` is a sizing hint only;
    typical shapes need about ``PATH_INLINE_CAPACITY`` commands and a circle
    needs six.

    Equality and hashing look at the command sequence only, never at the
    cache.
    """

    def __init__(
        self,
        commands: Optional[Iterable[PathCommand]] = None,
        capacity: int = PATH_INLINE_CAPACITY,
    ) -> None:
        self._capacity = max(int(capacity), 0)
        self._commands: List[PathCommand] = list(commands) if commands is not None else []
        for command in self._commands:
            if not isinstance(command, PathCommand):
                raise TypeError(f"Expected a PathCommand, got {type(command).__name__}")
        self._cached_bbox: Optional[BoundingBox] = None

    @classmethod
    def new(cls) -> "Path":
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> "Path":
        return cls(capacity=capacity)

    @classmethod
    def from_points(cls, points: Sequence[VectorLike], closed: bool = False) -> "Path":
        """Build a polyline through ``points``."""
        path = cls(capacity=len(points) + 1)
        for i, point in enumerate(points):
            if i == 0:
                path.move_to(point)
            else:
                path.line_to(point)
        if closed and len(points) > 0:
            path.close()
        return path

    @classmethod
    def from_cubic_curves(cls, curves: Sequence[CubicBezier]) -> "Path":
        """Chain cubic curves; the first curve's start becomes the MoveTo."""
        path = cls(capacity=len(curves) + 1)
        if not curves:
            return path
        path.move_to(curves[0].p0)
        for curve in curves:
            path.cubic_to(curve.p1, curve.p2, curve.p3)
        return path

    def _invalidate(self) -> None:
        self._cached_bbox = None

    def _push(self, command: PathCommand) -> "Path":
        self._commands.append(command)
        self._invalidate()
        return self

    # Builder

    def move_to(self, point: VectorLike) -> "Path":
        return self._push(MoveTo(as_vector(point)))

    def line_to(self, point: VectorLike) -> "Path":
        return self._push(LineTo(as_vector(point)))

    def quadratic_to(self, control: VectorLike, to: VectorLike) -> "Path":
        return self._push(QuadraticTo(as_vector(control), as_vector(to)))

    def cubic_to(
        self, control1: VectorLike, control2: VectorLike, to: VectorLike
    ) -> "Path":
        return self._push(
            CubicTo(as_vector(control1), as_vector(control2), as_vector(to))
        )

    def close(self) -> "Path":
        return self._push(Close())

    def push(self, command: PathCommand) -> "Path":
        """Append an already constructed command."""
        if not isinstance(command, PathCommand):
            raise TypeError(f"Expected a PathCommand, got {type(command).__name__}")
        return self._push(command)

    def extend(self, other: "Path") -> "Path":
        self._commands.extend(other.commands())
        self._invalidate()
        return self

    def clear(self) -> "Path":
        self._commands.clear()
        self._invalidate()
        return self

    # Access

    def commands(self) -> Tuple[PathCommand, ...]:
        """Snapshot of the command sequence."""
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands())

    def __getitem__(self, index: int) -> PathCommand:
        return self._commands[index]

    def is_empty(self) -> bool:
        return not self._commands

    def capacity(self) -> int:
        return max(self._capacity, len(self._commands))

    def current_point(self) -> Optional[Vector2D]:
        """Pen position after the last command, or None for an empty path."""
        subpath_start: Optional[Vector2D] = None
        current: Optional[Vector2D] = None
        for command in self._commands:
            if isinstance(command, MoveTo):
                subpath_start = command.point
                current = command.point
            elif isinstance(command, Close):
                current = subpath_start
            else:
                current = command.end_point()
        return current

    def subpaths(self) -> List[List[PathCommand]]:
        """Split the commands into runs that each start at a MoveTo."""
        result: List[List[PathCommand]] = []
        for command in self._commands:
            if isinstance(command, MoveTo) or not result:
                result.append([])
            result[-1].append(command)
        return result

    def segments(self) -> List[object]:
        """
        Curve and line segments of the path as geometry objects.

        Lines (including the implicit line of ``Close``) are returned as
        ``(start, end)`` tuples, curves as ``QuadraticBezier``/``CubicBezier``.
        """
        segments: List[object] = []
        start: Optional[Vector2D] = None
        current: Optional[Vector2D] = None
        for command in self._commands:
            if isinstance(command, MoveTo):
                start = current = command.point
                continue
            if current is None:
                current = start = Vector2D.ZERO
            if isinstance(command, LineTo):
                segments.append((current, command.point))
                current = command.point
            elif isinstance(command, QuadraticTo):
                segments.append(QuadraticBezier(current, command.control, command.to))
                current = command.to
            elif isinstance(command, CubicTo):
                segments.append(
                    CubicBezier(current, command.control1, command.control2, command.to)
                )
                current = command.to
            elif isinstance(command, Close):
                if current != start:
                    segments.append((current, start))
                current = start
        return segments

    # Geometry

    def bounding_box(self) -> BoundingBox:
        """
        Bounding box of the control-point hull.

        Curves contribute their control points and endpoints rather than
        their true extrema, so the box may be looser than the exact curve
        box. An empty path yields ``BoundingBox.zero()``. The result is
        cached until the next mutation; callers receive a copy.
        """
        if self._cached_bbox is None:
            points = (p for command in self._commands for p in command.points())
            bbox = BoundingBox.from_points(points)
            self._cached_bbox = bbox if bbox is not None else BoundingBox.zero()
        return self._cached_bbox.copy()

    def exact_bounding_box(self) -> BoundingBox:
        """Tight bounding box using the true extrema of every curve."""
        bbox: Optional[BoundingBox] = None
        for command in self._commands:
            if isinstance(command, MoveTo):
                point_box = BoundingBox(command.point, command.point)
                bbox = point_box if bbox is None else bbox.union(point_box)
        for segment in self.segments():
            if isinstance(segment, tuple):
                seg_box = BoundingBox.from_points(segment)
            else:
                seg_box = segment.bounding_box()
            bbox = seg_box if bbox is None else bbox.union(seg_box)
        return bbox if bbox is not None else BoundingBox.zero()

    def apply_transform(self, transform: Transform) -> "Path":
        """Rewrite every point of every command in place."""
        for i, command in enumerate(self._commands):
            self._commands[i] = command.transformed(transform)
        self._invalidate()
        return self

    def transformed(self, transform: Transform) -> "Path":
        return self.copy().apply_transform(transform)

    def copy(self) -> "Path":
        return Path(self._commands, capacity=self._capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self) -> int:
        return hash(tuple(self._commands))

    def __repr__(self) -> str:
        return f"Path({self._commands!r})"


class PathCursor:
    """
    Path builder that tracks the current pen position.

    Every append moves ``current`` to the command's end point, which makes
    relative moves possible.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path if path is not None else Path()
        start = self._path.current_point()
        self.current = start if start is not None else Vector2D.ZERO

    def move_to(self, point: VectorLike) -> "PathCursor":
        point = as_vector(point)
        self._path.move_to(point)
        self.current = point
        return self

    def line_to(self, point: VectorLike) -> "PathCursor":
        point = as_vector(point)
        self._path.line_to(point)
        self.current = point
        return self

    def quadratic_to(self, control: VectorLike, to: VectorLike) -> "PathCursor":
        to = as_vector(to)
        self._path.quadratic_to(control, to)
        self.current = to
        return self

    def cubic_to(
        self, control1: VectorLike, control2: VectorLike, to: VectorLike
    ) -> "PathCursor":
        to = as_vector(to)
        self._path.cubic_to(control1, control2, to)
        self.current = to
        return self

    def relative_move_to(self, delta: VectorLike) -> "PathCursor":
        return self.move_to(self.current + as_vector(delta))

    def relative_line_to(self, delta: VectorLike) -> "PathCursor":
        return self.line_to(self.current + as_vector(delta))

    def close(self) -> "PathCursor":
        self._path.close()
        return self

    def position(self) -> Vector2D:
        return self.current

    def path(self) -> Path:
        return self._path

    def into_path(self) -> Path:
        """Hand over the built path; the cursor starts over with an empty one."""
        path = self._path
        self._path = Path()
        self.current = Vector2D.ZERO
        return path
