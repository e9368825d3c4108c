"""Flattening of ``Path`` commands into pixel-space polylines."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from pathgeom.bezier import CubicBezier, QuadraticBezier
from pathgeom.constants import DEFAULT_CURVE_SAMPLES
from pathgeom.geom_types import Vector2D
from pathgeom.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo


@dataclass
class Polyline:
    points: np.ndarray  # (N, 2) pixel coordinates
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


def to_pixel_coords(point: Vector2D, width: int, height: int) -> Tuple[float, float]:
    """Map centered y-up coordinates onto the top-left y-down pixel grid."""
    return (point.x + width / 2.0, height / 2.0 - point.y)


def path_to_polylines(
    path: Path,
    width: int,
    height: int,
    curve_samples: int = DEFAULT_CURVE_SAMPLES,
) -> List[Polyline]:
    """
    Flatten ``path`` into one polyline per sub-path.

    Curves are replaced by ``curve_samples`` evenly spaced points. A drawing
    command without a preceding ``MoveTo`` starts at the origin.
    """
    polylines: List[Polyline] = []
    current_points: List[Vector2D] = []
    subpath_start: Optional[Vector2D] = None
    closed = False

    def flush() -> None:
        nonlocal current_points, closed
        if current_points:
            pts = np.array(
                [to_pixel_coords(p, width, height) for p in current_points], dtype=float
            )
            polylines.append(Polyline(points=pts, closed=closed))
        current_points = []
        closed = False

    for command in path.commands():
        if isinstance(command, MoveTo):
            flush()
            subpath_start = command.point
            current_points = [command.point]
            continue
        if isinstance(command, Close):
            if current_points:
                closed = True
                flush()
            continue
        if not current_points:
            # Drawing after Close continues from the sub-path start
            start = subpath_start if subpath_start is not None else Vector2D.ZERO
            subpath_start = start
            current_points = [start]
        current = current_points[-1]
        if isinstance(command, LineTo):
            current_points.append(command.point)
        elif isinstance(command, QuadraticTo):
            curve = QuadraticBezier(current, command.control, command.to)
            current_points.extend(_sampled(curve, curve_samples))
        elif isinstance(command, CubicTo):
            curve = CubicBezier(current, command.control1, command.control2, command.to)
            current_points.extend(_sampled(curve, curve_samples))
        else:
            raise TypeError(f"Unsupported path command: {type(command).__name__}")

    flush()
    return polylines


def _sampled(curve, samples: int) -> List[Vector2D]:
    samples = max(int(samples), 2)
    return [curve.evaluate(i / (samples - 1)) for i in range(1, samples)]
