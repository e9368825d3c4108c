"""Conversion of ``Path`` objects into ``matplotlib.path.Path``."""

from typing import List, Optional, Tuple

from pathgeom.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo


def path_to_mpl(path: Path):
    """
    Convert ``path`` into a ``matplotlib.path.Path``.

    Returns:
        The matplotlib path, or None if ``path`` has no commands

    Raises:
        ImportError: If matplotlib is not installed
    """
    try:
        from matplotlib.path import Path as MplPath
    except ImportError:
        raise ImportError(
            "matplotlib is required for path previews. Install with: pip install matplotlib"
        )

    if path.is_empty():
        return None

    vertices: List[Tuple[float, float]] = []
    codes: List[int] = []
    subpath_start: Optional[Tuple[float, float]] = None

    for command in path.commands():
        if isinstance(command, MoveTo):
            subpath_start = command.point.to_tuple()
            vertices.append(subpath_start)
            codes.append(MplPath.MOVETO)
            continue
        if subpath_start is None:
            subpath_start = (0.0, 0.0)
            vertices.append(subpath_start)
            codes.append(MplPath.MOVETO)
        if isinstance(command, LineTo):
            vertices.append(command.point.to_tuple())
            codes.append(MplPath.LINETO)
        elif isinstance(command, QuadraticTo):
            vertices.extend([command.control.to_tuple(), command.to.to_tuple()])
            codes.extend([MplPath.CURVE3] * 2)
        elif isinstance(command, CubicTo):
            vertices.extend(
                [
                    command.control1.to_tuple(),
                    command.control2.to_tuple(),
                    command.to.to_tuple(),
                ]
            )
            codes.extend([MplPath.CURVE4] * 3)
        elif isinstance(command, Close):
            # CLOSEPOLY ignores its vertex
            vertices.append(subpath_start)
            codes.append(MplPath.CLOSEPOLY)

    return MplPath(vertices, codes)
