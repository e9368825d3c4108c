"""Conversion of ``Path`` commands into SVG path data."""

from typing import List

from pathgeom.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo


def format_coord(value: float) -> str:
    """
    Format a coordinate with at most two decimals.

    Trailing zeros are stripped and integral values print without a decimal
    point: ``10.0 -> "10"``, ``10.10 -> "10.1"``, ``-2.7 -> "-2.7"``.
    """
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _xy(point) -> str:
    return f"{format_coord(point.x)} {format_coord(point.y)}"


def path_to_svg_d(path: Path) -> str:
    """
    Build the ``d`` attribute for ``path``.

    Commands are joined with single spaces; an empty path gives ``""``.
    """
    parts: List[str] = []
    for command in path.commands():
        if isinstance(command, MoveTo):
            parts.append(f"M {_xy(command.point)}")
        elif isinstance(command, LineTo):
            parts.append(f"L {_xy(command.point)}")
        elif isinstance(command, QuadraticTo):
            parts.append(f"Q {_xy(command.control)} {_xy(command.to)}")
        elif isinstance(command, CubicTo):
            parts.append(
                f"C {_xy(command.control1)} {_xy(command.control2)} {_xy(command.to)}"
            )
        elif isinstance(command, Close):
            parts.append("Z")
        else:
            raise TypeError(f"Unsupported path command: {type(command).__name__}")
    return " ".join(parts)
