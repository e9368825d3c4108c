"""Conversion of styles into Pillow drawing parameters."""

from typing import Optional, Tuple

from pathgeom.color import Color
from pathgeom.style import PathStyle


def color_to_rgba8(color: Color, opacity: float = 1.0) -> Tuple[int, int, int, int]:
    """8-bit RGBA with the alpha channel multiplied by ``opacity``."""
    r, g, b, _ = color.to_rgba8()
    alpha = min(max(color.a * opacity, 0.0), 1.0)
    return (r, g, b, int(round(alpha * 255)))


def fill_rgba(style: PathStyle) -> Optional[Tuple[int, int, int, int]]:
    if style.fill_color is None:
        return None
    return color_to_rgba8(style.fill_color, style.opacity)


def stroke_rgba(style: PathStyle) -> Optional[Tuple[int, int, int, int]]:
    if not style.has_stroke():
        return None
    return color_to_rgba8(style.stroke_color, style.opacity)


def stroke_width_pixels(style: PathStyle) -> int:
    """Pillow draws integral widths; anything visible is at least one pixel."""
    return max(1, int(round(style.stroke_width)))
