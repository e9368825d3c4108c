from .path_converter import format_coord, path_to_svg_d
from .renderer import SvgRenderer
from .style_converter import (
    color_to_svg,
    escape_xml,
    path_style_to_svg_attrs,
    text_style_to_svg_attrs,
)

__all__ = [
    "SvgRenderer",
    "path_to_svg_d",
    "format_coord",
    "path_style_to_svg_attrs",
    "text_style_to_svg_attrs",
    "color_to_svg",
    "escape_xml",
]
