"""Conversion of styles into SVG presentation attributes."""

from typing import List, Optional, Tuple

from pathgeom.color import Color
from pathgeom.style import FillRule, FontWeight, PathStyle, TextAlignment, TextStyle

_FILL_RULES = {FillRule.NON_ZERO: "nonzero", FillRule.EVEN_ODD: "evenodd"}
_FONT_WEIGHTS = {FontWeight.NORMAL: "normal", FontWeight.BOLD: "bold"}
_TEXT_ANCHORS = {
    TextAlignment.LEFT: "start",
    TextAlignment.CENTER: "middle",
    TextAlignment.RIGHT: "end",
}
_XML_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;", "'": "&apos;"}


def color_to_svg(color: Color) -> str:
    return color.to_hex()


def escape_xml(text: str) -> str:
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in text)


def format_number(value: float) -> str:
    return f"{value:g}"


def _effective_opacity(color: Color, opacity: float) -> Optional[str]:
    value = color.a * opacity
    if value < 1.0:
        return f"{value:.3f}"
    return None


def path_style_to_svg_attrs(style: PathStyle) -> List[Tuple[str, str]]:
    """
    SVG attributes for a path style, in output order.

    Opacity attributes are only written when the color alpha multiplied by
    the style opacity is below 1.
    """
    attrs: List[Tuple[str, str]] = []

    if style.stroke_color is not None:
        attrs.append(("stroke", color_to_svg(style.stroke_color)))
        attrs.append(("stroke-width", format_number(style.stroke_width)))
        stroke_opacity = _effective_opacity(style.stroke_color, style.opacity)
        if stroke_opacity is not None:
            attrs.append(("stroke-opacity", stroke_opacity))
    else:
        attrs.append(("stroke", "none"))

    if style.fill_color is not None:
        attrs.append(("fill", color_to_svg(style.fill_color)))
        fill_opacity = _effective_opacity(style.fill_color, style.opacity)
        if fill_opacity is not None:
            attrs.append(("fill-opacity", fill_opacity))
        attrs.append(("fill-rule", _FILL_RULES[style.fill_rule]))
    else:
        attrs.append(("fill", "none"))

    return attrs


def text_style_to_svg_attrs(style: TextStyle) -> List[Tuple[str, str]]:
    attrs: List[Tuple[str, str]] = [("fill", color_to_svg(style.color))]
    opacity = _effective_opacity(style.color, style.opacity)
    if opacity is not None:
        attrs.append(("opacity", opacity))
    attrs.append(("font-size", format_number(style.font_size)))
    attrs.append(("font-family", escape_xml(style.font_family)))
    attrs.append(("font-weight", _FONT_WEIGHTS[style.font_weight]))
    attrs.append(("text-anchor", _TEXT_ANCHORS[style.alignment]))
    return attrs
