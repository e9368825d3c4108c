"""
Render-time styling.

Styles are attached to a path when it is drawn; they are never stored on the
``Path`` itself. A missing stroke or fill is ``None``.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from pathgeom.color import Color
from pathgeom.constants import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_STROKE_WIDTH,
)


class FillRule(Enum):
    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _clamp_opacity(opacity: float) -> float:
    return min(max(float(opacity), 0.0), 1.0)


@dataclass(frozen=True)
class PathStyle:
    """Stroke and fill properties used when drawing a path."""

    stroke_color: Optional[Color] = field(default_factory=lambda: Color.WHITE)
    stroke_width: float = DEFAULT_STROKE_WIDTH
    fill_color: Optional[Color] = None
    fill_rule: FillRule = FillRule.NON_ZERO
    opacity: float = 1.0

    @classmethod
    def stroke(cls, color: Color, width: float) -> "PathStyle":
        return cls(stroke_color=color, stroke_width=width)

    @classmethod
    def fill(cls, color: Color) -> "PathStyle":
        return cls(stroke_color=None, stroke_width=0.0, fill_color=color)

    def with_stroke(self, color: Optional[Color], width: float) -> "PathStyle":
        return replace(self, stroke_color=color, stroke_width=width)

    def with_fill(self, color: Optional[Color]) -> "PathStyle":
        return replace(self, fill_color=color)

    def with_fill_rule(self, rule: FillRule) -> "PathStyle":
        return replace(self, fill_rule=rule)

    def with_opacity(self, opacity: float) -> "PathStyle":
        return replace(self, opacity=_clamp_opacity(opacity))

    def has_stroke(self) -> bool:
        return self.stroke_color is not None and self.stroke_width > 0.0

    def has_fill(self) -> bool:
        return self.fill_color is not None


@dataclass(frozen=True)
class TextStyle:
    """Font and color properties used when drawing text."""

    color: Color = field(default_factory=lambda: Color.WHITE)
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: FontWeight = FontWeight.NORMAL
    alignment: TextAlignment = TextAlignment.LEFT
    opacity: float = 1.0

    def with_color(self, color: Color) -> "TextStyle":
        return replace(self, color=color)

    def with_font_size(self, size: float) -> "TextStyle":
        return replace(self, font_size=size)

    def with_font_family(self, family: str) -> "TextStyle":
        return replace(self, font_family=family)

    def with_weight(self, weight: FontWeight) -> "TextStyle":
        return replace(self, font_weight=weight)

    def with_alignment(self, alignment: TextAlignment) -> "TextStyle":
        return replace(self, alignment=alignment)

    def with_opacity(self, opacity: float) -> "TextStyle":
        return replace(self, opacity=_clamp_opacity(opacity))
