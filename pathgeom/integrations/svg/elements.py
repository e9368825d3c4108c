"""SVG element model written out by ``SvgRenderer``."""

from dataclasses import dataclass, field
from typing import List, Tuple

from pathgeom.geom_types import Vector2D
from pathgeom.integrations.svg.path_converter import format_coord

Attributes = List[Tuple[str, str]]


def _format_attrs(attrs: Attributes) -> str:
    return "".join(f' {key}="{value}"' for key, value in attrs)


@dataclass
class SvgRect:
    x: float
    y: float
    width: float
    height: float
    fill: str

    def to_svg_string(self, indent: int = 0) -> str:
        return (
            f'{"  " * indent}<rect x="{format_coord(self.x)}" y="{format_coord(self.y)}" '
            f'width="{format_coord(self.width)}" height="{format_coord(self.height)}" '
            f'fill="{self.fill}" />'
        )


@dataclass
class SvgPath:
    d: str
    attrs: Attributes = field(default_factory=list)

    def to_svg_string(self, indent: int = 0) -> str:
        return f'{"  " * indent}<path d="{self.d}"{_format_attrs(self.attrs)} />'


@dataclass
class SvgText:
    content: str  # already XML-escaped
    position: Vector2D
    attrs: Attributes = field(default_factory=list)

    def to_svg_string(self, indent: int = 0) -> str:
        return (
            f'{"  " * indent}<text x="{format_coord(self.position.x)}" '
            f'y="{format_coord(self.position.y)}"{_format_attrs(self.attrs)}>'
            f"{self.content}</text>"
        )
