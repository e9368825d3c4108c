import logging
import pathlib
from typing import List, Tuple, Union

from pathgeom.color import Color
from pathgeom.errors import RenderError
from pathgeom.geom_types import Vector2D
from pathgeom.integrations.svg.elements import SvgPath, SvgRect, SvgText
from pathgeom.integrations.svg.path_converter import format_coord, path_to_svg_d
from pathgeom.integrations.svg.style_converter import (
    color_to_svg,
    escape_xml,
    path_style_to_svg_attrs,
    text_style_to_svg_attrs,
)
from pathgeom.path import Path
from pathgeom.renderer import Renderer
from pathgeom.style import PathStyle, TextStyle

logger = logging.getLogger(__name__)


class SvgRenderer(Renderer):
    """
    Renderer producing an SVG document.

    The origin is at the center of the viewport and the y axis points up:
    every element is placed inside a ``<g transform="scale(1, -1)">`` group.

    Args:
        width: Viewport width in pixels
        height: Viewport height in pixels
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.background = Color.BLACK
        self._elements: List[Union[SvgRect, SvgPath, SvgText]] = []

    def element_count(self) -> int:
        return len(self._elements)

    def begin_frame(self) -> None:
        self._elements.clear()

    def clear(self, color: Color) -> None:
        self.background = color
        self._elements.append(
            SvgRect(
                x=-self.width / 2.0,
                y=-self.height / 2.0,
                width=float(self.width),
                height=float(self.height),
                fill=color_to_svg(color),
            )
        )

    def draw_path(self, path: Path, style: PathStyle) -> None:
        d = path_to_svg_d(path)
        if not d:
            return
        self._elements.append(SvgPath(d=d, attrs=path_style_to_svg_attrs(style)))

    def draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        self._elements.append(
            SvgText(
                content=escape_xml(text),
                position=position,
                attrs=text_style_to_svg_attrs(style),
            )
        )

    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def to_svg_string(self) -> str:
        half_width = self.width / 2.0
        half_height = self.height / 2.0
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg width="{self.width}" height="{self.height}" '
            f'viewBox="{format_coord(-half_width)} {format_coord(-half_height)} '
            f'{self.width} {self.height}" '
            'xmlns="http://www.w3.org/2000/svg" version="1.1">',
            '  <g transform="scale(1, -1)">',
        ]
        lines.extend(element.to_svg_string(2) for element in self._elements)
        lines.append("  </g>")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, file_name: Union[str, pathlib.Path]) -> None:
        """
        Write the document to ``file_name``, creating parent directories.

        Raises:
            RenderError: If the file cannot be written
        """
        target = pathlib.Path(file_name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.to_svg_string(), encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed to write SVG to {target}: {e}") from e
        logger.info(f"Saved SVG with {len(self._elements)} elements to {target}")
