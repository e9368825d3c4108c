import logging
import pathlib
from typing import List, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from pathgeom.color import Color
from pathgeom.constants import DEFAULT_CURVE_SAMPLES
from pathgeom.errors import RenderError
from pathgeom.geom_types import Vector2D
from pathgeom.integrations.raster.path_converter import (
    Polyline,
    path_to_polylines,
    to_pixel_coords,
)
from pathgeom.integrations.raster.style_converter import (
    color_to_rgba8,
    fill_rgba,
    stroke_rgba,
    stroke_width_pixels,
)
from pathgeom.path import Path
from pathgeom.renderer import Renderer
from pathgeom.style import FillRule, PathStyle, TextStyle

logger = logging.getLogger(__name__)


def winding_numbers(
    polylines: List[Polyline], xs: np.ndarray, ys: np.ndarray
) -> np.ndarray:
    """
    Winding number of every sample point ``(xs[j], ys[i])``.

    Every sub-path is treated as closed for filling.

    Returns:
        Integer array of shape (len(ys), len(xs))
    """
    px = xs[np.newaxis, :]
    py = ys[:, np.newaxis]
    winding = np.zeros((len(ys), len(xs)), dtype=np.int32)
    for polyline in polylines:
        pts = polyline.points
        if len(pts) < 3:
            continue
        for (x0, y0), (x1, y1) in zip(pts, np.roll(pts, -1, axis=0)):
            if y0 == y1:
                continue
            side = (x1 - x0) * (py - y0) - (px - x0) * (y1 - y0)
            if y0 <= y1:
                crossing = (y0 <= py) & (py < y1) & (side > 0)
                winding += crossing
            else:
                crossing = (y1 <= py) & (py < y0) & (side < 0)
                winding -= crossing
    return winding


class RasterRenderer(Renderer):
    """
    Renderer drawing into an RGBA Pillow image.

    Coordinates are centered with the y axis pointing up, matching the SVG
    backend. Curves are flattened to ``curve_samples`` points per segment.
    Fills honor both fill rules; text is not rasterized.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        curve_samples: Points per flattened curve segment
    """

    def __init__(
        self, width: int, height: int, curve_samples: int = DEFAULT_CURVE_SAMPLES
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.curve_samples = curve_samples
        self._image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    @property
    def image(self) -> Image.Image:
        return self._image

    def to_pixel_coords(self, point: Vector2D) -> Tuple[float, float]:
        return to_pixel_coords(point, self.width, self.height)

    def clear(self, color: Color) -> None:
        self._image = Image.new(
            "RGBA", (self.width, self.height), color_to_rgba8(color)
        )

    def draw_path(self, path: Path, style: PathStyle) -> None:
        """
        Fill, then stroke ``path``.

        Raises:
            RenderError: If the path has no commands
        """
        if path.is_empty():
            raise RenderError("Failed to convert path: path has no commands")
        polylines = path_to_polylines(
            path, self.width, self.height, curve_samples=self.curve_samples
        )

        fill_color = fill_rgba(style)
        if fill_color is not None:
            coverage = self._fill_coverage(polylines, style.fill_rule)
            self._composite(coverage, fill_color)

        stroke_color = stroke_rgba(style)
        if stroke_color is not None:
            coverage = self._stroke_coverage(polylines, stroke_width_pixels(style))
            self._composite(coverage, stroke_color)

    def _fill_coverage(self, polylines: List[Polyline], rule: FillRule) -> np.ndarray:
        xs = np.arange(self.width, dtype=float) + 0.5
        ys = np.arange(self.height, dtype=float) + 0.5
        winding = winding_numbers(polylines, xs, ys)
        if rule == FillRule.EVEN_ODD:
            return (winding % 2) != 0
        return winding != 0

    def _stroke_coverage(self, polylines: List[Polyline], width: int) -> np.ndarray:
        mask = Image.new("L", (self.width, self.height), 0)
        draw = ImageDraw.Draw(mask)
        for polyline in polylines:
            points = [tuple(p) for p in polyline.points]
            if polyline.closed and len(points) > 1:
                points.append(points[0])
            if len(points) == 1:
                x, y = points[0]
                r = width / 2.0
                draw.ellipse([x - r, y - r, x + r, y + r], fill=255)
            else:
                draw.line(points, fill=255, width=width, joint="curve")
        return np.asarray(mask) > 0

    def _composite(self, coverage: np.ndarray, rgba: Tuple[int, int, int, int]) -> None:
        r, g, b, a = rgba
        if a == 0 or not coverage.any():
            return
        alpha = (coverage * a).astype(np.uint8)
        layer = Image.new("RGBA", (self.width, self.height), (r, g, b, 0))
        layer.putalpha(Image.fromarray(alpha))
        self._image.alpha_composite(layer)

    def draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        logger.warning(
            f"Text rendering is not supported by the raster backend, skipping "
            f"{text!r} at ({position.x}, {position.y}) with font-size={style.font_size}"
        )

    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def data(self) -> np.ndarray:
        """Pixel data as a (height, width, 4) uint8 array."""
        return np.array(self._image, dtype=np.uint8)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """RGBA value of the pixel at column ``x`` and row ``y``."""
        return self._image.getpixel((x, y))

    def save_png(self, file_name: Union[str, pathlib.Path]) -> None:
        """
        Write the image as PNG, creating parent directories.

        Raises:
            RenderError: If the file cannot be written
        """
        target = pathlib.Path(file_name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._image.save(target, format="PNG")
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to save PNG to {target}: {e}") from e
        logger.info(f"Saved {self.width}x{self.height} PNG to {target}")
