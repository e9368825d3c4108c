"""Tests for the Pillow raster backend."""

import logging

import numpy as np
import pytest
from PIL import Image

from pathgeom.color import Color
from pathgeom.errors import RenderError
from pathgeom.geom_types import Vector2D
from pathgeom.integrations.raster import RasterRenderer, path_to_polylines, to_pixel_coords
from pathgeom.integrations.raster.renderer import winding_numbers
from pathgeom.path import Path
from pathgeom.shapes import Circle
from pathgeom.style import FillRule, PathStyle, TextStyle


def square_path(half: float) -> Path:
    return Path.from_points(
        [(-half, -half), (half, -half), (half, half), (-half, half)], closed=True
    )


@pytest.fixture
def renderer():
    r = RasterRenderer(100, 100)
    r.clear(Color.BLACK)
    return r


class TestCoordinates:
    def test_center_maps_to_image_center(self):
        assert to_pixel_coords(Vector2D(0, 0), 100, 80) == (50.0, 40.0)

    def test_y_axis_points_up(self):
        x, y = to_pixel_coords(Vector2D(10, 20), 100, 80)
        assert (x, y) == (60.0, 20.0)

    def test_polylines_per_subpath(self):
        path = square_path(10).move_to((0, 0)).line_to((5, 0))
        polylines = path_to_polylines(path, 100, 100)
        assert len(polylines) == 2
        assert polylines[0].closed
        assert not polylines[1].closed
        assert len(polylines[0]) == 4

    def test_curves_are_flattened(self):
        path = Path().move_to((0, 0)).cubic_to((1, 1), (2, 1), (3, 0))
        (polyline,) = path_to_polylines(path, 100, 100, curve_samples=8)
        assert len(polyline) == 8
        np.testing.assert_allclose(polyline.points[-1], [53.0, 50.0])


class TestWinding:
    def test_nested_squares(self):
        outer = square_path(10)
        inner = square_path(5)
        polylines = path_to_polylines(outer.extend(inner), 100, 100)
        xs = np.array([50.5, 57.5, 70.5])
        ys = np.array([50.5])
        winding = np.abs(winding_numbers(polylines, xs, ys))[0]
        assert list(winding) == [2, 1, 0]


class TestRasterRenderer:
    def test_dimensions_and_data_shape(self, renderer):
        assert renderer.dimensions() == (100, 100)
        data = renderer.data()
        assert data.shape == (100, 100, 4)
        assert data.dtype == np.uint8

    def test_rejects_non_positive_dimensions(self):
        with pytest.raises(ValueError):
            RasterRenderer(10, 0)

    def test_clear_fills_every_pixel(self):
        r = RasterRenderer(10, 10)
        r.clear(Color.RED)
        data = r.data()
        assert (data[..., 0] == 255).all()
        assert (data[..., 1] == 0).all()
        assert (data[..., 3] == 255).all()

    def test_fill(self, renderer):
        renderer.draw_path(square_path(10), PathStyle.fill(Color.WHITE))
        assert renderer.pixel(50, 50) == (255, 255, 255, 255)
        assert renderer.pixel(5, 5) == (0, 0, 0, 255)

    def test_fill_rule_even_odd_leaves_hole(self, renderer):
        path = square_path(20).extend(square_path(10))
        renderer.draw_path(path, PathStyle.fill(Color.WHITE).with_fill_rule(FillRule.EVEN_ODD))
        assert renderer.pixel(50, 50) == (0, 0, 0, 255)
        assert renderer.pixel(35, 50) == (255, 255, 255, 255)

    def test_fill_rule_non_zero_fills_hole(self, renderer):
        path = square_path(20).extend(square_path(10))
        renderer.draw_path(path, PathStyle.fill(Color.WHITE))
        assert renderer.pixel(50, 50) == (255, 255, 255, 255)

    def test_stroke_only_leaves_interior(self, renderer):
        renderer.draw_path(square_path(20), PathStyle.stroke(Color.GREEN, 2.0))
        assert renderer.pixel(50, 50) == (0, 0, 0, 255)
        # Left edge at x = -20 lands on pixel column 30
        assert renderer.pixel(30, 50)[1] == 255

    def test_opacity_blends(self, renderer):
        renderer.draw_path(square_path(10), PathStyle.fill(Color.WHITE).with_opacity(0.5))
        r, g, b, a = renderer.pixel(50, 50)
        assert 120 <= r <= 135
        assert a == 255

    def test_circle_shape(self, renderer):
        Circle(radius=20, fill_color=Color.RED, stroke_color=None).render(renderer)
        assert renderer.pixel(50, 50)[0] == 255
        assert renderer.pixel(50, 35)[0] == 255
        assert renderer.pixel(80, 50) == (0, 0, 0, 255)

    def test_empty_path_raises(self, renderer):
        with pytest.raises(RenderError):
            renderer.draw_path(Path(), PathStyle())

    def test_text_logs_warning(self, renderer, caplog):
        before = renderer.data()
        with caplog.at_level(logging.WARNING):
            renderer.draw_text("hello", Vector2D(0, 0), TextStyle())
        assert "hello" in caplog.text
        assert np.array_equal(before, renderer.data())

    def test_save_png(self, renderer, tmp_path):
        renderer.draw_path(square_path(10), PathStyle.fill(Color.BLUE))
        target = tmp_path / "sub" / "out.png"
        renderer.save_png(str(target))
        assert target.exists()
        with Image.open(target) as img:
            assert img.size == (100, 100)

    def test_save_png_failure(self, renderer, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")
        with pytest.raises(RenderError):
            renderer.save_png(blocker / "out.png")
