from .path_converter import Polyline, path_to_polylines, to_pixel_coords
from .renderer import RasterRenderer

__all__ = ["RasterRenderer", "Polyline", "path_to_polylines", "to_pixel_coords"]
