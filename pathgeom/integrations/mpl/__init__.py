from .path_converter import path_to_mpl
from .preview import to_png

__all__ = ["path_to_mpl", "to_png"]
