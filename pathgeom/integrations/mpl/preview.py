import logging
from typing import Optional, Sequence, Tuple

from pathgeom.bounding_box import BoundingBox
from pathgeom.integrations.mpl.path_converter import path_to_mpl
from pathgeom.path import Path
from pathgeom.style import PathStyle

logger = logging.getLogger(__name__)


def _mpl_color(color, opacity: float):
    if color is None:
        return "none"
    return (color.r, color.g, color.b, color.a * opacity)


def to_png(
    items: Sequence[Tuple[Path, PathStyle]],
    file_name: Optional[str] = None,
    width: int = 800,
    height: int = 600,
    margin: float = 0.1,
    background: str = "white",
) -> None:
    """
    Render paths to a PNG image using matplotlib.

    Args:
        items: Pairs of path and the style to draw it with
        file_name: Path to save the PNG file. If None, displays in a UI window instead.
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)
        margin: Margin around the drawing as a fraction of size (default: 0.1)
        background: matplotlib color of the axes background (default: "white")

    Raises:
        ValueError: If there is nothing to draw
        ImportError: If matplotlib is not installed
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import PathPatch
    except ImportError:
        raise ImportError(
            "matplotlib is required for path previews. Install with: pip install matplotlib"
        )

    drawable = [(path, style) for path, style in items if not path.is_empty()]
    if not drawable:
        raise ValueError("No paths to display")

    fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
    ax.set_aspect("equal")
    ax.set_facecolor(background)

    bounds: Optional[BoundingBox] = None
    for path, style in drawable:
        patch = PathPatch(
            path_to_mpl(path),
            facecolor=_mpl_color(style.fill_color, style.opacity),
            edgecolor=_mpl_color(style.stroke_color, style.opacity),
            linewidth=style.stroke_width if style.has_stroke() else 0.0,
        )
        ax.add_patch(patch)
        box = path.bounding_box()
        bounds = box if bounds is None else bounds.union(box)

    # Pad the view so strokes on the boundary stay visible
    size = max(bounds.width(), bounds.height(), 1e-9)
    pad = size * margin
    ax.set_xlim(bounds.min.x - pad, bounds.max.x + pad)
    ax.set_ylim(bounds.min.y - pad, bounds.max.y + pad)
    ax.grid(True, alpha=0.3)

    if file_name:
        fig.savefig(file_name, dpi=100, bbox_inches="tight")
        logger.info(f"Saved preview of {len(drawable)} paths to {file_name}")
        plt.close(fig)
    else:
        plt.show()
