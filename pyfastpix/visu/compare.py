"""
Before/after comparison figures.

Uses matplotlib's object API (no pyplot) so figures can be written from
scripts and tests without an interactive backend.

Author: B.G.
"""

import numpy as np
from matplotlib.figure import Figure

from .. import constants as cte


def _as_array(rgba, width, height):
    return np.frombuffer(bytes(rgba), dtype=np.uint8).reshape(height, width, cte.CHANNELS)


def compare_figure(original, processed, width: int, height: int, title: str = "processed"):
    """
    Build a two-panel figure: original image on the left, result on the right.

    Args:
        original: DecodedImage before processing
        processed: RGBA buffer produced by an engine operation
        width: Width of ``processed``
        height: Height of ``processed``
        title: Title of the right panel

    Returns:
        matplotlib.figure.Figure
    """
    fig = Figure(figsize=(8, 4))
    ax_l, ax_r = fig.subplots(1, 2)
    ax_l.imshow(original.to_array())
    ax_l.set_title(f"original {original.width}x{original.height}")
    ax_r.imshow(_as_array(processed, width, height))
    ax_r.set_title(f"{title} {width}x{height}")
    for ax in (ax_l, ax_r):
        ax.set_axis_off()
    fig.subplots_adjust(left=0.02, right=0.98, bottom=0.02, top=0.9, wspace=0.05)
    return fig


def save_comparison(path, original, processed, width: int, height: int, title: str = "processed"):
    """Render ``compare_figure`` to an image file."""
    fig = compare_figure(original, processed, width, height, title=title)
    fig.savefig(path, dpi=100)
    return path


__all__ = ["compare_figure", "save_comparison"]
