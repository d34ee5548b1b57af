"""
Visualisation helpers for PyFastPix.

Available Functions:
- compare_figure: Side-by-side original/processed matplotlib figure
- save_comparison: Write that figure to disk

Author: B.G.
"""

from .compare import compare_figure, save_comparison

__all__ = ["compare_figure", "save_comparison"]
