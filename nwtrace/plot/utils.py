"""
Shared utilities for nwtrace plotting.

- Character labels for sequence axes
- Matrix annotation text (symbolic infinities)
- Display-to-page coordinate conversion
"""

from typing import List

import numpy as np
import matplotlib.pyplot as plt

from ..cells import BoundingBox
from ..export import format_value, to_exportable_symbols
from .. import default


# =============================================================================
# LABELS
# =============================================================================

def format_char_label(character: str, index: int) -> str:
    """
    Axis label for one sequence character: upper-case letter with its
    1-based position as subscript (mathtext).
    """
    return f"{character.upper()}$_{{{index}}}$"


def sequence_labels(sequence: str) -> List[str]:
    """Header labels for a sequence axis, the first (empty prefix) blank."""
    return [""] + [format_char_label(c, k) for k, c in enumerate(sequence, start=1)]


def annotation_labels(matrix) -> np.ndarray:
    """
    Cell annotation strings for a DP matrix.

    Infinities are shown through their symbolic markers, typeset as
    mathtext.
    """
    symbols = to_exportable_symbols(matrix)

    def _label(value):
        if value in (default.POSITIVE_INFINITY_SYMBOL, default.NEGATIVE_INFINITY_SYMBOL):
            return f"${value}$"
        return format_value(value)

    return np.vectorize(_label, otypes=[object])(symbols)


def numeric_values(matrix) -> np.ndarray:
    """Float copy of a matrix for color mapping, infinities/markers as NaN."""
    mat = np.asarray(matrix, dtype=object)

    def _num(value):
        try:
            v = float(value)
        except (TypeError, ValueError):
            return np.nan
        return v if np.isfinite(v) else np.nan

    if mat.size == 0:
        return np.zeros(mat.shape, dtype=float)
    return np.vectorize(_num, otypes=[float])(mat)


# =============================================================================
# COORDINATES
# =============================================================================

def display_box(ax: plt.Axes, x0: float, y0: float, x1: float, y1: float) -> BoundingBox:
    """
    Pixel box of a data-space rectangle, with `top` measured downwards
    from the top edge of the figure.
    """
    (px0, py0), (px1, py1) = ax.transData.transform([(x0, y0), (x1, y1)])
    fig_height = ax.figure.bbox.height
    left, right = min(px0, px1), max(px0, px1)
    bottom, top = min(py0, py1), max(py0, py1)
    return BoundingBox(float(left), float(fig_height - top), float(right - left), float(top - bottom))
