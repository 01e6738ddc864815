"""
default.py — Default parameters for nwtrace

Named fractions for long-arrow geometry, the cell style vocabulary used by
the marker, and the constants of the CSV table export.
"""

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Long-arrow geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LineFractions:
    """
    Fractional anchor offsets for long-distance lines.

    Attributes
    ----------
    line_offset : float
        Distance of a line end from the cell's left/top edge, as a fraction
        of the cell width/height.
    head_penetration : float
        How far the arrowhead end reaches into the origin cell, measured
        from the far edge.
    """
    line_offset: float = 0.3
    head_penetration: float = 0.1


LINE_FRACTIONS = LineFractions()

## Offset between DP indices and rendered grid indices (row/col 0 is header)
GRID_OFFSET = 1


# ---------------------------------------------------------------------------
# Cell styles
# ---------------------------------------------------------------------------

SELECTED = "selected"
TERMINAL = "selected_green"

# flow index 0, 1, 2+
TIER_STYLES = ("selected_light_red", "selected_very_light_red", "selected_red")

# Glyph names keyed by Move name
GLYPHS = {
    "DIAGONAL": "arrow_diagonal",
    "STEP_UP": "arrow_top",
    "STEP_LEFT": "arrow_left",
}


# ---------------------------------------------------------------------------
# Matrices and export
# ---------------------------------------------------------------------------

MATRIX_TAGS = {
    0: "P",  # vertical gaps
    1: "X",  # main matrix
    2: "Q",  # horizontal gaps
}

POSITIVE_INFINITY_SYMBOL = "\\infty"
NEGATIVE_INFINITY_SYMBOL = "-\\infty"

POSITIVE_INFINITY_TEXT = "Infinity"
NEGATIVE_INFINITY_TEXT = "-Infinity"

TABLE_DOWNLOAD_NAME = "table.csv"
TABLE_MIME_TYPE = "text/csv"
TABLE_ENCODING = "utf-8"
