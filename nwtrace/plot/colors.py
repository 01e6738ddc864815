"""
Color constants for nwtrace plotting.

This module defines the colors used for matrix panels, cell highlight
styles and overlay arrows.
"""

from .. import default

# =============================================================================
# NUCLEOTIDE COLORS
# =============================================================================

# Nucleotide colors for axis labels
NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # soft warm ochre
    "T": "#C26F6F",  # soft red
    "": "#000000",
}


# =============================================================================
# CELL HIGHLIGHT STYLES
# =============================================================================

STYLE_COLORS = {
    default.SELECTED: "#F5D142",         # traceback yellow
    default.TIER_STYLES[0]: "#F4A3A3",   # light red (first flow)
    default.TIER_STYLES[1]: "#F9CFCF",   # very light red
    default.TIER_STYLES[2]: "#D94C4C",   # red
    default.TERMINAL: "#6CC46C",         # green end cell
}

# First match wins when a cell carries several styles
STYLE_PRIORITY = (
    default.TERMINAL,
    default.TIER_STYLES[2],
    default.TIER_STYLES[0],
    default.TIER_STYLES[1],
    default.SELECTED,
)

HIGHLIGHT_ALPHA = 0.65


# =============================================================================
# ARROWS
# =============================================================================

TRACEBACK_LONG_ARROW_COLOR = "#1B5DAA"  # strong blue
FLOW_LONG_ARROW_COLOR = "#C53030"       # red

GLYPH_TEXT = {
    default.GLYPHS["DIAGONAL"]: "↖",
    default.GLYPHS["STEP_UP"]: "↑",
    default.GLYPHS["STEP_LEFT"]: "←",
}

GLYPH_COLOR = "#222222"


# =============================================================================
# HEATMAP COLORMAPS
# =============================================================================
HEATMAP_COLORMAPS = {
    'default': 'Reds',
    'diverging': 'RdBu_r',
}
