"""
nwtrace plotting package.

Submodules:
    - plot.colors: Color constants for panels, highlights and arrows
    - plot.utils: Labels, annotations and coordinate helpers
    - plot.tables: Heatmap tables implementing the grid collaborator
    - plot.overlay: Figure-wide overlay for long arrows

Example imports:
    from nwtrace.plot import interactive_view
    from nwtrace.plot.colors import STYLE_COLORS
"""

from .colors import (
    NT_COLOR,
    STYLE_COLORS,
    TRACEBACK_LONG_ARROW_COLOR,
    FLOW_LONG_ARROW_COLOR,
)

from .utils import (
    format_char_label,
    sequence_labels,
    annotation_labels,
)

from .tables import (
    MatplotlibCell,
    MatplotlibTables,
    interactive_view,
)

from .overlay import FigureOverlay


__all__ = [
    # Colors
    "NT_COLOR",
    "STYLE_COLORS",
    "TRACEBACK_LONG_ARROW_COLOR",
    "FLOW_LONG_ARROW_COLOR",
    # Utils
    "format_char_label",
    "sequence_labels",
    "annotation_labels",
    # Tables
    "MatplotlibCell",
    "MatplotlibTables",
    "interactive_view",
    # Overlay
    "FigureOverlay",
]
