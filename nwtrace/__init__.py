"""
nwtrace: traceback and flow highlighting for affine-gap DP matrices.
"""

# =============================================================================
# CORE
# =============================================================================

from .cells import (
    BoundingBox,
    CellAddress,
    InvalidTransition,
    MatrixId,
    StaleCellReference,
    as_path,
)

from .geometry import (
    Move,
    classify_move,
    line_anchors,
)

from .default import LineFractions

from .grid import (
    GridCell,
    MemoryTables,
    ResultsTable,
)

from .marker import CellMarker
from .overlay import OverlayCanvas, OverlayLine

from .session import (
    AlignmentInput,
    AlignmentOutput,
    HighlightSession,
)

from .highlighter import PathHighlighter

# =============================================================================
# EXPORT
# =============================================================================

from .export import (
    replace_infinities,
    to_exportable_symbols,
    table_to_csv,
    export_matrix,
    download_table,
)

# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install nwtrace[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "nwtrace[plot]"'
    )

try:
    from .plot import (
        FigureOverlay,
        MatplotlibTables,
        interactive_view,
    )
    PLOT_AVAILABLE = True
except ImportError:
    # These will raise ImportError if accessed without matplotlib/seaborn
    class FigureOverlay:
        def __init__(*args, **kwargs):
            raise _missing_plot_dep("FigureOverlay")
    class MatplotlibTables:
        def __init__(*args, **kwargs):
            raise _missing_plot_dep("MatplotlibTables")
    def interactive_view(*args, **kwargs):
        raise _missing_plot_dep("interactive_view")
    PLOT_AVAILABLE = False


__all__ = [
    # Cells
    "BoundingBox",
    "CellAddress",
    "InvalidTransition",
    "MatrixId",
    "StaleCellReference",
    "as_path",
    # Geometry
    "Move",
    "classify_move",
    "line_anchors",
    "LineFractions",
    # Grid, marker, overlay
    "GridCell",
    "MemoryTables",
    "ResultsTable",
    "CellMarker",
    "OverlayCanvas",
    "OverlayLine",
    # Session and highlighter
    "AlignmentInput",
    "AlignmentOutput",
    "HighlightSession",
    "PathHighlighter",
    # Export
    "replace_infinities",
    "to_exportable_symbols",
    "table_to_csv",
    "export_matrix",
    "download_table",
    # Plotting
    "PLOT_AVAILABLE",
    "FigureOverlay",
    "MatplotlibTables",
    "interactive_view",
]
