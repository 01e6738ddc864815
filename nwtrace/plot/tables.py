"""
DP matrix tables drawn with matplotlib/seaborn.

`MatplotlibTables` renders the vertical-gap, main and horizontal-gap
matrices as annotated heatmap panels (left to right) and hands out cell
handles that the highlighter marks, decorates with glyphs and measures.

Functions:
    - MatplotlibTables : figure-backed implementation of the grid collaborator
    - interactive_view : tables + overlay + highlighter wired together
"""

from typing import Dict, Optional, Set, Tuple

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.patches import Rectangle

from ..cells import BoundingBox, CellAddress, MatrixId
from ..session import AlignmentInput, AlignmentOutput
from .colors import (
    GLYPH_COLOR,
    GLYPH_TEXT,
    HEATMAP_COLORMAPS,
    HIGHLIGHT_ALPHA,
    NT_COLOR,
    STYLE_COLORS,
    STYLE_PRIORITY,
)
from .utils import annotation_labels, display_box, numeric_values, sequence_labels

PANEL_TITLES = {
    MatrixId.VERTICAL: "P (vertical gaps)",
    MatrixId.DEFAULT: "X (main)",
    MatrixId.HORIZONTAL: "Q (horizontal gaps)",
}

# glyph offsets inside the cell, data units from the top-left corner
GLYPH_OFFSETS = {
    "arrow_diagonal": (0.18, 0.22),
    "arrow_top": (0.5, 0.18),
    "arrow_left": (0.14, 0.5),
}


class MatplotlibCell:
    """
    Handle for one heatmap cell.

    Grid row/column 0 are the header labels, so the cell for grid position
    (row, column) covers data coordinates [column-1, column] x [row-1, row].
    """

    def __init__(self, ax: plt.Axes, matrix: MatrixId, row: int, column: int):
        self.ax = ax
        self.matrix = matrix
        self.row = row
        self.column = column
        self.styles: Set[str] = set()
        self._glyphs: Dict[str, plt.Text] = {}
        self._patch: Optional[Rectangle] = None

    @property
    def _origin(self) -> Tuple[float, float]:
        return float(self.column - 1), float(self.row - 1)

    def add_style(self, name: str) -> None:
        self.styles.add(name)
        self._refresh()

    def remove_style(self, name: str) -> None:
        self.styles.discard(name)
        self._refresh()

    def has_style(self, name: str) -> bool:
        return name in self.styles

    def _refresh(self) -> None:
        color = next((STYLE_COLORS[s] for s in STYLE_PRIORITY if s in self.styles), None)
        if color is None:
            if self._patch is not None:
                self._patch.remove()
                self._patch = None
            return
        if self._patch is None:
            self._patch = Rectangle(
                self._origin, 1, 1,
                facecolor=color, edgecolor="black", linewidth=1.0,
                alpha=HIGHLIGHT_ALPHA, zorder=3,
            )
            self.ax.add_patch(self._patch)
        else:
            self._patch.set_facecolor(color)

    def glyphs(self):
        return list(self._glyphs)

    def attach_glyph(self, name: str) -> None:
        x, y = self._origin
        dx, dy = GLYPH_OFFSETS.get(name, (0.2, 0.2))
        self._glyphs[name] = self.ax.text(
            x + dx, y + dy, GLYPH_TEXT.get(name, "?"),
            ha="center", va="center", fontsize=9,
            color=GLYPH_COLOR, fontweight="bold", zorder=4,
        )

    def detach_glyph(self, name: str) -> None:
        text = self._glyphs.pop(name, None)
        if text is not None:
            text.remove()

    def bbox(self) -> BoundingBox:
        x, y = self._origin
        return display_box(self.ax, x, y, x + 1, y + 1)


class MatplotlibTables:
    """
    Heatmap panels for the matrices of one algorithm run.

    Parameters
    ----------
    output : AlignmentOutput
        Matrices to draw; missing gap matrices get no panel.
    input : AlignmentInput
        Sequences labelling columns (sequence_a) and rows (sequence_b).
    figsize : tuple
        Figure size.
    colormap : str
        Seaborn/matplotlib colormap name.
    annotate : bool
        Write cell values into the panels.
    """

    PANEL_ORDER = (MatrixId.VERTICAL, MatrixId.DEFAULT, MatrixId.HORIZONTAL)

    def __init__(
        self,
        output: AlignmentOutput,
        input: AlignmentInput,
        figsize: Tuple[int, int] = (14, 6),
        colormap: str = HEATMAP_COLORMAPS['diverging'],
        annotate: bool = True,
        tick_fontsize: float = 10.0,
    ):
        matrices = {
            m: output.matrix_for(m) for m in self.PANEL_ORDER
            if output.matrix_for(m) is not None
        }
        if not matrices:
            raise ValueError("MatplotlibTables requires at least one matrix")

        self.shapes = {m: np.asarray(mat, dtype=object).shape[:2] for m, mat in matrices.items()}
        self._cells: Dict[Tuple[MatrixId, int, int], MatplotlibCell] = {}

        values = {m: numeric_values(mat) for m, mat in matrices.items()}
        finite = np.concatenate([v[np.isfinite(v)] for v in values.values()])
        vmin, vmax = (finite.min(), finite.max()) if finite.size else (0.0, 1.0)

        cmap = sns.color_palette(colormap, as_cmap=True)
        cmap.set_bad(color="grey")

        self.figure, axes = plt.subplots(1, len(matrices), figsize=figsize, squeeze=False)
        self.axes: Dict[MatrixId, plt.Axes] = {}

        xticklabels = sequence_labels(input.sequence_a)
        yticklabels = sequence_labels(input.sequence_b)

        for ax, (m, mat) in zip(axes[0], matrices.items()):
            rows, cols = self.shapes[m]
            sns.heatmap(
                values[m],
                ax=ax,
                cmap=cmap,
                center=0,
                vmin=vmin,
                vmax=vmax,
                square=True,
                cbar=False,
                annot=annotation_labels(mat) if annotate else False,
                fmt="",
                xticklabels=xticklabels[:cols],
                yticklabels=yticklabels[:rows],
            )
            ax.set_title(PANEL_TITLES[m])
            ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
            for tick, seq_char in zip(ax.get_xticklabels(), " " + input.sequence_a):
                tick.set_rotation(0)
                tick.set_color(NT_COLOR.get(seq_char.upper(), "black"))
                tick.set_fontsize(tick_fontsize)
            for tick, seq_char in zip(ax.get_yticklabels(), " " + input.sequence_b):
                tick.set_rotation(0)
                tick.set_color(NT_COLOR.get(seq_char.upper(), "black"))
                tick.set_fontsize(tick_fontsize)
            self.axes[m] = ax

        self.figure.tight_layout()

    def cell(self, matrix: MatrixId, row: int, column: int) -> Optional[MatplotlibCell]:
        matrix = MatrixId(matrix)
        if matrix not in self.axes:
            return None
        rows, cols = self.shapes[matrix]
        if not (1 <= row <= rows and 1 <= column <= cols):
            return None
        key = (matrix, row, column)
        if key not in self._cells:
            self._cells[key] = MatplotlibCell(self.axes[matrix], matrix, row, column)
        return self._cells[key]

    def address_at(self, event) -> Optional[CellAddress]:
        """DP address of the cell under a mouse event, if any."""
        if event.x is None or event.y is None:
            return None
        for m, ax in self.axes.items():
            if not ax.bbox.contains(event.x, event.y):
                continue
            x, y = ax.transData.inverted().transform((event.x, event.y))
            rows, cols = self.shapes[m]
            i, j = int(np.floor(y)), int(np.floor(x))
            if 0 <= i < rows and 0 <= j < cols:
                return CellAddress(i, j, m)
        return None


def interactive_view(algorithm, input: AlignmentInput, output: AlignmentOutput, **kwargs):
    """
    Draw the matrices of a run and wire up highlighting.

    Clicking a cell shows its flows; resizing the window redraws the long
    arrows. Returns (highlighter, tables).

    Examples
    --------
    >>> hl, tables = interactive_view(algo, inp, out)
    >>> hl.show_traceback(0)
    >>> plt.show()
    """
    from ..highlighter import PathHighlighter
    from .overlay import FigureOverlay

    tables = MatplotlibTables(output, input, **kwargs)
    highlighter = PathHighlighter(overlay=FigureOverlay(tables.figure))
    highlighter.share_information(algorithm, input, output)
    highlighter.bind_tables(tables)
    highlighter.connect_resize(tables.figure.canvas)

    def on_click(event):
        address = tables.address_at(event)
        if address is not None:
            highlighter.show_flow(address)
            tables.figure.canvas.draw_idle()

    tables.figure.canvas.mpl_connect("button_press_event", on_click)
    return highlighter, tables
