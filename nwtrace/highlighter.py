"""
highlighter.py — traceback and flow highlighting on top of the DP tables

PathHighlighter is the stateful core of nwtrace. It keeps one traceback
path and one set of flows (one-step predecessor paths of a clicked cell) on
display, and for both kinds:

  - marks every path cell (plain selection for tracebacks, one intensity
    tier per flow; the last cell of a path gets the terminal style),
  - places a glyph on the destination cell of every adjacent move,
  - draws an overlay line for every long or cross-matrix move and records
    it in the session so it can be removed again.

Showing a new path of one kind first demarks the previous one of that kind.
Demarking removes every overlay line and re-marks the other kind, so cells
shared by both kinds keep their highlight and no line is left behind.

Cells that no longer exist in the rendered tables (e.g. the tables were
re-rendered for shorter sequences) are skipped.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from . import default
from . import export
from .cells import CellAddress, Path, StaleCellReference, as_path
from .default import LINE_FRACTIONS, LineFractions
from .geometry import Move, classify_move, line_anchors
from .grid import CellHandle, MatrixTables, RowTable
from .marker import CellMarker
from .overlay import OverlayCanvas
from .session import AlignmentInput, AlignmentOutput, HighlightSession, TraceSource

logger = logging.getLogger(__name__)

FLOW_DEPTH = 1


class PathHighlighter:
    """
    Controller for path/flow highlighting, row selection and table export.

    Parameters
    ----------
    tables : MatrixTables, optional
        Rendered tables; can be (re)bound later with `bind_tables`.
    overlay : OverlayCanvas, optional
        Surface for long-distance lines. A headless surface by default.
    session : HighlightSession, optional
        State container; a fresh one by default.
    marker : CellMarker, optional
    fractions : LineFractions
        Anchor fractions for long lines.
    """

    def __init__(
        self,
        tables: Optional[MatrixTables] = None,
        overlay: Optional[OverlayCanvas] = None,
        session: Optional[HighlightSession] = None,
        marker: Optional[CellMarker] = None,
        fractions: LineFractions = LINE_FRACTIONS,
    ):
        self.tables = tables
        self.overlay = overlay if overlay is not None else OverlayCanvas(size_provider=self._surface_size)
        self.session = session if session is not None else HighlightSession()
        self.marker = marker if marker is not None else CellMarker()
        self.fractions = fractions

    # ------------------------------------------------------------------
    # Session management
    # ------------------------------------------------------------------

    def bind_tables(self, tables: MatrixTables) -> None:
        """Point the highlighter at freshly rendered tables."""
        self.tables = tables

    def share_information(
        self,
        algorithm: TraceSource,
        input: AlignmentInput,
        output: AlignmentOutput,
    ) -> None:
        """Replace the session bundle with a new algorithm run."""
        self.reset()
        self.session.algorithm = algorithm
        self.session.input = input
        self.session.output = output

    def reset(self) -> None:
        """Hide everything and forget the shared run."""
        for address, cell in self._resolved(self.session.last_path):
            self.marker.demark(cell, None)
            self.marker.clear_arrows(cell)
        for tier, flow in enumerate(self.session.last_flows):
            for address, cell in self._resolved(flow):
                self.marker.demark(cell, tier)
                self.marker.clear_arrows(cell)
        self._remove_all_lines()
        self.session.clear()

    remove_all_contents = reset

    # ------------------------------------------------------------------
    # Tracebacks and flows
    # ------------------------------------------------------------------

    def show_traceback(self, index: int) -> None:
        """
        Toggle the display of traceback path `index`.

        Showing the path that is already on display (and still marked)
        hides it; any other path replaces the current one.
        """
        path = self.session.output.traceback_paths[index]
        last_path = self.session.last_path

        if last_path:
            if path is last_path and self._origin_selected(last_path):
                self._demark_cells(last_path, None, flow_mode=False)
                self.session.last_path = []
                return
            self._demark_cells(last_path, None, flow_mode=False)

        self._mark_cells(path, None, flow_mode=False)
        self.session.last_path = path

    def show_flow(self, cell: Union[CellAddress, Tuple[int, ...]]) -> List[Path]:
        """
        Show the one-step predecessor paths of `cell`.

        Returns the flows, origin first, in tier order.
        """
        algorithm = self.session.algorithm
        if algorithm is None:
            raise RuntimeError("show_flow called before share_information")

        seed = CellAddress.from_tuple(cell)
        traces = algorithm.get_traces(
            [seed], self.session.input, self.session.output, FLOW_DEPTH
        )
        flows = [as_path(trace)[::-1] for trace in traces]

        for tier, flow in enumerate(self.session.last_flows):
            self._demark_cells(flow, tier, flow_mode=True)

        for tier, flow in enumerate(flows):
            self._mark_cells(flow, tier, flow_mode=True)

        self.session.last_flows = flows
        return flows

    def redraw(self, event=None) -> None:
        """
        Redraw all long-distance lines, e.g. after a resize.

        Cell styles and glyphs are left as they are.
        """
        logger.debug("Redrawing overlay (%s)", getattr(event, "name", event))
        self._remove_all_lines()
        self._draw_arrows(self.session.last_path, flow_mode=False, glyphs=False)
        for flow in self.session.last_flows:
            self._draw_arrows(flow, flow_mode=True, glyphs=False)

    def connect_resize(self, canvas) -> int:
        """Redraw on every `resize_event` of a matplotlib canvas."""
        return canvas.mpl_connect("resize_event", self.redraw)

    # ------------------------------------------------------------------
    # Results table
    # ------------------------------------------------------------------

    def highlight_row(self, row_number: int, table: RowTable) -> None:
        """Single-selection toggle over the rows of a results table."""
        last_number = self.session.last_row_number
        cell = table.row_cell(row_number)
        last_cell = table.row_cell(last_number) if last_number >= 0 else None

        if row_number == last_number and last_cell is not None and last_cell.has_style(default.SELECTED):
            last_cell.remove_style(default.SELECTED)
        else:
            if last_cell is not None:
                last_cell.remove_style(default.SELECTED)
            if cell is not None:
                cell.add_style(default.SELECTED)

        self.session.last_row_number = row_number

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_matrix(self, matrix_number: int) -> str:
        return export.export_matrix(self.session.output, self.session.input, matrix_number)

    def download_table(self, matrix_number: int, directory="."):
        return export.download_table(
            self.session.output, self.session.input, matrix_number, directory
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _surface_size(self) -> Tuple[float, float]:
        surface_size = getattr(self.tables, "surface_size", None)
        if surface_size is None:
            return self.overlay.width, self.overlay.height
        return surface_size()

    def _resolve(self, address: CellAddress) -> CellHandle:
        if self.tables is None:
            raise StaleCellReference("no tables bound")
        row, column = address.grid_position()
        cell = self.tables.cell(address.matrix, row, column)
        if cell is None:
            raise StaleCellReference(f"{address} is not in the rendered tables")
        return cell

    def _resolved(self, path: Sequence[CellAddress]) -> Iterator[Tuple[CellAddress, Optional[CellHandle]]]:
        """Yield (address, handle) for the live cells of a path."""
        for address in path:
            try:
                yield address, self._resolve(address)
            except StaleCellReference as exc:
                logger.debug("Skipping cell: %s", exc)

    def _origin_selected(self, path: Path) -> bool:
        try:
            return self._resolve(path[0]).has_style(default.SELECTED)
        except StaleCellReference:
            return False

    def _mark_cells(self, path: Path, tier: Optional[int], flow_mode: bool) -> None:
        last = len(path) - 1
        for k, address in enumerate(path):
            try:
                cell = self._resolve(address)
            except StaleCellReference as exc:
                logger.debug("Skipping cell: %s", exc)
                continue
            self.marker.mark(cell, tier, is_terminal=(k == last))
        self._draw_arrows(path, flow_mode)

    def _demark_cells(self, path: Path, tier: Optional[int], flow_mode: bool) -> None:
        for address, cell in self._resolved(path):
            self.marker.demark(cell, tier)
            self.marker.clear_arrows(cell)

        self._remove_all_lines()

        # restore the other kind
        if flow_mode:
            self._mark_cells(self.session.last_path, None, flow_mode=False)
        else:
            for k, flow in enumerate(self.session.last_flows):
                self._mark_cells(flow, k, flow_mode=True)

    def _draw_arrows(self, path: Path, flow_mode: bool, glyphs: bool = True) -> None:
        previous = None
        for address in path:
            try:
                cell = self._resolve(address)
            except StaleCellReference:
                previous = None
                continue
            if previous is not None:
                self._place_arrow(previous, (address, cell), flow_mode, glyphs)
            previous = (address, cell)

    def _place_arrow(self, previous, current, flow_mode: bool, glyphs: bool) -> None:
        last_address, last_cell = previous
        address, cell = current
        move = classify_move(last_address, address)

        if move.is_short:
            if glyphs:
                self.marker.place_short_arrow(cell, move)
        elif move is not Move.NONE:
            self._draw_line(move, cell, last_cell, flow_mode)

    def _draw_line(self, move: Move, cell: CellHandle, last_cell: CellHandle, flow_mode: bool) -> None:
        x1, y1, x2, y2 = line_anchors(move, cell.bbox(), last_cell.bbox(), self.fractions)
        line = self.overlay.add_line(x1, y1, x2, y2, flow=flow_mode)
        self.session.cell_lines.append(line)

    def _remove_all_lines(self) -> None:
        while self.session.cell_lines:
            line = self.session.cell_lines.pop()
            if self.overlay.contains(line):
                self.overlay.remove_line(line)
