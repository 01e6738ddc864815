"""
grid.py — grid collaborator interfaces and an in-memory reference grid

The highlighter never walks a rendered table itself; it asks a
`MatrixTables` object for the handle of a cell by (matrix, row, column) in
grid coordinates (row/column 0 are headers). Handles carry their MatrixId
explicitly and expose style, glyph and bounding-box access.

`MemoryTables` and `ResultsTable` implement these interfaces without any
drawing backend. They are used headless and by the test-suite; the
matplotlib-backed grid lives in nwtrace.plot.tables.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Set, Tuple

import numpy as np

from .cells import BoundingBox, MatrixId


# ============================================================================
# INTERFACES
# ============================================================================

class CellHandle(Protocol):
    matrix: MatrixId

    def add_style(self, name: str) -> None: ...
    def remove_style(self, name: str) -> None: ...
    def has_style(self, name: str) -> bool: ...
    def glyphs(self) -> List[str]: ...
    def attach_glyph(self, name: str) -> None: ...
    def detach_glyph(self, name: str) -> None: ...
    def bbox(self) -> BoundingBox: ...


class MatrixTables(Protocol):
    def cell(self, matrix: MatrixId, row: int, column: int) -> Optional[CellHandle]: ...


class RowTable(Protocol):
    def row_cell(self, row_index: int) -> Optional[CellHandle]: ...


# ============================================================================
# IN-MEMORY CELLS
# ============================================================================

class GridCell:
    """
    A grid cell that records its styles and glyphs.

    The bounding box is computed on demand from the owning grid so that a
    change of cell size is seen by every later `bbox()` call.
    """

    def __init__(self, matrix: MatrixId, row: int, column: int, owner: Optional["MemoryTables"] = None):
        self.matrix = matrix
        self.row = row
        self.column = column
        self.styles: Set[str] = set()
        self._glyphs: List[str] = []
        self._owner = owner

    def __repr__(self) -> str:
        return f"GridCell({self.matrix.name}, {self.row}, {self.column}, styles={sorted(self.styles)})"

    def add_style(self, name: str) -> None:
        self.styles.add(name)

    def remove_style(self, name: str) -> None:
        self.styles.discard(name)

    def has_style(self, name: str) -> bool:
        return name in self.styles

    def glyphs(self) -> List[str]:
        return list(self._glyphs)

    def attach_glyph(self, name: str) -> None:
        self._glyphs.append(name)

    def detach_glyph(self, name: str) -> None:
        if name in self._glyphs:
            self._glyphs.remove(name)

    def bbox(self) -> BoundingBox:
        if self._owner is None:
            return BoundingBox(0.0, 0.0, 0.0, 0.0)
        return self._owner.box_of(self.matrix, self.row, self.column)


class MemoryTables:
    """
    Three rendered tables (one per MatrixId) laid out side by side.

    Parameters
    ----------
    shapes : mapping MatrixId -> (rows, cols)
        DP matrix shapes. The rendered grid adds one header row and column.
    cell_width, cell_height : float
        Pixel size of a cell.
    panel_gap : float
        Horizontal distance between two tables in pixels.
    """

    PANEL_ORDER = (MatrixId.VERTICAL, MatrixId.DEFAULT, MatrixId.HORIZONTAL)

    def __init__(
        self,
        shapes: Mapping[MatrixId, Tuple[int, int]],
        cell_width: float = 40.0,
        cell_height: float = 30.0,
        panel_gap: float = 60.0,
    ):
        self.cell_width = float(cell_width)
        self.cell_height = float(cell_height)
        self.panel_gap = float(panel_gap)
        self._cells: Dict[MatrixId, List[List[GridCell]]] = {}
        self._shapes: Dict[MatrixId, Tuple[int, int]] = {}
        for matrix, shape in shapes.items():
            self.reshape(matrix, shape)

    @classmethod
    def from_matrices(cls, matrices: Mapping[MatrixId, Optional[Iterable]], **kwargs) -> "MemoryTables":
        """Build tables sized after the given DP matrices (None entries skipped)."""
        shapes = {
            MatrixId(m): np.asarray(mat, dtype=object).shape[:2]
            for m, mat in matrices.items()
            if mat is not None
        }
        return cls(shapes, **kwargs)

    def reshape(self, matrix: MatrixId, shape: Tuple[int, int]) -> None:
        """
        Re-render one table for a DP matrix of the given shape.

        Cells that survive keep their styles and glyphs; cells outside the
        new shape disappear.
        """
        rows, cols = int(shape[0]) + 1, int(shape[1]) + 1
        old = self._cells.get(matrix, [])
        grid: List[List[GridCell]] = []
        for r in range(rows):
            line = []
            for c in range(cols):
                if r < len(old) and c < len(old[r]):
                    line.append(old[r][c])
                else:
                    line.append(GridCell(matrix, r, c, owner=self))
            grid.append(line)
        self._cells[matrix] = grid
        self._shapes[matrix] = (rows, cols)

    def set_cell_size(self, width: float, height: float) -> None:
        self.cell_width = float(width)
        self.cell_height = float(height)

    def cell(self, matrix: MatrixId, row: int, column: int) -> Optional[GridCell]:
        grid = self._cells.get(MatrixId(matrix))
        if grid is None or row < 0 or column < 0:
            return None
        if row >= len(grid) or column >= len(grid[row]):
            return None
        return grid[row][column]

    def cells(self) -> Iterable[GridCell]:
        for grid in self._cells.values():
            for line in grid:
                yield from line

    def _panel_left(self, matrix: MatrixId) -> float:
        left = 0.0
        for m in self.PANEL_ORDER:
            if m == matrix:
                return left
            if m in self._shapes:
                left += self._shapes[m][1] * self.cell_width + self.panel_gap
        return left

    def box_of(self, matrix: MatrixId, row: int, column: int) -> BoundingBox:
        left = self._panel_left(matrix) + column * self.cell_width
        top = row * self.cell_height
        return BoundingBox(left, top, self.cell_width, self.cell_height)

    def surface_size(self) -> Tuple[float, float]:
        """Pixel size of the whole layout."""
        width = 0.0
        height = 0.0
        for m in self.PANEL_ORDER:
            if m in self._shapes:
                rows, cols = self._shapes[m]
                width += cols * self.cell_width + self.panel_gap
                height = max(height, rows * self.cell_height)
        return width, height


class ResultsTable:
    """A results list whose rows are selectable through their first cell."""

    def __init__(self, n_rows: int):
        self._rows = [GridCell(MatrixId.DEFAULT, r, 0) for r in range(n_rows)]

    def __len__(self) -> int:
        return len(self._rows)

    def row_cell(self, row_index: int) -> Optional[GridCell]:
        if 0 <= row_index < len(self._rows):
            return self._rows[row_index]
        return None
