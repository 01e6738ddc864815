"""
cells.py — cell addressing for the three coupled DP matrices

This module defines the small value types shared by every other part of
nwtrace:

  - MatrixId            : which of the three affine-gap matrices a cell is in.
  - CellAddress         : matrix-local (row, column) plus MatrixId.
  - BoundingBox         : pixel box of a rendered cell, top-down coordinates.
  - StaleCellReference  : a path cell has no counterpart in the current grid.
  - InvalidTransition   : two consecutive path cells cannot be connected.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple, Union

from . import default


# ============================================================================
# ERRORS
# ============================================================================

class StaleCellReference(LookupError):
    """A path cell does not resolve to a cell of the currently rendered grid."""


class InvalidTransition(AssertionError):
    """Two consecutive path cells lie in matrices that are never coupled."""


# ============================================================================
# MATRIX IDENTITY
# ============================================================================

class MatrixId(IntEnum):
    """
    Identity of one of the three coupled DP matrices.

    The integer value is the matrix number used by the table export and
    matches the Yg/M/Xg state ids of a Gotoh traceback (0 = vertical gaps,
    1 = main, 2 = horizontal gaps).
    """
    VERTICAL = 0
    DEFAULT = 1
    HORIZONTAL = 2

    @property
    def tag(self) -> str:
        return default.MATRIX_TAGS[int(self)]


# ============================================================================
# ADDRESSES AND BOXES
# ============================================================================

class CellAddress(NamedTuple):
    """
    Matrix-local address of a DP cell.

    Attributes
    ----------
    row, column : int
        DP indices (0-based, row/column 0 is the empty-prefix row/column).
    matrix : MatrixId
        Matrix the cell belongs to.
    """
    row: int
    column: int
    matrix: MatrixId = MatrixId.DEFAULT

    @classmethod
    def from_tuple(cls, t: Union["CellAddress", Tuple[int, ...]]) -> "CellAddress":
        """Build an address from (i, j) or (i, j, state)."""
        if isinstance(t, CellAddress):
            return t
        if len(t) == 2:
            i, j = t
            return cls(int(i), int(j))
        i, j, state = t
        return cls(int(i), int(j), MatrixId(int(state)))

    def grid_position(self) -> Tuple[int, int]:
        """Row/column of this cell in the rendered grid (header included)."""
        return self.row + default.GRID_OFFSET, self.column + default.GRID_OFFSET


class BoundingBox(NamedTuple):
    """Pixel box of a cell; `top` grows downwards."""
    left: float
    top: float
    width: float
    height: float


Path = List[CellAddress]


def as_path(cells: Sequence) -> Path:
    """Normalize a sequence of tuples/addresses into a list of CellAddress."""
    return [CellAddress.from_tuple(c) for c in cells]
