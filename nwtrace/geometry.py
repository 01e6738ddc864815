"""
geometry.py — move classification and long-arrow anchor geometry

Two pure functions drive all arrow rendering:

  - classify_move : tags the step between two consecutive path cells.
  - line_anchors  : maps a long (or cross-matrix) move and the pixel boxes
                    of its two cells to the end points of an overlay line.

Short moves (diagonal, up, left) are rendered as glyphs attached to the
destination cell and never reach line_anchors.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from .cells import BoundingBox, CellAddress, InvalidTransition, MatrixId
from .default import LINE_FRACTIONS, LineFractions


# ============================================================================
# MOVE CLASSIFICATION
# ============================================================================

class Move(Enum):
    DIAGONAL = "diagonal"
    STEP_LEFT = "left"
    STEP_UP = "up"
    LONG_VERTICAL = "vertical"
    LONG_HORIZONTAL = "horizontal"
    P_TO_X = "p_to_x"
    Q_TO_X = "q_to_x"
    X_TO_P = "x_to_p"
    X_TO_Q = "x_to_q"
    NONE = "none"

    @property
    def is_short(self) -> bool:
        """True for adjacent same-matrix moves drawn as cell glyphs."""
        return self in (Move.DIAGONAL, Move.STEP_LEFT, Move.STEP_UP)

    @property
    def is_long(self) -> bool:
        """True for moves drawn as overlay lines."""
        return not self.is_short and self is not Move.NONE


# (from-matrix, to-matrix) -> move
CROSS_MATRIX_MOVES: Dict[Tuple[MatrixId, MatrixId], Move] = {
    (MatrixId.VERTICAL, MatrixId.DEFAULT): Move.P_TO_X,
    (MatrixId.HORIZONTAL, MatrixId.DEFAULT): Move.Q_TO_X,
    (MatrixId.DEFAULT, MatrixId.VERTICAL): Move.X_TO_P,
    (MatrixId.DEFAULT, MatrixId.HORIZONTAL): Move.X_TO_Q,
}


def classify_move(from_cell: CellAddress, to_cell: CellAddress) -> Move:
    """
    Classify the step from one path cell to the next.

    Parameters
    ----------
    from_cell : CellAddress
        Earlier cell of the path.
    to_cell : CellAddress
        Later cell of the path.

    Returns
    -------
    Move
        NONE when the two cells are in the same matrix but no rule applies
        (e.g. a repeated cell).

    Raises
    ------
    InvalidTransition
        If the cells lie in two matrices that are not coupled
        (vertical <-> horizontal).
    """
    if from_cell.matrix != to_cell.matrix:
        key = (MatrixId(from_cell.matrix), MatrixId(to_cell.matrix))
        if key not in CROSS_MATRIX_MOVES:
            raise InvalidTransition(
                f"No transition from {key[0].name} to {key[1].name} "
                f"({from_cell} -> {to_cell})"
            )
        return CROSS_MATRIX_MOVES[key]

    di = to_cell.row - from_cell.row
    dj = to_cell.column - from_cell.column

    if di == 1 and dj == 1:
        return Move.DIAGONAL
    if di == 0 and dj == 1:
        return Move.STEP_LEFT
    if di == 1 and dj == 0:
        return Move.STEP_UP
    if di > 1:
        return Move.LONG_VERTICAL
    if dj > 1:
        return Move.LONG_HORIZONTAL
    return Move.NONE


# ============================================================================
# LINE GEOMETRY
# ============================================================================

# move -> ((to_x, to_y), (from_x, from_y)), each a position keyword:
#   "line" = line_offset, "far" = 1 - line_offset, "head" = 1 - head_penetration
# Cross-matrix rules follow the (from, to) matrix pair; X_TO_P, for example,
# puts the to-anchor in the lower right of the vertical-gap cell.
ANCHOR_RULES: Dict[Move, Tuple[Tuple[str, str], Tuple[str, str]]] = {
    Move.LONG_HORIZONTAL: (("line", "line"), ("head", "line")),
    Move.LONG_VERTICAL:   (("line", "line"), ("line", "head")),
    Move.X_TO_P:          (("far", "far"),   ("far", "line")),
    Move.X_TO_Q:          (("line", "line"), ("far", "far")),
    Move.P_TO_X:          (("line", "line"), ("line", "far")),
    Move.Q_TO_X:          (("line", "far"),  ("line", "line")),
}


def _fraction(position: str, fractions: LineFractions) -> float:
    if position == "line":
        return fractions.line_offset
    if position == "far":
        return 1.0 - fractions.line_offset
    if position == "head":
        return 1.0 - fractions.head_penetration
    raise ValueError(f"Unknown anchor position {position!r}")


def _anchor(box: BoundingBox, rule: Tuple[str, str], fractions: LineFractions) -> Tuple[float, float]:
    fx, fy = rule
    return (
        box.left + box.width * _fraction(fx, fractions),
        box.top + box.height * _fraction(fy, fractions),
    )


def line_anchors(
    move: Move,
    to_box: BoundingBox,
    from_box: BoundingBox,
    fractions: LineFractions = LINE_FRACTIONS,
) -> Tuple[float, float, float, float]:
    """
    End points of the overlay line for a long or cross-matrix move.

    Parameters
    ----------
    move : Move
        A move with `move.is_long`.
    to_box, from_box : BoundingBox
        Pixel boxes of the later and the earlier path cell.
    fractions : LineFractions
        Named fractional offsets (see nwtrace.default).

    Returns
    -------
    (x1, y1, x2, y2) : tuple of float
        (x1, y1) lies in the `to` cell, (x2, y2) is the arrowhead end in
        the `from` cell.
    """
    if move not in ANCHOR_RULES:
        raise ValueError(f"{move.name} is not drawn as a line")
    to_rule, from_rule = ANCHOR_RULES[move]
    x1, y1 = _anchor(to_box, to_rule, fractions)
    x2, y2 = _anchor(from_box, from_rule, fractions)
    return x1, y1, x2, y2
