"""Tests for move classification and long-line anchor geometry."""

import pytest

from nwtrace.cells import BoundingBox, CellAddress, InvalidTransition, MatrixId
from nwtrace.default import LineFractions
from nwtrace.geometry import ANCHOR_RULES, Move, classify_move, line_anchors

D, P, Q = MatrixId.DEFAULT, MatrixId.VERTICAL, MatrixId.HORIZONTAL


class TestClassifyMove:
    @pytest.mark.parametrize("matrix", list(MatrixId))
    def test_adjacent_moves(self, matrix):
        a = CellAddress(3, 4, matrix)
        assert classify_move(a, CellAddress(4, 5, matrix)) is Move.DIAGONAL
        assert classify_move(a, CellAddress(3, 5, matrix)) is Move.STEP_LEFT
        assert classify_move(a, CellAddress(4, 4, matrix)) is Move.STEP_UP

    @pytest.mark.parametrize("delta", [2, 3, 10])
    def test_long_moves(self, delta):
        a = CellAddress(1, 1, D)
        assert classify_move(a, CellAddress(1 + delta, 1, D)) is Move.LONG_VERTICAL
        assert classify_move(a, CellAddress(1, 1 + delta, D)) is Move.LONG_HORIZONTAL

    def test_adjacent_moves_are_short(self):
        for di in (0, 1):
            for dj in (0, 1):
                if di == dj == 0:
                    continue
                move = classify_move(CellAddress(0, 0), CellAddress(di, dj))
                assert move.is_short
                assert not move.is_long

    @pytest.mark.parametrize("src,dst,expected", [
        (P, D, Move.P_TO_X),
        (Q, D, Move.Q_TO_X),
        (D, P, Move.X_TO_P),
        (D, Q, Move.X_TO_Q),
    ])
    def test_cross_matrix(self, src, dst, expected):
        # deltas do not matter across matrices
        assert classify_move(CellAddress(1, 1, src), CellAddress(1, 1, dst)) is expected
        assert classify_move(CellAddress(0, 0, src), CellAddress(1, 1, dst)) is expected

    @pytest.mark.parametrize("src,dst", [(P, Q), (Q, P)])
    def test_uncoupled_matrices_raise(self, src, dst):
        with pytest.raises(InvalidTransition):
            classify_move(CellAddress(1, 1, src), CellAddress(1, 2, dst))

    def test_no_rule(self):
        a = CellAddress(2, 2, D)
        assert classify_move(a, a) is Move.NONE
        assert classify_move(a, CellAddress(1, 1, D)) is Move.NONE


class TestLineAnchors:
    TO = BoundingBox(100.0, 200.0, 40.0, 20.0)
    FROM = BoundingBox(0.0, 0.0, 40.0, 20.0)
    FRACTIONS = LineFractions(line_offset=0.25, head_penetration=0.1)

    def test_horizontal(self):
        x1, y1, x2, y2 = line_anchors(Move.LONG_HORIZONTAL, self.TO, self.FROM, self.FRACTIONS)
        assert (x1, y1) == (110.0, 205.0)
        assert (x2, y2) == (36.0, 5.0)

    def test_vertical(self):
        x1, y1, x2, y2 = line_anchors(Move.LONG_VERTICAL, self.TO, self.FROM, self.FRACTIONS)
        assert (x1, y1) == (110.0, 205.0)
        assert (x2, y2) == (10.0, 18.0)

    def test_p_to_x(self):
        assert line_anchors(Move.P_TO_X, self.TO, self.FROM, self.FRACTIONS) == (110.0, 205.0, 10.0, 15.0)

    def test_x_to_q(self):
        assert line_anchors(Move.X_TO_Q, self.TO, self.FROM, self.FRACTIONS) == (110.0, 205.0, 30.0, 15.0)

    def test_q_to_x(self):
        assert line_anchors(Move.Q_TO_X, self.TO, self.FROM, self.FRACTIONS) == (110.0, 215.0, 10.0, 5.0)

    def test_main_to_vertical_gap(self):
        """Entering the vertical-gap matrix anchors on its cell's far corner."""
        gap_box = BoundingBox(0.0, 0.0, 40.0, 20.0)
        main_box = BoundingBox(200.0, 0.0, 40.0, 20.0)
        move = classify_move(CellAddress(1, 1, D), CellAddress(2, 1, P))
        assert move is Move.X_TO_P
        assert line_anchors(move, gap_box, main_box, self.FRACTIONS) == (30.0, 15.0, 230.0, 5.0)

    def test_scales_with_cell_size(self):
        small = line_anchors(Move.Q_TO_X, BoundingBox(0, 0, 10, 10), BoundingBox(0, 0, 10, 10))
        large = line_anchors(Move.Q_TO_X, BoundingBox(0, 0, 20, 20), BoundingBox(0, 0, 20, 20))
        assert large == tuple(2 * v for v in small)

    def test_every_long_move_has_a_rule(self):
        for move in Move:
            assert (move in ANCHOR_RULES) == move.is_long

    @pytest.mark.parametrize("move", [Move.DIAGONAL, Move.STEP_UP, Move.STEP_LEFT, Move.NONE])
    def test_short_moves_rejected(self, move):
        with pytest.raises(ValueError):
            line_anchors(move, self.TO, self.FROM)
