"""
conftest.py — Shared pytest fixtures for the nwtrace test suite

Provides small three-matrix alignment outputs, a stub trace source that
plays the alignment algorithm, and in-memory tables/highlighters.
"""

import math

import pytest

from nwtrace.cells import CellAddress, MatrixId
from nwtrace.grid import MemoryTables, ResultsTable
from nwtrace.highlighter import PathHighlighter
from nwtrace.session import AlignmentInput, AlignmentOutput

D, P, Q = MatrixId.DEFAULT, MatrixId.VERTICAL, MatrixId.HORIZONTAL
NEG = -math.inf


class StubTraceSource:
    """Returns canned predecessor paths (destination first) per seed cell."""

    def __init__(self, traces=None):
        self.traces = traces or {}
        self.calls = []

    def get_traces(self, seed_cells, input, output, depth):
        self.calls.append((list(seed_cells), depth))
        result = []
        for seed in seed_cells:
            result.extend(list(p) for p in self.traces.get(tuple(seed), []))
        return result


# ---------------------------------------------------------------------------
# Alignment data
# ---------------------------------------------------------------------------

@pytest.fixture
def diagonal_path():
    return [CellAddress(0, 0, D), CellAddress(1, 1, D), CellAddress(2, 2, D)]


@pytest.fixture
def affine_path():
    """Gap in the horizontal matrix followed by a long vertical jump."""
    return [
        CellAddress(0, 0, D),
        CellAddress(0, 1, Q),
        CellAddress(0, 2, Q),
        CellAddress(0, 2, D),
        CellAddress(2, 2, D),
    ]


@pytest.fixture
def alignment_input():
    return AlignmentInput(sequence_a="AG", sequence_b="AC")


@pytest.fixture
def alignment_output(diagonal_path, affine_path):
    matrix = [[0, -2, -3], [-2, 1, -1], [-3, -1, 0]]
    vertical = [[NEG, NEG, NEG], [-2, NEG, -4], [-3, -4, -3]]
    horizontal = [[NEG, -2, -3], [NEG, NEG, -1], [NEG, -4, -3]]
    return AlignmentOutput(
        matrix=matrix,
        vertical_gaps=vertical,
        horizontal_gaps=horizontal,
        traceback_paths=[diagonal_path, affine_path],
    )


@pytest.fixture
def flow_traces():
    """Three predecessors of DP cell (2, 2) in the main matrix."""
    return {
        (2, 2, D): [
            [(2, 2, D), (1, 1, D)],
            [(2, 2, D), (2, 1, D)],
            [(2, 2, D), (1, 2, D)],
        ],
        (0, 0, D): [],
    }


@pytest.fixture
def trace_source(flow_traces):
    return StubTraceSource(flow_traces)


# ---------------------------------------------------------------------------
# Rendering collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def tables(alignment_output):
    return MemoryTables.from_matrices({
        P: alignment_output.vertical_gaps,
        D: alignment_output.matrix,
        Q: alignment_output.horizontal_gaps,
    })


@pytest.fixture
def results_table():
    return ResultsTable(4)


@pytest.fixture
def highlighter(tables, trace_source, alignment_input, alignment_output):
    hl = PathHighlighter(tables=tables)
    hl.share_information(trace_source, alignment_input, alignment_output)
    return hl


def dp_cell(tables, address):
    """Rendered cell of a DP address (header offset applied)."""
    return tables.cell(address.matrix, address.row + 1, address.column + 1)
