"""
session.py — transient state shared between the highlighter operations

A HighlightSession holds the last algorithm run that was shared in and
everything currently shown on top of its tables. It is owned by one
PathHighlighter and rebuilt from scratch for every new run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Sequence

from .cells import CellAddress, MatrixId, Path, as_path
from .overlay import OverlayLine


class TraceSource(Protocol):
    """The alignment algorithm, as far as the highlighter needs it."""

    def get_traces(
        self,
        seed_cells: Sequence[CellAddress],
        input: "AlignmentInput",
        output: "AlignmentOutput",
        depth: int,
    ) -> List[Sequence]: ...


@dataclass
class AlignmentInput:
    """
    Attributes
    ----------
    sequence_a : str
        Column sequence (labels the table header row).
    sequence_b : str
        Row sequence (labels the first column).
    """
    sequence_a: str = ""
    sequence_b: str = ""


@dataclass
class AlignmentOutput:
    """
    DP matrices and traceback paths of one run.

    `vertical_gaps`/`horizontal_gaps` are None for linear-gap algorithms.
    Traceback paths are stored origin first.
    """
    matrix: Optional[Any] = None
    vertical_gaps: Optional[Any] = None
    horizontal_gaps: Optional[Any] = None
    traceback_paths: List[Path] = field(default_factory=list)

    def __post_init__(self):
        self.traceback_paths = [as_path(p) for p in self.traceback_paths]

    def matrix_for(self, matrix: MatrixId):
        if matrix == MatrixId.VERTICAL:
            return self.vertical_gaps
        if matrix == MatrixId.HORIZONTAL:
            return self.horizontal_gaps
        return self.matrix


@dataclass
class HighlightSession:
    algorithm: Optional[TraceSource] = None
    input: AlignmentInput = field(default_factory=AlignmentInput)
    output: AlignmentOutput = field(default_factory=AlignmentOutput)
    last_path: Path = field(default_factory=list)
    last_flows: List[Path] = field(default_factory=list)
    last_row_number: int = -1
    cell_lines: List[OverlayLine] = field(default_factory=list)

    def clear(self) -> None:
        self.algorithm = None
        self.input = AlignmentInput()
        self.output = AlignmentOutput()
        self.last_path = []
        self.last_flows = []
        self.last_row_number = -1
        self.cell_lines = []
