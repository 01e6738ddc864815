"""
export.py — CSV export of the DP matrices

The algorithm hands its gap matrices to the rendering layer with symbolic
infinity markers (LaTeX strings). Before export the markers become numbers
again, with the sign deliberately swapped to match the sign convention of
the exported table; `to_exportable_symbols` is the inverse and uses the same
swapped convention.

Functions:
    - replace_infinities    : markers -> numeric infinities
    - to_exportable_symbols : numeric infinities -> markers
    - format_value          : one cell as CSV text
    - table_to_csv          : matrix plus sequence labels as CSV text
    - export_matrix         : pick a matrix of an AlignmentOutput and export it
    - download_table        : write the export to disk
"""

from __future__ import annotations

import csv
import io
import logging
import math
from pathlib import Path as FilePath
from typing import Union

import numpy as np

from . import default
from .cells import MatrixId
from .session import AlignmentInput, AlignmentOutput

logger = logging.getLogger(__name__)


# marker -> number (swapped on purpose, see module docstring)
SYMBOL_TO_NUMBER = {
    default.NEGATIVE_INFINITY_SYMBOL: math.inf,
    default.POSITIVE_INFINITY_SYMBOL: -math.inf,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, (bool, np.bool_))


def _symbol_to_number(value):
    if isinstance(value, str) and value in SYMBOL_TO_NUMBER:
        return SYMBOL_TO_NUMBER[value]
    return value


def _number_to_symbol(value):
    if _is_number(value) and math.isinf(value):
        return default.NEGATIVE_INFINITY_SYMBOL if value > 0 else default.POSITIVE_INFINITY_SYMBOL
    return value


def replace_infinities(matrix) -> np.ndarray:
    """
    Replace symbolic infinity markers with numeric infinities.

    Returns a new object array; the input is left untouched.
    """
    mat = np.asarray(matrix, dtype=object)
    if mat.size == 0:
        return mat.copy()
    return np.vectorize(_symbol_to_number, otypes=[object])(mat)


def to_exportable_symbols(matrix) -> np.ndarray:
    """
    Replace numeric infinities with symbolic markers.

    Inverse of `replace_infinities`: for a matrix of finite values and
    markers, `to_exportable_symbols(replace_infinities(M))` equals M.
    """
    mat = np.asarray(matrix, dtype=object)
    if mat.size == 0:
        return mat.copy()
    return np.vectorize(_number_to_symbol, otypes=[object])(mat)


def format_value(value) -> str:
    """Text of one matrix cell in the exported table."""
    if _is_number(value):
        v = float(value)
        if math.isinf(v):
            return default.POSITIVE_INFINITY_TEXT if v > 0 else default.NEGATIVE_INFINITY_TEXT
        if math.isnan(v):
            return "NaN"
        if v.is_integer():
            return str(int(v))
        return repr(v)
    return str(value)


def table_to_csv(
    matrix_id: Union[MatrixId, int],
    matrix,
    sequence_a: str,
    sequence_b: str,
) -> str:
    """
    Serialize a matrix and its labels as CSV text.

    Parameters
    ----------
    matrix_id : MatrixId or int
        Kind of matrix; its tag is the first header cell.
    matrix : 2-D array-like
        Values; row i belongs to sequence_b[i-1] (row 0: empty prefix).
    sequence_a : str
        Column labels.
    sequence_b : str
        Row labels.

    Returns
    -------
    str
        Header line `tag,,a1,a2,...` followed by one line per matrix row,
        every line terminated by a newline.
    """
    tag = MatrixId(matrix_id).tag
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([tag, ""] + (list(sequence_a) or [""]))

    for i, row in enumerate(np.asarray(matrix, dtype=object)):
        label = sequence_b[i - 1] if 0 < i <= len(sequence_b) else ""
        writer.writerow([label] + [format_value(v) for v in row])
    return buffer.getvalue()


def export_matrix(
    output: AlignmentOutput,
    input: AlignmentInput,
    matrix_number: Union[MatrixId, int],
) -> str:
    """
    Export one matrix of an algorithm run as CSV text.

    Raises
    ------
    ValueError
        If the matrix number is unknown or the run has no such matrix.
    """
    try:
        matrix_id = MatrixId(matrix_number)
    except ValueError:
        raise ValueError(f"Unknown matrix number {matrix_number!r}") from None

    matrix = output.matrix_for(matrix_id)
    if matrix is None:
        raise ValueError(f"The shared output has no {matrix_id.name} matrix")

    return table_to_csv(
        matrix_id,
        replace_infinities(matrix),
        input.sequence_a,
        input.sequence_b,
    )


def download_table(
    output: AlignmentOutput,
    input: AlignmentInput,
    matrix_number: Union[MatrixId, int],
    directory: Union[str, FilePath] = ".",
) -> FilePath:
    """Write `export_matrix(...)` to `directory/TABLE_DOWNLOAD_NAME`."""
    text = export_matrix(output, input, matrix_number)
    target = FilePath(directory) / default.TABLE_DOWNLOAD_NAME
    target.write_text(text, encoding=default.TABLE_ENCODING)
    logger.info("Wrote %s (%s, %s)", target, default.TABLE_MIME_TYPE, default.TABLE_ENCODING)
    return target
