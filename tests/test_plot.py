"""Tests for the matplotlib tables and figure overlay."""

from types import SimpleNamespace

import pytest

matplotlib = pytest.importorskip("matplotlib")
pytest.importorskip("seaborn")
matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch

from nwtrace import default
from nwtrace.cells import CellAddress, MatrixId
from nwtrace.plot import FigureOverlay, MatplotlibTables, format_char_label, interactive_view
from nwtrace.plot.utils import annotation_labels

D, P, Q = MatrixId.DEFAULT, MatrixId.VERTICAL, MatrixId.HORIZONTAL


@pytest.fixture
def view(trace_source, alignment_input, alignment_output):
    highlighter, tables = interactive_view(trace_source, alignment_input, alignment_output, figsize=(9, 3))
    yield highlighter, tables
    plt.close(tables.figure)


def test_format_char_label():
    assert format_char_label("a", 3) == "A$_{3}$"


def test_annotation_labels():
    labels = annotation_labels([[0, float("-inf")]])
    assert labels.tolist() == [["0", "$\\infty$"]]


def test_cells_have_boxes(view):
    _, tables = view
    assert set(tables.axes) == {P, D, Q}
    assert tables.cell(D, 0, 1) is None
    assert tables.cell(D, 4, 1) is None
    box = tables.cell(D, 1, 1).bbox()
    assert box.width > 0 and box.height > 0
    lower = tables.cell(D, 2, 1).bbox()
    assert lower.top > box.top


def test_traceback_draws_patches_and_arrows(view):
    highlighter, tables = view
    highlighter.show_traceback(1)

    lines = highlighter.overlay.lines
    assert len(lines) == 3
    assert all(isinstance(line.artist, FancyArrowPatch) for line in lines)
    end = tables.cell(D, 3, 3)
    assert end.has_style(default.TERMINAL)
    assert end._patch is not None

    highlighter.show_traceback(1)
    assert highlighter.overlay.lines == []
    assert end._patch is None


def test_resize_redraws(view):
    highlighter, tables = view
    highlighter.show_traceback(1)
    tables.figure.set_size_inches(12, 4)
    tables.figure.canvas.draw()
    highlighter.redraw(SimpleNamespace(name="resize_event"))
    assert len(highlighter.overlay.lines) == 3
    assert highlighter.overlay.width == pytest.approx(tables.figure.bbox.width)


def test_address_at(view):
    _, tables = view
    ax = tables.axes[Q]
    x, y = ax.transData.transform((1.5, 2.5))
    assert tables.address_at(SimpleNamespace(x=x, y=y)) == CellAddress(2, 1, Q)
    assert tables.address_at(SimpleNamespace(x=None, y=None)) is None


def test_overlay_clear():
    fig = plt.figure()
    overlay = FigureOverlay(fig)
    overlay.add_line(0, 0, 10, 10)
    overlay.add_line(0, 0, 20, 10, flow=True)
    overlay.clear()
    assert overlay.lines == []
    assert len(overlay.ax.patches) == 0
    plt.close(fig)
