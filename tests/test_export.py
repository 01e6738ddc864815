"""Tests for CSV matrix export and infinity symbol substitution."""

import logging
import math
import mimetypes

import numpy as np
import pytest

from nwtrace import default
from nwtrace.cells import MatrixId
from nwtrace.export import (
    download_table,
    export_matrix,
    format_value,
    replace_infinities,
    table_to_csv,
    to_exportable_symbols,
)
from nwtrace.session import AlignmentInput, AlignmentOutput

POS = default.POSITIVE_INFINITY_SYMBOL
NEG = default.NEGATIVE_INFINITY_SYMBOL


class TestInfinitySymbols:
    def test_sign_is_swapped(self):
        out = replace_infinities([[NEG, POS, 3]])
        assert out[0, 0] == math.inf
        assert out[0, 1] == -math.inf
        assert out[0, 2] == 3

    def test_symbols_from_numbers(self):
        out = to_exportable_symbols(np.array([[math.inf, -math.inf, 1.5]]))
        assert out.tolist() == [[NEG, POS, 1.5]]

    @pytest.mark.parametrize("matrix", [
        [[0, NEG], [POS, 5]],
        [[NEG, NEG, NEG], [-2, NEG, -4]],
        [[1.5]],
    ])
    def test_round_trip(self, matrix):
        assert to_exportable_symbols(replace_infinities(matrix)).tolist() == matrix

    def test_input_not_mutated(self):
        matrix = [[NEG, 1]]
        replace_infinities(matrix)
        assert matrix == [[NEG, 1]]


class TestFormatValue:
    @pytest.mark.parametrize("value,text", [
        (0, "0"),
        (5.0, "5"),
        (-2.5, "-2.5"),
        (np.float64(-3.0), "-3"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        ("x", "x"),
    ])
    def test_values(self, value, text):
        assert format_value(value) == text


class TestTableToCsv:
    def test_export_scenario(self):
        text = table_to_csv(MatrixId.DEFAULT, [[0, -math.inf], [-math.inf, 5]], "A", "C")
        assert text == "X,,A\n,0,-Infinity\nC,-Infinity,5\n"
        assert len(text.splitlines()) == 3

    def test_tags(self):
        assert table_to_csv(MatrixId.VERTICAL, [[1]], "", "").startswith("P,")
        assert table_to_csv(2, [[1]], "", "").startswith("Q,")

    def test_more_rows_than_labels(self):
        text = table_to_csv(MatrixId.DEFAULT, [[0], [1], [2]], "", "C")
        assert text == "X,,\n,0\nC,1\n,2\n"


class TestExportMatrix:
    @pytest.fixture
    def data(self):
        inp = AlignmentInput(sequence_a="AG", sequence_b="T")
        out = AlignmentOutput(
            matrix=[[0, -1, -2], [-1, -1, -2]],
            vertical_gaps=[[NEG, NEG, NEG], [-3, -4, -5]],
        )
        return inp, out

    def test_gap_matrix(self, data):
        inp, out = data
        text = export_matrix(out, inp, 0)
        assert text == "P,,A,G\n,Infinity,Infinity,Infinity\nT,-3,-4,-5\n"
        # session data unchanged
        assert out.vertical_gaps[0][0] == NEG

    def test_missing_matrix(self, data):
        inp, out = data
        with pytest.raises(ValueError):
            export_matrix(out, inp, MatrixId.HORIZONTAL)
        with pytest.raises(ValueError):
            export_matrix(out, inp, 7)

    def test_download(self, data, tmp_path):
        inp, out = data
        target = download_table(out, inp, MatrixId.DEFAULT, tmp_path)
        assert target.name == default.TABLE_DOWNLOAD_NAME
        assert target.read_text(encoding="utf-8") == "X,,A,G\n,0,-1,-2\nT,-1,-1,-2\n"

    def test_download_media_type(self, data, tmp_path, caplog):
        inp, out = data
        with caplog.at_level(logging.INFO, logger="nwtrace.export"):
            target = download_table(out, inp, MatrixId.DEFAULT, tmp_path)
        assert mimetypes.guess_type(str(target))[0] == default.TABLE_MIME_TYPE
        assert default.TABLE_MIME_TYPE in caplog.text

    def test_through_highlighter(self, highlighter):
        text = highlighter.export_matrix(MatrixId.HORIZONTAL)
        assert text.splitlines()[0] == "Q,,A,G"
        assert text.splitlines()[1] == ",-Infinity,-2,-3"
