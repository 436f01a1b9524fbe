import pytest

from tspga.tsplib import TsplibError, load_tsplib, parse_tsplib

SAMPLE = """NAME: tiny
TYPE: ATSP
COMMENT: three cities
DIMENSION: 3
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: FULL_MATRIX
EDGE_WEIGHT_SECTION
 9999 5 7
 4 9999 11
   8 2 9999
EOF
"""


def test_parse_sample():
    assert parse_tsplib(SAMPLE) == [
        [9999, 5, 7],
        [4, 9999, 11],
        [8, 2, 9999],
    ]


def test_matrix_is_square():
    matrix = parse_tsplib(SAMPLE)
    assert all(len(row) == len(matrix) for row in matrix)


def test_weights_may_span_lines_arbitrarily():
    text = "DIMENSION: 2\nEDGE_WEIGHT_SECTION\n1\n2 3\n4\n"
    assert parse_tsplib(text) == [[1, 2], [3, 4]]


def test_dimension_without_space():
    text = "DIMENSION:2\nEDGE_WEIGHT_SECTION\n1 2 3 4\n"
    assert parse_tsplib(text) == [[1, 2], [3, 4]]


def test_no_dimension_gives_empty_matrix():
    assert parse_tsplib("NAME: x\nEDGE_WEIGHT_SECTION\n1 2\n") == []


def test_crlf_line_endings():
    text = "DIMENSION: 2\r\nEDGE_WEIGHT_SECTION\r\n1 2\r\n3 4\r\nEOF\r\n"
    assert parse_tsplib(text) == [[1, 2], [3, 4]]


def test_too_few_weights_raises():
    with pytest.raises(TsplibError):
        parse_tsplib("DIMENSION: 3\nEDGE_WEIGHT_SECTION\n1 2 3\n")


def test_non_numeric_weight_raises():
    with pytest.raises(TsplibError):
        parse_tsplib("DIMENSION: 2\nEDGE_WEIGHT_SECTION\n1 x 3 4\n")


def test_load_round_trip(tmp_path):
    path = tmp_path / "tiny.atsp"
    path.write_text(SAMPLE)
    assert load_tsplib(path) == parse_tsplib(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(TsplibError):
        load_tsplib(tmp_path / "absent.atsp")