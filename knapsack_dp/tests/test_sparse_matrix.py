import pytest

from knapsack_dp.errors import InvalidInput, SparseFormatError
from knapsack_dp.storage.basic.sparse_matrix import (
    SparseMatrixCodec,
    load_sparse,
    save_sparse,
    to_dense,
    to_sparse,
)

GRID = [
    [0, 0, 3, 0, 0],
    [0, 0, 0, 6, 0],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 5, 0],
    [0, 0, 0, 0, 0],
]

SPARSE = [(5, 5, 0), (0, 2, 3), (1, 3, 6), (2, 1, 1), (3, 3, 5)]


def test_to_sparse_header_and_cells():
    assert to_sparse(GRID) == SPARSE


def test_to_dense_restores_grid():
    assert to_dense(SPARSE) == GRID


def test_non_square_and_empty_grids():
    assert to_sparse([[0, 7, 0]]) == [(1, 3, 0), (0, 1, 7)]
    assert to_dense([(2, 1, 0), (1, 0, -4)]) == [[0], [-4]]
    assert to_sparse([]) == [(0, 0, 0)]
    assert to_dense([(0, 0, 0)]) == []


def test_ragged_grid_rejected():
    with pytest.raises(InvalidInput):
        to_sparse([[1, 2], [3]])


def test_to_dense_rejects_bad_records():
    with pytest.raises(SparseFormatError):
        to_dense([])
    with pytest.raises(SparseFormatError):
        to_dense([(2, 2, 0), (2, 0, 1)])
    with pytest.raises(SparseFormatError):
        to_dense([(-1, 2, 0)])


@pytest.mark.parametrize(
    "triples",
    [
        [(2, 2)],
        [(2, 2, 0), (1, 1)],
        [(2, 2, 1), (0, 0, 5, 9)],
    ],
)
def test_to_dense_rejects_records_with_wrong_field_count(triples):
    with pytest.raises(SparseFormatError, match="expected 3"):
        to_dense(triples)


def test_file_format_is_tab_separated(tmp_path):
    path = save_sparse(SPARSE, tmp_path / "sparse.data")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "5\t5\t0"
    assert lines[1] == "0\t2\t3"
    assert len(lines) == len(SPARSE)
    assert load_sparse(path) == SPARSE


def test_load_tolerates_trailing_tab_and_blank_lines(tmp_path):
    path = tmp_path / "legacy.data"
    path.write_text("2\t2\t0\t\n1\t1\t9\t\n\n", encoding="utf-8")
    assert load_sparse(path) == [(2, 2, 0), (1, 1, 9)]


@pytest.mark.parametrize("content", ["1\t2\n", "1\tx\t3\n"])
def test_load_rejects_malformed_records(tmp_path, content):
    path = tmp_path / "bad.data"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SparseFormatError):
        load_sparse(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sparse(tmp_path / "missing.data")


def test_codec_uses_explicit_path(tmp_path):
    first = SparseMatrixCodec(tmp_path / "a" / "first.data")
    second = SparseMatrixCodec(tmp_path / "second.data")
    assert first.execute(GRID) == SPARSE
    second.execute([[1]])
    assert first.load() == GRID
    assert second.load() == [[1]]
