import numpy as np
import pytest

from solvermarket.errors import MtxReaderError, MtxReaderStatus
from solvermarket.vector import Vector


def _write(tmp_path, content, name="vector.mtx"):
    path = tmp_path / name
    path.write_text(content)
    return path


def _status_of(tmp_path, content):
    path = _write(tmp_path, content)
    with pytest.raises(MtxReaderError) as info:
        Vector.from_file(path, dtype=np.float32)
    return info.value.status


def test_basic_vector_read(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "4 1 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 1 3.0\n"
        "4 1 4.0\n"
    )
    vec = Vector(dtype=np.float32)
    vec.read_matrix_market_file(_write(tmp_path, content))
    assert vec.n == 4
    assert len(vec) == 4
    assert vec.values.tolist() == pytest.approx([1.0, 2.0, 3.0, 4.0])


def test_basic_vector_read_with_a_comment(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "%% Comment\n"
        "4 1 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 1 3.0\n"
        "4 1 4.0\n"
    )
    vec = Vector.from_file(_write(tmp_path, content), dtype=np.float32)
    assert vec.n == 4
    assert vec.values.tolist() == pytest.approx([1.0, 2.0, 3.0, 4.0])


def test_file_not_found(tmp_path):
    vec = Vector(dtype=np.float32)
    with pytest.raises(MtxReaderError) as info:
        vec.read_matrix_market_file(tmp_path / "doesnotexist.mtx")
    assert info.value.status is MtxReaderStatus.FILE_NOT_FOUND


def test_unsupported_object(tmp_path):
    content = (
        "%%MatrixMarket tensor yolo real general\n"
        "3 1 3\n"
        "1 2 1.0\n"
        "3 1 2.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.UNSUPPORTED_OBJECT


def test_unsupported_matrix_type(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real hermitian\n"
        "4 1 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 1 3.0\n"
        "4 1 4.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.UNSUPPORTED_MATRIX_TYPE


def test_not_a_vector_two_columns(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "4 2 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 1 3.0\n"
        "4 1 4.0\n"
        "4 2 4.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.NOT_A_VECTOR


def test_not_a_vector_nnz_mismatch(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "4 1 5\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 1 3.0\n"
        "4 1 4.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.NOT_A_VECTOR


def test_out_of_bound_row_index(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "4 1 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "18 1 3.0\n"
        "4 1 4.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.OUT_OF_BOUND_ROW_INDEX


def test_out_of_bound_col_index(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "4 1 4\n"
        "1 1 1.0\n"
        "2 1 2.0\n"
        "3 10 3.0\n"
        "4 1 4.0\n"
    )
    assert _status_of(tmp_path, content) is MtxReaderStatus.OUT_OF_BOUND_COL_INDEX


def test_no_header(tmp_path):
    content = "4 1 4\n1 1 1.0\n2 1 2.0\n3 1 3.0\n4 1 4.0\n"
    assert _status_of(tmp_path, content) is MtxReaderStatus.WRONG_HEADER_OR_NO_HEADER


def test_missing_entries_stay_zero(tmp_path):
    content = (
        "%%MatrixMarket matrix coordinate real general\n"
        "3 1 3\n"
        "3 1 7.0\n"
    )
    vec = Vector.from_file(_write(tmp_path, content))
    assert vec.values.tolist() == [0.0, 0.0, 7.0]


def test_filled_constructor():
    vec = Vector(5, 1.0)
    assert len(vec) == 5
    assert vec.nnz == 5
    assert np.all(vec.values == 1.0)


def test_sized_constructor_is_zero():
    vec = Vector(3)
    assert vec.values.tolist() == [0.0, 0.0, 0.0]


def test_send_to_device_copies_values():
    vec = Vector(4, 2.5)
    vec.send_to_device()
    assert np.array_equal(vec.device_values, vec.values)


def test_send_to_device_unallocated_raises():
    with pytest.raises(RuntimeError):
        Vector().send_to_device()