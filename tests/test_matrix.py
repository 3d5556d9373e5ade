import pytest

from hdfskit.matrix import Matrix


def test_matrix_multiply():
    matrix1 = Matrix([[1, 2], [3, 4], [5, 6]])
    matrix2 = Matrix([[1, 2, 3], [4, 5, 6]])
    assert matrix1 * matrix2 == Matrix([[9, 12, 15], [19, 26, 33], [29, 40, 51]])


def test_matrix_invert():
    matrix = Matrix([[4.0, 7.0], [2.0, 6.0]])
    matrix.invert()
    assert abs(matrix[0, 0] - 0.6) < 0.0001
    assert abs(matrix[0, 1] + 0.7) < 0.0001
    assert abs(matrix[1, 0] + 0.2) < 0.0001
    assert abs(matrix[1, 1] - 0.4) < 0.0001


def test_invert_needs_row_swap():
    original = Matrix([[0.0, 1.0], [1.0, 0.0]])
    matrix = original.copy()
    matrix.invert()
    assert matrix * original == Matrix.identity(2, 0.0, 1.0)


def test_invert_non_square_raises():
    with pytest.raises(ValueError):
        Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]).invert()


def test_invert_singular_raises():
    with pytest.raises(ValueError):
        Matrix([[1.0, 2.0], [2.0, 4.0]]).invert()


def test_identity():
    assert Matrix.identity(3) == Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def test_zeroes_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix.zeroes(0, 3)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])


def test_select_rows_keeps_original_order():
    matrix = Matrix([[1], [2], [3], [4]])
    matrix.select_rows([3, 1])
    assert matrix.to_lists() == [[2], [4]]
    assert matrix.rows() == 2


def test_set_and_get_item():
    matrix = Matrix.zeroes(2, 3)
    matrix[1, 2] = 7
    assert matrix[1, 2] == 7
    assert matrix.cols() == 3


def test_copy_is_independent():
    matrix = Matrix([[1, 2], [3, 4]])
    duplicate = matrix.copy()
    duplicate[0, 0] = 9
    assert matrix[0, 0] == 1


def test_multiply_rows_matches_matrix_multiply():
    lhs = Matrix([[1, 2], [3, 4], [5, 6]])
    rows = [bytes([1, 2, 3]), bytes([4, 5, 6])]
    expected = lhs * Matrix([[1, 2, 3], [4, 5, 6]])
    assert lhs.multiply_rows(rows) == expected


def test_multiply_rows_applies_conversion():
    lhs = Matrix([[1.0, 0.0], [0.0, 2.0]])
    result = lhs.multiply_rows([[1, 2], [3, 4]], float)
    assert result.to_lists() == [[1.0, 2.0], [6.0, 8.0]]


def test_multiply_rows_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]).multiply_rows([b"abc"])