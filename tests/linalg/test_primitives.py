"""
Tests for the matrix primitives shared by every kernel.
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import ElementIndexError
from pydecomp.core.compute.linalg.primitives import (
    adjoint,
    approximate_zeros,
    column,
    columns,
    dot,
    dot_real,
    elements_at,
    is_approximately_same,
    is_hermitian,
    replace_element,
    rows,
    slice_matrix,
    transpose,
)


@pytest.fixture
def m():
    return np.arange(1.0, 10.0).reshape(3, 3)


class TestTransforms:

    def test_transpose_matrix(self, m):
        np.testing.assert_array_equal(transpose(m), m.T)

    def test_transpose_vector_becomes_column(self):
        out = transpose(np.array([1.0, 2.0, 3.0]))
        assert out.shape == (3, 1)

    def test_transpose_returns_copy(self, m):
        out = transpose(m)
        out[0, 0] = -1
        assert m[0, 0] == 1.0

    def test_adjoint_conjugates(self):
        z = np.array([[1 + 1j, 2], [3j, 4]])
        np.testing.assert_array_equal(adjoint(z), z.conj().T)


class TestProducts:

    def test_dot_conjugates_second_operand(self):
        m1 = np.array([[1.0, 0.0], [0.0, 1.0]], dtype=complex)
        m2 = np.array([[1j, 0], [0, 2j]])
        np.testing.assert_array_equal(dot(m1, m2), np.conj(m2))

    def test_dot_vectors_overlapping_prefix(self):
        assert dot(np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0])) == 14.0

    def test_dot_empty(self):
        assert dot(np.zeros(0), np.array([1.0])) == 0

    def test_dot_real_no_conjugation(self):
        m1 = np.array([[1j]])
        np.testing.assert_array_equal(dot_real(m1, m1), [[-1.0 + 0j]])


class TestSlicing:

    def test_slice_matrix(self, m):
        np.testing.assert_array_equal(slice_matrix(m, [1, 0], [2, 2]), [[4, 5], [7, 8]])

    def test_column(self, m):
        np.testing.assert_array_equal(column(m, 2), [3, 6, 9])

    def test_columns_and_rows_follow_given_order(self, m):
        np.testing.assert_array_equal(columns(m, [2, 0]), m[:, [2, 0]])
        np.testing.assert_array_equal(rows(m, [1, 1, 0]), m[[1, 1, 0]])

    def test_elements_at(self, m):
        assert elements_at(m, [[0, 0], [2, 1]]) == [1.0, 8.0]

    @pytest.mark.parametrize("coord", [[3, 0], [0, 3], [-1, 0]])
    def test_elements_at_out_of_range(self, m, coord):
        with pytest.raises(ElementIndexError, match="invalid index") as exc_info:
            elements_at(m, [coord])
        assert exc_info.value.shape == (3, 3)

    def test_replace_element_copies(self, m):
        out = replace_element(m, 1, 1, 0.0)
        assert out[1, 1] == 0.0
        assert m[1, 1] == 5.0


class TestApproximateZeros:

    def test_small_entries_snapped(self):
        out = approximate_zeros(np.array([[1e-12, 1.0], [-1e-11, -2.0]]), 1e-10)
        np.testing.assert_array_equal(out, [[0.0, 1.0], [0.0, -2.0]])

    def test_complex_modulus(self):
        out = approximate_zeros(np.array([1e-12j, 1 + 1e-12j]), 1e-10)
        assert out[0] == 0
        assert out[1] == 1 + 1e-12j
        assert out.dtype == np.complex128

    def test_nan_and_inf_kept(self):
        out = approximate_zeros(np.array([np.nan, np.inf, 1e-20]), 1e-10)
        assert np.isnan(out[0])
        assert np.isinf(out[1])
        assert out[2] == 0.0


class TestComparison:

    def test_approximately_same(self):
        a = np.array([[1.0, 2.0]])
        assert is_approximately_same(a, a + 1e-12, 1e-10)
        assert not is_approximately_same(a, a + 1e-3, 1e-10)

    def test_nan_difference_counts_as_equal(self):
        assert is_approximately_same(np.array([np.nan]), np.array([1.0]), 1e-10)
        assert is_approximately_same(np.array([np.inf]), np.array([np.inf]), 1e-10)

    def test_is_hermitian(self, hermitian_3x3, spd_3x3):
        assert is_hermitian(hermitian_3x3, 1e-10)
        assert is_hermitian(spd_3x3, 1e-10)
        assert not is_hermitian(np.array([[1.0, 2.0], [3.0, 4.0]]), 1e-10)

    def test_complex_symmetric_is_not_hermitian(self):
        assert not is_hermitian(np.array([[1.0, 1j], [1j, 1.0]]), 1e-10)
