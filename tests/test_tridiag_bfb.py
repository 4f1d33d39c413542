import numpy as np
import pytest

from physkit.tridiag_bfb import bfb


def _system(nrow, seed=0):
    rng = np.random.default_rng(seed)
    dl = rng.uniform(-1.0, 1.0, nrow)
    du = rng.uniform(-1.0, 1.0, nrow)
    d = 4.0 + rng.uniform(0.0, 1.0, nrow)
    return dl, d, du


def _dense(dl, d, du):
    a = np.diag(d)
    a += np.diag(dl[1:], -1)
    a += np.diag(du[:-1], 1)
    return a


def test_small_known_system():
    x = bfb([0.0, 1.0], [2.0, 2.0], [1.0, 0.0], [3.0, 3.0])
    np.testing.assert_allclose(x, [1.0, 1.0])


@pytest.mark.parametrize("nrow", [1, 2, 3, 7, 16])
def test_single_rhs_matches_dense_solve(nrow):
    dl, d, du = _system(nrow)
    b = np.arange(1.0, nrow + 1.0)
    expected = np.linalg.solve(_dense(dl, d, du), b)
    x = bfb(dl.copy(), d.copy(), du.copy(), b.copy())
    np.testing.assert_allclose(x, expected, rtol=1e-12, atol=1e-12)


def test_columns_are_bit_identical_to_single_solves():
    nrow, nrhs = 9, 5
    dl, d, du = _system(nrow, seed=1)
    rng = np.random.default_rng(2)
    b = rng.uniform(-1.0, 1.0, (nrow, nrhs))
    together = bfb(dl.copy(), d.copy(), du.copy(), b.copy())
    for j in range(nrhs):
        alone = bfb(dl.copy(), d.copy(), du.copy(), b[:, j].copy())
        np.testing.assert_array_equal(together[:, j], alone)


def test_many_matrices_each_solves_its_column():
    nrow, nrhs = 6, 3
    rng = np.random.default_rng(3)
    dl = rng.uniform(-1.0, 1.0, (nrow, nrhs))
    du = rng.uniform(-1.0, 1.0, (nrow, nrhs))
    d = 5.0 + rng.uniform(0.0, 1.0, (nrow, nrhs))
    b = rng.uniform(-1.0, 1.0, (nrow, nrhs))
    x = bfb(dl.copy(), d.copy(), du.copy(), b.copy())
    for j in range(nrhs):
        expected = np.linalg.solve(_dense(dl[:, j], d[:, j], du[:, j]), b[:, j])
        np.testing.assert_allclose(x[:, j], expected, rtol=1e-12, atol=1e-12)


def test_single_column_diagonals_apply_to_every_rhs():
    nrow, nrhs = 8, 4
    dl, d, du = _system(nrow, seed=4)
    b = np.random.default_rng(5).uniform(-1.0, 1.0, (nrow, nrhs))
    one_d = bfb(dl.copy(), d.copy(), du.copy(), b.copy())
    column = bfb(
        dl.copy()[:, None], d.copy()[:, None], du.copy()[:, None], b.copy()
    )
    np.testing.assert_array_equal(one_d, column)


def test_works_in_place_on_float_arrays():
    dl, d, du = _system(5, seed=6)
    b = np.ones(5)
    result = bfb(dl, d, du, b)
    assert result is b
    np.testing.assert_allclose(_dense(*_system(5, seed=6)) @ b, np.ones(5))


def test_integer_input_is_converted():
    x = bfb([0, 1], [2, 2], [1, 0], [3, 3])
    assert x.dtype.kind == "f"
    np.testing.assert_allclose(x, [1.0, 1.0])


def test_mismatched_diagonals_raise():
    with pytest.raises(ValueError):
        bfb([0.0, 1.0, 1.0], [2.0, 2.0], [1.0, 0.0], [1.0, 1.0])


def test_rhs_with_wrong_rows_raises():
    with pytest.raises(ValueError):
        bfb([0.0, 1.0], [2.0, 2.0], [1.0, 0.0], [1.0, 1.0, 1.0])


def test_matrix_count_must_match_rhs_count():
    dl = np.zeros((3, 2))
    d = np.ones((3, 2))
    du = np.zeros((3, 2))
    with pytest.raises(ValueError):
        bfb(dl, d, du, np.ones((3, 3)))