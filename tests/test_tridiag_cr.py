import numpy as np
import pytest

from physkit.tridiag_cr import cr
from physkit.tridiag_thomas import thomas


def _system(nrow, ncols=None, seed=0):
    rng = np.random.default_rng(seed)
    shape = (nrow,) if ncols is None else (nrow, ncols)
    dl = rng.uniform(-1.0, 1.0, shape)
    du = rng.uniform(-1.0, 1.0, shape)
    d = 3.0 + rng.uniform(0.0, 1.0, shape)
    return dl, d, du


def _dense(dl, d, du):
    n = d.shape[0]
    a = np.diag(d)
    if n > 1:
        a += np.diag(dl[1:], -1) + np.diag(du[:-1], 1)
    return a


@pytest.mark.parametrize("nrow", [1, 2, 3, 4, 5, 8, 13, 17, 32, 63])
@pytest.mark.parametrize("nthreads", [1, 2, 3, 8])
def test_single_rhs_matches_dense_solve(nrow, nthreads):
    dl, d, du = _system(nrow)
    b = np.random.default_rng(1).uniform(-2.0, 2.0, nrow)
    expected = np.linalg.solve(_dense(dl, d, du), b)
    x = cr(dl.copy(), d.copy(), du.copy(), b.copy(), nthreads)
    np.testing.assert_allclose(x, expected, rtol=1e-11, atol=1e-12)


@pytest.mark.parametrize("nrow,nrhs", [(1, 2), (2, 3), (6, 4), (19, 3)])
@pytest.mark.parametrize("nthreads", [1, 2, 7, 16])
def test_many_rhs_matches_dense_solve(nrow, nrhs, nthreads):
    dl, d, du = _system(nrow)
    b = np.random.default_rng(2).uniform(-2.0, 2.0, (nrow, nrhs))
    expected = np.linalg.solve(_dense(dl, d, du), b)
    x = cr(dl.copy(), d.copy(), du.copy(), b.copy(), nthreads)
    np.testing.assert_allclose(x, expected, rtol=1e-11, atol=1e-12)


@pytest.mark.parametrize("nrow,nrhs", [(1, 3), (3, 2), (10, 5), (33, 4)])
@pytest.mark.parametrize("nthreads", [1, 4, 9])
def test_many_matrices_match_dense_solve(nrow, nrhs, nthreads):
    dl, d, du = _system(nrow, nrhs)
    b = np.random.default_rng(3).uniform(-2.0, 2.0, (nrow, nrhs))
    x = cr(dl.copy(), d.copy(), du.copy(), b.copy(), nthreads)
    for j in range(nrhs):
        expected = np.linalg.solve(_dense(dl[:, j], d[:, j], du[:, j]), b[:, j])
        np.testing.assert_allclose(x[:, j], expected, rtol=1e-11, atol=1e-12)


def test_agrees_with_thomas():
    dl, d, du = _system(21, seed=7)
    b = np.random.default_rng(8).uniform(-1.0, 1.0, 21)
    x_cr = cr(dl.copy(), d.copy(), du.copy(), b.copy(), 4)
    x_th = thomas(dl.copy(), d.copy(), du.copy(), b.copy())
    np.testing.assert_allclose(x_cr, x_th, rtol=1e-11, atol=1e-12)


def test_result_independent_of_thread_count():
    dl, d, du = _system(27, seed=9)
    b = np.random.default_rng(10).uniform(-1.0, 1.0, (27, 3))
    results = [cr(dl.copy(), d.copy(), du.copy(), b.copy(), n) for n in (1, 2, 5, 12)]
    for r in results[1:]:
        np.testing.assert_allclose(r, results[0], rtol=1e-13, atol=1e-14)


def test_identity_leaves_rhs_unchanged():
    b = np.array([1.0, -2.0, 3.5, 0.25, 9.0])
    x = cr(np.zeros(5), np.ones(5), np.zeros(5), b.copy(), 2)
    np.testing.assert_array_equal(x, b)


def test_float_array_is_updated_in_place():
    dl, d, du = _system(6)
    b = np.random.default_rng(11).uniform(-1.0, 1.0, 6)
    x = b.copy()
    result = cr(dl, d, du, x)
    assert result is x
    np.testing.assert_allclose(_dense(*_system(6)) @ x, b, rtol=1e-11, atol=1e-12)


@pytest.mark.parametrize("bad", [0, -1, 1.5, True])
def test_invalid_thread_count_raises(bad):
    dl, d, du = _system(4)
    with pytest.raises(ValueError):
        cr(dl, d, du, np.ones(4), bad)


def test_mismatched_rhs_rows_raise():
    dl, d, du = _system(4)
    with pytest.raises(ValueError):
        cr(dl, d, du, np.ones(3))


def test_many_matrices_need_2d_rhs():
    dl, d, du = _system(4, 2)
    with pytest.raises(ValueError):
        cr(dl, d, du, np.ones(4))


def test_empty_system_raises():
    with pytest.raises(ValueError):
        cr(np.zeros(0), np.zeros(0), np.zeros(0), np.zeros(0))