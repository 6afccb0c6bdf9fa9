"""Conjugate Gradient on the Normal equations solver test."""

import pytest

import numpy as np

from freq2wave import DimensionMismatch, SolverNonConvergence
from freq2wave.linalg import CGNR, cgnr


def test_cgnr_basic(simple_system):
    """Test CGNR solver on a simple system."""
    A, b, x0 = simple_system
    x = cgnr(A, b, max_iter=10, tol=1e-10)
    np.testing.assert_allclose(x, x0, atol=1e-8)


def test_cgnr_least_squares(overdetermined_system):
    """Test CGNR converges to the least squares solution."""
    A, _, b, x_ls = overdetermined_system
    x = cgnr(A, b, max_iter=50, tol=1e-12)
    np.testing.assert_allclose(x, x_ls, atol=1e-8)


def test_cgnr_with_initial_guess(simple_system, x_init):
    """Test CGNR solver with an initial guess."""
    A, b, x0 = simple_system
    x = cgnr(A, b, x=x_init, max_iter=10, tol=1e-10)
    np.testing.assert_allclose(x, x0, atol=1e-8)
    np.testing.assert_array_equal(x_init, np.array([0.1, 0.1], dtype=complex))


def test_cgnr_zero_rhs(simple_system):
    """Test zero observations give the zero solution immediately."""
    A, _, _ = simple_system
    x = cgnr(A, np.zeros(2, dtype=complex))
    np.testing.assert_array_equal(x, np.zeros(2))


def test_cgnr_nonconvergence(overdetermined_system):
    """Test the iteration cap raises with the last iterate."""
    A, _, b, x_ls = overdetermined_system
    with pytest.raises(SolverNonConvergence) as excinfo:
        cgnr(A, b, max_iter=1, tol=1e-14)
    assert excinfo.value.iterations == 1
    assert excinfo.value.x.shape == x_ls.shape
    assert excinfo.value.residual > 1e-14


def test_cgnr_zero_tolerance(overdetermined_system):
    """Test tol = 0 performs exactly max_iter iterations."""
    A, _, b, _ = overdetermined_system
    app = CGNR(A, b, max_iter=3, tol=0.0)
    app.run()
    assert app.alg.iter == 3


def test_cgnr_record_stats(overdetermined_system):
    """Test cost and error history."""
    A, _, b, x_ls = overdetermined_system
    app = CGNR(A, b, max_iter=50, tol=1e-12, record_stats=True, solution=x_ls)
    app.run()
    cost, error = app.history
    assert len(cost) == len(error) == app.alg.iter
    assert cost[-1] <= cost[0]
    assert error[-1] < 1e-8


def test_cgnr_record_time(simple_system):
    A, b, _ = simple_system
    app = CGNR(A, b, max_iter=10, tol=1e-10, record_time=True)
    app.run()
    assert app.time >= 0.0


def test_cgnr_wrong_shape(simple_system):
    A, b, _ = simple_system
    with pytest.raises(DimensionMismatch):
        cgnr(A, np.zeros(3, dtype=complex))
    with pytest.raises(DimensionMismatch):
        cgnr(A, b, x=np.zeros(3, dtype=complex))
