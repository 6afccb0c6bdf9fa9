"""LSTSQ solver test."""

import pytest

import numpy as np

from freq2wave import DimensionMismatch
from freq2wave.linalg import lstsq


def test_lstsq_basic(matrix_system):
    """Test LSTSQ solver on a simple system."""
    A, b, x0 = matrix_system
    x = lstsq(A, b)
    np.testing.assert_allclose(x, x0, atol=1e-6)


def test_lstsq_least_squares(overdetermined_system):
    """Test LSTSQ solver on a tall system."""
    _, A, b, x_ls = overdetermined_system
    x = lstsq(A, b)
    np.testing.assert_allclose(x, x_ls, atol=1e-8)


def test_lstsq_with_damping(matrix_system, damp):
    """Test LSTSQ solver with damping (Tikhonov regularization)."""
    A, b, x0 = matrix_system
    x = lstsq(A, b, damp=damp)
    np.testing.assert_allclose(x, x0, atol=1e-2)

    # normal equations of the damped problem
    N = A.shape[1]
    expected = np.linalg.solve(A.conj().T @ A + damp * np.eye(N), A.conj().T @ b)
    np.testing.assert_allclose(x, expected, atol=1e-8)


def test_lstsq_wrong_shape(matrix_system):
    A, b, _ = matrix_system
    with pytest.raises(DimensionMismatch):
        lstsq(A, np.concatenate([b, b]))
