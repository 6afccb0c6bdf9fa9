"""Common solvers fixtures."""

import pytest

import numpy as np

from freq2wave._sigpy import Linop


class MockLinearOperator(Linop):
    def __init__(self, matrix):
        self._matrix = matrix
        super().__init__([self._matrix.shape[0]], [self._matrix.shape[1]])

    def _apply(self, input):
        return self._matrix @ input

    def _adjoint_linop(self):
        return self.__class__(self._matrix.conj().T)


@pytest.fixture
def simple_system():
    """Fixture providing a simple linear system for testing."""
    A_matrix = np.array([[4, 1], [1, 3]], dtype=complex)
    A = MockLinearOperator(A_matrix)  # Convert to sigpy Linop
    x = np.array([1, 2], dtype=complex)
    return A, A_matrix @ x, x


@pytest.fixture
def overdetermined_system():
    """Fixture providing a tall complex system with a least squares solution."""
    rng = np.random.default_rng(0)
    A_matrix = rng.standard_normal((20, 6)) + 1j * rng.standard_normal((20, 6))
    x = rng.standard_normal(6) + 1j * rng.standard_normal(6)
    b = A_matrix @ x + 0.01 * (rng.standard_normal(20) + 1j * rng.standard_normal(20))
    x_ls = np.linalg.lstsq(A_matrix, b, rcond=None)[0]
    return MockLinearOperator(A_matrix), A_matrix, b, x_ls


@pytest.fixture
def matrix_system():
    """Fixture providing a simple linear system for testing."""
    A = np.array([[4, 1], [1, 3]], dtype=complex)
    x = np.array([1, 2], dtype=complex)
    return A, A @ x, x


@pytest.fixture
def damp():
    return 0.001


@pytest.fixture
def x_init():
    return np.array([0.1, 0.1], dtype=complex)
