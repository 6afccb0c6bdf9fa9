"""Adapt SigPy linear operator to scipy."""

__all__ = ["aslinearoperator", "SigpyLinearOperator"]

import numpy as np

import scipy.sparse.linalg as spla

from .._sigpy import Linop

LinearOperator = spla.LinearOperator


def aslinearoperator(A: Linop, dtype=np.complex128) -> LinearOperator:
    """
    Convert SigPy Linop to Scipy LinearOperator.

    Parameters
    ----------
    A : Linop
        Input Linop, e.g. a :class:`~freq2wave.Freq2Wave` operator.
    dtype : optional
        Data type of the operator. The default is ``complex128``.

    Returns
    -------
    LinearOperator
        Scipy LinearOperator acting on flattened arrays.

    """
    if A is None:
        return A
    return SigpyLinearOperator(A, dtype)


class SigpyLinearOperator(spla.LinearOperator):
    """SciPy-compatible LinearOperator wrapper for SigPy Linops."""

    def __init__(self, linop, dtype=None):
        self.linop = linop
        self.ishape = linop.ishape  # Input shape expected by Linop
        self.oshape = linop.oshape  # Output shape expected by Linop

        # Scipy LinearOperator expects (M, N) shape
        M = np.prod(self.oshape).item()
        N = np.prod(self.ishape).item()
        super().__init__(dtype=dtype, shape=(M, N))

    def _matvec(self, x):
        x = x.reshape(self.ishape)  # Reshape flat input to Linop's expected shape
        y = self.linop.apply(x)
        return y.ravel()

    def _rmatvec(self, y):
        y = y.reshape(self.oshape)  # Reshape output for adjoint operation
        x = self.linop.H.apply(y)
        return x.ravel()
