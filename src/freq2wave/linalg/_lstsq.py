"""Dense least squares reference solver."""

__all__ = ["lstsq"]

import numpy as np
from numpy.typing import ArrayLike, NDArray

import torch

from .._errors import DimensionMismatch


def lstsq(
    A: ArrayLike,
    b: ArrayLike,
    damp: float = 0.0,
) -> NDArray[complex]:
    r"""
    Tikhonov regularized linear least squares for dense problems.

    Solves the problem::

        minimize || A @ x - b ||^2_2 + damp * || x ||^2_2

    Useful as a reference for the iterative solvers on small problems,
    e.g. with ``A = op.to_dense()``.

    Parameters
    ----------
    A : ArrayLike
        Matrix of shape ``(M, N)``.
    b : ArrayLike
        Right-hand side observation vector of shape ``(M,)``.
    damp : float, optional
        Regularization strength. The default is ``0.0``.

    Returns
    -------
    NDArray[complex]
        Solution of shape ``(N,)``.

    """
    A = np.asarray(A, dtype=np.complex128)
    b = np.asarray(b, dtype=np.complex128)
    if A.ndim != 2 or b.shape != (A.shape[0],):
        raise DimensionMismatch(
            f"Cannot solve system with matrix {A.shape} and right-hand side {b.shape}"
        )

    if damp != 0.0:
        N = A.shape[1]
        A = np.concatenate([A, damp**0.5 * np.eye(N, dtype=A.dtype)], axis=0)
        b = np.concatenate([b, np.zeros(N, dtype=b.dtype)])

    x = torch.linalg.lstsq(
        torch.from_numpy(A), torch.from_numpy(b)[:, None], rcond=None
    )[0]
    return x[:, 0].numpy()
