"""Dense materialization of the change of basis operator."""

__all__ = ["axis_columns", "to_dense"]

import math

import numpy as np
from numpy.typing import NDArray


def axis_columns(op, d: int) -> NDArray[complex]:
    """
    Fourier transforms of all 1D scaling functions of axis ``d``.

    Column ``n`` is ``internal * exp(-2πi n t)`` for interior functions and
    a copy of the corresponding boundary block column otherwise.

    Parameters
    ----------
    op : Freq2Wave
        Change of basis operator.
    d : int
        Axis, ``0`` for ``x`` and ``1`` for ``y``.

    Returns
    -------
    NDArray[complex]
        Matrix of shape ``(M, 2**J)``.

    """
    N = op.wsize[0]
    p = op.vanishing_moments if op.has_boundary else 0
    internal = np.atleast_2d(op._phase.internal)[d]
    coords = op._coords[d]

    F = np.empty((op.n_samples, N), dtype=np.complex128)
    n = np.arange(p, N - p)
    F[:, p : N - p] = internal[:, None] * np.exp(
        -2j * math.pi * coords[:, None] * n[None, :]
    )
    if op.has_boundary:
        F[:, :p] = op._boundary.left[d]
        F[:, N - p :] = op._boundary.right[d]
    return F


def to_dense(op) -> NDArray[complex]:
    """
    Build the full change of basis matrix.

    In 2D the columns are sorted by the ``y`` coefficient index, i.e.
    column ``ny * 2**J + nx`` belongs to ``X[ny, nx]``, which matches
    ``X.ravel()``.

    Parameters
    ----------
    op : Freq2Wave
        Change of basis operator.

    Returns
    -------
    NDArray[complex]
        Matrix of shape ``(M, N)``.

    """
    if op.ndim == 1:
        F = axis_columns(op, 0)
    else:
        Fx = axis_columns(op, 0)
        Fy = axis_columns(op, 1)
        F = (Fy[:, :, None] * Fx[:, None, :]).reshape(op.n_samples, -1)

    if not op.is_uniform:
        F *= op._weighting.values[:, None]

    return F
