"""Sample geometry helpers."""

__all__ = ["as_samples", "is_uniform", "to_torus", "split"]

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .._errors import DimensionMismatch


def as_samples(samples: ArrayLike) -> NDArray[float]:
    """
    Validate Fourier domain samples.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M,)`` (1D) or ``(M, 2)`` (2D), where
        column ``0`` holds the ``x`` and column ``1`` the ``y`` frequency.

    Returns
    -------
    NDArray[float]
        Samples as a ``float64`` array.

    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.ndim == 1:
        pass
    elif samples.ndim != 2 or samples.shape[1] != 2:
        raise DimensionMismatch(
            f"Samples must have shape (M,) or (M, 2), got {samples.shape}"
        )
    if samples.shape[0] == 0:
        raise DimensionMismatch("At least one sample is required")
    if not np.all(np.isfinite(samples)):
        raise ValueError("Samples must be finite")
    return samples


def _is_equispaced(values: NDArray[float], rtol: float) -> bool:
    if values.size < 3:
        return True
    steps = np.diff(values)
    return bool(np.allclose(steps, steps[0], rtol=rtol, atol=0.0))


def is_uniform(samples: ArrayLike, rtol: float = 1e-9) -> bool:
    """
    Check if samples lie on a regular grid.

    1D samples are uniform if, once sorted, they are equispaced. 2D samples
    are uniform if they are exactly the points of a tensor grid whose
    axes are both equispaced.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M,)`` or ``(M, 2)``.
    rtol : float, optional
        Relative tolerance on the spacing. The default is ``1e-9``.

    Returns
    -------
    bool
        ``True`` if the samples are uniform.

    """
    samples = as_samples(samples)
    if samples.ndim == 1:
        values = np.sort(samples)
        if np.any(np.diff(values) == 0.0):
            return False
        return _is_equispaced(values, rtol)

    M = samples.shape[0]
    if np.unique(samples, axis=0).shape[0] != M:
        return False
    xvals = np.unique(samples[:, 0])
    yvals = np.unique(samples[:, 1])
    if xvals.size * yvals.size != M:
        return False
    return _is_equispaced(xvals, rtol) and _is_equispaced(yvals, rtol)


def to_torus(samples: ArrayLike, J: int) -> NDArray[float]:
    """
    Map frequencies to the torus ``[-1/2, 1/2)``.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of any shape.
    J : int
        Scale. Samples are divided by ``2**J`` before reduction modulo ``1``.

    Returns
    -------
    NDArray[float]
        Torus coordinates with the same shape as ``samples``.

    """
    xi = np.asarray(samples, dtype=np.float64) * 2.0 ** (-J)
    return xi - np.floor(xi + 0.5)


def split(x: NDArray, p: int) -> tuple[NDArray, NDArray, NDArray]:
    """
    Split a vector into its left, interior and right parts.

    Parameters
    ----------
    x : NDArray
        Vector of length ``N > 2 * p``.
    p : int
        Width of the boundary parts.

    Returns
    -------
    tuple[NDArray, NDArray, NDArray]
        Views ``x[:p]``, ``x[p:N-p]`` and ``x[N-p:]``.

    """
    N = x.shape[-1]
    if N <= 2 * p:
        raise DimensionMismatch(f"Cannot split length {N} with boundary width {p}")
    return x[..., :p], x[..., p : N - p], x[..., N - p :]
