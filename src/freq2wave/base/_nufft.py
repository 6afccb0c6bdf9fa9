"""Non Uniform Fast Fourier Transform."""

__all__ = ["NUFFTPlan", "nufft", "nufft_adjoint"]

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

import finufft

from .._errors import DimensionMismatch


class NUFFTPlan:
    """
    NUFFT bound to a fixed sample geometry and grid size.

    The forward transform evaluates

        ``y[m] = Σ_k f[k] exp(-2πi <k, t[m]>)``

    for the centered grid ``k_i = -(n_i // 2), ..., n_i - 1 - n_i // 2``
    (``f[0, ..., 0]`` holds the lowest frequency). The adjoint transform is
    its conjugate transpose. Both directions share the same sample points,
    so they are algebraic adjoints to the requested precision.

    Parameters
    ----------
    coords : ArrayLike
        Torus coordinates in ``[-1/2, 1/2)`` of shape ``(M,)`` or ``(M, ndim)``.
        ``coords[:, i]`` is the coordinate along grid axis ``i``.
    shape : int | list[int] | tuple[int]
        Grid shape ``(n_0, ..., n_{ndim - 1})``.
    eps : float, optional
        Desired numerical precision. The default is ``1e-12``.
    upsampfac : float | None, optional
        finufft oversampling factor. The default is ``None`` (finufft default).
    nthreads : int | None, optional
        Number of finufft threads. The default is ``None`` (all cores).

    Notes
    -----
    Plans are not re-entrant: do not execute the same plan from
    several threads at once.

    """

    def __init__(
        self,
        coords: ArrayLike,
        shape: int | list[int] | tuple[int],
        eps: float = 1e-12,
        upsampfac: float | None = None,
        nthreads: int | None = None,
    ):
        coords = np.asarray(coords, dtype=np.float64)
        if coords.ndim == 1:
            coords = coords[:, None]
        if np.isscalar(shape):
            shape = (shape,)
        shape = tuple(int(n) for n in shape)
        if coords.ndim != 2 or coords.shape[-1] != len(shape):
            raise DimensionMismatch(
                f"coords of shape {coords.shape} do not match grid shape {shape}"
            )
        if any(n <= 0 for n in shape):
            raise DimensionMismatch(f"Grid shape must be positive, got {shape}")

        self.coords = coords
        self.shape = shape
        self.ndim = len(shape)
        self.n_samples = coords.shape[0]
        self.eps = eps

        # finufft works in radians; keep the point arrays alive with the plans
        self._points = [
            np.ascontiguousarray(2 * math.pi * coords[:, i]) for i in range(self.ndim)
        ]

        opts = {}
        if upsampfac is not None:
            opts["upsampfac"] = upsampfac
        if nthreads is not None:
            opts["nthreads"] = nthreads

        self._fwd = finufft.Plan(2, shape, eps=eps, isign=-1, dtype="complex128", **opts)
        self._fwd.setpts(*self._points)
        self._adj = finufft.Plan(1, shape, eps=eps, isign=1, dtype="complex128", **opts)
        self._adj.setpts(*self._points)

    def forward(
        self, input: NDArray[complex], out: NDArray[complex] | None = None
    ) -> NDArray[complex]:
        """
        Evaluate the Fourier sum of a grid at the samples.

        Parameters
        ----------
        input : NDArray[complex]
            Grid of shape ``self.shape``.
        out : NDArray[complex] | None, optional
            Contiguous ``complex128`` output of length ``M``.

        Returns
        -------
        NDArray[complex]
            Samples of shape ``(M,)``.

        """
        if tuple(input.shape) != self.shape:
            raise DimensionMismatch(
                f"NUFFT input shape {tuple(input.shape)} != {self.shape}"
            )
        if out is not None and out.shape != (self.n_samples,):
            raise DimensionMismatch(
                f"NUFFT output shape {out.shape} != ({self.n_samples},)"
            )
        input = np.ascontiguousarray(input, dtype=np.complex128)
        return self._fwd.execute(input, out=out)

    def adjoint(self, input: NDArray[complex]) -> NDArray[complex]:
        """
        Adjoint transform from samples to grid.

        Parameters
        ----------
        input : NDArray[complex]
            Samples of shape ``(M,)``.

        Returns
        -------
        NDArray[complex]
            Grid of shape ``self.shape``.

        """
        if input.shape != (self.n_samples,):
            raise DimensionMismatch(
                f"NUFFT adjoint input shape {input.shape} != ({self.n_samples},)"
            )
        input = np.ascontiguousarray(input, dtype=np.complex128)
        return self._adj.execute(input).reshape(self.shape)


def nufft(
    input: ArrayLike, coords: ArrayLike, eps: float = 1e-12
) -> NDArray[complex]:
    """
    Non-uniform Fast Fourier Transform.

    Parameters
    ----------
    input : ArrayLike
        Grid of shape ``(n_0, ..., n_{ndim - 1})``.
    coords : ArrayLike
        Torus coordinates of shape ``(M,)`` or ``(M, ndim)``.
    eps : float, optional
        Desired numerical precision. The default is ``1e-12``.

    Returns
    -------
    NDArray[complex]
        Samples of shape ``(M,)``.

    """
    input = np.asarray(input, dtype=np.complex128)
    plan = NUFFTPlan(coords, input.shape, eps)
    return plan.forward(input)


def nufft_adjoint(
    input: ArrayLike,
    coords: ArrayLike,
    oshape: int | list[int] | tuple[int],
    eps: float = 1e-12,
) -> NDArray[complex]:
    """
    Adjoint non-uniform Fast Fourier Transform.

    Parameters
    ----------
    input : ArrayLike
        Samples of shape ``(M,)``.
    coords : ArrayLike
        Torus coordinates of shape ``(M,)`` or ``(M, ndim)``.
    oshape : int | list[int] | tuple[int]
        Output grid shape.
    eps : float, optional
        Desired numerical precision. The default is ``1e-12``.

    Returns
    -------
    NDArray[complex]
        Grid of shape ``oshape``.

    """
    input = np.asarray(input, dtype=np.complex128)
    plan = NUFFTPlan(coords, oshape, eps)
    return plan.adjoint(input)
