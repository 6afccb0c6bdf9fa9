"""Phase correction around the NUFFT."""

__all__ = ["PhaseDiagonal"]

import math

import numpy as np
from numpy.typing import NDArray


class PhaseDiagonal:
    """
    Per-sample phase and scale correction.

    The NUFFT evaluates a centered Fourier sum, whereas interior scaling
    function ``n`` at scale ``J`` has Fourier transform
    ``internal * exp(-2πi n t)``. Multiplying the NUFFT output by

        ``internal * exp(-2πi (2**J // 2) t)``

    shifts the centered sum back to the index range of the interior
    functions, both with and without boundary correction. For ``J >= 1``
    this equals ``internal * exp(-iπ ξ)``.

    Parameters
    ----------
    internal : NDArray[complex]
        Fourier transform of the interior scaling function at the samples,
        shape ``(M,)`` (1D) or ``(M, 2)`` (2D).
    coords : NDArray[float]
        Torus coordinates with the same shape as ``internal``.
    J : int
        Scale.

    Attributes
    ----------
    internal : NDArray[complex]
        Interior evaluations, shape ``(M,)`` or ``(2, M)``.
    values : NDArray[complex]
        Phase factors, shape ``(M,)`` or ``(2, M)``; row ``d`` belongs to
        axis ``d`` (``0`` for ``x``, ``1`` for ``y``).

    """

    def __init__(self, internal: NDArray[complex], coords: NDArray[float], J: int):
        internal = np.asarray(internal, dtype=np.complex128)
        if internal.shape != coords.shape:
            raise ValueError(
                f"internal shape {internal.shape} != coords shape {coords.shape}"
            )
        shift = 2**J // 2
        self.internal = np.ascontiguousarray(internal.T)
        self.values = self.internal * np.exp(-2j * math.pi * shift * coords.T)
        self.values.setflags(write=False)
        self.internal.setflags(write=False)

        # product over the axes, used by the 2D interior transform
        if self.values.ndim == 1:
            self._total = self.values
        else:
            self._total = self.values.prod(axis=0)
            self._total.setflags(write=False)

    @property
    def ndim(self) -> int:
        return self.values.ndim

    def axis(self, d: int) -> NDArray[complex]:
        """Phase factors of axis ``d``."""
        if self.values.ndim == 1:
            if d != 0:
                raise ValueError(f"1D phase has no axis {d}")
            return self.values
        return self.values[d]

    def total(self) -> NDArray[complex]:
        """Product of the phase factors of all axes."""
        return self._total
