"""Haar scaling function."""

__all__ = ["Haar"]

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ._wavelet import Wavelet, register_wavelet


class Haar(Wavelet):
    """
    Haar wavelet, ``phi = 1_[0, 1)``.

    Its Fourier transform is ``phi_hat(ξ) = exp(-iπξ) sinc(ξ)``. Translates
    of ``phi`` fit in ``[0, 1)`` so no boundary correction is needed.

    """

    name = "haar"
    vanishing_moments = 1
    has_boundary = False

    def fourier(self, samples: ArrayLike, J: int) -> NDArray[complex]:
        xi = np.asarray(samples, dtype=np.float64) * 2.0 ** (-J)
        return 2.0 ** (-J / 2) * np.exp(-1j * math.pi * xi) * np.sinc(xi)


register_wavelet(Haar())
