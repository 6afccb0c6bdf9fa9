"""In-place element-wise complex kernels."""

__all__ = ["had", "hadc", "yphad"]

import numpy as np
from numpy.typing import NDArray


def had(y: NDArray[complex], *factors: NDArray) -> NDArray[complex]:
    """Hadamard product ``y *= f_1 * f_2 * ...`` in place."""
    for f in factors:
        np.multiply(y, f, out=y)
    return y


def hadc(
    out: NDArray[complex], x: NDArray[complex], *factors: NDArray
) -> NDArray[complex]:
    """Conjugate Hadamard product ``out = x * conj(f_1) * conj(f_2) * ...``."""
    if out is not x:
        np.copyto(out, x)
    for f in factors:
        if np.iscomplexobj(f):
            out *= f.conj()
        else:
            out *= f
    return out


def yphad(
    y: NDArray[complex], a: NDArray[complex], b: NDArray[complex]
) -> NDArray[complex]:
    """Accumulate ``y += a * b`` in place."""
    y += a * b
    return y
