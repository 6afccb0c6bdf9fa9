"""Sample weighting variants."""

__all__ = ["Uniform", "Weighted"]

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Uniform:
    """No weighting (uniform samples)."""

    is_uniform = True
    values = None

    def apply(self, y: NDArray[complex]) -> NDArray[complex]:
        return y


class Weighted:
    """
    Multiplication by the square roots of density compensation weights.

    The forward operator multiplies its output once and the adjoint its
    input once, so the normal operator is weighted by the full weights.

    Parameters
    ----------
    weights : ArrayLike
        Positive density compensation weights of shape ``(M,)``.

    """

    is_uniform = False

    def __init__(self, weights: ArrayLike):
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 1 or not np.all(weights > 0):
            raise ValueError("Weights must be a vector of positive numbers")
        self.values = np.sqrt(weights)
        self.values.setflags(write=False)

    def apply(self, y: NDArray[complex]) -> NDArray[complex]:
        y *= self.values
        return y
