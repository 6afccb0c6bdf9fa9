"""Boundary correction blocks."""

__all__ = ["BoundaryBlocks"]

import numpy as np
from numpy.typing import NDArray


class BoundaryBlocks:
    """
    Fourier transforms of the boundary scaling functions at the samples.

    Parameters
    ----------
    left : list[NDArray[complex]]
        One ``(M, p)`` matrix per dimension for the left boundary functions.
    right : list[NDArray[complex]]
        One ``(M, p)`` matrix per dimension for the right boundary functions.
        Column ``k`` belongs to coefficient ``N - p + k``, i.e. the last
        column is closest to the boundary.

    """

    def __init__(self, left: list[NDArray[complex]], right: list[NDArray[complex]]):
        if len(left) != len(right) or len(left) not in (1, 2):
            raise ValueError("Need one left and one right block per dimension")
        self.left = [self._as_block(block) for block in left]
        self.right = [self._as_block(block) for block in right]

        shapes = {block.shape for block in self.left + self.right}
        if len(shapes) != 1:
            raise ValueError(f"Boundary blocks must share one shape, got {shapes}")
        self.n_samples, self.width = shapes.pop()

        # conjugate transposes for the adjoint
        self._left_h = [np.ascontiguousarray(block.conj().T) for block in self.left]
        self._right_h = [np.ascontiguousarray(block.conj().T) for block in self.right]

    @staticmethod
    def _as_block(block):
        block = np.array(block, dtype=np.complex128, order="C")
        if block.ndim != 2:
            raise ValueError(f"Boundary block must be a matrix, got {block.shape}")
        block.setflags(write=False)
        return block

    @property
    def ndim(self) -> int:
        return len(self.left)

    def left_h(self, d: int) -> NDArray[complex]:
        """Conjugate transpose of the left block of axis ``d``."""
        return self._left_h[d]

    def right_h(self, d: int) -> NDArray[complex]:
        """Conjugate transpose of the right block of axis ``d``."""
        return self._right_h[d]
