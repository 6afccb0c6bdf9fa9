"""Exceptions and warning categories."""

__all__ = [
    "Freq2WaveError",
    "ScaleTooSmall",
    "MissingBandwidth",
    "TooFewWavelets",
    "DimensionMismatch",
    "BandwidthError",
    "SolverNonConvergence",
    "Freq2WaveWarning",
    "UnderdeterminedWarning",
    "BandwidthWarning",
]

from numpy.typing import NDArray


class Freq2WaveError(Exception):
    """Base class for all errors raised by freq2wave."""


class ScaleTooSmall(Freq2WaveError, ValueError):
    """Scale ``J`` does not admit the wavelet, i.e. ``2**J < 2 * p - 1``."""


class MissingBandwidth(Freq2WaveError, ValueError):
    """Non-uniform samples were supplied without a bandwidth."""


class TooFewWavelets(Freq2WaveError, ValueError):
    """The boundary functions overlap and leave no interior wavelets."""


class DimensionMismatch(Freq2WaveError, ValueError):
    """Shape of an argument does not match the operator."""


class BandwidthError(Freq2WaveError, ValueError):
    """Bandwidth is inconsistent with the sample geometry."""


class SolverNonConvergence(Freq2WaveError, RuntimeError):
    """
    Iterative solver stopped on the iteration cap.

    Parameters
    ----------
    x : NDArray[complex]
        Best available estimate (last iterate).
    residual : float
        Achieved stopping quantity.
    iterations : int
        Number of iterations performed.
    tol : float
        Requested tolerance.

    """

    def __init__(
        self, x: NDArray[complex], residual: float, iterations: int, tol: float
    ):
        self.x = x
        self.residual = residual
        self.iterations = iterations
        self.tol = tol
        super().__init__(
            f"Solver did not converge in {iterations} iterations: "
            f"residual {residual:.3e} > tolerance {tol:.3e}"
        )


class Freq2WaveWarning(UserWarning):
    """Base class for non-fatal diagnostics."""


class UnderdeterminedWarning(Freq2WaveWarning):
    """The scale is high compared to the number of samples."""


class BandwidthWarning(Freq2WaveWarning):
    """The scale is high compared to the bandwidth."""
