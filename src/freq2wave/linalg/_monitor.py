"""Callback for solvers."""

__all__ = ["Monitor"]

import time

import numpy as np
from numpy.typing import NDArray

from dataclasses import dataclass


@dataclass
class Monitor:
    """Utility class to monitor solver and record time."""

    verbose: bool = False
    solution: NDArray | None = None
    _cost: list[float] = None
    _iter: int = 0
    _error: list[float] = None
    _start: float = 0.0
    _stop: float = 0.0
    _time: float | None = None

    def __post_init__(self):
        self._cost = []
        self._error = []

    def __call__(self, x: NDArray, residual: NDArray):
        self._cost.append(0.5 * np.linalg.norm(residual) ** 2)  # Least squares cost
        if self.solution is not None:
            self._error.append(np.linalg.norm(x - self.solution))
        if self.verbose and self.solution is not None:
            print(
                f"Iteration: {self._iter} | Cost: {self._cost[-1]:.6e} | Error: {self._error[-1]:.6e}"
            )
        elif self.verbose:
            print(f"Iteration: {self._iter} | Cost: {self._cost[-1]:.6e}")
        self._iter += 1

    def start_timer(self):
        self._start = time.perf_counter()

    def stop_timer(self):
        self._stop = time.perf_counter()
        self._time = self._stop - self._start

    @property
    def time(self):
        return self._time

    @property
    def history(self):
        if self.solution is not None:
            return (self._cost, self._error)
        else:
            return self._cost
