"""Conjugate Gradient on the Normal equations."""

__all__ = ["cgnr", "CGNR"]

import numpy as np
from numpy.typing import NDArray

from .._errors import DimensionMismatch, SolverNonConvergence
from .._sigpy import Alg, App, Linop

from ._monitor import Monitor


def cgnr(
    A: Linop,
    b: NDArray[complex],
    x: NDArray[complex] | None = None,
    max_iter: int = 100,
    tol: float = 1e-8,
    verbose: bool = False,
    record_stats: bool = False,
    record_time: bool = False,
    solution: NDArray[complex] | None = None,
) -> NDArray[complex]:
    r"""
    Conjugate gradient method on the normal equations (CGNR).

    Solves the linear least squares problem::

        minimize || A @ x - b ||_2

    by applying conjugate gradient to ``A.H A x = A.H b`` without
    forming ``A.H A``. Only ``A.apply`` and ``A.H.apply`` are used.

    Parameters
    ----------
    A : Linop
        Linear operator.
    b : NDArray[complex]
        Right-hand side observation vector of shape ``A.oshape``.
    x : NDArray[complex] | None, optional
        Initial guess of shape ``A.ishape``. The default is zero.
    max_iter : int, optional
        Maximum number of iterations (default is ``100``).
    tol : float, optional
        Stop when ``||A.H r|| <= tol * ||A.H b||`` (default is ``1e-8``).
        With ``tol = 0`` exactly ``max_iter`` iterations are performed.
    verbose : bool, optional
        Toggle whether show progress (default is ``False``).
    record_stats : bool, optional
        Toggle cost function monitoring. The default is ``False``.
    record_time : bool, optional
        Toggle wheter record runtime (default is ``False``).
    solution : NDArray[complex] | None, optional
        Ground Truth solution (to check performance). The default is ``None``.

    Returns
    -------
    NDArray[complex]
        Solution to the problem.

    Raises
    ------
    SolverNonConvergence
        If ``tol > 0`` and the tolerance is not met within ``max_iter``
        iterations. The exception carries the last iterate.

    """
    solver = CGNR(
        A,
        b,
        x,
        max_iter,
        tol,
        verbose,
        record_stats,
        record_time,
        solution,
    )
    return solver.run()


class CGNR(App):
    r"""
    Conjugate gradient method on the normal equations (CGNR).

    Solves the linear least squares problem::

        minimize || A @ x - b ||_2

    Parameters
    ----------
    A : Linop
        Linear operator.
    b : NDArray[complex]
        Right-hand side observation vector.
    x : NDArray[complex] | None, optional
        Initial guess for the solution.
    max_iter : int, optional
        Maximum number of iterations (default is ``100``).
    tol : float, optional
        Relative tolerance on the normal equations residual
        (default is ``1e-8``).
    verbose : bool, optional
        Toggle whether show progress (default is ``False``).
    record_stats : bool, optional
        Toggle cost function monitoring. The default is ``False``.
    record_time : bool, optional
        Toggle wheter record runtime (default is ``False``).
    solution : NDArray[complex] | None, optional
        Ground Truth solution (to check performance). The default is ``None``.

    Attributes
    ----------
    history : list[float] | tuple[list[float], list[float]]
        Cost (and error) per iteration, if ``record_stats``.
    time : float
        Elapsed time in seconds, if ``record_time``.

    """

    def __init__(
        self,
        A: Linop,
        b: NDArray[complex],
        x: NDArray[complex] | None = None,
        max_iter: int = 100,
        tol: float = 1e-8,
        verbose: bool = False,
        record_stats: bool = False,
        record_time: bool = False,
        solution: NDArray[complex] | None = None,
    ):
        self._monitor = None
        if record_stats or record_time or verbose:
            self._monitor = Monitor(verbose, solution)
        self._record_stats = record_stats
        self._record_time = record_time
        self._verbose = verbose

        _alg = _CGNR(A, b, x, max_iter, tol)
        super().__init__(_alg, show_pbar=False)

    def _pre_update(self):
        if self._record_time and self.alg.iter == 0:
            self._monitor.start_timer()

    def _post_update(self):
        if self._monitor is not None:
            self._monitor(self.alg.x, self.alg.r)

    def _output(self):
        alg = self.alg
        if self._record_time:
            if alg.iter == 0:
                self._monitor.start_timer()
            self._monitor.stop_timer()
            self.time = self._monitor.time
            if self._verbose:
                print(f"Elapsed time: {self.time} s")
        if self._record_stats:
            self.history = self._monitor.history

        if alg.tol > 0 and not alg.converged:
            raise SolverNonConvergence(alg.x, alg.resid, alg.iter, alg.tol)
        return alg.x


# %% utils
class _CGNR(Alg):
    def __init__(
        self,
        A: Linop,
        b: NDArray[complex],
        x: NDArray[complex] | None = None,
        max_iter: int = 100,
        tol: float = 1e-8,
    ):
        b = np.asarray(b, dtype=np.complex128)
        if list(b.shape) != list(A.oshape):
            raise DimensionMismatch(
                f"Right-hand side of shape {b.shape} does not match {tuple(A.oshape)}"
            )
        if x is None:
            x = np.zeros(A.ishape, dtype=np.complex128)
        else:
            x = np.array(x, dtype=np.complex128)
            if list(x.shape) != list(A.ishape):
                raise DimensionMismatch(
                    f"Initial guess of shape {x.shape} does not match {tuple(A.ishape)}"
                )

        self.A = A
        self.b = b
        self.x = x
        self.tol = tol

        self.r = b - A.apply(x)
        self.z = A.H.apply(self.r)
        self.p = self.z.copy()
        self.znorm2 = _norm2(self.z)

        bnorm = np.sqrt(_norm2(A.H.apply(b)))
        self._scale = bnorm if bnorm > 0 else 1.0
        self.resid = np.sqrt(self.znorm2) / self._scale
        self.breakdown = False

        super().__init__(max_iter)

    @property
    def converged(self) -> bool:
        return self.resid <= self.tol

    def _update(self):
        w = self.A.apply(self.p)
        wnorm2 = _norm2(w)
        if wnorm2 == 0:
            self.breakdown = True
            return

        alpha = self.znorm2 / wnorm2
        self.x += alpha * self.p
        self.r -= alpha * w

        self.z = self.A.H.apply(self.r)
        znorm2 = _norm2(self.z)
        beta = znorm2 / self.znorm2
        self.znorm2 = znorm2
        self.p *= beta
        self.p += self.z

        self.resid = np.sqrt(znorm2) / self._scale

    def _done(self):
        return (
            self.iter >= self.max_iter
            or self.breakdown
            or (self.tol > 0 and self.converged)
            or self.znorm2 == 0
        )


def _norm2(x):
    return np.vdot(x, x).real
