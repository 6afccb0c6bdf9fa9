"""LSMR solver."""

__all__ = ["lsmr", "LSMR"]

import warnings

import numpy as np
from numpy.typing import NDArray

from scipy.sparse.linalg import lsmr as scipy_lsmr

from .._errors import DimensionMismatch, SolverNonConvergence
from .._sigpy import Alg, App, Linop
from ..interop import aslinearoperator

from ._monitor import Monitor

# scipy lsmr stop reason when the iteration limit is reached
_ISTOP_MAXITER = 7


def lsmr(
    A: Linop,
    b: NDArray[complex],
    damp: float = 0.0,
    x: NDArray[complex] | None = None,
    max_iter: int = 100,
    tol: float = 1e-8,
    verbose: bool = False,
    record_time: bool = False,
) -> NDArray[complex]:
    r"""
    LSMR method.

    Solves the damped linear least squares problem::

        minimize || A @ x - b ||^2_2 + damp^2 * || x ||^2_2

    Parameters
    ----------
    A : Linop
        Linear operator.
    b : NDArray[complex]
        Right-hand side observation vector.
    damp : float, optional
        Damping factor. The default is ``0.0``.
    x : NDArray[complex] | None, optional
        Initial guess for the solution.
    max_iter : int, optional
        Maximum number of iterations (default is ``100``).
    tol : float, optional
        Tolerance for stopping condition, used for both ``atol`` and ``btol``
        of :func:`scipy.sparse.linalg.lsmr` (default is ``1e-8``).
    verbose : bool, optional
        Toggle whether show progress (default is ``False``).
    record_time : bool, optional
        Toggle wheter record runtime (default is ``False``).

    Returns
    -------
    NDArray[complex]
        Solution to the problem.

    Raises
    ------
    SolverNonConvergence
        If ``tol > 0`` and LSMR stops on the iteration limit.

    """
    solver = LSMR(A, b, damp, x, max_iter, tol, verbose, record_time)
    return solver.run()


class LSMR(App):
    r"""
    LSMR method.

    Solves the damped linear least squares problem::

        minimize || A @ x - b ||^2_2 + damp^2 * || x ||^2_2

    Parameters
    ----------
    A : Linop
        Linear operator.
    b : NDArray[complex]
        Right-hand side observation vector.
    damp : float, optional
        Damping factor. The default is ``0.0``.
    x : NDArray[complex] | None, optional
        Initial guess for the solution.
    max_iter : int, optional
        Maximum number of iterations (default is ``100``).
    tol : float, optional
        Tolerance for stopping condition (default is ``1e-8``).
    verbose : bool, optional
        Toggle whether show progress (default is ``False``).
    record_time : bool, optional
        Toggle wheter record runtime (default is ``False``).

    """

    def __init__(
        self,
        A: Linop,
        b: NDArray[complex],
        damp: float = 0.0,
        x: NDArray[complex] | None = None,
        max_iter: int = 100,
        tol: float = 1e-8,
        verbose: bool = False,
        record_time: bool = False,
    ):
        _alg = _LSMR(A, b, damp, x, max_iter, tol, verbose, record_time)
        super().__init__(_alg, show_pbar=False)

    def _output(self):
        alg = self.alg
        if alg.tol > 0 and alg.istop == _ISTOP_MAXITER:
            raise SolverNonConvergence(alg.x, alg.normar, alg.itn, alg.tol)
        return alg.x


# %% utils
class _LSMR(Alg):
    def __init__(
        self,
        A: Linop,
        b: NDArray[complex],
        damp: float = 0.0,
        x: NDArray[complex] | None = None,
        max_iter: int = 100,
        tol: float = 1e-8,
        verbose: bool = False,
        record_time: bool = False,
    ):
        b = np.asarray(b, dtype=np.complex128)
        if list(b.shape) != list(A.oshape):
            raise DimensionMismatch(
                f"Right-hand side of shape {b.shape} does not match {tuple(A.oshape)}"
            )
        self.ishape = A.ishape
        self.A = aslinearoperator(A)
        self.b = b
        self.damp = damp
        self.x = x
        self.tol = tol
        self._finished = False
        self._verbose = verbose
        self._record_time = record_time

        super().__init__(max_iter)

    def update(self):  # noqa
        # start timer
        if self._record_time:
            timer = Monitor()
            timer.start_timer()

        # actual run
        if self._verbose:
            print("LSMR start")
        x0 = None if self.x is None else np.asarray(self.x, dtype=np.complex128).ravel()
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            res = scipy_lsmr(
                self.A,
                self.b.ravel(),
                damp=self.damp,
                atol=self.tol,
                btol=self.tol,
                maxiter=self.max_iter,
                x0=x0,
            )  # here we let scipy handle steps.
        self.istop, self.itn, self.normar = res[1], res[2], res[4]
        self.x = res[0].astype(np.complex128).reshape(*self.ishape)
        if self._verbose:
            print(f"LSMR end: {self.itn} iterations, stop reason {self.istop}")

        # stop timer
        if self._record_time:
            timer.stop_timer()
            self.time = timer.time
            if self._verbose:
                print(f"Elapsed time: {self.time} s")
        self._finished = True

    def _done(self):
        return self._finished
