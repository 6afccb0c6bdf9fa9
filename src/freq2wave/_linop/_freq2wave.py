"""Change of basis operator from Fourier samples to wavelet coefficients."""

__all__ = ["Freq2Wave", "Freq2WaveAdjoint"]

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .._diagnostics import Diagnostic, Reporter, warn_reporter
from .._errors import (
    BandwidthWarning,
    DimensionMismatch,
    MissingBandwidth,
    ScaleTooSmall,
    TooFewWavelets,
    UnderdeterminedWarning,
)
from .._sigpy import Linop
from .._utils import as_samples, is_uniform, to_torus
from ..base import BoundaryBlocks, NUFFTPlan, PhaseDiagonal, Uniform, Weighted
from ..density import weights as density_weights
from ..wavelets import Wavelet, get_wavelet

from ._dense import to_dense
from ._kernels import ADJOINT, FORWARD


class Freq2Wave(Linop):
    """
    Change of basis operator from wavelet coefficients to Fourier samples.

    Maps the coefficients of a function in the scaling function basis at
    scale ``J`` to the Fourier transform of the function at the samples,
    without forming the matrix.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M,)`` (1D) or ``(M, 2)`` (2D, columns
        ``x`` and ``y``).
    wavelet : str | Wavelet
        Registered wavelet name (e.g. ``"haar"``) or wavelet instance.
    J : int
        Scale. There are ``2**J`` scaling functions per axis.
    bandwidth : float | None, optional
        Half width of the band containing non-uniform samples. Required
        for non-uniform samples and ignored for uniform samples.
        The default is ``None``.
    eps : float, optional
        NUFFT precision. The default is ``1e-12``.
    upsampfac : float | None, optional
        NUFFT oversampling factor. The default is ``None`` (finufft default).
    nthreads : int | None, optional
        Number of NUFFT threads. The default is ``None`` (all cores).
    reporter : Callable[[Diagnostic], None] | None, optional
        Receives the non-fatal construction diagnostics. The default
        is ``None`` (issue them with :mod:`warnings`).

    Notes
    -----
    The input is a vector of length ``2**J`` (1D) or a grid of shape
    ``(2**J, 2**J)`` indexed ``X[ny, nx]`` (2D); a flat vector in the order
    of ``X.ravel()`` is also accepted. The output has length ``M``.

    For non-uniform samples the output is multiplied by the square roots
    of the density compensation weights.

    The operator reuses private work buffers and NUFFT plans, so an instance
    must not be applied from several threads concurrently. Build one
    operator per thread instead.

    """

    def __init__(
        self,
        samples: ArrayLike,
        wavelet: str | Wavelet,
        J: int,
        bandwidth: float | None = None,
        *,
        eps: float = 1e-12,
        upsampfac: float | None = None,
        nthreads: int | None = None,
        reporter: Reporter | None = None,
    ):
        wavelet = get_wavelet(wavelet)
        J = int(J)
        if J < 0:
            raise ScaleTooSmall(f"Scale must be non-negative, got {J}")
        vm = int(wavelet.vanishing_moments)
        N = 2**J
        if N < 2 * vm - 1:
            raise ScaleTooSmall(
                f"Scale {J} is not large enough for wavelet {wavelet.name!r} "
                f"with {vm} vanishing moments"
            )

        samples = as_samples(samples)
        ndim = samples.ndim
        M = samples.shape[0]

        self._reporter = warn_reporter if reporter is None else reporter
        self._diagnostics = []
        if N >= M:
            self._report(
                Diagnostic(
                    UnderdeterminedWarning,
                    f"The scale is high compared to the number of samples "
                    f"(2**{J} >= {M})",
                )
            )

        # Weights for non-uniform samples
        if is_uniform(samples):
            self._weighting = Uniform()
        else:
            if bandwidth is None:
                raise MissingBandwidth("Samples are not uniform; supply bandwidth")
            if N > 2 * bandwidth:
                self._report(
                    Diagnostic(
                        BandwidthWarning,
                        f"The scale is high compared to the bandwidth "
                        f"(2**{J} > 2 * {bandwidth})",
                    )
                )
            self._weighting = Weighted(density_weights(samples, bandwidth))

        # The number of internal scaling functions per axis
        if wavelet.has_boundary:
            Nint = N - 2 * vm
            if Nint <= 0:
                raise TooFewWavelets(
                    f"Too few wavelets: boundary functions overlap (2**{J} - 2 * {vm} <= 0)"
                )
        else:
            Nint = N

        # Diagonal used in 'multiplication' with the NUFFT
        torus = to_torus(samples, J)
        self._phase = PhaseDiagonal(wavelet.fourier(samples, J), torus, J)
        self._coords = np.ascontiguousarray(np.atleast_2d(torus.T))

        # NUFFT plans; grid axis 0 is y in 2D
        opts = dict(eps=eps, upsampfac=upsampfac, nthreads=nthreads)
        self._plan = NUFFTPlan(self._coords[::-1].T, ndim * (Nint,), **opts)

        if wavelet.has_boundary:
            if ndim == 1:
                self._plan_axes = [self._plan]
            else:
                self._plan_axes = [
                    NUFFTPlan(self._coords[d], Nint, **opts) for d in range(ndim)
                ]
            left = []
            right = []
            for d in range(ndim):
                xi = samples if ndim == 1 else samples[:, d]
                left.append(wavelet.boundary_fourier(xi, "left", J))
                right.append(wavelet.boundary_fourier(xi, "right", J))
            self._boundary = BoundaryBlocks(left, right)
            if self._boundary.width != vm or self._boundary.n_samples != M:
                raise DimensionMismatch(
                    f"Boundary blocks must have shape ({M}, {vm}), got "
                    f"({self._boundary.n_samples}, {self._boundary.width})"
                )
        else:
            self._plan_axes = None
            self._boundary = None

        self._wavelet = wavelet
        self._J = J
        self._n = N
        self._p = vm
        self._ndim = ndim

        # variant is fixed for the lifetime of the operator
        self._forward = FORWARD[ndim, wavelet.has_boundary]
        self._adjoint = ADJOINT[ndim, wavelet.has_boundary]

        # private work buffers, overwritten before every use
        self._buffers = {
            name: np.empty(M, dtype=np.complex128)
            for name in ("weighted", "tmp", "axis")
        }

        super().__init__([M], ndim * [N])

    # %% queries
    @property
    def ndim(self) -> int:
        """Dimension of the domain (1 or 2)."""
        return self._ndim

    @property
    def scale(self) -> int:
        """Scale ``J`` of the scaling functions."""
        return self._J

    @property
    def wavelet(self) -> Wavelet:
        """Wavelet family of the scaling functions."""
        return self._wavelet

    @property
    def vanishing_moments(self) -> int:
        """Number of vanishing moments ``p``, the width of the boundary regions."""
        return self._p

    @property
    def has_boundary(self) -> bool:
        """Does the wavelet have boundary correction."""
        return self._boundary is not None

    @property
    def is_uniform(self) -> bool:
        """Is the operator based on uniform samples."""
        return self._weighting.is_uniform

    @property
    def weights(self) -> NDArray[float] | None:
        """Square roots of the density compensation weights (``None`` if uniform)."""
        return self._weighting.values

    @property
    def phase(self) -> PhaseDiagonal:
        """Phase and scale correction around the NUFFT."""
        return self._phase

    @property
    def boundary(self) -> BoundaryBlocks | None:
        """Boundary blocks (``None`` without boundary correction)."""
        return self._boundary

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Non-fatal conditions detected at construction."""
        return tuple(self._diagnostics)

    @property
    def n_samples(self) -> int:
        """Number of Fourier samples ``M``."""
        return self.oshape[0]

    @property
    def n_coeffs(self) -> int:
        """Number of wavelet coefficients ``N``."""
        return self._n**self._ndim

    @property
    def wsize(self) -> tuple[int, ...]:
        """Size of the reconstructed wavelet coefficients."""
        return tuple(self.ishape)

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix shape ``(M, N)``."""
        return (self.n_samples, self.n_coeffs)

    # %% application
    def apply(self, input: ArrayLike) -> NDArray[complex]:
        """
        Map wavelet coefficients to Fourier samples.

        Parameters
        ----------
        input : ArrayLike
            Coefficients of shape ``wsize`` (or flat of length ``n_coeffs``).

        Returns
        -------
        NDArray[complex]
            Samples of shape ``(M,)``.

        """
        return super().apply(self._as_coefficients(input))

    def apply_adjoint(self, input: ArrayLike) -> NDArray[complex]:
        """
        Map Fourier samples to wavelet coefficients with the adjoint operator.

        Parameters
        ----------
        input : ArrayLike
            Samples of shape ``(M,)``.

        Returns
        -------
        NDArray[complex]
            Coefficients of shape ``wsize``.

        """
        return self.H.apply(input)

    def to_dense(self) -> NDArray[complex]:
        """
        Return the full change of basis matrix of shape ``(M, N)``.

        In 2D the columns follow ``X.ravel()``, i.e. ``(0, 0), (0, 1), ...``
        for ``X[ny, nx]`` with ``nx`` running fastest.

        """
        return to_dense(self)

    def solve(self, measurements: ArrayLike, **kwargs) -> NDArray[complex]:
        """
        Least squares reconstruction of wavelet coefficients.

        Parameters
        ----------
        measurements : ArrayLike
            Unweighted Fourier samples of the function; any shape with ``M``
            elements. For non-uniform samples these are
            ``op.apply(x) / op.weights``, not ``op.apply(x)``.
        **kwargs
            Forwarded to :func:`freq2wave.linalg.cgnr` (``max_iter``,
            ``tol``, ``verbose``, ...).

        Returns
        -------
        NDArray[complex]
            Coefficients of shape ``wsize``.

        Notes
        -----
        The measurements are multiplied by the square roots of the density
        compensation weights before solving the weighted system
        ``op @ x = weights * measurements``. The output of :meth:`apply` is
        already weighted, so passing it back for non-uniform samples yields
        the least squares solution of a twice weighted system instead of
        ``x``. For uniform samples both conventions coincide.

        """
        from ..linalg import cgnr

        y = np.array(measurements, dtype=np.complex128)
        if y.size != self.n_samples:
            raise DimensionMismatch(
                f"Expected {self.n_samples} measurements, got {y.size}"
            )
        y = y.ravel()

        # Non-uniform samples: Scale observations
        y = self._weighting.apply(y)

        return cgnr(self, y, **kwargs)

    def _apply(self, input):
        return self._forward(self, input)

    def _adjoint_linop(self):
        return Freq2WaveAdjoint(self)

    # %% helpers
    def _report(self, diagnostic: Diagnostic):
        self._diagnostics.append(diagnostic)
        self._reporter(diagnostic)

    def _scratch(self, name: str) -> NDArray[complex]:
        return self._buffers[name]

    def _weighted(self, v: NDArray[complex]) -> NDArray[complex]:
        out = self._buffers["weighted"]
        np.copyto(out, v)
        return self._weighting.apply(out)

    def _as_coefficients(self, input):
        input = np.asarray(input, dtype=np.complex128)
        if input.shape == self.wsize:
            return input
        if self._ndim == 2 and input.shape == (self.n_coeffs,):
            return input.reshape(self.wsize)
        raise DimensionMismatch(
            f"Coefficients of shape {input.shape} do not match operator input "
            f"shape {self.wsize}"
        )

    def _as_samples(self, input):
        input = np.asarray(input, dtype=np.complex128)
        if input.shape != (self.n_samples,):
            raise DimensionMismatch(
                f"Samples of shape {input.shape} do not match operator output "
                f"shape ({self.n_samples},)"
            )
        return input


class Freq2WaveAdjoint(Linop):
    """
    Adjoint of :class:`Freq2Wave`, mapping samples to coefficients.

    Parameters
    ----------
    op : Freq2Wave
        Forward operator.

    """

    def __init__(self, op: Freq2Wave):
        self._op = op
        super().__init__(op.ishape, op.oshape)

    def apply(self, input: ArrayLike) -> NDArray[complex]:
        return super().apply(self._op._as_samples(input))

    def _apply(self, input):
        return self._op._adjoint(self._op, input)

    def _adjoint_linop(self):
        return self._op
