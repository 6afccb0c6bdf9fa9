"""Forward and adjoint kernels of the change of basis operator.

Each variant (no boundary / boundary, 1D / 2D) has a forward and an adjoint
kernel. Kernels receive validated ``complex128`` arrays and the operator
holding the NUFFT plans, phase, boundary blocks, weighting and scratch
buffers. 2D grids are indexed ``X[ny, nx]``.
"""

__all__ = ["FORWARD", "ADJOINT", "forward_axis", "adjoint_axis"]

import numpy as np

from .._errors import DimensionMismatch
from .._utils import had, hadc, split, yphad


# %% single axis helpers (boundary variants)
def forward_axis(op, x, d, out):
    """
    Apply the unweighted 1D operator of axis ``d`` to the vector ``x``.

    Parameters
    ----------
    op : Freq2Wave
        Operator with boundary correction.
    x : NDArray[complex]
        Coefficients of shape ``(2**J,)`` along axis ``d``.
    d : int
        Axis, ``0`` for ``x`` and ``1`` for ``y``.
    out : NDArray[complex]
        Contiguous output of shape ``(M,)``.

    """
    if d not in range(op.ndim):
        raise DimensionMismatch(f"Axis {d} out of range for {op.ndim}D operator")
    if x.shape != (op._n,):
        raise DimensionMismatch(f"Axis input shape {x.shape} != ({op._n},)")
    if out.shape != (op.n_samples,):
        raise DimensionMismatch(f"Axis output shape {out.shape} != ({op.n_samples},)")

    blocks = op._boundary
    xleft, xint, xright = split(x, op._p)

    # Internal scaling functions
    op._plan_axes[d].forward(xint, out=out)
    had(out, op._phase.axis(d))

    # Contribution from the boundaries
    out += blocks.left[d] @ xleft
    out += blocks.right[d] @ xright
    return out


def adjoint_axis(op, v, d, out):
    """
    Apply the unweighted 1D adjoint of axis ``d`` to the samples ``v``.

    ``v`` is not modified. ``out`` may be a strided view of a grid.

    """
    if d not in range(op.ndim):
        raise DimensionMismatch(f"Axis {d} out of range for {op.ndim}D operator")
    if v.shape != (op.n_samples,):
        raise DimensionMismatch(f"Axis input shape {v.shape} != ({op.n_samples},)")
    if out.shape != (op._n,):
        raise DimensionMismatch(f"Axis output shape {out.shape} != ({op._n},)")

    blocks = op._boundary
    zleft, zint, zright = split(out, op._p)

    # Boundary contributions don't use the phase
    zleft[...] = blocks.left_h(d) @ v
    zright[...] = blocks.right_h(d) @ v

    # Internal scaling functions
    tmp = hadc(op._scratch("axis"), v, op._phase.axis(d))
    zint[...] = op._plan_axes[d].adjoint(tmp)
    return out


# %% no boundary
def _forward_1d(op, x):
    y = op._plan.forward(x)
    had(y, op._phase.values)
    return op._weighting.apply(y)


def _forward_2d(op, X):
    y = op._plan.forward(X)
    had(y, op._phase.total())
    return op._weighting.apply(y)


def _adjoint_1d(op, v):
    tmp = op._weighted(v)
    hadc(tmp, tmp, op._phase.values)
    return op._plan.adjoint(tmp)


def _adjoint_2d(op, v):
    tmp = op._weighted(v)
    hadc(tmp, tmp, op._phase.total())
    return op._plan.adjoint(tmp)


# %% boundary
def _forward_boundary_1d(op, x):
    y = np.empty(op.n_samples, dtype=np.complex128)
    forward_axis(op, x, 0, y)
    return op._weighting.apply(y)


def _forward_boundary_2d(op, X):
    p, N = op._p, op._n
    blocks = op._boundary
    phase = op._phase

    # Internal scaling functions
    y = op._plan.forward(X[p : N - p, p : N - p])
    had(y, phase.axis(0), phase.axis(1))

    tmp = op._scratch("tmp")
    for k in range(p):
        # rows with a boundary function in y: corners and y-edges
        forward_axis(op, X[k], 0, tmp)
        yphad(y, blocks.left[1][:, k], tmp)

        forward_axis(op, X[N - p + k], 0, tmp)
        yphad(y, blocks.right[1][:, k], tmp)

        # columns with a boundary function in x and interior y: x-edges
        op._plan_axes[1].forward(X[p : N - p, k], out=tmp)
        had(tmp, phase.axis(1))
        yphad(y, blocks.left[0][:, k], tmp)

        op._plan_axes[1].forward(X[p : N - p, N - p + k], out=tmp)
        had(tmp, phase.axis(1))
        yphad(y, blocks.right[0][:, k], tmp)

    return op._weighting.apply(y)


def _adjoint_boundary_1d(op, v):
    z = np.empty(op._n, dtype=np.complex128)
    return adjoint_axis(op, op._weighted(v), 0, z)


def _adjoint_boundary_2d(op, v):
    p, N = op._p, op._n
    blocks = op._boundary
    phase = op._phase

    weighted = op._weighted(v)
    Z = np.empty((N, N), dtype=np.complex128)
    tmp = op._scratch("tmp")

    for k in range(p):
        # rows with a boundary function in y
        hadc(tmp, weighted, blocks.left[1][:, k])
        adjoint_axis(op, tmp, 0, Z[k])

        hadc(tmp, weighted, blocks.right[1][:, k])
        adjoint_axis(op, tmp, 0, Z[N - p + k])

        # columns with a boundary function in x and interior y
        hadc(tmp, weighted, blocks.left[0][:, k], phase.axis(1))
        Z[p : N - p, k] = op._plan_axes[1].adjoint(tmp)

        hadc(tmp, weighted, blocks.right[0][:, k], phase.axis(1))
        Z[p : N - p, N - p + k] = op._plan_axes[1].adjoint(tmp)

    # Internal coefficients
    hadc(tmp, weighted, phase.axis(0), phase.axis(1))
    Z[p : N - p, p : N - p] = op._plan.adjoint(tmp)

    return Z


# (ndim, has_boundary) -> kernel
FORWARD = {
    (1, False): _forward_1d,
    (2, False): _forward_2d,
    (1, True): _forward_boundary_1d,
    (2, True): _forward_boundary_2d,
}

ADJOINT = {
    (1, False): _adjoint_1d,
    (2, False): _adjoint_2d,
    (1, True): _adjoint_boundary_1d,
    (2, True): _adjoint_boundary_2d,
}
