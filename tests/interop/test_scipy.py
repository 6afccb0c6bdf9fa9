"""Scipy interoperability test."""

import numpy as np

import scipy.sparse.linalg as spla

from freq2wave.interop import aslinearoperator


def test_aslinearoperator(operator, crandn):
    """Test matvec and rmatvec agree with apply and apply_adjoint."""
    A = aslinearoperator(operator)
    assert isinstance(A, spla.LinearOperator)
    assert A.shape == operator.shape

    x = crandn(operator.wsize)
    v = crandn(operator.n_samples)
    np.testing.assert_allclose(A.matvec(x.ravel()), operator.apply(x))
    np.testing.assert_allclose(A.rmatvec(v), operator.apply_adjoint(v).ravel())


def test_aslinearoperator_none():
    assert aslinearoperator(None) is None


def test_scipy_lsqr(build, crandn):
    """Test operator can be handed to scipy solvers."""
    T = build(1, False, True)
    x0 = crandn(T.wsize)
    x = spla.lsqr(aslinearoperator(T), T.apply(x0), atol=1e-12, btol=1e-12)[0]
    np.testing.assert_allclose(x, x0, atol=1e-6)
