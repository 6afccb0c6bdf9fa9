"""Adjoint operator test."""

import numpy as np


def test_inner_product(operator, crandn):
    """Test <T x, v> == <x, T^H v> for every variant."""
    x = crandn(operator.wsize)
    v = crandn(operator.n_samples)

    lhs = np.vdot(v, operator.apply(x))
    rhs = np.vdot(operator.apply_adjoint(v), x)

    scale = np.linalg.norm(x) * np.linalg.norm(v) * np.linalg.norm(operator.to_dense(), 2)
    assert abs(lhs - rhs) <= 1e-9 * scale


def test_adjoint_shape(operator, crandn):
    """Test adjoint output lives in the coefficient space."""
    z = operator.apply_adjoint(crandn(operator.n_samples))
    assert z.shape == operator.wsize
    assert z.dtype == np.complex128
    assert operator.H.ishape == operator.oshape
    assert operator.H.oshape == operator.ishape


def test_adjoint_does_not_modify_input(operator, crandn):
    """Test input samples are left untouched by the weighting."""
    v = crandn(operator.n_samples)
    v0 = v.copy()
    operator.apply_adjoint(v)
    np.testing.assert_array_equal(v, v0)


def test_forward_does_not_modify_input(operator, crandn):
    x = crandn(operator.wsize)
    x0 = x.copy()
    operator.apply(x)
    np.testing.assert_array_equal(x, x0)


def test_repeated_application(operator, crandn):
    """Test scratch buffers do not leak between applications."""
    x = crandn(operator.wsize)
    v = crandn(operator.n_samples)
    y1 = operator.apply(x)
    z1 = operator.apply_adjoint(v)
    operator.apply(crandn(operator.wsize))
    operator.apply_adjoint(crandn(operator.n_samples))
    np.testing.assert_allclose(operator.apply(x), y1, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(operator.apply_adjoint(v), z1, rtol=1e-12, atol=1e-12)
