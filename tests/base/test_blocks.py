"""Phase, boundary and weighting blocks test."""

import pytest

import numpy as np

from freq2wave._utils import to_torus
from freq2wave.base import BoundaryBlocks, PhaseDiagonal, Uniform, Weighted
from freq2wave.wavelets import Haar


def test_phase_1d():
    """Test the phase equals internal * exp(-iπξ) for J >= 1."""
    xi = np.linspace(-20.0, 20.0, 41)
    J = 3
    internal = Haar().fourier(xi, J)
    phase = PhaseDiagonal(internal, to_torus(xi, J), J)
    assert phase.ndim == 1
    np.testing.assert_allclose(phase.values, internal * np.exp(-1j * np.pi * xi))
    np.testing.assert_array_equal(phase.total(), phase.values)
    with pytest.raises(ValueError):
        phase.axis(1)


def test_phase_2d():
    rng = np.random.default_rng(0)
    xi = rng.uniform(-8.0, 8.0, (30, 2))
    J = 2
    internal = Haar().fourier(xi, J)
    phase = PhaseDiagonal(internal, to_torus(xi, J), J)
    assert phase.values.shape == (2, 30)
    np.testing.assert_allclose(phase.axis(0), internal[:, 0] * np.exp(-1j * np.pi * xi[:, 0]))
    np.testing.assert_allclose(phase.total(), phase.axis(0) * phase.axis(1))
    assert phase.total() is phase.total()
    with pytest.raises(ValueError):
        phase.total()[0] = 0.0


def test_phase_read_only():
    xi = np.arange(-4.0, 4.0)
    phase = PhaseDiagonal(Haar().fourier(xi, 1), to_torus(xi, 1), 1)
    with pytest.raises(ValueError):
        phase.values[0] = 0.0


def test_boundary_blocks():
    rng = np.random.default_rng(0)
    left = rng.standard_normal((10, 2)) + 1j * rng.standard_normal((10, 2))
    right = rng.standard_normal((10, 2))
    blocks = BoundaryBlocks([left], [right])
    assert blocks.ndim == 1
    assert (blocks.n_samples, blocks.width) == (10, 2)
    np.testing.assert_array_equal(blocks.left_h(0), left.conj().T)
    np.testing.assert_array_equal(blocks.right_h(0), right.T)


def test_boundary_blocks_shape_mismatch():
    with pytest.raises(ValueError):
        BoundaryBlocks([np.zeros((10, 2))], [np.zeros((10, 3))])
    with pytest.raises(ValueError):
        BoundaryBlocks([np.zeros((10, 2))], [])


def test_weighting():
    y = np.ones(3, dtype=np.complex128)
    assert Uniform().apply(y) is y
    assert Uniform().values is None

    w = Weighted([1.0, 4.0, 9.0])
    assert not w.is_uniform
    np.testing.assert_allclose(w.apply(y), [1.0, 2.0, 3.0])

    with pytest.raises(ValueError):
        Weighted([1.0, 0.0])
