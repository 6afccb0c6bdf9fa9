"""Wavelet evaluators test."""

import pytest

import numpy as np

from freq2wave.wavelets import (
    Haar,
    Wavelet,
    available_wavelets,
    get_wavelet,
    register_wavelet,
)


def test_haar_closed_form():
    """Test the Haar transform against the integral over the support."""
    J = 2
    xi = np.array([-3.0, 0.0, 0.5, 1.0, 4.0, 7.25])

    # phi_{J,0} = 2^(J/2) on [0, 2^-J)
    w = 2 * np.pi * xi
    expected = np.empty_like(w, dtype=complex)
    nz = w != 0
    expected[nz] = 2 ** (J / 2) * (1 - np.exp(-1j * w[nz] / 2**J)) / (1j * w[nz])
    expected[~nz] = 2 ** (-J / 2)

    np.testing.assert_allclose(Haar().fourier(xi, J), expected, atol=1e-14)


def test_haar_zeros():
    """Test the transform vanishes at nonzero multiples of 2^J."""
    J = 3
    xi = 8.0 * np.array([-2, -1, 1, 3])
    np.testing.assert_allclose(Haar().fourier(xi, J), 0.0, atol=1e-15)


def test_haar_properties():
    haar = Haar()
    assert haar.vanishing_moments == 1
    assert not haar.has_boundary
    with pytest.raises(NotImplementedError):
        haar.boundary_fourier(np.zeros(3), "left", 2)


def test_registry():
    assert "haar" in available_wavelets()
    assert isinstance(get_wavelet("Haar"), Haar)
    haar = Haar()
    assert get_wavelet(haar) is haar
    with pytest.raises(ValueError):
        get_wavelet("db2")


def test_register_wavelet():
    class Box(Wavelet):
        name = "test-box"

        def fourier(self, samples, J):
            return np.ones_like(samples, dtype=complex)

    box = register_wavelet(Box())
    assert get_wavelet("test-box") is box
    assert "test-box" in available_wavelets()

    class Nameless(Wavelet):
        pass

    with pytest.raises(ValueError):
        register_wavelet(Nameless())
