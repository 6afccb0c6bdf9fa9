"""Common fixtures."""

import pytest

import numpy as np

from freq2wave import Freq2Wave
from freq2wave.wavelets import Wavelet


class BoundaryWavelet(Wavelet):
    """Smooth stand-in for a boundary corrected family with p = 2."""

    name = "test-boundary"
    vanishing_moments = 2
    has_boundary = True

    def fourier(self, samples, J):
        xi = np.asarray(samples, dtype=float) * 2.0 ** (-J)
        return 2.0 ** (-J / 2) * np.exp(-1j * np.pi * xi) * np.sinc(xi) ** 2

    def boundary_fourier(self, samples, side, J):
        xi = np.asarray(samples, dtype=float) * 2.0 ** (-J)
        N, p = 2**J, self.vanishing_moments
        k = np.arange(p) if side == "left" else np.arange(N - p, N)
        amp = np.arange(1, p + 1) / (p + 1)
        return (
            2.0 ** (-J / 2)
            * np.sinc(xi)[:, None]
            * np.exp(-2j * np.pi * np.outer(xi, k + 0.25))
            * amp
        )


def uniform_1d():
    return np.arange(-16, 16, dtype=float)


def nonuniform_1d(M=50, B=20.0, seed=0):
    rng = np.random.default_rng(seed)
    return np.sort(rng.uniform(-B, B, M))


def uniform_2d():
    x, y = np.meshgrid(np.arange(-6, 6), np.arange(-6, 6))
    return np.stack([x.ravel(), y.ravel()], axis=-1).astype(float)


def nonuniform_2d(B=8.0, seed=0):
    rng = np.random.default_rng(seed)
    grid = np.arange(-B + 0.5, B, 1.0)
    x, y = np.meshgrid(grid, grid)
    samples = np.stack([x.ravel(), y.ravel()], axis=-1)
    return samples + rng.uniform(-0.3, 0.3, samples.shape)


# (ndim, boundary, uniform) -> operator
VARIANTS = [
    (1, False, True),
    (1, False, False),
    (1, True, True),
    (1, True, False),
    (2, False, True),
    (2, False, False),
    (2, True, True),
    (2, True, False),
]


def build_operator(ndim, boundary, uniform):
    wavelet = BoundaryWavelet() if boundary else "haar"
    if ndim == 1:
        J = 4
        if uniform:
            return Freq2Wave(uniform_1d(), wavelet, J)
        return Freq2Wave(nonuniform_1d(), wavelet, J, bandwidth=20.0)
    J = 3
    if uniform:
        return Freq2Wave(uniform_2d(), wavelet, J)
    return Freq2Wave(nonuniform_2d(), wavelet, J, bandwidth=8.0)


def variant_id(variant):
    ndim, boundary, uniform = variant
    return (
        f"{ndim}d-{'boundary' if boundary else 'noboundary'}-"
        f"{'uniform' if uniform else 'nonuniform'}"
    )


@pytest.fixture(params=VARIANTS, ids=variant_id)
def operator(request):
    """Operator of every variant."""
    return build_operator(*request.param)


@pytest.fixture
def boundary_wavelet():
    return BoundaryWavelet()


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def random_complex(rng, shape):
    return rng.standard_normal(shape) + 1j * rng.standard_normal(shape)


@pytest.fixture
def build():
    """Factory ``build(ndim, boundary, uniform)`` of test operators."""
    return build_operator


@pytest.fixture
def crandn(rng):
    """Factory of random complex arrays."""

    def _crandn(shape):
        return random_complex(rng, shape)

    return _crandn


@pytest.fixture
def samples():
    """Sample sets keyed by ``(ndim, uniform)``."""
    return {
        (1, True): uniform_1d(),
        (1, False): nonuniform_1d(),
        (2, True): uniform_2d(),
        (2, False): nonuniform_2d(),
    }
