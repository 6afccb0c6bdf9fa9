"""Voronoi density compensation weights."""

__all__ = ["weights", "voronoi_weights_1d", "voronoi_weights_2d"]

import numpy as np
from numpy.typing import ArrayLike, NDArray

from scipy.spatial import ConvexHull, QhullError, Voronoi

from .._errors import BandwidthError
from .._utils import as_samples


def weights(samples: ArrayLike, bandwidth: float) -> NDArray[float]:
    """
    Density compensation weights of non-uniform samples.

    The weight of a sample is the length (1D) or area (2D) of its Voronoi
    cell restricted to the band ``[-bandwidth, bandwidth]**D``.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M,)`` or ``(M, 2)``.
    bandwidth : float
        Half width of the band containing the samples.

    Returns
    -------
    NDArray[float]
        Positive weights of shape ``(M,)``.

    """
    samples = as_samples(samples)
    if samples.ndim == 1:
        return voronoi_weights_1d(samples, bandwidth)
    return voronoi_weights_2d(samples, bandwidth)


def _check_bandwidth(bandwidth):
    bandwidth = float(bandwidth)
    if not np.isfinite(bandwidth) or bandwidth <= 0:
        raise BandwidthError(f"Bandwidth must be positive, got {bandwidth}")
    return bandwidth


def voronoi_weights_1d(samples: ArrayLike, bandwidth: float) -> NDArray[float]:
    """
    Voronoi cell lengths of 1D samples in ``[-bandwidth, bandwidth]``.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M,)``.
    bandwidth : float
        Half width of the band.

    Returns
    -------
    NDArray[float]
        Cell lengths of shape ``(M,)``, summing to ``2 * bandwidth``.

    """
    bandwidth = _check_bandwidth(bandwidth)
    samples = np.asarray(samples, dtype=np.float64)
    if np.any(np.abs(samples) > bandwidth):
        raise BandwidthError(
            f"Samples exceed the bandwidth {bandwidth}: max |ξ| = {np.abs(samples).max()}"
        )

    order = np.argsort(samples)
    sorted_samples = samples[order]
    if np.any(np.diff(sorted_samples) == 0.0):
        raise BandwidthError("Samples must be distinct")

    # cell edges: band limits and midpoints between neighbours
    edges = np.empty(samples.size + 1)
    edges[0] = -bandwidth
    edges[-1] = bandwidth
    edges[1:-1] = 0.5 * (sorted_samples[1:] + sorted_samples[:-1])

    out = np.empty_like(samples)
    out[order] = np.diff(edges)
    if not np.all(out > 0):
        raise BandwidthError("Samples on the band edge have empty Voronoi cells")
    return out


def voronoi_weights_2d(samples: ArrayLike, bandwidth: float) -> NDArray[float]:
    """
    Voronoi cell areas of 2D samples in ``(-bandwidth, bandwidth)**2``.

    The diagram is built from the samples and their mirror images in the
    four sides of the square, which makes every sample cell bounded and
    equal to its cell clipped to the square.

    Parameters
    ----------
    samples : ArrayLike
        Frequencies of shape ``(M, 2)``, strictly inside the square.
    bandwidth : float
        Half width of the square.

    Returns
    -------
    NDArray[float]
        Cell areas of shape ``(M,)``, summing to ``(2 * bandwidth)**2``.

    """
    bandwidth = _check_bandwidth(bandwidth)
    samples = np.asarray(samples, dtype=np.float64)
    if np.any(np.abs(samples) >= bandwidth):
        raise BandwidthError(
            f"Samples must lie strictly inside (-{bandwidth}, {bandwidth})^2"
        )
    if np.unique(samples, axis=0).shape[0] != samples.shape[0]:
        raise BandwidthError("Samples must be distinct")

    points = [samples]
    for axis in range(2):
        for edge in (-bandwidth, bandwidth):
            mirror = samples.copy()
            mirror[:, axis] = 2 * edge - mirror[:, axis]
            points.append(mirror)

    try:
        vor = Voronoi(np.concatenate(points))
    except QhullError as e:
        raise BandwidthError("Voronoi diagram of the samples failed") from e

    M = samples.shape[0]
    out = np.empty(M)
    for m in range(M):
        region = vor.regions[vor.point_region[m]]
        if len(region) == 0 or -1 in region:
            raise BandwidthError(f"Voronoi cell of sample {m} is unbounded")
        out[m] = ConvexHull(vor.vertices[region]).volume

    return out
