"""Density compensation for non-uniform samples."""

__all__ = []

from . import _voronoi  # noqa

from ._voronoi import *  # noqa

__all__.extend(_voronoi.__all__)
