"""Interoperability with other numerical libraries."""

__all__ = []

from . import _scipy  # noqa

from ._scipy import *  # noqa

__all__.extend(_scipy.__all__)
