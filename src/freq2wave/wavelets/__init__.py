"""Scaling function Fourier transforms."""

__all__ = []

from . import _haar  # noqa
from . import _wavelet  # noqa

from ._haar import *  # noqa
from ._wavelet import *  # noqa

__all__.extend(_haar.__all__)
__all__.extend(_wavelet.__all__)
