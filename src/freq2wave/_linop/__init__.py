"""Change of basis operators."""

__all__ = []

from . import _freq2wave  # noqa

from ._freq2wave import *  # noqa

__all__.extend(_freq2wave.__all__)
