"""Utilities."""

__all__ = []

from ._complex import *  # noqa
from ._samples import *  # noqa

from . import _complex  # noqa
from . import _samples  # noqa

__all__.extend(_complex.__all__)
__all__.extend(_samples.__all__)
