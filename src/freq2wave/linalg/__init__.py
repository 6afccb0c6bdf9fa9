"""Linear solvers."""

__all__ = []

from ._cgnr import *  # noqa
from ._lsmr import *  # noqa
from ._lstsq import *  # noqa
from ._monitor import *  # noqa

from . import _cgnr  # noqa
from . import _lsmr  # noqa
from . import _lstsq  # noqa
from . import _monitor  # noqa

__all__.extend(_cgnr.__all__)
__all__.extend(_lsmr.__all__)
__all__.extend(_lstsq.__all__)
__all__.extend(_monitor.__all__)
