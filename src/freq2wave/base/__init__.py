"""Building blocks of the change of basis operator."""

__all__ = []

from . import _boundary  # noqa
from . import _nufft  # noqa
from . import _phase  # noqa
from . import _weighting  # noqa

from ._boundary import *  # noqa
from ._nufft import *  # noqa
from ._phase import *  # noqa
from ._weighting import *  # noqa

__all__.extend(_boundary.__all__)
__all__.extend(_nufft.__all__)
__all__.extend(_phase.__all__)
__all__.extend(_weighting.__all__)
