"""Main Freq2Wave API."""

__all__ = []

from . import base  # noqa
from . import density  # noqa
from . import interop  # noqa
from . import linalg  # noqa
from . import wavelets  # noqa

from . import _errors  # noqa
from . import _diagnostics  # noqa
from . import _linop  # noqa

from ._errors import *  # noqa
from ._diagnostics import *  # noqa
from ._linop import *  # noqa

__all__.extend(_errors.__all__)
__all__.extend(_diagnostics.__all__)
__all__.extend(_linop.__all__)
