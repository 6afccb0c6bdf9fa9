"""Construction diagnostics."""

__all__ = ["Diagnostic", "Reporter", "warn_reporter"]

import warnings

from dataclasses import dataclass
from typing import Callable

from ._errors import Freq2WaveWarning


@dataclass(frozen=True)
class Diagnostic:
    """
    Non-fatal condition detected while building an operator.

    Attributes
    ----------
    category : type[Freq2WaveWarning]
        Warning category, e.g. ``UnderdeterminedWarning``.
    message : str
        Human readable description.

    """

    category: type[Freq2WaveWarning]
    message: str


Reporter = Callable[[Diagnostic], None]


def warn_reporter(diagnostic: Diagnostic):
    """Default reporter: forward the diagnostic to :mod:`warnings`."""
    # 1: here, 2: Freq2Wave._report, 3: Freq2Wave.__init__, 4: caller
    warnings.warn(diagnostic.message, diagnostic.category, stacklevel=4)
