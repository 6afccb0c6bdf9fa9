"""SigPy building blocks (operators, iterative algorithms, apps)."""

__all__ = ["Alg", "App", "Linop"]

import warnings

with warnings.catch_warnings():
    warnings.simplefilter("ignore")
    from sigpy.alg import Alg
    from sigpy.app import App
    from sigpy.linop import Linop
