"""Wavelet interface and registry."""

__all__ = ["Wavelet", "get_wavelet", "register_wavelet", "available_wavelets"]

from numpy.typing import ArrayLike, NDArray

_REGISTRY = {}


class Wavelet:
    """
    Scaling function Fourier evaluator of a wavelet family.

    Subclasses set ``name``, ``vanishing_moments`` and ``has_boundary`` and
    implement :meth:`fourier` (and :meth:`boundary_fourier` when
    ``has_boundary`` is ``True``). Both must be pure functions of their
    arguments.

    """

    name: str = ""
    vanishing_moments: int = 1
    has_boundary: bool = False

    def fourier(self, samples: ArrayLike, J: int) -> NDArray[complex]:
        """
        Fourier transform of the interior scaling function at scale ``J``.

        Parameters
        ----------
        samples : ArrayLike
            Frequencies of any shape.
        J : int
            Scale.

        Returns
        -------
        NDArray[complex]
            ``2**(-J/2) * phi_hat(samples / 2**J)``, same shape as ``samples``.

        """
        raise NotImplementedError

    def boundary_fourier(
        self, samples: ArrayLike, side: str, J: int
    ) -> NDArray[complex]:
        """
        Fourier transforms of the boundary scaling functions at scale ``J``.

        Parameters
        ----------
        samples : ArrayLike
            Frequencies of shape ``(M,)``.
        side : str
            ``"left"`` or ``"right"``.
        J : int
            Scale.

        Returns
        -------
        NDArray[complex]
            Matrix of shape ``(M, vanishing_moments)``. Column ``k`` of the
            right side belongs to coefficient ``2**J - p + k``.

        """
        raise NotImplementedError(f"Wavelet {self.name!r} has no boundary functions")

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r})"


def register_wavelet(wavelet: Wavelet) -> Wavelet:
    """
    Make a wavelet available by name.

    Parameters
    ----------
    wavelet : Wavelet
        Wavelet instance. Its ``name`` is used as (case insensitive) key.

    Returns
    -------
    Wavelet
        The registered wavelet.

    """
    if not wavelet.name:
        raise ValueError("Cannot register a wavelet without a name")
    if int(wavelet.vanishing_moments) < 1:
        raise ValueError(
            f"Wavelet {wavelet.name!r} must have at least one vanishing moment"
        )
    _REGISTRY[wavelet.name.lower()] = wavelet
    return wavelet


def get_wavelet(wavelet: str | Wavelet) -> Wavelet:
    """
    Look up a wavelet.

    Parameters
    ----------
    wavelet : str | Wavelet
        Registered name or wavelet instance (returned as is).

    Returns
    -------
    Wavelet
        Wavelet instance.

    """
    if isinstance(wavelet, Wavelet):
        return wavelet
    try:
        return _REGISTRY[wavelet.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown wavelet {wavelet!r}; available: {available_wavelets()}"
        ) from None


def available_wavelets() -> list[str]:
    """Names of the registered wavelets."""
    return sorted(_REGISTRY)
