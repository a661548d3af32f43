"""spatium.normalize"""

from __future__ import annotations

from .errors import NormalizationError


def normalize(distance: float, len_x: int, len_y: int) -> float:
    """
    Scale a raw distance by the length of the longer sequence.

    Parameters
    ----------
    distance : float
        Raw (unnormalized) distance.
    len_x, len_y : int
        Element counts of the two compared sequences.

    Returns
    -------
    float
        ``distance / max(len_x, len_y)``, or ``0.0`` when ``distance`` is 0
        (including the empty-vs-empty case).

    Raises
    ------
    NormalizationError
        If ``distance`` is nonzero while both lengths are 0.

    Examples
    --------
    >>> normalize(3.0, 3, 4)
    0.75
    >>> normalize(0.0, 0, 0)
    0.0
    """
    if distance == 0:
        return 0.0
    max_len = max(len_x, len_y)
    if max_len == 0:
        raise NormalizationError(distance)
    return distance / max_len


__all__ = ["normalize"]
