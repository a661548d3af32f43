"""
spatium.errors — exceptions raised by the distance algorithms.
"""

from __future__ import annotations

DIFFERENT_LENGTHS = "Arguments have different lengths."


class SpatiumError(ValueError):
    """Base class for every error raised by spatium."""


class LengthMismatchError(SpatiumError):
    """
    Raised by algorithms that only accept sequences of equal length.

    Parameters
    ----------
    reason : str, default ``"Arguments have different lengths."``
        Human-readable description of the mismatch.
    """

    def __init__(self, reason: str = DIFFERENT_LENGTHS) -> None:
        super().__init__(reason)
        self.reason = reason


class NormalizationError(SpatiumError):
    """Raised when a nonzero distance is normalized over two empty sequences."""

    def __init__(self, distance: float) -> None:
        super().__init__(
            f"Cannot normalize distance {distance!r}: both sequences are empty."
        )
        self.distance = distance


__all__ = [
    "DIFFERENT_LENGTHS",
    "SpatiumError",
    "LengthMismatchError",
    "NormalizationError",
]
