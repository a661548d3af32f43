"""
spatium.distance — edit distance metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    DamerauLevenshtein,
    Hamming,
    Levenshtein,
)
from ._initialize import EditDistance, Strategy

__all__ = [
    "EditDistance",
    "Strategy",
    "DamerauLevenshtein",
    "Hamming",
    "Levenshtein",
]
