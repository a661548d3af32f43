"""
spatium — edit-based distances between sequences.

Works on strings, lists, tuples, byte strings, arrays and data-frame
columns alike; elements only need to support ``==``.
"""

from __future__ import annotations

import logging

from . import distance, sequence
from .distance import DamerauLevenshtein, Hamming, Levenshtein, Strategy
from .errors import LengthMismatchError, NormalizationError, SpatiumError
from .normalize import normalize
from .sequence import SequenceView, SizedSequenceView, as_view

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.3.0"

hamming_distance = Hamming.distance
hamming_normalized_distance = Hamming.normalized_distance
levenshtein_distance = Levenshtein.distance
levenshtein_normalized_distance = Levenshtein.normalized_distance
damerau_levenshtein_distance = DamerauLevenshtein.distance
damerau_levenshtein_normalized_distance = DamerauLevenshtein.normalized_distance

__all__ = [
    "distance",
    "sequence",
    "DamerauLevenshtein",
    "Hamming",
    "Levenshtein",
    "Strategy",
    "SpatiumError",
    "LengthMismatchError",
    "NormalizationError",
    "normalize",
    "SequenceView",
    "SizedSequenceView",
    "as_view",
    "hamming_distance",
    "hamming_normalized_distance",
    "levenshtein_distance",
    "levenshtein_normalized_distance",
    "damerau_levenshtein_distance",
    "damerau_levenshtein_normalized_distance",
    "__version__",
]
