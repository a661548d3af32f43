"""
spatium.distance.DamerauLevenshtein

Levenshtein distance extended with transposition of two adjacent elements
as a fourth single-cost edit (ABC -> ACB, BAC).

This is the *optimal string alignment* variant: a transposed pair cannot
be edited again, so it may report a larger value than the unrestricted
Damerau-Levenshtein distance (``"CA"`` -> ``"ABC"`` is 3 here, 2
unrestricted).

Examples
--------
>>> from spatium.distance import DamerauLevenshtein
>>> DamerauLevenshtein.distance([1, 2, 3], [1, 3, 2])
1.0
>>> DamerauLevenshtein.normalized_distance([1, 5, 3], [4, 5, 6, 7])
0.75
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Sequence
from typing import Any

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from ..sequence import SequenceView
from ._initialize import EditDistance, _Measurement
from .Levenshtein import _init_table


def _optimal_string_alignment(x: Sequence[Any], y: Sequence[Any]) -> int:
    len_x, len_y = len(x), len(y)
    table = _init_table(len_x, len_y)

    for i in range(1, len_x + 1):
        for j in range(1, len_y + 1):
            cost = 0 if x[i - 1] == y[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,  # deletion
                table[i][j - 1] + 1,  # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and x[i - 1] == y[j - 2] and x[i - 2] == y[j - 1]:
                table[i][j] = min(table[i][j], table[i - 2][j - 2] + 1)  # transposition

    return table[len_x][len_y]


@dataclasses.dataclass(frozen=True)
class DamerauLevenshtein(EditDistance):
    """Damerau-Levenshtein (optimal string alignment) distance."""

    @override
    def _measure(self, x: SequenceView, y: SequenceView) -> _Measurement:
        xs = x.elements()
        ys = y.elements()
        return float(_optimal_string_alignment(xs, ys)), len(xs), len(ys)


_DEFAULT = DamerauLevenshtein()

distance = _DEFAULT.distance
normalized_distance = _DEFAULT.normalized_distance
similarity = _DEFAULT.similarity
normalized_similarity = _DEFAULT.normalized_similarity

__all__ = [
    "DamerauLevenshtein",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
