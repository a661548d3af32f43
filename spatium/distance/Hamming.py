"""
spatium.distance.Hamming

The Hamming distance between two sequences of equal length is the number
of positions at which the elements differ.

Examples
--------
>>> from spatium.distance import Hamming
>>> Hamming.distance([1, 2, 3], [1, 2, 4])
1.0
>>> Hamming.normalized_distance([1, 2, 3], [1, 2, 4])
0.3333333333333333
>>> Hamming.distance("Hello-МИР", "Hello-ПИР")
1.0
"""

from __future__ import annotations

import dataclasses
import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from ..errors import LengthMismatchError
from ..sequence import SequenceView
from ._initialize import EditDistance, _Measurement

_EXHAUSTED = object()


@dataclasses.dataclass(frozen=True)
class Hamming(EditDistance):
    """
    Position-wise mismatch count.  Both inputs must have the same length.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length.  Sized inputs are rejected
        before any element is compared; one-pass inputs are rejected as
        soon as one side runs out first.
    """

    @override
    def _measure(self, x: SequenceView, y: SequenceView) -> _Measurement:
        if x.sized and y.sized and len(x) != len(y):  # type: ignore[arg-type]
            raise LengthMismatchError()

        mismatches = 0
        length = 0
        while True:
            x_el = next(x, _EXHAUSTED)
            y_el = next(y, _EXHAUSTED)
            if x_el is _EXHAUSTED or y_el is _EXHAUSTED:
                if x_el is not y_el:
                    raise LengthMismatchError()
                break
            length += 1
            if x_el != y_el:
                mismatches += 1
        return float(mismatches), length, length


_DEFAULT = Hamming()

distance = _DEFAULT.distance
normalized_distance = _DEFAULT.normalized_distance
similarity = _DEFAULT.similarity
normalized_similarity = _DEFAULT.normalized_similarity

__all__ = [
    "Hamming",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
