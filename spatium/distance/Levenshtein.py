"""
spatium.distance.Levenshtein

The Levenshtein distance is the minimum number of single-element edits
needed to transform one sequence into the other:

1. deletion:      ABC -> BC, AC, AB
2. insertion:     ABC -> ABCD, EABC, AEBC
3. substitution:  ABC -> ABE, ADC, FBC

Two strategies compute the same value:

- :attr:`Strategy.DYNAMIC_PROGRAMMING` (default) fills the Wagner-Fischer
  table in O(m·n) time and memory.
- :attr:`Strategy.RECURSIVE` evaluates the textbook recurrence directly.
  It runs in exponential time and is only meant as a reference for tiny
  inputs.

Examples
--------
>>> from spatium.distance import Levenshtein
>>> Levenshtein.distance([1, 5, 3], [4, 5, 6, 7])
3.0
>>> Levenshtein.distance([1, 5, 3], [4, 5, 6, 7], strategy="recursive")
3.0
>>> Levenshtein.Levenshtein().with_normalization().distance([1, 5, 3], [4, 5, 6, 7])
0.75
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from ..sequence import SequenceView
from ._initialize import EditDistance, Strategy, _Measurement

logger = logging.getLogger(__name__)

# Above this combined length the recursive strategy takes noticeably long.
RECURSIVE_WARN_LENGTH = 16


def _init_table(len_x: int, len_y: int) -> list[list[int]]:
    """
    Allocate a ``(len_x + 1) x (len_y + 1)`` table with the empty-prefix
    borders filled in: ``table[i][0] = i`` and ``table[0][j] = j``.
    """
    table = [[0] * (len_y + 1) for _ in range(len_x + 1)]
    for i in range(len_x + 1):
        table[i][0] = i
    for j in range(len_y + 1):
        table[0][j] = j
    return table


def _wagner_fischer(x: Sequence[Any], y: Sequence[Any]) -> int:
    len_x, len_y = len(x), len(y)
    table = _init_table(len_x, len_y)

    for i in range(1, len_x + 1):
        x_el = x[i - 1]
        row, prev_row = table[i], table[i - 1]
        for j in range(1, len_y + 1):
            cost = 0 if x_el == y[j - 1] else 1
            row[j] = min(
                prev_row[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev_row[j - 1] + cost,  # substitution
            )

    return table[len_x][len_y]


def _recursive(x: Sequence[Any], y: Sequence[Any]) -> int:
    if len(x) + len(y) > RECURSIVE_WARN_LENGTH:
        logger.warning(
            "Recursive Levenshtein on %d + %d elements runs in exponential time; "
            "use Strategy.DYNAMIC_PROGRAMMING for real inputs.",
            len(x),
            len(y),
        )

    def lev(i: int, j: int) -> int:
        # distance between x[:i] and y[:j]
        if i == 0:
            return j
        if j == 0:
            return i
        cost = 0 if x[i - 1] == y[j - 1] else 1
        return min(
            lev(i - 1, j) + 1,
            lev(i, j - 1) + 1,
            lev(i - 1, j - 1) + cost,
        )

    return lev(len(x), len(y))


_STRATEGIES: dict[Strategy, Callable[[Sequence[Any], Sequence[Any]], int]] = {
    Strategy.RECURSIVE: _recursive,
    Strategy.DYNAMIC_PROGRAMMING: _wagner_fischer,
}


@dataclasses.dataclass(frozen=True)
class Levenshtein(EditDistance):
    """
    Levenshtein distance with a selectable implementation strategy.

    Parameters
    ----------
    normalized : bool, default False
        Return normalized distances from :meth:`distance`.
    strategy : Strategy | str, default Strategy.DYNAMIC_PROGRAMMING
        Implementation used by every scoring method.  Plain strings
        (``"recursive"``, ``"dynamic_programming"``) are accepted.
    """

    strategy: Strategy = Strategy.DYNAMIC_PROGRAMMING

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", Strategy(self.strategy))

    def with_strategy(self, strategy: Strategy | str) -> Levenshtein:
        """Return a copy that computes distances with *strategy*."""
        return dataclasses.replace(self, strategy=Strategy(strategy))

    @override
    def _measure(self, x: SequenceView, y: SequenceView) -> _Measurement:
        xs = x.elements()
        ys = y.elements()
        return float(_STRATEGIES[self.strategy](xs, ys)), len(xs), len(ys)


def distance(
    s1: Any,
    s2: Any,
    strategy: Strategy | str = Strategy.DYNAMIC_PROGRAMMING,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Levenshtein distance between *s1* and *s2* as a whole-number float."""
    return Levenshtein(strategy=strategy).distance(
        s1, s2, processor=processor, score_cutoff=score_cutoff
    )


def normalized_distance(
    s1: Any,
    s2: Any,
    strategy: Strategy | str = Strategy.DYNAMIC_PROGRAMMING,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Levenshtein distance divided by ``max(len(s1), len(s2))``."""
    return Levenshtein(strategy=strategy).normalized_distance(
        s1, s2, processor=processor, score_cutoff=score_cutoff
    )


def similarity(
    s1: Any,
    s2: Any,
    strategy: Strategy | str = Strategy.DYNAMIC_PROGRAMMING,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``max(len(s1), len(s2))`` minus the Levenshtein distance."""
    return Levenshtein(strategy=strategy).similarity(
        s1, s2, processor=processor, score_cutoff=score_cutoff
    )


def normalized_similarity(
    s1: Any,
    s2: Any,
    strategy: Strategy | str = Strategy.DYNAMIC_PROGRAMMING,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - normalized_distance``."""
    return Levenshtein(strategy=strategy).normalized_similarity(
        s1, s2, processor=processor, score_cutoff=score_cutoff
    )


__all__ = [
    "Levenshtein",
    "Strategy",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
