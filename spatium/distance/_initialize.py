"""
spatium.distance._initialize — shared configuration and scoring plumbing.

Each algorithm is a frozen dataclass deriving from :class:`EditDistance`.
Instances are immutable option sets; the fluent ``with_*`` builders return
modified copies.  Module-level functions in ``Hamming``, ``Levenshtein``
and ``DamerauLevenshtein`` delegate to a default instance.
"""

from __future__ import annotations

import dataclasses
import enum
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ..normalize import normalize
from ..sequence import SequenceView, as_view

# (raw distance, len_x, len_y)
_Measurement = tuple[float, int, int]


class Strategy(str, enum.Enum):
    """Levenshtein implementation selector."""

    #: Reference recursive definition.  Exponential time, tiny inputs only.
    RECURSIVE = "recursive"
    #: Wagner-Fischer dynamic programming table.  O(m·n) time and memory.
    DYNAMIC_PROGRAMMING = "dynamic_programming"


def _cutoff_distance(dist: float, score_cutoff: float | None) -> float:
    if score_cutoff is None or dist <= score_cutoff:
        return float(dist)
    return float(score_cutoff + 1)


def _cutoff_normalized_distance(dist: float, score_cutoff: float | None) -> float:
    return float(dist) if score_cutoff is None or dist <= score_cutoff else 1.0


def _cutoff_similarity(sim: float, score_cutoff: float | None) -> float:
    return float(sim) if score_cutoff is None or sim >= score_cutoff else 0.0


@dataclasses.dataclass(frozen=True)
class EditDistance(ABC):
    """
    Base class for the edit-based distance algorithms.

    Parameters
    ----------
    normalized : bool, default False
        When ``True``, :meth:`distance` returns the length-normalized
        distance in ``[0, 1]`` instead of the raw edit count.
    """

    normalized: bool = False

    def with_normalization(self, normalized: bool = True) -> Self:
        """Return a copy with the normalization flag set to *normalized*."""
        return dataclasses.replace(self, normalized=normalized)

    @abstractmethod
    def _measure(self, x: SequenceView, y: SequenceView) -> _Measurement:
        """Consume both views and return ``(raw distance, len_x, len_y)``."""
        ...

    def _run(
        self, s1: Any, s2: Any, processor: Callable[..., Any] | None
    ) -> _Measurement:
        if processor is not None:
            s1 = processor(s1)
            s2 = processor(s2)
        return self._measure(as_view(s1), as_view(s2))

    def distance(
        self,
        s1: Any,
        s2: Any,
        *,
        processor: Callable[..., Any] | None = None,
        score_cutoff: float | None = None,
    ) -> float:
        """
        Distance between *s1* and *s2*, normalized if the instance is configured so.

        Parameters
        ----------
        s1, s2 : Any
            Sequences accepted by :func:`spatium.sequence.as_view`.
        processor : Callable | None, default None
            Applied to both inputs before comparison.
        score_cutoff : float | None, default None
            Results above the cutoff are reported as ``score_cutoff + 1``
            (raw) or ``1.0`` (normalized).
        """
        if self.normalized:
            return self.normalized_distance(
                s1, s2, processor=processor, score_cutoff=score_cutoff
            )
        dist, _, _ = self._run(s1, s2, processor)
        return _cutoff_distance(dist, score_cutoff)

    def normalized_distance(
        self,
        s1: Any,
        s2: Any,
        *,
        processor: Callable[..., Any] | None = None,
        score_cutoff: float | None = None,
    ) -> float:
        """Distance divided by the length of the longer sequence, in ``[0, 1]``."""
        dist, len_x, len_y = self._run(s1, s2, processor)
        return _cutoff_normalized_distance(normalize(dist, len_x, len_y), score_cutoff)

    def similarity(
        self,
        s1: Any,
        s2: Any,
        *,
        processor: Callable[..., Any] | None = None,
        score_cutoff: float | None = None,
    ) -> float:
        """``max(len(s1), len(s2)) - distance``; below *score_cutoff* gives ``0.0``."""
        dist, len_x, len_y = self._run(s1, s2, processor)
        return _cutoff_similarity(max(len_x, len_y) - dist, score_cutoff)

    def normalized_similarity(
        self,
        s1: Any,
        s2: Any,
        *,
        processor: Callable[..., Any] | None = None,
        score_cutoff: float | None = None,
    ) -> float:
        """``1 - normalized_distance``; below *score_cutoff* gives ``0.0``."""
        dist, len_x, len_y = self._run(s1, s2, processor)
        return _cutoff_similarity(1.0 - normalize(dist, len_x, len_y), score_cutoff)


__all__ = ["EditDistance", "Strategy"]
