"""
spatium.sequence — uniform views over caller-supplied sequences.

Every algorithm consumes its inputs through a :class:`SequenceView`, so the
same code handles strings, lists, tuples, byte strings, arrays and data
frame columns.  :func:`as_view` is the single conversion step:

- ``str`` is viewed as a sequence of code points.  CPython stores decoded
  code points, so ``len`` is O(1); decoding from ``bytes`` is the caller's
  O(n) step.  Combining marks are separate elements, no Unicode
  normalization is applied.
- ``list``, ``tuple``, ``range``, ``bytes``, ``bytearray``, ``memoryview``,
  ``array.array`` and other :class:`~collections.abc.Sequence` types are
  borrowed without copying and expose their length up front.
- NumPy / Pandas / Polars / PyArrow one-dimensional containers are
  materialized into a list once (see :mod:`spatium.compat`).
- Any other ordered iterable (generators, iterators) gets a length-unknown,
  one-pass view.
"""

from __future__ import annotations

import array
from collections.abc import Iterable, Iterator, Mapping, Sequence, Set
from typing import Any

from .compat import _framework_elements

_BORROWED_TYPES = (str, bytes, bytearray, memoryview, array.array, range, list, tuple)


class SequenceView(Iterator[Any]):
    """
    Forward-only, one-pass view over the elements of a sequence.

    The length is unknown until the view is exhausted.  A view is not
    restartable: build a fresh one with :func:`as_view` to scan again.

    Parameters
    ----------
    source : Iterable
        The ordered elements to view.  It is never mutated.
    """

    __slots__ = ("_source", "_iterator")

    def __init__(self, source: Iterable[Any]) -> None:
        self._source = source
        self._iterator: Iterator[Any] = iter(source)

    def __iter__(self) -> SequenceView:
        return self

    def __next__(self) -> Any:
        return next(self._iterator)

    @property
    def sized(self) -> bool:
        """Whether the element count is known without consuming the view."""
        return False

    def elements(self) -> Sequence[Any]:
        """
        Return the remaining elements in random-access form and exhaust the view.

        The DP algorithms need indexed access; for an iterator-backed view
        this materializes the elements into a list.
        """
        return list(self._iterator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self._source).__name__})"


class SizedSequenceView(SequenceView):
    """
    A :class:`SequenceView` whose element count is known up front.

    ``len(view)`` reports the number of elements not yet consumed, which is
    the full length of the source until iteration starts.
    """

    __slots__ = ("_pos",)

    def __init__(self, source: Sequence[Any]) -> None:
        super().__init__(source)
        self._pos = 0

    def __next__(self) -> Any:
        item = next(self._iterator)
        self._pos += 1
        return item

    def __len__(self) -> int:
        return len(self._source) - self._pos  # type: ignore[arg-type]

    @property
    def sized(self) -> bool:
        return True

    def elements(self) -> Sequence[Any]:
        """Return the borrowed source (or its unconsumed tail) and exhaust the view."""
        source: Sequence[Any] = self._source  # type: ignore[assignment]
        remaining = source if self._pos == 0 else source[self._pos :]
        self._pos = len(source)
        self._iterator = iter(())
        return remaining


def as_view(data: Any) -> SequenceView:
    """
    Build a :class:`SequenceView` over *data*.

    Parameters
    ----------
    data : Any
        A string, sequence, data-framework column, ordered iterable, or an
        existing view (returned unchanged).

    Returns
    -------
    SequenceView
        A :class:`SizedSequenceView` whenever the length is available
        without consuming the input.

    Raises
    ------
    TypeError
        If *data* is unordered (set, mapping) or not iterable at all.

    Examples
    --------
    >>> len(as_view("Hello-МИР"))
    9
    >>> as_view(x for x in (1, 2, 3)).sized
    False
    """
    if isinstance(data, SequenceView):
        return data

    if isinstance(data, _BORROWED_TYPES) or isinstance(data, Sequence):
        return SizedSequenceView(data)

    elements = _framework_elements(data)
    if elements is not None:
        return SizedSequenceView(elements)

    if isinstance(data, (Set, Mapping)):
        raise TypeError(
            f"Cannot compare {type(data).__name__}: element order is undefined. "
            "Pass a list, tuple, str or another ordered sequence."
        )

    if isinstance(data, Iterable):
        return SequenceView(data)

    raise TypeError(
        f"Cannot build a sequence view over {type(data).__name__}. "
        "Pass a str, bytes, list, tuple, array, NumPy/Pandas/Polars/PyArrow "
        "column, or any ordered iterable."
    )


__all__ = ["SequenceView", "SizedSequenceView", "as_view"]
