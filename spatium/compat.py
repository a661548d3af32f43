"""
spatium.compat — Data-framework compatibility helpers.

Converts one-dimensional containers from NumPy, Pandas, Polars and PyArrow
into plain Python lists so the distance algorithms can index them.
All imports are lazy so no new hard dependencies are introduced.
"""

from __future__ import annotations

from typing import Any


def _is_numpy_array(data: Any) -> bool:
    try:
        import numpy as np

        return isinstance(data, np.ndarray)
    except ImportError:
        return False


def _is_pandas_series(data: Any) -> bool:
    try:
        import pandas as pd

        return isinstance(data, pd.Series)
    except ImportError:
        return False


def _is_polars_series(data: Any) -> bool:
    try:
        import polars as pl

        return isinstance(data, pl.Series)
    except ImportError:
        return False


def _is_pyarrow_array(data: Any) -> bool:
    try:
        import pyarrow as pa

        return isinstance(data, (pa.Array, pa.ChunkedArray))
    except ImportError:
        return False


def _framework_elements(data: Any) -> list[Any] | None:
    """
    Materialize a data-framework container into a ``list``.

    Supported input types
    ---------------------
    * ``numpy.ndarray`` — ``.tolist()`` (rows become elements for 2-D arrays).
    * ``pandas.Series`` — ``.tolist()``; positional, the index is ignored.
    * ``polars.Series`` — ``.to_list()``.
    * ``pyarrow.Array`` / ``pyarrow.ChunkedArray`` — ``.to_pylist()``.

    Nulls are kept as ``None`` elements.

    Returns
    -------
    list | None
        The elements, or ``None`` when *data* is not a recognised
        framework container.

    Raises
    ------
    TypeError
        For a 0-d NumPy array, which has no elements to iterate.
    """
    if _is_numpy_array(data):
        if data.ndim == 0:  # type: ignore[union-attr]
            raise TypeError("Cannot view a 0-d array as a sequence.")
        return data.tolist()  # type: ignore[union-attr]

    if _is_pandas_series(data):
        return data.tolist()  # type: ignore[union-attr]

    if _is_polars_series(data):
        return data.to_list()  # type: ignore[union-attr]

    if _is_pyarrow_array(data):
        return data.to_pylist()  # type: ignore[union-attr]

    return None


__all__ = ["_framework_elements"]
