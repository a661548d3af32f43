"""Property-based tests for spatium using Hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from spatium import normalize
from spatium.distance import DamerauLevenshtein, Hamming, Levenshtein, Strategy

# Small alphabets make equal elements (and transpositions) likely.
small_lists = st.lists(st.integers(min_value=0, max_value=3), max_size=12)
tiny_lists = st.lists(st.integers(min_value=0, max_value=3), max_size=6)
tiny_text = st.text(alphabet="abcМИ", max_size=6)


@st.composite
def equal_length_pairs(draw: st.DrawFn) -> tuple[list[int], list[int]]:
    n = draw(st.integers(min_value=0, max_value=12))
    element = st.integers(min_value=0, max_value=3)
    x = draw(st.lists(element, min_size=n, max_size=n))
    y = draw(st.lists(element, min_size=n, max_size=n))
    return x, y


# ---------------------------------------------------------------------------
# Identity / Symmetry
# ---------------------------------------------------------------------------

@given(st.text())
def test_distance_identity(s: str) -> None:
    """The distance of a sequence to itself is 0 for every algorithm."""
    assert Hamming.distance(s, s) == 0.0
    assert Levenshtein.distance(s, s) == 0.0
    assert DamerauLevenshtein.distance(s, s) == 0.0
    assert Levenshtein.normalized_distance(s, s) == 0.0
    assert DamerauLevenshtein.normalized_similarity(s, s) == 1.0


@given(tiny_text)
def test_recursive_identity(s: str) -> None:
    assert Levenshtein.distance(s, s, strategy=Strategy.RECURSIVE) == 0.0


@given(small_lists, small_lists)
def test_distance_symmetry(x: list[int], y: list[int]) -> None:
    assert Levenshtein.distance(x, y) == Levenshtein.distance(y, x)
    assert DamerauLevenshtein.distance(x, y) == DamerauLevenshtein.distance(y, x)


@given(equal_length_pairs())
def test_hamming_symmetry(pair: tuple[list[int], list[int]]) -> None:
    x, y = pair
    assert Hamming.distance(x, y) == Hamming.distance(y, x)


# ---------------------------------------------------------------------------
# Strategy agreement
# ---------------------------------------------------------------------------

@given(tiny_lists, tiny_lists)
def test_strategies_agree_on_lists(x: list[int], y: list[int]) -> None:
    assert Levenshtein.distance(x, y, strategy=Strategy.RECURSIVE) == Levenshtein.distance(
        x, y, strategy=Strategy.DYNAMIC_PROGRAMMING
    )


@given(tiny_text, tiny_text)
def test_strategies_agree_on_text(x: str, y: str) -> None:
    assert Levenshtein.distance(x, y, strategy="recursive") == Levenshtein.distance(
        x, y, strategy="dynamic_programming"
    )


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

@given(small_lists, small_lists)
def test_levenshtein_bounds(x: list[int], y: list[int]) -> None:
    dist = Levenshtein.distance(x, y)
    assert dist == int(dist)
    assert abs(len(x) - len(y)) <= dist <= max(len(x), len(y))


@given(small_lists, small_lists)
def test_damerau_levenshtein_never_exceeds_levenshtein(x: list[int], y: list[int]) -> None:
    dist = DamerauLevenshtein.distance(x, y)
    assert dist == int(dist)
    assert dist <= Levenshtein.distance(x, y)


@given(equal_length_pairs())
def test_hamming_bounds(pair: tuple[list[int], list[int]]) -> None:
    x, y = pair
    dist = Hamming.distance(x, y)
    assert dist == int(dist)
    assert Levenshtein.distance(x, y) <= dist <= len(x)


@given(small_lists, small_lists)
def test_normalized_bounds(x: list[int], y: list[int]) -> None:
    for metric in (Levenshtein, DamerauLevenshtein):
        nd = metric.normalized_distance(x, y)
        assert 0.0 <= nd <= 1.0
        assert (nd == 0.0) == (metric.distance(x, y) == 0.0)
        assert 0.0 <= metric.normalized_similarity(x, y) <= 1.0


@given(equal_length_pairs())
def test_hamming_normalized_bounds(pair: tuple[list[int], list[int]]) -> None:
    x, y = pair
    assert 0.0 <= Hamming.normalized_distance(x, y) <= 1.0


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_normalize_zero_distance(len_x: int, len_y: int) -> None:
    assert normalize(0.0, len_x, len_y) == 0.0


@given(small_lists, small_lists)
def test_one_pass_inputs_match_sized_inputs(x: list[int], y: list[int]) -> None:
    assert Levenshtein.distance(iter(x), iter(y)) == Levenshtein.distance(x, y)
    assert DamerauLevenshtein.distance(iter(x), iter(y)) == DamerauLevenshtein.distance(x, y)
