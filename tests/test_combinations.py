import itertools

import pytest

from decomposition.combinations import combinations


def test_edges_of_k4_in_lexicographic_order():
    assert list(combinations(4, 2)) == [
        (1, 2),
        (1, 3),
        (1, 4),
        (2, 3),
        (2, 4),
        (3, 4),
    ]


@pytest.mark.parametrize("n,k", [(1, 1), (5, 1), (6, 3), (7, 4), (9, 9), (10, 2)])
def test_matches_itertools_order(n, k):
    expected = list(itertools.combinations(range(1, n + 1), k))
    assert list(combinations(n, k)) == expected


def test_k_larger_than_n_is_empty():
    assert list(combinations(3, 4)) == []


def test_k_zero_yields_empty_tuple():
    assert list(combinations(4, 0)) == [()]


def test_fresh_generator_per_call():
    first = combinations(5, 3)
    next(first)
    assert next(combinations(5, 3)) == (1, 2, 3)
    assert list(combinations(5, 3)) == list(combinations(5, 3))


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        list(combinations(4, -1))
    with pytest.raises(ValueError):
        list(combinations(-2, 1))
