# combinations.py

import itertools
from typing import Iterator, Tuple


def combinations(n: int, k: int) -> Iterator[Tuple[int, ...]]:
    """
    All k-subsets of {1..n} as ascending tuples, in lexicographic order.

    A fresh iterator is returned on every call. k > n yields nothing.
    """
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative, got n={n}, k={k}")
    return itertools.combinations(range(1, n + 1), k)
