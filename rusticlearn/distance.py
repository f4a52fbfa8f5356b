"""Distance functions between feature vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .metrics import cosine_similarity


def _check_lengths(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError("Vectors must be of the same length")


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the straight-line distance between ``a`` and ``b``."""
    _check_lengths(a, b)
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def standardized_euclidean_distance(
    a: Sequence[float], b: Sequence[float], std_dev: Sequence[float]
) -> float:
    """Return the Euclidean distance with each axis scaled by ``std_dev``.

    Axes whose standard deviation is zero are ignored.
    """
    _check_lengths(a, b)
    if len(a) != len(std_dev):
        raise ValueError(
            "Vectors and standard deviations must be of the same length"
        )
    return math.sqrt(
        sum(((x - y) / s) ** 2 for x, y, s in zip(a, b, std_dev) if s != 0.0)
    )


def manhattan_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the sum of absolute coordinate differences."""
    _check_lengths(a, b)
    return sum(abs(x - y) for x, y in zip(a, b))


def chebyshev_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the largest absolute coordinate difference."""
    _check_lengths(a, b)
    return max((abs(x - y) for x, y in zip(a, b)), default=0.0)


def minkowski_distance(a: Sequence[float], b: Sequence[float], p: float) -> float:
    """Return the Minkowski distance of order ``p``."""
    _check_lengths(a, b)
    return sum(abs(x - y) ** p for x, y in zip(a, b)) ** (1.0 / p)


def canberra_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Canberra distance; coordinates that are both zero add nothing."""
    _check_lengths(a, b)
    return sum(
        abs(x - y) / (abs(x) + abs(y))
        for x, y in zip(a, b)
        if abs(x) + abs(y) != 0.0
    )


def cosine_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return one minus the cosine similarity."""
    _check_lengths(a, b)
    return 1.0 - cosine_similarity(a, b)


def hamming_distance(a: Sequence[bool], b: Sequence[bool]) -> int:
    """Return the number of positions at which ``a`` and ``b`` differ."""
    _check_lengths(a, b)
    return sum(1 for x, y in zip(a, b) if x != y)