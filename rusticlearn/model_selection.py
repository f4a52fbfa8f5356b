"""Splitting data into training and test sets."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_TEST_RATIO = 0.2


def train_test_split(
    x: Sequence[T],
    y: Sequence[U],
    test_ratio: float | None = None,
    random_seed: int | None = None,
) -> tuple[list[T], list[U], list[T], list[U]]:
    """Shuffle and split the samples.

    Returns ``(x_train, y_train, x_test, y_test)``. The test set holds
    ``test_ratio`` of the samples (0.2 when not given), rounded half away
    from zero. Without a seed the shuffle is unpredictable.
    """
    if len(x) != len(y):
        raise ValueError("Features and labels must have the same length")
    ratio = DEFAULT_TEST_RATIO if test_ratio is None else test_ratio
    if not 0.0 < ratio < 1.0:
        raise ValueError("test_size must be between 0 and 1")

    rng = random.Random(random_seed)
    n_test = math.floor(len(x) * ratio + 0.5)
    indices = list(range(len(x)))
    rng.shuffle(indices)

    test_indices = indices[:n_test]
    train_indices = indices[n_test:]
    return (
        [x[i] for i in train_indices],
        [y[i] for i in train_indices],
        [x[i] for i in test_indices],
        [y[i] for i in test_indices],
    )