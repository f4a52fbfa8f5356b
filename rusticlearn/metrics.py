"""Classification scores and vector similarity."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Hashable


def f1_score(
    y_true: Sequence[Hashable],
    y_pred: Sequence[Hashable],
    labels: Sequence[Hashable],
    pos_label: int | None = None,
) -> float:
    """Return the F1 score of ``y_pred`` against ``y_true``.

    ``pos_label`` is the index in ``labels`` of the positive class and
    defaults to the first label. Every matching pair counts as a true
    positive; a mismatch counts as a false positive when the prediction is
    the positive label, otherwise as a false negative when the truth is.
    """
    index = 0 if pos_label is None else pos_label
    tp = fp = fn = 0.0
    for true_val, pred_val in zip(y_true, y_pred):
        if true_val == pred_val:
            tp += 1.0
        elif pred_val == labels[index]:
            fp += 1.0
        elif true_val == labels[index]:
            fn += 1.0

    denominator = 2.0 * tp + fp + fn
    if denominator == 0.0:
        return 0.0
    return 2.0 * tp / denominator


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the cosine of the angle between ``a`` and ``b``.

    A zero vector on either side gives 0.0.
    """
    if len(a) != len(b):
        raise ValueError("Vectors must be of the same length")
    dot_product = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot_product / (norm_a * norm_b)