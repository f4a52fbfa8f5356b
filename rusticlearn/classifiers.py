"""Nearest-neighbour classification."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .distance import euclidean_distance


class KnnClassifier:
    """k-nearest-neighbour classifier using Euclidean distance."""

    def __init__(
        self,
        x_train: Sequence[Sequence[float]],
        y_train: Sequence[str],
        k: int,
    ) -> None:
        if k <= 0:
            raise ValueError("k must be greater than 0")
        if not x_train or not y_train:
            raise ValueError("Training data cannot be empty")
        if len(x_train) != len(y_train):
            raise ValueError("Number of training samples and labels must match")
        self.x_train = x_train
        self.y_train = y_train
        self.k = k

    def predict(self, x_test: Sequence[Sequence[float]]) -> list[str]:
        """Return the majority label among the k nearest training samples.

        Ties between labels go to the one met first among the nearest
        neighbours.
        """
        if self.k > len(self.x_train):
            raise ValueError("k exceeds the number of training samples")
        return [self._predict_one(sample) for sample in x_test]

    def _predict_one(self, sample: Sequence[float]) -> str:
        neighbours = sorted(
            zip(
                (euclidean_distance(sample, train) for train in self.x_train),
                self.y_train,
            ),
            key=lambda pair: pair[0],
        )
        votes = Counter(label for _, label in neighbours[: self.k])
        return votes.most_common(1)[0][0]