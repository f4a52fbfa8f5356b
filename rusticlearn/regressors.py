"""Linear regression by ordinary least squares."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


class LinearRegression:
    """Least-squares linear model without an intercept term."""

    def __init__(self) -> None:
        self.coefficients: list[float] | None = None

    def fit(self, x: Sequence[Sequence[float]], y: Sequence[float]) -> None:
        """Solve the normal equations for the coefficients."""
        if not x or not x[0]:
            raise ValueError("Input data cannot be empty")
        if len(x) != len(y):
            raise ValueError("Number of samples in x and y must match")
        matrix = np.asarray(x, dtype=float)
        target = np.asarray(y, dtype=float)
        transpose = matrix.T
        try:
            inverse = np.linalg.inv(transpose @ matrix)
        except np.linalg.LinAlgError as exc:
            raise ValueError("Feature matrix is singular") from exc
        self.coefficients = (inverse @ transpose @ target).tolist()

    def predict(self, x: Sequence[Sequence[float]]) -> list[float]:
        """Return the dot product of each row with the fitted coefficients."""
        if self.coefficients is None:
            raise RuntimeError("Model has not been fitted yet")
        predictions = []
        for row in x:
            if len(row) != len(self.coefficients):
                raise ValueError(
                    "Input feature length does not match model coefficients length"
                )
            predictions.append(sum(a * b for a, b in zip(row, self.coefficients)))
        return predictions