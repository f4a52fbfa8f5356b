"""Command that evaluates the classifier and regressor on the datasets."""

from __future__ import annotations

import argparse
import math

from .classifiers import KnnClassifier
from .datasets import BOSTON_HOUSING_PATH, IRIS_PATH, load_boston_housing, load_iris
from .model_selection import train_test_split
from .regressors import LinearRegression


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate k-NN on iris and linear regression on Boston housing."
    )
    parser.add_argument("--iris", default=IRIS_PATH, help="path to the iris CSV")
    parser.add_argument(
        "--boston", default=BOSTON_HOUSING_PATH, help="path to the Boston housing CSV"
    )
    parser.add_argument("--neighbors", type=int, default=3, help="k for k-NN")
    parser.add_argument("--test-ratio", type=float, default=0.2)
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run both evaluations and print their scores."""
    args = _parser().parse_args(argv)

    x, y = load_iris(args.iris)
    x_train, y_train, x_test, y_test = train_test_split(
        x, y, args.test_ratio, args.seed
    )
    predictions = KnnClassifier(x_train, y_train, args.neighbors).predict(x_test)
    correct = sum(p == a for p, a in zip(predictions, y_test))
    accuracy = correct / len(predictions) if predictions else math.nan
    print(f"Accuracy: {accuracy * 100:.2f}%")

    x, y = load_boston_housing(args.boston)
    x_train, y_train, x_test, y_test = train_test_split(
        x, y, args.test_ratio, args.seed
    )
    regressor = LinearRegression()
    regressor.fit(x_train, y_train)
    predictions = regressor.predict(x_test)
    squared = [(p - a) ** 2 for p, a in zip(predictions, y_test)]
    rmse = math.sqrt(sum(squared) / len(predictions)) if predictions else math.nan
    print(f"Root Mean Squared Error: {rmse:.2f}")
    for number, (predicted, actual) in enumerate(zip(predictions[:2], y_test[:2]), 1):
        print(f"Prediction {number}: {predicted}, Actual {number}: {actual}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())