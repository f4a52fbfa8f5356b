"""Loading the bundled CSV datasets."""

from __future__ import annotations

import warnings
from os import PathLike
from pathlib import Path

DATA_DIR = Path("data")
IRIS_PATH = DATA_DIR / "Iris.csv"
BOSTON_HOUSING_PATH = DATA_DIR / "BostonHousing.csv"


def parse_line(line: str) -> tuple[list[float], str]:
    """Split a CSV row into numeric features and a trailing label.

    Features that are not numbers are reported and skipped.
    """
    *fields, label = line.split(",")
    features = []
    for position, field in enumerate(fields, start=1):
        try:
            features.append(float(field.strip()))
        except ValueError:
            warnings.warn(
                f"Could not parse feature {position}", RuntimeWarning, stacklevel=2
            )
    return features, label


def parse_csv(file_path: str | PathLike[str]) -> tuple[list[list[float]], list[str]]:
    """Read a CSV file with a header row into features and labels."""
    features: list[list[float]] = []
    labels: list[str] = []
    with open(file_path, encoding="utf-8") as handle:
        next(handle, None)
        for raw in handle:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            x, y = parse_line(line)
            features.append(x)
            labels.append(y)
    return features, labels


def load_iris(
    file_path: str | PathLike[str] = IRIS_PATH,
) -> tuple[list[list[float]], list[str]]:
    """Load the iris data set: measurements and species names."""
    return parse_csv(file_path)


def load_boston_housing(
    file_path: str | PathLike[str] = BOSTON_HOUSING_PATH,
) -> tuple[list[list[float]], list[float]]:
    """Load the Boston housing data set with numeric targets.

    Targets that are not numbers are reported and replaced with 0.0.
    """
    features, labels = parse_csv(file_path)
    targets = []
    for label in labels:
        try:
            targets.append(float(label))
        except ValueError:
            warnings.warn(
                f"Could not parse label '{label}', using 0.0",
                RuntimeWarning,
                stacklevel=2,
            )
            targets.append(0.0)
    return features, targets