# rusticlearn

This is a small machine-learning toolkit written in plain Python. It uses numpy
for the least-squares solve. It contains these modules:

- `rusticlearn.classifiers.KnnClassifier(x_train, y_train, k)` is a
  k-nearest-neighbours classifier that uses Euclidean distance. `predict(x_test)`
  returns the majority label among the `k` nearest training samples. When
  labels tie, the label that appears first among the nearest neighbours wins.
  The constructor raises `ValueError` when `k` is not positive, when the
  training data is empty, or when the number of samples and the number of
  labels differ. `predict` raises `ValueError` when `k` is larger than the
  number of training samples.
- `rusticlearn.regressors.LinearRegression` is ordinary least squares that
  solves the normal equations. It adds no intercept term.
  - `fit(x, y)` stores the coefficients in `coefficients`. It raises
    `ValueError` when the input is empty, when the lengths do not match, or
    when the matrix is singular.
  - `predict(x)` raises `RuntimeError` before the model is fitted. It raises
    `ValueError` when the length of a row differs from the number of
    coefficients.
- `rusticlearn.distance` provides these functions: `euclidean_distance`,
  `standardized_euclidean_distance` (axes with a zero standard deviation are
  skipped), `manhattan_distance`, `chebyshev_distance`,
  `minkowski_distance(a, b, p)`, `canberra_distance`, `cosine_distance` and
  `hamming_distance`. Each one raises `ValueError` when the vectors have
  different lengths.
- `rusticlearn.metrics` provides `f1_score(y_true, y_pred, labels, pos_label=None)`
  and `cosine_similarity(a, b)`. `cosine_similarity` returns 0.0 when either
  vector is zero.
- `rusticlearn.model_selection.train_test_split(x, y, test_ratio=None, random_seed=None)`
  shuffles the samples and returns `(x_train, y_train, x_test, y_test)`.
  - The test set takes `test_ratio` of the samples, rounded half up. The
    default is 0.2.
  - The ratio must lie strictly between 0 and 1.
  - Without a seed the shuffle is not reproducible.
- `rusticlearn.datasets` contains `parse_line`, `parse_csv`, `load_iris` and
  `load_boston_housing`.

## Installation

```
pip install .
```

## Usage

```python
from rusticlearn.classifiers import KnnClassifier
from rusticlearn.model_selection import train_test_split

x = [[1.0, 1.0], [1.2, 0.9], [5.0, 5.0], [5.1, 4.8]]
y = ["a", "a", "b", "b"]
x_train, y_train, x_test, y_test = train_test_split(x, y, 0.25, 42)

knn = KnnClassifier(x_train, y_train, 1)
print(knn.predict(x_test))
```

```python
from rusticlearn.regressors import LinearRegression

model = LinearRegression()
model.fit([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]], [2.0, 3.0, 5.0])
print(model.predict([[2.0, 2.0]]))  # approximately [10.0]
```

```python
from rusticlearn.distance import euclidean_distance, manhattan_distance

euclidean_distance([0.0, 0.0], [3.0, 4.0])  # 5.0
manhattan_distance([0.0, 0.0], [3.0, 4.0])  # 7.0
```

## Datasets

`load_iris(file_path)` and `load_boston_housing(file_path)` read a CSV file
that begins with a header row. Blank lines are skipped. The last column is the
label and every other column is a numeric feature.

- A feature that cannot be parsed is skipped and raises a `RuntimeWarning`.
- Boston Housing labels are converted to floats. A label that cannot be
  parsed becomes 0.0 and raises a `RuntimeWarning`.

The default paths are `data/Iris.csv` and `data/BostonHousing.csv`. Both are
relative to the current directory.

## Command line

```
rusticlearn
```

The command does the following:

1. Splits the Iris data, trains the k-NN classifier and prints its accuracy.
2. Splits the Boston Housing data, fits linear regression and prints the root
   mean squared error.
3. Prints the first two predictions next to their actual values.

Options:

- `--iris PATH`: path to the Iris CSV.
- `--boston PATH`: path to the Boston Housing CSV.
- `--neighbors K`: the value of `k` for k-NN. The default is 3.
- `--test-ratio R`: the share of samples used for testing. The default is 0.2.
- `--seed N`: a seed that makes the shuffle reproducible.

## What it does not do

The package contains no dataset files. You have to supply the Iris and Boston
Housing CSV files yourself. Trained models cannot be saved or loaded. The
classifier supports only Euclidean distance, and the regression never fits an
intercept.