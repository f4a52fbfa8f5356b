import pytest

from rusticlearn.model_selection import train_test_split

X = [[float(i), float(i * 2)] for i in range(10)]
Y = [f"label{i}" for i in range(10)]


def test_sizes_with_ratio():
    x_train, y_train, x_test, y_test = train_test_split(X, Y, 0.2, 1)
    assert len(x_test) == len(y_test) == 2
    assert len(x_train) == len(y_train) == 8


def test_default_ratio_matches_explicit():
    default = train_test_split(X, Y, None, 3)
    explicit = train_test_split(X, Y, 0.2, 3)
    assert default == explicit


def test_pairs_stay_together_and_cover_all():
    x_train, y_train, x_test, y_test = train_test_split(X, Y, 0.3, 7)
    pairs = list(zip(x_train + x_test, y_train + y_test))
    assert sorted(pairs) == sorted(zip(X, Y))


def test_seed_is_reproducible():
    first = train_test_split(X, Y, 0.5, 42)
    second = train_test_split(X, Y, 0.5, 42)
    x_train, y_train, x_test, y_test = first
    assert len(x_test) == len(y_test) == 5
    assert len(x_train) == len(y_train) == 5
    assert sorted(y_train + y_test) == sorted(Y)
    assert first == second


def test_rounds_half_away_from_zero():
    _, _, x_test, _ = train_test_split(X[:5], Y[:5], 0.5, 0)
    assert len(x_test) == 3


@pytest.mark.parametrize("ratio", [0.0, 1.0, -0.5, 1.5])
def test_bad_ratio(ratio):
    with pytest.raises(ValueError):
        train_test_split(X, Y, ratio, None)


def test_length_mismatch():
    with pytest.raises(ValueError):
        train_test_split(X, Y[:3], 0.2, None)