import pytest

from rusticlearn.classifiers import KnnClassifier

X = [[0.0, 0.0], [0.1, 0.2], [0.2, 0.1], [5.0, 5.0], [5.1, 4.9], [4.9, 5.2]]
Y = ["low", "low", "low", "high", "high", "high"]


def test_k_zero_rejected():
    with pytest.raises(ValueError):
        KnnClassifier(X, Y, 0)


def test_empty_training_rejected():
    with pytest.raises(ValueError):
        KnnClassifier([], [], 1)


def test_mismatched_training_rejected():
    with pytest.raises(ValueError):
        KnnClassifier(X, Y[:-1], 1)


def test_k1_reproduces_training_labels():
    assert KnnClassifier(X, Y, 1).predict(X) == Y


def test_k3_clusters():
    knn = KnnClassifier(X, Y, 3)
    assert knn.predict([[0.05, 0.05], [5.0, 5.1]]) == ["low", "high"]


def test_tie_goes_to_nearest_label():
    knn = KnnClassifier([[0.0], [1.0], [5.0]], ["a", "b", "c"], 2)
    assert knn.predict([[0.1]]) == ["a"]


def test_empty_test_set():
    assert KnnClassifier(X, Y, 3).predict([]) == []


def test_k_larger_than_training_set():
    with pytest.raises(ValueError):
        KnnClassifier(X, Y, 10).predict([[0.0, 0.0]])


def test_feature_length_mismatch():
    with pytest.raises(ValueError):
        KnnClassifier(X, Y, 1).predict([[0.0]])