"""Small machine-learning toolkit: k-NN, linear regression, distances, metrics, data splitting and CSV datasets."""

__version__ = "0.1.0"