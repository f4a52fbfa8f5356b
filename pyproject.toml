[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rusticlearn"
version = "0.1.0"
description = "A small machine-learning toolkit: k-nearest neighbours, linear regression, distance functions, metrics and CSV dataset loaders."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["machine-learning", "knn", "linear-regression", "distance", "metrics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rusticlearn = "rusticlearn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rusticlearn"]

[tool.pytest.ini_options]
addopts = "-ra"
