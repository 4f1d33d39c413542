[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physkit"
version = "0.1.0"
description = "Utilities for physics codes: exact rational constants and scaling factors, string helpers, tridiagonal solvers and linear interpolation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "rational",
    "scaling-factor",
    "tridiagonal",
    "cyclic-reduction",
    "interpolation",
    "scientific-computing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["physkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
