[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "causaltrail"
version = "0.1.0"
description = "Labelled matrices, matrix file reading and value enumeration for discrete causal network analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "combinations", "enumeration", "causal analysis", "tabular data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["causaltrail"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
