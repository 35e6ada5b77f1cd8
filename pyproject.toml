[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maxkcut"
version = "0.1.0"
description = "Graph, parameter, variable and constraint building blocks for max-k-cut relaxations solved by cutting planes"
requires-python = ">=3.10"
dependencies = []
keywords = ["max-k-cut", "graph partitioning", "cutting plane", "semidefinite programming", "optimization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maxkcut"]

[tool.pytest.ini_options]
addopts = "-ra"
