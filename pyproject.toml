[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliquecount"
version = "0.1.0"
description = "Count k-cliques in sparse graphs with degeneracy ordering and pivoting"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "clique", "k-clique", "pivoting", "degeneracy", "combinatorics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cliquecount = "cliquecount.cli:main"
cliquecount-normalize = "cliquecount.preprocess:main"

[tool.hatch.build.targets.wheel]
packages = ["cliquecount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
