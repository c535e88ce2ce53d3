[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynaprog"
version = "0.1.0"
description = "Classic dynamic programming solutions: knapsack, subset sums, coin change, LCS, matrix chains, partitioning, egg drop and tree paths"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic-programming",
    "knapsack",
    "subset-sum",
    "coin-change",
    "longest-common-subsequence",
    "matrix-chain-multiplication",
    "palindrome-partitioning",
    "egg-drop",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dynaprog = "dynaprog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dynaprog"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
