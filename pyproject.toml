[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangekit"
version = "0.1.0"
description = "Fenwick trees, segment trees and graph cut algorithms for range queries and connectivity analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fenwick tree",
    "binary indexed tree",
    "segment tree",
    "lazy propagation",
    "merge sort tree",
    "range query",
    "articulation points",
    "bridges",
    "algorithms",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rangekit = "rangekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rangekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
