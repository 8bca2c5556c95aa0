[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolbench"
version = "0.1.0"
description = "A bench of small tools: sandpile simulation with BMP output, a binary search tree and tree container, a lazy task scheduler, and a text search index with a ranked finder."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sandpile",
    "bmp",
    "binary-search-tree",
    "scheduler",
    "tf-idf",
    "search-index",
    "boolean-query",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toolbench-sandpile = "toolbench.sandpile_cli:main"
toolbench-index = "toolbench.indexer:main"
toolbench-find = "toolbench.finder:main"

[tool.hatch.build.targets.wheel]
packages = ["toolbench"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
