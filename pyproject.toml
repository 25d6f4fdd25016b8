[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.2.0"
description = "Teaching tools for data structures: queueing simulation, search trees and longest paths in weighted DAGs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "queue",
    "simulation",
    "binary search tree",
    "avl",
    "linked list",
    "graph",
    "topological sort",
    "longest path",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslabs-queueing = "dslabs.queueing.cli:main"
dslabs-graphs = "dslabs.graphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
