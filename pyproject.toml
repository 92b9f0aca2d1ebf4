[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extsearch"
version = "0.1.0"
description = "External search on fixed-size record files: indexed sequential access, an on-disk binary search tree and an in-memory B-tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["external search", "b-tree", "binary tree", "indexed sequential", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
extsearch = "extsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["extsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
