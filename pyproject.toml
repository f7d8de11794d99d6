[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iavlkit"
version = "0.1.0"
description = "Building blocks for versioned AVL+ trees: varint encoding, key formats, fast nodes, LRU caching, traversal, export and rendering."
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "merkle", "tree", "varint", "lru", "key-value", "export"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iavlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
