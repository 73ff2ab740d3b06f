[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marco_store"
version = "0.1.0"
description = "Product catalogue kept in binary heaps and binary search trees, ordered by name or price"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "binary search tree", "products", "inventory", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marco_store"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
