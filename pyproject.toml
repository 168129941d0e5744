[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polybag"
version = "0.1.0"
description = "Decimal string big integers, 2D integer vectors, and searchable array and tree bags with a set view"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "vector", "bag", "multiset", "binary search tree", "set"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[project.scripts]
polybag = "polybag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polybag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
