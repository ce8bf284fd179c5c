[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blobset"
version = "0.1.0"
description = "A hash set and singly linked list of raw byte blobs with explicit iterators and a pluggable memory manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash set", "linked list", "container", "iterator", "bytes"]
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
blobset-selftest = "blobset.harness:main"

[tool.hatch.build.targets.wheel]
packages = ["blobset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
