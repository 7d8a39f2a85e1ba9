[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqmatrix"
version = "0.1.0"
description = "Square integer and floating-point matrices read from text files, with arithmetic, diagonal sums and row/column swaps"
requires-python = ">=3.10"
keywords = ["matrix", "square matrix", "linear algebra", "diagonal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqmatrix = "sqmatrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqmatrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
