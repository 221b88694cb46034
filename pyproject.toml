[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokuhints"
version = "0.1.0"
description = "Step-by-step Sudoku solver that explains each candidate elimination as a hint"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "hints", "solver", "candidates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudokuhints = "sudokuhints.console:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokuhints"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
