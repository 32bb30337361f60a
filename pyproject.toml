[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Solvers for a small set of daily puzzles: safe dials, repeated IDs and battery joltage"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
puzzlebox-dial = "puzzlebox.dial:main"
puzzlebox-invalid-ids = "puzzlebox.invalid_ids:main"
puzzlebox-jolts = "puzzlebox.jolts:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
