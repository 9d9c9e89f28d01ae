[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexhashi"
version = "0.1.0"
description = "Bridges (Hashiwokakero) puzzle on a hexagonal grid, with a puzzle generator and a Tk window to play it"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashi", "hashiwokakero", "bridges", "puzzle", "hexagonal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
hexhashi = "hexhashi.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["hexhashi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
