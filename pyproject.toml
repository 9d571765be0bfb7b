[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolegames"
version = "0.1.0"
description = "Small terminal games, a Sudoku checker and sorting benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "battleship", "hangman", "tic-tac-toe", "sudoku", "sorting"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolegames-sort = "consolegames.sorting:main"
consolegames-sudoku = "consolegames.sudoku:main"
consolegames-battleship = "consolegames.battleship:main"
consolegames-hangman = "consolegames.hangman:main"
consolegames-tictactoe = "consolegames.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["consolegames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
