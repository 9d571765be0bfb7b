# consolegames

Small games and exercises for the terminal. The games' messages are in
Portuguese.

- **Battleship** (`consolegames.battleship`): ten one-cell boats are hidden on
  a 10×10 board. You have five shots, and each boat you hit is worth 10
  points.
- **Hangman** (`consolegames.hangman`): guess a word one letter at a time
  within ten attempts, or type `1` followed by a word to risk the whole word
  (a wrong guess ends the round). Play alone against a built-in word, or in
  pairs where one player types the word.
- **Tic-tac-toe** (`consolegames.tictactoe`): two players use the numeric
  keypad layout (7 8 9 / 4 5 6 / 1 2 3), and the score is kept across rounds
  while you keep playing.
- **Sudoku checker** (`consolegames.sudoku`): reads a number of completed 9×9
  grids and reports for each one whether it is a valid solution (`SIM`) or
  not (`NAO`).
- **Sorting benchmark** (`consolegames.sorting`): times insertion sort, merge
  sort or quick sort on random data.

## Installation

```
pip install .
```

## Commands

```
consolegames-battleship
consolegames-hangman
consolegames-tictactoe
consolegames-sudoku instances.txt
consolegames-sudoku < instances.txt
consolegames-sort merge
consolegames-sort insertion --size 5000
```

The interactive games read whitespace-separated answers from standard input
and clear the screen with ANSI escape codes. Ending the input or pressing
Ctrl-C leaves a game.

The Sudoku checker reads the file given as argument, or standard input. The
first number is the count of grids, and nine rows of nine digits (1–9) follow
for each grid:

```
1
1 2 3 4 5 6 7 8 9
4 5 6 7 8 9 1 2 3
...
```

For each grid it prints `Instancia N` and then `SIM` or `NAO`. A digit outside
1–9, or input that ends in the middle of a grid, is an error.

`consolegames-sort` takes the algorithm (`insertion`, `merge` or `quick`) and
an optional `--size`. Without `--size` it sorts 20000 values for insertion and
quick sort and 400000 for merge sort, and prints the CPU time in milliseconds.

## Using it as a library

```python
import random
from consolegames.sorting import merge_sort, quick_sort, random_values, time_sort
from consolegames.sudoku import is_valid, parse_instances, report
from consolegames.tictactoe import Board, Mark

values = random_values(1000, random.Random(1))
assert merge_sort(values) == sorted(values)
result, elapsed_ms = time_sort(quick_sort, values)

board = Board()
board.place(7, Mark.X)
board.place(5, Mark.X)
board.place(3, Mark.X)
assert board.winner() is Mark.X
```

`consolegames.hangman.Hangman` holds the state of one hangman round
(`guess_letter`, `guess_word`, `masked`, `won`, `finished`, `status`), and
`consolegames.battleship.Board` one battleship board (`place_ships`, `shoot`,
`render`).

Each game has a `play` function that takes `read` and `write` callables, so a
game can be scripted or driven from tests: `battleship.play(name, read, write,
rng)` returns the points scored, `hangman.play(players, read, write, rng)`
returns whether the word was guessed, and `tictactoe.play(first, second, read,
write)` returns the winning `Mark`, or `None` for a draw.

## What it does not do

There is no computer opponent in tic-tac-toe, and no scores are saved between
runs of a command. The "about" option of the game menus only prints a short
line. The Sudoku checker judges completed grids; it does not solve puzzles.

## Running the tests

```
pip install .[test]
pytest
```