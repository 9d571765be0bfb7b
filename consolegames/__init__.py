"""Terminal games, a Sudoku solution checker and sorting benchmarks."""

__version__ = "0.1.0"
__all__ = ["sorting", "sudoku", "battleship", "hangman", "tictactoe"]