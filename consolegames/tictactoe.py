"""A two-player tic-tac-toe game with a running score."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from enum import Enum

EMPTY = "-"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

Reader = Callable[[], str]
Writer = Callable[[str], None]

# Keypad layout: position 7 is the top-left cell, 3 the bottom-right.
_POSITIONS = {
    1: (2, 0), 2: (2, 1), 3: (2, 2),
    4: (1, 0), 5: (1, 1), 6: (1, 2),
    7: (0, 0), 8: (0, 1), 9: (0, 2),
}


class Mark(Enum):
    """A player's mark."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


def position_to_cell(position: int) -> tuple[int, int]:
    """Map a keypad position 1-9 to a (row, column) cell."""
    try:
        return _POSITIONS[position]
    except KeyError:
        raise ValueError(f"position must be between 1 and 9, got {position}") from None


class Board:
    """A 3x3 board of marks."""

    def __init__(self) -> None:
        self.cells = [[EMPTY] * 3 for _ in range(3)]

    def place(self, position: int, mark: Mark) -> bool:
        """Put ``mark`` at a keypad position; return False if it is taken."""
        row, column = position_to_cell(position)
        if self.cells[row][column] != EMPTY:
            return False
        self.cells[row][column] = mark.value
        return True

    def _lines(self) -> Iterator[list[str]]:
        c = self.cells
        yield from (list(row) for row in c)
        yield from (list(column) for column in zip(*c))
        yield [c[0][0], c[1][1], c[2][2]]
        yield [c[0][2], c[1][1], c[2][0]]

    def winner(self) -> Mark | None:
        """The mark that fills a row, column or diagonal, if any."""
        for line in self._lines():
            first = line[0]
            if first != EMPTY and line.count(first) == 3:
                return Mark(first)
        return None

    def is_full(self) -> bool:
        return all(EMPTY not in row for row in self.cells)

    def render(self) -> str:
        """The board as three lines, preceded by a blank line."""
        return "\n" + "".join("".join(row) + "\n" for row in self.cells)


def instructions() -> str:
    """The keypad map of positions."""
    return (
        "\nMapa de Posicoes:"
        "\n 7 | 8 | 9"
        "\n 4 | 5 | 6"
        "\n 1 | 2 | 3"
    )


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def _play_round(
    first: str,
    second: str,
    scores: tuple[int, int],
    read: Reader,
    write: Writer,
) -> Mark | None:
    board = Board()
    turn = Mark.X
    winner: Mark | None = None
    round_number = 0

    while round_number < 9 and winner is None:
        write(CLEAR_SCREEN)
        write(f"\nRodada:{round_number}\n")
        write(f"Pontuacao:{first} {scores[0]} x {scores[1]} {second}")
        write(board.render())
        write(instructions())

        name = first if turn is Mark.X else second
        while True:
            write(f"\n{name}Digite uma posicao conforme o mapa acima:")
            position = _to_int(read())
            if position in _POSITIONS and board.place(position, turn):
                break
        turn = turn.other

        winner = board.winner()
        if winner is not None:
            write(f"O jogador {winner.value} venceu")
        round_number += 1

    write(board.render())
    write("Fim de jogo")
    return winner


def play(first: str, second: str, read: Reader, write: Writer) -> Mark | None:
    """Play one game, X moving first; return the winning mark or None for a draw."""
    return _play_round(first, second, (0, 0), read, write)


def _token_reader() -> Reader:
    def tokens() -> Iterator[str]:
        for line in sys.stdin:
            yield from line.split()

    stream = tokens()

    def read() -> str:
        try:
            return next(stream)
        except StopIteration:
            raise EOFError from None

    return read


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _run(read: Reader, write: Writer) -> None:
    while True:
        option = 0
        while not 1 <= option <= 3:
            write(CLEAR_SCREEN)
            write("Bem vindo ao Jogo da Velha")
            write("\n1 - Jogar")
            write("\n2 - Sobre")
            write("\n3 - Sair")
            write("\nEscolha uma opcao e tecle ENTER:")
            option = _to_int(read())
        if option == 2:
            write("Informacoes do jogo")
            return
        if option == 3:
            write("Ate mais!")
            return

        write("Digite o nome do jogador 1:")
        first = read()
        write("Digite o nome do jogador 2:")
        second = read()

        scores = [0, 0]
        while True:
            winner = _play_round(first, second, (scores[0], scores[1]), read, write)
            if winner is Mark.X:
                scores[0] += 1
            elif winner is Mark.O:
                scores[1] += 1
            write("\nO que deseja fazer?")
            write("\n1-Continuar Jogando")
            write("\n2-Menu Inicial")
            write("\n3-Sair")
            choice = _to_int(read())
            if choice != 1:
                break
        if choice != 2:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive tic-tac-toe menu."""
    try:
        _run(_token_reader(), _write)
    except (EOFError, KeyboardInterrupt):
        pass
    _write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())