"""A single-player battleship game on a 10x10 board."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator, Sequence
from enum import Enum

SIZE = 10
SHIPS = 10
MAX_SHOTS = 5

WATER = "A"
SHIP = "P"
HIDDEN = "*"

BLUE = "\x1b[1;34m"
GREEN = "\x1b[1;32m"
NORMAL = "\x1b[1;39m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

Reader = Callable[[], str]
Writer = Callable[[str], None]


class ShotResult(Enum):
    """What a shot hit, with its feedback message and points."""

    WATER = ("Voce acertou a agua", 0)
    SHIP = ("Voce acertou um barco pequeno! (10 pts)", 10)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]


class Board:
    """The hidden answer grid and the mask of revealed cells."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.cells = [[WATER] * SIZE for _ in range(SIZE)]
        self.mask = [[HIDDEN] * SIZE for _ in range(SIZE)]

    @property
    def ships(self) -> set[tuple[int, int]]:
        """Coordinates of every ship on the board."""
        return {
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell == SHIP
        }

    def place_ships(self, count: int = SHIPS) -> None:
        """Put ``count`` ships on random water cells."""
        free = sum(row.count(WATER) for row in self.cells)
        if not 0 <= count <= free:
            raise ValueError(f"cannot place {count} ships on {free} free cells")
        placed = 0
        while placed < count:
            row = self.rng.randrange(SIZE)
            column = self.rng.randrange(SIZE)
            if self.cells[row][column] == WATER:
                self.cells[row][column] = SHIP
                placed += 1

    def shoot(self, row: int, column: int) -> ShotResult:
        """Fire at a cell, reveal it and report what was hit."""
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise ValueError(f"position out of the board: {row}, {column}")
        cell = self.cells[row][column]
        self.mask[row][column] = cell
        return ShotResult.SHIP if cell == SHIP else ShotResult.WATER

    def render(self, show_answer: bool = False) -> str:
        """Draw the revealed board, optionally followed by the answer grid."""
        lines = []
        for number, row in enumerate(self.mask):
            parts = [f"{number} - "]
            for cell in row:
                if cell == WATER:
                    parts.append(f"{BLUE} {cell}{NORMAL}")
                elif cell == SHIP:
                    parts.append(f"{GREEN} {cell}{NORMAL}")
                else:
                    parts.append(f" {cell}")
            lines.append("".join(parts) + "\n")
        if show_answer:
            lines.extend("".join(f" {c}" for c in row) + "\n" for row in self.cells)
        return "".join(lines)


def column_header() -> str:
    """The column numbers shown above the board."""
    indent = " " * 5
    numbers = "".join(f"{n} " for n in range(SIZE))
    bars = "| " * SIZE
    return f"{indent}{numbers}\n{indent}{bars}\n"


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return -1


def play(
    name: str,
    read: Reader,
    write: Writer,
    rng: random.Random | None = None,
) -> int:
    """Play one game of five shots and return the points scored."""
    board = Board(rng)
    board.place_ships(SHIPS)
    points = 0
    message = "Bem vindo ao jogo!"

    for shot in range(MAX_SHOTS):
        write(CLEAR_SCREEN)
        write(column_header())
        write(board.render(False))
        write(f"\nPontos:{points}, Tentativas Restantes:{MAX_SHOTS - shot}")
        write(f"\n{message}")

        row = column = -1
        while not (0 <= row < SIZE and 0 <= column < SIZE):
            write(f"\n{name}, digite uma linha:")
            row = _to_int(read())
            write(f"\n{name}, digite uma coluna:")
            column = _to_int(read())

        result = board.shoot(row, column)
        points += result.points
        message = result.message

    return points


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


def _run(read: Reader, write: Writer, rng: random.Random) -> None:
    while True:
        option = 0
        while not 1 <= option <= 3:
            write(CLEAR_SCREEN)
            write("Bem vindo ao Jogo de Batalha Naval")
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

        write("Qual seu nome?")
        name = read()
        while True:
            play(name, read, write, rng)
            write("Fim de jogo, o que deseja fazer?")
            write("\n1-Jogar Novamente")
            write("\n2-Ir para o Menu")
            write("\n3-Sair")
            choice = _to_int(read())
            if choice != 1:
                break
        if choice != 2:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive battleship menu."""
    try:
        _run(_token_reader(), _write, random.Random())
    except (EOFError, KeyboardInterrupt):
        pass
    _write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())