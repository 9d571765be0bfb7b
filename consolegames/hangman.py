"""A hangman word-guessing game for one or two players."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator, Sequence

WORDS = ("abacaxi", "manga", "morango")
MAX_ATTEMPTS = 10

WELCOME = "Bem vindo ao jogo!"
ALREADY_GUESSED = "Essa letra ja foi digitada!"
MISSED = "Voce errou uma letra!"
HIT = "Voce acertou uma letra!"
WORD_PROMPT = "\nDigite uma letra (Ou digite 1 para arriscar a palavra):"
GUESS_WORD_KEY = "1"

CLEAR_SCREEN = "\x1b[2J\x1b[H"

Reader = Callable[[], str]
Writer = Callable[[str], None]


class Hangman:
    """State of one hangman round: the secret word, guesses and attempts."""

    def __init__(self, word: str, max_attempts: int = MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.word = word
        self.max_attempts = max_attempts
        self.attempts = 0
        self.guessed: list[str] = []
        self.message = WELCOME
        self._revealed = [False] * len(word)

    @property
    def remaining(self) -> int:
        """Attempts still available."""
        return self.max_attempts - self.attempts

    def masked(self) -> str:
        """The word with every unrevealed letter shown as an underscore."""
        return "".join(
            ch if shown else "_" for ch, shown in zip(self.word, self._revealed)
        )

    def won(self) -> bool:
        """True once every letter of the word has been revealed."""
        return all(self._revealed)

    def finished(self) -> bool:
        """True when the word is revealed or no attempts are left."""
        return self.won() or self.remaining <= 0

    def _check_playable(self) -> None:
        if self.finished():
            raise RuntimeError("the game is already over")

    def guess_letter(self, letter: str) -> str:
        """Try a letter; every new letter costs one attempt. Return the feedback."""
        if len(letter) != 1:
            raise ValueError(f"expected a single letter, got {letter!r}")
        self._check_playable()
        letter = letter.lower()
        if letter in self.guessed:
            self.message = ALREADY_GUESSED
            return self.message

        self.guessed.append(letter)
        hit = False
        for index, ch in enumerate(self.word):
            if ch == letter:
                self._revealed[index] = True
                hit = True
        self.message = HIT if hit else MISSED
        self.attempts += 1
        return self.message

    def guess_word(self, word: str) -> bool:
        """Risk the whole word: a right guess wins, a wrong one ends the game."""
        self._check_playable()
        if word == self.word:
            self._revealed = [True] * len(self.word)
            return True
        self.attempts = self.max_attempts
        return False

    def status(self) -> str:
        """The feedback message, masked word, attempts left and letters tried."""
        letters = "".join(f"{letter}, " for letter in self.guessed)
        return (
            f"{self.message}"
            f"\nPalavra:{self.masked()}(Tamanho:{len(self.word)})"
            f"\nTentativas Restantes:{self.remaining}"
            f"\nLetras arriscadas:{letters}"
        )


def random_word(rng: random.Random | None = None) -> str:
    """Pick one of the built-in words at random."""
    return (rng or random.Random()).choice(WORDS)


def play(
    players: int,
    read: Reader,
    write: Writer,
    rng: random.Random | None = None,
) -> bool:
    """Play one round and return True if the word was guessed.

    With one player the word is chosen at random; otherwise it is read first.
    Input is consumed one character at a time, as typed letters are.
    """
    if players == 1:
        word = random_word(rng)
    else:
        write("\nDigite uma palavra:")
        word = read()

    pending = ""

    def next_char() -> str:
        nonlocal pending
        while not pending:
            pending = read()
        ch, pending = pending[0], pending[1:]
        return ch

    def next_word() -> str:
        nonlocal pending
        if pending:
            word_guess, pending = pending, ""
            return word_guess
        return read()

    game = Hangman(word)
    while not game.finished():
        write(CLEAR_SCREEN)
        write(game.status())
        write(WORD_PROMPT)
        ch = next_char()
        if ch == GUESS_WORD_KEY:
            game.guess_word(next_word())
        else:
            game.guess_letter(ch)
    return game.won()


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


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


def _ask_restart(won: bool, read: Reader, write: Writer) -> bool:
    write(CLEAR_SCREEN)
    write("Parabens, você venceu!" if won else "Bleh, você perdeu!")
    write("\nDeseja reiniciar?")
    write("\n1-Sim")
    write("\n2-Nao")
    return _to_int(read()) == 1


def _run(read: Reader, write: Writer, rng: random.Random) -> None:
    while True:
        write(CLEAR_SCREEN)
        write("Bem vindo ao Jogo")
        write("\n1 - Jogar Sozinho")
        write("\n2 - Jogar em Dupla")
        write("\n3 - Sobre")
        write("\n4 - Sair")
        write("\nEscolha uma opcao e tecle ENTER:")
        option = _to_int(read())

        if option in (1, 2):
            won = play(option, read, write, rng)
            if not _ask_restart(won, read, write):
                return
        elif option == 3:
            write("Informacoes do jogo")
            write(CLEAR_SCREEN)
            write("Jogo da Forca")
            write("\n1 - Voltar")
            write("\n2 - Sair")
            if _to_int(read()) != 1:
                return
        elif option == 4:
            write("Ate mais!")
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive hangman menu."""
    try:
        _run(_token_reader(), _write, random.Random())
    except (EOFError, KeyboardInterrupt):
        pass
    _write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())