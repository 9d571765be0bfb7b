import pytest

from consolegames.tictactoe import (
    Board,
    Mark,
    instructions,
    play,
    position_to_cell,
)


def scripted(tokens):
    iterator = iter(tokens)
    return lambda: next(iterator)


def fill(moves):
    board = Board()
    mark = Mark.X
    for position in moves:
        assert board.place(position, mark)
        mark = mark.other
    return board


def test_position_mapping_follows_keypad():
    assert position_to_cell(7) == (0, 0)
    assert position_to_cell(1) == (2, 0)
    assert position_to_cell(9) == (0, 2)
    assert position_to_cell(3) == (2, 2)


@pytest.mark.parametrize("position", [0, 10, -1])
def test_position_out_of_range(position):
    with pytest.raises(ValueError):
        position_to_cell(position)


def test_every_position_maps_to_a_distinct_cell():
    cells = {position_to_cell(p) for p in range(1, 10)}
    assert cells == {(r, c) for r in range(3) for c in range(3)}


def test_empty_board_render_and_winner():
    board = Board()
    assert board.render() == "\n---\n---\n---\n"
    assert board.winner() is None


def test_place_on_taken_cell_fails():
    board = Board()
    assert board.place(5, Mark.X) is True
    assert board.place(5, Mark.O) is False
    assert board.cells[1][1] == "X"


@pytest.mark.parametrize(
    "positions",
    [(7, 8, 9), (4, 5, 6), (1, 2, 3), (7, 4, 1), (8, 5, 2), (9, 6, 3), (7, 5, 3), (9, 5, 1)],
)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(positions, mark):
    board = Board()
    for position in positions:
        board.place(position, mark)
    assert board.winner() is mark


def test_two_in_a_line_is_not_a_win():
    board = Board()
    board.place(7, Mark.X)
    board.place(8, Mark.X)
    board.place(9, Mark.O)
    assert board.winner() is None


def test_drawn_board_has_no_winner():
    board = fill([7, 8, 9, 5, 4, 6, 2, 1, 3])
    assert board.is_full()
    assert board.winner() is None


def test_instructions_show_keypad():
    text = instructions()
    assert text.startswith("\nMapa de Posicoes:")
    assert text.index("7 | 8 | 9") < text.index("4 | 5 | 6") < text.index("1 | 2 | 3")


def test_play_x_wins():
    out = []
    result = play("Ana", "Bia", scripted(["7", "1", "8", "2", "9"]), out.append)
    assert result is Mark.X
    assert "O jogador X venceu" in out
    assert out[-1] == "Fim de jogo"


def test_play_o_wins():
    out = []
    result = play("Ana", "Bia", scripted(["1", "7", "2", "8", "4", "9"]), out.append)
    assert result is Mark.O
    assert "O jogador O venceu" in out


def test_play_draw():
    out = []
    moves = ["7", "8", "9", "5", "4", "6", "2", "1", "3"]
    assert play("Ana", "Bia", scripted(moves), out.append) is None
    assert not any("venceu" in text for text in out)


def test_play_retries_taken_and_invalid_positions():
    out = []
    tokens = ["7", "7", "abc", "0", "10", "1", "8", "2", "9"]
    assert play("Ana", "Bia", scripted(tokens), out.append) is Mark.X
    prompts = [t for t in out if t.startswith("\nBia")]
    assert len(prompts) == 6


def test_play_shows_names_and_scoreboard():
    out = []
    play("Ana", "Bia", scripted(["7", "1", "8", "2", "9"]), out.append)
    assert "Pontuacao:Ana 0 x 0 Bia" in out
    assert "\nRodada:0\n" in out