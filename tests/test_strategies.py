import io

import pytest

from lldgames.position import Position
from lldgames.strategies import HumanPlayerStrategy, PlayerStrategy


class _OpenBoard:
    """Accepts any in-range move except the ones listed as taken."""

    def __init__(self, taken=()):
        self.taken = set(taken)

    def is_valid_move(self, pos):
        return 0 <= pos.row < 3 and 0 <= pos.col < 3 and pos not in self.taken


def _strategy(text, name="Player X"):
    out = io.StringIO()
    return HumanPlayerStrategy(name, stdin=io.StringIO(text), stdout=out), out


def test_valid_move_is_returned():
    strategy, out = _strategy("1 2\n")
    assert strategy.make_move(_OpenBoard()) == Position(1, 2)
    assert out.getvalue() == "Player X, enter your move (row [0-2] and column [0-2]): "


def test_invalid_move_is_asked_again():
    strategy, out = _strategy("5 5\n0 0\n1 1\n")
    move = strategy.make_move(_OpenBoard(taken=[Position(0, 0)]))
    assert move == Position(1, 1)
    assert out.getvalue().count("Invalid move. Try again.") == 2


def test_non_numeric_input_discards_rest_of_line():
    strategy, out = _strategy("a 1 1\n2 0\n")
    assert strategy.make_move(_OpenBoard()) == Position(2, 0)
    assert "Invalid input. Please enter row and column as numbers." in out.getvalue()


def test_row_and_column_may_span_lines():
    strategy, _ = _strategy("2\n1\n")
    assert strategy.make_move(_OpenBoard()) == Position(2, 1)


def test_leftover_tokens_serve_next_move():
    strategy, _ = _strategy("0 0 2 2\n")
    board = _OpenBoard()
    assert strategy.make_move(board) == Position(0, 0)
    assert strategy.make_move(board) == Position(2, 2)


def test_prompt_uses_player_name():
    strategy, out = _strategy("0 1\n", name="Player O")
    strategy.make_move(_OpenBoard())
    assert out.getvalue().startswith("Player O, enter your move")


def test_end_of_input_raises():
    strategy, _ = _strategy("1\n")
    with pytest.raises(EOFError):
        strategy.make_move(_OpenBoard())


def test_player_strategy_is_abstract():
    with pytest.raises(TypeError):
        PlayerStrategy()