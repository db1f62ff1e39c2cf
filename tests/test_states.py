import io

import pytest

from lldgames.player import Player
from lldgames.states import (
    DrawState,
    GameContext,
    GameState,
    InProgressState,
    OWonState,
    XWonState,
)
from lldgames.strategies import HumanPlayerStrategy
from lldgames.symbol import Symbol


def _player(symbol):
    strategy = HumanPlayerStrategy("p", stdin=io.StringIO(""), stdout=io.StringIO())
    return Player(symbol, strategy)


@pytest.mark.parametrize(
    ("state", "over"),
    [
        (InProgressState(), False),
        (XWonState(), True),
        (OWonState(), True),
        (DrawState(), True),
    ],
)
def test_is_game_over(state, over):
    assert state.is_game_over() is over


@pytest.mark.parametrize(
    ("state", "message"),
    [
        (XWonState(), "Player X wins!\n"),
        (OWonState(), "Player O wins!\n"),
        (DrawState(), "It's a draw!\n"),
        (InProgressState(), ""),
    ],
)
def test_handle_announces(state, message, capsys):
    state.handle(_player(Symbol.X))
    assert capsys.readouterr().out == message


def test_game_state_is_abstract():
    with pytest.raises(TypeError):
        GameState()


def test_context_starts_in_progress():
    context = GameContext()
    assert isinstance(context.current_state, InProgressState)
    assert context.game_over is False


def test_next_win_for_x():
    context = GameContext()
    context.next(_player(Symbol.X), True)
    assert isinstance(context.current_state, XWonState)
    assert context.game_over is True


def test_next_win_for_o():
    context = GameContext()
    context.next(_player(Symbol.O), True)
    assert isinstance(context.current_state, OWonState)
    assert context.game_over is True


def test_next_without_win_is_draw():
    context = GameContext()
    context.next(_player(Symbol.O), False)
    assert isinstance(context.current_state, DrawState)
    assert context.game_over is True


def test_set_state_keeps_game_over_flag():
    context = GameContext()
    state = DrawState()
    context.set_state(state)
    assert context.current_state is state
    assert context.game_over is False