"""Game states and the context that moves between them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lldgames.player import Player
from lldgames.symbol import Symbol


def _announce(message: str) -> str:
    """Print ``message`` if there is one, and return it."""
    if message:
        print(message)
    return message


class GameState(ABC):
    """One phase of a game."""

    @abstractmethod
    def handle(self, player: Player | None) -> str:
        """Announce what this state means for the game and return the announcement."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """Whether the game has ended in this state."""


class InProgressState(GameState):
    """The game is still being played."""

    message = ""

    def handle(self, player: Player | None) -> str:
        return _announce(self.message)

    def is_game_over(self) -> bool:
        return False


class XWonState(GameState):
    """Player X has completed a line."""

    message = "Player X wins!"

    def handle(self, player: Player | None) -> str:
        return _announce(self.message)

    def is_game_over(self) -> bool:
        return True


class OWonState(GameState):
    """Player O has completed a line."""

    message = "Player O wins!"

    def handle(self, player: Player | None) -> str:
        return _announce(self.message)

    def is_game_over(self) -> bool:
        return True


class DrawState(GameState):
    """The board filled up with no winner."""

    message = "It's a draw!"

    def handle(self, player: Player | None) -> str:
        return _announce(self.message)

    def is_game_over(self) -> bool:
        return True


class GameContext:
    """Tracks the current state of a game and whether it is over."""

    def __init__(self) -> None:
        self.current_state: GameState = InProgressState()
        self.game_over = False

    def next(self, player: Player, is_win: bool) -> None:
        """Finish the game: a win for ``player`` if ``is_win``, else a draw."""
        if is_win:
            self.current_state = XWonState() if player.symbol is Symbol.X else OWonState()
        else:
            self.current_state = DrawState()
        self.game_over = True

    def set_state(self, state: GameState) -> None:
        """Replace the current state without touching the game-over flag."""
        self.current_state = state