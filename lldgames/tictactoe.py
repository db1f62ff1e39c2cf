"""The tic-tac-toe game loop and its command-line entry point."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from lldgames.board import Board
from lldgames.player import Player
from lldgames.states import GameContext
from lldgames.strategies import HumanPlayerStrategy, PlayerStrategy
from lldgames.symbol import Symbol


class BoardGame(ABC):
    """A game that can be played to its end."""

    @abstractmethod
    def play(self) -> None:
        """Run the game until it is over."""


class TicTacToeGame(BoardGame):
    """Two players take turns on a board until one wins or it fills up."""

    def __init__(
        self,
        x_strategy: PlayerStrategy,
        o_strategy: PlayerStrategy,
        rows: int,
        columns: int,
        out: TextIO | None = None,
    ) -> None:
        self.board = Board(rows, columns)
        self.player_x = Player(Symbol.X, x_strategy)
        self.player_o = Player(Symbol.O, o_strategy)
        self.current_player = self.player_x
        self.context = GameContext()
        self._out = out

    def play(self) -> None:
        while True:
            self.board.print_board(self._out)
            move = self.current_player.strategy.make_move(self.board)
            self.board.make_move(move, self.current_player.symbol)
            self.board.check_game_state(self.context, self.current_player)
            self._switch_player()
            if self.context.game_over:
                break
        self._announce_result()

    def _switch_player(self) -> None:
        self.current_player = self.player_o if self.current_player is self.player_x else self.player_x

    def _announce_result(self) -> None:
        self.board.print_board(self._out)
        self.context.current_state.handle(self.current_player)


def main(argv: list[str] | None = None) -> int:
    """Play a two-person game of tic-tac-toe on a 3 by 3 board."""
    game = TicTacToeGame(
        HumanPlayerStrategy("Player X"),
        HumanPlayerStrategy("Player O"),
        3,
        3,
    )
    game.play()
    return 0


if __name__ == "__main__":
    sys.exit(main())