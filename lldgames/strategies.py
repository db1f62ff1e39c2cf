"""Ways for a player to choose a move."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, TextIO

from lldgames.position import Position

if TYPE_CHECKING:
    from lldgames.board import Board


class PlayerStrategy(ABC):
    """Chooses the next move for a player."""

    @abstractmethod
    def make_move(self, board: Board) -> Position:
        """Return a valid position to play on ``board``."""


class HumanPlayerStrategy(PlayerStrategy):
    """Asks a person for a row and a column until they give a valid move."""

    def __init__(
        self,
        player_name: str,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.player_name = player_name
        self._stdin = stdin
        self._stdout = stdout
        self._pending: deque[str] = deque()

    @property
    def _input(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _output(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _next_token(self) -> str:
        while not self._pending:
            line = self._input.readline()
            if not line:
                raise EOFError("input ended before a move was entered")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def make_move(self, board: Board) -> Position:
        out = self._output
        while True:
            out.write(f"{self.player_name}, enter your move (row [0-2] and column [0-2]): ")
            out.flush()
            try:
                row = int(self._next_token())
                col = int(self._next_token())
            except ValueError:
                print("Invalid input. Please enter row and column as numbers.", file=out)
                self._pending.clear()
                continue
            move = Position(row, col)
            if board.is_valid_move(move):
                return move
            print("Invalid move. Try again.", file=out)