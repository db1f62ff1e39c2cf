"""The tic-tac-toe grid and the rules for reading a result from it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from lldgames.position import Position
from lldgames.symbol import Symbol

if TYPE_CHECKING:
    from lldgames.player import Player
    from lldgames.states import GameContext

_CELLS = {
    Symbol.X: " X ",
    Symbol.O: " O ",
    Symbol.EMPTY: " . ",
}

_ROW_SEPARATOR = "---+---+---"


class Board:
    """A grid of ``rows`` by ``columns`` cells, all empty at the start."""

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns
        self._grid = [[Symbol.EMPTY] * columns for _ in range(rows)]

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def is_valid_move(self, pos: Position) -> bool:
        """Whether ``pos`` lies on the board and its cell is empty."""
        return self._in_bounds(pos.row, pos.col) and self._grid[pos.row][pos.col] is Symbol.EMPTY

    def make_move(self, pos: Position, symbol: Symbol) -> None:
        """Put ``symbol`` at ``pos``."""
        if not self._in_bounds(pos.row, pos.col):
            raise IndexError(f"position ({pos.row}, {pos.col}) is off the board")
        self._grid[pos.row][pos.col] = symbol

    def symbol_at(self, row: int, col: int) -> Symbol:
        """Return the symbol in the given cell."""
        if not self._in_bounds(row, col):
            raise IndexError(f"position ({row}, {col}) is off the board")
        return self._grid[row][col]

    def is_full(self) -> bool:
        """Whether no empty cell is left."""
        return all(cell is not Symbol.EMPTY for row in self._grid for cell in row)

    def _lines(self):
        yield from (list(row) for row in self._grid)
        yield from (list(column) for column in zip(*self._grid))
        size = min(self.rows, self.columns)
        yield [self._grid[i][i] for i in range(size)]
        yield [self._grid[i][self.columns - 1 - i] for i in range(size)]

    @staticmethod
    def _is_winning_line(line: Sequence[Symbol]) -> bool:
        return bool(line) and line[0] is not Symbol.EMPTY and all(s is line[0] for s in line)

    def check_game_state(self, context: GameContext, current_player: Player) -> None:
        """Move ``context`` on if ``current_player`` has won or the board is full."""
        if any(self._is_winning_line(line) for line in self._lines()):
            context.next(current_player, True)
        elif self.is_full():
            context.next(current_player, False)

    def render(self) -> str:
        """Return the board drawn as text, ending with a blank line."""
        rows = ["|".join(_CELLS[cell] for cell in row) + "\n" for row in self._grid]
        return (_ROW_SEPARATOR + "\n").join(rows) + "\n"

    def print_board(self, out: TextIO | None = None) -> None:
        """Write the drawn board to ``out``, standard output by default."""
        stream = out if out is not None else sys.stdout
        stream.write(self.render())
        stream.flush()