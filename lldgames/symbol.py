"""Marks that can occupy a tic-tac-toe cell."""

from enum import Enum


class Symbol(Enum):
    """A cell's content: a player's mark or nothing."""

    X = "X"
    O = "O"
    EMPTY = "EMPTY"

    def __str__(self) -> str:
        return symbol_to_string(self)


_CHARS = {
    Symbol.X: "X",
    Symbol.O: "O",
    Symbol.EMPTY: ".",
}


def symbol_to_string(symbol: Symbol) -> str:
    """Return the name of a symbol: "X", "O" or "EMPTY"."""
    return symbol.value


def symbol_to_char(symbol: Symbol) -> str:
    """Return the single character used to draw a symbol on the board."""
    return _CHARS[symbol]