"""Piece colours and piece kinds for chess."""

from enum import Enum


class Color(Enum):
    """The side a piece belongs to."""

    WHITE = "White"
    BLACK = "Black"

    def opposite(self) -> "Color":
        """Return the other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.value


class PieceType(Enum):
    """The kind of a chess piece."""

    PAWN = "Pawn"
    ROOK = "Rook"
    KNIGHT = "Knight"
    BISHOP = "Bishop"
    QUEEN = "Queen"
    KING = "King"

    def symbol(self) -> str:
        """Return the one-letter symbol of the piece."""
        return _SYMBOLS[self]

    def value_points(self) -> int:
        """Return the material value of the piece; the king counts as 0."""
        return _VALUES[self]

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_VALUES = {
    PieceType.PAWN: 1,
    PieceType.ROOK: 5,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


def color_to_string(color: Color) -> str:
    """Return "White" or "Black"."""
    return color.value


def opposite(color: Color) -> Color:
    """Return the other side."""
    return color.opposite()


def piece_type_to_string(piece_type: PieceType) -> str:
    """Return the name of a piece kind, such as "Knight"."""
    return piece_type.value


def piece_symbol(piece_type: PieceType) -> str:
    """Return the one-letter symbol of a piece kind."""
    return piece_type.symbol()


def piece_value(piece_type: PieceType) -> int:
    """Return the material value of a piece kind."""
    return piece_type.value_points()