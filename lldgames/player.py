"""A participant in a game: a mark and the strategy that picks its moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lldgames.symbol import Symbol

if TYPE_CHECKING:
    from lldgames.strategies import PlayerStrategy


@dataclass(frozen=True)
class Player:
    """A player placing ``symbol`` with moves chosen by ``strategy``."""

    symbol: Symbol
    strategy: PlayerStrategy