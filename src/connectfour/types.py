# src/connectfour/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Player(Enum):
    A = "R"
    B = "Y"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "red" if self is Player.A else "yellow"

    def other(self) -> "Player":
        return Player.B if self is Player.A else Player.A


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


Cell = Optional[Player]
Coord = Tuple[int, int]  # (row, col)


@dataclass(frozen=True, slots=True)
class Move:
    player: Player
    col: int
    row: int
