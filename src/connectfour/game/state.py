from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from connectfour.core.board import Board
from connectfour.types import Move, Player, Status


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player = Player.A
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    last_move: Optional[Move] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS
