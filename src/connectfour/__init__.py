from __future__ import annotations

from connectfour.core.board import Board
from connectfour.core.rules import is_winning_move, winning_line
from connectfour.game.controller import GameLoop
from connectfour.game.state import GameState
from connectfour.types import Move, Player, Status

__all__ = [
    "Board",
    "GameLoop",
    "GameState",
    "Move",
    "Player",
    "Status",
    "is_winning_move",
    "winning_line",
]
