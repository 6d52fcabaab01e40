from __future__ import annotations
from typing import List, Optional

from connectfour.core.rules import winning_line
from connectfour.game.state import GameState
from connectfour.types import Coord, Status


def outcome_message(state: GameState) -> str:
    if state.status is Status.WON and state.winner is not None:
        return f"The {state.winner.label} player won"
    if state.status is Status.DRAW:
        return "It's a draw!"
    return ""


def final_line(state: GameState) -> Optional[List[Coord]]:
    """Cells of the winning run, or None when nobody has won."""
    if state.status is not Status.WON or state.last_move is None:
        return None
    m = state.last_move
    return winning_line(state.board, m.player, m.row, m.col)
