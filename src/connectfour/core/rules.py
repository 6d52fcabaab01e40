# src/connectfour/core/rules.py
"""
Win detection for the piece that was just dropped.

No position before the drop was a win, so any new line of four has to pass
through the placed piece. Checking the four axes through that one cell is
enough; there is no need to scan the whole board.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from connectfour.config import CONNECT_N
from connectfour.core.board import Board
from connectfour.types import Coord, Player

Step = Tuple[int, int]  # (d_row, d_col)

# Each axis lists the directions walked away from the placed piece.
# Vertical only walks down: nothing can sit above a piece that just landed.
AXES: Dict[str, Tuple[Step, ...]] = {
    "horizontal": ((0, -1), (0, 1)),
    "vertical": ((1, 0),),
    "diagonal_up": ((1, -1), (-1, 1)),  # "/" bottom-left to top-right
    "diagonal_down": ((-1, -1), (1, 1)),  # "\" top-left to bottom-right
}


def _walk(board: Board, player: Player, row: int, col: int, step: Step) -> List[Coord]:
    dr, dc = step
    out: List[Coord] = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cell_at(r, c) is player:
        out.append((r, c))
        r += dr
        c += dc
    return out


def _run(board: Board, player: Player, row: int, col: int, axis: str) -> List[Coord]:
    steps = AXES[axis]
    if len(steps) == 1:
        return [(row, col)] + _walk(board, player, row, col, steps[0])
    before = _walk(board, player, row, col, steps[0])
    after = _walk(board, player, row, col, steps[1])
    return before[::-1] + [(row, col)] + after


def run_length(board: Board, player: Player, row: int, col: int, axis: str) -> int:
    return len(_run(board, player, row, col, axis))


def winning_line(board: Board, player: Player, row: int, col: int) -> Optional[List[Coord]]:
    for axis in AXES:
        line = _run(board, player, row, col, axis)
        if len(line) >= CONNECT_N:
            return line
    return None


def is_winning_move(board: Board, player: Player, row: int, col: int) -> bool:
    return winning_line(board, player, row, col) is not None
