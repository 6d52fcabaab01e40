from __future__ import annotations
from typing import Iterable, List

import pytest

from connectfour.core.board import Board
from connectfour.types import Player

# 42 alternating moves that fill the grid without a line of four:
# columns are played in pairs so each ends up as two stacks of three.
DRAW_MOVES: List[int] = (
    [0, 1] * 3 + [1, 0] * 3
    + [2, 3] * 3 + [3, 2] * 3
    + [4, 5] * 3 + [5, 4] * 3
    + [6] * 6
)

# 42 moves where only the very last drop (B at the top of column 5)
# completes a line: a vertical four in column 5.
LAST_CELL_WIN_MOVES: List[int] = DRAW_MOVES[:24] + [
    6, 6, 4, 5, 5, 5, 4, 4, 4,
    5, 6, 6, 4, 5, 6, 6, 4, 5,
]


def drop_all(board: Board, player: Player, cols: Iterable[int]) -> List[int]:
    return [board.drop(player, c) for c in cols]


class RecordingRenderer:
    def __init__(self) -> None:
        self.snapshots: List[List[List[object]]] = []

    def render(self, board: Board) -> None:
        self.snapshots.append([row[:] for row in board.grid])


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
