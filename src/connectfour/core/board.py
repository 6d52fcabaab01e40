# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connectfour.config import ROWS, COLS
from connectfour.errors import ContractViolation
from connectfour.types import Cell, Player


@dataclass(slots=True)
class Board:
    # Size always comes from config; it is not a constructor argument.
    rows: int = field(default=ROWS, init=False)
    cols: int = field(default=COLS, init=False)
    grid: List[List[Cell]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        # Negative indices would silently wrap on a list, so check explicitly.
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid.")
        return self.grid[row][col]

    def is_column_playable(self, col: int) -> bool:
        return 0 <= col < self.cols and self.grid[0][col] is None

    def playable_columns(self) -> List[int]:
        return [c for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def drop(self, player: Player, col: int) -> int:
        """
        Let a piece fall down column ``col`` and return the row it lands on.

        The caller must check ``is_column_playable`` first; dropping into a
        full or missing column is a bug, not a recoverable condition.
        """
        if not self.is_column_playable(col):
            raise ContractViolation(f"Column {col} is not playable.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                self.grid[r][col] = player
                return r

        raise ContractViolation(f"Column {col} is not playable.")  # unreachable with gravity intact
