from __future__ import annotations
from typing import Protocol

from connectfour.core.board import Board
from connectfour.types import Player


class InputSource(Protocol):
    def request_column(self, player: Player, board: Board) -> int:
        """Return a column for which ``board.is_column_playable`` holds."""
        ...


class Renderer(Protocol):
    def render(self, board: Board) -> None:
        ...
