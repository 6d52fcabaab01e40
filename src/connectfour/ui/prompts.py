from __future__ import annotations

from connectfour.core.board import Board
from connectfour.errors import InvalidColumn, QuitGame
from connectfour.types import Player

QUIT_WORDS = {"q", "quit", "exit"}


def column_prompt(player: Player, cols: int) -> str:
    return f"Drop a {player.label} disk at column (0-{cols - 1}): "


def parse_column(raw: str, board: Board) -> int:
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        raise QuitGame("Game quit.")
    try:
        col = int(s)
    except ValueError:
        raise InvalidColumn("Invalid input. Try again.") from None
    if not board.is_column_playable(col):
        raise InvalidColumn("Invalid column. Try again.")
    return col
