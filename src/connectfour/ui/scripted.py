from __future__ import annotations
import logging
from typing import Iterable, Iterator, List

from connectfour.core.board import Board
from connectfour.errors import ScriptExhausted
from connectfour.types import Player

log = logging.getLogger(__name__)


class ScriptedInput:
    """
    Replays a fixed list of columns, one per turn, for both players.

    Columns that are not playable when their turn comes are skipped, the same
    way a person would be asked again.
    """

    def __init__(self, columns: Iterable[int]) -> None:
        self._columns: Iterator[int] = iter(list(columns))
        self.skipped: List[int] = []

    def request_column(self, player: Player, board: Board) -> int:
        for col in self._columns:
            if board.is_column_playable(col):
                return col
            log.debug("Skipping unplayable scripted column %d for player %s", col, player.marker)
            self.skipped.append(col)
        raise ScriptExhausted(f"No scripted moves left for player {player.marker}.")


def parse_script(text: str) -> List[int]:
    """Turn "3,3, 4" into [3, 3, 4]. Raises ValueError on anything else, e.g. "3 4"."""
    return [int(part.strip()) for part in text.split(",") if part.strip()]
