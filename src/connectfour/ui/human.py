from __future__ import annotations
import logging
from typing import Callable, Optional

from connectfour.core.board import Board
from connectfour.errors import InvalidColumn
from connectfour.types import Player
from connectfour.ui.prompts import column_prompt, parse_column

log = logging.getLogger(__name__)


class ConsoleInput:
    """Asks a person at the keyboard for a column until they give a playable one."""

    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._read = read if read is not None else input
        self._write = write if write is not None else print

    def request_column(self, player: Player, board: Board) -> int:
        while True:
            raw = self._read(column_prompt(player, board.cols))
            try:
                return parse_column(raw, board)
            except InvalidColumn as e:
                log.debug("Rejected input %r from player %s: %s", raw, player.marker, e)
                self._write(str(e))
