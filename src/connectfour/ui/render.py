from __future__ import annotations
import sys
from typing import Iterable, Optional, Set, TextIO

from connectfour.config import CLEAR_SCREEN, USE_COLOR
from connectfour.core.board import Board
from connectfour.types import Cell, Coord, Player
from connectfour.ui.colors import BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, RESET, REVERSE, c


class ConsoleRenderer:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_color: bool = USE_COLOR,
        clear: bool = CLEAR_SCREEN,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color
        self.clear = clear

    def _print(self, s: str = "") -> None:
        print(s, file=self.stream)

    def _piece(self, cell: Cell) -> str:
        if cell is None:
            return " "
        code = FG_RED if cell is Player.A else FG_YELLOW
        return c(cell.marker, code, self.use_color)

    def clear_screen(self) -> None:
        if self.clear:
            print("\033[2J\033[H", end="", file=self.stream)

    def render(self, board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
        self.clear_screen()

        hl: Set[Coord] = set(highlight) if highlight else set()

        self._print(c("CONNECT 4", BOLD, self.use_color))
        if status:
            self._print(c(status, FG_CYAN, self.use_color))

        header = "".join(f"  {i} " for i in range(board.cols))
        self._print(c(header, DIM, self.use_color))

        for r in range(board.rows):
            parts = []
            for col in range(board.cols):
                p = self._piece(board.cell_at(r, col))
                if (r, col) in hl:
                    p = f" {REVERSE}{p}{RESET} " if self.use_color else f"[{p}]"
                else:
                    p = f" {p} "
                parts.append(p)
            self._print("|" + "|".join(parts) + "|")

        self._print("----" * board.cols + "-")


class NullRenderer:
    def render(self, board: Board) -> None:
        return None
