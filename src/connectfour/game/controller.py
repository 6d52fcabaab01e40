from __future__ import annotations
import logging

from connectfour.core.board import Board
from connectfour.core.rules import is_winning_move
from connectfour.errors import ContractViolation
from connectfour.game.base import InputSource, Renderer
from connectfour.game.state import GameState
from connectfour.types import Move, Player, Status

log = logging.getLogger(__name__)


class GameLoop:
    """
    Turn state machine for one game.

    Owns the board for the whole game. Each ``step`` asks the input source for
    a column, drops the current player's piece, renders, then decides between
    a win, a draw, or handing the turn to the other player.
    """

    def __init__(self, input_source: InputSource, renderer: Renderer) -> None:
        self.input_source = input_source
        self.renderer = renderer
        self.state = GameState(board=Board())

    @property
    def board(self) -> Board:
        return self.state.board

    def step(self) -> Move:
        state = self.state
        if state.is_over:
            raise ContractViolation(f"Game is already over ({state.status.value}).")

        player: Player = state.current
        col = self.input_source.request_column(player, state.board)
        row = state.board.drop(player, col)
        move = Move(player=player, col=col, row=row)
        state.last_move = move
        log.debug("Player %s dropped at col=%d row=%d", player.marker, col, row)

        self.renderer.render(state.board)

        if is_winning_move(state.board, player, row, col):
            state.status = Status.WON
            state.winner = player
            log.info("Player %s won with col=%d row=%d", player.marker, col, row)
        elif state.board.is_full():
            state.status = Status.DRAW
            log.info("Board is full, game drawn")
        else:
            state.current = player.other()

        return move

    def run(self) -> GameState:
        self.renderer.render(self.state.board)
        while not self.state.is_over:
            self.step()
        return self.state
