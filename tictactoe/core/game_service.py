"""Game service: implements GameServicePort on top of a repository.

This is the core service that enforces the rules of play. It is the
single place where moves are validated before they reach storage.
"""

import logging

from .models import Board, Mark
from .ports import GameRepositoryPort, GameServicePort

logger = logging.getLogger(__name__)


class GameService(GameServicePort):
    """Core implementation of GameServicePort.

    Holds no board state of its own; every query goes through the
    repository.
    """

    def __init__(self, repository: GameRepositoryPort):
        """Initialize the game service.

        Args:
            repository: GameRepositoryPort implementation owning the board.
        """
        self.repository = repository

    def make_move(self, row: int, col: int, player: Mark) -> bool:
        """Validate and apply a move.

        Args:
            row: 0-based row index.
            col: 0-based column index.
            player: Mark of the player moving.

        Returns:
            True if the move was stored, False if it was rejected.
        """
        if player is Mark.EMPTY:
            logger.debug(f"Rejected move at ({row}, {col}): no player mark")
            return False

        board = self.repository.get_board()
        if not board.is_in_bounds(row, col):
            logger.debug(
                f"Rejected move by {player.value} at ({row}, {col}): out of range",
                extra={"player": player.value, "row": row, "col": col},
            )
            return False

        if not board.is_empty(row, col):
            logger.debug(
                f"Rejected move by {player.value} at ({row}, {col}): cell occupied",
                extra={
                    "player": player.value,
                    "row": row,
                    "col": col,
                    "occupant": board.cell(row, col).value,
                },
            )
            return False

        self.repository.save_move(row, col, player)
        logger.debug(
            f"Player {player.value} moved to ({row}, {col})",
            extra={"player": player.value, "row": row, "col": col},
        )
        return True

    def check_winner(self, player: Mark) -> bool:
        """Return True if `player` has three in a row."""
        return self.repository.get_board().is_winner(player)

    def is_board_full(self) -> bool:
        """Return True if every cell is occupied."""
        return self.repository.get_board().is_full()

    def reset_game(self) -> None:
        """Clear the board for a new game."""
        self.repository.reset_board()
        logger.info("Game reset")

    def get_board(self) -> Board:
        """Return a snapshot of the current board."""
        return self.repository.get_board()
