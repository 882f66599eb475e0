"""In-memory game repository adapter.

Implements GameRepositoryPort by keeping the single live board in
process memory. Nothing survives the process.
"""

import logging

from tictactoe.core.models import Board, Mark
from tictactoe.core.ports import GameRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryGameRepository(GameRepositoryPort):
    """Owns the one Board instance for the lifetime of the process."""

    def __init__(self) -> None:
        """Initialize with an empty board."""
        self._board = Board()

    def save_move(self, row: int, col: int, player: Mark) -> None:
        """Store `player` at (row, col) without checking rules."""
        self._board.place(row, col, player)

    def get_board(self) -> Board:
        """Return a copy so callers cannot mutate the stored board."""
        return self._board.copy()

    def reset_board(self) -> None:
        """Swap in a freshly constructed empty board."""
        self._board = Board()
        logger.debug("Board reset to empty")
