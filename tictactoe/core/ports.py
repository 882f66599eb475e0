"""Port interfaces for the Tic-Tac-Toe game.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - GameRepositoryPort: Own and mutate the live board

2. **Driving Ports** (adapters call into core)
   - GameServicePort: Rule-checked game operations used by the
     controller and console presentation
"""

from abc import ABC, abstractmethod

from .models import Board, Mark


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class GameRepositoryPort(ABC):
    """Port for storing the single live game board.

    Implementations own exactly one Board for their lifetime. They do
    not validate moves; the game service is the only validation gate.
    """

    @abstractmethod
    def save_move(self, row: int, col: int, player: Mark) -> None:
        """Write `player` into cell (row, col) unconditionally.

        Args:
            row: 0-based row index. Caller guarantees it is in range.
            col: 0-based column index. Caller guarantees it is in range.
            player: Mark to store. Caller guarantees the cell was empty.
        """

    @abstractmethod
    def get_board(self) -> Board:
        """Return a snapshot of the current board.

        Returns:
            A Board that can be inspected or modified without affecting
            the stored board.
        """

    @abstractmethod
    def reset_board(self) -> None:
        """Replace the stored board with a fresh empty one."""


# ============================================================================
# DRIVING PORTS (Adapters call into core)
# ============================================================================


class GameServicePort(ABC):
    """Port for playing a game.

    Used by the CLI controller. All rule checks happen behind this port.
    """

    @abstractmethod
    def make_move(self, row: int, col: int, player: Mark) -> bool:
        """Attempt to place `player` at (row, col).

        Args:
            row: 0-based row index.
            col: 0-based column index.
            player: Mark of the player moving.

        Returns:
            True if the move was applied. False if the indices are out of
            range or the cell is occupied; the board is left unchanged.
        """

    @abstractmethod
    def check_winner(self, player: Mark) -> bool:
        """Return True if `player` holds a complete line."""

    @abstractmethod
    def is_board_full(self) -> bool:
        """Return True if no empty cell remains."""

    @abstractmethod
    def reset_game(self) -> None:
        """Start over with an empty board."""

    @abstractmethod
    def get_board(self) -> Board:
        """Return a snapshot of the current board."""
