"""Fake GameRepositoryPort implementation for testing."""

from tictactoe.core.models import Board, Mark
from tictactoe.core.ports import GameRepositoryPort


class FakeGameRepositoryPort(GameRepositoryPort):
    """In-memory board store for testing.

    Tracks every call so tests can assert how the service used storage.
    """

    def __init__(self, board: Board | None = None):
        """Initialize with an empty board, or the given one."""
        self.board = board if board is not None else Board()
        self.saved_moves: list[tuple[int, int, Mark]] = []
        self.get_board_call_count = 0
        self.reset_call_count = 0

    def save_move(self, row: int, col: int, player: Mark) -> None:
        """Store the move and record it for assertion."""
        self.board.place(row, col, player)
        self.saved_moves.append((row, col, player))

    def get_board(self) -> Board:
        """Return a snapshot of the stored board."""
        self.get_board_call_count += 1
        return self.board.copy()

    def reset_board(self) -> None:
        """Replace the board with an empty one."""
        self.board = Board()
        self.reset_call_count += 1

    def reset(self) -> None:
        """Reset all collected data."""
        self.board = Board()
        self.saved_moves.clear()
        self.get_board_call_count = 0
        self.reset_call_count = 0
