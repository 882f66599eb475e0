"""CLI controller for the Tic-Tac-Toe game.

Thin seam between the console presentation and GameServicePort. Every
call is forwarded unchanged; rules live in the core service.
"""

from tictactoe.core.models import Board, Mark
from tictactoe.core.ports import GameServicePort


class GameController:
    """Forwards console actions to a GameServicePort."""

    def __init__(self, service: GameServicePort):
        """Initialize the controller.

        Args:
            service: GameServicePort implementation to delegate to.
        """
        self.service = service

    def make_move(self, row: int, col: int, player: Mark) -> bool:
        return self.service.make_move(row, col, player)

    def check_winner(self, player: Mark) -> bool:
        return self.service.check_winner(player)

    def is_board_full(self) -> bool:
        return self.service.is_board_full()

    def reset_game(self) -> None:
        self.service.reset_game()

    def get_board(self) -> Board:
        return self.service.get_board()
