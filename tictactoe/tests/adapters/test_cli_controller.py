"""Tests for the CLI GameController.

The controller adds no behavior; every call must reach the service
unchanged and return the service's answer.
"""

import pytest

from tictactoe.adapters.cli.controller import GameController
from tictactoe.core.models import Board, Mark
from tictactoe.tests.fakes import FakeGameServicePort


@pytest.fixture
def service() -> FakeGameServicePort:
    return FakeGameServicePort()


@pytest.fixture
def controller(service: FakeGameServicePort) -> GameController:
    return GameController(service)


class TestGameControllerForwarding:
    """Test suite for controller pass-through."""

    @pytest.mark.parametrize("accepted", [True, False])
    def test_make_move_forwards(
        self, controller: GameController, service: FakeGameServicePort, accepted: bool
    ) -> None:
        service.accept_moves = accepted

        assert controller.make_move(2, 0, Mark.O) is accepted
        assert service.move_calls == [(2, 0, Mark.O)]

    def test_check_winner_forwards(
        self, controller: GameController, service: FakeGameServicePort
    ) -> None:
        service.winner = Mark.X

        assert controller.check_winner(Mark.X) is True
        assert controller.check_winner(Mark.O) is False
        assert service.check_winner_calls == [Mark.X, Mark.O]

    def test_is_board_full_forwards(
        self, controller: GameController, service: FakeGameServicePort
    ) -> None:
        service.board_full = True

        assert controller.is_board_full() is True
        assert service.is_board_full_call_count == 1

    def test_reset_game_forwards(
        self, controller: GameController, service: FakeGameServicePort
    ) -> None:
        controller.reset_game()
        assert service.reset_call_count == 1

    def test_get_board_forwards(
        self, controller: GameController, service: FakeGameServicePort
    ) -> None:
        service.board = Board.from_rows("X  ", " O ", "   ")

        assert controller.get_board() == service.board
        assert service.get_board_call_count == 1
