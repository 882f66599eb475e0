"""Console presentation for the Tic-Tac-Toe game.

Drives the turn loop: renders the board, prompts the current player,
retries on bad input and announces the outcome. All game operations go
through the GameController.
"""

import logging
from collections.abc import Callable
from typing import TextIO

from tictactoe.core.models import GameOutcome, Mark, TurnState

from .controller import GameController

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Tic-Tac-Toe!"
PROMPT_TEMPLATE = "Player {player}, enter your move (row and column, e.g., 1 2): "
INVALID_MOVE_MESSAGE = "Invalid move. Try again."


class GamePresentation:
    """Runs one console game from an empty board to a win or draw.

    States:
        AWAIT_MOVE -> CHECK_END -> (GAME_OVER | SWITCH_TURN -> AWAIT_MOVE)
    """

    def __init__(
        self,
        controller: GameController,
        first_player: Mark = Mark.X,
        coordinate_base: int = 0,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ):
        """Initialize the presentation.

        Args:
            controller: GameController used for every game operation.
            first_player: Mark that moves first.
            coordinate_base: Number subtracted from typed coordinates
                (0 for 0-based input, 1 for 1-based input).
            input_func: Prompt-and-read function. None means builtins.input
                at read time.
            output: Stream for game output. None means sys.stdout at
                write time.
        """
        if first_player is Mark.EMPTY:
            raise ValueError("first_player must be X or O")
        if coordinate_base not in (0, 1):
            raise ValueError(f"coordinate_base must be 0 or 1, got {coordinate_base}")

        self.controller = controller
        self.first_player = first_player
        self.coordinate_base = coordinate_base
        self.input_func = input_func
        self.output = output
        self.current_player = first_player
        self.state = TurnState.AWAIT_MOVE

    def start_game(self) -> GameOutcome:
        """Play a full game and return how it ended.

        Raises:
            EOFError: If input closes before the game is over.
        """
        self._write(WELCOME_MESSAGE)
        self.controller.reset_game()
        self.current_player = self.first_player
        self.state = TurnState.AWAIT_MOVE
        outcome: GameOutcome | None = None

        while self.state is not TurnState.GAME_OVER:
            if self.state is TurnState.AWAIT_MOVE:
                self.display_board()
                self._read_move()
                self.state = TurnState.CHECK_END

            elif self.state is TurnState.CHECK_END:
                outcome = self._check_end()
                if outcome is None:
                    self.state = TurnState.SWITCH_TURN
                else:
                    self.display_board()
                    self.state = TurnState.GAME_OVER

            elif self.state is TurnState.SWITCH_TURN:
                self.switch_player()
                self.state = TurnState.AWAIT_MOVE

        assert outcome is not None
        self._write(outcome.message)
        logger.info(
            f"Game over: {outcome.kind}",
            extra={"winner": outcome.winner.value if outcome.winner else None},
        )
        return outcome

    def display_board(self) -> None:
        """Print the current board with a blank line before and after."""
        self._write("")
        self.controller.get_board().display(self.output)
        self._write("")

    def switch_player(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opponent()

    def parse_move(self, line: str) -> tuple[int, int] | None:
        """Parse "row col" into 0-based indices.

        Returns:
            (row, col) shifted by the coordinate base, or None if the line
            is not exactly two integers.
        """
        parts = line.split()
        if len(parts) != 2:
            return None
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return None
        return row - self.coordinate_base, col - self.coordinate_base

    def _read_move(self) -> None:
        """Prompt until the controller accepts a move for the current player."""
        prompt = PROMPT_TEMPLATE.format(player=self.current_player.value)
        while True:
            read = self.input_func if self.input_func is not None else input
            line = read(prompt)
            move = self.parse_move(line)
            if move is not None and self.controller.make_move(
                move[0], move[1], self.current_player
            ):
                return

            logger.debug(f"Invalid input from player {self.current_player.value}: {line!r}")
            self._write(INVALID_MOVE_MESSAGE)

    def _check_end(self) -> GameOutcome | None:
        """Return the outcome if the last move ended the game."""
        if self.controller.check_winner(self.current_player):
            return GameOutcome(kind="win", winner=self.current_player)
        if self.controller.is_board_full():
            return GameOutcome(kind="draw")
        return None

    def _write(self, text: str) -> None:
        print(text, file=self.output)
