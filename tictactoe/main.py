"""Composition root for the Tic-Tac-Toe game.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Logging setup
- Adapter instantiation
- Core service initialization
- Dependency injection
- Game start
"""

import json
import logging
import sys

from pydantic import ValidationError

from tictactoe.adapters.cli.controller import GameController
from tictactoe.adapters.cli.presentation import GamePresentation
from tictactoe.adapters.store.memory import InMemoryGameRepository
from tictactoe.config import Settings, load_settings
from tictactoe.core.game_service import GameService
from tictactoe.core.models import GameOutcome, Mark


class JsonLogFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so they never interleave with the board on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )


def build_presentation(settings: Settings) -> GamePresentation:
    """Wire repository, service, controller and presentation.

    Args:
        settings: Loaded application settings.

    Returns:
        A GamePresentation ready to start a game.
    """
    repository = InMemoryGameRepository()
    service = GameService(repository)
    controller = GameController(service)
    return GamePresentation(
        controller,
        first_player=Mark.from_symbol(settings.first_player),
        coordinate_base=settings.coordinate_base,
    )


def bootstrap() -> GameOutcome:
    """Load configuration, wire components, and play one game.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Wire repository, service, controller, presentation
    4. Run the turn loop until a win or draw

    Returns:
        The outcome of the finished game.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Starting Tic-Tac-Toe...")

    presentation = build_presentation(settings)
    logger.info(
        f"Wired console game (first player {settings.first_player}, "
        f"coordinate base {settings.coordinate_base})"
    )

    return presentation.start_game()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Game finished with a win or a draw
        1: Configuration error, input closed mid-game, or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except EOFError:
        logger.error("Input closed before the game finished")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Game interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
