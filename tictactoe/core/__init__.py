"""Core domain logic for the Tic-Tac-Toe game.

This package contains zero external dependencies and represents
the pure rules of the game. Console I/O and storage are handled by
the adapters package.
"""

from .models import (
    Board,
    GameOutcome,
    Mark,
    OutcomeKind,
    TurnState,
)

__all__ = [
    "Board",
    "GameOutcome",
    "Mark",
    "OutcomeKind",
    "TurnState",
]
