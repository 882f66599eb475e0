"""Domain models for the Tic-Tac-Toe game.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Literal, TextIO, TypeAlias


class Mark(Enum):
    """Contents of a single board cell."""

    EMPTY = " "
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        """Return the other player's mark."""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opponent")

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """Parse a player symbol ("X" or "O", case-insensitive)."""
        normalized = symbol.strip().upper()
        if normalized not in {cls.X.value, cls.O.value}:
            raise ValueError(f"Unknown player symbol: {symbol!r}")
        return cls(normalized)


def _empty_grid() -> list[list[Mark]]:
    return [[Mark.EMPTY for _ in range(Board.SIZE)] for _ in range(Board.SIZE)]


@dataclass
class Board:
    """A fixed 3x3 Tic-Tac-Toe grid.

    The grid shape is validated on creation and never changes afterwards.
    Cells are mutated one at a time through place().

    Note: This dataclass is intentionally mutable so the repository can
    apply moves in place. Callers outside the repository only ever see
    snapshots produced by copy().
    """

    SIZE: ClassVar[int] = 3

    # Rows, columns, then the two diagonals
    WINNING_LINES: ClassVar[tuple[tuple[tuple[int, int], ...], ...]] = (
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    )

    grid: list[list[Mark]] = field(default_factory=_empty_grid)

    def __post_init__(self) -> None:
        """Validate board dimensions and cell types on creation."""
        if len(self.grid) != self.SIZE:
            raise ValueError(
                f"Board must have {self.SIZE} rows, got {len(self.grid)}"
            )
        for row in self.grid:
            if len(row) != self.SIZE:
                raise ValueError(
                    f"Board rows must have {self.SIZE} cells, got {len(row)}"
                )
            for cell in row:
                if not isinstance(cell, Mark):
                    raise ValueError(f"Board cells must be Mark, got {cell!r}")

    @classmethod
    def from_rows(cls, *rows: str) -> "Board":
        """Build a board from row strings such as "XO ", "   ", "X  ".

        Used by the test suite to seed positions; the game itself always
        starts from Board().
        """
        return cls(grid=[[Mark(symbol) for symbol in row] for row in rows])

    def is_in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) addresses a cell on this board."""
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def cell(self, row: int, col: int) -> Mark:
        """Read a single cell."""
        if not self.is_in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the board")
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        """Check whether (row, col) holds no mark."""
        return self.cell(row, col) is Mark.EMPTY

    def place(self, row: int, col: int, mark: Mark) -> None:
        """Write a mark into exactly one cell.

        No rule checking happens here; occupancy and turn order are
        enforced by the game service.
        """
        if not self.is_in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the board")
        self.grid[row][col] = mark

    def copy(self) -> "Board":
        """Return an independent snapshot of this board."""
        return Board(grid=[list(row) for row in self.grid])

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return all(cell is not Mark.EMPTY for row in self.grid for cell in row)

    def is_winner(self, player: Mark) -> bool:
        """True when any row, column or diagonal is entirely `player`."""
        if player is Mark.EMPTY:
            return False
        return any(
            all(self.grid[row][col] is player for row, col in line)
            for line in self.WINNING_LINES
        )

    def render(self) -> str:
        """Render the grid as rows of c|c|c separated by dashes."""
        separator = "\n" + "-" * (self.SIZE * 2 - 1) + "\n"
        return separator.join(
            "|".join(cell.value for cell in row) for row in self.grid
        )

    def display(self, stream: TextIO | None = None) -> None:
        """Write the rendered grid to `stream` (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.render() + "\n")


class TurnState(Enum):
    """States of the console turn loop."""

    AWAIT_MOVE = "await_move"
    CHECK_END = "check_end"
    SWITCH_TURN = "switch_turn"
    GAME_OVER = "game_over"


OutcomeKind: TypeAlias = Literal["win", "draw"]


@dataclass(frozen=True)
class GameOutcome:
    """How a finished game ended.

    Derived from the board when the loop stops; never stored on the board.
    """

    kind: OutcomeKind
    winner: Mark | None = None

    def __post_init__(self) -> None:
        """Validate outcome invariants on creation."""
        if self.kind == "win" and self.winner in {None, Mark.EMPTY}:
            raise ValueError("A win outcome needs a player mark as winner")
        if self.kind == "draw" and self.winner is not None:
            raise ValueError("A draw outcome cannot have a winner")

    @property
    def message(self) -> str:
        """Announcement printed at the end of the game."""
        if self.kind == "win":
            assert self.winner is not None
            return f"Player {self.winner.value} wins!"
        return "It's a draw!"
