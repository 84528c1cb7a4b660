"""
Game engine for Minesweeper.

A game is an immutable snapshot. ``initialize``, ``reveal`` and
``toggle_flag`` take a snapshot and return the next one; the board inside
is copied before any change, so earlier snapshots stay valid. Actions that
are not allowed return the very same snapshot.
"""
import random
from dataclasses import dataclass, replace
from typing import Optional

from .board import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    GameState,
    compute_neighbor_counts,
    flood_fill,
    place_mines,
)


# ============================================================================
# Game Snapshot
# ============================================================================

@dataclass(frozen=True)
class Game:
    """
    State of one game after some number of actions.

    Attributes:
        board: Grid of cells. Treat as read-only.
        state: Playing, won or lost.
        flags_remaining: Mines minus flags placed. Can go negative.
            Defaults to the board's mine count.
        first_move_taken: Whether mines have been placed yet.
    """

    board: Board
    state: GameState = GameState.PLAYING
    flags_remaining: Optional[int] = None
    first_move_taken: bool = False

    def __post_init__(self) -> None:
        if self.flags_remaining is None:
            object.__setattr__(
                self, "flags_remaining", self.board.config.num_mines
            )

    @property
    def config(self) -> BoardConfig:
        return self.board.config

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.state == GameState.LOST


# ============================================================================
# Game Actions
# ============================================================================

def initialize(config: Optional[BoardConfig] = None) -> Game:
    """Start a new game on an empty board."""
    return Game(board=Board(config or DEFAULT_CONFIG))


def reveal(
    game: Game,
    row: int,
    col: int,
    rng: Optional[random.Random] = None,
) -> Game:
    """
    Reveal the cell at (row, col).

    The first reveal of a game places the mines, keeping this cell clear.
    Hitting a mine uncovers all mines and loses the game. Anything else
    flood-fills from the cell and wins once no safe cell is left hidden.

    Args:
        game: Current snapshot.
        row: Row index to reveal.
        col: Column index to reveal.
        rng: Random source used for mine placement on the first move.

    Returns:
        The next snapshot, or ``game`` itself if the reveal is not allowed.
    """
    if not _can_reveal(game, row, col):
        return game

    board = game.board.copy()
    if not game.first_move_taken:
        place_mines(board, row, col, rng)
        compute_neighbor_counts(board)

    if board.grid[row][col].is_mine:
        board.reveal_mines()
        return replace(
            game, board=board, state=GameState.LOST, first_move_taken=True
        )

    flood_fill(board, row, col)
    state = GameState.PLAYING
    if board.count_unrevealed_safe() == 0:
        state = GameState.WON
    return replace(game, board=board, state=state, first_move_taken=True)


def _can_reveal(game: Game, row: int, col: int) -> bool:
    """Check if a cell can be revealed."""
    if not game.is_playing:
        return False
    cell = game.board.get_cell(row, col)
    if cell is None:
        return False
    return not cell.is_revealed and not cell.is_flagged


def toggle_flag(game: Game, row: int, col: int) -> Game:
    """
    Put or remove a flag on an unrevealed cell.

    The number of flags is not capped, so flags_remaining may drop below
    zero.

    Returns:
        The next snapshot, or ``game`` itself if the toggle is not allowed.
    """
    if not game.is_playing:
        return game
    cell = game.board.get_cell(row, col)
    if cell is None or cell.is_revealed:
        return game

    board = game.board.copy()
    flagged = board.grid[row][col]
    flagged.toggle_flag()
    delta = -1 if flagged.is_flagged else 1
    return replace(
        game, board=board, flags_remaining=game.flags_remaining + delta
    )
