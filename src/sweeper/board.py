"""
Board module for the Minesweeper board engine.

Holds the grid of cells and the operations that act on it: mine placement,
neighbor counting and the flood-fill reveal.
"""
import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


DEFAULT_CONFIG = BoardConfig(9, 9, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Fixed-size grid of cells.

    The board itself knows nothing about turns or game state; that lives in
    the engine, which copies the board before every action.
    """

    config: BoardConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build an empty grid unless one was supplied."""
        if not self.grid:
            self.grid = [
                [Cell() for _ in range(self.config.width)]
                for _ in range(self.config.height)
            ]

    def copy(self) -> "Board":
        """Return a copy whose cells can be mutated independently."""
        return Board(
            config=self.config,
            grid=[[replace(cell) for cell in row] for row in self.grid],
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighboring positions, diagonals included.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples. Edges do not wrap around.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Accessors
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, cells in enumerate(self.grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def mine_positions(self) -> List[Tuple[int, int]]:
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    def count_unrevealed_safe(self) -> int:
        """Count non-mine cells still waiting to be revealed."""
        return sum(
            1 for _, _, cell in self.cells()
            if not cell.is_mine and not cell.is_revealed
        )

    def reveal_mines(self) -> None:
        """Uncover every mine, flagged or not."""
        for _, _, cell in self.cells():
            if cell.is_mine:
                cell.is_revealed = True


# ============================================================================
# Board Operations
# ============================================================================

def place_mines(
    board: Board,
    exclude_row: int,
    exclude_col: int,
    rng: Optional[random.Random] = None,
) -> None:
    """
    Scatter the configured number of mines, never on the excluded cell.

    Uses rejection sampling: random positions are drawn until enough
    distinct, non-excluded cells hold a mine. Neighbors of the excluded
    cell are fair game.

    Args:
        board: Board to mutate.
        exclude_row: Row of the cell to keep mine-free.
        exclude_col: Column of the cell to keep mine-free.
        rng: Random source; the module-level generator when omitted.
    """
    rng = rng or random
    config = board.config
    placed = 0
    while placed < config.num_mines:
        row = rng.randrange(config.height)
        col = rng.randrange(config.width)
        if (row, col) == (exclude_row, exclude_col):
            continue
        cell = board.grid[row][col]
        if cell.is_mine:
            continue
        cell.is_mine = True
        placed += 1


def compute_neighbor_counts(board: Board) -> None:
    """Set neighbor_mines on every non-mine cell."""
    for row, col, cell in board.cells():
        if cell.is_mine:
            continue
        cell.neighbor_mines = sum(
            1 for neighbor_row, neighbor_col in board.get_neighbors(row, col)
            if board.grid[neighbor_row][neighbor_col].is_mine
        )


def flood_fill(board: Board, row: int, col: int) -> int:
    """
    Reveal a cell and, through zero-count cells, its connected region.

    Flagged and already revealed cells stop the fill. Cells with a
    non-zero count are revealed but not expanded.

    Returns:
        Number of cells revealed.
    """
    revealed = 0
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        cell = board.get_cell(current_row, current_col)
        if cell is None or not cell.reveal():
            continue
        revealed += 1
        if cell.neighbor_mines == 0:
            stack.extend(board.get_neighbors(current_row, current_col))
    return revealed
