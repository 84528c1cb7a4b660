"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import (
    Board,
    BoardConfig,
    Cell,
    Game,
    compute_neighbor_counts,
    initialize,
)


GameFactory = Callable[..., Game]


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def fresh_game() -> Game:
    """Create a default 9x9 game with 10 mines, nothing placed yet."""
    return initialize()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for mine placement."""
    return random.Random(1234)


@pytest.fixture
def make_game() -> GameFactory:
    """
    Build a game whose mines are already placed at known positions.

    The mine count of the config is taken from the number of positions,
    so flags_remaining starts there too.
    """
    def factory(
        mines: Iterable[Tuple[int, int]],
        width: int = 9,
        height: int = 9,
        flags_remaining: Optional[int] = None,
    ) -> Game:
        mines = list(mines)
        board = Board(BoardConfig(width, height, len(mines)))
        for row, col in mines:
            board.grid[row][col].is_mine = True
        compute_neighbor_counts(board)
        if flags_remaining is None:
            flags_remaining = len(mines)
        return Game(
            board=board,
            flags_remaining=flags_remaining,
            first_move_taken=True,
        )

    return factory


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
