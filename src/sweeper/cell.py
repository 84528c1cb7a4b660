"""
Cell module for the Minesweeper board engine.

A cell carries its content (mine or neighbor count) and two player-facing
marks: revealed and flagged.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player currently sees on a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player has put a flag on it.
        neighbor_mines: Count of mines in neighboring cells (0-8).

    A flagged cell cannot be revealed by the player. When a game is lost,
    every mine is uncovered, so a flagged mine ends up both revealed and
    flagged; the flag still wins for display purposes.
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    def reveal(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell was uncovered, False if it was already
            revealed or is flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Put or remove a flag.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def state(self) -> CellState:
        """Visible state, with flags taking precedence."""
        if self.is_flagged:
            return CellState.FLAGGED
        if self.is_revealed:
            return CellState.REVEALED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return self.state == CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        state = self.state
        if state == CellState.HIDDEN:
            return -1
        if state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_mines
