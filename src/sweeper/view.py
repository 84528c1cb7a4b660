"""
Read model consumed by renderers.

Turns game snapshots into what a front end draws: cell symbols, number
colors, the face, the end-of-game banner and a numeric observation grid.
"""
from typing import List, Optional

import numpy as np

from .board import Board, GameState
from .cell import Cell
from .engine import Game


# ============================================================================
# Constants
# ============================================================================

FLAG_GLYPH = "\U0001F6A9"
MINE_GLYPH = "\U0001F4A3"

NUMBER_COLORS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "purple",
    5: "yellow",
    6: "pink",
    7: "black",
    8: "gray",
}

FACES = {
    GameState.PLAYING: "\U0001F610",
    GameState.WON: "\U0001F60E",
    GameState.LOST: "\U0001F635",
}

BANNERS = {
    GameState.WON: "You Won! \U0001F389",
    GameState.LOST: "Game Over! \U0001F4A5",
}


# ============================================================================
# Cell-level Read Model
# ============================================================================

def cell_symbol(cell: Cell) -> str:
    """
    Symbol to draw on a cell.

    Flags win over everything, hidden cells and revealed zeros are blank,
    revealed mines show the mine glyph and other cells show their count.
    """
    if cell.is_flagged:
        return FLAG_GLYPH
    if not cell.is_revealed:
        return ""
    if cell.is_mine:
        return MINE_GLYPH
    if cell.neighbor_mines == 0:
        return ""
    return str(cell.neighbor_mines)


def number_color(count: int) -> Optional[str]:
    """Color for a neighbor count, or None outside 1-8."""
    return NUMBER_COLORS.get(count)


# ============================================================================
# Game-level Read Model
# ============================================================================

def face(state: GameState) -> str:
    return FACES[state]


def banner(state: GameState) -> Optional[str]:
    """Message shown once the game is over."""
    return BANNERS.get(state)


def interaction_disabled(game: Game) -> bool:
    """Whether the grid should stop accepting clicks."""
    return game.state != GameState.PLAYING


def symbol_grid(game: Game) -> List[List[str]]:
    return [[cell_symbol(cell) for cell in row] for row in game.board.grid]


def observation(board: Board) -> np.ndarray:
    """
    Board state as a numpy array.

    Returns:
        2D int8 array where:
            -1 = hidden
            -2 = flagged
            0-8 = revealed with neighbor count
            9 = revealed mine
    """
    obs = np.zeros((board.config.height, board.config.width), dtype=np.int8)
    for row, col, cell in board.cells():
        obs[row, col] = cell.to_observation()
    return obs


def render_text(game: Game) -> str:
    """
    Render the game as plain text.

    The first line shows the face and remaining flags; the grid follows
    with "." for hidden cells, "F" for flags, "*" for mines and blanks for
    revealed zeros. The banner, if any, comes last.
    """
    lines = [f"{face(game.state)}  flags: {game.flags_remaining}"]
    obs = observation(game.board)
    header = "   " + " ".join(str(col) for col in range(game.config.width))
    lines.append(header)

    for row in range(game.config.height):
        row_str = f"{row:>2} "
        for col in range(game.config.width):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str.rstrip())

    message = banner(game.state)
    if message:
        lines.append(message)
    return "\n".join(lines)
