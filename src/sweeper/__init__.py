"""
Minesweeper board engine.

Provides the board model, the reveal and flag actions over immutable game
snapshots, and the read model renderers draw from.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    DEFAULT_CONFIG,
    place_mines,
    compute_neighbor_counts,
    flood_fill,
)
from .engine import Game, initialize, reveal, toggle_flag
from .session import GameSession
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "place_mines",
    "compute_neighbor_counts",
    "flood_fill",
    "Game",
    "initialize",
    "reveal",
    "toggle_flag",
    "GameSession",
    "MinesweeperEnv",
]
