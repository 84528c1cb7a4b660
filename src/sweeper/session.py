"""
Session that a front end talks to.

Holds the current game snapshot and exposes the three callbacks a
renderer forwards: reveal, toggle flag and new game. Each callback
publishes the resulting snapshot to any registered listeners.
"""
import random
from typing import Callable, List, Optional

from .board import BoardConfig, DEFAULT_CONFIG
from .engine import Game, initialize, reveal, toggle_flag


Listener = Callable[[Game], None]


class GameSession:
    """
    A single-player game session.

    Args:
        config: Board configuration (default: 9x9 with 10 mines).
        seed: Seed for mine placement; random when omitted.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._rng = random.Random(seed)
        self._listeners: List[Listener] = []
        self.game = initialize(self.config)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with every snapshot published from now on."""
        self._listeners.append(listener)

    def on_reveal(self, row: int, col: int) -> Game:
        return self._publish(reveal(self.game, row, col, self._rng))

    def on_toggle_flag(self, row: int, col: int) -> Game:
        return self._publish(toggle_flag(self.game, row, col))

    def on_new_game(self) -> Game:
        """Throw away the current board and start over."""
        return self._publish(initialize(self.config))

    def reseed(self, seed: Optional[int]) -> None:
        self._rng.seed(seed)

    def _publish(self, game: Game) -> Game:
        self.game = game
        for listener in self._listeners:
            listener(game)
        return game
