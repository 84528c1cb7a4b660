"""
Unit tests for the read model.

Tests the symbols, colors, face, banner and observation a renderer uses.
"""
import numpy as np
import pytest

from sweeper import Cell, Game, GameState, reveal, toggle_flag
from sweeper.view import (
    FLAG_GLYPH,
    MINE_GLYPH,
    banner,
    cell_symbol,
    face,
    interaction_disabled,
    number_color,
    observation,
    render_text,
    symbol_grid,
)


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test the symbol drawn on each cell."""

    def test_hidden_cell_is_blank(self, hidden_cell: Cell) -> None:
        assert cell_symbol(hidden_cell) == ""

    def test_hidden_mine_is_blank(self, mine_cell: Cell) -> None:
        assert cell_symbol(mine_cell) == ""

    def test_flagged_cell_shows_flag(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert cell_symbol(hidden_cell) == FLAG_GLYPH

    def test_flag_wins_over_revealed_mine(self, mine_cell: Cell) -> None:
        mine_cell.toggle_flag()
        mine_cell.is_revealed = True
        assert cell_symbol(mine_cell) == FLAG_GLYPH

    def test_revealed_mine_shows_mine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert cell_symbol(mine_cell) == MINE_GLYPH

    def test_revealed_zero_is_blank(self, hidden_cell: Cell) -> None:
        hidden_cell.reveal()
        assert cell_symbol(hidden_cell) == ""

    def test_revealed_number_shows_count(self, numbered_cell: Cell) -> None:
        assert cell_symbol(numbered_cell) == "3"


# ============================================================================
# Color, Face and Banner Tests
# ============================================================================

class TestDecorations:
    """Test per-count colors and game-level glyphs."""

    @pytest.mark.parametrize("count", range(1, 9))
    def test_every_count_has_a_distinct_color(self, count: int) -> None:
        colors = {number_color(n) for n in range(1, 9)}
        assert number_color(count) is not None
        assert len(colors) == 8

    def test_zero_has_no_color(self) -> None:
        assert number_color(0) is None

    def test_faces_differ_per_state(self) -> None:
        faces = {face(state) for state in GameState}
        assert len(faces) == 3

    def test_banner_only_when_over(self) -> None:
        assert banner(GameState.PLAYING) is None
        assert "Won" in banner(GameState.WON)
        assert "Game Over" in banner(GameState.LOST)


# ============================================================================
# Game Read Model Tests
# ============================================================================

class TestGameReadModel:
    """Test game-level read model over real snapshots."""

    def test_interaction_enabled_while_playing(self, fresh_game: Game) -> None:
        assert interaction_disabled(fresh_game) is False

    def test_interaction_disabled_after_loss(self, make_game) -> None:
        game = reveal(make_game([(0, 0)]), 0, 0)
        assert interaction_disabled(game) is True

    def test_symbol_grid_shape(self, fresh_game: Game) -> None:
        grid = symbol_grid(fresh_game)
        assert len(grid) == 9
        assert all(symbol == "" for row in grid for symbol in row)

    def test_symbol_grid_after_loss(self, make_game) -> None:
        game = reveal(make_game([(0, 0), (8, 8)]), 8, 8)
        grid = symbol_grid(game)
        assert grid[0][0] == MINE_GLYPH
        assert grid[8][8] == MINE_GLYPH
        assert grid[4][4] == ""


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test the numeric observation grid."""

    def test_new_board_observation_all_hidden(self, fresh_game: Game) -> None:
        obs = observation(fresh_game.board)
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)

    def test_flagged_and_revealed_values(self, make_game) -> None:
        game = make_game([(0, 0)], width=5, height=5)
        game = toggle_flag(game, 0, 0)
        game = reveal(game, 1, 1)
        obs = observation(game.board)
        assert obs[0, 0] == -2
        assert obs[1, 1] == 1
        assert obs[4, 4] == -1


# ============================================================================
# Text Rendering Tests
# ============================================================================

class TestRenderText:
    """Test plain-text rendering."""

    def test_header_shows_flags(self, fresh_game: Game) -> None:
        text = render_text(toggle_flag(fresh_game, 0, 0))
        first_line = text.splitlines()[0]
        assert "flags: 9" in first_line
        assert face(GameState.PLAYING) in first_line

    def test_grid_rows(self, fresh_game: Game) -> None:
        lines = render_text(toggle_flag(fresh_game, 0, 0)).splitlines()
        assert len(lines) == 11
        assert lines[2].split()[1:] == ["F"] + ["."] * 8

    def test_lost_board_shows_mines_and_banner(self, make_game) -> None:
        game = reveal(make_game([(0, 0)], width=3, height=3), 0, 0)
        lines = render_text(game).splitlines()
        assert lines[2].split()[1] == "*"
        assert lines[-1] == banner(GameState.LOST)
