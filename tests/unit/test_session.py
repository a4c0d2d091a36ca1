"""
Unit tests for BoardConfig and GameSession.

Tests configuration validation, first-click rescue, win/lose
conditions and new games.
"""
import pytest
from minesweeper.game import (
    BEGINNER,
    DEFAULT,
    EXPERT,
    INTERMEDIATE,
    PRESETS,
    Board,
    BoardConfig,
    CellState,
    FlagResult,
    GameSession,
    GameState,
    OpenResult,
)


def session_with_board(board: Board) -> GameSession:
    """Session playing on a hand-built board."""
    session = GameSession(BoardConfig(board.width, board.height, 1), rng=0)
    session.board = board
    return session


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_default_config(self, default_config: BoardConfig) -> None:
        """Default configuration is 8x8 with 5 bombs."""
        assert default_config.width == 8
        assert default_config.height == 8
        assert default_config.num_bombs == 5
        assert default_config.size == (8, 8)

    def test_too_small_raises_error(self) -> None:
        """Boards narrower than 2 are rejected."""
        with pytest.raises(ValueError, match="dimensions must be 2-30"):
            BoardConfig(1, 9, 3)

    def test_too_large_raises_error(self) -> None:
        """Boards taller than 30 are rejected."""
        with pytest.raises(ValueError, match="dimensions must be 2-30"):
            BoardConfig(9, 31, 3)

    def test_zero_bombs_raises_error(self) -> None:
        """At least one bomb is required."""
        with pytest.raises(ValueError, match="bombs must be 1-100"):
            BoardConfig(9, 9, 0)

    def test_too_many_bombs_raises_error(self) -> None:
        """More than 100 bombs is rejected."""
        with pytest.raises(ValueError, match="bombs must be 1-100"):
            BoardConfig(30, 30, 101)

    def test_more_bombs_than_cells_is_allowed(self) -> None:
        """Saturating a small board is degenerate, not invalid."""
        config = BoardConfig(2, 2, 10)
        assert config.num_bombs == 10

    def test_clamped_forces_values_into_range(self) -> None:
        """clamped never raises for out-of-range input."""
        config = BoardConfig.clamped(0, 50, 500)
        assert (config.width, config.height, config.num_bombs) == (2, 30, 100)

    def test_presets(self) -> None:
        """Presets carry the expected sizes."""
        assert DEFAULT.size == (8, 8)
        assert (BEGINNER.size, BEGINNER.num_bombs) == ((9, 9), 10)
        assert (INTERMEDIATE.size, INTERMEDIATE.num_bombs) == ((16, 16), 40)
        assert (EXPERT.size, EXPERT.num_bombs) == ((30, 16), 99)
        assert PRESETS["expert"] is EXPERT


# ============================================================================
# Session Initialization Tests
# ============================================================================

class TestSessionInitialization:
    """Test session creation."""

    def test_new_session_is_playing(self, seeded_session: GameSession) -> None:
        """New session should be in playing state."""
        assert seeded_session.game_state == GameState.PLAYING
        assert seeded_session.is_playing is True

    def test_board_matches_config(self, seeded_session: GameSession) -> None:
        """The board takes its size from the config."""
        assert seeded_session.board.size == (8, 8)
        assert 1 <= seeded_session.board.bomb_count <= 5

    def test_seeded_sessions_are_reproducible(
        self, default_config: BoardConfig
    ) -> None:
        """Same seed, same first board."""
        first = GameSession(default_config, rng=99)
        second = GameSession(default_config, rng=99)
        assert first.board.bomb_positions() == second.board.bomb_positions()


# ============================================================================
# First Click Tests
# ============================================================================

class TestFirstClick:
    """Test first-click bomb rescue."""

    def test_first_click_on_bomb_is_not_a_loss(self, scripted_rng) -> None:
        """The bomb moves away and play continues."""
        board = Board.from_bomb_positions(
            (3, 3), [(0, 0)], rng=scripted_rng([(2, 2)])
        )
        session = session_with_board(board)

        result = session.open((0, 0))

        assert result == OpenResult.OPEN_SPACE_UNCOVERED
        assert session.is_playing is True
        assert not session.board.cell_type((0, 0)).is_bomb
        assert session.board.bomb_positions() == [(2, 2)]

    def test_first_click_next_to_moved_bomb(self, scripted_rng) -> None:
        """A rescued cell that ends up beside a bomb reports unsafe space."""
        board = Board.from_bomb_positions(
            (4, 4), [(0, 0), (1, 1)], rng=scripted_rng([(3, 3)])
        )
        session = session_with_board(board)

        assert session.open((0, 0)) == OpenResult.UNSAFE_SPACE_UNCOVERED
        assert sorted(session.board.bomb_positions()) == [(1, 1), (3, 3)]
        assert session.board.opened_count == 1
        assert session.is_playing is True

    def test_first_click_never_loses(self) -> None:
        """Across many seeded boards the first open never loses."""
        for seed in range(50):
            session = GameSession(BoardConfig(5, 5, 10), rng=seed)
            session.open((2, 2))
            assert session.is_playing or session.is_won
            assert not session.board.cell_type((2, 2)).is_bomb

    def test_flagging_first_does_not_count_as_opening(
        self, scripted_rng
    ) -> None:
        """Flags do not use up the first-click rescue."""
        board = Board.from_bomb_positions(
            (3, 3), [(0, 0)], rng=scripted_rng([(2, 2)])
        )
        session = session_with_board(board)

        session.toggle_flag((1, 1))
        session.open((0, 0))

        assert session.is_playing is True


# ============================================================================
# Win/Lose Condition Tests
# ============================================================================

class TestGameEndConditions:
    """Test win and lose conditions."""

    def test_bomb_after_first_click_loses(self) -> None:
        """A later bomb hit ends the game as lost."""
        board = Board.from_bomb_positions((4, 4), [(0, 0)])
        session = session_with_board(board)

        session.open((3, 3))
        result = session.open((0, 0))

        assert result == OpenResult.BOMB_HIT
        assert session.is_lost is True

    def test_loss_uncovers_everything_but_flags(self) -> None:
        """After a loss every unflagged cell is opened."""
        board = Board.from_bomb_positions((4, 4), [(0, 0), (3, 0)])
        session = session_with_board(board)

        session.open((0, 3))
        session.toggle_flag((3, 0))
        session.open((0, 0))

        assert session.board.cell_state((3, 0)) == CellState.FLAGGED
        assert session.board.opened_count == 15

    def test_flagging_every_bomb_wins(self) -> None:
        """Placing the last correct flag wins and uncovers the board."""
        board = Board.from_bomb_positions((3, 3), [(2, 2), (0, 2)])
        session = session_with_board(board)

        assert session.toggle_flag((2, 2)) == FlagResult.FLAG_PLACED
        assert session.is_playing is True
        assert session.toggle_flag((0, 2)) == FlagResult.FLAG_PLACED

        assert session.is_won is True
        assert session.board.opened_count == 7
        assert session.board.flag_count == 2

    def test_extra_flag_blocks_win(self) -> None:
        """A wrong flag keeps the game going."""
        board = Board.from_bomb_positions((3, 3), [(2, 2)])
        session = session_with_board(board)

        session.toggle_flag((0, 0))
        session.toggle_flag((2, 2))

        assert session.is_playing is True

    def test_win_is_checked_on_placement_only(self) -> None:
        """Removing a wrong flag does not by itself win."""
        board = Board.from_bomb_positions((3, 3), [(2, 2)])
        session = session_with_board(board)

        session.toggle_flag((0, 0))
        session.toggle_flag((2, 2))
        session.toggle_flag((0, 0))

        assert session.board.are_all_bombs_flagged() is True
        assert session.is_playing is True

    def test_actions_after_game_over_have_no_effect(self) -> None:
        """Nothing happens once the game has ended."""
        board = Board.from_bomb_positions((3, 3), [(2, 2)])
        session = session_with_board(board)
        session.toggle_flag((2, 2))

        assert session.open((0, 0)) is None
        assert session.toggle_flag((2, 2)) is None


# ============================================================================
# New Game Tests
# ============================================================================

class TestNewGame:
    """Test starting over and resizing."""

    def test_new_game_restores_playing_state(
        self, seeded_session: GameSession
    ) -> None:
        """new_game replaces the board and resumes play."""
        old_board = seeded_session.board
        for pos in old_board.bomb_positions():
            seeded_session.toggle_flag(pos)
        assert seeded_session.is_won is True

        seeded_session.new_game()

        assert seeded_session.is_playing is True
        assert seeded_session.board is not old_board
        assert seeded_session.board.opened_count == 0
        assert seeded_session.board.flag_count == 0

    def test_resize_replaces_config_and_board(
        self, seeded_session: GameSession
    ) -> None:
        """resize builds a board of the new size."""
        seeded_session.resize(BoardConfig(12, 5, 7))

        assert seeded_session.config.size == (12, 5)
        assert seeded_session.board.size == (12, 5)
        assert seeded_session.is_playing is True
