"""
Smoke tests for the Vanish TicTacToe modules.
Run these to verify all components wire together before playing.
"""

import sys

import pytest


def test_game_config():
    """Test game configuration."""
    from logic.config import GameConfig
    config = GameConfig()
    assert config.CELL_COUNT == config.BOARD_SIZE ** 2 == 9
    assert config.VANISH_MAX_MARKS == 3
    assert config.VANISH_SEARCH_DEPTH == 5
    assert 0.0 <= config.VANISH_MEDIUM_SEARCH_PROBABILITY <= 1.0


def test_variants():
    """Test variant presets follow the config."""
    from logic.game_state import Variant, CLASSIC, VANISH

    assert not CLASSIC.with_eviction and CLASSIC.search_depth is None
    assert VANISH.with_eviction and VANISH.max_marks == 3
    assert Variant.from_name("vanish") == VANISH

    with pytest.raises(ValueError):
        Variant.from_name("ultimate")


def test_game_logic():
    """Test game logic components together."""
    from logic import GameState, Player, MoveValidator, WinChecker, AIPlayer, Difficulty, apply_move

    game = apply_move(GameState(), 4, Player.O)
    assert MoveValidator().validate_move(game, 0).is_valid
    assert WinChecker().check_winner(game.board) is None

    ai = AIPlayer(Player.X, verbose=False)
    move = ai.get_best_move(game, Difficulty.HARD)
    assert move in game.get_empty_cells()


def test_rules():
    from logic.rules import rules_for, format_rules

    assert [title for title, _ in rules_for("classic")] == ["WIN", "DEFEAT", "DRAW"]
    assert rules_for("vanish")[-1][0] == "VANISH"
    assert "oldest" in format_rules("vanish")


def test_cli_prints_rules(monkeypatch, capsys):
    import main

    monkeypatch.setattr(sys, "argv", ["main.py", "--rules", "--variant", "vanish"])
    main.main()
    out = capsys.readouterr().out
    assert "WIN:" in out
    assert "VANISH:" in out


def test_console_game(monkeypatch, capsys):
    """Play a short friend game through the console front-end."""
    import main
    from logic.config import GameConfig
    from logic.game_state import GameMode, Variant
    from logic.ai_player import Difficulty

    class QuietConfig(GameConfig):
        DEBUG_MODE = False
        CLASSIC_AUTO_RESET_DELAY = 0.0

    commands = iter(["1", "1", "4", "2", "5", "3", "x", "q"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(commands))

    config = QuietConfig()
    game = main.ConsoleGame(Variant.classic(config), GameMode.FRIEND, Difficulty.EASY, config)
    game.start()

    out = capsys.readouterr().out
    assert "That move isn't allowed right now." in out
    assert "Open cells: 2, 3, 4, 5, 6, 7, 8, 9" in out
    assert "Player O Wins" in out
    assert game.session.scores[game.session.human_player] == 1
    assert "Goodbye!" in out
