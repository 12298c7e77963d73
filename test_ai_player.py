"""
Tests for the AI player at each difficulty, in both variants.
"""

import random

import pytest

from logic.game_state import Player, CLASSIC, VANISH
from logic.ai_player import AIPlayer, Difficulty
from logic.game_state import GameState


O, X = Player.O, Player.X


def board_of(text: str):
    """Build a board from 9 characters: 'X', 'O' or '.'."""
    cells = {"X": X, "O": O, ".": None}
    return tuple(cells[c] for c in text.replace(" ", ""))


def make_ai(variant=CLASSIC, seed=0) -> AIPlayer:
    return AIPlayer(X, variant, rng=random.Random(seed), verbose=False)


class TestDifficulty:

    def test_labels(self):
        assert [d.label for d in Difficulty] == ["Easy", "Medium", "Hard"]

    def test_next_wraps_around(self):
        assert Difficulty.EASY.next() == Difficulty.MEDIUM
        assert Difficulty.MEDIUM.next() == Difficulty.HARD
        assert Difficulty.HARD.next() == Difficulty.EASY


class TestNoMoves:

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_full_board_returns_none(self, difficulty):
        ai = make_ai()
        assert ai.choose_move(board_of("XOX XOO OXX"), None, difficulty) is None

    def test_not_our_turn(self):
        ai = make_ai()
        assert ai.get_best_move(GameState(current_player=O), Difficulty.HARD) is None


class TestEasy:

    def test_picks_an_empty_cell(self):
        board = board_of("XO. .X. O..")
        ai = make_ai(seed=3)
        for _ in range(20):
            assert board[ai.choose_move(board, None, Difficulty.EASY)] is None

    def test_only_one_cell_left(self):
        ai = make_ai()
        assert ai.choose_move(board_of("XOX XOO OX."), None, Difficulty.EASY) == 8


class TestMedium:

    def test_takes_the_win(self):
        # X can win at 2; O threatens 5
        board = board_of("XX. OO. ...")
        for seed in range(5):
            assert make_ai(seed=seed).choose_move(board, None, Difficulty.MEDIUM) == 2

    def test_blocks_the_threat(self):
        board = board_of("OO. .X. ...")
        for seed in range(5):
            assert make_ai(seed=seed).choose_move(board, None, Difficulty.MEDIUM) == 2

    def test_vanish_takes_the_win(self):
        board = board_of(".O. XX. .O.")
        histories = {X: (3, 4), O: (1, 7)}
        assert make_ai(VANISH).choose_move(board, histories, Difficulty.MEDIUM) == 5

    def test_vanish_win_check_applies_the_vanish_rule(self):
        # X holds 0, 1 and 8; placing at 2 would remove 0, so no win there
        board = board_of("XX. ... ..X")
        vanish_ai = make_ai(VANISH)
        assert vanish_ai._find_winning_cell(board, (0, 1, 8), X) is None

        classic_ai = make_ai(CLASSIC)
        assert classic_ai._find_winning_cell(board, (0, 1, 8), X) == 2

    def test_classic_fallback_is_random(self):
        # Nothing to win or block: classic medium never searches
        board = board_of("... .O. ...")
        moves = {make_ai(seed=s).choose_move(board, None, Difficulty.MEDIUM) for s in range(30)}
        assert len(moves) > 1
        assert 4 not in moves


class TestHard:

    def test_takes_the_win(self):
        board = board_of("XX. OO. ...")
        assert make_ai().choose_move(board, None, Difficulty.HARD) == 2

    def test_blocks_the_threat(self):
        board = board_of("OO. .X. ...")
        assert make_ai().choose_move(board, None, Difficulty.HARD) == 2

    def test_answers_corner_opening_with_center(self):
        board = board_of("O.. ... ...")
        assert make_ai().choose_move(board, None, Difficulty.HARD) == 4

    def test_is_deterministic(self):
        board = board_of("O.. .X. ..O")
        ai = make_ai()
        first = ai.choose_move(board, None, Difficulty.HARD)
        assert all(ai.choose_move(board, None, Difficulty.HARD) == first for _ in range(3))

    def test_vanish_blocks_the_threat(self):
        board = board_of("OO. .X. ...")
        histories = {O: (0, 1), X: (4,)}
        assert make_ai(VANISH).choose_move(board, histories, Difficulty.HARD) == 2

    def test_vanish_takes_the_win_over_the_block(self):
        board = board_of("OO. XX. ...")
        histories = {O: (0, 1), X: (3, 4)}
        assert make_ai(VANISH).choose_move(board, histories, Difficulty.HARD) == 5

    def test_vanish_search_is_bounded(self):
        ai = make_ai(VANISH)
        board = board_of("O.. ... ...")
        move = ai.choose_move(board, {O: (0,), X: ()}, Difficulty.HARD)
        assert board[move] is None
        assert 0 < ai.moves_evaluated < 100_000

    def test_get_best_move_uses_state_histories(self):
        state = GameState(
            variant=VANISH,
            board=board_of("OO. .X. ..."),
            current_player=X,
            o_moves=(0, 1),
            x_moves=(4,),
        )
        assert make_ai(VANISH).get_best_move(state, Difficulty.HARD) == 2


class TestVanishSearch:

    def test_hard_applies_vanish_rule_while_searching(self):
        # Playing 2 would remove X's mark at 0, so only blocking 5 holds
        board = board_of("XX. OO. ..X")
        histories = {X: (0, 1, 8), O: (3, 4)}
        assert make_ai(VANISH).choose_move(board, histories, Difficulty.HARD) == 5

    @pytest.mark.parametrize("roll, searched", [(0.0, True), (0.39, True), (0.41, False), (0.99, False)])
    def test_medium_searches_with_variant_probability(self, monkeypatch, roll, searched):
        assert VANISH.medium_search_probability == pytest.approx(0.4)

        ai = make_ai(VANISH)
        calls = []

        def fake_search(board, human_moves, bot_moves):
            calls.append(board)
            return 8

        monkeypatch.setattr(ai.rng, "random", lambda: roll)
        monkeypatch.setattr(ai, "_find_best_move", fake_search)

        # Nothing to win or block
        board = board_of("O.. ... ...")
        move = ai.choose_move(board, {O: (0,), X: ()}, Difficulty.MEDIUM)

        assert bool(calls) == searched
        if searched:
            assert move == 8
        else:
            assert board[move] is None

    def test_classic_medium_never_searches(self, monkeypatch):
        ai = make_ai(CLASSIC)
        monkeypatch.setattr(ai.rng, "random", lambda: 0.0)
        monkeypatch.setattr(ai, "_find_best_move", lambda *args: pytest.fail("searched"))

        assert ai.choose_move(board_of("O.. ... ..."), None, Difficulty.MEDIUM) is not None
