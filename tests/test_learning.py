"""Tests for the rote-learning agent."""

import numpy as np
import pytest

from hexapawn.agents import LearningAgent, RandomAgent, SituationPreferences
from hexapawn.board import Board, Move, Side
from hexapawn.director import GameDirector
from hexapawn.exceptions import UnwinnableFirstMoveError


class TestSituationPreferences:
    """Test SituationPreferences."""

    def test_remove(self) -> None:
        prefs = SituationPreferences([Move(6, 3), Move(7, 4)])
        prefs.remove(Move(6, 3))

        assert Move(6, 3) not in prefs
        assert prefs.moves == {Move(7, 4)}
        assert len(prefs) == 1

    def test_remove_missing_move_is_ignored(self) -> None:
        prefs = SituationPreferences([Move(6, 3)])
        prefs.remove(Move(8, 5))
        assert len(prefs) == 1

    def test_empty(self) -> None:
        prefs = SituationPreferences([Move(6, 3)])
        assert not prefs.is_empty()
        prefs.remove(Move(6, 3))
        assert prefs.is_empty()

    def test_pick_move(self) -> None:
        moves = {Move(6, 3), Move(7, 4), Move(8, 5)}
        prefs = SituationPreferences(moves)
        rng = np.random.default_rng(0)

        picked = {prefs.pick_move(rng) for _ in range(100)}
        assert picked == moves


class TestGetMove:
    """Test LearningAgent move selection."""

    def test_first_sight_seeds_all_legal_moves(self) -> None:
        agent = LearningAgent(seed=0)
        agent.on_game_start(Side.WHITE)
        board = Board.initial()

        move = agent.get_move(board, Side.WHITE)

        assert agent.preferences[Side.WHITE][board].moves == board.legal_moves(Side.WHITE)
        assert move in board.legal_moves(Side.WHITE)
        assert agent.history == [(board, move)]

    def test_equal_boards_share_entry(self) -> None:
        agent = LearningAgent(seed=0)
        agent.on_game_start(Side.BLACK)
        agent.get_move(Board.initial().apply_move(Move(7, 4)), Side.BLACK)
        agent.get_move(Board.from_string("BBB.W.W.W"), Side.BLACK)

        assert agent.knowledge_size(Side.BLACK) == 1

    def test_picks_only_trusted_moves(self) -> None:
        agent = LearningAgent(seed=0)
        board = Board.initial()
        agent.preferences[Side.WHITE][board] = SituationPreferences([Move(8, 5)])
        agent.on_game_start(Side.WHITE)

        for _ in range(20):
            assert agent.get_move(board, Side.WHITE) == Move(8, 5)

    def test_sides_kept_apart(self) -> None:
        agent = LearningAgent(seed=0)
        board = Board.from_string("BBB.W.W.W")
        agent.get_move(board, Side.BLACK)

        assert board in agent.preferences[Side.BLACK]
        assert board not in agent.preferences[Side.WHITE]

    def test_exhausted_first_situation_raises(self) -> None:
        agent = LearningAgent(seed=0)
        board = Board.initial()
        agent.preferences[Side.WHITE][board] = SituationPreferences([])
        agent.on_game_start(Side.WHITE)

        with pytest.raises(UnwinnableFirstMoveError, match="only winning move is not to play"):
            agent.get_move(board, Side.WHITE)

    def test_exhausted_later_situation_guesses(self) -> None:
        agent = LearningAgent(seed=0)
        agent.on_game_start(Side.BLACK)
        first = Board.from_string("BBB.W.W.W")
        agent.get_move(first, Side.BLACK)

        later = Board.from_string(".BB.B.W.W")
        agent.preferences[Side.BLACK][later] = SituationPreferences([])
        move = agent.get_move(later, Side.BLACK)

        assert move in later.legal_moves(Side.BLACK)
        assert agent.history[-1] == (later, move)
        assert agent.preferences[Side.BLACK][later].is_empty()

    def test_game_start_clears_history(self) -> None:
        agent = LearningAgent(seed=0)
        agent.on_game_start(Side.WHITE)
        agent.get_move(Board.initial(), Side.WHITE)

        agent.on_game_start(Side.BLACK)

        assert agent.history == []
        assert agent.playing_as is Side.BLACK


class TestCascade:
    """Test pruning after a loss."""

    b1 = Board.from_string("BBB.W.W.W")
    b2 = Board.from_string(".BB.B.W.W")
    b3 = Board.from_string(".B..BBW.W")
    m1 = Move(0, 4)
    m2 = Move(4, 7)
    m2_alt = Move(2, 5)
    m3 = Move(5, 8)

    def _agent(self, sets) -> LearningAgent:
        agent = LearningAgent(seed=0)
        agent.on_game_start(Side.BLACK)
        for board, moves in sets.items():
            agent.preferences[Side.BLACK][board] = SituationPreferences(moves)
        agent.history = [(self.b1, self.m1), (self.b2, self.m2), (self.b3, self.m3)]
        return agent

    def test_cascade_stops_at_first_non_empty_situation(self) -> None:
        agent = self._agent({
            self.b1: [self.m1],
            self.b2: [self.m2, self.m2_alt],
            self.b3: [self.m3],
        })

        agent.on_game_end(Side.WHITE)

        prefs = agent.preferences[Side.BLACK]
        assert prefs[self.b3].moves == frozenset()
        assert prefs[self.b2].moves == {self.m2_alt}
        assert prefs[self.b1].moves == {self.m1}

    def test_only_last_move_pruned_when_alternatives_remain(self) -> None:
        agent = self._agent({
            self.b1: [self.m1],
            self.b2: [self.m2],
            self.b3: [self.m3, Move(4, 7)],
        })

        agent.on_game_end(Side.WHITE)

        prefs = agent.preferences[Side.BLACK]
        assert prefs[self.b3].moves == {Move(4, 7)}
        assert prefs[self.b2].moves == {self.m2}
        assert prefs[self.b1].moves == {self.m1}

    def test_cascade_unwinds_to_start(self) -> None:
        """Every situation exhausted: the whole game is blamed."""
        agent = self._agent({
            self.b1: [self.m1],
            self.b2: [self.m2],
            self.b3: [self.m3],
        })

        agent.on_game_end(Side.WHITE)

        assert all(p.is_empty() for p in agent.preferences[Side.BLACK].values())

    def test_win_changes_nothing(self) -> None:
        agent = self._agent({
            self.b1: [self.m1],
            self.b2: [self.m2],
            self.b3: [self.m3],
        })

        agent.on_game_end(Side.BLACK)

        assert agent.trusted_move_count(Side.BLACK) == 3

    def test_guessed_move_cascades_to_earlier_choice(self) -> None:
        """A loss from an exhausted situation blames the move that led there."""
        agent = self._agent({
            self.b1: [self.m1],
            self.b2: [self.m2, self.m2_alt],
            self.b3: [],
        })

        agent.on_game_end(Side.WHITE)

        prefs = agent.preferences[Side.BLACK]
        assert prefs[self.b2].moves == {self.m2_alt}
        assert prefs[self.b1].moves == {self.m1}


class RecordingLearner(LearningAgent):
    """Learner that remembers its trusted-move count around each game end."""

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed=seed)
        self.losses = []

    def on_game_end(self, winner: Side) -> None:
        before = self.trusted_move_count()
        super().on_game_end(winner)
        if winner != self.playing_as:
            self.losses.append((before, self.trusted_move_count()))


class TestLearningFromGames:
    """Test learning over real games."""

    def test_loss_removes_trusted_moves(self) -> None:
        learner = RecordingLearner(seed=0)
        white = RandomAgent(seed=1)
        director = GameDirector()

        for _ in range(200):
            director.conduct_game(white, learner)
            if learner.losses:
                break

        assert learner.losses
        before, after = learner.losses[0]
        assert after < before

    def test_trusted_moves_never_grow_across_losses(self) -> None:
        learner = RecordingLearner(seed=3)
        director = GameDirector()
        white = RandomAgent(seed=4)

        for _ in range(300):
            director.conduct_game(white, learner)

        assert learner.losses
        assert all(after < before for before, after in learner.losses)

    def test_losses_bounded_by_black_moves(self, situations) -> None:
        """Each loss discards a move for good, so losses are finite."""
        bound = sum(
            len(board.legal_moves(Side.BLACK))
            for board, side in situations
            if side is Side.BLACK
        )
        learner = LearningAgent(seed=7)
        white = RandomAgent(seed=8)
        director = GameDirector()

        losses = sum(
            1 for _ in range(3000)
            if director.conduct_game(white, learner).winner is Side.WHITE
        )

        assert 0 < losses <= bound
        assert learner.exhausted_situations(Side.BLACK) < learner.knowledge_size(Side.BLACK)

    def test_stats(self) -> None:
        learner = LearningAgent(seed=0)
        director = GameDirector()
        director.conduct_game(RandomAgent(seed=1), learner)

        stats = learner.get_stats()
        assert stats["num_situations"] == learner.knowledge_size(Side.BLACK)
        assert stats["trusted_moves"] == learner.trusted_move_count(Side.BLACK)
        assert stats["exhausted_situations"] == learner.exhausted_situations()
