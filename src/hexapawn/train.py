"""Training runs: many games between the same two agents."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from hexapawn.agents.base import Agent
from hexapawn.agents.learning import LearningAgent
from hexapawn.agents.random import RandomAgent
from hexapawn.board import Side
from hexapawn.director import GameDirector

logger = logging.getLogger(__name__)


class TrainingMetrics:
    """Track win tallies and learner growth over a run."""

    def __init__(self) -> None:
        """Initialize metrics tracking."""
        self.games: List[int] = []
        self.white_wins: List[int] = []
        self.black_wins: List[int] = []
        self.white_win_rates: List[float] = []
        self.black_win_rates: List[float] = []
        self.total_white_wins: List[int] = []
        self.total_black_wins: List[int] = []
        self.knowledge_sizes: List[int] = []
        self.trusted_moves: List[int] = []

    def record(
        self,
        game: int,
        white_wins: int,
        black_wins: int,
        total_white_wins: int,
        total_black_wins: int,
        knowledge_size: int,
        trusted_moves: int,
    ) -> None:
        """Record metrics for the interval ending at ``game``."""
        total = white_wins + black_wins

        self.games.append(game)
        self.white_wins.append(white_wins)
        self.black_wins.append(black_wins)
        self.white_win_rates.append(white_wins / total if total > 0 else 0.0)
        self.black_win_rates.append(black_wins / total if total > 0 else 0.0)
        self.total_white_wins.append(total_white_wins)
        self.total_black_wins.append(total_black_wins)
        self.knowledge_sizes.append(knowledge_size)
        self.trusted_moves.append(trusted_moves)

    def to_dict(self) -> Dict[str, List]:
        """Convert metrics to dictionary."""
        return {
            "games": self.games,
            "white_wins": self.white_wins,
            "black_wins": self.black_wins,
            "white_win_rates": self.white_win_rates,
            "black_win_rates": self.black_win_rates,
            "total_white_wins": self.total_white_wins,
            "total_black_wins": self.total_black_wins,
            "knowledge_sizes": self.knowledge_sizes,
            "trusted_moves": self.trusted_moves,
        }

    @property
    def win_stats(self) -> Dict[Side, int]:
        """Overall wins per side at the last recorded interval."""
        if not self.games:
            return {Side.WHITE: 0, Side.BLACK: 0}
        return {Side.WHITE: self.total_white_wins[-1], Side.BLACK: self.total_black_wins[-1]}


def run_training(
    white: Agent,
    black: Agent,
    num_games: int = 1000,
    eval_interval: int = 100,
    learner: Optional[LearningAgent] = None,
    learner_side: Side = Side.BLACK,
    director: Optional[GameDirector] = None,
    verbose: bool = False,
) -> TrainingMetrics:
    """
    Play ``num_games`` games between the same two agent instances.

    Args:
        white: Agent playing White in every game
        black: Agent playing Black in every game
        num_games: Number of games to play
        eval_interval: Games between metric recordings
        learner: Learning agent whose table size is tracked (optional)
        learner_side: Side whose situations are counted for ``learner``
        director: Director to use (a quiet one by default)
        verbose: Print progress at every interval

    Returns:
        TrainingMetrics with per-interval tallies; the final interval is
        always recorded, so the overall totals sum to ``num_games``
    """
    director = director or GameDirector()
    metrics = TrainingMetrics()

    wins = {Side.WHITE: 0, Side.BLACK: 0}
    totals = {Side.WHITE: 0, Side.BLACK: 0}

    for game in range(1, num_games + 1):
        result = director.conduct_game(white, black)
        wins[result.winner] += 1
        totals[result.winner] += 1

        if game % eval_interval == 0 or game == num_games:
            knowledge = learner.knowledge_size(learner_side) if learner is not None else 0
            trusted = learner.trusted_move_count(learner_side) if learner is not None else 0
            metrics.record(
                game,
                wins[Side.WHITE],
                wins[Side.BLACK],
                totals[Side.WHITE],
                totals[Side.BLACK],
                knowledge,
                trusted,
            )
            logger.info(
                "Game %d/%d: white %d, black %d, knowledge %d",
                game, num_games, totals[Side.WHITE], totals[Side.BLACK], knowledge,
            )

            if verbose:
                total = wins[Side.WHITE] + wins[Side.BLACK]
                print(
                    f"Game {game}/{num_games} | "
                    f"White: {wins[Side.WHITE] / total:.1%} | "
                    f"Black: {wins[Side.BLACK] / total:.1%} | "
                    f"Knowledge: {knowledge}"
                )

            wins = {Side.WHITE: 0, Side.BLACK: 0}

    return metrics


@dataclass
class SeedRun:
    """Result of one seed in a sweep."""

    seed: int
    white_wins: int
    black_wins: int
    final_knowledge: int
    max_knowledge: int


@dataclass
class SweepResult:
    """Results of a seed sweep."""

    runs: List[SeedRun] = field(default_factory=list)

    @property
    def max_knowledge(self) -> int:
        return max((run.max_knowledge for run in self.runs), default=0)


def make_opponent(kind: str, seed: int | None) -> Agent:
    """Build a non-interactive agent by kind name (``random`` or ``learning``)."""
    if kind == "random":
        return RandomAgent(seed=seed)
    if kind == "learning":
        return LearningAgent(seed=seed)
    raise ValueError(f"Unknown opponent kind: {kind}")


def run_seed_sweep(
    seeds: Iterable[int],
    games_per_seed: int = 1000,
    opponent: str = "random",
    learner_seed: int = 500,
) -> SweepResult:
    """
    Train a fresh Black learner against a fresh White opponent per seed.

    Args:
        seeds: Seeds for the White opponent, one run each
        games_per_seed: Games played per run
        opponent: White agent kind, ``random`` or ``learning``
        learner_seed: Seed of every Black learner

    Returns:
        SweepResult with the per-seed tallies and knowledge sizes
    """
    director = GameDirector()
    sweep = SweepResult()

    for seed in seeds:
        white = make_opponent(opponent, seed)
        black = LearningAgent(seed=learner_seed)
        wins = {Side.WHITE: 0, Side.BLACK: 0}
        max_knowledge = 0

        for _ in range(games_per_seed):
            result = director.conduct_game(white, black)
            wins[result.winner] += 1
            max_knowledge = max(max_knowledge, black.knowledge_size(Side.BLACK))

        sweep.runs.append(
            SeedRun(
                seed=seed,
                white_wins=wins[Side.WHITE],
                black_wins=wins[Side.BLACK],
                final_knowledge=black.knowledge_size(Side.BLACK),
                max_knowledge=max_knowledge,
            )
        )
        logger.info("Seed %d: knowledge %d", seed, max_knowledge)

    return sweep
