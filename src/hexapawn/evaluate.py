"""Evaluation utilities for comparing agents."""

from typing import Any, Dict

from hexapawn.agents.base import Agent
from hexapawn.board import Side
from hexapawn.director import GameDirector


def evaluate_agents(
    white: Agent,
    black: Agent,
    white_name: str,
    black_name: str,
    num_games: int = 100,
    director: GameDirector | None = None,
) -> Dict[str, Any]:
    """
    Evaluate two agents against each other.

    Agents keep whatever they learn during evaluation; pass a copy if the
    learner should be left untouched.

    Args:
        white: Agent playing White
        black: Agent playing Black
        white_name: Name of the White agent for display
        black_name: Name of the Black agent for display
        num_games: Number of games to play
        director: Director to use (a quiet one by default)

    Returns:
        Dictionary with evaluation results
    """
    director = director or GameDirector()

    wins = {Side.WHITE: 0, Side.BLACK: 0}
    total_moves = 0

    for _ in range(num_games):
        result = director.conduct_game(white, black)
        wins[result.winner] += 1
        total_moves += result.num_moves

    played = max(num_games, 1)
    results = {
        "white_name": white_name,
        "black_name": black_name,
        "num_games": num_games,
        "white_wins": wins[Side.WHITE],
        "black_wins": wins[Side.BLACK],
        "white_win_rate": wins[Side.WHITE] / played,
        "black_win_rate": wins[Side.BLACK] / played,
        "avg_moves_per_game": total_moves / played,
    }

    return results


def print_evaluation_results(results: Dict[str, Any]) -> None:
    """
    Pretty print evaluation results.

    Args:
        results: Results dictionary from evaluate_agents
    """
    print("=" * 60)
    print(f"{results['white_name']} (White) vs {results['black_name']} (Black)")
    print("=" * 60)
    print(f"Games played: {results['num_games']}")
    print()
    print(f"{results['white_name']} wins: {results['white_wins']} "
          f"({results['white_win_rate']:.1%})")
    print(f"{results['black_name']} wins: {results['black_wins']} "
          f"({results['black_win_rate']:.1%})")
    print()
    print(f"Average moves per game: {results['avg_moves_per_game']:.1f}")
    print("=" * 60)
