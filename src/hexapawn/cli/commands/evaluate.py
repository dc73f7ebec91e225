"""Hexapawn evaluate command."""

import click
from rich.console import Console
from rich.table import Table

from hexapawn.agents import LearningAgent, RandomAgent
from hexapawn.board import Side
from hexapawn.evaluate import evaluate_agents
from hexapawn.train import run_training

console = Console()


@click.command()
@click.option(
    "--train-games",
    type=click.IntRange(min=0),
    default=1000,
    show_default=True,
    help="Games the learner trains before evaluation",
)
@click.option(
    "--games", "-n", type=click.IntRange(min=1), default=100, show_default=True,
    help="Evaluation games",
)
@click.option("--seed", type=int, default=500, show_default=True, help="Random seed")
def evaluate_command(train_games: int, games: int, seed: int) -> None:
    """Compare a random agent with an untrained and a trained learner.

    The learner plays Black in every game. It keeps learning while it is
    evaluated, as it does in training.

    Examples:
        hexapawn evaluate                      # 1000 training games, 100 evaluation games
        hexapawn evaluate --train-games 0      # Untrained learner only
    """
    all_results = []

    untrained = LearningAgent(seed=seed)
    all_results.append(
        evaluate_agents(
            RandomAgent(seed=seed + 1), untrained, "Random", "Learner (fresh)", num_games=games
        )
    )

    if train_games > 0:
        learner = LearningAgent(seed=seed)
        run_training(
            RandomAgent(seed=seed + 2), learner, num_games=train_games,
            learner=learner, learner_side=Side.BLACK,
        )
        all_results.append(
            evaluate_agents(
                RandomAgent(seed=seed + 1),
                learner,
                "Random",
                f"Learner ({train_games} games)",
                num_games=games,
            )
        )

    table = Table(title="Evaluation Results")
    table.add_column("White")
    table.add_column("Black")
    table.add_column("Games", justify="right")
    table.add_column("White Wins", justify="right")
    table.add_column("Black Wins", justify="right")
    table.add_column("Avg Moves", justify="right")
    for r in all_results:
        table.add_row(
            r["white_name"],
            r["black_name"],
            str(r["num_games"]),
            f"{r['white_wins']} ({r['white_win_rate']:.0%})",
            f"{r['black_wins']} ({r['black_win_rate']:.0%})",
            f"{r['avg_moves_per_game']:.1f}",
        )
    console.print(table)
