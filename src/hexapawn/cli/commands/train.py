"""Hexapawn train and sweep commands."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from hexapawn.agents import LearningAgent
from hexapawn.board import Side
from hexapawn.cli.agents import build_agent
from hexapawn.config import HexapawnConfig
from hexapawn.director import GameDirector
from hexapawn.tracking import GameRecorder
from hexapawn.train import TrainingMetrics, run_seed_sweep, run_training
from hexapawn.visualize import plot_learning_curves, print_training_summary

console = Console()

AGENT_CHOICES = click.Choice(["random", "learning", "human"])


@click.command()
@click.option("--games", "-n", type=click.IntRange(min=1), help="Number of games to play")
@click.option("--interval", type=click.IntRange(min=1), help="Games between progress rows")
@click.option("--white", type=AGENT_CHOICES, help="Agent playing White")
@click.option("--black", type=AGENT_CHOICES, help="Agent playing Black")
@click.option("--seed", type=int, help="Random seed")
@click.option(
    "--save-plot",
    type=click.Path(path_type=Path),
    help="Save learning curves to this image file",
)
@click.option("--record", is_flag=True, help="Record every game to a JSONL log")
@click.pass_context
def train_command(
    ctx: click.Context,
    games: Optional[int],
    interval: Optional[int],
    white: Optional[str],
    black: Optional[str],
    seed: Optional[int],
    save_plot: Optional[Path],
    record: bool,
) -> None:
    """Play many games between two agents and report the tallies.

    Options left unset fall back to the configuration file.

    Examples:
        hexapawn train                          # Random (White) vs learner (Black)
        hexapawn train --white learning -n 5000 # Two learners
        hexapawn train --record                 # Keep a JSONL record of the games
    """
    config: HexapawnConfig = ctx.obj["config"]
    training = config.training

    games = training.num_games if games is None else games
    interval = training.eval_interval if interval is None else interval
    seed = training.seed if seed is None else seed
    white_agent = build_agent(white or training.white, seed + 1, console)
    black_agent = build_agent(black or training.black, seed, console)

    learner, learner_side = _pick_learner(white_agent, black_agent)

    recorder = None
    if record or config.logging.record_games:
        run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
        recorder = GameRecorder(run_id, config.get_log_dir())
        console.print(f"[dim]Recording games to: {recorder.games_log_file}[/dim]")

    director = GameDirector(verbose=ctx.obj.get("verbose", False), recorder=recorder)
    metrics = run_training(
        white_agent,
        black_agent,
        num_games=games,
        eval_interval=interval,
        learner=learner,
        learner_side=learner_side,
        director=director,
    )

    _display_metrics(metrics)
    print_training_summary(metrics.to_dict())
    stats = metrics.win_stats
    console.print(
        f"WIN STATS: White {stats[Side.WHITE]}, Black {stats[Side.BLACK]}"
    )
    if learner is not None:
        console.print(
            f"Knowledge size for {learner_side.name.lower()}: "
            f"{learner.knowledge_size(learner_side)}"
        )

    if save_plot:
        save_plot.parent.mkdir(parents=True, exist_ok=True)
        plot_learning_curves(metrics.to_dict(), save_path=str(save_plot))


@click.command()
@click.option(
    "--seeds",
    type=int,
    nargs=2,
    default=(1000, 1010),
    show_default=True,
    help="Opponent seed range, start inclusive, end exclusive",
)
@click.option(
    "--games", "-n", type=click.IntRange(min=1), default=1000, show_default=True,
    help="Games per seed",
)
@click.option(
    "--opponent",
    type=click.Choice(["random", "learning"]),
    default="random",
    show_default=True,
    help="Agent playing White",
)
@click.option("--learner-seed", type=int, default=500, show_default=True, help="Seed of the learner")
def sweep_command(
    seeds: Tuple[int, int], games: int, opponent: str, learner_seed: int
) -> None:
    """Train a fresh learner against each seeded opponent.

    Reports how many situations the Black learner needed per seed and the
    maximum over all seeds.

    Examples:
        hexapawn sweep                         # Seeds 1000-1009
        hexapawn sweep --opponent learning     # Learner against learner
    """
    start, end = seeds
    result = run_seed_sweep(
        range(start, end),
        games_per_seed=games,
        opponent=opponent,
        learner_seed=learner_seed,
    )

    table = Table(title="Seed Sweep")
    table.add_column("Seed", justify="right")
    table.add_column("White Wins", justify="right")
    table.add_column("Black Wins", justify="right")
    table.add_column("Knowledge", justify="right")
    for run in result.runs:
        table.add_row(
            str(run.seed),
            str(run.white_wins),
            str(run.black_wins),
            str(run.max_knowledge),
        )
    console.print(table)
    console.print(f"MAX knowledge size: {result.max_knowledge}")


def _pick_learner(white, black) -> Tuple[Optional[LearningAgent], Side]:
    """Pick the learner to report on, preferring Black."""
    if isinstance(black, LearningAgent):
        return black, Side.BLACK
    if isinstance(white, LearningAgent):
        return white, Side.WHITE
    return None, Side.BLACK


def _display_metrics(metrics: TrainingMetrics) -> None:
    table = Table(title="Training Progress")
    table.add_column("Game", justify="right")
    table.add_column("White", justify="right")
    table.add_column("Black", justify="right")
    table.add_column("Knowledge", justify="right")
    table.add_column("Trusted Moves", justify="right")

    for i, game in enumerate(metrics.games):
        table.add_row(
            str(game),
            f"{metrics.white_wins[i]} ({metrics.white_win_rates[i]:.0%})",
            f"{metrics.black_wins[i]} ({metrics.black_win_rates[i]:.0%})",
            str(metrics.knowledge_sizes[i]),
            str(metrics.trusted_moves[i]),
        )

    console.print(table)
