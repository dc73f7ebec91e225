"""Hexapawn play command."""

import click
from rich.console import Console

from hexapawn.agents import HumanAgent, LearningAgent, RandomAgent
from hexapawn.board import Side
from hexapawn.director import GameDirector
from hexapawn.exceptions import AgentContractViolation
from hexapawn.train import run_training

console = Console()


@click.command()
@click.option(
    "--side",
    type=click.Choice(["white", "black"]),
    default="white",
    show_default=True,
    help="Colour you play",
)
@click.option(
    "--train-games",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Games the learner plays against a random agent first",
)
@click.option(
    "--games", "-n", type=click.IntRange(min=1), default=1, show_default=True, help="Games to play"
)
@click.option("--seed", type=int, default=500, show_default=True, help="Learner seed")
def play_command(side: str, train_games: int, games: int, seed: int) -> None:
    """Play against the learning agent at the console.

    Cells are numbered 0-8; row 2 (cells 6-8) is printed on top. White moves
    toward row 0, Black toward row 2. An illegal move forfeits the session.

    Examples:
        hexapawn play                        # You are White against a fresh learner
        hexapawn play --train-games 1000     # Learner trained first
        hexapawn play --side black -n 3      # Three games as Black
    """
    human_side = Side.WHITE if side == "white" else Side.BLACK
    learner_side = human_side.opposite
    learner = LearningAgent(seed=seed)

    if train_games > 0:
        console.print(f"[dim]Training learner for {train_games} games...[/dim]")
        sparring = RandomAgent(seed=seed + 1)
        if learner_side is Side.WHITE:
            run_training(learner, sparring, num_games=train_games, learner=learner,
                         learner_side=learner_side)
        else:
            run_training(sparring, learner, num_games=train_games, learner=learner,
                         learner_side=learner_side)
        console.print(
            f"[dim]Knowledge size: {learner.knowledge_size(learner_side)}[/dim]"
        )

    human = HumanAgent(console=console)
    white, black = (human, learner) if human_side is Side.WHITE else (learner, human)
    director = GameDirector()
    wins = {Side.WHITE: 0, Side.BLACK: 0}

    for _ in range(games):
        console.print("---- NEW GAME ----")
        try:
            result = director.conduct_game(white, black)
        except AgentContractViolation as e:
            raise click.ClickException(str(e))

        wins[result.winner] += 1
        console.print(f"WINNER: {result.winner.name}")
        console.print(result.final_board.render())
        console.print(f"WIN STATS: White {wins[Side.WHITE]}, Black {wins[Side.BLACK]}")
