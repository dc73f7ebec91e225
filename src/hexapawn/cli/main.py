"""Main CLI entry point for Hexapawn."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from hexapawn.cli.commands.evaluate import evaluate_command
from hexapawn.cli.commands.init import init_command
from hexapawn.cli.commands.play import play_command
from hexapawn.cli.commands.train import sweep_command, train_command
from hexapawn.config import load_config
from hexapawn.exceptions import HexapawnError

console = Console()


def configure_logging(level: str) -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: Optional[Path]) -> None:
    """Hexapawn: a rote-learning matchbox player.

    Pits agents against each other on the 3x3 Hexapawn board. The learning
    agent forgets every move that led to a loss, backing up through the game
    while the positions it leaves behind have no trusted move left.

    \b
    Examples:
        hexapawn init                      # Write .hexapawn/config.yaml
        hexapawn train --games 2000        # Learner (Black) vs random (White)
        hexapawn sweep --seeds 1000 1010   # Knowledge size across seeds
        hexapawn play --train-games 500    # Play White against a trained learner
        hexapawn evaluate                  # Trained learner vs random
    """
    ctx.ensure_object(dict)

    hexapawn_config = load_config(config)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = hexapawn_config

    configure_logging("DEBUG" if verbose else hexapawn_config.logging.level)
    if verbose:
        console.print("[dim]Hexapawn CLI starting with verbose output enabled[/dim]")


cli.add_command(init_command, name="init")
cli.add_command(train_command, name="train")
cli.add_command(sweep_command, name="sweep")
cli.add_command(play_command, name="play")
cli.add_command(evaluate_command, name="evaluate")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except HexapawnError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
