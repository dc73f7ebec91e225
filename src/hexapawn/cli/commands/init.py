"""Hexapawn init command."""

from pathlib import Path

import click
from rich.console import Console

from hexapawn.config import create_default_config, save_config
from hexapawn.config.loader import CONFIG_DIR_NAME

console = Console()


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing configuration file",
)
def init_command(force: bool) -> None:
    """Write a default configuration to .hexapawn/config.yaml.

    Examples:
        hexapawn init            # Create the default configuration
        hexapawn init --force    # Reset it to defaults
    """
    config_dir = Path.cwd() / CONFIG_DIR_NAME
    config_path = config_dir / "config.yaml"

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Configuration already exists at {config_path}[/yellow]\n"
            "Use --force to overwrite"
        )
        return

    save_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Wrote default configuration to {config_path}")
