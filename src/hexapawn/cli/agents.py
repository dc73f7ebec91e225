"""Agent construction for CLI commands."""

from typing import Optional

from rich.console import Console

from hexapawn.agents import Agent, HumanAgent
from hexapawn.train import make_opponent


def build_agent(kind: str, seed: Optional[int], console: Optional[Console] = None) -> Agent:
    """Build an agent from its kind name (``random``, ``learning`` or ``human``)."""
    if kind == "human":
        return HumanAgent(console=console)
    return make_opponent(kind, seed)
