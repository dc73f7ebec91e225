"""Agent implementations for Hexapawn."""

from hexapawn.agents.base import Agent, BaseAgent
from hexapawn.agents.random import RandomAgent
from hexapawn.agents.human import HumanAgent
from hexapawn.agents.learning import LearningAgent, SituationPreferences

__all__ = [
    "Agent",
    "BaseAgent",
    "RandomAgent",
    "HumanAgent",
    "LearningAgent",
    "SituationPreferences",
]
