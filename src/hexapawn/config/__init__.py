"""Configuration for Hexapawn runs."""

from hexapawn.config.models import HexapawnConfig, LoggingConfig, TrainingConfig
from hexapawn.config.loader import create_default_config, load_config, save_config

__all__ = [
    "HexapawnConfig",
    "LoggingConfig",
    "TrainingConfig",
    "create_default_config",
    "load_config",
    "save_config",
]
