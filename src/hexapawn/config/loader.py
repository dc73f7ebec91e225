"""Configuration loading and management."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from hexapawn.config.models import HexapawnConfig
from hexapawn.exceptions import ConfigurationError

CONFIG_DIR_NAME = ".hexapawn"


def load_config(config_path: Optional[Path] = None) -> HexapawnConfig:
    """Load Hexapawn configuration.

    Values from the file are merged over the model defaults. Without an
    explicit path, ``.hexapawn/config.yaml`` is looked up in the current
    directory and its parents.

    Args:
        config_path: Explicit path to a config file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or cannot be loaded
    """
    if config_path is not None and not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    path = config_path or _get_project_config_path()
    config_data: Dict[str, Any] = {}
    if path and path.exists():
        config_data = _load_yaml_file(path)

    try:
        return HexapawnConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def save_config(config: HexapawnConfig, config_path: Path) -> None:
    """Save configuration to a YAML file.

    Args:
        config: Configuration to save
        config_path: Path to save the configuration file

    Raises:
        ConfigurationError: If configuration cannot be saved
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_dict = config.model_dump(exclude_none=True, mode="json")

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                config_dict,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=2,
            )

    except OSError as e:
        raise ConfigurationError(
            f"Failed to save configuration to {config_path}: {e}"
        ) from e


def create_default_config() -> HexapawnConfig:
    """Create a default configuration."""
    return HexapawnConfig()


def _get_project_config_path() -> Optional[Path]:
    """Find ``.hexapawn/config.yaml`` in the current directory or a parent."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        config_dir = path / CONFIG_DIR_NAME
        if config_dir.is_dir():
            return config_dir / "config.yaml"

    return None


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load and parse a YAML file.

    Raises:
        ConfigurationError: If file cannot be read, parsed, or is not a mapping
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {file_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a YAML object, got {type(data)}"
        )

    return data

