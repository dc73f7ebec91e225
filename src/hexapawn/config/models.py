"""Configuration models for Hexapawn."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

AGENT_KINDS = ["random", "learning", "human"]


class TrainingConfig(BaseModel):
    """Training run configuration."""

    num_games: int = Field(default=1000, description="Games per run")
    eval_interval: int = Field(default=100, description="Games between metric records")
    white: str = Field(default="random", description="Agent kind playing White")
    black: str = Field(default="learning", description="Agent kind playing Black")
    seed: int = Field(default=500, description="Random seed")

    @field_validator("num_games", "eval_interval")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate positive integers."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("white", "black")
    @classmethod
    def validate_agent_kind(cls, v: str) -> str:
        """Validate agent kind."""
        v = v.lower()
        if v not in AGENT_KINDS:
            raise ValueError(f"agent must be one of: {', '.join(AGENT_KINDS)}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    record_games: bool = Field(default=False, description="Write games to JSONL")
    output_dir: str = Field(default=".hexapawn/logs", description="Log output directory")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class HexapawnConfig(BaseModel):
    """Main Hexapawn configuration."""

    training: TrainingConfig = Field(
        default_factory=TrainingConfig, description="Training configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def get_log_dir(self) -> Path:
        """Get the log directory as a Path object."""
        return Path(self.logging.output_dir).expanduser().resolve()
