"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from sdg_agents.models.card import DECK_COUNTS


class PlayerConfig(BaseModel):
    """One seat in the roster."""

    name: str
    automated: bool = True
    initiator: bool = False


def _default_roster() -> list[PlayerConfig]:
    return [
        PlayerConfig(name="Agent Alpha", automated=False, initiator=True),
        PlayerConfig(name="Agent Byte"),
        PlayerConfig(name="Agent Logic"),
    ]


class GameConfig(BaseModel):
    """Game configuration."""

    target_score: int = 63
    deck_counts: dict[int, int] = Field(default_factory=lambda: dict(DECK_COUNTS))
    players: list[PlayerConfig] = Field(default_factory=_default_roster)


class AutomationConfig(BaseModel):
    """Automated player configuration."""

    delay_seconds: float = 2.0
    draw_probability: float = 0.7
    max_table_for_draw: int = 2  # Draw only while fewer cards are on the table


class AdvisorConfig(BaseModel):
    """Strategist advice and goal insight configuration."""

    enabled: bool = True
    model: str = "gemini-3-flash-preview"
    api_key: str | None = None  # Falls back to GOOGLE_API_KEY / GEMINI_API_KEY
    debounce_seconds: float = 1.0
    insight_display_seconds: float = 8.0
    advice_temperature: float = 0.7
    insight_temperature: float = 0.8


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogDirConfig(BaseModel):
    """Event log directory configuration (file names are generated)."""

    enabled: bool = False
    directory: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = Field(default_factory=GameConfig)
    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    advisor: AdvisorConfig = Field(default_factory=AdvisorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game_log: GameLogDirConfig = Field(default_factory=GameLogDirConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
