# Area: Shared
"""
tictac_cube._config — Engine configuration
==========================================

Validated settings for a game session. Values come from defaults, an
optional JSON file, and environment variables (a ``.env`` file in the
working directory is loaded first), in that order of precedence.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._board.enums import Player
from .errors import ConfigError

logger = logging.getLogger("tictac_cube.config")

# Environment variable -> config key
ENV_MAPPINGS = {
    "TICTAC_COMMIT_DELAY_MS": "commit_delay_ms",
    "TICTAC_INITIAL_PLAYER": "initial_player",
    "TICTAC_GATED_REQUIRES_TURN": "gated_requires_turn",
    "TICTAC_PENDING_ON_GAME_END": "pending_on_game_end",
    "TICTAC_DRAG_THRESHOLD": "drag_threshold",
    "TICTAC_CLICK_MAX_DURATION_MS": "click_max_duration_ms",
    "TICTAC_LOG_LEVEL": "log_level",
    "TICTAC_LOG_FILE": "log_file",
}


class EngineConfig(BaseModel):
    """
    Settings for one engine instance.

    Attributes:
        commit_delay_ms: Delay between activating the centre cell and its commit
        initial_player: Player who moves first after construction and reset (1 or 2)
        gated_requires_turn: Only the player to move may activate the centre cell
        pending_on_game_end: What happens to a pending centre claim when another
            move ends the game: "cancel" drops it, "commit" still records it
        drag_threshold: Pointer travel (screen units) that turns a press into a drag
        click_max_duration_ms: A press held this long or longer is not a click
        log_level: Logging level name for setup_logging()
        log_file: JSON log file path, or None for terminal only
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    commit_delay_ms: float = Field(default=1000.0, gt=0)
    initial_player: int = Field(default=1)
    gated_requires_turn: bool = True
    pending_on_game_end: Literal["cancel", "commit"] = "cancel"
    drag_threshold: float = Field(default=5.0, ge=0)
    click_max_duration_ms: float = Field(default=200.0, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("initial_player")
    @classmethod
    def _known_player(cls, value: int) -> int:
        if value not in (1, 2):
            raise ValueError("initial_player must be 1 or 2")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def first_player(self) -> Player:
        return Player(self.initial_player)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def build_config(values: Optional[Dict[str, Any]] = None) -> EngineConfig:
    """Validate a dict of settings, raising ConfigError on failure."""
    try:
        return EngineConfig.model_validate(values or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid engine configuration: {e.error_count()} error(s)",
                          errors=[err["msg"] for err in e.errors()]) from e


def load_config(config_path: Optional[str] = None, use_env: bool = True) -> EngineConfig:
    """
    Load config from an optional JSON file, then environment overrides.

    Args:
        config_path: Path to a JSON object of EngineConfig fields
        use_env: Read .env and TICTAC_* environment variables

    Raises:
        ConfigError: File missing/unreadable or values invalid
    """
    values: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                values = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file is not valid JSON: {path}") from e
        if not isinstance(values, dict):
            raise ConfigError(f"Config file must hold a JSON object: {path}")
        logger.debug("Loaded config from %s", path)

    if use_env:
        load_dotenv(find_dotenv(usecwd=True))
        for env_key, config_key in ENV_MAPPINGS.items():
            if env_key in os.environ:
                values[config_key] = os.environ[env_key]

    # pydantic coerces numeric/bool strings from the environment
    return build_config(values)
