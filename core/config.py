"""Configuration loader -- reads an optional config.yaml, validates with Pydantic.

Nothing is read unless a path is passed explicitly; without one the defaults
below reproduce the standard output contract exactly.
Fails fast with clear errors if the file is missing or invalid.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from core.errors import ConfigError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Config models (Pydantic)
# ---------------------------------------------------------------------------

class YearConfig(BaseModel):
    enabled: bool = True
    # lenient: a year token that fails to expand is treated as part of the command
    # strict: a token of field syntax (digits or "*" plus ",-/") that fails is
    # reported like any other field error; other tokens start the command
    policy: Literal["lenient", "strict"] = "lenient"
    years_back: int = Field(default=2, ge=0)
    years_ahead: int = Field(default=25, ge=0)


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    year: YearConfig = Field(default_factory=YearConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Returns defaults when no path is given. Raises ConfigError when the
    file is missing, is not valid YAML, or fails validation.
    """
    if config_path is None:
        logger.debug("No config file given, using defaults")
        return AppConfig()

    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config file {config_path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"config file {config_path} must contain a mapping")

    try:
        config = AppConfig(**raw_config)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigError(f"invalid config {config_path}: {location}: {first['msg']}") from e

    logger.info("Loaded config from %s", config_path)
    return config
