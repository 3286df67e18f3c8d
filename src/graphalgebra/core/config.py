# src/graphalgebra/core/config.py
"""
Configuration schema and loading for graphalgebra.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from graphalgebra.contracts.errors import ConfigurationError


class LoggingSettings(BaseModel):
    """Logging output configuration.

    Example YAML:
        logging:
          level: DEBUG
          json_output: true
    """

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON lines instead of console output",
    )


class UnionSettings(BaseModel):
    """Defaults for merging union."""

    model_config = {"frozen": True, "extra": "forbid"}

    parallel_free: bool = Field(
        default=False,
        description="Remove parallel edges from the union result",
    )
    directed: bool = Field(
        default=False,
        description="Treat direction as significant when detecting parallel edges",
    )


class ComplementSettings(BaseModel):
    """Defaults for complement."""

    model_config = {"frozen": True, "extra": "forbid"}

    directional: bool = Field(
        default=False,
        description="Complement ordered pairs instead of unordered pairs",
    )
    allow_self_loops: bool = Field(
        default=False,
        description="Treat (v, v) as an eligible pair",
    )


class GraphAlgebraSettings(BaseModel):
    """Top-level settings.

    Example YAML:
        logging:
          level: INFO
        union:
          parallel_free: true
        complement:
          directional: true
    """

    model_config = {"frozen": True, "extra": "forbid"}

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    union: UnionSettings = Field(default_factory=UnionSettings)
    complement: ComplementSettings = Field(default_factory=ComplementSettings)


def load_settings(config_path: Path) -> GraphAlgebraSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (GRAPHALGEBRA_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: GRAPHALGEBRA_UNION__PARALLEL_FREE for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated GraphAlgebraSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If the file does not contain a mapping
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="GRAPHALGEBRA",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}
    for section, value in raw_config.items():
        if not isinstance(value, dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping, got {type(value).__name__}")
        raw_config[section] = {k.lower(): v for k, v in value.items()}

    return GraphAlgebraSettings(**raw_config)
