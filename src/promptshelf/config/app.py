"""
Configuration for promptshelf.

Configuration is loaded with the following priority:
1. CLI arguments (highest)
2. YAML file (~/.promptshelf/config.yaml)
3. Defaults (lowest)
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from promptshelf.prompts.library import DiskPromptLibrary

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "LoggingSettings",
    "PromptShelfConfig",
    "apply_cli_overrides",
    "load_config",
    "load_yaml",
]

DEFAULT_CONFIG_FILE = "~/.promptshelf/config.yaml"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Log level",
    )


class PromptShelfConfig(BaseModel):
    """Main configuration for promptshelf."""

    library_path: str = Field(
        default="~/.promptshelf/prompts.yaml",
        description="Path to the YAML prompt library file",
    )
    verbose: bool = Field(
        default=False,
        description="Log diagnostics such as the number of prompts loaded",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging settings",
    )

    @field_validator("library_path")
    @classmethod
    def validate_library_path(cls, v: str) -> str:
        """Validate library path is not blank."""
        if not v.strip():
            raise ValueError("library_path must not be empty")
        return v

    def create_library(self) -> DiskPromptLibrary:
        """Build a library bound to the configured path."""
        return DiskPromptLibrary(self.library_path, verbose=self.verbose)


def load_yaml(config_file: str) -> dict[str, Any]:
    """Read a YAML config file into a dict.

    A missing or empty file gives ``{}``.

    Raises:
        ValueError: If the file is not ``.yaml``/``.yml``, is not valid YAML,
            or does not hold a mapping
    """
    config_path = Path(config_file).expanduser()
    if not config_path.exists():
        return {}

    if config_path.suffix.lower() not in (".yaml", ".yml"):
        raise ValueError(f"Config file must be .yaml or .yml: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def apply_cli_overrides(
    config_dict: dict[str, Any],
    cli_overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Apply CLI argument overrides to config dictionary.

    Keys may be dotted (``logging.level``) to reach nested settings. Overrides
    whose value is None are ignored so unset CLI options keep file values.

    Args:
        config_dict: Configuration dictionary
        cli_overrides: Dictionary of CLI overrides

    Returns:
        Configuration dictionary with CLI overrides applied
    """
    if cli_overrides is None:
        return config_dict

    for key, value in cli_overrides.items():
        if value is None:
            continue
        parts = key.split(".")
        current = config_dict
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    return config_dict


def load_config(
    config_file: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> PromptShelfConfig:
    """Build the config from defaults, the YAML file, then CLI overrides.

    Raises:
        ValueError: If the file or the merged settings are invalid
    """
    config_file = config_file or DEFAULT_CONFIG_FILE
    config_dict = apply_cli_overrides(load_yaml(config_file), cli_overrides)

    try:
        return PromptShelfConfig(**config_dict)
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed for {config_file}: {e}") from e
