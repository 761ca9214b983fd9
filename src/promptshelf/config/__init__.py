"""Configuration models and loading."""

from .app import LoggingSettings, PromptShelfConfig, load_config

__all__ = ["LoggingSettings", "PromptShelfConfig", "load_config"]
