"""
Shared utilities for promptshelf CLI commands.
"""

import logging

import click

from promptshelf.config.app import PromptShelfConfig
from promptshelf.prompts import DiskPromptLibrary, PromptLibraryError

logger = logging.getLogger(__name__)


def setup_logging(level: str = "info", verbose: bool = False) -> None:
    """
    Configure logging for CLI.

    Args:
        level: Log level name from configuration
        verbose: If True, enable DEBUG level logging regardless of level
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_config(ctx: click.Context) -> PromptShelfConfig:
    """Return the configuration stored on the click context."""
    config: PromptShelfConfig = ctx.obj["config"]
    return config


def open_library(ctx: click.Context) -> DiskPromptLibrary:
    """
    Build the configured library and load its file if one exists.

    A missing file yields an empty library.

    Raises:
        click.ClickException: If the file exists but cannot be loaded
    """
    library = get_config(ctx).create_library()
    if not library.exists():
        logger.debug(f"No prompt library at {library.path}, starting empty")
        return library

    try:
        library.load()
    except PromptLibraryError as e:
        raise click.ClickException(str(e)) from e
    return library
