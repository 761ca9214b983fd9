"""
promptshelf CLI entry point.
"""

import click

from promptshelf.config.app import load_config

from .prompts import list_prompts, prompt_fields, render_prompt, show_prompt, sync_prompts
from .utils import setup_logging


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to custom configuration file",
)
@click.option(
    "--library",
    "library_path",
    type=click.Path(),
    help="Path to the prompt library file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    library_path: str | None,
    verbose: bool,
) -> None:
    """promptshelf - manage named prompt templates."""
    ctx.ensure_object(dict)
    try:
        app_config = load_config(
            config,
            cli_overrides={"library_path": library_path, "verbose": verbose or None},
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(app_config.logging.level, verbose=verbose)
    ctx.obj["config"] = app_config


cli.add_command(list_prompts)
cli.add_command(show_prompt)
cli.add_command(prompt_fields)
cli.add_command(render_prompt)
cli.add_command(sync_prompts)
