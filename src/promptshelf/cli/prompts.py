"""
Prompt commands: list, show, fields, render, sync.
"""

import json
from pathlib import Path

import click

from promptshelf.prompts import (
    PromptLibraryError,
    get_fields,
    load_default_prompts,
    sync_default_prompts,
)

from .utils import get_config, open_library


@click.command("list")
@click.option("--json", "json_format", is_flag=True, help="Output as JSON")
@click.pass_context
def list_prompts(ctx: click.Context, json_format: bool) -> None:
    """List prompts in the library."""
    library = open_library(ctx)

    if json_format:
        click.echo(json.dumps([prompt.to_dict() for prompt in library], indent=2))
        return

    if not library.prompts:
        click.echo("No prompts found.")
        return

    for prompt in library:
        marker = "" if prompt.ok_to_replace else "  (locked)"
        click.echo(f"{prompt.name}{marker}")


@click.command("show")
@click.argument("name")
@click.pass_context
def show_prompt(ctx: click.Context, name: str) -> None:
    """Show the raw text of prompt NAME."""
    library = open_library(ctx)
    try:
        click.echo(library.get_uninterpolated_prompt(name))
    except PromptLibraryError as e:
        raise click.ClickException(str(e)) from e


@click.command("fields")
@click.argument("name")
@click.pass_context
def prompt_fields(ctx: click.Context, name: str) -> None:
    """List the placeholder fields prompt NAME requires."""
    library = open_library(ctx)
    try:
        fields = get_fields(library.get_uninterpolated_prompt(name))
    except PromptLibraryError as e:
        raise click.ClickException(str(e)) from e

    if not fields:
        click.echo("No fields.")
        return
    for field in fields:
        click.echo(field)


@click.command("render")
@click.argument("name")
@click.argument("pairs", nargs=-1)
@click.pass_context
def render_prompt(ctx: click.Context, name: str, pairs: tuple[str, ...]) -> None:
    """Render prompt NAME, filling fields from FIELD VALUE pairs.

    Example: promptshelf render summarize length 3 text "Some text"
    """
    library = open_library(ctx)
    try:
        click.echo(library.get_prompt(name, *pairs))
    except PromptLibraryError as e:
        raise click.ClickException(str(e)) from e


@click.command("sync")
@click.option(
    "--defaults",
    "defaults_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Defaults file to merge instead of the bundled set",
)
@click.pass_context
def sync_prompts(ctx: click.Context, defaults_file: Path | None) -> None:
    """Merge default prompts into the library and save it.

    Prompts marked OkToReplace: false in the library are kept as they are.
    """
    library = get_config(ctx).create_library()
    try:
        defaults = load_default_prompts(defaults_file)
        result = sync_default_prompts(library, defaults)
    except PromptLibraryError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Synced {library.path}: {result['added']} added, "
        f"{result['updated']} updated, {result['skipped']} kept, "
        f"{result['total']} total"
    )
