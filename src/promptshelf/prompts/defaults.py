"""Bundled default prompts and their synchronization into a user library.

The defaults ship as a YAML file inside the package, in the same format as a
user library. Syncing loads the user's file when present, merges the defaults
with replace_prompts() and writes the result back, so prompts the user locked
with ``OkToReplace: false`` survive upgrades.
"""

import logging
from pathlib import Path
from typing import Any

from .library import DiskPromptLibrary
from .models import Prompt

__all__ = [
    "DEFAULTS_FILE",
    "load_default_prompts",
    "sync_default_prompts",
]

logger = logging.getLogger(__name__)

DEFAULTS_FILE = Path(__file__).parent / "defaults.yaml"


def load_default_prompts(path: str | Path | None = None) -> list[Prompt]:
    """Load the default prompt set.

    Args:
        path: Override defaults file (for testing or custom bundles)

    Returns:
        Prompts in file order

    Raises:
        FileReadError: If the defaults file cannot be read
        MalformedContentError: If the defaults file is invalid
    """
    defaults = DiskPromptLibrary(path or DEFAULTS_FILE)
    defaults.load()
    return defaults.prompts


def sync_default_prompts(
    library: DiskPromptLibrary,
    defaults: list[Prompt] | None = None,
) -> dict[str, Any]:
    """Merge default prompts into a library and save it.

    Args:
        library: Target library. Its file is loaded first if it exists.
        defaults: Prompts to merge (defaults to the bundled set)

    Returns:
        Dict with added/updated/skipped/total counts.
    """
    if library.exists():
        library.load()

    if defaults is None:
        defaults = load_default_prompts()

    result: dict[str, Any] = {
        "added": 0,
        "updated": 0,
        "skipped": 0,
        "total": 0,
    }

    # Replaceability of the first prompt per name, tracked as the merge applies
    replaceable: dict[str, bool] = {}
    for existing in library.prompts:
        replaceable.setdefault(existing.name, existing.ok_to_replace)

    for prompt in defaults:
        if prompt.name not in replaceable:
            result["added"] += 1
        elif replaceable[prompt.name]:
            result["updated"] += 1
        else:
            result["skipped"] += 1
            continue
        replaceable[prompt.name] = prompt.ok_to_replace

    library.replace_prompts(defaults)
    library.save()

    result["total"] = len(library)
    logger.info(
        f"Prompt sync complete: {result['added']} added, "
        f"{result['updated']} updated, {result['skipped']} skipped, "
        f"{result['total']} total in {library.path}"
    )
    return result
