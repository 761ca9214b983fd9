"""Pytest configuration and shared fixtures for promptshelf tests."""

from pathlib import Path

import pytest

from promptshelf.prompts import DiskPromptLibrary, Prompt


@pytest.fixture
def library_path(tmp_path: Path) -> Path:
    """Path for a library file inside a not-yet-created directory."""
    return tmp_path / "shelf" / "prompts.yaml"


@pytest.fixture
def library(library_path: Path) -> DiskPromptLibrary:
    """Empty library bound to library_path."""
    return DiskPromptLibrary(library_path)


@pytest.fixture
def sample_prompts() -> list[Prompt]:
    """A small mixed set of replaceable and locked prompts."""
    return [
        Prompt(name="greeting", content="Hello {name}, you are {age}", ok_to_replace=True),
        Prompt(name="plain", content="No fields here.", ok_to_replace=False),
        Prompt(name="echo", content="{x} and {x}", ok_to_replace=True),
    ]


@pytest.fixture
def populated_library(
    library: DiskPromptLibrary, sample_prompts: list[Prompt]
) -> DiskPromptLibrary:
    """Library holding sample_prompts, not yet saved."""
    for prompt in sample_prompts:
        library.add_prompt(prompt)
    return library
