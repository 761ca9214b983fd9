"""
Disk-backed prompt library.

DiskPromptLibrary keeps an ordered list of prompts bound to a YAML file.
Users edit that file to customize prompts; defaults are merged in with
replace_prompts(), which leaves prompts marked ``OkToReplace: false`` alone.

File format::

    - Name: greeting
      Prompt: Hello {name}!
      OkToReplace: true
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol

import yaml

from .errors import (
    DirectoryAccessError,
    EmptyLibraryError,
    FileReadError,
    FileWriteError,
    MalformedContentError,
    PromptNotFoundError,
    SerializationError,
)
from .interpolate import interpolate
from .models import Prompt, load_records

logger = logging.getLogger(__name__)


class PromptLibrary(Protocol):
    """Interface for prompt libraries."""

    def get_prompt(self, name: str, *args: str) -> str: ...

    def get_uninterpolated_prompt(self, name: str) -> str: ...

    def interpolate_prompt(self, content: str, *args: str) -> str: ...

    def replace_prompts(self, new_prompts: Iterable[Prompt]) -> None: ...

    def save(self) -> None: ...

    def load(self) -> None: ...

    def exists(self) -> bool: ...


class DiskPromptLibrary:
    """Prompt library persisted as a YAML file.

    Usage:
        library = DiskPromptLibrary("~/.promptshelf/prompts.yaml")
        if library.exists():
            library.load()
        library.replace_prompts(load_default_prompts())
        library.save()
        text = library.get_prompt("summarize", "text", document)
    """

    def __init__(
        self,
        path: str | Path,
        verbose: bool = False,
        verbose_logger: logging.Logger | None = None,
    ) -> None:
        """Initialize an empty library bound to a file.

        Args:
            path: Location of the YAML backing file
            verbose: Emit diagnostics (loaded prompt counts)
            verbose_logger: Logger receiving diagnostics, defaults to this
                module's logger
        """
        self.path = Path(path).expanduser()
        self.verbose = verbose
        self.verbose_logger = verbose_logger or logger
        self.prompts: list[Prompt] = []

    def __len__(self) -> int:
        return len(self.prompts)

    def __iter__(self) -> Iterator[Prompt]:
        return iter(self.prompts)

    def names(self) -> list[str]:
        """Return prompt names in library order."""
        return [prompt.name for prompt in self.prompts]

    def find_prompt(self, name: str) -> int | None:
        """Return the index of the first prompt named ``name``, or None."""
        for index, prompt in enumerate(self.prompts):
            if prompt.name == name:
                return index
        return None

    def add_prompt(self, prompt: Prompt) -> None:
        """Append a prompt without checking for an existing name."""
        self.prompts.append(prompt)

    def _require(self, name: str) -> Prompt:
        index = self.find_prompt(name)
        if index is None:
            raise PromptNotFoundError(name)
        return self.prompts[index]

    def get_prompt(self, name: str, *args: str) -> str:
        """Fetch a prompt and interpolate its fields.

        Args:
            name: Prompt name
            *args: Alternating field names and values, e.g.
                ``get_prompt("intro", "name", "John", "age", "30")``

        Returns:
            Interpolated prompt text

        Raises:
            PromptNotFoundError: If no prompt has this name
            InterpolationError: If the arguments do not match the fields
        """
        return interpolate(self._require(name).content, *args)

    def get_uninterpolated_prompt(self, name: str) -> str:
        """Fetch a prompt's raw text, leaving placeholders in place.

        Raises:
            PromptNotFoundError: If no prompt has this name
        """
        return self._require(name).content

    def interpolate_prompt(self, content: str, *args: str) -> str:
        """Interpolate arbitrary template text without a library lookup."""
        return interpolate(content, *args)

    def replace_prompts(self, new_prompts: Iterable[Prompt]) -> None:
        """Merge prompts into the library by name.

        Unknown names are appended. A prompt with a known name overwrites the
        existing one in place only when the existing prompt allows it
        (``ok_to_replace``); otherwise the new prompt is dropped.

        Args:
            new_prompts: Prompts to merge, in order
        """
        for new_prompt in new_prompts:
            index = self.find_prompt(new_prompt.name)
            if index is None:
                self.prompts.append(new_prompt)
            elif self.prompts[index].ok_to_replace:
                self.prompts[index] = new_prompt

    def exists(self) -> bool:
        """Check whether the backing file exists. Call before load()."""
        return self.path.is_file()

    def save(self) -> None:
        """Write all prompts to the backing file.

        Missing parent directories are created.

        Raises:
            EmptyLibraryError: If the library holds no prompts
            SerializationError: If the prompts cannot be encoded
            DirectoryAccessError: If the parent directory cannot be created
            FileWriteError: If the file cannot be written
        """
        if not self.prompts:
            raise EmptyLibraryError(self.path)

        try:
            content = yaml.safe_dump(
                [prompt.to_record() for prompt in self.prompts],
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            raise SerializationError(self.path) from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryAccessError(self.path) from e

        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(self.path) from e

    def load(self) -> None:
        """Replace the in-memory prompts with the contents of the backing file.

        Raises:
            FileReadError: If the file cannot be read
            MalformedContentError: If the file is not a YAML list of prompts
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(self.path) from e

        try:
            data = load_records(raw)
        except yaml.YAMLError as e:
            raise MalformedContentError(self.path, str(e)) from e

        if data is None:
            data = []
        if not isinstance(data, list):
            raise MalformedContentError(
                self.path, f"expected a list of prompts, got {type(data).__name__}"
            )

        try:
            self.prompts = [Prompt.from_record(record) for record in data]
        except ValueError as e:
            raise MalformedContentError(self.path, str(e)) from e

        if self.verbose:
            self.verbose_logger.info(
                f"Loaded {len(self.prompts)} prompts from {self.path}"
            )
