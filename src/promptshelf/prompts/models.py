"""Prompt record model and its YAML record form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

# Keys used in the backing file, in the order they are written.
NAME_KEY = "Name"
PROMPT_KEY = "Prompt"
OK_TO_REPLACE_KEY = "OkToReplace"

# Older files were written with lower-cased keys.
_LEGACY_KEYS = {
    NAME_KEY: "name",
    PROMPT_KEY: "prompt",
    OK_TO_REPLACE_KEY: "oktoreplace",
}

# YAML 1.1 boolean spellings accepted for OkToReplace.
_TRUE_VALUES = {"y", "yes", "true", "on"}
_FALSE_VALUES = {"n", "no", "false", "off"}

_NULL_TAG = "tag:yaml.org,2002:null"


class PromptFileLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text.

    Only null is still resolved implicitly, so ``Prompt: 010`` loads as
    ``"010"`` rather than ``8``. OkToReplace is converted by the record
    parser instead.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def load_records(content: str) -> Any:
    """Parse backing-file text with PromptFileLoader.

    Raises:
        yaml.YAMLError: If the text is not valid YAML
    """
    return yaml.load(content, Loader=PromptFileLoader)  # nosec B506 - SafeLoader subclass


def _get(record: dict[Any, Any], key: str) -> Any:
    if key in record:
        return record[key]
    return record.get(_LEGACY_KEYS[key])


def _as_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")


def _as_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{OK_TO_REPLACE_KEY} must be a boolean, got {value!r}")


@dataclass
class Prompt:
    """A named prompt template.

    Attributes:
        name: Lookup key. Not forced unique on raw insertion.
        content: Template text with ``{field}`` placeholders.
        ok_to_replace: Whether a later merge may overwrite this prompt.
    """

    name: str
    content: str
    ok_to_replace: bool = False

    @classmethod
    def from_record(cls, record: Any) -> Prompt:
        """Create a Prompt from a decoded YAML mapping.

        Args:
            record: Mapping with ``Name``, ``Prompt`` and ``OkToReplace`` keys.
                Missing keys fall back to empty values.

        Returns:
            Prompt instance

        Raises:
            ValueError: If the record is not a mapping or a value has the
                wrong type
        """
        if not isinstance(record, dict):
            raise ValueError(
                f"prompt record must be a mapping, got {type(record).__name__}"
            )

        return cls(
            name=_as_text(_get(record, NAME_KEY), NAME_KEY),
            content=_as_text(_get(record, PROMPT_KEY), PROMPT_KEY),
            ok_to_replace=_as_bool(_get(record, OK_TO_REPLACE_KEY)),
        )

    def to_record(self) -> dict[str, Any]:
        """Convert to the mapping written to the backing file."""
        return {
            NAME_KEY: self.name,
            PROMPT_KEY: self.content,
            OK_TO_REPLACE_KEY: self.ok_to_replace,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "content": self.content,
            "ok_to_replace": self.ok_to_replace,
        }
