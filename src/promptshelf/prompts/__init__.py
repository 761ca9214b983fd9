"""
Prompt library: named templates stored in a YAML file.

Provides:
- DiskPromptLibrary for lookup, merge and persistence
- Flat ``{field}`` interpolation
- Bundled defaults that merge without overwriting locked prompts
"""

from .defaults import DEFAULTS_FILE, load_default_prompts, sync_default_prompts
from .errors import (
    DirectoryAccessError,
    EmptyLibraryError,
    FieldCountMismatchError,
    FileReadError,
    FileWriteError,
    InterpolationError,
    LibraryFileError,
    MalformedContentError,
    MissingFieldError,
    PromptLibraryError,
    PromptNotFoundError,
    SerializationError,
)
from .interpolate import get_fields, interpolate
from .library import DiskPromptLibrary, PromptLibrary
from .models import Prompt

__all__ = [
    "DEFAULTS_FILE",
    "DirectoryAccessError",
    "DiskPromptLibrary",
    "EmptyLibraryError",
    "FieldCountMismatchError",
    "FileReadError",
    "FileWriteError",
    "InterpolationError",
    "LibraryFileError",
    "MalformedContentError",
    "MissingFieldError",
    "Prompt",
    "PromptLibrary",
    "PromptLibraryError",
    "PromptNotFoundError",
    "SerializationError",
    "get_fields",
    "interpolate",
    "load_default_prompts",
    "sync_default_prompts",
]
