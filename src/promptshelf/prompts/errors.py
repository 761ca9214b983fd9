"""Custom exceptions for the prompt library."""

from __future__ import annotations

from pathlib import Path


class PromptLibraryError(Exception):
    """Base class for all prompt library errors."""


class PromptNotFoundError(PromptLibraryError, LookupError):
    """Raised when no prompt with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Prompt not found: {name}")
        self.name = name


class InterpolationError(PromptLibraryError, ValueError):
    """Raised when a prompt's fields cannot be filled from the given arguments."""

    def __init__(self, message: str, fields: list[str]) -> None:
        super().__init__(message)
        self.fields = fields


class FieldCountMismatchError(InterpolationError):
    """Raised when the argument list is not two entries per field occurrence."""

    def __init__(self, fields: list[str], arg_count: int) -> None:
        super().__init__(
            f"Incorrect number of fields provided, prompt requires fields "
            f"({', '.join(fields)})",
            fields,
        )
        self.arg_count = arg_count


class MissingFieldError(InterpolationError):
    """Raised when a placeholder has no value in the supplied arguments."""

    def __init__(self, field: str, fields: list[str]) -> None:
        super().__init__(
            f"Missing field {field}, prompt requires fields ({', '.join(fields)})",
            fields,
        )
        self.field = field


class LibraryFileError(PromptLibraryError):
    """Base class for errors tied to the library's backing file."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class EmptyLibraryError(LibraryFileError):
    """Raised when saving a library that holds no prompts."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            "No prompts to write, please initialize the prompt library", path
        )


class SerializationError(LibraryFileError):
    """Raised when the prompt records cannot be encoded as YAML."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Unable to serialize prompt library for {path}", path)


class DirectoryAccessError(LibraryFileError):
    """Raised when the parent directory of the library file cannot be created."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Unable to access directory {path.parent}, "
            "please check write permissions and try again",
            path,
        )


class FileWriteError(LibraryFileError):
    """Raised when the library file cannot be written."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Unable to write {path}, please check write permissions and try again",
            path,
        )


class FileReadError(LibraryFileError):
    """Raised when the library file cannot be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Unable to access prompt file {path}, "
            "please check read permissions and try again",
            path,
        )


class MalformedContentError(LibraryFileError):
    """Raised when the library file is not a valid list of prompt records."""

    def __init__(self, path: Path, detail: str = "") -> None:
        message = f"Prompt file {path} is not formatted correctly"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, path)
        self.detail = detail
