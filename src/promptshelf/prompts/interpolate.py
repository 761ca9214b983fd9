"""Placeholder scanning and substitution for prompt templates.

A placeholder is a ``{field}`` token whose name is one or more ASCII letters,
digits or underscores. Values are supplied as a flat list of field/value
pairs, for example::

    interpolate("Hello {name}, you are {age}", "name", "John", "age", "30")
"""

from __future__ import annotations

import re

from .errors import FieldCountMismatchError, MissingFieldError

PLACEHOLDER_PATTERN = re.compile(r"\{[a-zA-Z0-9_]+\}")


def get_fields(content: str) -> list[str]:
    """Return every placeholder token in order of appearance.

    Tokens keep their braces and repeated fields are listed once per
    occurrence.

    Args:
        content: Template text

    Returns:
        List of tokens such as ``["{name}", "{age}"]``
    """
    return PLACEHOLDER_PATTERN.findall(content)


def interpolate(content: str, *args: str) -> str:
    """Fill the placeholders of a template.

    Args:
        content: Template text
        *args: Alternating field names and values. Two entries are required
            for every placeholder occurrence, so ``"{x} and {x}"`` needs four.
            When a field name is given twice the last value wins.

    Returns:
        The template with every placeholder replaced

    Raises:
        FieldCountMismatchError: If ``len(args)`` is not twice the number of
            placeholder occurrences
        MissingFieldError: If a placeholder has no matching field name
    """
    fields = get_fields(content)

    if len(fields) * 2 != len(args):
        raise FieldCountMismatchError(fields, len(args))

    values = {args[i]: args[i + 1] for i in range(0, len(args), 2)}

    for field in fields:
        if field[1:-1] not in values:
            raise MissingFieldError(field, fields)

    # Single pass, so placeholders inside substituted values stay literal.
    return PLACEHOLDER_PATTERN.sub(lambda m: str(values[m.group(0)[1:-1]]), content)
