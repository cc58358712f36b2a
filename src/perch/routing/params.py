"""Placeholder kinds and parameter conversion.

Built-in kinds for pattern placeholders like ``{name}``, ``{#id}`` and
``{+rest}``.
"""

import re
from typing import Literal

ParamKind = Literal["string", "integer", "greedy"]

# Prefix character inside the braces -> kind
PREFIXES: dict[str, ParamKind] = {
    "": "string",
    "#": "integer",
    "+": "greedy",
}

# (regex_pattern, python_type) for kinds that ignore the separator
CONVERTERS: dict[str, tuple[str, type]] = {
    "integer": (r"([0-9]+)", int),
    "greedy": (r"(.+)", str),
}


def segment_pattern(separator: str) -> str:
    """Capturing group for a ``string`` placeholder.

    Matches one or more characters, none of which starts an occurrence
    of *separator*. A multi-character separator is excluded as a whole.
    """
    return f"((?:(?!{re.escape(separator)}).)+)"


def group_pattern(kind: ParamKind, separator: str) -> str:
    """Return the capturing group that stands in for a placeholder of *kind*."""
    if kind == "string":
        return segment_pattern(separator)
    pattern, _ = CONVERTERS[kind]
    return pattern


def convert_param(value: str, kind: ParamKind) -> str | int:
    """Convert a captured placeholder string to its kind's type.

    ``integer`` values are parsed as base-10, so ``"007"`` becomes ``7``.
    Raises ``KeyError`` if *kind* is not a known placeholder kind.
    """
    if kind == "string":
        return value
    _, target_type = CONVERTERS[kind]
    if target_type is int:
        return int(value, 10)
    return target_type(value)
