"""Pattern compiler.

Turns a registered pattern string into either a literal (no
placeholders) or an anchored regular expression with one capture group
per placeholder, in left-to-right order.
"""

import re
from dataclasses import dataclass

from perch.errors import DuplicateParameterError
from perch.routing.params import PREFIXES, ParamKind, group_pattern

# {name}, {#name}, {+name}. Anything else inside braces is literal text.
_PLACEHOLDER = re.compile(r"\{([#+]?)([A-Za-z0-9_.\-]+)\}")


@dataclass(frozen=True, slots=True)
class PatternToken:
    """A parsed piece of a pattern.

    Literal:      ``/users/``  (is_param=False)
    Placeholder:  ``{#id}``    (is_param=True, param_name="id", param_kind="integer")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_kind: ParamKind = "string"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Output of ``compile_pattern()``.

    ``expression`` is ``None`` for literal patterns; ``literal`` is
    ``None`` for placeholder patterns.
    """

    literal: str | None
    expression: str | None
    param_names: tuple[str, ...] = ()
    param_kinds: tuple[ParamKind, ...] = ()
    is_greedy: bool = False


def tokenize_pattern(pattern: str) -> list[PatternToken]:
    """Split a pattern into literal and placeholder tokens.

    Examples::

        "/users"            -> [PatternToken("/users")]
        "/users/{#id}"      -> [PatternToken("/users/"), PatternToken("{#id}", is_param=True, ...)]
        "order {#n} {item}" -> [literal, integer, literal, string]
        "/a/{}/b"           -> [PatternToken("/a/{}/b")]
    """
    tokens: list[PatternToken] = []
    pos = 0
    for m in _PLACEHOLDER.finditer(pattern):
        if m.start() > pos:
            tokens.append(PatternToken(value=pattern[pos : m.start()]))
        prefix, name = m.groups()
        tokens.append(
            PatternToken(
                value=m.group(0),
                is_param=True,
                param_name=name,
                param_kind=PREFIXES[prefix],
            )
        )
        pos = m.end()
    if pos < len(pattern):
        tokens.append(PatternToken(value=pattern[pos:]))
    return tokens


def compile_pattern(pattern: str, separator: str) -> CompiledPattern:
    """Compile *pattern* against the given *separator*.

    Raises ``DuplicateParameterError`` if a placeholder name repeats,
    whatever kind prefix each occurrence carries.
    """
    tokens = tokenize_pattern(pattern)
    params = [t for t in tokens if t.is_param]
    if not params:
        return CompiledPattern(literal=pattern, expression=None)

    names: list[str] = []
    for token in params:
        name = token.param_name or ""
        if name in names:
            raise DuplicateParameterError(pattern, name)
        names.append(name)

    parts: list[str] = []
    for token in tokens:
        if token.is_param:
            parts.append(group_pattern(token.param_kind, separator))
        else:
            parts.append(re.escape(token.value))

    kinds = tuple(t.param_kind for t in params)
    return CompiledPattern(
        literal=None,
        expression=rf"\A{''.join(parts)}\Z",
        param_names=tuple(names),
        param_kinds=kinds,
        is_greedy="greedy" in kinds,
    )
