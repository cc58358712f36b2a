"""RouteRecord and RouteResult frozen dataclasses."""

import re
from dataclasses import dataclass, field
from typing import Any

from perch.routing.params import ParamKind, convert_param

WILDCARD_METHOD = "*"


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """A compiled, registered pattern.

    Created by ``Router.register()`` and never mutated afterwards. Every
    field is immutable, so records can be handed to callers as-is.

    Exactly one of ``literal`` and ``expression`` is set. Both compiled
    variants of an expression are kept so the router's current
    ``case_sensitive`` option decides which one runs.
    """

    path_pattern: str
    methods: frozenset[str]
    payload: Any
    literal: str | None = None
    expression: str | None = None
    param_names: tuple[str, ...] = ()
    param_kinds: tuple[ParamKind, ...] = ()
    is_greedy: bool = False
    _folded_literal: str | None = field(init=False, repr=False, compare=False)
    _sensitive: re.Pattern[str] | None = field(init=False, repr=False, compare=False)
    _insensitive: re.Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        folded = self.literal.lower() if self.literal is not None else None
        object.__setattr__(self, "_folded_literal", folded)
        if self.expression is None:
            object.__setattr__(self, "_sensitive", None)
            object.__setattr__(self, "_insensitive", None)
            return
        object.__setattr__(self, "_sensitive", re.compile(self.expression, re.DOTALL))
        object.__setattr__(
            self, "_insensitive", re.compile(self.expression, re.DOTALL | re.IGNORECASE)
        )

    @property
    def matcher(self) -> str | re.Pattern[str]:
        """The literal text, or the compiled expression.

        The expression shown is always the case-sensitive variant.
        ``Router.route()`` picks the case-sensitive or case-insensitive
        variant at call time from the router's current options.
        """
        if self._sensitive is not None:
            return self._sensitive
        return self.literal or ""

    @property
    def has_wildcard_method(self) -> bool:
        return WILDCARD_METHOD in self.methods

    def accepts(self, method: str) -> bool:
        """True if *method* (already upper-cased) may use this record."""
        return method in self.methods or WILDCARD_METHOD in self.methods

    def match(
        self, path: str, case_sensitive: bool, folded_path: str | None = None
    ) -> dict[str, str | int] | None:
        """Match a trimmed path, returning decoded params or ``None``.

        *folded_path* is the lower-cased path, when the caller already has it.
        A capture that cannot be converted (an integer too long for ``int``)
        counts as no match.
        """
        if self._sensitive is None or self._insensitive is None:
            if case_sensitive:
                return {} if path == self.literal else None
            folded = path.lower() if folded_path is None else folded_path
            return {} if folded == self._folded_literal else None

        compiled = self._sensitive if case_sensitive else self._insensitive
        m = compiled.match(path)
        if m is None:
            return None
        try:
            return {
                name: convert_param(value, kind)
                for name, kind, value in zip(
                    self.param_names, self.param_kinds, m.groups(), strict=True
                )
            }
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of ``Router.route()``.

    ``record`` is ``None`` when the default payload answered the request.
    """

    path: str
    method: str
    params: dict[str, str | int]
    record: RouteRecord | None
    payload: Any
    is_default: bool = False
