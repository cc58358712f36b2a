"""Ordered router with typed placeholder extraction.

Patterns are compiled at registration time and tried in registration
order when a path is resolved. Greedy (``{+name}``) patterns only win
when no more specific pattern accepts the request.
"""

import logging
import threading
import warnings
from collections.abc import Iterable
from typing import Any

from perch.config import RouterConfig, option_names
from perch.errors import ConfigurationError, RouteNotFound
from perch.routing.pattern import compile_pattern
from perch.routing.route import RouteRecord, RouteResult
from perch.routing.table import RouteTable

logger = logging.getLogger("perch.routing")

_shared: "Router | None" = None
_shared_lock = threading.Lock()


def trim_separator(path: str, separator: str) -> str:
    """Strip trailing *separator* occurrences, never below one separator.

    ``"/users//"`` -> ``"/users"``, ``"/"`` -> ``"/"``. A multi-character
    separator is removed as a whole each time.
    """
    size = len(separator)
    while len(path) > size and path.endswith(separator):
        path = path[:-size]
    return path


def _normalize_methods(methods: str | Iterable[str]) -> frozenset[str]:
    if isinstance(methods, str):
        return frozenset({methods.upper()})
    return frozenset(m.upper() for m in methods)


class Router:
    """Generic router for delimiter-segmented paths.

    Tuned for HTTP requests but usable for any grammar with a separator::

        router = (
            Router()
            .register("/users/{#id}", "GET", "user")
            .register("/users/{+rest}", "*", "proxy")
            .register_default("fallback")
        )
        result = router.route("/users/42", "get")
        result.payload  # "user"
        result.params   # {"id": 42}

    Registration and option changes mutate the router in place without
    locking. Finish registering before resolving from several threads.
    """

    __slots__ = ("_config", "_table")

    def __init__(self, config: RouterConfig | None = None, **options: Any) -> None:
        base = config or RouterConfig()
        self._config = base.with_options(**options) if options else base
        self._table = RouteTable()

    @classmethod
    def shared(cls) -> "Router":
        """Return the process-wide router, creating it on first use.

        Every call returns the same mutable instance for the lifetime of
        the process. There is no reset: build an independent ``Router()``
        when isolation is needed.
        """
        global _shared
        if _shared is None:
            with _shared_lock:
                if _shared is None:
                    _shared = cls()
        return _shared

    # -- Options ----------------------------------------------------------

    @property
    def config(self) -> RouterConfig:
        return self._config

    def get_option(self, name: str) -> Any:
        """Return the current value of option *name*."""
        if name not in option_names():
            msg = f"Unknown router option: {name}"
            raise ConfigurationError(msg)
        return getattr(self._config, name)

    def set_option(self, name: str, value: Any) -> "Router":
        """Set option *name* and return the router for chaining.

        Already registered patterns keep the separator they were compiled
        with; set options before registering routes that depend on them.
        """
        self._config = self._config.with_options(**{name: value})
        return self

    def set_separator(self, separator: str) -> "Router":
        """Deprecated alias for ``set_option("separator", separator)``."""
        warnings.warn(
            'set_separator() is deprecated; use set_option("separator", value)',
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_option("separator", separator)

    # -- Registration -----------------------------------------------------

    def register(self, pattern: str, methods: str | Iterable[str], payload: Any) -> "Router":
        """Register *pattern* for *methods* and return the router.

        *methods* is one method or several; ``"*"`` accepts any method.
        Placeholders are ``{name}`` (one segment), ``{#name}`` (decimal
        integer) and ``{+name}`` (anything, separators included).

        Raises ``DuplicateParameterError`` if a placeholder name repeats.
        """
        compiled = compile_pattern(pattern, self._config.separator)
        record = RouteRecord(
            path_pattern=pattern,
            methods=_normalize_methods(methods),
            payload=payload,
            literal=compiled.literal,
            expression=compiled.expression,
            param_names=compiled.param_names,
            param_kinds=compiled.param_kinds,
            is_greedy=compiled.is_greedy,
        )
        self._table.append(record)
        logger.debug(
            "registered %r for %s (%d params%s)",
            pattern,
            ", ".join(sorted(record.methods)),
            len(record.param_names),
            ", greedy" if record.is_greedy else "",
        )
        return self

    def register_default(self, payload: Any) -> "Router":
        """Set the payload returned when nothing else matches."""
        self._table.set_default(payload)
        return self

    @property
    def routes(self) -> list[RouteRecord]:
        """Registered routes in registration order, as an independent list."""
        return self._table.snapshot()

    @property
    def has_default(self) -> bool:
        return self._table.has_default

    # -- Resolution -------------------------------------------------------

    def route(self, path: str, method: str) -> RouteResult:
        """Resolve *path* and *method* to a registered payload.

        The first record that matches and accepts the method wins, unless
        it is greedy: the first greedy candidate is held back and only
        returned when no other record accepts the request. After that the
        default payload answers.

        Raises ``RouteNotFound`` if nothing matches and no default is set.
        """
        config = self._config
        path = trim_separator(path, config.separator)
        method = method.upper()
        case_sensitive = config.case_sensitive
        folded = path if case_sensitive else path.lower()

        deferred: RouteRecord | None = None
        deferred_params: dict[str, str | int] = {}
        for record in self._table:
            params = record.match(path, case_sensitive, folded)
            if params is None or not record.accepts(method):
                continue
            if record.is_greedy:
                if deferred is None:
                    deferred = record
                    deferred_params = params
                continue
            return RouteResult(
                path=path, method=method, params=params, record=record, payload=record.payload
            )

        if deferred is not None:
            return RouteResult(
                path=path,
                method=method,
                params=deferred_params,
                record=deferred,
                payload=deferred.payload,
            )

        if self._table.has_default:
            logger.debug("no route for %s %r, using default", method, path)
            return RouteResult(
                path=path,
                method=method,
                params={},
                record=None,
                payload=self._table.default,
                is_default=True,
            )

        logger.debug("no route for %s %r and no default", method, path)
        raise RouteNotFound(path, method)


def get_router() -> Router:
    """Return the process-wide router (see ``Router.shared()``)."""
    return Router.shared()
