"""Perch exception hierarchy.

Shared across the pattern compiler, route table, and router so every
module raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when router options or a registered pattern are invalid.

    These are caller bugs: they surface synchronously from the
    constructor, ``set_option()``, or ``register()`` and are never
    recovered internally.
    """


class DuplicateParameterError(ConfigurationError):
    """A placeholder name appears more than once in one pattern.

    ``{id}`` and ``{#id}`` count as the same name.
    """

    def __init__(self, pattern: str, name: str) -> None:
        self.pattern = pattern
        self.name = name
        super().__init__(f"Parameters duplication in the route {pattern}")


class RouteNotFound(PerchError):  # noqa: N818
    """No registered pattern matched and no default route is defined."""

    def __init__(self, path: str, method: str) -> None:
        self.path = path
        self.method = method
        super().__init__("Route not found, default route is not defined")
