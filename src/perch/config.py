"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, validated on construction. The router swaps in a
new instance whenever an option changes.
"""

from dataclasses import dataclass, fields, replace
from typing import Any

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router options. Immutable after creation.

    Override what you need::

        config = RouterConfig(case_sensitive=True, separator=" ")
    """

    # Compare paths case-sensitively
    case_sensitive: bool = False

    # Delimiter between path segments; may be several characters
    separator: str = "/"

    def __post_init__(self) -> None:
        if not self.separator:
            msg = 'Option "separator" must not be empty'
            raise ConfigurationError(msg)

    def with_options(self, **options: Any) -> "RouterConfig":
        """Return a copy with *options* applied.

        Raises ``ConfigurationError`` for unknown option names or
        invalid values.
        """
        unknown = set(options) - option_names()
        if unknown:
            msg = f"Unknown router option(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        return replace(self, **options)


def option_names() -> frozenset[str]:
    """Names accepted by ``Router.get_option()`` / ``Router.set_option()``."""
    return frozenset(f.name for f in fields(RouterConfig))
