"""Perch — ordered pattern routing for paths, URLs, and command grammars.

Resolves a path and method against registered patterns with typed
placeholders and returns the payload of the winning pattern.

Basic usage::

    from perch import Router

    router = Router()
    router.register("/users/{#id}", "GET", show_user)
    router.register_default(not_found)

    result = router.route("/users/42", "GET")
    result.payload(**result.params)

Any separator works::

    bot = Router(separator=" ").register("order {#qty} {item}", "", "order")
    bot.route("order 3 pizzas", "").params  # {"qty": 3, "item": "pizzas"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateParameterError",
    "PerchError",
    "RouteNotFound",
    "RouteRecord",
    "RouteResult",
    "Router",
    "RouterConfig",
    "get_router",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Router": "perch.routing.router",
    "get_router": "perch.routing.router",
    "RouteRecord": "perch.routing.route",
    "RouteResult": "perch.routing.route",
    "RouterConfig": "perch.config",
    "PerchError": "perch.errors",
    "ConfigurationError": "perch.errors",
    "DuplicateParameterError": "perch.errors",
    "RouteNotFound": "perch.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
