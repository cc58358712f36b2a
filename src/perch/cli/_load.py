"""Locate the router a CLI command should inspect.

``module:attribute`` names a Router or a zero-argument factory. A bare
``module`` is imported for its side effects: route modules often
register straight onto ``Router.shared()``, so that router is used when
the module has no ``router`` attribute of its own.
"""

import importlib
from types import ModuleType

from perch.routing.router import Router


def _from_attribute(module: ModuleType, target: str, attr_name: str) -> Router:
    obj = getattr(module, attr_name)
    if isinstance(obj, Router):
        return obj
    if not callable(obj):
        msg = f"{target!r} is a {type(obj).__name__}, expected a perch.Router or a factory"
        raise TypeError(msg)
    try:
        built = obj()
    except Exception as exc:
        msg = f"router factory {target!r} failed: {exc}"
        raise TypeError(msg) from exc
    if not isinstance(built, Router):
        msg = f"router factory {target!r} returned {type(built).__name__}, not a perch.Router"
        raise TypeError(msg)
    return built


def load_router(target: str) -> Router:
    """Return the Router named by *target*.

    Raises ``ModuleNotFoundError`` / ``AttributeError`` for bad imports and
    ``TypeError`` when nothing usable is found.
    """
    module_path, _, attr_name = target.partition(":")
    module = importlib.import_module(module_path)
    if attr_name:
        return _from_attribute(module, target, attr_name)

    if isinstance(getattr(module, "router", None), Router):
        return module.router

    shared = Router.shared()
    if not shared.routes and not shared.has_default:
        msg = f"{module_path!r} defines no 'router' and registered nothing on Router.shared()"
        raise TypeError(msg)
    return shared
