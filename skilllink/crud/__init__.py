"""CRUD package exports with lazy module loading.

This keeps ``import skilllink.crud`` cheap for code that only needs one
area of the data model.
"""

from importlib import import_module

__all__ = ["user", "skill", "request", "accepted_request", "session"]


def __getattr__(name):
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
