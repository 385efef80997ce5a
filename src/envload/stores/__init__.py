# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Store registry -- built-in stores plus plugins from the ``envload.stores`` entry-point group."""

from __future__ import annotations

from collections.abc import Iterator
from importlib.metadata import entry_points

from envload.store import EnvironmentStore
from envload.stores.memory import MemoryEnvironment
from envload.stores.os_environ import OsEnvironment

_BUILTIN_STORES: dict[str, type[EnvironmentStore]] = {
    "os": OsEnvironment,
    "memory": MemoryEnvironment,
}


def get_service_entries() -> Iterator[tuple[str, type[EnvironmentStore]]]:
    """Yield (entry_name, store_class) in display order for ``envload stores``.

    Order: os, memory, then all other registered stores alphabetically.
    """
    yield from _BUILTIN_STORES.items()
    for name in list_store_names():
        if name not in _BUILTIN_STORES:
            yield name, get_store_class(name)


def get_store_class(name: str) -> type[EnvironmentStore]:
    """Return a store class by name.

    Raises ``KeyError`` with a helpful message when the name is unknown.
    """
    if name in _BUILTIN_STORES:
        return _BUILTIN_STORES[name]
    eps = entry_points(group="envload.stores")
    for ep in eps:
        if ep.name == name:
            return ep.load()

    raise KeyError(
        f"Unknown store {name!r}. Available stores: {', '.join(list_store_names())}"
    )


def list_store_names() -> list[str]:
    """Return sorted names of all available stores."""
    eps = entry_points(group="envload.stores")
    return sorted(set(_BUILTIN_STORES) | {ep.name for ep in eps})


__all__ = [
    "MemoryEnvironment",
    "OsEnvironment",
    "get_service_entries",
    "get_store_class",
    "list_store_names",
]
