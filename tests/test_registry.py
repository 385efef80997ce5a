"""Tests for the environment store registry."""

from __future__ import annotations

import pytest

from envload.store import EnvironmentStore
from envload.stores import get_service_entries, get_store_class, list_store_names
from envload.stores.memory import MemoryEnvironment
from envload.stores.os_environ import OsEnvironment


def test_get_service_entries_order_and_content():
    """Built-in stores come first; each store has service metadata."""
    entries = list(get_service_entries())
    names = [name for name, _ in entries]
    assert names[:2] == ["os", "memory"]
    assert names.count("os") == 1
    for name, store_cls in entries:
        assert issubclass(store_cls, EnvironmentStore), f"{name} is not an EnvironmentStore"
        for short_name, display_name, _doc_url in store_cls.get_service_rows():
            assert short_name, f"{name} row has empty short_name"
            assert display_name, f"{name} row has empty display_name"


def test_list_store_names():
    names = list_store_names()
    assert "os" in names
    assert "memory" in names
    assert names == sorted(names)


def test_get_builtin_store_classes():
    assert get_store_class("os") is OsEnvironment
    assert get_store_class("memory") is MemoryEnvironment


def test_get_unknown_store_raises():
    with pytest.raises(KeyError, match="Unknown store 'nope'"):
        get_store_class("nope")
