# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for environment stores that resolved values are loaded into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class EnvironmentStore(ABC):
    """Target for :func:`envload.load`: something with get/set semantics.

    The loader only needs :meth:`get` (``None`` when the key is absent) and
    :meth:`set`.  Implementations raise
    :class:`~envload.errors.EnvironmentSetError` when a value is rejected.

    **Plugin API**: third-party stores register a class under the
    ``envload.stores`` entry-point group and define ``service_name`` (short
    CLI name, e.g. ``"os"``), ``service_display_name`` and ``service_doc_url``
    for ``envload stores``.  Stores are not thread-safe; loading into a
    shared store from several threads at once is the caller's problem.
    """

    service_name: ClassVar[str] = ""
    service_display_name: ClassVar[str] = ""
    service_doc_url: ClassVar[str] = ""

    @classmethod
    def get_service_rows(cls) -> list[tuple[str, str, str]]:
        """Return (short_name, display_name, doc_url) rows for the stores table."""
        return [(cls.service_name, cls.service_display_name, cls.service_doc_url)]

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if it is not set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite *key* with *value*."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove *key*.  No error if it does not exist."""

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Return all key names currently in the store."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
