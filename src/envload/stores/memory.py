# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""MemoryEnvironment -- an isolated in-memory environment.

Used by ``envload run`` and in tests, so loading never touches
the real process environment.
"""

from __future__ import annotations

from envload.errors import EnvironmentSetError
from envload.store import EnvironmentStore


class MemoryEnvironment(EnvironmentStore):
    """Keep variables in a plain dict."""

    service_name: str = "memory"
    service_display_name: str = "In-memory environment (isolated)"
    service_doc_url: str = ""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if not key or "=" in key or "\0" in key:
            raise EnvironmentSetError(key, f"illegal environment variable name {key!r}")
        if "\0" in value:
            raise EnvironmentSetError(key, "embedded null byte")
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def list_keys(self) -> list[str]:
        return sorted(self.data)
