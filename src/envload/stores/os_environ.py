# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""OsEnvironment -- the current process environment (``os.environ``)."""

from __future__ import annotations

import os
from collections.abc import MutableMapping

from envload.errors import EnvironmentSetError
from envload.store import EnvironmentStore


class OsEnvironment(EnvironmentStore):
    """Read/write variables in ``os.environ`` (or another str mapping)."""

    service_name: str = "os"
    service_display_name: str = "Process environment (os.environ)"
    service_doc_url: str = "https://docs.python.org/3/library/os.html#os.environ"

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        try:
            self._environ[key] = value
        except (ValueError, OSError) as e:
            # e.g. "embedded null byte" or a key the OS refuses
            raise EnvironmentSetError(key, str(e)) from e

    def delete(self, key: str) -> None:
        self._environ.pop(key, None)

    def list_keys(self) -> list[str]:
        return sorted(self._environ.keys())
