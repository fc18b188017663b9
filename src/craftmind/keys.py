from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from craftmind import config
from craftmind import logger as logger_mod

log = logger_mod.get_logger()


class MissingKeyError(KeyError):
    """Raised when a required credential is in neither keys.json nor the environment."""


class KeyStore:
    """Credential lookup backed by a JSON keys file with env-var fallback.

    The file is read once, on first lookup. A missing file is normal (keys may
    live only in the environment); an unreadable one is logged and ignored.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None):
        self._path = Path(path or config.KEYS_FILE)
        self._keys: Optional[dict[str, Any]] = None

    def _load(self) -> dict[str, Any]:
        if self._keys is not None:
            return self._keys

        keys: dict[str, Any] = {}
        if self._path.exists():
            try:
                data = json.loads(self._path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    raise ValueError("keys file is not a JSON object")
                keys = data
            except Exception as e:  # noqa: BLE001
                log.warning(f"Invalid keys file {self._path} ({e}); using environment only")
        self._keys = keys
        return keys

    def _lookup(self, name: str) -> Optional[str]:
        value = self._load().get(name)
        if not value:
            value = os.getenv(name)
        return str(value) if value else None

    def get_key(self, name: str) -> str:
        value = self._lookup(name)
        if value is None:
            raise MissingKeyError(f"API key '{name}' not found in {self._path} or environment variables")
        return value

    def has_key(self, name: str) -> bool:
        return self._lookup(name) is not None


_default_store: Optional[KeyStore] = None


def default_store() -> KeyStore:
    global _default_store
    if _default_store is None:
        _default_store = KeyStore()
    return _default_store


def reset_default_store() -> None:
    """Forget the cached keys file (tests and long-running processes that rotate keys)."""
    global _default_store
    _default_store = None


def get_key(name: str) -> str:
    return default_store().get_key(name)


def has_key(name: str) -> bool:
    return default_store().has_key(name)
