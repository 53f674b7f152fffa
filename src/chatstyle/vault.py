"""In-process store of named vaults shared by chatstyle services."""

from __future__ import annotations

import threading
from typing import Any

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.syslog import SyslogSeverity, log_syslog_message


class VaultStore:
    """Thread-safe mapping of vault name to a mutable dictionary.

    Vaults are created on first access.  The dictionaries handed out are
    live: callers mutate them directly, as with a persistent state object.
    """

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings
        self._lock = threading.Lock()
        self._state: dict[str, dict[str, Any]] = {}

    def get_vault(self, name: str | None = None) -> dict[str, Any]:
        """Return the vault called *name* (default: the shared vault)."""
        vault_name = name or self._settings.vault_name
        with self._lock:
            vault = self._state.get(vault_name)
            if vault is None:
                vault = self._state[vault_name] = {}
                created = True
            else:
                created = False
        if created and self._settings.verbose:
            log_syslog_message(
                self._settings,
                SyslogSeverity.DEBUG,
                "VaultStore.get_vault",
                "70000",
                f"Not Found: vault undefined, initializing '{vault_name}'.",
            )
        return vault

    def purge(self, key: str | None = None) -> None:
        """Drop one vault, or every vault when *key* is omitted."""
        with self._lock:
            if key is None:
                self._state.clear()
            else:
                self._state.pop(key, None)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._state)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._state
