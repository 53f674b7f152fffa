"""Localized phrases with per-player language preferences."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.placeholders import PlaceholderEngine
from chatstyle.syslog import SyslogSeverity, log_syslog_message
from chatstyle.vault import VaultStore

PHRASE_CONFIG_KEY = "PhraseConfig"

DEFAULT_PHRASES: dict[str, dict[str, str]] = {
    "enUS": {
        "0": "Success",
        "1": "Failure",
        "10000": ".=> Initializing <=.",
        "20000": ".=> Complete <=.",
        "20100": "{{remark}} has been created.",
        "30000": "Warning: {{remark}}",
        "40000": "Invalid Arguments: {{remark}}",
        "40400": "Not Found: {{remark}}",
        "50000": "Error: {{remark}}",
        "60000": "Information: {{remark}}",
        "70000": "Debug: {{remark}}",
        "0x0CBDE1DE": "Error: Failure parsing HTML. Verify HTML is well formed with nested opening and closing tags.",
        "0x081AD87E": "Invalid Arguments: When adding new phrases, 'language' must be a string and 'newPhrases' an object.",
    },
    "frFR": {
        "0": "Succès",
        "1": "Échec",
        "10000": ".=> Initialisation <=.",
        "20000": ".=> Terminé <=.",
        "20100": "{{remark}} a été créé.",
        "30000": "Avertissement : {{remark}}",
        "40000": "Arguments invalides : {{remark}}",
        "40400": "Introuvable : {{remark}}",
        "50000": "Erreur : {{remark}}",
        "60000": "Information : {{remark}}",
        "70000": "Débogage : {{remark}}",
    },
}


class PhraseFactory:
    """Resolves phrase codes to display strings in each player's language.

    Lookups fall back to the default language, then to the code itself.
    Player preferences live in the shared vault under ``PhraseConfig``.
    """

    def __init__(
        self,
        settings: Settings = DEFAULT_SETTINGS,
        vaults: VaultStore | None = None,
        engine: PlaceholderEngine | None = None,
    ) -> None:
        self._settings = settings
        self._vaults = vaults or VaultStore(settings)
        self._engine = engine or PlaceholderEngine(settings)
        self._lock = threading.Lock()
        self._l10n: dict[str, dict[str, str]] = {}
        self.init()

    @property
    def default_language(self) -> str:
        return self._settings.phrase_language or "enUS"

    def init(self) -> None:
        """Reload the built-in phrases and make sure the preference table exists."""
        with self._lock:
            self._l10n = {lang: dict(phrases) for lang, phrases in DEFAULT_PHRASES.items()}
        self._preferences()

    def _preferences(self) -> dict[str, str]:
        vault = self._vaults.get_vault()
        config = vault.setdefault(PHRASE_CONFIG_KEY, {"playerPreferredLanguage": {}})
        return config.setdefault("playerPreferredLanguage", {})

    def languages(self) -> list[str]:
        with self._lock:
            return list(self._l10n)

    def player_language(self, player_id: str | None) -> str:
        if player_id is None:
            return self.default_language
        return self._preferences().get(player_id, self.default_language)

    def get(
        self,
        code: str,
        player_id: str | None = None,
        args: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the phrase for *code* with ``{{placeholders}}`` filled from *args*."""
        language = self.player_language(player_id)
        with self._lock:
            template = self._l10n.get(language, {}).get(code)
            if template is None:
                template = self._l10n.get(self.default_language, {}).get(code)
        if not isinstance(template, str):
            return code
        return self._engine.substitute(template, args or {})

    def change_language(self, player_id: str, language: str) -> bool:
        """Set *player_id*'s language; unknown languages are refused."""
        with self._lock:
            known = language in self._l10n
        if not known:
            log_syslog_message(
                self._settings,
                SyslogSeverity.WARN,
                "PhraseFactory.change_language",
                "40400",
                f"Language '{language}' is not available.",
            )
            return False
        self._preferences()[player_id] = language
        log_syslog_message(
            self._settings,
            SyslogSeverity.INFO,
            "PhraseFactory.change_language",
            "60000",
            f"Player '{player_id}' language set to '{language}'.",
        )
        return True

    def add(self, language: str, phrases: Mapping[str, str]) -> None:
        """Add or update phrases for *language*.

        Raises:
            TypeError: if *language* is empty or *phrases* is not a mapping.
        """
        if not language or not isinstance(language, str) or not isinstance(phrases, Mapping):
            raise TypeError(self.get("0x081AD87E"))
        with self._lock:
            self._l10n.setdefault(language, {}).update(phrases)

    def remove(self, language: str, code: str) -> None:
        with self._lock:
            self._l10n.get(language, {}).pop(code, None)
