from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    mod_name: str = "chatstyle"
    chat_name: str = "chatstyle"
    verbose: bool = False
    phrase_language: str = "enUS"
    vault_name: str = "SharedVault"
    default_recipient: str = "gm"
    render_workers: int = 2  # template and theme are fetched side by side


DEFAULT_SETTINGS = Settings()
