from __future__ import annotations

import enum
import json
from typing import NoReturn

import keyring


class ConfigKey(enum.StrEnum):
    CF_API_KEY = "CF_API_KEY"
    CF_EMAIL = "CF_EMAIL"


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "cf-tools"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the stored credentials, unknown keys are skipped."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        known = set(ConfigKey)
        return cls({ConfigKey(k): v for k, v in json.loads(json_str).items() if k in known})

    @staticmethod
    def exit_missing(key: ConfigKey) -> NoReturn:
        import rich
        import typer

        rich.print(f"[red]Error:[/red] Required config key '{key.value}' not set. "
                   f"Please run 'cf-tools config set {key.value} {{value}}' or set it in the environment.")

        raise typer.Exit(1)

    def save(self):
        """Save the credentials to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)
