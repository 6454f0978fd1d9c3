"""Credential configuration"""
from __future__ import annotations

import enum
from typing import Annotated, Optional

import rich
import typer
from rich.table import Table

from cf_tools.models.keyring_config import ConfigKey, KeyringConfig
from cf_tools.models.settings import env

app = typer.Typer(no_args_is_help=True)

# settings field that overrides each keyring key
ENV_FIELDS = {
    ConfigKey.CF_API_KEY: "api_key",
    ConfigKey.CF_EMAIL: "email",
}

SECRET_KEYS = {ConfigKey.CF_API_KEY}


class Source(enum.StrEnum):
    ENV = "env"
    KEYRING = "keyring"
    MISSING = "not set"


def resolve_credentials() -> dict[ConfigKey, tuple[str | None, Source]]:
    """
    Value and origin of each credential.
    Environment (or .env) values win, the keyring is only read when one is missing.
    """
    resolved = {}
    keyring_config = None

    for key, field in ENV_FIELDS.items():
        value = getattr(env, field)
        if value:
            resolved[key] = (value, Source.ENV)
            continue

        if keyring_config is None:
            keyring_config = KeyringConfig.load_from_keyring()

        if keyring_config.get(key):
            resolved[key] = (keyring_config[key], Source.KEYRING)
        else:
            resolved[key] = (None, Source.MISSING)

    return resolved


def masked(key: ConfigKey, value: str | None) -> str:
    if not value:
        return ""
    if key in SECRET_KEYS:
        return "********"
    return value


@app.command(name="set")
def set_config(
        key: ConfigKey,
        value: Annotated[Optional[str], typer.Argument()] = None
):
    """Store a credential in the keyring, omit the value to clear it."""
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(key, None)
        else:
            config[key] = value

    rich.print(f"{'Cleared' if value is None else 'Saved'} key {key.value!r} in the keyring")

    if getattr(env, ENV_FIELDS[key]):
        env_name = f"CF_{ENV_FIELDS[key].upper()}"
        rich.print(f"[yellow]Note:[/yellow] {env_name} is set in the environment and takes precedence.")


@app.command()
def show():
    """Show the credentials in use and where they come from."""
    table = Table("Key", "Value", "Source")
    url_source = Source.ENV.value if "api_url" in env.__fields_set__ else "default"
    table.add_row("CF_API_URL", env.api_url, url_source)

    for key, (value, source) in resolve_credentials().items():
        table.add_row(key.value, masked(key, value), source.value)

    rich.print(table)
