"""Cloudflare API tools."""
from __future__ import annotations

from typing import Annotated, Callable, ParamSpec, TypeVar

import rich
import typer
from typer import Option

from cf_tools.config import resolve_credentials
from cf_tools.errors import CloudflareError
from cf_tools.models.enums import Minify
from cf_tools.models.keyring_config import ConfigKey, KeyringConfig
from cf_tools.models.responses import ApiResponse
from cf_tools.models.settings import env
from cf_tools.service import CloudflareService
from cf_tools.utils import uris
from cf_tools.utils.dispatcher import Credentials, RequestDispatcher

T = TypeVar("T")
P = ParamSpec("P")

app = typer.Typer(no_args_is_help=True)


def get_service() -> CloudflareService:
    """Build the service from env settings, falling back to the keyring."""
    resolved = resolve_credentials()
    for key, (value, _) in resolved.items():
        if value is None:
            KeyringConfig.exit_missing(key)

    credentials = Credentials(
        url=env.api_url,
        api_key=resolved[ConfigKey.CF_API_KEY][0],
        email=resolved[ConfigKey.CF_EMAIL][0],
    )
    return CloudflareService(RequestDispatcher(credentials, timeout=env.timeout))


def failure(res: ApiResponse, default: str) -> str:
    return res.error_text or default


def attempt(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> T:
    try:
        return func(*args, **kwargs)
    except CloudflareError as e:
        if env.verbose:
            raise
        typer.echo(f"❌  Error: {e}")
        raise SystemExit(1)


@app.command()
def purge(domain: str):
    """Purge the whole Cloudflare cache of a domain."""
    service = get_service()
    typer.echo(f"Purging cache of {domain!r}...")
    res = attempt(service.clear_cache, domain)

    if res.success:
        typer.echo(f"✅  Successfully cleared cache for domain: {domain}")
    else:
        typer.echo(f"❌  {failure(res, 'Cache purge failed')}")
        raise SystemExit(1)


@app.command(name="purge-file")
def purge_file(
    url: str,
    zone: Annotated[str | None, Option(help="Zone of the url, defaults to its host")] = None,
):
    """Purge one file (http and https) from Cloudflare's cache."""
    try:
        variants = uris.scheme_variants(url)
        zone = zone or uris.host(url)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="url")

    service = get_service()
    failed = False
    for variant in variants:
        res = attempt(service.purge_file, zone, variant)
        if res.success:
            typer.echo(f"✅  {variant}")
        else:
            typer.echo(f"❌  {variant}: {failure(res, 'Purge failed')}")
            failed = True

    if failed:
        raise SystemExit(1)


@app.command()
def zones():
    """List the zones of the account."""
    service = get_service()
    res = attempt(service.list_zones)
    rich.print_json(data=res.data)
    if not res.success:
        raise SystemExit(1)


@app.command()
def minify(
    domain: str,
    types: Annotated[str, typer.Argument(help="Comma separated: js, css, html. Empty turns minify off")] = "",
):
    """Set which file types Cloudflare minifies for a domain."""
    try:
        mode = Minify.parse(types)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="types")

    service = get_service()
    res = attempt(service.set_minification, domain, mode)

    if res.success:
        typer.echo(f"✅  Minify for {domain}: {types or 'off'} ({mode.value})")
    else:
        typer.echo(f"❌  {failure(res, 'Minify update failed')}")
        raise SystemExit(1)
