"""Uri helpers"""
from urllib import parse

__all__ = ["scheme_variants", "host"]


def scheme_variants(url: str) -> list[str]:
    """The http and https forms of a url, cached separately by Cloudflare."""
    parts = parse.urlsplit(url if "://" in url else f"http://{url}")
    if parts.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported scheme: {parts.scheme!r}")

    return [parse.urlunsplit(parts._replace(scheme=scheme)) for scheme in ("http", "https")]


def host(url: str) -> str:
    """Host name of a url, without port."""
    hostname = parse.urlsplit(url if "://" in url else f"http://{url}").hostname
    if not hostname:
        raise ValueError(f"No host in url: {url!r}")
    return hostname
