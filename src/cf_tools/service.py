"""Cloudflare client API operations."""
from __future__ import annotations

from typing import Any

from cf_tools.models.enums import (
    AUTO_TTL,
    CacheLevel,
    Minify,
    RecordType,
    RocketLoader,
    SecurityLevel,
    StatsInterval,
)
from cf_tools.models.responses import ApiResponse
from cf_tools.utils.dispatcher import RequestDispatcher

__all__ = ["CloudflareService"]


def _flag(value: bool, on: str = "1", off: str = "0") -> str:
    return on if value else off


def _optional(params: dict[str, Any], **fields: Any) -> dict[str, Any]:
    """Add the fields that were given, None means omitted."""
    for key, value in fields.items():
        if value is None:
            continue
        params[key] = _flag(value) if isinstance(value, bool) else value
    return params


class CloudflareService:
    """Thin wrapper of the action based client API (one method per action)."""

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def _request(self, action: str, params: dict[str, Any] | None = None) -> ApiResponse:
        return self.dispatcher.dispatch(action, params or {})

    # Zones

    def list_zones(self) -> ApiResponse:
        """List the domains of the account."""
        return self._request("zone_load_multi")

    def get_stats(
        self, domain: str, interval: StatsInterval | int = StatsInterval.LAST_7_DAYS
    ) -> ApiResponse:
        """Statistics of a zone for a time window code."""
        return self._request("stats", {"z": domain, "interval": int(interval)})

    def get_zone_settings(self, domain: str) -> ApiResponse:
        return self._request("zone_settings", {"z": domain})

    def check_zones(self, *zones: str) -> ApiResponse:
        """Which of `zones` are active, with their zone ids."""
        return self._request("zone_check", {"zones": ",".join(zones)})

    # Cache

    def clear_cache(self, domain: str) -> ApiResponse:
        """
        Purge the whole cache of a zone.
        May take up to 48 hours to apply everywhere.
        """
        return self._request("fpurge_ts", {"z": domain, "v": 1})

    def purge_file(self, domain: str, url: str) -> ApiResponse:
        """
        Purge one cached file.
        http and https variants are separate entries, purge each one.
        """
        return self._request("zone_file_purge", {"z": domain, "url": url})

    # Zone settings

    def set_security_level(self, domain: str, level: SecurityLevel | str) -> ApiResponse:
        return self._request("sec_lvl", {"z": domain, "v": SecurityLevel(level).value})

    def set_cache_level(self, domain: str, level: CacheLevel | str) -> ApiResponse:
        return self._request("cache_lvl", {"z": domain, "v": CacheLevel(level).value})

    def set_dev_mode(self, domain: str, enabled: bool) -> ApiResponse:
        """
        Toggle development mode (cache bypass).
        Cloudflare turns it off again after 3 hours.
        """
        return self._request("devmode", {"z": domain, "v": _flag(enabled)})

    def set_ipv6_enabled(self, domain: str, enabled: bool) -> ApiResponse:
        return self._request("ipv46", {"z": domain, "v": _flag(enabled, on="3")})

    def set_rocket_loader(self, domain: str, mode: RocketLoader | str) -> ApiResponse:
        return self._request("async", {"z": domain, "v": RocketLoader(mode).value})

    def set_minification(self, domain: str, mode: Minify | int) -> ApiResponse:
        """Set minification, `mode` is a 0-7 bitmask of JS=1, CSS=2, HTML=4."""
        value = mode.value if isinstance(mode, Minify) else int(mode)
        return self._request("minify", {"z": domain, "v": value})

    def set_mirage(self, domain: str, enabled: bool) -> ApiResponse:
        return self._request("mirage2", {"z": domain, "v": _flag(enabled)})

    # IP management

    def whitelist_ip(self, ip: str) -> ApiResponse:
        return self._request("wl", {"key": ip})

    def blacklist_ip(self, ip: str) -> ApiResponse:
        return self._request("ban", {"key": ip})

    def unlist_ip(self, ip: str) -> ApiResponse:
        return self._request("null", {"key": ip})

    def ip_lookup(self, ip: str) -> ApiResponse:
        """Threat score of an IP (logarithmic scale)."""
        return self._request("ip_lkup", {"ip": ip})

    # DNS

    def get_dns_entries(self, domain: str, offset: int | None = None) -> ApiResponse:
        """
        List the DNS records of a zone.
        Pass `offset` only when the previous page reported more records.
        """
        return self._request("rec_load_all", _optional({"z": domain}, o=offset))

    def create_dns_record(
        self,
        domain: str,
        type: RecordType | str,
        name: str,
        content: str,
        ttl: int = AUTO_TTL,
        *,
        priority: int | None = None,
        service: str | None = None,
        srvname: str | None = None,
        protocol: str | None = None,
        weight: int | None = None,
        port: int | None = None,
        target: str | None = None,
    ) -> ApiResponse:
        """
        Create a DNS record.
        `ttl` is 1 (automatic) or between 120 and 86400 seconds.
        """
        params = {
            "z": domain,
            "type": RecordType(type).value,
            "name": name,
            "content": content,
            "ttl": ttl,
        }
        _optional(
            params,
            prio=priority,
            service=service,
            srvname=srvname,
            protocol=protocol,
            weight=weight,
            port=port,
            target=target,
        )
        return self._request("rec_new", params)

    def edit_dns_record(
        self,
        domain: str,
        record_id: str | int,
        type: RecordType | str,
        name: str,
        content: str,
        ttl: int = AUTO_TTL,
        *,
        service_mode: bool | None = None,
        priority: int | None = None,
        service: str | None = None,
        srvname: str | None = None,
        protocol: str | None = None,
        weight: int | None = None,
        port: int | None = None,
        target: str | None = None,
    ) -> ApiResponse:
        """Edit a DNS record, `service_mode` toggles the Cloudflare proxy."""
        params = {
            "z": domain,
            "id": record_id,
            "type": RecordType(type).value,
            "name": name,
            "content": content,
            "ttl": ttl,
        }
        _optional(
            params,
            service_mode=service_mode,
            prio=priority,
            service=service,
            srvname=srvname,
            protocol=protocol,
            weight=weight,
            port=port,
            target=target,
        )
        return self._request("rec_edit", params)

    def delete_dns_record(self, domain: str, record_id: str | int) -> ApiResponse:
        return self._request("rec_delete", {"z": domain, "id": record_id})
