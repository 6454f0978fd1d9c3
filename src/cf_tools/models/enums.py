from __future__ import annotations

import enum
from enum import Flag, IntEnum

# ttl value meaning "automatic"
AUTO_TTL = 1


class SecurityLevel(enum.StrEnum):
    HELP = "help"
    HIGH = "high"
    MEDIUM = "med"
    LOW = "low"
    ESSENTIALLY_OFF = "eoff"


class CacheLevel(enum.StrEnum):
    AGGRESSIVE = "agg"
    BASIC = "basic"


class RocketLoader(enum.StrEnum):
    OFF = "0"
    AUTOMATIC = "a"
    MANUAL = "m"


class RecordType(enum.StrEnum):
    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"
    TXT = "TXT"
    SPF = "SPF"
    NS = "NS"
    SRV = "SRV"
    LOC = "LOC"


class StatsInterval(IntEnum):
    LAST_30_DAYS = 20
    LAST_7_DAYS = 30
    LAST_DAY = 40
    LAST_24_HOURS = 100
    LAST_12_HOURS = 110
    LAST_6_HOURS = 120


class Minify(Flag):
    OFF = 0
    JS = 1 << 0
    CSS = 1 << 1
    HTML = 1 << 2

    @classmethod
    def parse(cls, value: str) -> Minify:
        """Parse a comma separated list like 'js,css' into a Minify mode."""
        result = cls.OFF

        for part in filter(None, (p.strip().lower() for p in value.split(","))):
            if part == "js":
                result |= cls.JS
            elif part == "css":
                result |= cls.CSS
            elif part == "html":
                result |= cls.HTML
            else:
                raise ValueError(f"Unknown minify type: {part!r}")

        return result
