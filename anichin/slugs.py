from __future__ import annotations

from urllib.parse import urlsplit

from anichin.errors import InvalidInput
from anichin.text import clean

SERIES_SEGMENT = "seri"


def path_of(url) -> str:
    value = clean(url)
    if not value:
        return ""
    try:
        return clean(urlsplit(value).path)
    except ValueError:
        idx = value.find("://")
        if idx < 0:
            return value
        slash = value.find("/", idx + 3)
        return clean(value[slash:]) if slash >= 0 else ""


def _segments(url) -> list[str]:
    return [part for part in (clean(p) for p in path_of(url).split("/")) if part]


def series_slug(url) -> str:
    parts = _segments(url)
    for i, part in enumerate(parts[:-1]):
        if part == SERIES_SEGMENT:
            return parts[i + 1]
    return ""


def episode_slug(url) -> str:
    parts = _segments(url)
    if not parts or parts[0] == SERIES_SEGMENT:
        return ""
    return parts[-1]


def stable_hash(value) -> int:
    """Java-style ``hashCode`` over UTF-16 code units, folded to a positive id.

    Distinct slugs may collide; ids are display identifiers only.
    """
    value = clean(value)
    data = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        h = (h * 31 + int.from_bytes(data[i:i + 2], "little")) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h or len(value) or 1)


def series_url(slug_or_url, base: str) -> str:
    value = clean(slug_or_url)
    if not value:
        raise InvalidInput("Series slug is required")
    if value.startswith(("http://", "https://")):
        return value if value.endswith("/") else f"{value}/"
    if value.startswith(f"{SERIES_SEGMENT}/"):
        value = value[len(SERIES_SEGMENT) + 1:]
    return f"{base}/{SERIES_SEGMENT}/{value}/"


def episode_url(slug_or_url, base: str) -> str:
    value = clean(slug_or_url)
    if not value:
        raise InvalidInput("Episode slug is required")
    if value.startswith(("http://", "https://")):
        return value if value.endswith("/") else f"{value}/"
    return f"{base}/{value.lstrip('/')}/"
