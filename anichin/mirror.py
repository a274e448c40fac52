from __future__ import annotations

import base64
import binascii
import logging
import re

from bs4 import BeautifulSoup

from anichin.text import clean, resolve_url

logger = logging.getLogger(__name__)

_NON_ALPHABET_RE = re.compile(r"[^A-Za-z0-9+/]")


def decode_mirror(value) -> str:
    """Decode a mirror ``<option value>`` into the HTML fragment it carries."""
    # url-safe alphabet is accepted alongside the standard one
    encoded = clean(value).replace("-", "+").replace("_", "/")
    encoded = _NON_ALPHABET_RE.sub("", encoded)
    if not encoded:
        return ""
    encoded += "=" * (-len(encoded) % 4)
    try:
        return base64.b64decode(encoded).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        logger.debug("Skipping undecodable mirror value: %s", e)
        return ""


def mirror_embed_url(value, base: str) -> str:
    fragment = decode_mirror(value)
    if not fragment:
        return ""
    soup = BeautifulSoup(fragment, "lxml")
    iframe = soup.find("iframe")
    if not iframe:
        return ""
    return resolve_url(iframe.get("src"), base)
