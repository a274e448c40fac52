from __future__ import annotations

import math
import re
from urllib.parse import urljoin

DURATION_UNIT = "menit"

_WS_RE = re.compile(r"\s+")
_EPISODE_RE = re.compile(r"episode\s*(\d+)|(\d+)", re.I)
_SCORE_RE = re.compile(r"(\d+(?:[.,]\d+)?)")
_YEAR_RE = re.compile(r"(19\d{2}|20\d{2})")
_DIGITS_RE = re.compile(r"(\d+)")


def clean(value) -> str:
    if not value:
        return ""
    value = str(value).replace("\u00a0", " ")
    return _WS_RE.sub(" ", value).strip()


def first_non_blank(*candidates) -> str:
    for candidate in candidates:
        cleaned = clean(candidate)
        if cleaned:
            return cleaned
    return ""


def resolve_url(raw, base: str) -> str:
    value = clean(raw)
    if not value:
        return ""
    if value.startswith(("http://", "https://")):
        return value
    if value.startswith("//"):
        return f"https:{value}"
    try:
        return urljoin(base, value)
    except ValueError:
        return ""


def classify_status(raw) -> str:
    value = clean(raw)
    if not value:
        return "Unknown"
    lower = value.lower()
    if "ongoing" in lower:
        return "Ongoing"
    if "complete" in lower:
        return "Completed"
    if "upcoming" in lower or "coming" in lower:
        return "Upcoming"
    return value


def extract_episode_number(raw) -> int:
    m = _EPISODE_RE.search(clean(raw))
    if not m:
        return 0
    return int(m.group(1) or m.group(2))


def extract_score(raw) -> float:
    m = _SCORE_RE.search(clean(raw))
    if not m:
        return 0.0
    try:
        score = float(m.group(1).replace(",", "."))
    except ValueError:
        return 0.0
    if not math.isfinite(score) or score < 0 or score > 10:
        return 0.0
    return score


def format_score(score) -> str:
    if score is None or not math.isfinite(score) or score <= 0:
        return "-"
    return f"{score:.2f}"


def extract_year(raw) -> str:
    m = _YEAR_RE.search(clean(raw))
    return m.group(1) if m else "-"


def normalize_duration(raw) -> str:
    value = clean(raw)
    if not value:
        return "-"
    m = _DIGITS_RE.search(value)
    if not m:
        return value
    return f"{m.group(1)} {DURATION_UNIT}"
