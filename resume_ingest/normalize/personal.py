from __future__ import annotations

import re
from typing import Sequence

from resume_ingest.schemas.normalized import PersonalInfo

from .utils import normalize_line, split_lines

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(?<!\d)(\+\d{1,3}[\s-]?)?(\(?\d{2,4}\)?[\s.-]?)?\d{3,4}[\s.-]?\d{4}(?!\d)")
URL_RE = re.compile(r"(https?://[^\s)|]+|www\.[^\s)|]+)", re.IGNORECASE)

_YEAR_RANGE_RE = re.compile(r"^(?:19|20)\d{2}\s*[-–.]?\s*(?:19|20)\d{2}$")
_NAME_SEPARATORS_RE = re.compile(r"[|•·]+")
_TITLE_SPLIT_RE = re.compile(r"\s+[—–|-]\s+|\s*[—|]\s*")
_LOCATION_RE = re.compile(
    r"\b([A-ZÀ-Þ][\wÀ-ÿ.'-]+(?:\s[A-ZÀ-Þ][\wÀ-ÿ.'-]+)*),\s*"
    r"([A-Z]{2,3}|[A-ZÀ-Þ][\wÀ-ÿ'-]+(?:\s[A-ZÀ-Þ][\wÀ-ÿ'-]+)*)\b"
)
_SEGMENT_SPLIT_RE = re.compile(r"\s*[|•·]\s*|\s+[—–-]\s+")

MAX_NAME_CHARS = 80
TITLE_SCAN_LINES = 3


def first_email(text: str) -> str:
    match = EMAIL_RE.search(text or "")
    return match.group(0) if match else ""


def first_phone(text: str) -> str:
    for match in PHONE_RE.finditer(text or ""):
        candidate = match.group(0).strip()
        if _YEAR_RANGE_RE.match(candidate):
            continue
        return candidate
    return ""


def first_url(text: str) -> str:
    match = URL_RE.search(text or "")
    return match.group(0) if match else ""


def _is_contact(value: str) -> bool:
    return bool(EMAIL_RE.search(value) or first_phone(value) or URL_RE.search(value))


def _full_name(lines: Sequence[str]) -> str:
    if not lines:
        return ""
    first = lines[0]
    if len(first) >= MAX_NAME_CHARS:
        return ""
    return normalize_line(_NAME_SEPARATORS_RE.sub(" ", first))


def _title(header_lines: Sequence[str]) -> str:
    for line in header_lines[:TITLE_SCAN_LINES]:
        parts = [part.strip() for part in _TITLE_SPLIT_RE.split(line) if part.strip()]
        if len(parts) < 2:
            continue
        left, right = parts[0], parts[1]
        if _is_contact(left) or _is_contact(right):
            continue
        return right
    return ""


def _location(header_lines: Sequence[str]) -> str:
    for line in header_lines:
        for segment in _SEGMENT_SPLIT_RE.split(line):
            segment = segment.strip()
            if not segment or _is_contact(segment):
                continue
            match = _LOCATION_RE.search(segment)
            if match:
                return match.group(0).strip()
    return ""


def extract_personal(text: str, header_lines: Sequence[str] | None = None) -> PersonalInfo:
    lines = split_lines(text)
    header = list(header_lines) if header_lines is not None else lines[:5]
    return PersonalInfo(
        full_name=_full_name(lines),
        title=_title(header),
        email=first_email(text),
        phone=first_phone(text),
        location=_location(header),
        website=first_url(text),
    )
