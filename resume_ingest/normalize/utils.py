from __future__ import annotations

import re
from typing import Iterable

_BULLET_CHARS = "-–—•●○◦▪▫■□◆◇►▶*·"
_BULLET_PATTERN = re.compile(
    rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]\s*|\d{{1,2}}[\.\)]\s+|\(\d{{1,2}}\)\s+)"
)
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|;\s*")

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_MONTH = (
    r"\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec"
    r"|ene|abr|ago|dic|janv|févr|fev|avr|mai|juin|juil|août|déc"
    r"|mär|okt|dez|set|out|gen|mag|giu|lug|ott|mrt|mei"
    r"|sty|lut|kwi|cze|lip|sie|wrz|paź|lis|gru)[^\W\d_]*\.?"
)
_DATE_POINT = rf"(?:{_MONTH}\s+)?(?:\d{{1,2}}[/.]\s?)?(?:19|20)\d{{2}}"
_RANGE_SEPARATOR = (
    r"\s*(?:[-–—]|\b(?:to|until|till|bis|hasta|al|au|à|a|até|fino a|tot|do)\b)\s*"
)
_DATE_RANGE_RE = re.compile(
    rf"(?P<start>{_DATE_POINT}){_RANGE_SEPARATOR}(?P<end>{_DATE_POINT}|[^\W\d_]+(?:'[^\W\d_]+)?)",
    re.IGNORECASE,
)
_DATE_NOISE_RE = re.compile(
    rf"{_DATE_POINT}|{_RANGE_SEPARATOR}|[()\[\],|•·]",
    re.IGNORECASE,
)

MAX_DATE_LINE_CHARS = 40


def split_lines(text: str) -> list[str]:
    normalized = (text or "").replace("\r", "")
    return [line.strip() for line in normalized.split("\n") if line.strip()]


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def contains_year(line: str) -> bool:
    return bool(YEAR_RE.search(line))


def find_years(text: str) -> list[str]:
    return YEAR_RE.findall(text or "")


def is_date_only_line(line: str) -> bool:
    """True for short, non-bullet lines that carry a year and little else."""
    if not contains_year(line) or is_bullet_like(line):
        return False
    if len(line) >= MAX_DATE_LINE_CHARS:
        return False
    leftover = _DATE_NOISE_RE.sub(" ", line)
    return len(re.sub(r"[^\w]", "", leftover)) <= 16


def bullets_from(lines: Iterable[str]) -> list[str]:
    """Turn a run of lines into bullet strings.

    Explicit markers (dashes, bullet glyphs, ``1.``, ``1)``, ``(1)``) win; when
    none are present the joined text is split into sentences instead.
    """
    source = [line for line in lines if line and line.strip()]
    bullets = [strip_bullet_prefix(line) for line in source if is_bullet_like(line)]

    if not bullets:
        joined = " ".join(line.strip() for line in source)
        bullets = [part.strip() for part in _SENTENCE_SPLIT_RE.split(joined)]

    output: list[str] = []
    seen: set[str] = set()
    for bullet in bullets:
        cleaned = normalize_line(bullet)
        if len(cleaned) <= 2 or cleaned in seen:
            continue
        seen.add(cleaned)
        output.append(cleaned)
    return output


def extract_dates(line: str) -> tuple[str, str]:
    text = line or ""
    match = _DATE_RANGE_RE.search(text)
    if match:
        return match.group("start").strip(), match.group("end").strip()

    years = find_years(text)
    if len(years) >= 2:
        return years[0], years[1]
    if len(years) == 1:
        return years[0], ""
    return "", ""
