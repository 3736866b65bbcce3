"""Group a section's lines into job, project and education entries.

Experience and projects share one accumulator: lines pile up in a block
until a guard decides the block is a finished entry, then the block is
flushed into an ``Entry``. The guards are plain functions so each heuristic
can be exercised on its own.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable

from resume_ingest.schemas.normalized import Entry

from .utils import (
    bullets_from,
    contains_year,
    extract_dates,
    find_years,
    is_bullet_like,
    is_date_only_line,
    strip_bullet_prefix,
)

MAX_HEADER_CHARS = 80
EXPERIENCE_BLOCK_CAP = 8
PROJECT_BLOCK_CAP = 6
EDUCATION_BLOCK_SIZE = 6

_HEADER_SPLIT_RE = re.compile(r"\s*[—–]\s*|\s+-\s+|\s*[|•·]\s*|\s*:(?!//)\s*")
_TRAILING_URL_RE = re.compile(r"\s*\(?(?P<url>(?:https?://|www\.)[^\s()]+)\)?$", re.IGNORECASE)


class BlockState(str, Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    FLUSHED = "flushed"


def is_bullet_line(line: str) -> bool:
    return is_bullet_like(line)


def is_date_line(line: str) -> bool:
    return contains_year(line)


def is_new_header_line(line: str) -> bool:
    stripped = line.strip()
    if not stripped or not stripped[0].isupper():
        return False
    if len(stripped) >= MAX_HEADER_CHARS:
        return False
    return not is_bullet_line(stripped) and not is_date_line(stripped)


def is_over_capacity(block: list[str], cap: int) -> bool:
    return len(block) >= cap


def split_header(header: str) -> tuple[str, str]:
    """Split an entry header at its leftmost separator into (title, subtitle)."""
    cleaned = strip_bullet_prefix(header) if is_bullet_like(header) else header.strip()
    parts = _HEADER_SPLIT_RE.split(cleaned, maxsplit=1)
    title = parts[0].strip()
    subtitle = parts[1].strip() if len(parts) > 1 else ""
    if not subtitle:
        # "Name https://link" and "Name (https://link)" carry the link as subtitle
        link = _TRAILING_URL_RE.search(title)
        if link and link.start() > 0:
            title, subtitle = title[: link.start()].strip(), link.group("url")
    return title, subtitle


def build_entry(block: list[str]) -> Entry:
    title, subtitle = split_header(block[0])
    date_index = next((index for index, line in enumerate(block) if is_date_line(line)), None)
    start_date, end_date = extract_dates(block[date_index]) if date_index is not None else ("", "")

    body = [
        line
        for index, line in enumerate(block)
        if index > 0 and not (index == date_index and is_date_only_line(line))
    ]
    return Entry(
        title=title,
        subtitle=subtitle,
        start_date=start_date,
        end_date=end_date,
        bullets=bullets_from(body),
    )


class EntryAccumulator:
    """Finite-state grouping of lines into entries (idle -> accumulating -> flushed)."""

    def __init__(self, cap: int) -> None:
        self.cap = cap
        self.state = BlockState.IDLE
        self.block: list[str] = []
        self.entries: list[Entry] = []

    def feed(self, line: str) -> None:
        if not line or not line.strip():
            return
        line = line.strip()

        if self.state is not BlockState.ACCUMULATING:
            self._start(line)
            return

        if is_new_header_line(line):
            self.flush()
            self._start(line)
            return

        if is_date_line(line) and len(self.block) <= 2:
            self.block.append(line)
            return

        self.block.append(line)
        if is_over_capacity(self.block, self.cap):
            self.flush()

    def flush(self) -> None:
        if self.block:
            entry = build_entry(self.block)
            if not entry.is_blank():
                self.entries.append(entry)
        self.block = []
        self.state = BlockState.FLUSHED

    def _start(self, line: str) -> None:
        self.block = [line]
        self.state = BlockState.ACCUMULATING
        if is_over_capacity(self.block, self.cap):
            self.flush()

    def finish(self) -> list[Entry]:
        self.flush()
        return list(self.entries)


def _group_entries(lines: Iterable[str], cap: int) -> list[Entry]:
    accumulator = EntryAccumulator(cap)
    for line in lines:
        accumulator.feed(line)
    return accumulator.finish()


def extract_experience(lines: Iterable[str]) -> list[Entry]:
    return _group_entries(lines, EXPERIENCE_BLOCK_CAP)


def extract_projects(lines: Iterable[str]) -> list[Entry]:
    return _group_entries(lines, PROJECT_BLOCK_CAP)


def _education_entry(block: list[str]) -> Entry:
    # dates may precede the school line
    header_index = next((index for index, line in enumerate(block) if not is_date_only_line(line)), None)
    if header_index is None:
        school, degree, remaining = "", "", []
    else:
        school, degree = split_header(block[header_index])
        remaining = block[header_index + 1:]
    rest = [line for line in remaining if not is_date_only_line(line)]
    if not degree and rest and not is_bullet_like(rest[0]):
        degree, rest = rest[0], rest[1:]

    years = find_years(" ".join(block))
    start_date = years[0] if years else ""
    end_date = years[1] if len(years) > 1 else start_date
    return Entry(
        title=school,
        subtitle=degree,
        start_date=start_date,
        end_date=end_date,
        bullets=bullets_from(rest),
    )


def extract_education(lines: Iterable[str]) -> list[Entry]:
    source = [line.strip() for line in lines if line and line.strip()]
    if not source:
        return []

    entries: list[Entry] = []
    for offset in range(0, len(source), EDUCATION_BLOCK_SIZE):
        entry = _education_entry(source[offset:offset + EDUCATION_BLOCK_SIZE])
        if not entry.is_blank():
            entries.append(entry)
    if entries:
        return entries

    years = find_years(" ".join(source))
    texts = [
        strip_bullet_prefix(line) if is_bullet_like(line) else line
        for line in source
        if not is_date_only_line(line)
    ]
    texts = [text for text in texts if text]
    fallback = Entry(
        title=texts[0] if texts else "",
        subtitle=texts[1] if len(texts) > 1 else "",
        start_date=years[0] if years else "",
        end_date=years[1] if len(years) > 1 else (years[0] if years else ""),
    )
    return [] if fallback.is_blank() else [fallback]
