from __future__ import annotations

import re
from typing import Iterable

from .utils import is_bullet_like, normalize_line, strip_bullet_prefix

_SKILL_DELIMITERS_RE = re.compile(r"[,|;/•·●▪◦■\n]")


def extract_skills(lines: Iterable[str]) -> list[str]:
    """Split the skills section into items, keeping document order and duplicates."""
    joined = "\n".join(line for line in lines if line)
    skills: list[str] = []
    for token in _SKILL_DELIMITERS_RE.split(joined):
        cleaned = strip_bullet_prefix(token) if is_bullet_like(token) else token.strip()
        if cleaned:
            skills.append(cleaned)
    return skills


def extract_list_items(lines: Iterable[str]) -> list[str]:
    """One item per line for certification-like sections, bullets stripped."""
    items: list[str] = []
    seen: set[str] = set()
    for line in lines:
        if not line or not line.strip():
            continue
        cleaned = normalize_line(strip_bullet_prefix(line) if is_bullet_like(line) else line)
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        items.append(cleaned)
    return items
