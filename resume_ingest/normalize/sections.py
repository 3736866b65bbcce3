from __future__ import annotations

from typing import Iterable

from .headings import normalize_heading
from .utils import split_lines

SectionMap = dict[str, list[str]]


def split_sections(source: str | Iterable[str]) -> SectionMap:
    """Bucket every non-heading line under the section active at that point.

    Lines before the first recognized heading land in ``header``. Heading
    lines only move the cursor and are not stored.
    """
    if isinstance(source, str):
        lines = split_lines(source)
    else:
        lines = [line.strip() for line in source if line and line.strip()]

    sections: SectionMap = {"header": []}
    current = "header"
    for line in lines:
        canonical = normalize_heading(line)
        if canonical is not None:
            current = canonical
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)
    return sections
