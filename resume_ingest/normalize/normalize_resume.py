from __future__ import annotations

import logging

from resume_ingest.core.config import settings
from resume_ingest.features import detect_language, extract_keywords
from resume_ingest.parsing.models import ParsedDoc
from resume_ingest.schemas.normalized import NormalizedResume

from .entries import extract_education, extract_experience, extract_projects
from .lists import extract_list_items, extract_skills
from .personal import extract_personal
from .sections import split_sections
from .utils import normalize_line

logger = logging.getLogger(__name__)


def parse_resume_text(text: str, *, keyword_limit: int | None = None) -> NormalizedResume:
    """Run the heuristic pipeline over raw text. Never raises on odd input."""
    raw = text or ""
    sections = split_sections(raw)

    resume = NormalizedResume(
        personal=extract_personal(raw, sections.get("header", [])),
        summary=normalize_line(" ".join(sections.get("summary", []))),
        experience=extract_experience(sections.get("experience", [])),
        projects=extract_projects(sections.get("projects", [])),
        education=extract_education(sections.get("education", [])),
        skills=extract_skills(sections.get("skills", [])),
        certifications=extract_list_items(sections.get("certifications", [])),
        conferences=extract_list_items(sections.get("conferences", [])),
        publications=extract_list_items(sections.get("publications", [])),
        awards=extract_list_items(sections.get("awards", [])),
        keywords=extract_keywords(raw, limit=keyword_limit or settings.keyword_limit),
        language=detect_language(raw),
    )
    logger.debug(
        "resume_normalized sections=%s experience=%s projects=%s education=%s skills=%s",
        sorted(sections),
        len(resume.experience),
        len(resume.projects),
        len(resume.education),
        len(resume.skills),
    )
    return resume


def normalize_resume(parsed: ParsedDoc) -> NormalizedResume:
    return parse_resume_text(parsed.text)
