from __future__ import annotations

from typing import Any, Callable, Mapping

from resume_ingest.core.config.scoring import get_scoring_value
from resume_ingest.schemas.normalized import NormalizedResume, ScoreResult

_DEFAULT_ACTION_VERBS = (
    "led", "built", "delivered", "created", "designed", "implemented",
    "optimized", "launched", "improved", "reduced", "increased", "developed",
)
_DEFAULT_SECTIONS = (
    "summary", "experience", "projects", "education", "skills",
    "certifications", "conferences", "publications",
)
_PERSONAL_LABELS = {
    "full_name": "full name",
    "title": "title",
    "email": "email",
    "phone": "phone",
    "location": "location",
    "website": "website",
}

_SECTION_PRESENCE: dict[str, Callable[[NormalizedResume], bool]] = {
    "summary": lambda r: bool(r.summary.strip()),
    "experience": lambda r: any(e.title.strip() for e in r.experience),
    "projects": lambda r: any(p.title.strip() for p in r.projects),
    "education": lambda r: bool(r.education and r.education[0].title.strip()),
    "skills": lambda r: any(s.strip() for s in r.skills),
    "certifications": lambda r: any(c.strip() for c in r.certifications),
    "conferences": lambda r: any(c.strip() for c in r.conferences),
    "publications": lambda r: any(p.strip() for p in r.publications),
    "awards": lambda r: any(a.strip() for a in r.awards),
}


def _points(name: str, default: int) -> int:
    return int(get_scoring_value(f"ats.points.{name}", default))


def _threshold(name: str, default: int) -> int:
    return int(get_scoring_value(f"ats.thresholds.{name}", default))


def _coerce(record: NormalizedResume | Mapping[str, Any]) -> NormalizedResume:
    if isinstance(record, NormalizedResume):
        return record
    return NormalizedResume.model_validate(dict(record))


def present_sections(resume: NormalizedResume) -> list[str]:
    sections = get_scoring_value("ats.sections", list(_DEFAULT_SECTIONS))
    return [name for name in sections if name in _SECTION_PRESENCE and _SECTION_PRESENCE[name](resume)]


def action_verbs_found(resume: NormalizedResume) -> list[str]:
    corpus = " ".join(
        part
        for part in [
            resume.summary,
            *(entry.description for entry in resume.experience),
            *(entry.description for entry in resume.projects),
        ]
        if part
    ).lower()
    verbs = get_scoring_value("ats.action_verbs", list(_DEFAULT_ACTION_VERBS))
    return [verb for verb in verbs if verb.lower() in corpus]


def description_bullets(resume: NormalizedResume) -> list[str]:
    bullets: list[str] = []
    for entry in [*resume.experience, *resume.projects]:
        bullets.extend(line for line in entry.description.split("\n") if line.strip())
    return bullets


def score(record: NormalizedResume | Mapping[str, Any]) -> ScoreResult:
    """Rule-based ATS score in [0, 100] with feedback in check order."""
    resume = _coerce(record)
    total = 0
    feedback: list[str] = []

    required = get_scoring_value("ats.required_personal_fields", ["full_name", "email", "phone"])
    personal = resume.personal.model_dump()
    missing = [field for field in required if not str(personal.get(field, "")).strip()]
    if not missing:
        total += _points("personal", 25)
    else:
        labels = ", ".join(_PERSONAL_LABELS.get(field, field) for field in missing)
        feedback.append(f"Add missing personal info: {labels}.")

    min_summary = _threshold("summary_min_chars", 80)
    if len(resume.summary) > min_summary:
        total += _points("summary", 10)
    else:
        feedback.append(f"Write a concise professional summary ({min_summary}+ chars).")

    if any(entry.title.strip() for entry in resume.experience):
        total += _points("experience", 15)
    else:
        feedback.append("Include at least one work experience.")

    min_skills = _threshold("min_skills", 5)
    if sum(1 for skill in resume.skills if skill.strip()) >= min_skills:
        total += _points("skills", 10)
    else:
        feedback.append(f"List {min_skills}+ relevant skills.")

    if len(action_verbs_found(resume)) >= _threshold("min_action_verbs", 3):
        total += _points("action_verbs", 15)
    else:
        feedback.append("Use more action verbs (e.g., led, built, delivered...).")

    sections = present_sections(resume)
    total += min(_points("section_cap", 20), len(sections) * _points("section_each", 3))

    bullets = description_bullets(resume)
    if bullets:
        average = sum(len(bullet) for bullet in bullets) / len(bullets)
        if average < _threshold("max_avg_bullet_chars", 160):
            total += _points("concise_bullets", 5)
        else:
            feedback.append("Make bullet points more concise.")
    else:
        feedback.append("Add bullet points to describe achievements.")

    value = max(0, min(100, round(total)))

    if not resume.keywords:
        feedback.append("Include role-specific keywords to match job descriptions.")

    return ScoreResult(value=value, feedback=feedback)
