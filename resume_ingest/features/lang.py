from __future__ import annotations

import re

DEFAULT_LANGUAGE = "en"

_HEADING_VOCABULARY: dict[str, tuple[str, ...]] = {
    "en": ("summary", "experience", "education", "skills", "projects"),
    "es": ("resumen", "experiencia", "educación", "formación", "habilidades", "proyectos"),
    "fr": ("profil", "expérience", "formation", "compétences", "projets"),
    "de": ("zusammenfassung", "berufserfahrung", "erfahrung", "ausbildung", "kenntnisse", "fähigkeiten", "projekte"),
    "pt": ("resumo", "experiência", "educação", "formação", "competências", "projetos"),
    "it": ("riepilogo", "esperienza", "istruzione", "formazione", "competenze", "progetti"),
    "nl": ("samenvatting", "werkervaring", "ervaring", "opleiding", "vaardigheden", "projecten"),
    "pl": ("podsumowanie", "doświadczenie", "wykształcenie", "umiejętności", "projekty"),
}

_VOCABULARY_PATTERNS: dict[str, re.Pattern[str]] = {
    lang: re.compile(r"\b(?:" + "|".join(map(re.escape, words)) + r")\b", re.IGNORECASE)
    for lang, words in _HEADING_VOCABULARY.items()
}


def language_scores(text: str) -> dict[str, int]:
    t = text or ""
    return {lang: len(pattern.findall(t)) for lang, pattern in _VOCABULARY_PATTERNS.items()}


def detect_language(text: str) -> str:
    """Best-guess locale from section-heading vocabulary; advisory only."""
    scores = language_scores(text)
    best_lang, best_score = DEFAULT_LANGUAGE, 0
    for lang, count in scores.items():
        if count > best_score:
            best_lang, best_score = lang, count
    return best_lang
