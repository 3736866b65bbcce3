from __future__ import annotations

import re

CANONICAL_SECTIONS = (
    "header",
    "summary",
    "experience",
    "projects",
    "education",
    "skills",
    "certifications",
    "conferences",
    "publications",
    "awards",
    "other",
)

_DECORATION = "•●○◦▪▫■□◆◇►▶*·-–—_=~#|: \t"
_TRAILING_PUNCT_RE = re.compile(r"[\s:|\-–—]+$")

_HEADING_VARIANTS: dict[str, tuple[str, ...]] = {
    "summary": (
        # en
        "summary", "professional summary", "career summary", "executive summary", "profile",
        "professional profile", "about", "about me", "objective", "career objective", "overview",
        # es
        "resumen", "resumen profesional", "perfil", "perfil profesional", "objetivo", "sobre mí",
        "acerca de mí",
        # fr
        "résumé", "profil", "profil professionnel", "à propos", "à propos de moi", "objectif",
        # de
        "zusammenfassung", "über mich", "kurzprofil", "berufsprofil",
        # pt
        "resumo", "resumo profissional", "sobre mim", "perfil profissional",
        # it
        "riepilogo", "profilo", "profilo professionale", "chi sono", "sommario",
        # nl
        "samenvatting", "profiel", "over mij",
        # pl
        "podsumowanie", "profil zawodowy", "o mnie", "cel zawodowy",
    ),
    "experience": (
        "experience", "work experience", "professional experience", "relevant experience",
        "employment", "employment history", "work history", "career history",
        "experiencia", "experiencia laboral", "experiencia profesional", "trayectoria profesional",
        "expérience", "expériences", "expérience professionnelle", "expériences professionnelles",
        "parcours professionnel",
        "berufserfahrung", "erfahrung", "berufliche erfahrung", "beruflicher werdegang",
        "experiência", "experiência profissional", "histórico profissional",
        "esperienza", "esperienze", "esperienza professionale", "esperienze lavorative",
        "werkervaring", "ervaring", "professionele ervaring", "werkgeschiedenis",
        "doświadczenie", "doświadczenie zawodowe", "historia zatrudnienia",
    ),
    "projects": (
        "projects", "personal projects", "key projects", "selected projects", "side projects",
        "academic projects",
        "proyectos", "proyectos personales",
        "projets", "projets personnels",
        "projekte",
        "projetos",
        "progetti",
        "projecten",
        "projekty",
    ),
    "education": (
        "education", "academic background", "education and training", "education & training",
        "educación", "formación", "formación académica", "estudios",
        "éducation", "formation", "études", "formation académique",
        "ausbildung", "bildung", "bildungsweg", "studium",
        "educação", "formação", "formação acadêmica",
        "istruzione", "formazione", "percorso di studi",
        "opleiding", "opleidingen", "onderwijs",
        "wykształcenie", "edukacja",
    ),
    "skills": (
        "skills", "technical skills", "core skills", "key skills", "core competencies",
        "competencies", "skills & tools", "skills and tools", "tech stack", "technologies",
        "habilidades", "competencias", "aptitudes", "conocimientos",
        "compétences", "compétences techniques",
        "kenntnisse", "fähigkeiten", "kompetenzen", "fachkenntnisse",
        "competências", "habilidades técnicas",
        "competenze", "competenze tecniche",
        "vaardigheden", "competenties",
        "umiejętności", "kompetencje",
    ),
    "certifications": (
        "certifications", "certification", "certificates", "licenses & certifications",
        "licenses and certifications",
        "certificaciones", "certificados",
        "certificats",
        "zertifikate", "zertifizierungen",
        "certificações",
        "certificazioni",
        "certificaten",
        "certyfikaty",
    ),
    "conferences": (
        "conferences", "talks", "speaking", "presentations",
        "conferencias", "conférences", "konferenzen", "vorträge", "conferências",
        "conferenze", "conferenties", "konferencje",
    ),
    "publications": (
        "publications", "publicaciones", "publikationen", "veröffentlichungen",
        "publicações", "pubblicazioni", "publicaties", "publikacje",
    ),
    "awards": (
        "awards", "honors", "honours", "achievements", "awards & honors", "awards and honors",
        "premios", "logros", "distinctions", "prix", "auszeichnungen", "prêmios", "premi",
        "riconoscimenti", "prijzen", "onderscheidingen", "nagrody", "osiągnięcia",
    ),
    "other": (
        "interests", "hobbies", "languages", "references", "volunteer", "volunteering",
        "additional information",
        "intereses", "idiomas",
        "centres d'intérêt", "langues",
        "interessen", "sprachen", "hobbys",
        "interesses",
        "interessi", "lingue",
        "talen", "hobby's",
        "zainteresowania", "języki",
    ),
}

HEADING_DICTIONARY: dict[str, str] = {
    variant: canonical
    for canonical, variants in _HEADING_VARIANTS.items()
    for variant in variants
}
for _canonical in CANONICAL_SECTIONS[1:-1]:
    HEADING_DICTIONARY.setdefault(_canonical, _canonical)

# Priority order matters: the first pattern that matches wins.
_KEYWORD_FALLBACKS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("summary", re.compile(r"summar|profil|objective|about me|resumen|résumé|zusammenfassung|resumo|riepilogo|samenvatting|podsumowanie")),
    ("experience", re.compile(r"experien|employment|work history|career history|erfahrung|esperienz|ervaring|doświadczenie")),
    ("education", re.compile(r"educat|academ|educaci|formaci|formação|études|ausbildung|bildung|istruzione|opleiding|wykształcenie|edukacja")),
    ("projects", re.compile(r"project|proyecto|projet|projekt|projeto|progett")),
    ("skills", re.compile(r"skill|competen|compétence|habilidad|kenntnisse|fähigkeit|vaardighed|umiejętn|kompetenz")),
    ("certifications", re.compile(r"certif|licen|zertifi|certyfikat")),
    ("conferences", re.compile(r"conferen|konferen|vorträge")),
    ("publications", re.compile(r"publica|publikation|pubblicazion|veröffentlich|publikacj")),
    ("awards", re.compile(r"award|honou?r|achievement|premio|auszeichnung|nagrod")),
)

_ALL_CAPS_EXTRA = set(" &/+-")


def clean_heading(line: str) -> str:
    return (line or "").strip(_DECORATION)


def looks_all_caps(text: str) -> bool:
    if not 3 <= len(text) <= 47:
        return False
    if not any(ch.isalpha() for ch in text):
        return False
    return all((ch.isalpha() and ch.isupper()) or ch in _ALL_CAPS_EXTRA for ch in text)


def normalize_heading(line: str) -> str | None:
    """Map a candidate heading line to a canonical section name, or None."""
    cleaned = clean_heading(line)
    if not cleaned:
        return None

    lowered = _TRAILING_PUNCT_RE.sub("", cleaned.lower())
    lowered = re.sub(r"\s+", " ", lowered).strip()
    canonical = HEADING_DICTIONARY.get(lowered)
    if canonical is not None:
        return canonical

    if looks_all_caps(cleaned):
        for section, pattern in _KEYWORD_FALLBACKS:
            if pattern.search(lowered):
                return section
    return None
