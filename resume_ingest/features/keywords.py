from __future__ import annotations

import re
from collections import Counter

_NON_TOKEN_RE = re.compile(r"[^\w\s.+#]|_")

STOPWORDS_BY_LANGUAGE: dict[str, frozenset[str]] = {
    "en": frozenset({
        "the", "and", "a", "an", "to", "of", "in", "for", "with", "on", "at", "by", "as", "is",
        "are", "was", "were", "be", "been", "or", "from", "that", "this", "it", "i", "my", "our",
        "your", "their", "we", "you", "they", "he", "she", "his", "her", "its", "not", "but",
        "also", "into", "over", "than", "then", "such", "these", "those", "which", "who", "while",
        "have", "has", "had", "will", "can", "all", "any", "more", "most", "other", "some",
        "per", "via", "using", "present", "current",
    }),
    "es": frozenset({
        "el", "la", "los", "las", "un", "una", "unos", "unas", "y", "o", "de", "del", "en", "con",
        "por", "para", "que", "se", "su", "sus", "al", "como", "mas", "más", "pero", "sin", "sobre",
        "entre", "este", "esta", "estos", "estas", "fue", "son", "es", "actual",
    }),
    "fr": frozenset({
        "le", "la", "les", "un", "une", "des", "et", "ou", "de", "du", "en", "dans", "avec", "pour",
        "par", "sur", "que", "qui", "au", "aux", "ce", "cet", "cette", "ces", "son", "sa", "ses",
        "est", "sont", "pas", "plus", "mais", "leur", "leurs", "nous", "vous",
    }),
    "de": frozenset({
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einer", "eines", "einem", "und",
        "oder", "mit", "für", "von", "zu", "zur", "zum", "bei", "auf", "aus", "als", "im", "in",
        "ist", "sind", "war", "wurde", "nicht", "auch", "sowie", "über", "unter", "durch", "heute",
    }),
    "pt": frozenset({
        "o", "a", "os", "as", "um", "uma", "uns", "umas", "e", "ou", "de", "do", "da", "dos", "das",
        "em", "no", "na", "nos", "nas", "com", "por", "para", "que", "se", "seu", "sua", "como",
        "mais", "mas", "sem", "sobre", "entre", "atual",
    }),
    "it": frozenset({
        "il", "lo", "la", "gli", "le", "un", "uno", "una", "e", "o", "di", "del", "della", "dei",
        "delle", "in", "con", "per", "su", "che", "si", "suo", "sua", "come", "più", "ma", "senza",
        "tra", "fra", "sono", "oggi",
    }),
    "nl": frozenset({
        "de", "het", "een", "en", "of", "van", "in", "met", "voor", "op", "aan", "bij", "door",
        "dat", "die", "dit", "deze", "als", "zijn", "is", "was", "werd", "niet", "ook", "naar",
        "over", "uit", "heden",
    }),
    "pl": frozenset({
        "i", "w", "z", "na", "do", "od", "po", "dla", "przy", "oraz", "lub", "że", "się", "jest",
        "są", "był", "była", "jak", "nie", "to", "ten", "ta", "te", "przez", "pod", "nad", "obecnie",
    }),
}

STOPWORDS: frozenset[str] = frozenset().union(*STOPWORDS_BY_LANGUAGE.values())


def tokenize(text: str) -> list[str]:
    cleaned = _NON_TOKEN_RE.sub(" ", (text or "").lower())
    tokens: list[str] = []
    for raw in cleaned.split():
        token = raw.rstrip(".")
        if token:
            tokens.append(token)
    return tokens


def extract_keywords(text: str, limit: int = 15) -> list[str]:
    """Most frequent non-stopword tokens; ties keep first-occurrence order.

    Tokens of two characters or fewer are skipped, and so are tokens with no
    letters at all: years, counts and phone fragments would otherwise top the
    ranking of almost every resume.
    """
    counts: Counter[str] = Counter()
    for token in tokenize(text):
        if len(token) <= 2 or token in STOPWORDS:
            continue
        if not any(ch.isalpha() for ch in token):
            continue
        counts[token] += 1
    return [token for token, _count in counts.most_common(limit)]
