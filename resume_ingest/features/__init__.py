from .keywords import STOPWORDS, extract_keywords, tokenize
from .lang import DEFAULT_LANGUAGE, detect_language, language_scores

__all__ = [
    "STOPWORDS",
    "extract_keywords",
    "tokenize",
    "DEFAULT_LANGUAGE",
    "detect_language",
    "language_scores",
]
