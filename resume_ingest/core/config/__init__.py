from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    min_text_chars: int
    ocr_language: str
    ocr_dpi: int
    ocr_max_pages: int
    keyword_limit: int


def load_settings() -> Settings:
    return Settings(
        min_text_chars=_get_env_int("MIN_TEXT_CHARS", 20),
        ocr_language=_get_env("OCR_LANGUAGE", "eng") or "eng",
        ocr_dpi=_get_env_int("OCR_DPI", 300),
        ocr_max_pages=_get_env_int("OCR_MAX_PAGES", 10),
        keyword_limit=_get_env_int("KEYWORD_LIMIT", 15),
    )


settings = load_settings()

if settings.min_text_chars < 1:
    raise RuntimeError("MIN_TEXT_CHARS must be a positive integer.")

__all__ = ["Settings", "load_settings", "settings"]
