from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ParsedDoc(BaseModel):
    doc_id: str
    source_type: str
    language: str | None = None
    text: str
    parsing_warnings: list[str] = Field(default_factory=list)
    ocr_used: bool = False

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt", "image"}:
            raise ValueError("source_type must be one of: pdf, docx, txt, image")
        return normalized
