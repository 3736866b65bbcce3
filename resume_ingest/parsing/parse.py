from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Protocol, Sequence

from resume_ingest.core.config import Settings, settings as default_settings
from resume_ingest.features.lang import detect_language

from .errors import (
    ExtractionFailure,
    InsufficientText,
    OcrInsufficientText,
    ResumeExtractionError,
    UnsupportedFileType,
    is_scanned_signature,
)
from .models import ParsedDoc
from .ocr import OcrEngine, recognize_document

logger = logging.getLogger(__name__)

DeclaredType = Literal["pdf", "docx", "legacy-doc", "txt", "image"]
ConfirmOcr = Callable[[ResumeExtractionError], bool]

_EXTENSION_TYPES: dict[str, DeclaredType] = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "legacy-doc",
    ".txt": "txt",
    ".text": "txt",
    ".md": "txt",
    ".png": "image",
    ".jpg": "image",
    ".jpeg": "image",
    ".bmp": "image",
    ".tif": "image",
    ".tiff": "image",
    ".webp": "image",
}
_CONTENT_TYPES: dict[str, DeclaredType] = {
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/msword": "legacy-doc",
    "text/plain": "txt",
    "text/markdown": "txt",
    "image/png": "image",
    "image/jpeg": "image",
    "image/bmp": "image",
    "image/tiff": "image",
    "image/webp": "image",
}
OCR_SOURCE_TYPES = frozenset({"pdf", "image"})
LEGACY_DOC_MESSAGE = (
    "Legacy .doc files are not supported. Please convert the file to DOCX or PDF and upload it again."
)


class TextExtractor(Protocol):
    def extract(self, file_path: Path) -> str: ...


class PdfTextExtractor:
    def extract(self, file_path: Path) -> str:
        try:
            from pypdf import PdfReader
        except ImportError as exc:
            raise ExtractionFailure("pypdf is unavailable; cannot read PDF files.") from exc

        try:
            reader = PdfReader(str(file_path))
            text_parts = [(page.extract_text() or "").strip() for page in reader.pages]
        except Exception as exc:
            raise ExtractionFailure(f"PDF parsing failed: {exc}") from exc
        return "\n".join(part for part in text_parts if part)


class DocxTextExtractor:
    def extract(self, file_path: Path) -> str:
        try:
            from docx import Document
        except ImportError as exc:
            raise ExtractionFailure("python-docx is unavailable; cannot read DOCX files.") from exc

        try:
            document = Document(str(file_path))
        except Exception as exc:
            raise ExtractionFailure(f"DOCX parsing failed: {exc}") from exc
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
        return "\n".join(paragraphs)


class PlainTextExtractor:
    """Read a file as text; ``strict`` rejects binary payloads instead of replacing bytes."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def extract(self, file_path: Path) -> str:
        raw = file_path.read_bytes()
        if not self.strict:
            return raw.decode("utf-8", errors="replace")
        if b"\x00" in raw:
            raise ExtractionFailure(f"'{file_path.name}' is not a plain-text file.")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionFailure(f"'{file_path.name}' is not valid UTF-8 text: {exc}") from exc


@dataclass(slots=True)
class StrategyResult:
    name: str
    text: str = ""
    error: ResumeExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


ExtractionStrategy = tuple[str, TextExtractor]


def default_strategies(declared_type: DeclaredType) -> list[ExtractionStrategy]:
    if declared_type == "pdf":
        return [("pdf", PdfTextExtractor())]
    if declared_type == "docx":
        return [("docx", DocxTextExtractor()), ("docx-as-text", PlainTextExtractor(strict=True))]
    if declared_type == "txt":
        return [("txt", PlainTextExtractor())]
    return []


def resolve_declared_type(file_path: str | Path, content_type: str | None = None) -> DeclaredType:
    extension = Path(file_path).suffix.lower()
    if extension in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[extension]

    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type in _CONTENT_TYPES:
        return _CONTENT_TYPES[media_type]
    if media_type.startswith("text/"):
        return "txt"
    raise UnsupportedFileType(
        f"Unsupported file type '{extension or media_type or 'unknown'}'. "
        "Please upload a PDF, DOCX, or TXT file."
    )


def _compute_doc_id(text: str, file_path: Path) -> str:
    seed = text if text.strip() else file_path.name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def run_strategy(name: str, extractor: TextExtractor, file_path: Path, *, min_chars: int) -> StrategyResult:
    try:
        text = extractor.extract(file_path)
    except ResumeExtractionError as exc:
        return StrategyResult(name=name, error=exc)
    except Exception as exc:
        return StrategyResult(name=name, error=ExtractionFailure(f"{name} extraction failed: {exc}"))

    if len((text or "").strip()) < min_chars:
        return StrategyResult(name=name, text=text or "", error=InsufficientText())
    return StrategyResult(name=name, text=text)


def extract_primary_text(
    file_path: Path,
    strategies: Sequence[ExtractionStrategy],
    *,
    min_chars: int,
) -> tuple[str, list[str]]:
    """Try each strategy in order; the first error is surfaced when all fail."""
    warnings: list[str] = []
    first_error: ResumeExtractionError | None = None
    for name, extractor in strategies:
        result = run_strategy(name, extractor, file_path, min_chars=min_chars)
        if result.ok:
            return result.text, warnings
        logger.warning(
            "resume_extraction_strategy_failed file=%s strategy=%s code=%s: %s",
            file_path.name,
            name,
            result.error.code,
            result.error,
        )
        warnings.append(f"{name}: {result.error}")
        if first_error is None:
            first_error = result.error
    raise first_error or InsufficientText()


def ocr_fallback_allowed(declared_type: str, error: ResumeExtractionError) -> bool:
    return declared_type in OCR_SOURCE_TYPES and is_scanned_signature(error)


def extract_ocr_text(
    file_path: Path,
    declared_type: str,
    engine: OcrEngine,
    *,
    app_settings: Settings,
) -> str:
    text = recognize_document(
        file_path,
        declared_type,
        engine,
        language=app_settings.ocr_language,
        dpi=app_settings.ocr_dpi,
        max_pages=app_settings.ocr_max_pages,
    )
    if len(text.strip()) < app_settings.min_text_chars:
        raise OcrInsufficientText()
    return text


def build_parsed_doc(
    file_path: Path,
    declared_type: str,
    text: str,
    *,
    warnings: list[str] | None = None,
    ocr_used: bool = False,
) -> ParsedDoc:
    doc = ParsedDoc(
        doc_id=_compute_doc_id(text=text, file_path=file_path),
        source_type=declared_type,
        language=detect_language(text),
        text=text,
        parsing_warnings=list(warnings or []),
        ocr_used=ocr_used,
    )
    logger.info(
        "resume_extracted file=%s type=%s chars=%s ocr=%s",
        file_path.name,
        doc.source_type,
        len(text),
        ocr_used,
    )
    return doc


def check_supported(file_path: str | Path, declared_type: str | None, content_type: str | None = None) -> DeclaredType:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    kind = declared_type or resolve_declared_type(path, content_type)
    if kind == "legacy-doc":
        raise UnsupportedFileType(LEGACY_DOC_MESSAGE)
    if kind not in {"pdf", "docx", "txt", "image"}:
        raise UnsupportedFileType(
            f"Unsupported file type '{kind}'. Please upload a PDF, DOCX, or TXT file."
        )
    return kind  # type: ignore[return-value]


@dataclass(slots=True)
class ExtractionPlan:
    """A checked input file plus the strategy chain and settings used to read it."""

    path: Path
    kind: DeclaredType
    strategies: list[ExtractionStrategy]
    settings: Settings

    def read_primary(self) -> ParsedDoc:
        text, warnings = extract_primary_text(
            self.path, self.strategies, min_chars=self.settings.min_text_chars
        )
        return build_parsed_doc(self.path, self.kind, text, warnings=warnings)

    def ocr_applies(
        self,
        error: ResumeExtractionError,
        ocr_engine: OcrEngine | None,
        confirm_ocr: object | None,
    ) -> bool:
        return ocr_fallback_allowed(self.kind, error) and ocr_engine is not None and confirm_ocr is not None

    def decline_ocr(self) -> None:
        logger.info("resume_ocr_declined file=%s", self.path.name)

    def read_ocr(self, ocr_engine: OcrEngine, error: ResumeExtractionError) -> ParsedDoc:
        text = extract_ocr_text(self.path, self.kind, ocr_engine, app_settings=self.settings)
        return build_parsed_doc(self.path, self.kind, text, warnings=[str(error)], ocr_used=True)


def plan_extraction(
    file_path: str | Path,
    declared_type: DeclaredType | None = None,
    *,
    content_type: str | None = None,
    strategies: Sequence[ExtractionStrategy] | None = None,
    app_settings: Settings | None = None,
) -> ExtractionPlan:
    path = Path(file_path)
    kind = check_supported(path, declared_type, content_type)
    chain = list(strategies) if strategies is not None else default_strategies(kind)
    return ExtractionPlan(path=path, kind=kind, strategies=chain, settings=app_settings or default_settings)


def extract_document(
    file_path: str | Path,
    declared_type: DeclaredType | None = None,
    *,
    content_type: str | None = None,
    ocr_engine: OcrEngine | None = None,
    confirm_ocr: ConfirmOcr | None = None,
    strategies: Sequence[ExtractionStrategy] | None = None,
    app_settings: Settings | None = None,
) -> ParsedDoc:
    """Extract raw text from a resume file.

    OCR is only attempted for PDFs and images whose primary extraction ends
    with the no-selectable-text signature, and only when ``confirm_ocr``
    approves it.
    """
    plan = plan_extraction(
        file_path,
        declared_type,
        content_type=content_type,
        strategies=strategies,
        app_settings=app_settings,
    )
    try:
        return plan.read_primary()
    except InsufficientText as exc:
        if not plan.ocr_applies(exc, ocr_engine, confirm_ocr):
            raise
        if not confirm_ocr(exc):
            plan.decline_ocr()
            raise
        return plan.read_ocr(ocr_engine, exc)
