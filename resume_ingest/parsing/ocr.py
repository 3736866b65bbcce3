from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Protocol

from .errors import ExtractionFailure

logger = logging.getLogger(__name__)


class OcrEngine(Protocol):
    def recognize_text(self, image: bytes, language: str) -> str: ...


class TesseractOcrEngine:
    """OCR through pytesseract; expects the tesseract binary on PATH."""

    def __init__(self, *, config: str = "--oem 3 --psm 6") -> None:
        self.config = config

    def recognize_text(self, image: bytes, language: str) -> str:
        import pytesseract
        from PIL import Image

        with Image.open(BytesIO(image)) as img:
            grayscale = img.convert("L")
            return (pytesseract.image_to_string(grayscale, lang=language, config=self.config) or "").strip()


def render_pdf_pages(file_path: Path, *, dpi: int, max_pages: int) -> list[bytes]:
    """Rasterize up to ``max_pages`` PDF pages to PNG bytes with PyMuPDF."""
    try:
        import fitz
    except ImportError as exc:
        raise ExtractionFailure("PyMuPDF is unavailable; cannot render PDF pages for OCR.") from exc

    images: list[bytes] = []
    try:
        with fitz.open(str(file_path)) as doc:
            for index, page in enumerate(doc):
                if index >= max_pages:
                    logger.info("ocr_page_limit_reached file=%s limit=%s", file_path.name, max_pages)
                    break
                pixmap = page.get_pixmap(dpi=dpi)
                images.append(pixmap.tobytes("png"))
    except ExtractionFailure:
        raise
    except Exception as exc:
        raise ExtractionFailure(f"Rendering PDF pages for OCR failed: {exc}") from exc
    return images


def recognize_document(
    file_path: Path,
    source_type: str,
    engine: OcrEngine,
    *,
    language: str,
    dpi: int,
    max_pages: int,
) -> str:
    if source_type == "pdf":
        images = render_pdf_pages(file_path, dpi=dpi, max_pages=max_pages)
    else:
        images = [file_path.read_bytes()]

    page_texts: list[str] = []
    for page_number, image in enumerate(images, start=1):
        text = (engine.recognize_text(image, language) or "").strip()
        logger.debug("ocr_page_done file=%s page=%s chars=%s", file_path.name, page_number, len(text))
        if text:
            page_texts.append(text)
    return "\n".join(page_texts)
