from __future__ import annotations

_SCANNED_MARKERS = ("no selectable text", "scanned")


class ResumeExtractionError(RuntimeError):
    def __init__(self, message: str, *, code: str = "extraction_error"):
        super().__init__(message)
        self.code = code


class UnsupportedFileType(ResumeExtractionError):
    def __init__(self, message: str = "Unsupported file type. Please upload a PDF, DOCX, or TXT file."):
        super().__init__(message, code="unsupported_type")


class InsufficientText(ResumeExtractionError):
    def __init__(
        self,
        message: str = (
            "Could not extract text from the file: no selectable text found. "
            "The document may be a scanned image; try OCR, a text-based PDF, or a TXT export."
        ),
    ):
        super().__init__(message, code="insufficient_text")


class ExtractionFailure(ResumeExtractionError):
    def __init__(self, message: str):
        super().__init__(message, code="extraction_failed")


class OcrInsufficientText(ResumeExtractionError):
    def __init__(
        self,
        message: str = (
            "OCR could not recover enough text. Try a clearer scan or upload a PDF, DOCX, or TXT file."
        ),
    ):
        super().__init__(message, code="ocr_insufficient_text")


def is_scanned_signature(error: BaseException) -> bool:
    """True when an extraction error looks like an image-only document."""
    message = str(error).lower()
    return any(marker in message for marker in _SCANNED_MARKERS)
