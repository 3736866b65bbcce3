from __future__ import annotations

import asyncio
import inspect
import logging
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from resume_ingest.core.config import Settings
from resume_ingest.normalize.normalize_resume import normalize_resume
from resume_ingest.parsing.errors import InsufficientText, ResumeExtractionError
from resume_ingest.parsing.models import ParsedDoc
from resume_ingest.parsing.ocr import OcrEngine
from resume_ingest.parsing.parse import DeclaredType, ExtractionStrategy, plan_extraction
from resume_ingest.schemas.normalized import NormalizedResume

logger = logging.getLogger(__name__)

OcrConfirmation = Callable[[ResumeExtractionError], bool | Awaitable[bool]]


async def _confirmed(confirm_ocr: OcrConfirmation, error: ResumeExtractionError) -> bool:
    answer = confirm_ocr(error)
    if inspect.isawaitable(answer):
        answer = await answer
    return bool(answer)


async def extract_resume_document(
    file_path: str | Path,
    declared_type: DeclaredType | None = None,
    *,
    content_type: str | None = None,
    ocr_engine: OcrEngine | None = None,
    confirm_ocr: OcrConfirmation | None = None,
    strategies: Sequence[ExtractionStrategy] | None = None,
    app_settings: Settings | None = None,
) -> ParsedDoc:
    """Await primary extraction, then OCR only after an explicit confirmation."""
    plan = plan_extraction(
        file_path,
        declared_type,
        content_type=content_type,
        strategies=strategies,
        app_settings=app_settings,
    )
    try:
        return await asyncio.to_thread(plan.read_primary)
    except InsufficientText as exc:
        if not plan.ocr_applies(exc, ocr_engine, confirm_ocr):
            raise
        if not await _confirmed(confirm_ocr, exc):
            plan.decline_ocr()
            raise
        logger.debug("resume_ocr_confirmed file=%s", plan.path.name)
        return await asyncio.to_thread(plan.read_ocr, ocr_engine, exc)


async def parse_resume_file(
    file_path: str | Path,
    declared_type: DeclaredType | None = None,
    *,
    content_type: str | None = None,
    ocr_engine: OcrEngine | None = None,
    confirm_ocr: OcrConfirmation | None = None,
    app_settings: Settings | None = None,
) -> NormalizedResume:
    parsed = await extract_resume_document(
        file_path,
        declared_type,
        content_type=content_type,
        ocr_engine=ocr_engine,
        confirm_ocr=confirm_ocr,
        app_settings=app_settings,
    )
    return normalize_resume(parsed)
