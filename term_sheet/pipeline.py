"""End-to-end orchestration: PDF bytes or text to a term-sheet result."""

from __future__ import annotations

from typing import Optional

from .arbitrator import parse_assignments
from .config import AppConfig, load_config
from .layout import extract_pdf_text
from .logging import get_logger
from .metadata import extract_metadata
from .models import TermSheetResult

logger = get_logger(__name__)


def parse_term_text(text: str, page_count: int = 0) -> TermSheetResult:
    metadata = extract_metadata(text)
    result = parse_assignments(text)
    if not result.assignments:
        logger.warning("no_assignments_found", method=result.method, characters=len(text))
    return TermSheetResult(
        metadata=metadata,
        assignments=result.assignments,
        method=result.method,
        page_count=page_count,
    )


def parse_term_sheet(data: bytes, config: Optional[AppConfig] = None) -> TermSheetResult:
    """Decode a term-sheet PDF and extract its metadata and assignments.

    Raises ``PdfExtractionError`` when the document yields no text; everything
    after decoding degrades instead of raising.
    """
    config = config or load_config()
    text, page_count = extract_pdf_text(data, max_bytes=config.max_pdf_bytes)
    result = parse_term_text(text, page_count=page_count)
    logger.info(
        "term_sheet_parsed",
        pages=page_count,
        method=result.method,
        assignments=len(result.assignments),
    )
    return result
