"""Layout reconstruction: positioned PDF fragments to page-marked plain text."""

from __future__ import annotations

import io
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

import pdfplumber

from .config import DEFAULT_MAX_PDF_BYTES
from .logging import get_logger
from .models import Line, Page, PositionedTextFragment

logger = get_logger(__name__)

PAGE_MARKER = "========= PAGE {number} ========="
MIN_TEXT_CHARS = 50


class PdfExtractionError(RuntimeError):
    """Raised when a PDF cannot be turned into text."""

    def __init__(self, message: str = "PDF extraction failed") -> None:
        super().__init__(message)


def reconstruct_lines(fragments: Iterable[PositionedTextFragment]) -> List[Line]:
    """Group fragments into lines by y rounded to one decimal place.

    Lines come back top to bottom (descending y); fragments within a line
    left to right.
    """
    buckets: Dict[float, List[PositionedTextFragment]] = defaultdict(list)
    for fragment in fragments:
        if not fragment.text or not fragment.text.strip():
            continue
        buckets[round(fragment.y, 1)].append(fragment)

    lines: List[Line] = []
    for y in sorted(buckets, reverse=True):
        ordered = tuple(sorted(buckets[y], key=lambda fragment: fragment.x))
        line = Line(y=y, fragments=ordered)
        if line.text:
            lines.append(line)
    return lines


def _render_pages(pages: Iterable[Page]) -> Tuple[str, int]:
    chunks: List[str] = []
    page_count = 0
    try:
        for page in pages:
            if page_count:
                chunks.append(PAGE_MARKER.format(number=page.number))
            chunks.extend(line.text for line in reconstruct_lines(page.fragments))
            page_count += 1
    except PdfExtractionError:
        raise
    except Exception as exc:
        logger.exception("pdf_extraction_failed", pages_read=page_count, error=str(exc))
        raise PdfExtractionError() from exc
    return "\n".join(chunks), page_count


def extract_layout_text(pages: Iterable[Page]) -> str:
    """Join the reconstructed lines of every page, marking page boundaries.

    The marker before a page carries that page's number, so the first page has
    no marker and the second is introduced by ``========= PAGE 2 =========``.
    """
    text, _ = _render_pages(pages)
    return text


def iter_pdf_pages(data: bytes) -> Iterator[Page]:
    """Decode PDF bytes one page at a time with pdfplumber.

    pdfplumber measures from the top of the page; fragments are converted to a
    bottom-origin y so that larger values sit higher on the page.
    """
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for number, page in enumerate(pdf.pages, start=1):
            height = float(page.height)
            words = page.extract_words(keep_blank_chars=False, extra_attrs=["size"])
            fragments = tuple(
                PositionedTextFragment(
                    text=word["text"],
                    x=float(word["x0"]),
                    y=height - float(word["bottom"]),
                    font_size=float(word.get("size") or 0.0),
                )
                for word in words
            )
            logger.debug("pdf_page_decoded", page=number, fragments=len(fragments))
            yield Page(number=number, fragments=fragments)


def extract_pdf_text(data: bytes, max_bytes: int = DEFAULT_MAX_PDF_BYTES) -> Tuple[str, int]:
    """Validate ``data`` and return its reconstructed text and page count."""
    if not data:
        logger.error("pdf_rejected", reason="empty")
        raise PdfExtractionError("Invalid or empty PDF file")
    if len(data) > max_bytes:
        limit_mb = max(1, max_bytes // (1024 * 1024))
        logger.error("pdf_rejected", reason="too_large", size=len(data), max_bytes=max_bytes)
        raise PdfExtractionError(f"PDF file too large (max {limit_mb}MB)")

    text, page_count = _render_pages(iter_pdf_pages(data))
    characters = len(text.strip())
    if characters == 0:
        logger.error("pdf_no_text", pages=page_count)
        raise PdfExtractionError("No text could be extracted from the PDF")
    if characters < MIN_TEXT_CHARS:
        logger.warning("pdf_text_sparse", pages=page_count, characters=characters)

    logger.info("pdf_text_extracted", pages=page_count, characters=characters)
    return text, page_count
