from pathlib import Path

import pytest

from term_sheet import layout
from term_sheet.layout import (
    PdfExtractionError,
    extract_layout_text,
    extract_pdf_text,
    reconstruct_lines,
)
from term_sheet.models import Page, PositionedTextFragment as Fragment

FIXTURES = Path(__file__).parent / "fixtures"


def _page(number, *rows):
    fragments = []
    for y, words in rows:
        for x, word in enumerate(words):
            fragments.append(Fragment(text=word, x=float(x * 40), y=y))
    return Page(number=number, fragments=tuple(fragments))


def test_reconstruct_lines_orders_top_down_and_left_to_right():
    fragments = [
        Fragment(text="World", x=50.0, y=700.04),
        Fragment(text="Below", x=10.0, y=680.0),
        Fragment(text="Hello", x=10.0, y=700.0),
        Fragment(text="   ", x=0.0, y=690.0),
    ]

    lines = reconstruct_lines(fragments)

    assert [line.text for line in lines] == ["Hello World", "Below"]
    assert lines[0].y == 700.0


def test_extract_layout_text_marks_following_page_number():
    pages = [
        _page(1, (700.0, ["PART", "1A"]), (650.0, ["SGT", "LOPEZ"])),
        _page(2, (700.0, ["PART", "2B"])),
    ]

    text = extract_layout_text(pages)

    assert text.splitlines() == [
        "PART 1A",
        "SGT LOPEZ",
        "========= PAGE 2 =========",
        "PART 2B",
    ]


def test_extract_layout_text_wraps_decoder_failures():
    def pages():
        yield _page(1, (700.0, ["PART", "1A"]))
        raise ValueError("broken xref table")

    with pytest.raises(PdfExtractionError, match="PDF extraction failed"):
        extract_layout_text(pages())


def test_extract_pdf_text_rejects_empty_and_oversized_input():
    with pytest.raises(PdfExtractionError, match="Invalid or empty PDF file"):
        extract_pdf_text(b"")

    with pytest.raises(PdfExtractionError, match="too large"):
        extract_pdf_text(b"%PDF-1.4" * 4, max_bytes=16)


def test_extract_pdf_text_rejects_non_pdf_bytes():
    with pytest.raises(PdfExtractionError):
        extract_pdf_text(b"this is certainly not a pdf document")


def test_extract_pdf_text_counts_pages(monkeypatch):
    pages = [
        _page(1, (700.0, ["SUPREME", "COURT", "OF", "THE", "STATE", "OF", "NEW", "YORK"])),
        _page(2, (700.0, ["PART", "1A", "JOHNSON", "ROOM", "204"])),
    ]
    monkeypatch.setattr(layout, "iter_pdf_pages", lambda data: iter(pages))

    text, page_count = extract_pdf_text(b"%PDF-1.4 stub")

    assert page_count == 2
    assert "========= PAGE 2 =========" in text
    assert text.endswith("PART 1A JOHNSON ROOM 204")


def test_extract_pdf_text_requires_some_text(monkeypatch):
    monkeypatch.setattr(layout, "iter_pdf_pages", lambda data: iter([Page(number=1)]))

    with pytest.raises(PdfExtractionError, match="No text could be extracted"):
        extract_pdf_text(b"%PDF-1.4 stub")


def test_pdf_words_are_read_top_down_across_pages():
    data = (FIXTURES / "two_page_term.pdf").read_bytes()

    pages = list(layout.iter_pdf_pages(data))

    assert [page.number for page in pages] == [1, 2]
    heights = {fragment.text: fragment.y for fragment in pages[0].fragments}
    assert heights["PART"] > heights["MARTINEZ"]

    text, page_count = extract_pdf_text(data)

    assert page_count == 2
    assert text.splitlines() == [
        "PART 1A JOHNSON ROOM 204",
        "SGT MARTINEZ",
        "========= PAGE 2 =========",
        "PART 2B SMITH ROOM 305",
        "SGT LOPEZ",
    ]
