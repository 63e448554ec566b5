"""Term metadata: term name/number, effective dates and courthouse location."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional, Tuple

import dateparser

from .logging import get_logger
from .models import TermMetadata
from .patterns import (
    COUNTY_BOROUGHS,
    DATE_RANGE_PATTERNS,
    EFFECTIVE_DATE_PATTERNS,
    HAS_YEAR,
    LOCATION_NOISE,
    LOCATION_PATTERNS,
    ORDINAL_SUFFIX,
    ROMAN_NUMERAL,
    TERM_PATTERNS,
    YEAR,
)

logger = get_logger(__name__)

DATE_SETTINGS = {"DATE_ORDER": "MDY", "STRICT_PARSING": True}


def extract_metadata(text: str) -> TermMetadata:
    """Scan the full document text once per field; first matching pattern wins.

    Never raises. A field whose extraction fails is logged and left absent.
    """
    term_name: Optional[str] = None
    term_number: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    try:
        term_name, term_number = _find_term(text)
    except Exception as exc:
        logger.warning("metadata_term_failed", error=str(exc))

    try:
        start_date, end_date = _find_dates(text)
    except Exception as exc:
        logger.warning("metadata_dates_failed", error=str(exc))

    try:
        location = _find_location(text)
    except Exception as exc:
        logger.warning("metadata_location_failed", error=str(exc))

    metadata = TermMetadata(
        term_name=term_name,
        term_number=term_number,
        location=location,
        start_date=start_date,
        end_date=end_date,
    )
    logger.debug("metadata_extracted", **metadata.to_dict())
    return metadata


def _find_term(text: str) -> Tuple[Optional[str], Optional[str]]:
    for pattern in TERM_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        name: Optional[str] = None
        number: Optional[str] = None
        for group in match.groups():
            if not group:
                continue
            token = group.strip().upper()
            if ROMAN_NUMERAL.fullmatch(token):
                number = number or token
            elif YEAR.fullmatch(token):
                # A year names the calendar, not the term.
                continue
            else:
                name = name or token
        return name, number
    return None, None


def _find_dates(text: str) -> Tuple[Optional[date], Optional[date]]:
    for pattern in DATE_RANGE_PATTERNS:
        match = pattern.search(text)
        if match:
            return _parse_date_range(match.group(1), match.group(2))

    for pattern in EFFECTIVE_DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            return _parse_date(match.group(1)), None
    return None, None


def _parse_date_range(start_raw: str, end_raw: str) -> Tuple[Optional[date], Optional[date]]:
    end_date = _parse_date(end_raw)

    # When start lacks a year, borrow it from the end date
    borrowed = False
    if end_date is not None and not HAS_YEAR.search(start_raw):
        start_raw = _with_year(start_raw, end_date.year)
        borrowed = True

    start_date = _parse_date(start_raw)
    if borrowed and start_date is not None and end_date is not None and start_date > end_date:
        # Handle year rollover (e.g. Dec-Jan)
        try:
            start_date = start_date.replace(year=start_date.year - 1)
        except ValueError:
            # Feb 29 has no counterpart in the previous year
            logger.warning("metadata_start_date_dropped", value=start_raw, end_date=end_date.isoformat())
            start_date = None
    return start_date, end_date


def _with_year(raw: str, year: int) -> str:
    clean = raw.strip().rstrip(",")
    if "/" in clean:
        return f"{clean}/{year}"
    return f"{clean} {year}"


def _parse_date(raw: str) -> Optional[date]:
    clean = ORDINAL_SUFFIX.sub(r"\1", raw)
    clean = clean.replace(",", " ").replace(".", " ")
    clean = re.sub(r"\s+", " ", clean).strip()
    if not clean:
        return None
    parsed = dateparser.parse(clean, languages=["en"], settings=DATE_SETTINGS)
    if parsed is None:
        logger.warning("metadata_date_unparsed", value=raw)
        return None
    return parsed.date()


def _find_location(text: str) -> Optional[str]:
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        location = _clean_location(match.group(1))
        if location:
            return location
    return None


def _clean_location(raw: str) -> Optional[str]:
    clean = LOCATION_NOISE.sub(" ", raw)
    clean = re.sub(r"\s+", " ", clean).strip(" ,-")
    if not clean:
        return None
    return COUNTY_BOROUGHS.get(clean.upper(), clean)
