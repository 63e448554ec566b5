"""Precompiled pattern tables shared by the metadata extractor and strategies.

Building blocks are plain strings so that composite patterns can embed them;
everything a caller matches against is compiled once at import time.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Dict, List, Tuple

# -------------------- building blocks --------------------
PART_CODE = (
    r"(?:TAP\s+[A-Z]"
    r"|AT\d{1,2}\s+\d{1,3}"
    r"|\d{1,3}[A-Z]{0,2}(?:\s+(?:W|TH|Th)\b(?!\.))?"
    r"|[A-Z]{1,3}-?\d{1,3}[A-Z]?)"
)
PHONE = r"(?:\(\d{1,3}\)\s*\d{3,4}(?:-\d{4})?|\d{3}-\d{3}-\d{4}|\d{3}-\d{4})"
ROOM = r"\d{2,4}[A-Z]?"
HONORIFIC = r"(?:Mr|Mrs|Ms|Miss|Dr|MR|MRS|MS|MISS|DR)"

_LABEL_WORDS = r"(?i:ROOM|RM|TEL|PHONE|FAX|EXT|SGT|SERGEANT|CLERKS?|PART|JUSTICE|JUDGE)"
NAME_WORD = rf"(?!{_LABEL_WORDS}\b)[A-Z][A-Za-z.'\-]*"
NAME_WORDS = rf"{NAME_WORD}(?:\s+{NAME_WORD}){{0,3}}"

_ROOM_TAIL = rf"(?:\s*[,\-]?\s*(?:(?i:ROOM|RM)\.?\s*#?\s*)?(?P<room>{ROOM})\b(?!-))?"
_LABELLED_ROOM_TAIL = rf"(?:\s*[,\-]?\s*(?i:ROOM|RM)\.?\s*#?\s*({ROOM})\b)?"

# -------------------- line classifiers --------------------
# One line = one assignment: part code, justice, optional room, phone, extension.
ASSIGNMENT_LINE: Pattern[str] = re.compile(
    r"^(?!.*\b(?i:STREET|AVENUE|TERM|COUNTY|EFFECTIVE|PAGE)\b)"
    r"(?:(?i:PART)\s+)?"
    rf"(?P<part>{PART_CODE})\s*[-:]?\s+"
    rf"(?P<justice>{NAME_WORDS})"
    rf"{_ROOM_TAIL}"
    rf"(?:\s*[,\-]?\s*(?:(?i:TEL|PHONE|PH)\.?\s*:?\s*)?(?P<tel>{PHONE}))?"
    r"(?:\s*[,\-]?\s*(?i:EXT|X)\.?\s*:?\s*(?P<extension>\d{3,5})\b)?"
)
PART_HEADING: Pattern[str] = re.compile(r"^(?i:PART)\s+[A-Z0-9]{1,5}\b")
PAGE_MARKER_LINE: Pattern[str] = re.compile(r"^=+\s*PAGE\s+\d+\s*=+$")

FAX_LINE: Pattern[str] = re.compile(r"\bFAX\b\.?\s*[:#]?\s*(?P<fax>[\d()\-\s]{4,}\d)", re.IGNORECASE)
PHONE_LINE: Pattern[str] = re.compile(
    rf"\b(?:TEL|PHONE|PH)\b\.?\s*[:#]?\s*(?P<tel>{PHONE})", re.IGNORECASE
)
BARE_PHONE_LINE: Pattern[str] = re.compile(rf"^\s*(?P<tel>{PHONE})\s*$")
EXTENSION_LINE: Pattern[str] = re.compile(
    r"\b(?:EXT|EXTENSION)\b\.?\s*[:#]?\s*(?P<extension>\d{3,5})\b", re.IGNORECASE
)
ROOM_LINE: Pattern[str] = re.compile(rf"^\s*(?:ROOM|RM)\b\.?\s*[:#]?\s*(?P<room>{ROOM})\b", re.IGNORECASE)
SERGEANT_LINE: Pattern[str] = re.compile(
    r"^\s*(?:SGT|SERGEANT|SARGENT|SERG)\b\.?\s*[:\-]?\s*(?P<name>.*)$", re.IGNORECASE
)

CLERK_LABEL: Pattern[str] = re.compile(r"^\s*CLERKS?\b\s*[:\-]?\s*", re.IGNORECASE)
CLERK_MARKERS: List[Pattern[str]] = [
    re.compile(r"\bCLERKS?\b", re.IGNORECASE),
    re.compile(r"\b[A-Z]\.\s*[A-Z][A-Za-z'\-]+"),
    re.compile(rf"\b{HONORIFIC}\.?\s+[A-Z]"),
]
CLERK_CONTINUATION: Pattern[str] = re.compile(rf"^(?:{HONORIFIC}\.?\s+|[A-Z]\.\s*)[A-Z]")
CLERK_SPLIT: Pattern[str] = re.compile(r"\s*(?:,|/|&|\band\b)\s*", re.IGNORECASE)
CLERK_NAME: Pattern[str] = re.compile(
    rf"{HONORIFIC}\.?\s+[A-Z][A-Za-z'\-]+(?:\s+[A-Z][A-Za-z'\-]+)?"
    r"|[A-Z]\.\s*[A-Z][A-Za-z'\-]+"
)

# -------------------- structural block openers --------------------
# (name, pattern, field for each positional group)
StructuralOpener = Tuple[str, Pattern[str], Tuple[str, ...]]

STRUCTURAL_OPENERS: List[StructuralOpener] = [
    (
        "dash",
        re.compile(
            rf"^(?:(?i:PART)\s*)?({PART_CODE})\s*[-–—]\s*([A-Z][A-Za-z.'\- ]*?)\s*[-–—]\s*"
            rf"(?:(?i:ROOM|RM)\.?\s*#?\s*)?({ROOM})\b"
        ),
        ("part", "justice", "room"),
    ),
    (
        "labelled",
        re.compile(
            rf"^(?i:PART)\s*[=:]\s*({PART_CODE})\s*[,;]?\s+(?i:JUSTICE|JUDGE)\s*[=:]\s*(.+?)"
            r"(?:\s*[,;]?\s+(?i:ROOM|RM)\s*[=:]\s*(\S+))?\s*$"
        ),
        ("part", "justice", "room"),
    ),
    (
        "part_name",
        re.compile(
            rf"^(?i:PART)\s+({PART_CODE})\s*[:\-–—]?\s+(?:(?i:HON|HONORABLE|JUSTICE|JUDGE)\.?\s+)?"
            rf"({NAME_WORDS}){_LABELLED_ROOM_TAIL}"
        ),
        ("part", "justice", "room"),
    ),
    (
        "reversed",
        re.compile(
            rf"^(?:(?i:HON|HONORABLE|JUSTICE|JUDGE)\.?\s+)+({NAME_WORDS})\s*[,\-–—:]?\s*"
            rf"(?i:PART)\s+({PART_CODE}){_LABELLED_ROOM_TAIL}"
        ),
        ("justice", "part", "room"),
    ),
]
STRUCTURAL_STOPS: List[Pattern[str]] = [opener[1] for opener in STRUCTURAL_OPENERS] + [PART_HEADING]

# -------------------- table layout --------------------
TABLE_HEADERS: List[Pattern[str]] = [
    re.compile(r"\bPART\b.*\b(?:JUSTICE|JUDGE)\b.*\b(?:ROOM|LOCATION)\b.*\b(?:PHONE|TEL)", re.IGNORECASE),
    re.compile(r"\bPART\b.*\b(?:JUSTICE|JUDGE)\b.*\b(?:ROOM|RM|LOCATION)\b", re.IGNORECASE),
]
TABLE_END: Pattern[str] = re.compile(r"^\s*(?:NOTE|LEGEND)\b", re.IGNORECASE)
TABLE_CELL: Pattern[str] = re.compile(r"\S+(?: \S+)*")
COLUMN_LABELS: Dict[str, Tuple[str, ...]] = {
    "part": ("PART",),
    "justice": ("JUSTICE", "JUDGE"),
    "room": ("ROOM", "RM", "LOCATION"),
    "tel": ("PHONE", "TELEPHONE", "TEL"),
    "fax": ("FAX",),
    "sgt": ("SGT", "SERGEANT"),
    "clerks": ("CLERKS", "CLERK"),
}
COLUMN_LABEL_PATTERNS: Dict[str, List[Pattern[str]]] = {
    field: [re.compile(rf"\b{label}\b", re.IGNORECASE) for label in labels]
    for field, labels in COLUMN_LABELS.items()
}
# Single-spaced rows: tokens are grouped back into cells by shape.
TABLE_ROW_PART: Pattern[str] = re.compile(rf"^({PART_CODE})(?=\s|$)")
TABLE_TOKEN: Pattern[str] = re.compile(r"\(\d{1,3}\)\s*\d{3,4}(?:-\d{4})?|\S+")
TABLE_VALUE_TOKEN: Pattern[str] = re.compile(rf"{PHONE}|\d{{2,5}}[A-Z]?")
TABLE_NAME_START: Pattern[str] = re.compile(rf"(?:[A-Z]\.|{HONORIFIC}\.?)")
TABLE_NAME_JOINER: Pattern[str] = re.compile(r"(?:.*[,/&]|/|&|and)", re.IGNORECASE)
TABLE_FIELD_PATTERNS: Dict[str, Pattern[str]] = {
    "part": re.compile(rf"\b({PART_CODE})\b"),
    "justice": re.compile(r"([A-Z][A-Za-z.'\-]*(?:\s+[A-Z][A-Za-z.'\-]*)*)"),
    "room": re.compile(rf"\b({ROOM})\b"),
    "tel": re.compile(rf"({PHONE}|\b\d{{4,5}}\b)"),
    "fax": re.compile(rf"({PHONE}|\b\d{{4,5}}\b)"),
    "sgt": re.compile(
        r"(?:(?i:SGT|SERGEANT)\.?\s*)?([A-Z][A-Za-z.'\-]*(?:\s+[A-Z][A-Za-z.'\-]*)*)"
    ),
}

# -------------------- metadata --------------------
ROMAN_NUMERAL: Pattern[str] = re.compile(r"M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})")
YEAR: Pattern[str] = re.compile(r"\d{4}")

_SEASON = r"(?:FALL|AUTUMN|SPRING|SUMMER|WINTER)"
_TERM_ID = r"(?:[IVXLC]{1,7}|\d{4})"

TERM_PATTERNS: List[Pattern[str]] = [
    re.compile(rf"\b({_SEASON})[ \t]+TERM[ \t]+({_TERM_ID})\b", re.IGNORECASE),
    re.compile(rf"\b({_TERM_ID})[ \t]+({_SEASON})[ \t]+TERM\b", re.IGNORECASE),
    re.compile(rf"\bTERM[ \t]+([IVXLC]{{1,7}})\b(?:[ \t]*[-–—:,][ \t]*({_SEASON})\b)?", re.IGNORECASE),
    re.compile(rf"\b({_SEASON})[ \t]+TERM\b", re.IGNORECASE),
    re.compile(r"\b(CRIMINAL|CIVIL)[ \t]+TERM\b", re.IGNORECASE),
]

_MONTH = (
    r"\b(?:JAN(?:UARY)?|FEB(?:RUARY)?|MAR(?:CH)?|APR(?:IL)?|MAY|JUNE?|JULY?|AUG(?:UST)?"
    r"|SEPT?(?:EMBER)?|OCT(?:OBER)?|NOV(?:EMBER)?|DEC(?:EMBER)?)\.?"
)
_NAMED_DATE = rf"{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?(?:,?\s*\d{{4}})?"
_NUMERIC_DATE = r"\b\d{1,2}/\d{1,2}(?:/(?:\d{4}|\d{2}))?\b"
_RANGE_SEPARATOR = r"\s*(?:-|–|—|\bTO\b|\bTHROUGH\b|\bTHRU\b|\bUNTIL\b)\s*"

DATE_RANGE_PATTERNS: List[Pattern[str]] = [
    re.compile(rf"({_NAMED_DATE}){_RANGE_SEPARATOR}({_NAMED_DATE})", re.IGNORECASE),
    re.compile(rf"({_NUMERIC_DATE}){_RANGE_SEPARATOR}({_NUMERIC_DATE})", re.IGNORECASE),
]
EFFECTIVE_DATE_PATTERNS: List[Pattern[str]] = [
    re.compile(
        rf"\bEFFECTIVE(?:\s+DATE)?\s*:?\s*(?:ON\s+)?(?:[A-Z]+DAY,?\s+)?({_NAMED_DATE}|{_NUMERIC_DATE})",
        re.IGNORECASE,
    ),
]
HAS_YEAR: Pattern[str] = re.compile(r"\b\d{4}\b|\d{1,2}/\d{1,2}/\d{2}\b")
ORDINAL_SUFFIX: Pattern[str] = re.compile(r"(\d)(?:st|nd|rd|th)\b", re.IGNORECASE)

_KNOWN_COUNTY = r"(?:NEW[ \t]+YORK|KINGS|QUEENS|BRONX|RICHMOND)"
_FUNCTION_WORD = r"(?:THE|OF|FOR|AND|IN)\b"
LOCATION_PATTERNS: List[Pattern[str]] = [
    re.compile(rf"\bCOUNTY[ \t]+OF[ \t]+({_KNOWN_COUNTY})\b", re.IGNORECASE),
    re.compile(rf"\b({_KNOWN_COUNTY})[ \t]+COUNTY\b", re.IGNORECASE),
    re.compile(rf"\bCOUNTY[ \t]+OF[ \t]+(?!{_FUNCTION_WORD})([A-Z][A-Z.'\-]{{2,}})\b"),
    re.compile(r"\b(\d{1,4}[ \t]+CENTRE[ \t]+STREET)\b", re.IGNORECASE),
    re.compile(rf"\b(?!{_FUNCTION_WORD})([A-Z]{{3,}})[ \t]+COUNTY\b"),
    re.compile(r"^[ \t]*([A-Z][A-Z0-9 .,'&\-]*?\bCOURTHOUSE)\b", re.MULTILINE),
]
LOCATION_NOISE: Pattern[str] = re.compile(r"\bSUPREME[ \t]+COURT\b|\bCOUNTY\b|\bCOURTHOUSE\b", re.IGNORECASE)
COUNTY_BOROUGHS: Dict[str, str] = {
    "NEW YORK": "Manhattan",
    "KINGS": "Brooklyn",
    "QUEENS": "Queens",
    "BRONX": "Bronx",
    "RICHMOND": "Staten Island",
}
