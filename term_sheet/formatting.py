"""Display formatting for extracted term-assignment fields.

Every helper is total: missing or unparseable input renders as ``EM_DASH``.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union

__all__ = [
    "EM_DASH",
    "format_part",
    "format_phone",
    "format_sergeant",
    "format_clerks",
    "split_clerks",
]

EM_DASH = "—"

# Manhattan courthouse numbers are 646-386-XXXX; bare extensions carry no area.
DEFAULT_AREA_DIGIT = "6"

_NON_DIGIT = re.compile(r"\D")
_NON_ALPHA = re.compile(r"[^A-Za-z]")
_SERGEANT_TITLES = re.compile(
    r"^(?:(?:SGT|SERGEANT|SARGENT|LT|LIEUTENANT|CAPT|CAPTAIN|OFFICER)\b\.?\s*)+",
    re.IGNORECASE,
)
_CLERK_SEPARATORS = re.compile(r"\s*[,/]\s*")

ClerkValue = Union[str, Iterable[str], None]


def format_part(part: Optional[str], fallback: Optional[str] = None) -> str:
    """Return the first non-empty of ``part`` and ``fallback``."""
    for candidate in (part, fallback):
        if candidate and candidate.strip():
            return candidate.strip()
    return EM_DASH


def format_phone(raw: Optional[str]) -> str:
    """Render a phone number as ``(area)exchange``, e.g. ``(6)4107``."""
    if not raw:
        return EM_DASH
    digits = _NON_DIGIT.sub("", raw)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]

    if len(digits) == 4:
        return f"({DEFAULT_AREA_DIGIT}){digits}"
    if len(digits) == 5:
        return f"({digits[0]}){digits[1:]}"
    if len(digits) == 7:
        return f"({DEFAULT_AREA_DIGIT}){digits[-4:]}"
    if len(digits) == 10:
        return f"({digits[0]}){digits[-4:]}"
    return EM_DASH


def format_sergeant(raw: Optional[str]) -> str:
    """Strip rank titles and keep the surname (last token, letters only)."""
    if not raw:
        return EM_DASH
    name = _SERGEANT_TITLES.sub("", raw.strip())
    tokens = name.split()
    if not tokens:
        return EM_DASH
    surname = _NON_ALPHA.sub("", tokens[-1])
    return surname or EM_DASH


def split_clerks(value: ClerkValue) -> List[str]:
    """Collapse a clerk string or list into the canonical list of names."""
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[str] = _CLERK_SEPARATORS.split(value)
    else:
        items = value
    return [str(item).strip() for item in items if item is not None and str(item).strip()]


def format_clerks(value: ClerkValue) -> str:
    clerks = split_clerks(value)
    if not clerks:
        return EM_DASH
    return ", ".join(clerks)
