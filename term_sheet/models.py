"""Domain models for term-sheet fragments, metadata and assignments."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from .formatting import (
    EM_DASH,
    format_part,
    format_phone,
    format_sergeant,
    split_clerks,
)


@dataclass(frozen=True, slots=True)
class PositionedTextFragment:
    """Single decoded text run with its position on the page."""

    text: str
    x: float
    y: float
    font_size: float = 0.0


@dataclass(frozen=True, slots=True)
class Line:
    """Fragments sharing one quantised y coordinate, ordered left to right."""

    y: float
    fragments: Tuple[PositionedTextFragment, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(fragment.text for fragment in self.fragments).strip()


@dataclass(frozen=True, slots=True)
class Page:
    """Decoder output for one page (1-based ``number``)."""

    number: int
    fragments: Tuple[PositionedTextFragment, ...] = ()


@dataclass(frozen=True, slots=True)
class TermMetadata:
    term_name: Optional[str] = None
    term_number: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def to_dict(self) -> Dict[str, str]:
        """Return present fields only, dates as ISO strings."""
        out: Dict[str, str] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            out[item.name] = value.isoformat() if isinstance(value, date) else value
        return out


ClerkField = Union[List[str], str, None]


@dataclass(frozen=True, slots=True)
class TermAssignment:
    """One part/justice row recovered from a term sheet.

    ``None`` marks an absent field; strategies never store empty strings.
    """

    part: Optional[str] = None
    justice: Optional[str] = None
    room: Optional[str] = None
    tel: Optional[str] = None
    fax: Optional[str] = None
    sgt: Optional[str] = None
    clerks: ClerkField = None
    extension: Optional[str] = None

    @classmethod
    def build(cls, **values: Any) -> "TermAssignment":
        """Create an assignment, normalising blank strings and lists to ``None``."""
        cleaned: Dict[str, Any] = {}
        for key, value in values.items():
            if isinstance(value, str):
                value = value.strip() or None
            elif isinstance(value, (list, tuple)):
                value = [item.strip() for item in value if item and item.strip()] or None
            cleaned[key] = value
        return cls(**cleaned)

    def is_valid(self) -> bool:
        """A record is usable only when it names a part or a justice."""
        return bool((self.part or "").strip() or (self.justice or "").strip())

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            out[item.name] = list(value) if isinstance(value, list) else value
        return out

    def to_display(self) -> Dict[str, Any]:
        return {
            "part": format_part(self.part),
            "justice": (self.justice or "").strip() or EM_DASH,
            "room": (self.room or "").strip() or EM_DASH,
            "tel": format_phone(self.tel or self.extension),
            "fax": format_phone(self.fax),
            "sgt": format_sergeant(self.sgt),
            "clerks": split_clerks(self.clerks),
        }


@dataclass(frozen=True, slots=True)
class ArbitrationResult:
    assignments: List[TermAssignment] = field(default_factory=list)
    method: str = ""


@dataclass(frozen=True, slots=True)
class TermSheetResult:
    metadata: TermMetadata
    assignments: List[TermAssignment] = field(default_factory=list)
    method: str = ""
    page_count: int = 0

    def to_dict(self, display: bool = True) -> Dict[str, Any]:
        return {
            "method": self.method,
            "page_count": self.page_count,
            "metadata": self.metadata.to_dict(),
            "assignments": [
                assignment.to_display() if display else assignment.to_dict()
                for assignment in self.assignments
            ],
        }
