"""Shared strategy interface and record-building helpers."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol

from ..logging import get_logger
from ..models import TermAssignment
from ..patterns import (
    CLERK_LABEL,
    CLERK_MARKERS,
    CLERK_NAME,
    CLERK_SPLIT,
    EXTENSION_LINE,
    FAX_LINE,
    PHONE_LINE,
    ROOM_LINE,
    SERGEANT_LINE,
)
from ..scanner import LineScanner

logger = get_logger(__name__)

_JUSTICE_PREFIX = re.compile(r"^(?:(?:HON|HONORABLE|JUSTICE|JUDGE)\b\.?\s*)+", re.IGNORECASE)
_JUSTICE_TRAILING = re.compile(r"[\s,;:.\-–—]+$")


class StrategyName(str, Enum):
    PATTERN = "Pattern Matching"
    TABLE = "Table Format"
    STRUCTURAL = "Structural Pattern"


class ExtractionStrategy(Protocol):
    name: StrategyName

    def extract(self, text: str) -> List[TermAssignment]:
        ...


class LineStrategy:
    """Base for strategies that walk the document line by line.

    Subclasses implement ``_iter_records``. Records yielded before an error
    are kept; the error itself is logged.
    """

    name: StrategyName

    def extract(self, text: str) -> List[TermAssignment]:
        scanner = LineScanner.from_text(text)
        records: List[TermAssignment] = []
        try:
            for record in self._iter_records(scanner):
                records.append(record)
        except Exception as exc:
            logger.exception(
                "strategy_failed",
                strategy=self.name.value,
                line=scanner.position,
                records=len(records),
                error=str(exc),
            )
        logger.debug("strategy_extracted", strategy=self.name.value, records=len(records))
        return records

    def _iter_records(self, scanner: LineScanner) -> Iterator[TermAssignment]:
        raise NotImplementedError


class RecordDraft:
    """Mutable accumulator for one record while its lookahead window is read."""

    def __init__(self, **values: Optional[str]) -> None:
        self.values: Dict[str, Any] = {key: value for key, value in values.items() if value}
        self.sergeant_found = False
        self._clerk_lines: List[str] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set_if_absent(self, key: str, value: Optional[str]) -> bool:
        if value and value.strip() and not self.values.get(key):
            self.values[key] = value.strip()
            return True
        return False

    def absorb_sergeant(self, line: str) -> bool:
        """Consume a sergeant line; only the first one found is kept."""
        match = SERGEANT_LINE.match(line)
        if not match:
            return False
        if not self.sergeant_found:
            self.sergeant_found = True
            self.set_if_absent("sgt", match.group("name").strip(" :-"))
        return True

    def absorb_labelled(self, line: str) -> bool:
        """Consume fax, extension, phone and room lines."""
        matched = False
        fax = FAX_LINE.search(line)
        if fax:
            self.set_if_absent("fax", fax.group("fax").strip())
            matched = True
        extension = EXTENSION_LINE.search(line)
        if extension:
            self.set_if_absent("extension", extension.group("extension"))
            matched = True
        phone = PHONE_LINE.search(line)
        if phone:
            self.set_if_absent("tel", phone.group("tel"))
            matched = True
        room = ROOM_LINE.match(line)
        if room:
            self.set_if_absent("room", room.group("room"))
            matched = True
        return matched

    def add_clerk_line(self, line: str) -> None:
        self._clerk_lines.append(line)

    def build(self) -> TermAssignment:
        clerks = parse_clerk_lines(self._clerk_lines)
        values = dict(self.values)
        values["justice"] = clean_justice(values.get("justice"))
        return TermAssignment.build(clerks=clerks, **values)


def clean_justice(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    name = raw.replace("*", " ")
    name = _JUSTICE_PREFIX.sub("", name.strip())
    name = _JUSTICE_TRAILING.sub("", name)
    name = re.sub(r"\s+", " ", name).strip()
    return name or None


def is_clerk_marker(line: str) -> bool:
    return any(pattern.search(line) for pattern in CLERK_MARKERS)


def parse_clerk_lines(lines: Iterable[str]) -> List[str]:
    """Turn collected clerk lines into a list of names.

    Lines are joined, labels stripped and the result split on commas,
    slashes, ``&`` and ``and``. A single token is re-read with the
    honorific/initial name pattern, which separates names with no delimiter.
    """
    stripped = [CLERK_LABEL.sub("", line).strip() for line in lines]
    joined = ", ".join(part for part in stripped if part)
    if not joined:
        return []

    tokens = [token.strip(" ;:") for token in CLERK_SPLIT.split(joined)]
    tokens = [token for token in tokens if token]
    if len(tokens) <= 1:
        named = [match.group(0).strip() for match in CLERK_NAME.finditer(joined)]
        if named:
            return named
    return tokens
