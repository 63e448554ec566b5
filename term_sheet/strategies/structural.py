"""Block-opener strategy for multi-line assignment layouts."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from ..models import TermAssignment
from ..patterns import (
    BARE_PHONE_LINE,
    CLERK_CONTINUATION,
    CLERK_LABEL,
    PAGE_MARKER_LINE,
    STRUCTURAL_OPENERS,
    STRUCTURAL_STOPS,
)
from ..scanner import LineScanner
from .base import LineStrategy, RecordDraft, StrategyName

LOOKAHEAD_LINES = 6
CLERK_CONTINUATION_LINES = 2


def match_opener(line: str) -> Optional[Dict[str, Optional[str]]]:
    """Return the fields of the first block opener matching ``line``."""
    for _, pattern, field_order in STRUCTURAL_OPENERS:
        match = pattern.match(line)
        if match:
            return dict(zip(field_order, match.groups()))
    return None


class StructuralStrategy(LineStrategy):
    name = StrategyName.STRUCTURAL

    def _iter_records(self, scanner: LineScanner) -> Iterator[TermAssignment]:
        while not scanner.at_end():
            fields = match_opener(scanner.peek())
            if fields is None:
                scanner.advance()
                continue

            draft = RecordDraft(**fields)
            consumed = 0
            for offset, line in scanner.lookahead(LOOKAHEAD_LINES, STRUCTURAL_STOPS):
                if offset <= consumed or PAGE_MARKER_LINE.match(line):
                    continue
                if draft.absorb_sergeant(line):
                    continue
                if CLERK_LABEL.match(line):
                    draft.add_clerk_line(line)
                    consumed = self._read_clerk_continuation(scanner, offset, draft)
                    continue
                if draft.absorb_labelled(line):
                    continue
                bare_phone = BARE_PHONE_LINE.match(line)
                if bare_phone:
                    draft.set_if_absent("tel", bare_phone.group("tel"))
                    continue
                if CLERK_CONTINUATION.match(line):
                    draft.add_clerk_line(line)

            yield draft.build()
            scanner.advance()

    @staticmethod
    def _read_clerk_continuation(scanner: LineScanner, offset: int, draft: RecordDraft) -> int:
        """Collect up to two name lines after a CLERK label; return last offset used."""
        last = offset
        for extra in range(1, CLERK_CONTINUATION_LINES + 1):
            follow = scanner.peek(offset + extra)
            if follow is None or scanner.matches_any(STRUCTURAL_STOPS, offset + extra):
                break
            if not CLERK_CONTINUATION.match(follow):
                break
            draft.add_clerk_line(follow)
            last = offset + extra
        return last
