"""One-line-per-assignment strategy with a bounded detail lookahead."""

from __future__ import annotations

from typing import Iterator

from ..models import TermAssignment
from ..patterns import ASSIGNMENT_LINE, PAGE_MARKER_LINE, PART_HEADING
from ..scanner import LineScanner
from .base import LineStrategy, RecordDraft, StrategyName, is_clerk_marker

LOOKAHEAD_LINES = 8
_STOPS = (ASSIGNMENT_LINE, PART_HEADING)


class PatternStrategy(LineStrategy):
    """Each assignment starts on a line holding part, justice and optional
    room/phone/extension; the following lines carry fax, sergeant and clerks.
    """

    name = StrategyName.PATTERN

    def _iter_records(self, scanner: LineScanner) -> Iterator[TermAssignment]:
        while not scanner.at_end():
            match = ASSIGNMENT_LINE.match(scanner.peek())
            if not match:
                scanner.advance()
                continue

            draft = RecordDraft(
                part=match.group("part"),
                justice=match.group("justice"),
                room=match.group("room"),
                tel=match.group("tel"),
                extension=match.group("extension"),
            )
            for _, line in scanner.lookahead(LOOKAHEAD_LINES, _STOPS):
                if PAGE_MARKER_LINE.match(line):
                    continue
                if draft.absorb_sergeant(line):
                    continue
                if draft.absorb_labelled(line):
                    continue
                if draft.sergeant_found or is_clerk_marker(line):
                    draft.add_clerk_line(line)

            yield draft.build()
            scanner.advance()
