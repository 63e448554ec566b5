"""Bounded line cursor shared by the extraction strategies."""

from __future__ import annotations

from re import Pattern
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple


def split_lines(text: str) -> List[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def matches_any(line: Optional[str], patterns: Iterable[Pattern[str]]) -> bool:
    if line is None:
        return False
    return any(pattern.search(line) for pattern in patterns)


class LineScanner:
    """Forward-only cursor over trimmed lines.

    ``peek`` and ``lookahead`` never move the cursor; only ``advance`` does.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)
        self._position = 0

    @classmethod
    def from_text(cls, text: str) -> "LineScanner":
        return cls(split_lines(text))

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def position(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._lines)

    def peek(self, offset: int = 0) -> Optional[str]:
        index = self._position + offset
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        self._position = min(len(self._lines), self._position + max(count, 0))

    def matches_any(self, patterns: Iterable[Pattern[str]], offset: int = 0) -> bool:
        return matches_any(self.peek(offset), patterns)

    def lookahead(
        self,
        limit: int,
        stop_patterns: Iterable[Pattern[str]] = (),
    ) -> Iterator[Tuple[int, str]]:
        """Yield ``(offset, line)`` for the next ``limit`` lines.

        Iteration ends early at the first line matching a stop pattern; that
        line is not yielded.
        """
        stops = list(stop_patterns)
        for offset in range(1, limit + 1):
            line = self.peek(offset)
            if line is None:
                return
            if stops and matches_any(line, stops):
                return
            yield offset, line
