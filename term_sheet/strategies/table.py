"""Header-anchored strategy for column-laid-out term sheets."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..models import TermAssignment
from ..patterns import (
    COLUMN_LABEL_PATTERNS,
    PAGE_MARKER_LINE,
    TABLE_CELL,
    TABLE_END,
    TABLE_FIELD_PATTERNS,
    TABLE_HEADERS,
    TABLE_NAME_JOINER,
    TABLE_NAME_START,
    TABLE_ROW_PART,
    TABLE_TOKEN,
    TABLE_VALUE_TOKEN,
)
from ..scanner import LineScanner, matches_any
from .base import LineStrategy, StrategyName, clean_justice, parse_clerk_lines

Column = Tuple[str, int]
Cell = Tuple[int, str]
FieldValue = Union[str, List[str], None]

# Cost of placing a cell under a column whose field pattern rejects it.
_MISMATCH_PENALTY = 1000


def find_columns(header: str) -> List[Column]:
    """Return ``(field, start)`` pairs ordered by start offset.

    A field starts at the earliest offset of any of its labels.
    """
    columns: List[Column] = []
    for field, patterns in COLUMN_LABEL_PATTERNS.items():
        offsets = [match.start() for pattern in patterns for match in pattern.finditer(header)]
        if offsets:
            columns.append((field, min(offsets)))
    columns.sort(key=lambda column: column[1])
    return columns


def split_cells(row: str) -> List[Cell]:
    """Cells are runs of text separated by two or more spaces."""
    return [(match.start(), match.group(0)) for match in TABLE_CELL.finditer(row)]


def group_tokens(row: str, columns: Sequence[Column]) -> List[Cell]:
    """Rebuild cells from a single-spaced row using the shape of each token.

    A leading part code is one cell, every phone or number is its own cell,
    and consecutive words form a name cell. A new name starts at an initial
    or honorific unless the previous word ends in a list separator.
    """
    cells: List[Cell] = []
    position = 0
    if columns and columns[0][0] == "part":
        part = TABLE_ROW_PART.match(row)
        if part:
            cells.append((0, part.group(1)))
            position = part.end()

    run_start: Optional[int] = None
    run_end = 0
    previous = ""
    for token in TABLE_TOKEN.finditer(row, position):
        text = token.group(0)
        starts_new_name = TABLE_NAME_START.fullmatch(text) and not TABLE_NAME_JOINER.fullmatch(previous)
        if run_start is not None and (TABLE_VALUE_TOKEN.fullmatch(text) or starts_new_name):
            cells.append((run_start, row[run_start:run_end]))
            run_start = None
        if TABLE_VALUE_TOKEN.fullmatch(text):
            cells.append((token.start(), text))
            previous = ""
            continue
        if run_start is None:
            run_start = token.start()
        run_end = token.end()
        previous = text
    if run_start is not None:
        cells.append((run_start, row[run_start:run_end]))
    return cells


def extract_field(field: str, raw: str) -> FieldValue:
    raw = raw.strip()
    if not raw:
        return None
    if field == "clerks":
        return parse_clerk_lines([raw]) or None
    match = TABLE_FIELD_PATTERNS[field].search(raw)
    if not match:
        return None
    return match.group(1).strip() or None


def _fits(field: str, raw: str) -> bool:
    return extract_field(field, raw) is not None


def align_cells(cells: Sequence[Cell], columns: Sequence[Column]) -> Dict[str, str]:
    """Assign cells to columns, keeping order, at minimum total cost.

    Cost is the offset distance between a cell and its column, plus a
    penalty when the column's field pattern does not accept the cell.
    Requires ``len(cells) <= len(columns)``.
    """
    n, m = len(cells), len(columns)
    inf = float("inf")
    cost = [[0.0] * m for _ in range(n)]
    for i, (start, text) in enumerate(cells):
        for j, (field, column_start) in enumerate(columns):
            cost[i][j] = abs(start - column_start) + (0 if _fits(field, text) else _MISMATCH_PENALTY)

    # best[i][j]: first i cells placed within the first j columns
    best = [[inf] * (m + 1) for _ in range(n + 1)]
    for j in range(m + 1):
        best[0][j] = 0.0
    for i in range(1, n + 1):
        for j in range(i, m + 1):
            best[i][j] = min(best[i][j - 1], best[i - 1][j - 1] + cost[i - 1][j - 1])

    assigned: Dict[str, str] = {}
    i, j = n, m
    while i > 0:
        if j > i and best[i][j] == best[i][j - 1]:
            j -= 1
            continue
        assigned[columns[j - 1][0]] = cells[i - 1][1]
        i -= 1
        j -= 1
    return assigned


def slice_cells(row: str, columns: Sequence[Column]) -> Dict[str, str]:
    """Cut the row at the header's column offsets."""
    sliced: Dict[str, str] = {}
    for index, (field, start) in enumerate(columns):
        end: Optional[int] = columns[index + 1][1] if index + 1 < len(columns) else None
        sliced[field] = row[start:end]
    return sliced


class TableStrategy(LineStrategy):
    name = StrategyName.TABLE

    def _iter_records(self, scanner: LineScanner) -> Iterator[TermAssignment]:
        while not scanner.at_end() and not scanner.matches_any(TABLE_HEADERS):
            scanner.advance()
        if scanner.at_end():
            return

        columns = find_columns(scanner.peek())
        scanner.advance()
        while not scanner.at_end():
            row = scanner.peek()
            scanner.advance()
            if PAGE_MARKER_LINE.match(row) or matches_any(row, TABLE_HEADERS):
                continue
            if TABLE_END.match(row):
                return
            record = self._parse_row(row, columns)
            if record is not None:
                yield record

    @staticmethod
    def _parse_row(row: str, columns: Sequence[Column]) -> Optional[TermAssignment]:
        cells = split_cells(row)
        if len(cells) == 1:
            cells = group_tokens(row, columns)
        if 1 < len(cells) <= len(columns):
            raw_fields = align_cells(cells, columns)
        else:
            raw_fields = slice_cells(row, columns)

        values = {field: extract_field(field, raw) for field, raw in raw_fields.items()}
        if not any(values.values()):
            return None
        values["justice"] = clean_justice(values.get("justice"))
        return TermAssignment.build(**values)
