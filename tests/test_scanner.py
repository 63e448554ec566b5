import re

from term_sheet.scanner import LineScanner, split_lines

STOP = re.compile(r"^STOP")


def test_split_lines_drops_blank_lines():
    assert split_lines("  one \n\n   \ntwo\n") == ["one", "two"]


def test_peek_and_advance_move_only_forward():
    scanner = LineScanner.from_text("a\nb\nc")

    assert len(scanner) == 3
    assert scanner.peek() == "a"
    assert scanner.peek(2) == "c"
    assert scanner.peek(3) is None
    scanner.advance(2)
    assert scanner.position == 2
    assert scanner.peek() == "c"
    scanner.advance(5)
    assert scanner.at_end()
    assert scanner.peek() is None


def test_lookahead_is_bounded_and_stops_at_pattern():
    scanner = LineScanner(["head", "one", "two", "STOP here", "after"])

    assert list(scanner.lookahead(8, [STOP])) == [(1, "one"), (2, "two")]
    assert list(scanner.lookahead(1)) == [(1, "one")]
    assert scanner.position == 0


def test_matches_any_checks_offset_line():
    scanner = LineScanner(["head", "STOP"])

    assert not scanner.matches_any([STOP])
    assert scanner.matches_any([STOP], offset=1)
    assert not scanner.matches_any([STOP], offset=4)
