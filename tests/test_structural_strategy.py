from pathlib import Path

from term_sheet.strategies import StructuralStrategy
from term_sheet.strategies.structural import match_opener

FIXTURES = Path(__file__).parent / "fixtures"


def test_all_opener_forms_in_term_sheet():
    text = (FIXTURES / "structural_term.txt").read_text(encoding="utf-8")

    records = StructuralStrategy().extract(text)

    assert [record.to_dict() for record in records] == [
        {
            "part": "TAP A",
            "justice": "M. LEWIS",
            "room": "1180",
            "tel": "646-386-4107",
            "fax": "720-9302",
            "sgt": "MADIGAN",
            "clerks": ["A. WRIGHT", "A. SARMIENTO"],
            "extension": None,
        },
        {
            "part": "1",
            "justice": "J. SVETKEY",
            "room": "1600",
            "tel": "(6)4001",
            "fax": None,
            "sgt": "GONZALEZ",
            "clerks": ["J. ANDERSON"],
            "extension": None,
        },
        {
            "part": "22 W",
            "justice": "S. STATSINGER",
            "room": "733",
            "tel": None,
            "fax": None,
            "sgt": "MCBRIEN",
            "clerks": ["L. THOMAS"],
            "extension": None,
        },
    ]


def test_labelled_opener_with_bare_phone_and_unlabelled_clerk():
    text = "\n".join(
        [
            "PART=5 JUSTICE=K. JONES ROOM=220",
            "SGT: DAVIS",
            "646-386-4220",
            "Ms. Rivera",
            "HON. P. WHITE, PART 7 ROOM 301",
        ]
    )

    first, second = StructuralStrategy().extract(text)

    assert (first.part, first.justice, first.room) == ("5", "K. JONES", "220")
    assert first.sgt == "DAVIS"
    assert first.tel == "646-386-4220"
    assert first.clerks == ["Ms. Rivera"]
    assert (second.part, second.justice, second.room) == ("7", "P. WHITE", "301")


def test_reversed_opener_swaps_part_and_justice():
    fields = match_opener("JUSTICE S. STATSINGER PART 22 W ROOM 733")

    assert fields == {"justice": "S. STATSINGER", "part": "22 W", "room": "733"}


def test_plain_lines_do_not_open_blocks():
    assert match_opener("SUPREME COURT OF THE STATE OF NEW YORK") is None
    assert StructuralStrategy().extract("XYZ") == []
