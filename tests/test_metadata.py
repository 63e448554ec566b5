from datetime import date
from pathlib import Path

from term_sheet.metadata import extract_metadata

FIXTURES = Path(__file__).parent / "fixtures"


def test_season_term_with_effective_date():
    metadata = extract_metadata("FALL TERM 2025 ... EFFECTIVE September 2, 2025")

    assert metadata.term_name == "FALL"
    assert metadata.term_number is None
    assert metadata.start_date == date(2025, 9, 2)
    assert metadata.end_date is None


def test_term_number_and_range_borrow_end_year():
    text = (FIXTURES / "structural_term.txt").read_text(encoding="utf-8")

    metadata = extract_metadata(text)

    assert metadata.term_number == "IV"
    assert metadata.location == "Manhattan"
    assert metadata.start_date == date(2025, 3, 31)
    assert metadata.end_date == date(2025, 4, 25)


def test_number_before_season_is_classified():
    metadata = extract_metadata("IV SPRING TERM\nRICHMOND COUNTY")

    assert metadata.term_name == "SPRING"
    assert metadata.term_number == "IV"
    assert metadata.location == "Staten Island"


def test_season_before_roman_number():
    metadata = extract_metadata("SPRING TERM IV")

    assert (metadata.term_name, metadata.term_number) == ("SPRING", "IV")


def test_range_rolls_start_back_over_new_year():
    metadata = extract_metadata("WINTER TERM\nDECEMBER 29 - JANUARY 23, 2026")

    assert metadata.start_date == date(2025, 12, 29)
    assert metadata.end_date == date(2026, 1, 23)


def test_numeric_range_borrows_year():
    metadata = extract_metadata("Term dates 9/2 - 10/31/2025")

    assert metadata.start_date == date(2025, 9, 2)
    assert metadata.end_date == date(2025, 10, 31)


def test_invalid_date_is_dropped():
    metadata = extract_metadata("EFFECTIVE FEBRUARY 30, 2025")

    assert metadata.start_date is None


def test_location_fallbacks():
    assert extract_metadata("111 CENTRE STREET, NEW YORK").location == "111 CENTRE STREET"
    assert extract_metadata("KINGS COUNTY SUPREME COURT").location == "Brooklyn"
    assert extract_metadata("ERIE COUNTY").location == "ERIE"


def test_nothing_found_leaves_fields_absent():
    metadata = extract_metadata("XYZ")

    assert metadata.to_dict() == {}


def test_unknown_county_of_form_passes_through():
    text = "SUPREME COURT OF THE STATE OF NEW YORK\nIN AND FOR THE COUNTY OF WESTCHESTER"

    assert extract_metadata(text).location == "WESTCHESTER"


def test_function_word_is_never_a_county():
    assert extract_metadata("HEARINGS FOR THE COUNTY\nSCHEDULE").location is None


def test_leap_day_rollover_keeps_end_date():
    metadata = extract_metadata("FEBRUARY 29 - FEBRUARY 10, 2028")

    assert metadata.start_date is None
    assert metadata.end_date == date(2028, 2, 10)
