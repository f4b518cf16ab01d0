"""
Tests for the NextLesson schedule value.

This module tests parsing of `D/M/Y HHMM-HHMM`, the format errors reported
for each broken part of the grammar, and equality, hashing and ordering.
"""

from datetime import date, time

import pytest

from tutorbook.exceptions import InvalidFormatError, ParseError
from tutorbook.model.next_lesson import NextLesson


class TestParse:
    """Tests for NextLesson.parse()."""

    def test_valid_input(self):
        """Test date, start and end are read from a valid value."""
        lesson = NextLesson.parse("15/4/2023 1430-1600")

        assert lesson.date == date(2023, 4, 15)
        assert lesson.start_time == time(14, 30)
        assert lesson.end_time == time(16, 0)
        assert not lesson.is_empty

    def test_zero_padded_date(self):
        """Test zero-padded day and month are accepted."""
        assert NextLesson.parse("05/04/2023 0900-1000") == NextLesson.parse(
            "5/4/2023 0900-1000"
        )

    def test_boundary_times(self):
        """Test midnight and the last minute of the day are valid times."""
        lesson = NextLesson.parse("1/1/2024 0000-2359")
        assert lesson.start_time == time(0, 0)
        assert lesson.end_time == time(23, 59)

    def test_end_before_start_is_allowed(self):
        """Test the end time is not required to come after the start time."""
        lesson = NextLesson.parse("1/1/2024 1800-0900")
        assert lesson.start_time == time(18, 0)
        assert lesson.end_time == time(9, 0)

    @pytest.mark.parametrize(
        "value",
        [
            "15/4/2023 14301600",  # missing dash
            "15-04-2023 1430-1600",  # wrong date separator
            "15/4/2023 14:30-16:00",  # colon-separated time
            "15/4/20231430-1600",  # missing space
            "15/4/2023  1430-1600",  # two spaces
            "15/4/2023 1430-1600 ",  # trailing space
            "15/4 1430-1600",  # missing year
            "15/4/2023 143-1600",  # short time block
            "15/4/2023 1430--1600",  # double dash
            "31/2/2023 1430-1600",  # no such date
            "0/4/2023 1430-1600",  # day zero
            "15/4/2023 2400-2500",  # hour out of range
            "15/4/2023 1460-1600",  # minute out of range
            "-1/4/2023 1430-1600",  # negative day
            "1/1/99999999999999999999 1430-1600",  # year too large for a C long
            "1/1/" + "9" * 5000 + " 1430-1600",  # beyond the int conversion limit
            "",
        ],
    )
    def test_invalid_values_report_format_error(self, value):
        """Test each broken grammar rule raises a format error."""
        with pytest.raises(InvalidFormatError) as exc_info:
            NextLesson.parse(value)

        assert "Invalid format" in str(exc_info.value)
        assert exc_info.value.value == value

    def test_format_error_is_parse_error(self):
        """Test InvalidFormatError can be handled as a ParseError."""
        with pytest.raises(ParseError):
            NextLesson.parse("tomorrow afternoon")

    def test_is_valid(self):
        """Test the boolean validity check."""
        assert NextLesson.is_valid("15/4/2023 1430-1600")
        assert not NextLesson.is_valid("15/4/2023 14301600")

    @pytest.mark.parametrize(
        "value",
        ["15/4/2023 1430-1600", "05/04/2023 0900-0930", "29/2/2024 0000-2359"],
    )
    def test_text_form_parses_back(self, value):
        """Test the canonical text form re-parses to an equal value."""
        lesson = NextLesson.parse(value)
        assert NextLesson.parse(lesson.value) == lesson

    def test_canonical_text_form(self):
        """Test day and month are unpadded and times are four digits."""
        assert NextLesson.parse("05/04/2023 0900-0930").value == "5/4/2023 0900-0930"
        assert str(NextLesson.parse("15/4/2023 1430-1600")) == "15/4/2023 1430-1600"


class TestEmpty:
    """Tests for the NextLesson.EMPTY sentinel."""

    def test_empty_has_no_schedule(self):
        """Test EMPTY reports itself as empty with an empty text form."""
        assert NextLesson.EMPTY.is_empty
        assert NextLesson.EMPTY.value == ""

    def test_empty_never_equals_parsed_value(self):
        """Test EMPTY is distinguishable from any parsed lesson."""
        assert NextLesson.EMPTY != NextLesson.parse("1/1/2024 0000-0000")


class TestEqualityAndOrdering:
    """Tests for equality, hashing and ordering."""

    def test_equals(self):
        """Test structural equality."""
        lesson = NextLesson.parse("14/4/2025 1400-1600")

        assert lesson == lesson
        assert lesson == NextLesson.parse(lesson.value)
        assert lesson != 1
        assert lesson is not None
        assert lesson != NextLesson.parse("15/4/2025 1900-2100")

    def test_end_time_takes_part_in_equality(self):
        """Test lessons differing only in end time are not equal."""
        assert NextLesson.parse("14/4/2025 1400-1600") != NextLesson.parse(
            "14/4/2025 1400-1700"
        )

    def test_hash(self):
        """Test equal values hash alike and different values differ."""
        lesson1 = NextLesson.parse("14/4/2025 1400-1600")
        lesson2 = NextLesson.parse("14/4/2025 1400-1600")
        lesson3 = NextLesson.parse("15/4/2025 1900-2100")

        assert hash(lesson1) == hash(lesson2)
        assert hash(lesson1) != hash(lesson3)

    def test_ordering_by_date_then_start(self):
        """Test earlier dates, then earlier start times, sort first."""
        early = NextLesson.parse("1/3/2024 1600-1700")
        same_day_earlier = NextLesson.parse("1/3/2024 0900-1000")
        later = NextLesson.parse("2/3/2024 0800-0900")

        assert sorted([later, early, same_day_earlier]) == [
            same_day_earlier,
            early,
            later,
        ]

    def test_empty_sorts_last(self):
        """Test EMPTY orders after every scheduled lesson."""
        lesson = NextLesson.parse("31/12/9999 2300-2359")
        assert lesson < NextLesson.EMPTY
        assert not NextLesson.EMPTY < lesson

    def test_ordering_agrees_with_equality(self):
        """Test lessons sharing a slot but not an end time are still comparable."""
        shorter = NextLesson.parse("14/4/2025 1400-1600")
        longer = NextLesson.parse("14/4/2025 1400-1700")

        assert shorter.sort_key == longer.sort_key
        assert shorter < longer
        assert shorter <= longer
        assert not longer <= shorter
        assert shorter <= NextLesson.parse(shorter.value)
