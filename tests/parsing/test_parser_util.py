"""
Tests for the field converters in parser_util.
"""

from datetime import date, time

import pytest

from tutorbook.exceptions import InvalidFormatError, ParseError
from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.parsing import parser_util


class TestParseIndex:
    """Tests for parse_index()."""

    @pytest.mark.parametrize("text", ["1", "  1  ", "+3", "10"])
    def test_valid(self, text):
        index = parser_util.parse_index(text)
        assert index.one_based == int(text.strip())
        assert index.zero_based == int(text.strip()) - 1

    @pytest.mark.parametrize(
        "text", ["", "0", "-1", "a", "1 2", "1.5", "00", "9" * 5000]
    )
    def test_invalid(self, text):
        with pytest.raises(ParseError) as exc_info:
            parser_util.parse_index(text)
        assert str(exc_info.value) == parser_util.MESSAGE_INVALID_INDEX


class TestParseFields:
    """Tests for the single-field converters."""

    def test_values_are_trimmed(self):
        assert parser_util.parse_name("  Rachel Walker ") == Name("Rachel Walker")
        assert parser_util.parse_phone(" 123456 ") == Phone("123456")
        assert parser_util.parse_email(" rachel@example.com ") == Email("rachel@example.com")
        assert parser_util.parse_address(" 123 Main Street ") == Address("123 Main Street")
        assert parser_util.parse_tag(" friend ") == Tag("friend")
        assert parser_util.parse_subject(" Math ") == Subject("Math")

    @pytest.mark.parametrize(
        ("convert", "text", "expected_message"),
        [
            (parser_util.parse_name, "R@chel", Name.MESSAGE_CONSTRAINTS),
            (parser_util.parse_phone, "+651234", Phone.MESSAGE_CONSTRAINTS),
            (parser_util.parse_email, "example.com", Email.MESSAGE_CONSTRAINTS),
            (parser_util.parse_address, "   ", Address.MESSAGE_CONSTRAINTS),
            (parser_util.parse_tag, "#friend", Tag.MESSAGE_CONSTRAINTS),
            (parser_util.parse_subject, "Math?", Subject.MESSAGE_CONSTRAINTS),
        ],
    )
    def test_invalid_values_name_the_field(self, convert, text, expected_message):
        """Test each converter reports its field's constraint message."""
        with pytest.raises(ParseError) as exc_info:
            convert(text)
        assert str(exc_info.value) == expected_message

    def test_parse_tags_deduplicates(self):
        assert parser_util.parse_tags(["friend", "neighbour", "friend"]) == frozenset(
            {Tag("friend"), Tag("neighbour")}
        )

    def test_parse_tags_empty(self):
        assert parser_util.parse_tags([]) == frozenset()

    def test_parse_tags_rejects_any_invalid(self):
        with pytest.raises(ParseError):
            parser_util.parse_tags(["friend", "#bad"])

    def test_parse_subjects(self):
        assert parser_util.parse_subjects(["Math", "Physics"]) == frozenset(
            {Subject("Math"), Subject("Physics")}
        )


class TestParseSchedule:
    """Tests for parse_schedule()."""

    def test_valid(self):
        lesson = parser_util.parse_schedule("15/4/2023 1430-1600")
        assert lesson.date == date(2023, 4, 15)
        assert lesson.start_time == time(14, 30)
        assert lesson.end_time == time(16, 0)

    def test_surrounding_whitespace_is_trimmed(self):
        assert parser_util.parse_schedule(
            "  15/4/2023 1430-1600 "
        ) == parser_util.parse_schedule("15/4/2023 1430-1600")

    def test_missing_dash(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            parser_util.parse_schedule("15/4/2023 14301600")
        assert "Invalid format" in str(exc_info.value)
