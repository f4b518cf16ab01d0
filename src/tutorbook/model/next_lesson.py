"""
Next lesson value for a person's schedule.

A next lesson is a calendar date plus a start and end time of day, written
as `D/M/Y HHMM-HHMM` (for example `15/4/2023 1430-1600`).
"""

import datetime
import re
from functools import total_ordering

from attrs import frozen

from tutorbook.exceptions import InvalidFormatError

_DATE_PATTERN = re.compile(r"(\d+)/(\d+)/(\d+)", re.ASCII)
_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})-(\d{2})(\d{2})", re.ASCII)


@total_ordering
@frozen
class NextLesson:
    """
    A single scheduled lesson occurrence.

    `NextLesson.EMPTY` marks a person with no lesson scheduled. It is the only
    instance without a date, so it never equals a parsed value. The ordering
    puts every scheduled lesson before `EMPTY`, then orders by date and start
    time. `sort_key` stops there, so lessons sharing a slot keep their order
    in a stable sort; comparisons also look at the end time to stay
    consistent with equality. The end time is not required to come after the
    start time.
    """

    MESSAGE_CONSTRAINTS = (
        "Next lesson should be in the format D/M/YYYY HHMM-HHMM, "
        "e.g. 15/4/2023 1430-1600"
    )

    date: datetime.date | None = None
    start_time: datetime.time | None = None
    end_time: datetime.time | None = None

    @classmethod
    def parse(cls, value: str) -> "NextLesson":
        """
        Parse a next lesson from its text form.

        Params:
            value: Text in the form `D/M/Y HHMM-HHMM`

        Returns:
            The parsed NextLesson

        Raises:
            InvalidFormatError: If the text breaks any part of the grammar
        """
        parts = value.split(" ")
        if len(parts) != 2 or not all(parts):
            raise InvalidFormatError(
                value, "expected a date and a time separated by a single space"
            )
        date_token, time_token = parts

        date_match = _DATE_PATTERN.fullmatch(date_token)
        if not date_match:
            raise InvalidFormatError(value, "date must be written as day/month/year")
        try:
            day, month, year = (int(group) for group in date_match.groups())
            lesson_date = datetime.date(year, month, day)
        except (ValueError, OverflowError) as e:
            raise InvalidFormatError(
                value, f"'{date_token}' is not a valid calendar date"
            ) from e

        time_match = _TIME_PATTERN.fullmatch(time_token)
        if not time_match:
            raise InvalidFormatError(
                value, "time must be written as HHMM-HHMM, e.g. 1430-1600"
            )
        start_hour, start_minute, end_hour, end_minute = (
            int(group) for group in time_match.groups()
        )
        for hour, minute in ((start_hour, start_minute), (end_hour, end_minute)):
            if hour > 23 or minute > 59:
                raise InvalidFormatError(
                    value, f"'{hour:02d}{minute:02d}' is not a valid 24-hour time"
                )

        return cls(
            date=lesson_date,
            start_time=datetime.time(start_hour, start_minute),
            end_time=datetime.time(end_hour, end_minute),
        )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check whether text is a well-formed next lesson."""
        try:
            cls.parse(value)
        except InvalidFormatError:
            return False
        return True

    @property
    def is_empty(self) -> bool:
        return self.date is None

    @property
    def value(self) -> str:
        """Canonical text form, which parses back to an equal NextLesson."""
        if self.is_empty:
            return ""
        return (
            f"{self.date.day}/{self.date.month}/{self.date.year} "
            f"{self.start_time:%H%M}-{self.end_time:%H%M}"
        )

    @property
    def sort_key(self) -> tuple[int, datetime.date, datetime.time]:
        if self.is_empty:
            return (1, datetime.date.min, datetime.time.min)
        return (0, self.date, self.start_time)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NextLesson):
            return NotImplemented
        return (self.sort_key, self.end_time or datetime.time.min) < (
            other.sort_key,
            other.end_time or datetime.time.min,
        )

    def __str__(self) -> str:
        return self.value


NextLesson.EMPTY = NextLesson()
