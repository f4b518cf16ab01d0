"""
Converters from raw argument text to validated field values.

Every function strips surrounding whitespace before validating and raises
ParseError with the field's constraint message when the text is rejected.
"""

import re
from collections.abc import Iterable

from tutorbook.commands.index import Index
from tutorbook.exceptions import ParseError
from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.model.next_lesson import NextLesson

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_INTEGER = re.compile(r"\+?\d+", re.ASCII)


def parse_index(one_based_index: str) -> Index:
    """
    Parse a one-based list position.

    Raises:
        ParseError: If the text is not a positive whole number
    """
    trimmed = one_based_index.strip()
    if not _UNSIGNED_INTEGER.fullmatch(trimmed):
        raise ParseError(MESSAGE_INVALID_INDEX)
    try:
        position = int(trimmed)
    except ValueError as e:
        # Longer than the interpreter's integer string conversion limit.
        raise ParseError(MESSAGE_INVALID_INDEX) from e
    if position == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(position)


def parse_name(name: str) -> Name:
    trimmed = name.strip()
    if not Name.is_valid(trimmed):
        raise ParseError(Name.MESSAGE_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(phone: str) -> Phone:
    trimmed = phone.strip()
    if not Phone.is_valid(trimmed):
        raise ParseError(Phone.MESSAGE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(email: str) -> Email:
    trimmed = email.strip()
    if not Email.is_valid(trimmed):
        raise ParseError(Email.MESSAGE_CONSTRAINTS)
    return Email(trimmed)


def parse_address(address: str) -> Address:
    trimmed = address.strip()
    if not Address.is_valid(trimmed):
        raise ParseError(Address.MESSAGE_CONSTRAINTS)
    return Address(trimmed)


def parse_tag(tag: str) -> Tag:
    trimmed = tag.strip()
    if not Tag.is_valid(trimmed):
        raise ParseError(Tag.MESSAGE_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_subject(subject: str) -> Subject:
    trimmed = subject.strip()
    if not Subject.is_valid(trimmed):
        raise ParseError(Subject.MESSAGE_CONSTRAINTS)
    return Subject(trimmed)


def parse_subjects(subjects: Iterable[str]) -> frozenset[Subject]:
    return frozenset(parse_subject(subject) for subject in subjects)


def parse_schedule(schedule: str) -> NextLesson:
    """
    Parse a next lesson written as `D/M/Y HHMM-HHMM`.

    Params:
        schedule: Raw text such as `15/4/2023 1430-1600`

    Returns:
        The parsed NextLesson

    Raises:
        InvalidFormatError: If the text breaks the date/time grammar
    """
    return NextLesson.parse(schedule.strip())
