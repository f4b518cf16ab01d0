"""
Validated value objects for the fields of a person record.

Each value class exposes `MESSAGE_CONSTRAINTS` describing what it accepts and
an `is_valid` check; constructing one from invalid text raises ValueError.
"""

import re

from attrs import field, frozen

_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_PATTERN = re.compile(r"\d{3,}", re.ASCII)
_ADDRESS_PATTERN = re.compile(r"[^\s].*", re.DOTALL)
_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")
_SUBJECT_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

_SPECIAL_CHARACTERS = "+_.-"
_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*"
_DOMAIN_LAST_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9]){1,}"
_EMAIL_PATTERN = re.compile(
    rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}"
)


def _matching(pattern: re.Pattern, message: str):
    def validate(instance, attribute, value):
        if not isinstance(value, str) or not pattern.fullmatch(value):
            raise ValueError(message)

    return validate


@frozen
class Name:
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    full_name: str = field(validator=_matching(_NAME_PATTERN, MESSAGE_CONSTRAINTS))

    @staticmethod
    def is_valid(text: str) -> bool:
        return _NAME_PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.full_name


@frozen
class Phone:
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str = field(validator=_matching(_PHONE_PATTERN, MESSAGE_CONSTRAINTS))

    @staticmethod
    def is_valid(text: str) -> bool:
        return _PHONE_PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@frozen
class Email:
    """An email address of the form local-part@domain."""

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up "
        "of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only "
        "by hyphens, if any."
    )

    value: str = field(validator=_matching(_EMAIL_PATTERN, MESSAGE_CONSTRAINTS))

    @staticmethod
    def is_valid(text: str) -> bool:
        return _EMAIL_PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@frozen
class Address:
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"

    value: str = field(validator=_matching(_ADDRESS_PATTERN, MESSAGE_CONSTRAINTS))

    @staticmethod
    def is_valid(text: str) -> bool:
        return _ADDRESS_PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@frozen
class Tag:
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    tag_name: str = field(validator=_matching(_TAG_PATTERN, MESSAGE_CONSTRAINTS))

    @staticmethod
    def is_valid(text: str) -> bool:
        return _TAG_PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


@frozen
class Subject:
    """A subject taught to a person, e.g. `Math` or `Additional Math`."""

    MESSAGE_CONSTRAINTS = (
        "Subjects should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    subject_name: str = field(
        validator=_matching(_SUBJECT_PATTERN, MESSAGE_CONSTRAINTS)
    )

    @staticmethod
    def is_valid(text: str) -> bool:
        return _SUBJECT_PATTERN.fullmatch(text) is not None

    def matches(self, keyword: str) -> bool:
        """Case-insensitive comparison against a search keyword."""
        return self.subject_name.casefold() == keyword.casefold()

    def __str__(self) -> str:
        return self.subject_name
