"""
Shared test fixtures and utilities for the tutorbook test suite.
"""

import pytest

from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.model.next_lesson import NextLesson
from tutorbook.model.person import Person


def build_person(
    name: str = "Alice Pauline",
    phone: str = "94351253",
    email: str = "alice@example.com",
    address: str = "123, Jurong West Ave 6, #08-111",
    subjects: tuple[str, ...] = ("Math",),
    tags: tuple[str, ...] = ("friends",),
    next_lesson: str | None = None,
) -> Person:
    """Build a Person from plain strings, with sensible defaults."""
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        subjects=frozenset(Subject(subject) for subject in subjects),
        tags=frozenset(Tag(tag) for tag in tags),
        next_lesson=NextLesson.parse(next_lesson) if next_lesson else NextLesson.EMPTY,
    )


@pytest.fixture
def person_factory():
    """Factory fixture for building Person records.

    Usage:
        def test_something(person_factory):
            alice = person_factory(name="Alice", phone="91234567")
    """
    return build_person


@pytest.fixture
def alice():
    return build_person()


@pytest.fixture
def bob():
    return build_person(
        name="Bob Choo",
        phone="22222222",
        email="bob@example.com",
        address="Block 123, Bobby Street 3",
        subjects=("Physics",),
        tags=("husband", "friends"),
        next_lesson="20/5/2024 1000-1200",
    )
