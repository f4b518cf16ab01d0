"""
Command requests produced by the TutorBook command parsers.

Each request is an immutable record of a fully validated command, ready to be
handed to whatever executes commands against the person registry.
"""

from dataclasses import dataclass
from typing import ClassVar

from tutorbook.commands.index import Index
from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.model.next_lesson import NextLesson
from tutorbook.model.person import Person
from tutorbook.model.predicates import (
    NameContainsKeywordsPredicate,
    SubjectContainsKeywordsPredicate,
)


@dataclass(frozen=True)
class AddCommand:
    """Adds a person to the registry."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [s/SUBJECT]... [t/TAG]... "
        "[l/NEXT_LESSON]\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 s/Math t/secondary l/15/4/2023 1430-1600"
    )

    person: Person


@dataclass(frozen=True)
class EditPersonDescriptor:
    """
    The fields to change on an existing person.

    Fields left as None are copied from the person being edited. An empty
    `subjects` or `tags` set clears them, and `NextLesson.EMPTY` clears the
    scheduled lesson.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    subjects: frozenset[Subject] | None = None
    tags: frozenset[Tag] | None = None
    next_lesson: NextLesson | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (
                self.name,
                self.phone,
                self.email,
                self.address,
                self.subjects,
                self.tags,
                self.next_lesson,
            )
        )

    def apply_to(self, person: Person) -> Person:
        """Build the edited copy of `person`."""
        return Person(
            name=self.name if self.name is not None else person.name,
            phone=self.phone if self.phone is not None else person.phone,
            email=self.email if self.email is not None else person.email,
            address=self.address if self.address is not None else person.address,
            subjects=self.subjects if self.subjects is not None else person.subjects,
            tags=self.tags if self.tags is not None else person.tags,
            next_lesson=(
                self.next_lesson if self.next_lesson is not None else person.next_lesson
            ),
        )


@dataclass(frozen=True)
class EditCommand:
    """Edits the person at a displayed position."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number used "
        "in the displayed person list. Existing values will be overwritten by the "
        "input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [s/SUBJECT]... [t/TAG]... [l/NEXT_LESSON]\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditPersonDescriptor


@dataclass(frozen=True)
class DeleteCommand:
    """Deletes the person at a displayed position."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: Index


@dataclass(frozen=True)
class FindCommand:
    """Lists persons whose names contain any of the keywords."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate


@dataclass(frozen=True)
class FindSubjectCommand:
    """Lists persons taking any of the given subjects."""

    COMMAND_WORD: ClassVar[str] = "findsubject"
    MESSAGE_USAGE: ClassVar[str] = (
        "findsubject: Finds all persons taking any of the specified subjects "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: SUBJECT [MORE_SUBJECTS]...\n"
        "Example: findsubject Math Physics"
    )

    predicate: SubjectContainsKeywordsPredicate


@dataclass(frozen=True)
class SortCommand:
    """Orders the person list by next lesson."""

    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        "sort: Sorts persons by their next lesson, earliest first. "
        "Persons without a lesson are listed last."
    )


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all persons."


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Clears all entries from the address book."


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        "help: Shows program usage instructions.\nExample: help"
    )


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program."


CommandRequest = (
    AddCommand
    | EditCommand
    | DeleteCommand
    | FindCommand
    | FindSubjectCommand
    | SortCommand
    | ListCommand
    | ClearCommand
    | HelpCommand
    | ExitCommand
)
