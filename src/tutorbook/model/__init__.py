"""
Person records and the uniqueness-enforcing registry that stores them.
"""

from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.model.next_lesson import NextLesson
from tutorbook.model.person import Person
from tutorbook.model.predicates import (
    NameContainsKeywordsPredicate,
    SubjectContainsKeywordsPredicate,
)
from tutorbook.model.unique_list import (
    ChangeKind,
    ListChange,
    UniqueEntityList,
    UniquePersonList,
)

__all__ = [
    "Address",
    "Email",
    "Name",
    "Phone",
    "Subject",
    "Tag",
    "NextLesson",
    "Person",
    "NameContainsKeywordsPredicate",
    "SubjectContainsKeywordsPredicate",
    "ChangeKind",
    "ListChange",
    "UniqueEntityList",
    "UniquePersonList",
]
