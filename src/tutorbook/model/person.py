"""
Person record stored in the TutorBook registry.

This module contains the Person model: a tutee or parent contact with the
subjects taught, free-form tags and the next scheduled lesson.
"""

from pydantic import BaseModel, ConfigDict, Field

from tutorbook.model.fields import Address, Email, Name, Phone, Subject, Tag
from tutorbook.model.next_lesson import NextLesson


class Person(BaseModel):
    """
    An immutable person record.

    Two notions of sameness are used by the registry. `is_same_person` compares
    names only and decides whether two records describe the same person.
    `is_same_phone` compares phone numbers, which must also be unique. Full
    equality (`==`) compares every field and is what removal relies on.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Name
    phone: Phone
    email: Email
    address: Address
    subjects: frozenset[Subject] = Field(default_factory=frozenset)
    tags: frozenset[Tag] = Field(default_factory=frozenset)
    next_lesson: NextLesson = NextLesson.EMPTY

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Check whether both records describe the same person.

        Params:
            other: Person to compare against, may be None

        Returns:
            True if `other` has the same name
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def is_same_phone(self, other: "Person | None") -> bool:
        """
        Check whether both records share a phone number.

        Params:
            other: Person to compare against, may be None

        Returns:
            True if `other` has the same phone number
        """
        if other is self:
            return True
        return other is not None and other.phone == self.phone

    def __str__(self) -> str:
        subjects = ", ".join(sorted(str(subject) for subject in self.subjects))
        tags = "".join(sorted(str(tag) for tag in self.tags))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Subjects: {subjects}; Tags: {tags}; "
            f"Next lesson: {self.next_lesson}"
        )
