"""
Keyword predicates used by the find commands to filter the person list.
"""

from attrs import field, frozen

from tutorbook.model.person import Person


@frozen
class NameContainsKeywordsPredicate:
    """Matches a person whose name contains any keyword as a whole word, ignoring case."""

    keywords: tuple[str, ...] = field(converter=tuple)

    def __call__(self, person: Person) -> bool:
        words = {word.casefold() for word in person.name.full_name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


@frozen
class SubjectContainsKeywordsPredicate:
    """Matches a person taking any subject equal to one of the keywords, ignoring case."""

    keywords: tuple[str, ...] = field(converter=tuple)

    def __call__(self, person: Person) -> bool:
        return any(
            subject.matches(keyword)
            for keyword in self.keywords
            for subject in person.subjects
        )
