"""
Uniqueness-enforcing lists for the TutorBook registry.

This module contains UniqueEntityList, an ordered list that rejects entries
colliding with an existing one on either of two independent keys, and
UniquePersonList, its binding to Person names and phone numbers.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from tutorbook.exceptions import (
    DuplicateIdentityError,
    DuplicateSecondaryKeyError,
    EntityNotFoundError,
)
from tutorbook.model.person import Person

logger = logging.getLogger(__name__)

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


class ChangeKind(Enum):
    """Kind of mutation reported to list subscribers."""

    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"
    RESET = "reset"
    SORT = "sort"


@dataclass(frozen=True)
class ListChange:
    """A change notification sent to subscribers after a mutation."""

    kind: ChangeKind
    revision: int


Listener = Callable[[ListChange], None]


class UniqueEntityList(Generic[T]):
    """
    An ordered list enforcing two independent uniqueness constraints.

    Adding and replacing entries use the identity and key comparators to keep
    the list free of collisions. Removal uses full equality, so only an entry
    with exactly the same fields is removed. Every operation validates first
    and mutates after, so a failed call leaves the list untouched.

    Subscribers are called synchronously after each successful mutation. A
    subscriber that raises is logged and skipped; the mutation stands and the
    remaining subscribers are still called.
    """

    def __init__(
        self,
        is_same_identity: Comparator,
        is_same_key: Comparator,
        label: str = "entities",
        item_label: str = "entity",
        key_label: str = "unique keys",
    ):
        self._is_same_identity = is_same_identity
        self._is_same_key = is_same_key
        self._label = label
        self._item_label = item_label
        self._key_label = key_label
        self._items: list[T] = []
        self._listeners: list[Listener] = []
        self._revision = 0

    @property
    def revision(self) -> int:
        """Number of mutations applied so far."""
        return self._revision

    def contains(self, to_check: T) -> bool:
        """Return True if an entry with the same identity is stored."""
        return any(self._is_same_identity(to_check, item) for item in self._items)

    def contains_secondary_key(self, to_check: T) -> bool:
        """Return True if an entry with the same unique key is stored."""
        return any(self._is_same_key(to_check, item) for item in self._items)

    def add(self, to_add: T) -> None:
        """
        Append an entry.

        Params:
            to_add: Entry whose identity and unique key are not yet stored

        Raises:
            DuplicateIdentityError: If an entry with the same identity exists
            DuplicateSecondaryKeyError: If an entry with the same unique key exists
        """
        if self.contains(to_add):
            raise DuplicateIdentityError(self._label)
        if self.contains_secondary_key(to_add):
            raise DuplicateSecondaryKeyError(self._key_label)
        self._items.append(to_add)
        self._changed(ChangeKind.ADD)

    def set_entity(self, target: T, replacement: T) -> None:
        """
        Replace `target` with `replacement`, keeping its position.

        The replacement may keep the target's identity or unique key; it may
        not take on the identity or key of any other stored entry.

        Params:
            target: Entry currently in the list
            replacement: Entry to put in its place

        Raises:
            EntityNotFoundError: If `target` is not in the list
            DuplicateIdentityError: If the new identity belongs to another entry
            DuplicateSecondaryKeyError: If the new unique key belongs to another entry
        """
        index = self._index_of(target)
        if not self._is_same_identity(target, replacement) and self.contains(
            replacement
        ):
            raise DuplicateIdentityError(self._label)
        if not self._is_same_key(target, replacement) and self.contains_secondary_key(
            replacement
        ):
            raise DuplicateSecondaryKeyError(self._key_label)
        self._items[index] = replacement
        self._changed(ChangeKind.REPLACE)

    def remove(self, to_remove: T) -> None:
        """
        Remove the entry equal to `to_remove`.

        Raises:
            EntityNotFoundError: If no stored entry is equal in every field
        """
        index = self._index_of(to_remove)
        del self._items[index]
        self._changed(ChangeKind.REMOVE)

    def set_all(self, replacement: "Iterable[T] | UniqueEntityList[T]") -> None:
        """
        Replace the whole contents of the list.

        Params:
            replacement: Entries free of identity and unique key collisions,
                or another UniqueEntityList whose contents are copied
                (checked against this list's comparators unless it shares them)

        Raises:
            DuplicateIdentityError: If two incoming entries share an identity
            DuplicateSecondaryKeyError: If two incoming entries share a unique key
        """
        items = list(replacement)
        if not self._shares_comparators(replacement):
            if not self._all_unique(items, self._is_same_identity):
                raise DuplicateIdentityError(self._label)
            if not self._all_unique(items, self._is_same_key):
                raise DuplicateSecondaryKeyError(self._key_label)
        self._items = items
        self._changed(ChangeKind.RESET)

    def sort(self, key: Callable[[T], object]) -> None:
        """Stable sort of the stored entries by `key`."""
        self._items.sort(key=key)
        self._changed(ChangeKind.SORT)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback for list changes.

        Params:
            listener: Called with a ListChange after every successful mutation

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def as_tuple(self) -> tuple[T, ...]:
        """Read-only snapshot of the current contents."""
        return tuple(self._items)

    def _index_of(self, target: T) -> int:
        for index, item in enumerate(self._items):
            if item == target:
                return index
        raise EntityNotFoundError(self._item_label)

    def _changed(self, kind: ChangeKind) -> None:
        self._revision += 1
        logger.debug(
            "%s list %s, revision %d, size %d",
            self._label,
            kind.value,
            self._revision,
            len(self._items),
        )
        change = ListChange(kind=kind, revision=self._revision)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception(
                    "%s list listener %r failed on %s", self._label, listener, kind.value
                )

    def _shares_comparators(self, other: object) -> bool:
        return (
            isinstance(other, UniqueEntityList)
            and other._is_same_identity == self._is_same_identity
            and other._is_same_key == self._is_same_key
        )

    @staticmethod
    def _all_unique(items: Sequence[T], is_same: Comparator) -> bool:
        for i in range(len(items) - 1):
            for j in range(i + 1, len(items)):
                if is_same(items[i], items[j]):
                    return False
        return True

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueEntityList):
            return False
        return self._items == other._items

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class UniquePersonList(UniqueEntityList[Person]):
    """
    A list of persons with unique names and unique phone numbers.

    Identity follows `Person.is_same_person`, the unique key follows
    `Person.is_same_phone`, and removal requires an exactly equal record.
    """

    def __init__(self):
        super().__init__(
            is_same_identity=Person.is_same_person,
            is_same_key=Person.is_same_phone,
            label="persons",
            item_label="person",
            key_label="phone numbers",
        )

    def contains_phone(self, to_check: Person) -> bool:
        return self.contains_secondary_key(to_check)

    def set_person(self, target: Person, edited_person: Person) -> None:
        self.set_entity(target, edited_person)

    def sort_by_schedule(self) -> None:
        """
        Order persons by next lesson date, then start time.

        Persons without a scheduled lesson come last, in their current
        relative order.
        """
        self.sort(key=lambda person: person.next_lesson.sort_key)
