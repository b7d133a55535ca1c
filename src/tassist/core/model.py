"""In-memory person list with a filtered view.

Implements the Model protocol. Owns the canonical person collection; commands
only ever see it through Model's methods.
"""

import logging
from typing import Iterable, Iterator

from tassist.ports.model import PersonPredicate, PREDICATE_SHOW_ALL_PERSONS

from .person import Person

logger = logging.getLogger(__name__)


class DuplicatePersonError(LookupError):
    """Raised when an operation would store the same student twice."""

    def __init__(self):
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(LookupError):
    """Raised when the target person is not in the list."""

    def __init__(self):
        super().__init__("Person not found in the list")


class UniquePersonList:
    """
    Ordered list of persons with no two entries for the same student.

    Uniqueness uses Person.is_same_person, so an edit that keeps the student ID
    replaces in place instead of counting as a duplicate.
    """

    def __init__(self, persons: Iterable[Person] = ()):
        self._persons: list[Person] = []
        self.set_persons(persons)

    def contains(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        try:
            position = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None

        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError()

        self._persons[position] = edited

    def remove(self, target: Person) -> None:
        try:
            self._persons.remove(target)
        except ValueError:
            raise PersonNotFoundError() from None

    def set_persons(self, persons: Iterable[Person]) -> None:
        persons = list(persons)
        if not persons_are_unique(persons):
            raise DuplicatePersonError()
        self._persons = persons

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __len__(self) -> int:
        return len(self._persons)


def persons_are_unique(persons: list[Person]) -> bool:
    """True if no two persons are the same student."""
    for i, person in enumerate(persons):
        if any(person.is_same_person(other) for other in persons[i + 1 :]):
            return False
    return True


class ModelManager:
    """In-memory Model implementation."""

    def __init__(self, persons: Iterable[Person] = ()):
        self._persons = UniquePersonList(persons)
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        logger.debug(f"Initialized model with {len(self._persons)} persons")

    @property
    def persons(self) -> tuple[Person, ...]:
        """All stored persons, unfiltered."""
        return tuple(self._persons)

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_person(target, edited)

    def delete_person(self, target: Person) -> None:
        self._persons.remove(target)

    def set_persons(self, persons: Iterable[Person]) -> None:
        self._persons.set_persons(persons)

    def get_filtered_person_list(self) -> list[Person]:
        return [p for p in self._persons if self._predicate(p)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate
