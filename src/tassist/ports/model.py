"""Model interface consumed by commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Protocol

if TYPE_CHECKING:
    from tassist.core.person import Person

PersonPredicate = Callable[["Person"], bool]


def PREDICATE_SHOW_ALL_PERSONS(person: Person) -> bool:
    return True


class Model(Protocol):
    """The operations a command may perform on the person list."""

    def has_person(self, person: Person) -> bool:
        """True if a person that is the same student is already stored."""
        ...

    def add_person(self, person: Person) -> None:
        """Add a person. The person must not already exist."""
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited. Target must exist."""
        ...

    def delete_person(self, target: Person) -> None:
        """Remove target. Target must exist."""
        ...

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole collection."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Persons matching the current filter, in stored order."""
        ...

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Change the filter applied to the displayed list."""
        ...
