"""Person storage interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from tassist.core.person import Person


class PersonStore(Protocol):
    """Interface for loading and saving the person list."""

    def load(self) -> list[Person] | None:
        """Load persons. Returns None if nothing has been saved yet."""
        ...

    def save(self, persons: Iterable[Person]) -> None:
        """Write/overwrite the stored person list."""
        ...
