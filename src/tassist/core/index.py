"""Index into the displayed person list."""

from dataclasses import dataclass

from .exceptions import ParseErrorKind, ParseException

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


@dataclass(frozen=True)
class Index:
    """
    A position in the displayed list.

    Stored 1-based, as the user sees it. Whether it is in range is only known
    when a command runs against the current filtered list.
    """

    one_based: int

    def __post_init__(self):
        if self.one_based < 1:
            raise ValueError(f"Index must be positive, got {self.one_based}")

    @property
    def zero_based(self) -> int:
        return self.one_based - 1


def parse_index(text: str) -> Index:
    """Parse a 1-based index from user input. Leading/trailing whitespace is ignored."""
    trimmed = text.strip()
    if not trimmed.isascii() or not trimmed.isdigit() or int(trimmed) == 0:
        raise ParseException(MESSAGE_INVALID_INDEX, ParseErrorKind.INVALID_INDEX)
    return Index(int(trimmed))
