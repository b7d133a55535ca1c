"""Self-validating field value types for a person record.

Every type rejects an invalid representation at construction time by raising
InvalidFieldError with its MESSAGE_CONSTRAINTS, so a constructed value is
always valid.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from .exceptions import InvalidFieldError

_ALNUM = r"[^\W_]+"


@dataclass(frozen=True)
class _PatternField:
    """A string field whose whole value must match PATTERN."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern] = re.compile(r".*")

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise InvalidFieldError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls.PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


class Name(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # First character must not be a space, otherwise " " is a valid name
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


class Phone(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN = re.compile(r"\d{3,}", re.ASCII)


class Email(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    _LOCAL_PART = rf"{_ALNUM}([+_.\-]{_ALNUM})*"
    _DOMAIN_LABEL = rf"{_ALNUM}(-{_ALNUM})*"
    PATTERN = re.compile(
        rf"{_LOCAL_PART}@({_DOMAIN_LABEL}\.)*(?=[^.]{{2,}}\Z){_DOMAIN_LABEL}",
        re.ASCII,
    )


class StudentId(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Student IDs should start with 'A', followed by 7 digits, "
        "and end with a capital letter, e.g. A0000000B"
    )
    PATTERN = re.compile(r"A\d{7}[A-Z]", re.ASCII)


class Github(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Github links should be of the form https://github.com/USERNAME, where USERNAME "
        "has at most 39 characters, contains only alphanumeric characters and single hyphens, "
        "and does not start or end with a hyphen"
    )
    PATTERN = re.compile(
        r"https://github\.com/(?=[A-Za-z0-9-]{1,39}\Z)[A-Za-z0-9]+(-[A-Za-z0-9]+)*"
    )


class TutorialClass(_PatternField):
    MESSAGE_CONSTRAINTS = "Class should be a capital T followed by two digits, e.g. T01"
    PATTERN = re.compile(r"T\d{2}", re.ASCII)


class Tag(_PatternField):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Progress:
    """Completion percentage of a student's coursework."""

    value: int

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Progress should be a whole number between 0 and 100 inclusive"
    )
    PATTERN: ClassVar[re.Pattern] = re.compile(r"\d{1,3}", re.ASCII)

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidFieldError(self.MESSAGE_CONSTRAINTS)
        if not 0 <= self.value <= 100:
            raise InvalidFieldError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls.PATTERN.fullmatch(text) is not None and int(text) <= 100

    @classmethod
    def from_string(cls, text: str) -> "Progress":
        if not cls.is_valid(text):
            raise InvalidFieldError(cls.MESSAGE_CONSTRAINTS)
        return cls(int(text))

    def __str__(self) -> str:
        return str(self.value)
