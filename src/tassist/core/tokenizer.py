"""Argument tokenizer - splits command arguments by prefix.

Given "1 n/John Doe t/friends t/owesMoney" and the prefixes n/ and t/, the
result has preamble "1", n/ -> ["John Doe"] and t/ -> ["friends", "owesMoney"].
A prefix only counts at the start of the text or right after whitespace, and
only if it is one of the prefixes the caller asked for.
"""

from dataclasses import dataclass

from .exceptions import ParseErrorKind, ParseException
from .messages import MESSAGE_DUPLICATE_FIELDS


@dataclass(frozen=True)
class Prefix:
    """Marker that starts a field's value, e.g. "n/"."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_STUDENT_ID = Prefix("s/")
PREFIX_GITHUB = Prefix("g/")
PREFIX_CLASS = Prefix("c/")
PREFIX_TAG = Prefix("t/")
PREFIX_PROGRESS = Prefix("pr/")


class ArgumentMultimap:
    """Prefix -> ordered values, plus the unprefixed preamble."""

    def __init__(self, preamble: str, values: dict[Prefix, list[str]]):
        self._preamble = preamble
        self._values = {prefix: list(vals) for prefix, vals in values.items()}

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for the prefix, or None if the prefix is absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise if any of the given single-valued prefixes appear more than once."""
        duplicated = [p for p in dict.fromkeys(prefixes) if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseException(
                MESSAGE_DUPLICATE_FIELDS + " ".join(str(p) for p in duplicated),
                ParseErrorKind.DUPLICATE_PREFIX,
            )

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


def _find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[tuple[int, Prefix]]:
    """Start offsets of every recognised prefix, in order of appearance."""
    positions = []
    i = 0
    length = len(args)
    while i < length:
        at_token_start = i == 0 or args[i - 1].isspace()
        if at_token_start and not args[i].isspace():
            for prefix in prefixes:
                if args.startswith(prefix.prefix, i):
                    positions.append((i, prefix))
                    i += len(prefix.prefix)
                    break
            else:
                i += 1
            continue
        i += 1
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Split raw argument text into a preamble and per-prefix values.

    No validation of the values is done here. Empty values are kept as "".
    """
    positions = _find_prefix_positions(args, prefixes)

    preamble_end = positions[0][0] if positions else len(args)
    preamble = args[:preamble_end].strip()

    values: dict[Prefix, list[str]] = {}
    for n, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix.prefix)
        value_end = positions[n + 1][0] if n + 1 < len(positions) else len(args)
        values.setdefault(prefix, []).append(args[value_start:value_end].strip())

    return ArgumentMultimap(preamble, values)
