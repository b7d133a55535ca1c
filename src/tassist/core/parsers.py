"""Command parsers.

parse_command(text) splits off the command word and hands the rest to that
command's parser through PARSERS. Each parser tokenizes with its own prefix
set, validates, and returns a command or raises ParseException.
"""

import logging
from typing import Callable

from .commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    GithubCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    ProgressCommand,
)
from .exceptions import InvalidFieldError, ParseErrorKind, ParseException
from .fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass
from .index import Index, parse_index
from .messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from .person import Person
from .tokenizer import (
    PREFIX_CLASS,
    PREFIX_EMAIL,
    PREFIX_GITHUB,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_PROGRESS,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
    ArgumentMultimap,
    Prefix,
    tokenize,
)

logger = logging.getLogger(__name__)

# Prefix sets per command. Single-valued prefixes may appear at most once.
PERSON_FIELD_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_STUDENT_ID,
    PREFIX_GITHUB,
    PREFIX_CLASS,
    PREFIX_PROGRESS,
)
ADD_REQUIRED_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_STUDENT_ID)
ADD_PREFIXES = PERSON_FIELD_PREFIXES + (PREFIX_TAG,)
EDIT_PREFIXES = ADD_PREFIXES
GITHUB_PREFIXES = (PREFIX_GITHUB,)
PROGRESS_PREFIXES = (PREFIX_PROGRESS,)


# ============== Field parsing ==============


def _field(factory, text: str):
    """Build a field value from trimmed text, turning validation errors into ParseException."""
    try:
        return factory(text.strip())
    except InvalidFieldError as e:
        raise ParseException(str(e), ParseErrorKind.INVALID_VALUE) from e


def parse_name(text: str) -> Name:
    return _field(Name, text)


def parse_phone(text: str) -> Phone:
    return _field(Phone, text)


def parse_email(text: str) -> Email:
    return _field(Email, text)


def parse_student_id(text: str) -> StudentId:
    return _field(StudentId, text)


def parse_github(text: str) -> Github:
    return _field(Github, text)


def parse_tutorial_class(text: str) -> TutorialClass:
    return _field(TutorialClass, text)


def parse_progress(text: str) -> Progress:
    return _field(Progress.from_string, text)


def parse_tag(text: str) -> Tag:
    return _field(Tag, text)


def parse_tags(values: list[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(v) for v in values)


def _optional(argmap: ArgumentMultimap, prefix: Prefix, parse: Callable):
    value = argmap.get_value(prefix)
    return None if value is None else parse(value)


def _index_from_preamble(argmap: ArgumentMultimap, usage: str) -> Index:
    try:
        return parse_index(argmap.preamble)
    except ParseException as e:
        raise ParseException(invalid_format(usage), ParseErrorKind.INVALID_FORMAT) from e


# ============== Command parsers ==============


def parse_add(args: str) -> AddCommand:
    argmap = tokenize(args, *ADD_PREFIXES)

    missing = [p for p in ADD_REQUIRED_PREFIXES if not argmap.has(p)]
    if missing or argmap.preamble:
        raise ParseException(invalid_format(AddCommand.MESSAGE_USAGE))

    argmap.verify_no_duplicate_prefixes_for(*PERSON_FIELD_PREFIXES)

    person = Person(
        name=parse_name(argmap.get_value(PREFIX_NAME)),
        phone=parse_phone(argmap.get_value(PREFIX_PHONE)),
        email=parse_email(argmap.get_value(PREFIX_EMAIL)),
        student_id=parse_student_id(argmap.get_value(PREFIX_STUDENT_ID)),
        github=_optional(argmap, PREFIX_GITHUB, parse_github),
        tutorial_class=_optional(argmap, PREFIX_CLASS, parse_tutorial_class),
        progress=_optional(argmap, PREFIX_PROGRESS, parse_progress),
        tags=parse_tags(argmap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(person)


def _parse_tags_for_edit(values: list[str]) -> frozenset[Tag] | None:
    """
    None if no t/ was given; an empty set if the only t/ is blank (clear all
    tags); otherwise the parsed tags.
    """
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parse_tags(values)


def parse_edit(args: str) -> EditCommand:
    argmap = tokenize(args, *EDIT_PREFIXES)
    index = _index_from_preamble(argmap, EditCommand.MESSAGE_USAGE)

    argmap.verify_no_duplicate_prefixes_for(*PERSON_FIELD_PREFIXES)

    descriptor = EditPersonDescriptor(
        name=_optional(argmap, PREFIX_NAME, parse_name),
        phone=_optional(argmap, PREFIX_PHONE, parse_phone),
        email=_optional(argmap, PREFIX_EMAIL, parse_email),
        student_id=_optional(argmap, PREFIX_STUDENT_ID, parse_student_id),
        github=_optional(argmap, PREFIX_GITHUB, parse_github),
        tutorial_class=_optional(argmap, PREFIX_CLASS, parse_tutorial_class),
        progress=_optional(argmap, PREFIX_PROGRESS, parse_progress),
        tags=_parse_tags_for_edit(argmap.get_all_values(PREFIX_TAG)),
    )

    if not descriptor.is_any_field_edited():
        raise ParseException(EditCommand.MESSAGE_NOT_EDITED, ParseErrorKind.NOT_EDITED)

    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    try:
        index = parse_index(args)
    except ParseException as e:
        raise ParseException(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e
    return DeleteCommand(index)


def parse_find(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise ParseException(invalid_format(FindCommand.MESSAGE_USAGE))
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def parse_github_command(args: str) -> GithubCommand:
    argmap = tokenize(args, *GITHUB_PREFIXES)
    index = _index_from_preamble(argmap, GithubCommand.MESSAGE_USAGE)

    value = argmap.get_value(PREFIX_GITHUB)
    if value is None:
        raise ParseException(invalid_format(GithubCommand.MESSAGE_USAGE))
    argmap.verify_no_duplicate_prefixes_for(PREFIX_GITHUB)
    if not value.strip():
        raise ParseException(GithubCommand.MESSAGE_EMPTY, ParseErrorKind.EMPTY_VALUE)

    return GithubCommand(index, parse_github(value))


def parse_progress_command(args: str) -> ProgressCommand:
    argmap = tokenize(args, *PROGRESS_PREFIXES)
    index = _index_from_preamble(argmap, ProgressCommand.MESSAGE_USAGE)

    value = argmap.get_value(PREFIX_PROGRESS)
    if value is None:
        raise ParseException(invalid_format(ProgressCommand.MESSAGE_USAGE))
    argmap.verify_no_duplicate_prefixes_for(PREFIX_PROGRESS)

    return ProgressCommand(index, parse_progress(value))


# Commands that take no arguments ignore anything after the command word
PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add,
    EditCommand.COMMAND_WORD: parse_edit,
    DeleteCommand.COMMAND_WORD: parse_delete,
    FindCommand.COMMAND_WORD: parse_find,
    GithubCommand.COMMAND_WORD: parse_github_command,
    ProgressCommand.COMMAND_WORD: parse_progress_command,
    ListCommand.COMMAND_WORD: lambda args: ListCommand(),
    ClearCommand.COMMAND_WORD: lambda args: ClearCommand(),
    HelpCommand.COMMAND_WORD: lambda args: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda args: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """Parse a full line of user input into a command."""
    parts = user_input.split(maxsplit=1)
    if not parts:
        raise ParseException(invalid_format(HelpCommand.MESSAGE_USAGE))

    command_word = parts[0]
    arguments = parts[1] if len(parts) > 1 else ""
    parser = PARSERS.get(command_word)
    if parser is None:
        logger.debug(f"Unknown command word: {command_word!r}")
        raise ParseException(MESSAGE_UNKNOWN_COMMAND, ParseErrorKind.UNKNOWN_COMMAND)

    return parser(arguments)
