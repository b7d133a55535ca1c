"""Executable commands.

Each command is an immutable value holding exactly what it needs, with a
single behaviour: execute(model) -> CommandResult. Failures against the
current model state raise CommandException and leave the model unchanged.
"""

from dataclasses import dataclass
from typing import ClassVar, Protocol

from tassist.ports.model import Model, PREDICATE_SHOW_ALL_PERSONS

from .exceptions import CommandException
from .fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass
from .index import Index
from .messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX, MESSAGE_PERSONS_LISTED_OVERVIEW
from .person import Person, format_person
from .tokenizer import (
    PREFIX_CLASS,
    PREFIX_EMAIL,
    PREFIX_GITHUB,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_PROGRESS,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
)


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus flags for the front-end."""

    feedback: str
    show_help: bool = False
    exit: bool = False


class Command(Protocol):
    def execute(self, model: Model) -> CommandResult: ...


def _person_at(model: Model, index: Index) -> Person:
    """Resolve an index against the currently displayed list."""
    shown = model.get_filtered_person_list()
    if index.zero_based >= len(shown):
        raise CommandException(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index.zero_based]


# ============== Mutations ==============


@dataclass(frozen=True)
class AddCommand:
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a person to the address book.\n"
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL "
        f"{PREFIX_STUDENT_ID}STUDENTID [{PREFIX_GITHUB}GITHUB] [{PREFIX_CLASS}CLASS] "
        f"[{PREFIX_TAG}TAG]... [{PREFIX_PROGRESS}PROGRESS]\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_STUDENT_ID}A0000000B "
        f"{PREFIX_GITHUB}https://github.com/johndoe {PREFIX_CLASS}T01 "
        f"{PREFIX_TAG}friends {PREFIX_TAG}owesMoney {PREFIX_PROGRESS}50\n"
        "To add a person, minimally NAME, EMAIL, PHONE, STUDENTID must be present."
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book"

    to_add: Person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.to_add):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON)

        model.add_person(self.to_add)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(self.to_add)))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on edit. None means keep the current value."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    student_id: StudentId | None = None
    github: Github | None = None
    tutorial_class: TutorialClass | None = None
    progress: Progress | None = None
    # Empty frozenset clears all tags; None leaves them alone
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in self._changes().values()) or self.tags is not None

    def _changes(self) -> dict:
        return {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "student_id": self.student_id,
            "github": self.github,
            "tutorial_class": self.tutorial_class,
            "progress": self.progress,
        }

    def apply_to(self, person: Person) -> Person:
        """Overlay the supplied fields onto person, returning a new Person."""
        changes = {k: v for k, v in self._changes().items() if v is not None}
        if self.tags is not None:
            changes["tags"] = self.tags
        return person.with_changes(**changes)


@dataclass(frozen=True)
class EditCommand:
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the details of the person identified "
        "by the index number used in the displayed person list. "
        "Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] [{PREFIX_PHONE}PHONE] [{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_STUDENT_ID}STUDENTID] [{PREFIX_GITHUB}GITHUB] [{PREFIX_CLASS}CLASS] "
        f"[{PREFIX_TAG}TAG]... [{PREFIX_PROGRESS}PROGRESS]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_EMAIL}johndoe@example.com"
    )
    MESSAGE_EDIT_PERSON_SUCCESS: ClassVar[str] = "Edited Person: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book."

    index: Index
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        person_to_edit = _person_at(model, self.index)
        edited = self.descriptor.apply_to(person_to_edit)

        if not person_to_edit.is_same_person(edited) and model.has_person(edited):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON)

        model.set_person(person_to_edit, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class DeleteCommand:
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_DELETE_PERSON_SUCCESS: ClassVar[str] = "Deleted Person: {}"

    index: Index

    def execute(self, model: Model) -> CommandResult:
        person_to_delete = _person_at(model, self.index)
        model.delete_person(person_to_delete)
        return CommandResult(
            self.MESSAGE_DELETE_PERSON_SUCCESS.format(format_person(person_to_delete))
        )


@dataclass(frozen=True)
class GithubCommand:
    COMMAND_WORD: ClassVar[str] = "github"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Sets the Github link of the person identified "
        "by the index number used in the displayed person list.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_GITHUB}GITHUB\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_GITHUB}https://github.com/johndoe"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Updated Github of Person: {}"
    MESSAGE_EMPTY: ClassVar[str] = "Github link cannot be empty."

    index: Index
    github: Github

    def execute(self, model: Model) -> CommandResult:
        target = _person_at(model, self.index)
        edited = target.with_changes(github=self.github)
        model.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class ProgressCommand:
    COMMAND_WORD: ClassVar[str] = "progress"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Sets the progress of the person identified "
        "by the index number used in the displayed person list.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_PROGRESS}PROGRESS\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PROGRESS}75"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Updated Progress of Person: {}"

    index: Index
    progress: Progress

    def execute(self, model: Model) -> CommandResult:
        target = _person_at(model, self.index)
        edited = target.with_changes(progress=self.progress)
        model.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Deletes all persons.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS: ClassVar[str] = "Address book has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.set_persons([])
        return CommandResult(self.MESSAGE_SUCCESS)


# ============== Queries ==============


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.lower() for w in person.name.value.split()}
        return any(k.lower() in words for k in self.keywords)


@dataclass(frozen=True)
class FindCommand:
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        count = len(model.get_filtered_person_list())
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Lists all persons.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)


# ============== Front-end signals ==============


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    )
    SHOWING_HELP_MESSAGE: ClassVar[str] = "Opened help window."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Exits the program.\nExample: {COMMAND_WORD}"
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting Address Book as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


ALL_COMMANDS = [
    AddCommand,
    EditCommand,
    DeleteCommand,
    GithubCommand,
    ProgressCommand,
    FindCommand,
    ListCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
]


def help_text() -> str:
    """Usage of every command, for the help screen."""
    return "\n\n".join(cmd.MESSAGE_USAGE for cmd in ALL_COMMANDS)
