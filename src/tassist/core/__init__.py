"""Functional core - parsing and command logic with no I/O."""

from .commands import CommandResult, help_text
from .exceptions import (
    CommandException,
    DataLoadingError,
    InvalidFieldError,
    ParseErrorKind,
    ParseException,
    TAssistError,
)
from .fields import Email, Github, Name, Phone, Progress, StudentId, Tag, TutorialClass
from .index import Index, parse_index
from .model import ModelManager
from .parsers import parse_command
from .person import Person, format_person
from .tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = [
    # Fields
    "Name",
    "Phone",
    "Email",
    "StudentId",
    "Github",
    "TutorialClass",
    "Tag",
    "Progress",
    # Person
    "Person",
    "format_person",
    "Index",
    "parse_index",
    # Parsing
    "Prefix",
    "ArgumentMultimap",
    "tokenize",
    "parse_command",
    # Execution
    "CommandResult",
    "help_text",
    "ModelManager",
    # Errors
    "TAssistError",
    "InvalidFieldError",
    "ParseErrorKind",
    "ParseException",
    "CommandException",
    "DataLoadingError",
]
