"""Error types shared by the parsing and execution pipeline."""

from enum import Enum


class TAssistError(Exception):
    """Base class for user-facing errors. The message is shown verbatim."""

    pass


class InvalidFieldError(ValueError):
    """Raised when a field value is constructed from an invalid representation."""

    pass


class ParseErrorKind(Enum):
    """Category of a parse failure."""

    UNKNOWN_COMMAND = "unknown_command"
    INVALID_FORMAT = "invalid_format"
    INVALID_INDEX = "invalid_index"
    INVALID_VALUE = "invalid_value"
    DUPLICATE_PREFIX = "duplicate_prefix"
    EMPTY_VALUE = "empty_value"
    NOT_EDITED = "not_edited"


class ParseException(TAssistError):
    """Raised when user input does not conform to the expected format."""

    def __init__(self, message: str, kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT):
        super().__init__(message)
        self.message = message
        self.kind = kind


class CommandException(TAssistError):
    """Raised when a well-formed command cannot run against the current model."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataLoadingError(TAssistError):
    """Raised when stored data cannot be read or converted to persons."""

    pass
