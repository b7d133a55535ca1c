"""User-facing message templates shared across commands."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


def invalid_format(usage: str) -> str:
    """Build the generic malformed-input message for a command's usage string."""
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)
