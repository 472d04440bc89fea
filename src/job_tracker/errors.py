"""Errors raised while parsing and executing job tracker commands."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! "
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_DATE = "Invalid date format. Expected yyyy-MM-dd"
MESSAGE_INVALID_DEADLINE = "Invalid deadline format. Expected yyyy-MM-dd HH:mm"
MESSAGE_PAST_DEADLINE = "Deadline cannot be in the past. Please provide a future date and time."
MESSAGE_NO_FILTER_PREFIX = "No valid filter prefix provided."
MESSAGE_EMPTY_FILTER_VALUE = "Filter value cannot be empty."
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_INVALID_APPLICATION_INDEX = "The job application index provided is invalid"
MESSAGE_DUPLICATE_APPLICATION = "This job application already exists in the tracker"


class ParseError(Exception):
    """Raised when user input does not conform to the expected format.

    Carries a message and, optionally, a usage descriptor that is shown on
    the line after it. Instances are never modified; ``with_descriptor``
    builds a new error instead.
    """

    def __init__(self, message: str, descriptor: str | None = None):
        self.message = message
        self.descriptor = descriptor
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        """Message with the descriptor appended, if any."""
        if self.descriptor is None:
            return self.message
        return f"{self.message}\n{self.descriptor}"

    def with_descriptor(self, descriptor: str) -> "ParseError":
        """Return a copy of this error with ``descriptor`` added after any existing one."""
        if self.descriptor is not None:
            descriptor = f"{self.descriptor}\n{descriptor}"
        return ParseError(self.message, descriptor)


def invalid_format(usage: str) -> ParseError:
    """Build the standard "Invalid command format!" error for a command."""
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT, usage)


class CommandError(Exception):
    """Raised when a parsed command cannot be carried out."""

    pass
