"""Command parser for interpreting a full line of user input."""

import re
from datetime import datetime
from typing import Callable

from ..errors import ParseError, MESSAGE_UNKNOWN_COMMAND, invalid_format
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
)
from .command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    FilterCommandParser,
    FindCommandParser,
    SortCommandParser,
)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class CommandParser:
    """Parses a line of user input into a Command object."""

    # Commands that take no arguments; anything after the word is ignored
    LIST_COMMANDS = {"list", "ls"}
    HELP_COMMANDS = {"?", "help"}
    EXIT_COMMANDS = {"exit", "quit"}

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        """
        Initialize the parser.

        Args:
            now: Source of the current time, passed to parsers that
                validate deadlines.
        """
        self._parsers = {
            AddCommand.COMMAND_WORD: AddCommandParser(now),
            DeleteCommand.COMMAND_WORD: DeleteCommandParser(),
            FindCommand.COMMAND_WORD: FindCommandParser(),
            FilterCommand.COMMAND_WORD: FilterCommandParser(),
            SortCommand.COMMAND_WORD: SortCommandParser(),
        }

    def parse(self, input_str: str) -> Command:
        """
        Parse a line of user input into a Command object.

        Args:
            input_str: The raw input line, command word first.

        Returns:
            The parsed command.

        Raises:
            ParseError: If the line is blank, the command word is unknown,
                or the command's arguments are invalid.
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(input_str.strip())
        if match is None:
            raise invalid_format(HelpCommand.MESSAGE_USAGE)

        command_word = match.group("command_word").lower()
        arguments = match.group("arguments")

        parser = self._parsers.get(command_word)
        if parser is not None:
            return parser.parse(arguments)

        if command_word in self.LIST_COMMANDS:
            return ListCommand()

        if command_word in self.HELP_COMMANDS:
            return HelpCommand()

        if command_word in self.EXIT_COMMANDS:
            return ExitCommand()

        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
