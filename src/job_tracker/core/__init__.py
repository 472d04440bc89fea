"""Core components for the Job Tracker."""

from .cli_syntax import Prefix, PREFIX_COMPANY, PREFIX_ROLE, PREFIX_STATUS, PREFIX_DEADLINE, PREFIX_TAG
from .argument_tokenizer import ArgumentMultimap, tokenize
from .commands import (
    Command,
    CommandResult,
    AddCommand,
    DeleteCommand,
    FindCommand,
    FilterCommand,
    SortCommand,
    ListCommand,
    HelpCommand,
    ExitCommand,
)
from .command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    FindCommandParser,
    FilterCommandParser,
    SortCommandParser,
)
from .command_parser import CommandParser
from .list_renderer import ListRenderer

__all__ = [
    "Prefix",
    "PREFIX_COMPANY",
    "PREFIX_ROLE",
    "PREFIX_STATUS",
    "PREFIX_DEADLINE",
    "PREFIX_TAG",
    "ArgumentMultimap",
    "tokenize",
    "Command",
    "CommandResult",
    "AddCommand",
    "DeleteCommand",
    "FindCommand",
    "FilterCommand",
    "SortCommand",
    "ListCommand",
    "HelpCommand",
    "ExitCommand",
    "AddCommandParser",
    "DeleteCommandParser",
    "FindCommandParser",
    "FilterCommandParser",
    "SortCommandParser",
    "CommandParser",
    "ListRenderer",
]
