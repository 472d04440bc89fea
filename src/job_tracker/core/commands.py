"""Command objects produced by the parsers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from ..errors import CommandError, MESSAGE_INVALID_APPLICATION_INDEX
from ..model import (
    ApplicationList,
    ApplicationPredicate,
    JobApplication,
    PREDICATE_SHOW_ALL_APPLICATIONS,
    SortField,
    SortOrder,
)
from .parser_util import Index


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing a command."""

    feedback: str
    show_list: bool = True
    should_exit: bool = False


class Command(ABC):
    """Base class for all commands."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    @abstractmethod
    def execute(self, applications: ApplicationList) -> CommandResult:
        """Run the command against the application list."""
        pass


def _listed_message(applications: ApplicationList) -> str:
    return f"{len(applications.displayed())} job applications listed!"


@dataclass(frozen=True)
class FindCommand(Command):
    """Command to find applications by company name keywords."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all job applications whose company names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find google meta"
    )

    predicate: ApplicationPredicate

    def execute(self, applications: ApplicationList) -> CommandResult:
        applications.update_filter(self.predicate)
        return CommandResult(_listed_message(applications))


@dataclass(frozen=True)
class FilterCommand(Command):
    """Command to filter applications by tag, role, status or deadline."""

    COMMAND_WORD: ClassVar[str] = "filter"
    MESSAGE_USAGE: ClassVar[str] = (
        "filter: Filters job applications by one field. Only the first of "
        "tag, role, status, deadline is used.\n"
        "Parameters: none | t/TAG | r/ROLE | s/STATUS | d/yyyy-MM-dd\n"
        "Example: filter t/backend"
    )

    predicate: ApplicationPredicate

    def execute(self, applications: ApplicationList) -> CommandResult:
        applications.update_filter(self.predicate)
        if self.predicate == PREDICATE_SHOW_ALL_APPLICATIONS:
            return CommandResult(f"Filter cleared. {_listed_message(applications)}")
        return CommandResult(_listed_message(applications))


@dataclass(frozen=True)
class SortCommand(Command):
    """Command to sort the displayed applications."""

    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        "sort: Sorts the displayed job applications.\n"
        "Parameters: FIELD [asc|desc]\n"
        "FIELD is one of: company, role, status, deadline\n"
        "Example: sort deadline desc"
    )

    field: SortField
    order: SortOrder = SortOrder.ASC

    def execute(self, applications: ApplicationList) -> CommandResult:
        applications.sort_by(self.field, self.order)
        return CommandResult(f"Sorted by {self.field.value} ({self.order.value}).")


@dataclass(frozen=True)
class AddCommand(Command):
    """Command to add a job application."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a job application.\n"
        "Parameters: c/COMPANY r/ROLE d/yyyy-MM-dd HH:mm [s/STATUS] [t/TAG]...\n"
        "Example: add c/Google r/Backend Engineer d/2099-01-01 23:59 t/backend"
    )

    application: JobApplication

    def execute(self, applications: ApplicationList) -> CommandResult:
        applications.add(self.application)
        return CommandResult(
            f"New job application added: {self.application.company_name} - {self.application.role}"
        )


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Command to delete the application at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the job application at the given index in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: Index

    def execute(self, applications: ApplicationList) -> CommandResult:
        shown = applications.displayed()
        if self.index.zero_based >= len(shown):
            raise CommandError(MESSAGE_INVALID_APPLICATION_INDEX)
        target = shown[self.index.zero_based]
        applications.remove(target)
        return CommandResult(f"Deleted job application: {target.company_name} - {target.role}")


@dataclass(frozen=True)
class ListCommand(Command):
    """Command to show every application."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all job applications."

    def execute(self, applications: ApplicationList) -> CommandResult:
        applications.update_filter(PREDICATE_SHOW_ALL_APPLICATIONS)
        return CommandResult("Listed all job applications")


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        "Commands: add, delete, find, filter, sort, list, help, exit\n"
        "Example: filter s/interviewing"
    )

    def execute(self, applications: ApplicationList) -> CommandResult:
        usages = "\n\n".join(
            command.MESSAGE_USAGE
            for command in (AddCommand, DeleteCommand, FindCommand, FilterCommand, SortCommand, ListCommand)
        )
        return CommandResult(usages, show_list=False)


@dataclass(frozen=True)
class ExitCommand(Command):
    """Command to leave the program."""

    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program."

    def execute(self, applications: ApplicationList) -> CommandResult:
        return CommandResult("Goodbye!", show_list=False, should_exit=True)
