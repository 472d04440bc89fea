"""JobTracker - runs parsed commands against the application list."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .config import Config
from .core import CommandParser, CommandResult, ListRenderer
from .errors import CommandError, ParseError
from .model import ApplicationList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """Text shown to the user after one line of input."""

    text: str
    should_exit: bool = False
    is_error: bool = False


class JobTracker:
    """Main orchestrator for the Job Tracker.

    Parses each input line, executes the command against the application
    list, and renders the reply.
    """

    def __init__(
        self,
        applications: ApplicationList | None = None,
        config: Config | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the tracker.

        Args:
            applications: Application list to work on (empty if None).
            config: Tracker configuration (uses defaults if None).
            now: Source of the current time for deadline validation.
        """
        self.applications = applications if applications is not None else ApplicationList()
        self.config = config or Config()
        self.parser = CommandParser(now)
        self.renderer = ListRenderer()

    def handle(self, line: str) -> Reply:
        """
        Handle one line of user input.

        Parse and command errors are reported in the reply, never raised.

        Args:
            line: The raw input line.

        Returns:
            Reply to show the user.
        """
        logger.info(f"Received: {line!r}")

        try:
            command = self.parser.parse(line)
            logger.info(f"Command: {command.__class__.__name__}")
            result = command.execute(self.applications)
        except (ParseError, CommandError) as e:
            logger.warning(f"Rejected {line!r}: {e}")
            return Reply(str(e), is_error=True)

        return Reply(self._render_result(result), should_exit=result.should_exit)

    def _render_result(self, result: CommandResult) -> str:
        """Combine the command feedback with the displayed list if requested."""
        if not result.show_list:
            return result.feedback

        shown = self.applications.displayed()
        logger.debug(f"Displaying {len(shown)} of {len(self.applications)} application(s)")
        listing = self.renderer.render(shown, max_entries=self.config.max_list_entries)
        return f"{result.feedback}\n{listing}"
