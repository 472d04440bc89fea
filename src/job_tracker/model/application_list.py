"""In-memory list of job applications with a filtered, sorted view."""

import logging

from ..errors import CommandError, MESSAGE_DUPLICATE_APPLICATION
from .job_application import JobApplication
from .predicates import ApplicationPredicate, PREDICATE_SHOW_ALL_APPLICATIONS
from .sort import SortField, SortOrder

logger = logging.getLogger(__name__)


class ApplicationList:
    """Holds all applications plus the filter and sort applied for display."""

    def __init__(self, applications: list[JobApplication] | None = None):
        """
        Initialize the list.

        Args:
            applications: Initial applications, kept in the given order.
        """
        self._applications: list[JobApplication] = list(applications or [])
        self._predicate: ApplicationPredicate = PREDICATE_SHOW_ALL_APPLICATIONS
        self._sort: tuple[SortField, SortOrder] | None = None

    @property
    def predicate(self) -> ApplicationPredicate:
        return self._predicate

    @property
    def sort(self) -> tuple[SortField, SortOrder] | None:
        return self._sort

    def contains(self, application: JobApplication) -> bool:
        """Check if an equivalent application is already tracked."""
        return any(a.is_same_application(application) for a in self._applications)

    def add(self, application: JobApplication) -> None:
        """
        Add an application.

        Raises:
            CommandError: If an equivalent application already exists.
        """
        if self.contains(application):
            raise CommandError(MESSAGE_DUPLICATE_APPLICATION)
        self._applications.append(application)
        logger.debug(f"Added application: {application.company_name} / {application.role}")

    def remove(self, application: JobApplication) -> None:
        """Remove an application that is currently tracked."""
        self._applications.remove(application)
        logger.debug(f"Removed application: {application.company_name} / {application.role}")

    def update_filter(self, predicate: ApplicationPredicate) -> None:
        """Replace the filter applied to the displayed list."""
        self._predicate = predicate

    def sort_by(self, field: SortField, order: SortOrder) -> None:
        """Set the ordering of the displayed list."""
        self._sort = (field, order)

    def all(self) -> list[JobApplication]:
        """Every tracked application, unfiltered, in insertion order."""
        return list(self._applications)

    def displayed(self) -> list[JobApplication]:
        """Applications passing the current filter, in the current order."""
        shown = [a for a in self._applications if self._predicate(a)]
        if self._sort is not None:
            field, order = self._sort
            shown.sort(key=field.key, reverse=order.reverse)
        return shown

    def __len__(self) -> int:
        return len(self._applications)
