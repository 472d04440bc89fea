"""Predicates used to filter the displayed list of job applications."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from .job_application import JobApplication


class ApplicationPredicate(ABC):
    """Base class for all job application predicates."""

    @abstractmethod
    def __call__(self, application: JobApplication) -> bool:
        """Test a single application."""
        pass


@dataclass(frozen=True)
class ShowAllPredicate(ApplicationPredicate):
    """Accepts every application."""

    def __call__(self, application: JobApplication) -> bool:
        return True


PREDICATE_SHOW_ALL_APPLICATIONS = ShowAllPredicate()


@dataclass(frozen=True)
class NameContainsKeywordsPredicate(ApplicationPredicate):
    """Matches applications whose company name contains any keyword as a whole word."""

    keywords: tuple[str, ...] = ()

    def __init__(self, keywords: list[str] | tuple[str, ...] | None = None):
        # Keep order and duplicates exactly as given
        object.__setattr__(self, "keywords", tuple(keywords) if keywords else ())

    def __call__(self, application: JobApplication) -> bool:
        words = {word.lower() for word in application.company_name.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class TagsContainKeywordPredicate(ApplicationPredicate):
    """Matches applications carrying a tag equal to the keyword, ignoring case."""

    keyword: str

    def __call__(self, application: JobApplication) -> bool:
        keyword = self.keyword.lower()
        return any(tag.name.lower() == keyword for tag in application.tags)


@dataclass(frozen=True)
class RoleContainsKeywordPredicate(ApplicationPredicate):
    """Matches applications whose role contains the keyword, ignoring case."""

    keyword: str

    def __call__(self, application: JobApplication) -> bool:
        return self.keyword.lower() in application.role.lower()


@dataclass(frozen=True)
class StatusMatchesKeywordPredicate(ApplicationPredicate):
    """Matches applications whose status equals the keyword, ignoring case."""

    keyword: str

    def __call__(self, application: JobApplication) -> bool:
        return application.status.lower() == self.keyword.lower()


@dataclass(frozen=True)
class DeadlinePredicate(ApplicationPredicate):
    """Matches applications due on the given calendar date."""

    deadline: date

    def __call__(self, application: JobApplication) -> bool:
        return application.deadline.date() == self.deadline
