"""Domain model for job applications."""

from .job_application import JobApplication, Tag, VALID_STATUSES, DEFAULT_STATUS
from .predicates import (
    ApplicationPredicate,
    ShowAllPredicate,
    PREDICATE_SHOW_ALL_APPLICATIONS,
    NameContainsKeywordsPredicate,
    TagsContainKeywordPredicate,
    RoleContainsKeywordPredicate,
    StatusMatchesKeywordPredicate,
    DeadlinePredicate,
)
from .sort import SortField, SortOrder
from .application_list import ApplicationList

__all__ = [
    "JobApplication",
    "Tag",
    "VALID_STATUSES",
    "DEFAULT_STATUS",
    "ApplicationPredicate",
    "ShowAllPredicate",
    "PREDICATE_SHOW_ALL_APPLICATIONS",
    "NameContainsKeywordsPredicate",
    "TagsContainKeywordPredicate",
    "RoleContainsKeywordPredicate",
    "StatusMatchesKeywordPredicate",
    "DeadlinePredicate",
    "SortField",
    "SortOrder",
    "ApplicationList",
]
