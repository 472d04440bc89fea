"""Job application entity and its tags."""

import re
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Tag:
    """A label attached to a job application."""

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+")

    name: str

    @classmethod
    def is_valid_tag_name(cls, name: str) -> bool:
        """Check whether ``name`` is a non-empty alphanumeric word."""
        return cls.VALIDATION_REGEX.fullmatch(name) is not None

    def __str__(self) -> str:
        return f"[{self.name}]"


# Statuses accepted when creating an application, in pipeline order
VALID_STATUSES = ("applied", "interviewing", "offered", "accepted", "rejected")
DEFAULT_STATUS = "applied"


@dataclass(frozen=True)
class JobApplication:
    """A single job application (immutable).

    Attributes:
        company_name: Company applied to.
        role: Position applied for.
        deadline: Next deadline for the application.
        status: Where the application is in the pipeline.
        tags: Free-form labels.
    """

    company_name: str
    role: str
    deadline: datetime
    status: str = DEFAULT_STATUS
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __init__(
        self,
        company_name: str,
        role: str,
        deadline: datetime,
        status: str = DEFAULT_STATUS,
        tags: set[Tag] | frozenset[Tag] | None = None,
    ):
        object.__setattr__(self, "company_name", company_name)
        object.__setattr__(self, "role", role)
        object.__setattr__(self, "deadline", deadline)
        object.__setattr__(self, "status", status)
        object.__setattr__(self, "tags", frozenset(tags) if tags else frozenset())

    def is_same_application(self, other: "JobApplication") -> bool:
        """Two applications are the same if company and role match, ignoring case."""
        return (
            self.company_name.lower() == other.company_name.lower()
            and self.role.lower() == other.role.lower()
        )
