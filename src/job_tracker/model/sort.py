"""Sort fields and orders for the displayed job application list."""

from enum import Enum

from .job_application import JobApplication, VALID_STATUSES


class SortField(Enum):
    """Fields the application list can be sorted by."""

    COMPANY = "company"
    ROLE = "role"
    STATUS = "status"
    DEADLINE = "deadline"

    @classmethod
    def from_name(cls, name: str) -> "SortField":
        """
        Look up a sort field by name, ignoring case.

        Raises:
            ValueError: If no field has that name.
        """
        for sort_field in cls:
            if sort_field.value == name.lower():
                return sort_field
        valid = ", ".join(f.value for f in cls)
        raise ValueError(f"Invalid sort field: {name}. Valid fields are: {valid}")

    def key(self, application: JobApplication):
        """Return the sort key of ``application`` for this field."""
        if self is SortField.COMPANY:
            return application.company_name.lower()
        if self is SortField.ROLE:
            return application.role.lower()
        if self is SortField.STATUS:
            # Pipeline order; unknown statuses sort last
            status = application.status.lower()
            return VALID_STATUSES.index(status) if status in VALID_STATUSES else len(VALID_STATUSES)
        return application.deadline


class SortOrder(Enum):
    """Direction of a sort."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_name(cls, name: str) -> "SortOrder":
        """
        Look up a sort order by name, ignoring case.

        Raises:
            ValueError: If the name is neither ``asc`` nor ``desc``.
        """
        for order in cls:
            if order.value == name.lower():
                return order
        raise ValueError(f"Invalid sort order: {name}. Valid orders are: asc, desc")

    @property
    def reverse(self) -> bool:
        return self is SortOrder.DESC
