"""List renderer for the displayed job applications."""

from ..model import JobApplication

DEADLINE_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


class ListRenderer:
    """Renders job applications as a numbered list."""

    def render_application(self, application: JobApplication) -> str:
        """Render a single application on one line."""
        line = (
            f"{application.company_name} - {application.role} "
            f"[{application.status}] due {application.deadline.strftime(DEADLINE_DISPLAY_FORMAT)}"
        )
        if application.tags:
            tags = ", ".join(sorted(tag.name for tag in application.tags))
            line = f"{line} {{{tags}}}"
        return line

    def render(
        self,
        applications: list[JobApplication],
        max_entries: int | None = None,
    ) -> str:
        """
        Render applications as a numbered list.

        Applications are rendered in the order given; numbering matches
        the indices accepted by ``delete``.

        Args:
            applications: Applications to render, already filtered and sorted.
            max_entries: Maximum entries to show (None for all).

        Returns:
            Formatted list string.
        """
        if not applications:
            return "(no applications)"

        truncated = False
        if max_entries is not None and len(applications) > max_entries:
            applications = applications[:max_entries]
            truncated = True

        lines = [
            f"{i}. {self.render_application(application)}"
            for i, application in enumerate(applications, 1)
        ]

        if truncated:
            lines.append("(more...)")

        return "\n".join(lines)
