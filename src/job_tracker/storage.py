"""Read-only loader for job applications stored as YAML."""

import logging
from datetime import date, datetime, time
from pathlib import Path

import yaml

from .errors import ParseError
from .model import DEFAULT_STATUS, JobApplication
from .core.parser_util import (
    parse_company,
    parse_deadline,
    parse_role,
    parse_status,
    parse_tags,
)

logger = logging.getLogger(__name__)

# Deadline used when the file gives a date without a time
END_OF_DAY = time(23, 59)


def load_applications(path: str | Path) -> list[JobApplication]:
    """
    Load job applications from a YAML file.

    The file holds a top-level ``applications`` list; each item has
    ``company``, ``role`` and ``deadline`` keys and optional ``status``
    and ``tags``. Deadlines in the past are allowed here.

    Args:
        path: Path to the YAML file.

    Returns:
        The applications in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not shaped as above, or an entry is
            missing a field or has an invalid value.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Applications file not found: {path}")

    with open(file_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping with an 'applications' list in {path}")

    entries = data.get("applications") or []
    if not isinstance(entries, list):
        raise ValueError(f"Expected 'applications' to be a list in {path}")

    applications = []
    for number, entry in enumerate(entries, 1):
        try:
            applications.append(_to_application(entry))
        except (KeyError, TypeError, ParseError) as e:
            raise ValueError(f"Invalid application #{number} in {path}: {e}") from e

    logger.info(f"Loaded {len(applications)} application(s) from {file_path}")
    return applications


def _to_application(entry: dict) -> JobApplication:
    return JobApplication(
        company_name=parse_company(str(entry["company"])),
        role=parse_role(str(entry["role"])),
        deadline=_to_deadline(entry["deadline"]),
        status=parse_status(str(entry.get("status", DEFAULT_STATUS))),
        tags=parse_tags(str(tag) for tag in entry.get("tags") or []),
    )


def _to_deadline(value) -> datetime:
    # PyYAML turns timestamps with seconds and bare dates into Python objects
    if isinstance(value, datetime):
        # Offset timestamps become naive local time like every other deadline
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, END_OF_DAY)
    return parse_deadline(str(value))
