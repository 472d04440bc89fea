"""Helpers shared by the per-command parsers."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable

from ..errors import (
    ParseError,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_DATE,
    MESSAGE_INVALID_DEADLINE,
    MESSAGE_INVALID_INDEX,
    MESSAGE_PAST_DEADLINE,
)
from ..model import Tag, VALID_STATUSES

# Strict ISO calendar date, no time component
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
DEADLINE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")
DEADLINE_FORMAT = "%Y-%m-%d %H:%M"

MESSAGE_EMPTY_COMPANY = "Company name cannot be blank."
MESSAGE_EMPTY_ROLE = "Role cannot be blank."
MESSAGE_INVALID_STATUS = f"Status should be one of: {', '.join(VALID_STATUSES)}"


@dataclass(frozen=True)
class Index:
    """A position in the displayed list, stored zero-based."""

    zero_based: int

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


def parse_index(one_based_index: str) -> Index:
    """
    Parse a one-based index typed by the user.

    Leading and trailing whitespace is ignored.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer.
    """
    trimmed = one_based_index.strip()
    # ASCII digits only, so signs and non-ASCII numerals are rejected
    if not trimmed.isascii() or not trimmed.isdecimal() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_raw_tokens(args: str) -> list[str]:
    """
    Split an argument string into whitespace-separated tokens.

    Args:
        args: The string to split.

    Returns:
        At least one non-empty token.

    Raises:
        ParseError: If the string is empty or only whitespace. The error
            has no descriptor; callers attach their own usage text.
    """
    tokens = args.split()
    if not tokens:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT)
    return tokens


def parse_tag(tag: str) -> Tag:
    """
    Parse a tag name, ignoring surrounding whitespace.

    Raises:
        ParseError: If the name is not a valid tag name.
    """
    trimmed = tag.strip()
    if not Tag.is_valid_tag_name(trimmed):
        raise ParseError(Tag.MESSAGE_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parse tag names into a set; exact duplicates collapse."""
    return frozenset(parse_tag(tag) for tag in tags)


def parse_date(value: str) -> date:
    """
    Parse an ISO calendar date (``yyyy-MM-dd``).

    Raises:
        ParseError: If the value is not exactly of that form or is not a
            real calendar date.
    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ParseError(MESSAGE_INVALID_DATE)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ParseError(MESSAGE_INVALID_DATE) from e


def parse_deadline(value: str) -> datetime:
    """
    Parse a deadline of the form ``yyyy-MM-dd HH:mm``.

    Raises:
        ParseError: If the value does not match that form.
    """
    trimmed = value.strip()
    if not DEADLINE_PATTERN.fullmatch(trimmed):
        raise ParseError(MESSAGE_INVALID_DEADLINE)
    try:
        return datetime.strptime(trimmed, DEADLINE_FORMAT)
    except ValueError as e:
        raise ParseError(MESSAGE_INVALID_DEADLINE) from e


def validate_deadline_not_in_past(
    deadline: datetime, now: Callable[[], datetime] = datetime.now
) -> None:
    """
    Check that ``deadline`` is not before the current time.

    Args:
        deadline: The deadline to check.
        now: Source of the current time. Tests pass a fixed clock.

    Raises:
        ParseError: If the deadline is in the past.
    """
    if deadline < now():
        raise ParseError(MESSAGE_PAST_DEADLINE)


def parse_company(company: str) -> str:
    """Parse a company name, which must not be blank."""
    trimmed = company.strip()
    if not trimmed:
        raise ParseError(MESSAGE_EMPTY_COMPANY)
    return trimmed


def parse_role(role: str) -> str:
    """Parse a role, which must not be blank."""
    trimmed = role.strip()
    if not trimmed:
        raise ParseError(MESSAGE_EMPTY_ROLE)
    return trimmed


def parse_status(status: str) -> str:
    """Parse a status into its lower-case form."""
    normalized = status.strip().lower()
    if normalized not in VALID_STATUSES:
        raise ParseError(MESSAGE_INVALID_STATUS)
    return normalized
