"""Tests for AddCommandParser and DeleteCommandParser."""

from datetime import datetime

import pytest
from job_tracker.core.command_parsers import AddCommandParser, DeleteCommandParser
from job_tracker.core.commands import AddCommand, DeleteCommand
from job_tracker.core.parser_util import Index
from job_tracker.errors import (
    ParseError,
    MESSAGE_DUPLICATE_FIELDS,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_DEADLINE,
    MESSAGE_INVALID_INDEX,
    MESSAGE_PAST_DEADLINE,
)
from job_tracker.model import JobApplication, Tag

ADD_FORMAT_ERROR = f"{MESSAGE_INVALID_COMMAND_FORMAT}\n{AddCommand.MESSAGE_USAGE}"


class TestAddCommandParser:
    """Tests for AddCommandParser."""

    @pytest.fixture
    def parser(self, fixed_now):
        """Create an AddCommandParser with a fixed clock."""
        return AddCommandParser(now=fixed_now)

    def _error(self, parser, text):
        with pytest.raises(ParseError) as exc_info:
            parser.parse(text)
        return str(exc_info.value)

    def test_required_fields_only(self, parser):
        """Company, role and deadline are enough; status defaults to applied."""
        command = parser.parse(" c/Google r/Backend Engineer d/2099-01-01 23:59")
        assert command == AddCommand(
            JobApplication("Google", "Backend Engineer", datetime(2099, 1, 1, 23, 59))
        )
        assert command.application.status == "applied"

    def test_all_fields(self, parser):
        """Status and repeated tags are parsed."""
        command = parser.parse(
            " c/Meta r/Frontend d/2099-03-15 10:00 s/Interviewing t/frontend t/react t/frontend"
        )
        application = command.application
        assert application.status == "interviewing"
        assert application.tags == frozenset({Tag("frontend"), Tag("react")})

    def test_fields_in_any_order(self, parser):
        """Prefixes may come in any order."""
        command = parser.parse(" d/2099-01-01 23:59 r/Analyst c/Stripe")
        assert command.application.company_name == "Stripe"
        assert command.application.role == "Analyst"

    @pytest.mark.parametrize(
        "text",
        [
            " r/Engineer d/2099-01-01 23:59",
            " c/Google d/2099-01-01 23:59",
            " c/Google r/Engineer",
            "oops c/Google r/Engineer d/2099-01-01 23:59",
            "",
        ],
    )
    def test_missing_field_or_preamble(self, parser, text):
        """Missing required prefixes or stray text fail with the add usage."""
        assert self._error(parser, text) == ADD_FORMAT_ERROR

    def test_duplicate_single_valued_prefix(self, parser):
        """Company may not repeat."""
        text = " c/Google c/Meta r/Engineer d/2099-01-01 23:59"
        assert self._error(parser, text) == MESSAGE_DUPLICATE_FIELDS + "c/"

    def test_invalid_tag(self, parser):
        """A bad tag keeps its own message."""
        text = " c/Google r/Engineer d/2099-01-01 23:59 t/not valid"
        assert self._error(parser, text) == Tag.MESSAGE_CONSTRAINTS

    def test_invalid_deadline(self, parser):
        """A bad deadline keeps its own message."""
        assert self._error(parser, " c/Google r/Engineer d/2099-01-01") == MESSAGE_INVALID_DEADLINE

    def test_past_deadline(self, parser):
        """A deadline before the clock's time is rejected."""
        text = " c/Google r/Engineer d/2020-01-01 09:00"
        assert self._error(parser, text) == MESSAGE_PAST_DEADLINE


class TestDeleteCommandParser:
    """Tests for DeleteCommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a DeleteCommandParser instance."""
        return DeleteCommandParser()

    def test_valid_index(self, parser):
        """A positive index is parsed to zero-based."""
        assert parser.parse(" 2 ") == DeleteCommand(Index(1))

    @pytest.mark.parametrize("text", ["0", "abc", "", "1 2"])
    def test_invalid_index(self, parser, text):
        """The index message is kept and the delete usage appended."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse(text)
        assert exc_info.value.message == MESSAGE_INVALID_INDEX
        assert exc_info.value.descriptor == DeleteCommand.MESSAGE_USAGE
