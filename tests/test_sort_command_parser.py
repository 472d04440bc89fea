"""Tests for SortCommandParser."""

import pytest
from job_tracker.core.command_parsers import SortCommandParser
from job_tracker.core.commands import SortCommand
from job_tracker.errors import ParseError, MESSAGE_INVALID_COMMAND_FORMAT
from job_tracker.model import SortField, SortOrder


class TestSortCommandParser:
    """Tests for SortCommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a SortCommandParser instance."""
        return SortCommandParser()

    def test_field_only_defaults_to_ascending(self, parser):
        """Order defaults to ascending."""
        assert parser.parse("deadline") == SortCommand(SortField.DEADLINE, SortOrder.ASC)

    def test_field_and_order(self, parser):
        """Field and order are both parsed."""
        assert parser.parse("company desc") == SortCommand(SortField.COMPANY, SortOrder.DESC)

    def test_case_insensitive(self, parser):
        """Names are matched ignoring case."""
        assert parser.parse("  Role   ASC ") == SortCommand(SortField.ROLE, SortOrder.ASC)

    def test_trailing_tokens_ignored(self, parser):
        """Tokens after the order are ignored."""
        assert parser.parse("status desc whatever else") == SortCommand(
            SortField.STATUS, SortOrder.DESC
        )

    def test_unknown_field(self, parser):
        """An unknown field fails with the field lookup's message."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse("bogus")
        assert str(exc_info.value).startswith("Invalid sort field: bogus")
        assert exc_info.value.descriptor is None

    def test_unknown_order(self, parser):
        """An unknown order fails with the order lookup's message."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse("company sideways")
        assert str(exc_info.value).startswith("Invalid sort order: sideways")

    def test_unknown_field_checked_before_order(self, parser):
        """The field is validated first."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse("bogus sideways")
        assert "sort field" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_input(self, parser, text):
        """Blank input fails with the sort usage attached."""
        with pytest.raises(ParseError) as exc_info:
            parser.parse(text)
        assert str(exc_info.value) == f"{MESSAGE_INVALID_COMMAND_FORMAT}\n{SortCommand.MESSAGE_USAGE}"
