"""Tests for ParseError."""

from job_tracker.errors import ParseError, MESSAGE_INVALID_COMMAND_FORMAT, invalid_format


class TestParseError:
    """Tests for ParseError."""

    def test_message_only(self):
        """Without a descriptor, str() is the message."""
        error = ParseError("Bad input")
        assert str(error) == "Bad input"
        assert error.descriptor is None

    def test_with_descriptor_returns_new_error(self):
        """with_descriptor leaves the original untouched."""
        error = ParseError("Bad input")
        described = error.with_descriptor("usage: thing")
        assert described is not error
        assert error.descriptor is None
        assert str(described) == "Bad input\nusage: thing"

    def test_invalid_format(self):
        """invalid_format renders the standard usage message."""
        assert str(invalid_format("find KEYWORD")) == "Invalid command format! \nfind KEYWORD"
        assert invalid_format("x").message == MESSAGE_INVALID_COMMAND_FORMAT

    def test_with_descriptor_appends_to_existing(self):
        """A second descriptor goes after the first."""
        error = ParseError("Bad input", "usage: inner").with_descriptor("usage: outer")
        assert error.descriptor == "usage: inner\nusage: outer"
        assert str(error) == "Bad input\nusage: inner\nusage: outer"
