"""Tests for SortField and SortOrder."""

import pytest
from job_tracker.model import SortField, SortOrder


class TestSortField:
    """Tests for SortField."""

    @pytest.mark.parametrize("name,expected", [
        ("company", SortField.COMPANY),
        ("ROLE", SortField.ROLE),
        ("Status", SortField.STATUS),
        ("deadline", SortField.DEADLINE),
    ])
    def test_from_name(self, name, expected):
        """Names are looked up ignoring case."""
        assert SortField.from_name(name) == expected

    def test_unknown_name(self):
        """Unknown names raise ValueError listing the valid fields."""
        with pytest.raises(ValueError) as exc_info:
            SortField.from_name("salary")
        assert str(exc_info.value) == (
            "Invalid sort field: salary. Valid fields are: company, role, status, deadline"
        )

    def test_status_key_follows_pipeline(self, sample_applications):
        """Status sorts in pipeline order, not alphabetically."""
        keys = [SortField.STATUS.key(a) for a in sample_applications]
        assert keys == sorted(keys)


class TestSortOrder:
    """Tests for SortOrder."""

    def test_from_name(self):
        """asc and desc are recognized."""
        assert SortOrder.from_name("asc") == SortOrder.ASC
        assert SortOrder.from_name("DESC") == SortOrder.DESC

    def test_unknown_name(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError) as exc_info:
            SortOrder.from_name("sideways")
        assert str(exc_info.value) == "Invalid sort order: sideways. Valid orders are: asc, desc"

    def test_reverse(self):
        """Only descending reverses."""
        assert SortOrder.DESC.reverse is True
        assert SortOrder.ASC.reverse is False
