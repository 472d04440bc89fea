"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from job_tracker.model import ApplicationList, JobApplication, Tag

FIXED_NOW = datetime(2026, 6, 1, 12, 0)


@pytest.fixture
def fixed_now():
    """Clock that always returns the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_applications():
    """Sample job applications for testing."""
    return [
        JobApplication(
            company_name="Google",
            role="Backend Engineer",
            deadline=datetime(2099, 1, 1, 10, 0),
            status="applied",
            tags={Tag("backend"), Tag("python")},
        ),
        JobApplication(
            company_name="Meta Platforms",
            role="Frontend Engineer",
            deadline=datetime(2099, 3, 15, 23, 59),
            status="interviewing",
            tags={Tag("frontend")},
        ),
        JobApplication(
            company_name="Stripe",
            role="Data Analyst",
            deadline=datetime(2098, 12, 31, 9, 30),
            status="offered",
        ),
    ]


@pytest.fixture
def application_list(sample_applications):
    """ApplicationList holding the sample applications."""
    return ApplicationList(sample_applications)
