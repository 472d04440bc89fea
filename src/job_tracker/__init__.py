"""Job Tracker - parse and run job application tracking commands."""

__version__ = "0.1.0"
