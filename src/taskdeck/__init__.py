"""taskdeck - a single-screen prioritized task list."""

__version__ = "0.1.0"
