"""Errors raised by the backend client.

Both kinds carry a generic, user-facing message. The underlying cause
(network error, HTTP status, bad JSON) is chained and logged, not shown.
"""

from config.config import FETCH_FAILED_MSG


class DashboardError(Exception):
    """Base class for dashboard client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FetchFailure(DashboardError):
    """A collection read failed or returned a non-success status."""

    def __init__(self, message: str = FETCH_FAILED_MSG, status_code: int | None = None):
        super().__init__(message, status_code)


class SaveFailure(DashboardError):
    """A create request failed or returned a non-success status."""
