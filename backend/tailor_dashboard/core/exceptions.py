"""Error taxonomy shared by the store, the services and the HTTP layer.

Each error carries the HTTP status it maps to, so route handlers never
translate errors by hand: the exception handlers registered in
``tailor_dashboard.main`` render every ``DashboardError`` as
``{"error": message}`` with that status.
"""

from fastapi import status


class DashboardError(Exception):
    """Base class for all dashboard errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(DashboardError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(DashboardError):
    """No matching customer, order or order item."""

    status_code = status.HTTP_404_NOT_FOUND


class Internal(DashboardError):
    """Unexpected failure in the store or the generator."""
