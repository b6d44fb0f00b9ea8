"""Error taxonomy for the seller dashboard."""

from typing import Any


class DashboardError(Exception):
    """Base class for every error raised by the dashboard."""


class Unauthenticated(DashboardError):
    """No session token was present when a protected view was activated."""


class NotFound(DashboardError):
    """A mutation targeted an entity missing from the local collection."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationFailure(DashboardError):
    """A required field is missing or malformed."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__(message)


class MutationInProgress(DashboardError):
    """A mutation for the same entity has not settled yet."""

    def __init__(self, entity_id: Any):
        self.entity_id = entity_id
        super().__init__(f"An update for {entity_id} is still in progress")


class ApiError(DashboardError):
    """Any failed call to the remote API."""


class HttpError(ApiError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, body: Any = None):
        self.status = status
        self.body = body
        super().__init__(f"HTTP {status}: {self.server_message or body!r}")

    @property
    def server_message(self) -> str | None:
        """The ``message`` (or ``error``) field of the response body, if any."""
        if isinstance(self.body, dict):
            for key in ("message", "error"):
                value = self.body.get(key)
                if isinstance(value, str) and value:
                    return value
        return None


class SessionExpired(HttpError):
    """The API answered 401; the session token has been cleared."""

    def __init__(self, body: Any = None):
        super().__init__(401, body)


class NetworkError(ApiError):
    """The request never produced a response (connection, DNS, protocol failure)."""


class InvalidResponse(ApiError):
    """A 2xx response whose body does not match the expected schema."""


def describe_failure(error: BaseException, default: str, include_exception_text: bool = False) -> str:
    """
    Pick the user-facing message for a failed call.

    Args:
        error: The exception raised by the call
        default: Generic message when the server gave none
        include_exception_text: Fall back to ``str(error)`` before ``default``

    Returns:
        Message to show in a notification
    """
    if isinstance(error, HttpError) and error.server_message:
        return error.server_message
    if include_exception_text and str(error):
        return str(error)
    return default
