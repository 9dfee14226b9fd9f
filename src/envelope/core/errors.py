"""Error taxonomy shared by the repository, service and API layers."""

from fastapi import status


class EnvelopeError(Exception):
    """Base class for errors that map onto an HTTP status code.

    ``message`` is safe to show to clients; internal detail belongs in logs.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(EnvelopeError):
    """Missing or malformed request input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class ConflictError(EnvelopeError):
    """A unique key (``share_hash``) already exists in the store."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Duplicate post"


class StorageError(EnvelopeError):
    """Any other failure talking to the database."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"


class StartupError(Exception):
    """The process cannot start serving (database unreachable, bad config)."""
