"""Custom exceptions for Thoughtbox.

Every error raised by the service and gate layers derives from
ThoughtboxError. Flask error handlers in main.py translate them into the
``{"response": <message>, "success": false}`` envelope, so the ``message``
of each exception is what the client sees.
"""


class ThoughtboxError(Exception):
    """Base exception for all Thoughtbox errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ThoughtboxError):
    """Request data is malformed or violates an input policy."""

    status_code = 400


class ConflictError(ThoughtboxError):
    """A unique field (the username) is already taken."""

    status_code = 400


class AuthenticationError(ThoughtboxError):
    """Username/password pair did not match a stored identity.

    Raised with the same message whether the username is unknown or the
    password is wrong.
    """

    status_code = 404


class UnauthorizedError(ThoughtboxError):
    """No access token, or a token that matches no identity."""

    status_code = 401


class StoreLookupError(ThoughtboxError):
    """The access token could not be checked because the store failed."""

    status_code = 404


class DatabaseError(ThoughtboxError):
    """Unexpected SQLite failure."""

    status_code = 500
