"""
Error types for the game backend.

Every game error carries the HTTP status code the serverless functions report
it with, so the exception handlers can translate it without a lookup table.
"""

from __future__ import annotations


class GameError(Exception):
    """Base exception for rule violations and missing game rows.

    Common status codes:
    - 400: Bad Request (default) - invalid input or a rule violation
    - 401: Unauthorized - missing or invalid bearer token
    - 403: Forbidden - caller may not act on the row
    - 404: Not Found - referenced row does not exist
    - 409: Conflict - booking collides with an existing one
    - 429: Too Many Requests - action repeated faster than its rate limit
    """

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        """
        Initialize a GameError.

        Args:
            message (str): A human-readable error message.
            status_code (int): HTTP status code overriding the class default.
        """
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(GameError):
    """Input failed a game rule (amount must be positive, already claimed, ...)."""

    status_code = 400


class AuthenticationError(GameError):
    """Bearer token missing, malformed or not signed with the project secret."""

    status_code = 401


class ForbiddenError(GameError):
    status_code = 403


class NotFoundError(GameError):
    status_code = 404


class ConflictError(GameError):
    """A booking overlaps an existing one, or an event was already recorded."""

    status_code = 409


class RateLimitError(GameError):
    status_code = 429
