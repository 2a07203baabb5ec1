"""
Error taxonomy for watchlist operations.

Every failure an operation can report is one of four kinds. The API layer
maps each kind to an HTTP status; nothing else is allowed to escape an
operation.
"""


class WatchlistError(Exception):
    """Base class for all operation failures."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WatchlistError):
    """Malformed or missing input."""

    kind = "validation_error"


class Conflict(WatchlistError):
    """Uniqueness violation (email already registered)."""

    kind = "conflict"


class NotFound(WatchlistError):
    """Referenced id or email does not exist."""

    kind = "not_found"


class Unauthorized(WatchlistError):
    """No active session, stale session, or bad credential."""

    kind = "unauthorized"
