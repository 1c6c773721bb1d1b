"""Domain errors raised by the service layer.

Services raise ``ValueError`` for rule violations the caller can fix (HTTP 400).
The subclasses below let endpoints pick a more precise status code while
still being caught by a plain ``except ValueError``.
"""


class NotFoundError(ValueError):
    """A referenced row does not exist (HTTP 404)."""


class ConflictError(ValueError):
    """The request collides with existing data (HTTP 409)."""


class AlreadyVotedError(ValueError):
    """The user already has a vote on this poll (HTTP 400)."""

    def __init__(self, message: str = "You have already voted on this poll"):
        super().__init__(message)


def status_code_for(error: ValueError) -> int:
    """Map a service error to the HTTP status code the API reports."""
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, ConflictError):
        return 409
    return 400
