"""Domain errors raised by services and repositories.

Nothing in here knows about HTTP: ``film_library.handlers.responses`` maps
each class onto a status code and a JSON envelope.
"""


class FilmLibraryError(Exception):
    """Base class for recoverable domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(FilmLibraryError):
    """A targeted record or a referenced record does not exist."""


class AlreadyExistsError(FilmLibraryError):
    """A unique constraint was violated."""


class ConstraintError(FilmLibraryError):
    """Persistence rejected a value through a check or reference constraint."""


class InvalidValueError(FilmLibraryError):
    """A single field failed its rule in a targeted update."""


class AuthenticationError(FilmLibraryError):
    """The request carries no usable credential."""


class AuthorizationError(FilmLibraryError):
    """The principal is not allowed to perform the request."""


class InvalidCredentialsError(FilmLibraryError):
    """Login and password do not match a stored user."""
