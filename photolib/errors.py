"""Error taxonomy shared by all application services.

Each error carries the HTTP status class the routing layer answers with.
"""


class PhotoLibraryError(Exception):
    """Base exception for photo library operations."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PhotoLibraryError):
    """User, library, album or photo does not exist."""
    status_code = 404


class UnauthorizedError(PhotoLibraryError):
    """Actor is missing or lacks the privilege for the operation."""
    status_code = 401


class InvalidTokenError(UnauthorizedError):
    """Session token has a bad signature, is expired or malformed."""
    pass


class ValidationError(PhotoLibraryError):
    """Malformed input: bad id, wrong multipart shape, bad size."""
    status_code = 400


class ConflictError(PhotoLibraryError):
    """Duplicate username, library id or album name."""
    status_code = 400


class FormatError(PhotoLibraryError):
    """Stored credential hash is malformed (data corruption)."""
    status_code = 500
