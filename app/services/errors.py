"""Domain errors raised by services and translated to HTTP responses by the routes."""


class ServiceError(Exception):
    """Base for errors that end the current request."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UserNotFoundError(ServiceError):
    """Raised when a username does not resolve to a stored user."""


class DuplicateUserError(ServiceError):
    """Raised on signup when the username or email is already taken."""


class InvalidCredentialsError(ServiceError):
    """Raised on login for an unknown username or a wrong password."""


class AdminTokenMismatchError(ServiceError):
    """Raised when an ADMIN signup presents the wrong admin token."""


class ProductNotFoundError(ServiceError):
    """Raised when a product does not exist or is not visible to the caller."""


class FolderNotFoundError(ServiceError):
    """Raised when a folder does not exist or is not visible to the caller."""


class InvalidSortFieldError(ServiceError):
    """Raised when a listing is sorted by a field outside the allow-list."""
