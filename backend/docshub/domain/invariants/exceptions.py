class DomainError(Exception):
    """Base class for errors surfaced to API clients as a readable message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvariantViolation(DomainError):
    status_code = 400


class AuthenticationError(DomainError):
    status_code = 401


class PermissionDenied(DomainError):
    status_code = 403


class NotFound(DomainError):
    status_code = 404


class SlugConflict(DomainError):
    """Raised when a unique constraint rejects a slug or membership row."""

    status_code = 409


class VersionConflict(DomainError):
    status_code = 409

    def __init__(self, message: str, *, current_version: int | None = None):
        super().__init__(message)
        self.current_version = current_version
