"""Domain-level exception hierarchy."""


class AppError(Exception):
    """Base exception for errors that surface as an HTTP error response."""

    def __init__(self, message="Application error") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Raised when input is malformed or violates a data rule."""

    def __init__(self, message="Bad Request") -> None:
        super().__init__(message)


class UnauthorizedError(AppError):
    """Raised when the caller is not allowed to perform an operation."""

    def __init__(self, message="Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource cannot be located."""

    def __init__(self, message="Not Found") -> None:
        super().__init__(message)
