"""API error taxonomy. Every error reaches the client as {"message": ...} plus a status code."""


class ApiError(Exception):
    """Base class for errors that map to a client-visible status and message."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ApiError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid input"


class UnauthenticatedError(ApiError):
    status_code = 401
    default_message = "Authentication required"


class InvalidCredentialsError(UnauthenticatedError):
    """Unknown username or wrong password; one message for both."""

    default_message = "Invalid username or password"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Admin access required"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    """Duplicate username. Reported as 400 to keep the public contract."""

    status_code = 400
    default_message = "User already exists"


class InternalError(ApiError):
    status_code = 500
