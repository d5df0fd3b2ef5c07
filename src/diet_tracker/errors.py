"""Domain errors mapped to HTTP responses by the API layer."""


class DietTrackerError(Exception):
    """Base error carrying a client-facing message and HTTP status."""

    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message}


class UnauthenticatedError(DietTrackerError):
    """Raised when a request has no session or an unknown session token."""

    http_status = 401
    default_message = "Unauthorized"


class ConflictError(DietTrackerError):
    """Raised when a unique value such as a user email is already taken."""

    http_status = 400
    default_message = "There is already a user with same email"


class NotFoundError(DietTrackerError):
    """Raised when a record is missing or owned by someone else."""

    http_status = 404
    default_message = "Resource not found"


class StoreUnavailableError(DietTrackerError):
    """Raised when the backing store fails or cannot be reached."""

    http_status = 503
    default_message = "Service unavailable"
