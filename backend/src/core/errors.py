"""
API error types.

Each error carries the HTTP status and the client-facing message. They are
turned into `{"error": {"message": ...}}` responses by the handlers in
api/error_handlers.py.
"""


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_response(self) -> dict:
        """Build the JSON body returned to the client."""
        return {"error": {"message": self.message}}


class BookmarkValidationError(ApiError):
    """Raised when a submitted bookmark fails a field rule."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class BookmarkNotFoundError(ApiError):
    """Raised when no bookmark exists for the requested id."""

    status_code = 404

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__("Bookmark not found")


class UnauthorizedError(ApiError):
    """
    Raised when the bearer token is missing or wrong.

    Uses 404 rather than 401 so unauthenticated callers cannot tell which
    endpoints exist.
    """

    status_code = 404

    def __init__(self) -> None:
        super().__init__("Unauthorized request")
